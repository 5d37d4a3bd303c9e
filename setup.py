from setuptools import setup, find_packages

version = open('VERSION').read().strip()

setup(
    name="wirecompat",
    version=version,
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "selenium>=4",
    ],
    extras_require={
        "test": ["pytest"],
    },
    author="Louis-Dominique Dubeau",
    author_email="ldd@lddubeau.com",
    description="Translation between the JsonWire and W3C WebDriver "
    "dialects.",
    license="MPL 2.0",
    keywords=["selenium", "webdriver", "w3c", "jsonwire"],
    url="https://github.com/mangalam-research/wirecompat",
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Operating System :: POSIX",
        "Topic :: Software Development :: Quality Assurance"
    ],
)
