from .capabilities import DesiredCapabilities
from .dialect import Dialect

BROWSER_ABBREVIATIONS = {
    "IE": "INTERNETEXPLORER",
    "FF": "FIREFOX",
    "CH": "CHROME"
}


class Config(object):

    def __init__(self, platform, browser, version, desired_capabilities=None,
                 dialect=Dialect.W3C):
        """
        Describes which browser to ask for, on which platform, in which
        version, and which dialect the remote end speaks.

        :param platform: The platform, e.g. ``"Linux"``.
        :param browser: The browser, e.g. ``"CHROME"``. The abbreviations
                        ``CH``, ``FF`` and ``IE`` are accepted.
        :param version: The browser version.
        :param desired_capabilities: Capabilities overriding those of the
                                     browser preset. The dictionary is
                                     copied.
        :type desired_capabilities: :class:`dict`
        :param dialect: The dialect spoken by the remote end. Anything
                        :meth:`Dialect.coerce` accepts.
        :raises ValueError: When ``dialect`` is not a dialect.
        """
        browser = browser.upper()

        self.platform = platform.upper()
        self.browser = BROWSER_ABBREVIATIONS.get(browser, browser)
        self.version = version
        self.dialect = Dialect.coerce(dialect)
        self.desired_capabilities = dict(desired_capabilities or {})

    def make_desired_capabilities(self):
        """
        :returns: The capabilities of the browser preset, updated with
                  the capabilities of this configuration, the platform and
                  the version.
        :rtype: :class:`wirecompat.capabilities.DesiredCapabilities`
        :raises ValueError: When there is no preset for the browser.
        """
        ret = DesiredCapabilities.preset(self.browser)
        for (name, value) in self.desired_capabilities.items():
            ret.set_capability(name, value)
        ret.platform = self.platform
        ret.version = self.version
        return ret

    def make_capabilities(self, dialect=None):
        """
        :param dialect: Overrides the dialect of this configuration.
        :returns: The capability object to send when creating a session.
        :rtype: :class:`dict`
        """
        return self.make_desired_capabilities().for_dialect(
            self.dialect if dialect is None else dialect)

    def __str__(self):
        return "Configured for " + \
            ", ".join((self.platform, self.browser, self.version,
                       self.dialect.value.upper()))
