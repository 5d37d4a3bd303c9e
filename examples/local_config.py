from wirecompat import Config

#
# This file gives you an overview of what a wirecompat configuration
# file can contain. Load it with ``wirecompat.Builder``.
#

caps = {
    "pageLoadStrategy": "eager",
    # Kept as-is when talking to a legacy remote end, moved to
    # goog:chromeOptions when talking to a W3C remote end.
    "chromeOptions": {
        "args": ["--headless"]
    },
}

# ``builder_args`` holds the options passed to the Builder.
version = builder_args.get("version", "67")

CONFIG = Config("Linux", "CHROME", version, caps, dialect="w3c")

# Overrides the dialect of CONFIG. Set to "legacy" for a JsonWire
# remote end.
DIALECT = builder_args.get("dialect")
