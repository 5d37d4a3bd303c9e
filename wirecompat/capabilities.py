"""
Capabilities as requested by a client and as reported by a remote end.
"""
from .dialect import Dialect
from .translator import LEGACY_TO_W3C, to_w3c_compatible

BROWSER_NAME = "browserName"
VERSION = "version"
PLATFORM = "platform"
JAVASCRIPT_ENABLED = "javascriptEnabled"

HTMLUNIT = "htmlunit"

# name: (browserName, platform, extra capabilities)
PRESETS = {
    "android": ("android", "ANDROID", {}),
    "chrome": ("chrome", "ANY", {}),
    "firefox": ("firefox", "ANY", {}),
    "htmlunit": (HTMLUNIT, "ANY", {}),
    "htmlunitwithjs": (HTMLUNIT, "ANY", {JAVASCRIPT_ENABLED: True}),
    "microsoftedge": ("MicrosoftEdge", "WINDOWS", {}),
    "internetexplorer": ("internet explorer", "WINDOWS", {}),
    "iphone": ("iPhone", "MAC", {}),
    "ipad": ("iPad", "MAC", {}),
    "opera": ("opera", "ANY", {}),
    "safari": ("safari", "ANY", {}),
    "phantomjs": ("phantomjs", "ANY", {}),
}


class DesiredCapabilities(object):

    def __init__(self, capabilities=None):
        """
        Capabilities requested when creating a session, held in the
        legacy vocabulary. Use :meth:`for_dialect` to get what must go on
        the wire.

        :param capabilities: The initial capabilities. The dictionary is
                             copied.
        :type capabilities: :class:`dict`
        """
        self._capabilities = dict(capabilities or {})

    @classmethod
    def preset(cls, name):
        """
        :param name: The name of a browser, case-insensitive, as found in
                     :data:`PRESETS`. Spaces, dashes and underscores are
                     ignored, so ``"internet explorer"`` and
                     ``"htmlunit-with-js"`` work.
        :returns: Capabilities for the browser.
        :raises ValueError: When there is no preset for the browser.
        """
        key = name.lower()
        for char in " -_":
            key = key.replace(char, "")
        try:
            browser, platform, extra = PRESETS[key]
        except KeyError:
            raise ValueError("no preset for browser: " + name) from None

        ret = cls(extra)
        ret.browser_name = browser
        ret.platform = platform
        return ret

    def get_capability(self, name, default=None):
        return self._capabilities.get(name, default)

    def set_capability(self, name, value):
        self._capabilities[name] = value
        return self

    @property
    def browser_name(self):
        return self.get_capability(BROWSER_NAME, "")

    @browser_name.setter
    def browser_name(self, value):
        self.set_capability(BROWSER_NAME, value)

    @property
    def version(self):
        return self.get_capability(VERSION, "")

    @version.setter
    def version(self, value):
        self.set_capability(VERSION, value)

    @property
    def platform(self):
        return self.get_capability(PLATFORM, "")

    @platform.setter
    def platform(self, value):
        self.set_capability(PLATFORM, value)

    def is_javascript_enabled(self):
        return bool(self.get_capability(JAVASCRIPT_ENABLED, False))

    def set_javascript_enabled(self, enabled):
        """
        :raises ValueError: When trying to disable JavaScript on a browser
                            other than HtmlUnit. Only HtmlUnit can run
                            without JavaScript.
        """
        if self.browser_name != HTMLUNIT and not enabled:
            raise ValueError("isJavascriptEnabled() is a htmlunit-only "
                             "option")
        return self.set_capability(JAVASCRIPT_ENABLED, enabled)

    def to_dict(self):
        return dict(self._capabilities)

    def to_w3c_compatible_dict(self):
        return to_w3c_compatible(self._capabilities)

    def for_dialect(self, dialect):
        """
        :param dialect: The dialect of the remote end.
        :returns: The capabilities to send to the remote end.
        :rtype: :class:`dict`
        """
        if Dialect.coerce(dialect) is Dialect.W3C:
            return self.to_w3c_compatible_dict()
        return self.to_dict()

    def __eq__(self, other):
        return isinstance(other, DesiredCapabilities) and \
            self._capabilities == other._capabilities

    def __repr__(self):
        return "DesiredCapabilities({0!r})".format(self._capabilities)


class NormalizedCapabilities(dict):

    def __init__(self, caps):
        """
        Remote ends report the capabilities of a session in their own
        dialect. A JsonWire remote end reports the browser version under
        ``version`` and the platform under ``platform``, whereas a W3C
        remote end uses ``browserVersion`` and ``platformName``.

        Instances of this class present a normalized view of the
        capabilities. Instances should be treated as read-only. They
        contain the same fields as the capabilities passed in the
        constructor, except that the legacy names are replaced with the
        W3C names:

        * ``version`` is renamed ``browserVersion``

        * ``platform`` is renamed ``platformName``

        * ``acceptSslCerts`` is renamed ``acceptInsecureCerts``

        When both names are present, the W3C one is kept.

        Note that this class is meant to be used to normalize
        capabilities **read** from a remote end. Use
        :func:`wirecompat.translator.to_w3c_compatible` for the
        capabilities sent when creating a session.

        :param caps: The original capabilities from which to create
                     a normalized capabilities dictionary.
        """
        # Keep a copy for debugging purposes.
        self.caps = caps

        newcaps = dict(caps)
        for (legacy, w3c) in LEGACY_TO_W3C.items():
            if legacy == w3c or legacy not in newcaps:
                continue
            value = newcaps.pop(legacy)
            newcaps.setdefault(w3c, value)

        super(NormalizedCapabilities, self).__init__(newcaps)
