"""
Conversion of capabilities to the strict W3C format.

Legacy (JsonWire) servers accept pretty much anything in
``desiredCapabilities``. W3C servers reject a new session request as
soon as ``alwaysMatch`` contains a capability they do not know. The
functions here take a capability set written with either vocabulary and
produce an object that a W3C server will accept:

* legacy names are renamed to their W3C equivalents,

* the ``"ANY"`` platform is removed since it means nothing to a W3C
  server,

* vendor extensions (names containing a colon) are kept as they are,

* the legacy browser options (``chromeOptions``, ``firefox_profile``)
  are moved into the corresponding vendor extension, merging with what
  is already there,

* everything else is dropped.
"""
import logging
from collections.abc import Mapping

from .values import CapabilityValue, Kind

logger = logging.getLogger(__name__)

CHROME_OPTIONS = "chromeOptions"
CHROME_OPTIONS_W3C = "goog:chromeOptions"
FIREFOX_PROFILE = "firefox_profile"
FIREFOX_OPTIONS_W3C = "moz:firefoxOptions"

ANY_PLATFORM = "ANY"

LEGACY_TO_W3C = {
    "browserName": "browserName",
    "version": "browserVersion",
    "platform": "platformName",
    "acceptSslCerts": "acceptInsecureCerts",
}

W3C_CAPABILITIES = frozenset((
    "browserName",
    "browserVersion",
    "platformName",
    "acceptInsecureCerts",
    "pageLoadStrategy",
    "proxy",
    "setWindowRect",
    "timeouts",
    "strictFileInteractability",
    "unhandledPromptBehavior",
))

# Legacy capabilities that have no W3C counterpart. They would be dropped
# anyway as unknown names; listing them lets us say why in the logs.
OBSOLETE_CAPABILITIES = frozenset((
    "applicationCacheEnabled",
    "browserConnectionEnabled",
    "cssSelectorsEnabled",
    "databaseEnabled",
    "handlesAlerts",
    "javascriptEnabled",
    "locationContextEnabled",
    "nativeEvents",
    "rotatable",
    "takesScreenshot",
    "webStorageEnabled",
))

_PLATFORM_KEYS = ("platform", "platformName")


def is_vendor_extension(key):
    return ":" in key


def _is_any_platform(key, value):
    if value.kind is not Kind.STRING:
        return False
    # A W3C "any" is an actual platform name, not the legacy sentinel.
    if key == "platform":
        return value.value.upper() == ANY_PLATFORM
    return value.value == ANY_PLATFORM


def merge_chrome_options(legacy, explicit):
    """
    Merge a legacy ``chromeOptions`` object into an explicit
    ``goog:chromeOptions`` object.

    Fields are taken from ``legacy`` first, in order, followed by the
    fields only ``explicit`` has. When both have a field, lists are
    concatenated (legacy items first), objects are merged the same way,
    and anything else takes the explicit value.

    :param legacy: The legacy options, an object.
    :type legacy: :class:`CapabilityValue`
    :param explicit: The W3C options, an object.
    :type explicit: :class:`CapabilityValue`
    :returns: The merged object.
    :rtype: :class:`CapabilityValue`
    """
    merged = []
    for (key, value) in legacy.items():
        other = explicit.get(key)
        if other is None:
            merged.append((key, value))
        elif value.is_list and other.is_list:
            merged.append((key, CapabilityValue(Kind.LIST,
                                                value.value + other.value)))
        elif value.is_object and other.is_object:
            merged.append((key, merge_chrome_options(value, other)))
        else:
            merged.append((key, other))

    merged.extend((key, value) for (key, value) in explicit.items()
                  if key not in legacy)

    return CapabilityValue.object(merged)


def merge_firefox_profile(profile, explicit):
    """
    Put a legacy Firefox profile into a ``moz:firefoxOptions`` object.

    :param profile: The encoded profile.
    :type profile: :class:`CapabilityValue`
    :param explicit: The W3C options, an object, or ``None`` if there
                     are none.
    :type explicit: :class:`CapabilityValue`
    :returns: The options. A profile already present in ``explicit`` is
              never replaced.
    :rtype: :class:`CapabilityValue`
    """
    if explicit is None:
        return CapabilityValue.object([("profile", profile)])

    if "profile" in explicit:
        logger.debug("%s ignored: %s already sets a profile",
                     FIREFOX_PROFILE, FIREFOX_OPTIONS_W3C)
        return explicit

    return CapabilityValue.object([("profile", profile)] +
                                  list(explicit.items()))


def _encoded_profile(value):
    # A FirefoxProfile object knows how to encode itself.
    encoded = getattr(value, "encoded", None)
    return encoded if encoded is not None else value


def translate(capabilities):
    """
    Convert a capability set to the strict W3C format.

    This never fails: capabilities that cannot be expressed are
    dropped.

    :param capabilities: The capability set, an object.
    :type capabilities: :class:`CapabilityValue`
    :returns: The W3C capability set.
    :rtype: :class:`CapabilityValue`
    """
    if not capabilities.is_object:
        raise TypeError("a capability set must be an object")

    explicit = {}
    renamed = {}
    chrome_options = None
    firefox_profile = None

    for (key, value) in capabilities.items():
        if key == CHROME_OPTIONS:
            chrome_options = value
        elif key == FIREFOX_PROFILE:
            firefox_profile = value
        elif key in _PLATFORM_KEYS and _is_any_platform(key, value):
            logger.debug("%s dropped: the %s platform means nothing to a "
                         "W3C server", key, ANY_PLATFORM)
        elif is_vendor_extension(key) or key in W3C_CAPABILITIES:
            explicit[key] = value
        elif key in LEGACY_TO_W3C:
            if key == "platform" and value.kind is Kind.STRING:
                value = CapabilityValue(Kind.STRING, value.value.lower())
            renamed[LEGACY_TO_W3C[key]] = value
        elif key in OBSOLETE_CAPABILITIES:
            logger.debug("%s dropped: no W3C equivalent", key)
        else:
            logger.debug("%s dropped: not a W3C capability", key)

    for key in renamed.keys() & explicit.keys():
        logger.debug("legacy capability for %s ignored in favor of the "
                     "W3C one", key)

    result = dict(renamed)
    result.update(explicit)

    if chrome_options is not None:
        current = result.get(CHROME_OPTIONS_W3C)
        if not chrome_options.is_object:
            logger.debug("%s dropped: not an object", CHROME_OPTIONS)
        elif current is None:
            result[CHROME_OPTIONS_W3C] = chrome_options
        elif current.is_object:
            result[CHROME_OPTIONS_W3C] = \
                merge_chrome_options(chrome_options, current)
        else:
            logger.debug("%s dropped: %s is not an object", CHROME_OPTIONS,
                         CHROME_OPTIONS_W3C)

    if firefox_profile is not None:
        current = result.get(FIREFOX_OPTIONS_W3C)
        if current is None or current.is_object:
            result[FIREFOX_OPTIONS_W3C] = \
                merge_firefox_profile(firefox_profile, current)
        else:
            logger.debug("%s dropped: %s is not an object", FIREFOX_PROFILE,
                         FIREFOX_OPTIONS_W3C)

    return CapabilityValue.object(result.items())


def to_w3c_compatible(capabilities):
    """
    Convenience wrapper around :func:`translate` for plain dictionaries.

    :param capabilities: The capabilities.
    :type capabilities: :class:`dict` or any mapping
    :returns: The W3C capabilities.
    :rtype: :class:`dict`
    """
    if not isinstance(capabilities, Mapping):
        raise TypeError("capabilities must be a mapping")

    if FIREFOX_PROFILE in capabilities:
        capabilities = dict(capabilities)
        capabilities[FIREFOX_PROFILE] = \
            _encoded_profile(capabilities[FIREFOX_PROFILE])

    return translate(CapabilityValue.of(capabilities)).unwrap()
