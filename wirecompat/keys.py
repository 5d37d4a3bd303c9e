from selenium.webdriver.common.keys import Keys

from .errors import InvalidModifierKey

MODIFIER_KEY_NAMES = {
    "shift": Keys.SHIFT,
    "control": Keys.CONTROL,
    "alt": Keys.ALT,
    "meta": Keys.META,
    "command": Keys.COMMAND,
    "left_alt": Keys.LEFT_ALT,
    "left_control": Keys.LEFT_CONTROL,
    "left_shift": Keys.LEFT_SHIFT,
}
"""
The modifier keys, by name.
"""

MODIFIER_KEYS = frozenset(MODIFIER_KEY_NAMES.values())
"""
The code points of the modifier keys. Some names share a code point:
``META`` and ``COMMAND`` are the same key, and so are the left variants
and the plain keys.
"""


def modifier_code(key):
    """
    :param key: A modifier key, either as its code point (e.g.
                ``Keys.SHIFT``) or by name (e.g. ``"shift"``).
    :type key: :class:`str`
    :returns: The code point of the key.
    :rtype: :class:`str`
    :raises InvalidModifierKey: When ``key`` is not a modifier key.
    """
    if isinstance(key, str):
        if key in MODIFIER_KEYS:
            return key

        code = MODIFIER_KEY_NAMES.get(key.lower())
        if code is not None:
            return code

    raise InvalidModifierKey(key)


def validate_modifier_key(key):
    """
    Check that a key can be used in a key down or key up action.

    :raises InvalidModifierKey: When ``key`` is not a modifier key.
    """
    modifier_code(key)


def is_modifier_key(key):
    try:
        modifier_code(key)
    except InvalidModifierKey:
        return False
    return True
