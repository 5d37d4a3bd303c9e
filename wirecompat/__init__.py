# To re-export here.
from .dialect import Dialect
from .errors import WireCompatError, MissingElementIdentifier, \
    InvalidModifierKey
from .values import CapabilityValue, Kind
from .translator import translate, to_w3c_compatible
from .locators import Mechanism, Locator, translate_locator, get_using, \
    make_translating_find_element
from .elements import WEB_DRIVER_ELEMENT_IDENTIFIER, get_element, \
    make_element_reference
from .keys import MODIFIER_KEYS, validate_modifier_key, is_modifier_key
from .actions import KeyDownAction, KeyUpAction
from .capabilities import DesiredCapabilities, NormalizedCapabilities
from .config import Config
from .builder import Builder
