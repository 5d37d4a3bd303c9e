from .dialect import Dialect
from .errors import MissingElementIdentifier
from .values import CapabilityValue

WEB_DRIVER_ELEMENT_IDENTIFIER = "element-6066-11e4-a52e-4f735466cecf"
"""
The key under which W3C remote ends store the id of an element.
"""

LEGACY_ELEMENT_IDENTIFIER = "ELEMENT"
"""
The key under which JsonWire remote ends store the id of an element.
"""


def get_element(raw):
    """
    Extract the element id from an element reference returned by a
    remote end, whatever its dialect.

    :param raw: The element reference.
    :type raw: :class:`dict` or an object :class:`CapabilityValue`
    :returns: The element id.
    :rtype: :class:`str`
    :raises MissingElementIdentifier: When ``raw`` has no element id.
    """
    if isinstance(raw, CapabilityValue):
        raw = raw.unwrap()

    if WEB_DRIVER_ELEMENT_IDENTIFIER in raw:
        return raw[WEB_DRIVER_ELEMENT_IDENTIFIER]

    if LEGACY_ELEMENT_IDENTIFIER in raw:
        return raw[LEGACY_ELEMENT_IDENTIFIER]

    raise MissingElementIdentifier(raw)


def make_element_reference(element_id, dialect):
    """
    :param element_id: The element id.
    :type element_id: :class:`str`
    :param dialect: The dialect of the remote end.
    :type dialect: :class:`Dialect`, or anything :meth:`Dialect.coerce`
                   accepts
    :returns: The element reference to send to the remote end.
    :rtype: :class:`dict`
    """
    dialect = Dialect.coerce(dialect)
    key = WEB_DRIVER_ELEMENT_IDENTIFIER if dialect is Dialect.W3C \
        else LEGACY_ELEMENT_IDENTIFIER
    return {key: element_id}
