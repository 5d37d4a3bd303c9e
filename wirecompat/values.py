"""
Capability values.

A capability value is anything that can legally appear in a capability
object: a string, a boolean, a number, ``null``, a list of values or an
object mapping names to values. :class:`CapabilityValue` tags each value
with its :class:`Kind` so that code manipulating capabilities can check
what it has in hand without inspecting Python types all over the place.
"""
import collections
import enum
import numbers
from collections.abc import Mapping


class Kind(enum.Enum):
    STRING = "string"
    BOOL = "bool"
    NUMBER = "number"
    NULL = "null"
    LIST = "list"
    OBJECT = "object"

SCALAR_KINDS = frozenset((Kind.STRING, Kind.BOOL, Kind.NUMBER, Kind.NULL))


class CapabilityValue(collections.namedtuple('CapabilityValue',
                                             ('kind', 'value'))):
    """
    An immutable, tagged capability value.

    The ``value`` field holds:

    * a Python scalar for the scalar kinds,

    * a tuple of :class:`CapabilityValue` for ``Kind.LIST``,

    * a tuple of ``(key, CapabilityValue)`` pairs, in insertion order,
      for ``Kind.OBJECT``.

    Instances are hashable, so functions of capability values may be
    memoized.
    """

    __slots__ = ()

    @classmethod
    def of(cls, value):
        """
        Wrap a plain Python value.

        :param value: A ``str``, ``bool``, number, ``None``, sequence
                      (``list`` or ``tuple``), mapping, or an already
                      wrapped :class:`CapabilityValue`.
        :returns: The wrapped value.
        :raises TypeError: When ``value`` cannot be a capability value.
        """
        if isinstance(value, CapabilityValue):
            return value

        if value is None:
            return cls(Kind.NULL, None)

        if isinstance(value, str):
            return cls(Kind.STRING, value)

        # bool is a subclass of int, so this must come first.
        if isinstance(value, bool):
            return cls(Kind.BOOL, value)

        if isinstance(value, numbers.Number):
            return cls(Kind.NUMBER, value)

        if isinstance(value, Mapping):
            items = []
            for (key, item) in value.items():
                if not isinstance(key, str):
                    raise TypeError("capability keys must be strings: {0!r}"
                                    .format(key))
                items.append((key, cls.of(item)))
            return cls(Kind.OBJECT, tuple(items))

        if isinstance(value, (list, tuple)):
            return cls(Kind.LIST, tuple(cls.of(item) for item in value))

        raise TypeError("not a capability value: {0!r}".format(value))

    @classmethod
    def object(cls, pairs=()):
        """
        Build an object from ``(key, value)`` pairs. The values may be
        plain or wrapped. Later pairs replace earlier pairs with the same
        key, in place.
        """
        ordered = collections.OrderedDict()
        for (key, value) in pairs:
            ordered[key] = cls.of(value)
        return cls(Kind.OBJECT, tuple(ordered.items()))

    @property
    def is_scalar(self):
        return self.kind in SCALAR_KINDS

    @property
    def is_list(self):
        return self.kind is Kind.LIST

    @property
    def is_object(self):
        return self.kind is Kind.OBJECT

    def items(self):
        """
        :returns: The ``(key, CapabilityValue)`` pairs of an object.
        :raises TypeError: When this value is not an object.
        """
        self._require(Kind.OBJECT)
        return self.value

    def keys(self):
        return [key for (key, _) in self.items()]

    def get(self, key, default=None):
        for (name, value) in self.items():
            if name == key:
                return value
        return default

    def __contains__(self, key):
        if self.kind is Kind.OBJECT:
            return any(name == key for (name, _) in self.value)
        if self.kind is Kind.LIST:
            return CapabilityValue.of(key) in self.value
        return False

    def unwrap(self):
        """
        :returns: The plain Python equivalent of this value: ``dict`` for
                  objects, ``list`` for lists.
        """
        if self.kind is Kind.OBJECT:
            return {key: value.unwrap() for (key, value) in self.value}

        if self.kind is Kind.LIST:
            return [item.unwrap() for item in self.value]

        return self.value

    def _require(self, kind):
        if self.kind is not kind:
            raise TypeError("expected a capability {0}, got a {1}"
                            .format(kind.value, self.kind.value))
