import enum


class Dialect(enum.Enum):
    """
    The dialect of the wire protocol spoken by a remote end.

    ``LEGACY`` is the JsonWire protocol that predates the W3C
    standard. ``W3C`` is the standardized WebDriver protocol.
    """
    LEGACY = "legacy"
    W3C = "w3c"

    @classmethod
    def coerce(cls, value):
        """
        Convert ``value`` to a :class:`Dialect`.

        :param value: A :class:`Dialect`, one of the strings ``"legacy"``
                      or ``"w3c"`` (in any case), or a boolean which is
                      ``True`` when the remote end is W3C-compliant.
        :returns: The dialect.
        :raises ValueError: When ``value`` does not name a dialect.
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, bool):
            return cls.W3C if value else cls.LEGACY

        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass

        raise ValueError("unknown dialect: {0!r}".format(value))
