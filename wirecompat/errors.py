class WireCompatError(Exception):
    """
    Base class for the errors raised by this package.
    """


class MissingElementIdentifier(WireCompatError, KeyError):
    """
    Raised when a response object that should reference an element
    carries neither the W3C nor the legacy element identifier.
    """

    def __init__(self, raw):
        self.raw = raw
        super(MissingElementIdentifier, self).__init__(
            "no element identifier in: {0!r}".format(raw))

    def __str__(self):
        # KeyError would otherwise show the repr of the message.
        return self.args[0]


class InvalidModifierKey(WireCompatError, ValueError):
    """
    Raised when a key down or key up action is requested for a key
    which is not a modifier key.
    """

    def __init__(self, key):
        self.key = key
        super(InvalidModifierKey, self).__init__(
            "key down / key up events only make sense for modifier keys; "
            "got: {0!r}".format(key))
