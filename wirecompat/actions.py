from .keys import modifier_code


class SingleKeyAction(object):
    """
    An action pressing or releasing a single modifier key.

    Pressing and releasing only make sense for modifier keys. Other keys
    are typed with ``send_keys``.
    """
    action_type = None

    def __init__(self, key):
        """
        :param key: The modifier key, as a code point or by name.
        :type key: :class:`str`
        :raises InvalidModifierKey: When ``key`` is not a modifier key.
        """
        self.key = modifier_code(key)

    def to_w3c(self):
        """
        :returns: The action as an item of a W3C ``key`` input source.
        :rtype: :class:`dict`
        """
        return {"type": self.action_type, "value": self.key}

    def perform_on(self, chains):
        """
        Queue this action on an action chain.

        :param chains: The chain.
        :type chains:
            :class:`selenium.webdriver.common.action_chains.ActionChains`
        :returns: ``chains``
        """
        raise NotImplementedError()

    def __eq__(self, other):
        return type(self) is type(other) and self.key == other.key

    def __hash__(self):
        return hash((type(self), self.key))

    def __repr__(self):
        return "{0}({1!r})".format(self.__class__.__name__, self.key)


class KeyDownAction(SingleKeyAction):
    action_type = "keyDown"

    def perform_on(self, chains):
        return chains.key_down(self.key)


class KeyUpAction(SingleKeyAction):
    action_type = "keyUp"

    def perform_on(self, chains):
        return chains.key_up(self.key)
