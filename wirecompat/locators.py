import collections
import enum

from selenium.webdriver.common.by import By

from .dialect import Dialect


class Mechanism(enum.Enum):
    """
    The locator strategies. The values are the strings that go on the
    wire, which are also the values of Selenium's ``By`` constants.
    """
    CSS_SELECTOR = By.CSS_SELECTOR
    ID = By.ID
    NAME = By.NAME
    CLASS_NAME = By.CLASS_NAME
    LINK_TEXT = By.LINK_TEXT
    PARTIAL_LINK_TEXT = By.PARTIAL_LINK_TEXT
    TAG_NAME = By.TAG_NAME
    XPATH = By.XPATH


class Locator(collections.namedtuple('Locator', ('mechanism', 'value'))):

    __slots__ = ()

    @classmethod
    def of(cls, by, value):
        """
        :param by: The mechanism.
        :type by: :class:`Mechanism` or one of the ``By`` strings.
        :param value: The value to search for.
        :type value: :class:`str`
        :raises ValueError: When ``by`` is not a known mechanism.
        """
        if not isinstance(by, Mechanism):
            try:
                by = Mechanism(by)
            except ValueError:
                raise ValueError("unknown locator mechanism: {0!r}"
                                 .format(by)) from None
        return cls(by, value)

    def to_wire(self):
        return {"using": self.mechanism.value, "value": self.value}


# W3C servers only know CSS selectors, link text, tag names and XPath.
_CSS_EQUIVALENTS = {
    Mechanism.CLASS_NAME: ".{0}",
    Mechanism.ID: "#{0}",
    # The value is not escaped. Servers expect exactly this form.
    Mechanism.NAME: "[name='{0}']",
}


def translate_locator(locator, dialect):
    """
    Rewrite a locator into one the remote end understands.

    :param locator: The locator.
    :type locator: :class:`Locator`
    :param dialect: The dialect of the remote end.
    :type dialect: :class:`Dialect`, or anything :meth:`Dialect.coerce`
                   accepts
    :returns: The locator to put on the wire.
    :rtype: :class:`Locator`
    """
    if Dialect.coerce(dialect) is not Dialect.W3C:
        return locator

    template = _CSS_EQUIVALENTS.get(locator.mechanism)
    if template is None:
        return locator

    return Locator(Mechanism.CSS_SELECTOR, template.format(locator.value))


def get_using(locator, dialect):
    """
    :returns: The body of a find element request.
    :rtype: :class:`dict`
    """
    return translate_locator(locator, dialect).to_wire()


def make_translating_find_element(original, dialect):
    """
    Wrap a ``find_element``-like callable so that the locators it is
    called with are translated for ``dialect`` first.

    :param original: A callable taking ``(by, value)``, such as the bound
                     ``find_element`` or ``find_elements`` of a Selenium
                     driver.
    :param dialect: The dialect of the remote end.
    :type dialect: :class:`Dialect`, or anything :meth:`Dialect.coerce`
                   accepts
    :returns: The wrapping callable.
    """
    dialect = Dialect.coerce(dialect)

    def method(by=By.ID, value=None):
        locator = translate_locator(Locator.of(by, value), dialect)
        return original(locator.mechanism.value, locator.value)

    return method
