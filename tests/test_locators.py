from unittest import TestCase

from selenium.webdriver.common.by import By

from wirecompat import Dialect, Locator, Mechanism, translate_locator, \
    get_using, make_translating_find_element


class TranslateLocatorTestCase(TestCase):

    def test_legacy_unchanged(self):
        for mechanism in Mechanism:
            locator = Locator(mechanism, "foo")
            self.assertEqual(translate_locator(locator, Dialect.LEGACY),
                             locator)

    def test_w3c_id(self):
        self.assertEqual(
            translate_locator(Locator(Mechanism.ID, "foo"), Dialect.W3C),
            Locator(Mechanism.CSS_SELECTOR, "#foo"))

    def test_w3c_class_name(self):
        self.assertEqual(
            translate_locator(Locator(Mechanism.CLASS_NAME, "foo"),
                              Dialect.W3C),
            Locator(Mechanism.CSS_SELECTOR, ".foo"))

    def test_w3c_name(self):
        self.assertEqual(
            translate_locator(Locator(Mechanism.NAME, "foo"), Dialect.W3C),
            Locator(Mechanism.CSS_SELECTOR, "[name='foo']"))

    def test_w3c_name_not_escaped(self):
        self.assertEqual(
            translate_locator(Locator(Mechanism.NAME, "it's"),
                              Dialect.W3C).value,
            "[name='it's']")

    def test_w3c_always_css(self):
        for mechanism in (Mechanism.ID, Mechanism.NAME, Mechanism.CLASS_NAME):
            self.assertIs(
                translate_locator(Locator(mechanism, "x"),
                                  Dialect.W3C).mechanism,
                Mechanism.CSS_SELECTOR)

    def test_accepts_flag_and_name(self):
        locator = Locator(Mechanism.ID, "foo")
        self.assertEqual(translate_locator(locator, True),
                         Locator(Mechanism.CSS_SELECTOR, "#foo"))
        self.assertEqual(translate_locator(locator, "w3c"),
                         Locator(Mechanism.CSS_SELECTOR, "#foo"))
        self.assertEqual(translate_locator(locator, "legacy"), locator)
        self.assertEqual(translate_locator(locator, False), locator)

    def test_rejects_unknown_dialect(self):
        with self.assertRaisesRegex(ValueError, "^unknown dialect: "):
            translate_locator(Locator(Mechanism.ID, "foo"), "jsonwire")

    def test_w3c_others_unchanged(self):
        for mechanism in (Mechanism.CSS_SELECTOR, Mechanism.LINK_TEXT,
                          Mechanism.PARTIAL_LINK_TEXT, Mechanism.TAG_NAME,
                          Mechanism.XPATH):
            locator = Locator(mechanism, "foo")
            self.assertEqual(translate_locator(locator, Dialect.W3C),
                             locator)


class LocatorTestCase(TestCase):

    def test_of_string(self):
        self.assertEqual(Locator.of("class name", "a"),
                         Locator(Mechanism.CLASS_NAME, "a"))
        self.assertEqual(Locator.of(By.XPATH, "//a"),
                         Locator(Mechanism.XPATH, "//a"))

    def test_of_unknown(self):
        with self.assertRaisesRegex(ValueError,
                                    "^unknown locator mechanism: 'css'$"):
            Locator.of("css", "a")

    def test_wire_strings(self):
        self.assertEqual(
            [mechanism.value for mechanism in Mechanism],
            ["css selector", "id", "name", "class name", "link text",
             "partial link text", "tag name", "xpath"])

    def test_get_using(self):
        self.assertEqual(get_using(Locator(Mechanism.ID, "foo"), Dialect.W3C),
                         {"using": "css selector", "value": "#foo"})
        self.assertEqual(get_using(Locator(Mechanism.ID, "foo"),
                                   Dialect.LEGACY),
                         {"using": "id", "value": "foo"})
        self.assertEqual(get_using(Locator(Mechanism.ID, "foo"), True),
                         {"using": "css selector", "value": "#foo"})


class MakeTranslatingFindElementTestCase(TestCase):

    def setUp(self):
        self.calls = []

        def find_element(by, value):
            self.calls.append((by, value))
            return "element"

        self.find_element = find_element

    def test_w3c(self):
        find = make_translating_find_element(self.find_element, Dialect.W3C)
        self.assertEqual(find(By.CLASS_NAME, "foo"), "element")
        self.assertEqual(self.calls, [("css selector", ".foo")])

    def test_legacy(self):
        find = make_translating_find_element(self.find_element, "legacy")
        find(By.CLASS_NAME, "foo")
        self.assertEqual(self.calls, [("class name", "foo")])

    def test_defaults_to_id(self):
        find = make_translating_find_element(self.find_element, True)
        find(value="foo")
        self.assertEqual(self.calls, [("css selector", "#foo")])
