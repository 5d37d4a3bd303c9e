from unittest import TestCase

from wirecompat import Config, Dialect


class ConfigTestCase(TestCase):

    def test_normalizes_names(self):
        config = Config("Linux", "Chrome", "30")
        self.assertEqual(config.platform, "LINUX")
        self.assertEqual(config.browser, "CHROME")
        self.assertEqual(config.version, "30")

    def test_accepts_browser_abbreviations(self):
        table = {
            "ch": "CHROME",
            "ff": "FIREFOX",
            "ie": "INTERNETEXPLORER"
        }
        for (abbr, browser) in table.items():
            self.assertEqual(Config("Linux", abbr, "30").browser, browser)

    def test_configs_are_independent(self):
        first = Config("Linux", "ch", "30", {"a": 1})
        second = Config("Linux", "ch", "30")
        self.assertEqual(first.desired_capabilities, {"a": 1})
        self.assertEqual(second.desired_capabilities, {})

    def test_copies_desired_capabilities(self):
        caps = {"a": 1}
        config = Config("Linux", "ch", "30", caps)
        caps["a"] = 2
        self.assertEqual(config.desired_capabilities, {"a": 1})

    def test_dialect(self):
        self.assertIs(Config("Linux", "ch", "30").dialect, Dialect.W3C)
        self.assertIs(Config("Linux", "ch", "31", dialect="legacy").dialect,
                      Dialect.LEGACY)
        self.assertIs(Config("Linux", "ch", "32", dialect=False).dialect,
                      Dialect.LEGACY)
        with self.assertRaisesRegex(ValueError, "^unknown dialect: 'w4c'$"):
            Config("Linux", "ch", "33", dialect="w4c")

    def test_make_desired_capabilities(self):
        config = Config("Linux", "ch", "30", {"custom": 1,
                                              "browserName": "chromium"})
        self.assertEqual(config.make_desired_capabilities().to_dict(), {
            "browserName": "chromium",
            "custom": 1,
            "platform": "LINUX",
            "version": "30",
        })

    def test_unknown_browser(self):
        with self.assertRaisesRegex(ValueError,
                                    "^no preset for browser: NETSCAPE$"):
            Config("Linux", "netscape", "4").make_desired_capabilities()

    def test_make_capabilities(self):
        config = Config("Linux", "ch", "30", {
            "chromeOptions": {"args": ["--headless"]},
            "nativeEvents": True,
        })
        self.assertEqual(config.make_capabilities(), {
            "browserName": "chrome",
            "browserVersion": "30",
            "platformName": "linux",
            "goog:chromeOptions": {"args": ["--headless"]},
        })
        self.assertEqual(config.make_capabilities(Dialect.LEGACY), {
            "browserName": "chrome",
            "version": "30",
            "platform": "LINUX",
            "chromeOptions": {"args": ["--headless"]},
            "nativeEvents": True,
        })

    def test_str(self):
        self.assertEqual(str(Config("Linux", "ff", "60")),
                         "Configured for LINUX, FIREFOX, 60, W3C")
