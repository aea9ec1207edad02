import os
import tempfile
import unittest
from MdToPdf.Assets import (
    DEFAULT_CSS,
    DEFAULT_JS,
    PageAssets,
    resolve_asset,
    resolve_css,
    resolve_js,
)


class TestAssets(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.css_path = os.path.join(self.tmp.name, "custom.css")
        with open(self.css_path, "w", encoding="utf-8") as f:
            f.write("body { color: red; }")

    def tearDown(self):
        self.tmp.cleanup()

    def test_defaults(self):
        self.assertEqual(resolve_css(), DEFAULT_CSS)
        self.assertEqual(resolve_js(), DEFAULT_JS)

    def test_default_css_styles_template(self):
        self.assertIn("#resume", DEFAULT_CSS)
        self.assertIn("del {", DEFAULT_CSS)

    def test_user_file(self):
        self.assertEqual(resolve_css(self.css_path), "body { color: red; }")

    def test_suppressed_wins_over_file(self):
        self.assertEqual(resolve_css(self.css_path, no_css=True), "")
        self.assertEqual(resolve_js(no_js=True), "")

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            resolve_asset(os.path.join(self.tmp.name, "nope.css"), "default.css", "x", False)

    def test_missing_file_ignored_when_suppressed(self):
        missing = os.path.join(self.tmp.name, "nope.css")
        self.assertEqual(resolve_asset(missing, "default.css", "x", True), "")

    def test_css_and_js_resolve_independently(self):
        self.assertEqual(resolve_css(self.css_path), "body { color: red; }")
        self.assertEqual(resolve_js(os.path.join(self.tmp.name, "nope.js"), no_js=True), "")

    def test_page_assets_are_frozen(self):
        assets = PageAssets()
        with self.assertRaises(AttributeError):
            assets.css = "changed"


if __name__ == "__main__":
    unittest.main()
