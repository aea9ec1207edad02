import unittest
from MdToPdf.TitleExtractor import extract_title


MD_STR = """
# header

Sample text.

[link](http://example.com)
"""


class TestTitleExtractor(unittest.TestCase):

    def test_top_level_heading(self):
        self.assertEqual(extract_title(MD_STR), "header")

    def test_no_heading(self):
        self.assertEqual(extract_title("Just a paragraph.\n\nAnother one.\n"), "")
        self.assertEqual(extract_title(""), "")

    def test_deeper_headings_ignored(self):
        text = "## Section\n\n### Subsection\n"
        self.assertEqual(extract_title(text), "")

    def test_first_heading_wins(self):
        text = "intro\n\n# First\n\n## Between\n\n# Second\n"
        self.assertEqual(extract_title(text), "First")

    def test_heading_must_start_line(self):
        self.assertEqual(extract_title("not # a heading\n"), "")

    def test_extra_whitespace_is_skipped(self):
        self.assertEqual(extract_title("#    Spaced Out\n"), "Spaced Out")

    def test_first_character_dropped_without_space(self):
        """The character after '#' is always consumed, even if it is text."""
        self.assertEqual(extract_title("#Title\n"), "itle")

    def test_unicode_space_is_not_skipped(self):
        self.assertEqual(extract_title("# \u2003Name\n"), "\u2003Name")
        self.assertEqual(extract_title("#\u00a0Name\n"), "Name")

    def test_heading_inside_code_block_counts(self):
        text = "```\n# from code\n```\n\n# Real\n"
        self.assertEqual(extract_title(text), "from code")

    def test_title_stops_at_line_end(self):
        self.assertEqual(extract_title("# Jane Doe\nSoftware Engineer\n"), "Jane Doe")


if __name__ == "__main__":
    unittest.main()
