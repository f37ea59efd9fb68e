import unittest

from changelog_builder.rendering.categories import CATEGORIES
from changelog_builder.rendering.section_model import ChangelogSection


class TestChangelogSection(unittest.TestCase):
    def setUp(self) -> None:
        self.section = ChangelogSection(category=CATEGORIES["fix"], lines=("- Null check", "- Crash on start"))

    def test_to_markdown_unicode(self) -> None:
        self.assertEqual(
            self.section.to_markdown(),
            "### 🐛 Bug Fixes:\n- Null check\n- Crash on start",
        )

    def test_to_markdown_shortcode(self) -> None:
        self.assertEqual(
            self.section.to_markdown("shortcode"),
            "### :bug: Bug Fixes:\n- Null check\n- Crash on start",
        )

    def test_unknown_emoji_style(self) -> None:
        with self.assertRaises(ValueError):
            self.section.to_markdown("ascii")


if __name__ == "__main__":
    unittest.main()
