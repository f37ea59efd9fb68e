import dataclasses
import unittest

from changelog_builder.commits.commit_model import ClassifiedCommit


class TestClassifiedCommit(unittest.TestCase):
    def test_display_text_prefers_subject(self) -> None:
        commit = ClassifiedCommit(type="feat", scope=None, subject="add login", header="feat: add login")
        self.assertEqual(commit.display_text, "add login")

    def test_display_text_falls_back_to_header(self) -> None:
        commit = ClassifiedCommit(type="feat", scope=None, subject="", header="feat: ")
        self.assertEqual(commit.display_text, "feat: ")

    def test_defaults_and_immutability(self) -> None:
        commit = ClassifiedCommit(type=None, scope=None, subject="", header="misc")
        self.assertIsNone(commit.body)
        self.assertIsNone(commit.footer)
        self.assertFalse(commit.breaking)
        self.assertEqual(commit.notes, ())
        with self.assertRaises(dataclasses.FrozenInstanceError):
            commit.type = "feat"  # type: ignore[misc]

    def test_structural_equality(self) -> None:
        a = ClassifiedCommit(type="fix", scope="ui", subject="x", header="fix(ui): x")
        b = ClassifiedCommit(type="fix", scope="ui", subject="x", header="fix(ui): x")
        self.assertEqual(a, b)


if __name__ == "__main__":
    unittest.main()
