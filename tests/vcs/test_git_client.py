import subprocess
import tempfile
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

from changelog_builder.vcs.git_client import GitClient, GitError


class DummyProc(SimpleNamespace):
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""


def fake_git(log_output, count):
    """Build a ``GitClient._run`` replacement answering ``log`` and ``rev-list``."""
    calls = []

    def fake_run(self, args, check=True):
        calls.append(args)
        if args[0] == "log":
            return DummyProc(returncode=0, stdout=log_output, stderr="")
        if args[0] == "rev-list":
            return DummyProc(returncode=0, stdout=f"{count}\n", stderr="")
        raise AssertionError(f"Unexpected git command: {args}")

    return fake_run, calls


class TestGitClient(unittest.TestCase):
    def test_get_commit_messages_parses_log(self) -> None:
        output = (
            "feat: add login\n\x1e\n"
            "fix: null check\n\nLonger body.\n\nRefs: #3\n\x1e\n"
            "\x1e\n"
            "chore: bump deps\n\x1e\n"
        )
        fake_run, calls = fake_git(output, 4)

        with patch.object(GitClient, "_run", autospec=True) as mock_run:
            mock_run.side_effect = fake_run
            client = GitClient(Path("/repo"))
            messages = client.get_commit_messages("v1.0", "v1.1")

        self.assertEqual(
            messages,
            [
                "feat: add login",
                "fix: null check\n\nLonger body.\n\nRefs: #3",
                "",
                "chore: bump deps",
            ],
        )
        self.assertEqual(calls[0][0], "log")
        self.assertIn("--reverse", calls[0])
        self.assertIn("--format=%B%x1e", calls[0])
        self.assertIn("v1.0..v1.1", calls[0])
        self.assertEqual(calls[1], ["rev-list", "--count", "v1.0..v1.1", "--"])

    def test_get_commit_messages_empty_range(self) -> None:
        fake_run, _ = fake_git("", 0)
        with patch.object(GitClient, "_run", autospec=True) as mock_run:
            mock_run.side_effect = fake_run
            self.assertEqual(GitClient(Path("/repo")).get_commit_messages("v1.0", "v1.0"), [])

    def test_message_containing_record_separator_is_rejected(self) -> None:
        # One commit whose message embeds the separator yields two records
        output = "feat: a\x1eb\n\x1e\n"
        fake_run, _ = fake_git(output, 1)
        with patch.object(GitClient, "_run", autospec=True) as mock_run:
            mock_run.side_effect = fake_run
            with self.assertRaises(GitError) as ctx:
                GitClient(Path("/repo")).get_commit_messages("v1.0", "v1.1")
        self.assertIn("1 commit(s) but 2 record(s)", str(ctx.exception))

    def test_unexpected_rev_list_output(self) -> None:
        fake_run, _ = fake_git("feat: a\n\x1e\n", "n/a")
        with patch.object(GitClient, "_run", autospec=True) as mock_run:
            mock_run.side_effect = fake_run
            with self.assertRaises(GitError):
                GitClient(Path("/repo")).get_commit_messages("v1.0", "v1.1")

    def test_run_raises_on_failure(self) -> None:
        failed = DummyProc(returncode=128, stdout="", stderr="fatal: bad revision 'v9..v10'")
        with patch("subprocess.run", return_value=failed) as mock_run:
            client = GitClient(Path("/repo"))
            with self.assertRaises(GitError) as ctx:
                client.get_commit_messages("v9", "v10")
        self.assertIn("bad revision", str(ctx.exception))
        self.assertEqual(mock_run.call_args.args[0][0], "git")
        self.assertEqual(mock_run.call_args.kwargs["cwd"], Path("/repo"))

    def test_run_without_check_returns_result(self) -> None:
        failed = DummyProc(returncode=1, stdout="", stderr="boom")
        with patch("subprocess.run", return_value=failed):
            result = GitClient(Path("/repo"))._run(["status"], check=False)
        self.assertEqual(result.returncode, 1)

    def test_run_missing_git_executable(self) -> None:
        with patch("subprocess.run", side_effect=FileNotFoundError("git")):
            with self.assertRaises(GitError):
                GitClient(Path("/repo"))._run(["log"])

    def test_run_uses_pipes(self) -> None:
        ok = DummyProc(returncode=0, stdout="", stderr="")
        with patch("subprocess.run", return_value=ok) as mock_run:
            GitClient(Path("/repo"))._run(["log"])
        self.assertEqual(mock_run.call_args.kwargs["stdout"], subprocess.PIPE)


class TestGitClientHelpers(unittest.TestCase):
    def test_find_repo_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / ".git").mkdir()
            nested = root / "src" / "pkg"
            nested.mkdir(parents=True)
            self.assertEqual(GitClient.find_repo_root(nested), root)

    def test_find_repo_root_outside_repo(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with patch("pathlib.Path.exists", return_value=False):
                self.assertIsNone(GitClient.find_repo_root(Path(tmp)))

    def test_parse_range(self) -> None:
        self.assertEqual(GitClient.parse_range("v1.0..v1.1"), ("v1.0", "v1.1"))
        self.assertEqual(GitClient.parse_range(" v1.0 .. HEAD "), ("v1.0", "HEAD"))

    def test_parse_range_invalid(self) -> None:
        for value in ["v1.0", "..v1.1", "v1.0..", "v1.0...v1.1", ""]:
            with self.subTest(value=value):
                with self.assertRaises(GitError):
                    GitClient.parse_range(value)


if __name__ == "__main__":
    unittest.main()
