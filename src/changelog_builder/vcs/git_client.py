"""
Git client implementation for changelog_builder.

This module reads commit messages from a local Git repository. It only
implements what the changelog command needs: locating the repository
root and listing the messages of a ``BASE..HEAD`` range. All subprocess
calls go through :meth:`GitClient._run` so that unit tests can mock them
easily.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ASCII record separator; git expands the %x1e placeholder to it after
# each message
RECORD_SEPARATOR = "\x1e"
LOG_FORMAT = "%B%x1e"


class GitError(Exception):
    """Raised when a Git command fails."""

    pass


class GitClient:
    """Client for reading commit history from a Git repository."""

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = repo_root

    # ------------------------------------------------------------------
    # Static helpers
    # ------------------------------------------------------------------
    @staticmethod
    def find_repo_root(start: Path) -> Optional[Path]:
        """Find the root of the Git repository starting from ``start``.

        Walk upwards until a ``.git`` entry is found or the filesystem
        root is reached.
        """
        current = start.resolve()
        while True:
            if (current / ".git").exists():
                return current
            if current.parent == current:
                return None
            current = current.parent

    @staticmethod
    def parse_range(revision_range: str) -> Tuple[str, str]:
        """Split ``BASE..HEAD`` into its two refs.

        Raises
        ------
        GitError
            If the range does not name both refs.
        """
        base, sep, head = revision_range.partition("..")
        base, head = base.strip(), head.strip()
        if not sep or not base or not head or head.startswith("."):
            raise GitError(f"Invalid revision range '{revision_range}'; expected BASE..HEAD")
        return base, head

    # ------------------------------------------------------------------
    # Basic Git commands
    # ------------------------------------------------------------------
    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root.

        Raises
        ------
        GitError
            If the command exits with a non-zero status when ``check`` is True,
            or if the ``git`` executable cannot be started.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.error("Failed to run git: %s", e)
            raise GitError(f"Failed to run git: {e}") from e

        if check and result.returncode != 0:
            logger.error(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(result.stderr.strip() or result.stdout.strip())
        return result

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------
    def _count_commits(self, base: str, head: str) -> int:
        """Return the number of commits in ``base..head``."""
        result = self._run(["rev-list", "--count", f"{base}..{head}", "--"], check=True)
        try:
            return int(result.stdout.strip())
        except ValueError as e:
            raise GitError(f"Unexpected rev-list output: {result.stdout.strip()!r}") from e

    def get_commit_messages(self, base: str, head: str) -> List[str]:
        """Return the full messages of the commits in ``base..head``.

        Messages are ordered oldest to newest, matching the order of a
        tag-to-tag comparison. Records are split on the ASCII record
        separator, so a message that itself contains ``\\x1e`` is rejected.

        Raises
        ------
        GitError
            If either ref is unknown, the log command fails, or a message
            contains the record separator.
        """
        result = self._run(
            ["log", "--reverse", f"--format={LOG_FORMAT}", f"{base}..{head}", "--"],
            check=True,
        )
        # Every message is terminated by the separator, so the last chunk is
        # only the trailing newline
        records = result.stdout.split(RECORD_SEPARATOR)[:-1]
        expected = self._count_commits(base, head)
        if len(records) != expected:
            raise GitError(
                f"Cannot split the log of {base}..{head}: {expected} commit(s) but "
                f"{len(records)} record(s); a commit message contains \\x1e"
            )
        messages = [record.strip("\n") for record in records]
        logger.debug("Found %d commit(s) in %s..%s", len(messages), base, head)
        return messages
