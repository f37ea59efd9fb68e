"""
Version control system (VCS) integration.

Contains the :class:`GitClient` used to collect the commit messages of
a revision range from a local Git repository.
"""

from .git_client import GitClient, GitError  # noqa: F401
