"""
Commit message parsing.

This package turns raw commit messages into structured
:class:`~changelog_builder.commits.commit_model.ClassifiedCommit`
records. See :mod:`changelog_builder.commits.commit_parser` for the
parsing rules and :mod:`changelog_builder.commits.message_reader` for
reading pre-collected messages.
"""

from .commit_model import ClassifiedCommit  # noqa: F401
from .commit_parser import classify, classify_all  # noqa: F401
from .message_reader import InputError, read_messages  # noqa: F401
