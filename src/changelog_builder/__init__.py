"""
Top-level package for changelog_builder.

The package turns conventional-commit messages into a categorized
changelog section. The pure pipeline lives in
:mod:`changelog_builder.commits` and :mod:`changelog_builder.rendering`;
the ``changelog-builder`` command is defined in
:mod:`changelog_builder.cli`.
"""

__all__ = ["__version__", "classify", "classify_all", "generate_changelog", "render"]

__version__ = "0.1.0"

from changelog_builder.commits.commit_parser import classify, classify_all  # noqa: E402,F401
from changelog_builder.rendering.renderer import generate_changelog, render  # noqa: E402,F401
