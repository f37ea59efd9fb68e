"""
Static category table for the changelog.

Each Conventional Commit type that gets its own changelog section has a
:class:`CategoryDescriptor` here. Any other type, and commits without a
type, are filed under the ``unknown`` descriptor.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


UNKNOWN_KEY = "unknown"


@dataclass(frozen=True)
class CategoryDescriptor:
    """Display metadata for one changelog category.

    Attributes
    ----------
    key : str
        The commit type token, e.g. ``feat``.
    emoji : str
        Unicode glyph shown before the section title.
    title : str
        Section heading.
    order : int
        Sort rank; lower values are rendered first.
    shortcode : str
        GitHub emoji shortcode equivalent of ``emoji``.
    """

    key: str
    emoji: str
    title: str
    order: int
    shortcode: str


_DESCRIPTORS = (
    CategoryDescriptor("feat", "✨", "Features", 0, ":sparkles:"),
    CategoryDescriptor("fix", "🐛", "Bug Fixes", 1, ":bug:"),
    CategoryDescriptor("style", "💎", "Styling", 2, ":gem:"),
    CategoryDescriptor("docs", "📚", "Docs", 3, ":books:"),
    CategoryDescriptor("refactor", "🔨", "Refactor", 10, ":hammer:"),
    CategoryDescriptor("perf", "🚀", "Performance Improvements", 10, ":rocket:"),
    CategoryDescriptor("test", "🚨", "Tests", 10, ":rotating_light:"),
    CategoryDescriptor("build", "📦", "Build", 10, ":package:"),
    CategoryDescriptor("ci", "👷", "CI", 10, ":construction_worker:"),
    CategoryDescriptor("chore", "🔧", "Chores", 10, ":wrench:"),
    CategoryDescriptor(UNKNOWN_KEY, "❓", "Others", 10, ":question:"),
)

CATEGORIES: Mapping[str, CategoryDescriptor] = MappingProxyType(
    {descriptor.key: descriptor for descriptor in _DESCRIPTORS}
)

UNKNOWN_CATEGORY = CATEGORIES[UNKNOWN_KEY]


def bucket_key(commit_type: Optional[str]) -> str:
    """Return the category key a commit of ``commit_type`` is grouped under."""
    if commit_type is None:
        return UNKNOWN_KEY
    return commit_type if commit_type in CATEGORIES else UNKNOWN_KEY


def get_category(key: Optional[str]) -> CategoryDescriptor:
    """Look up the descriptor for ``key``, falling back to ``unknown``."""
    return CATEGORIES.get(key or UNKNOWN_KEY, UNKNOWN_CATEGORY)
