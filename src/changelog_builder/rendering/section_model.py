"""
Data model for rendered changelog sections.

A :class:`ChangelogSection` pairs a category with the formatted lines of
the commits filed under it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .categories import CategoryDescriptor


EMOJI_STYLES = ("unicode", "shortcode")


@dataclass(frozen=True)
class ChangelogSection:
    """A category heading and its commit lines.

    Attributes
    ----------
    category : CategoryDescriptor
        The category this section renders.
    lines : Tuple[str, ...]
        Formatted commit lines (``- Subject``), in input order.
    """

    category: CategoryDescriptor
    lines: Tuple[str, ...]

    def to_markdown(self, emoji_style: str = "unicode") -> str:
        """Render the section as ``### {emoji} {title}:`` followed by its lines."""
        if emoji_style not in EMOJI_STYLES:
            raise ValueError(f"Unknown emoji style: {emoji_style!r}")
        emoji = self.category.shortcode if emoji_style == "shortcode" else self.category.emoji
        return "\n".join([f"### {emoji} {self.category.title}:", *self.lines])
