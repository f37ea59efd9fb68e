"""
Changelog rendering.

This package holds the static category table
(:mod:`changelog_builder.rendering.categories`) and the renderer that
turns classified commits into Markdown sections
(:mod:`changelog_builder.rendering.renderer`).
"""

from .categories import CATEGORIES, CategoryDescriptor  # noqa: F401
from .renderer import build_sections, generate_changelog, render  # noqa: F401
from .section_model import ChangelogSection  # noqa: F401
