"""
Configuration loading for changelog_builder.

Provides a loader for the optional ``.changelog.json`` render options.
See :mod:`changelog_builder.config.loader` for implementation details.
"""

from .loader import ConfigError, load_config  # noqa: F401
