"""
Configuration loader for changelog_builder.

Render options can be stored in a JSON file. The file is looked up in
this order:

1. the path passed explicitly (``--config``),
2. the path in the ``CHANGELOG_BUILDER_CONFIG`` environment variable,
3. ``.changelog.json`` in the repository root.

An explicitly requested file (1 or 2) must exist. The implicit file (3)
is optional; without it the defaults are used. If a file is malformed,
has fields of the wrong type or unsupported values, a
:class:`ConfigError` is raised.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from changelog_builder.rendering.renderer import TIE_BREAKS
from changelog_builder.rendering.section_model import EMOJI_STYLES


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


CONFIG_FILENAME = ".changelog.json"
CONFIG_ENV_VAR = "CHANGELOG_BUILDER_CONFIG"

DEFAULT_CONFIG: Dict[str, Any] = {
    "emoji_style": "unicode",
    "tie_break": "first-seen",
}

_ALLOWED_VALUES = {
    "emoji_style": EMOJI_STYLES,
    "tie_break": TIE_BREAKS,
}


class ConfigError(Exception):
    """Raised when the configuration file is missing or invalid."""

    pass


def _resolve_config_path(
    config_path: Optional[Path], repo_root: Optional[Path]
) -> Optional[Path]:
    """Return the configuration file to read.

    Returns ``None`` when no explicit file was requested and the implicit
    one does not exist.
    """
    if config_path is not None:
        return config_path
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    implicit = (repo_root or Path.cwd()) / CONFIG_FILENAME
    if implicit.exists():
        return implicit
    logger.debug("No configuration file at %s; using defaults", implicit)
    return None


def validate_config(data: Dict[str, Any]) -> Dict[str, Any]:
    """Check the keys of ``data`` and merge it over the defaults.

    Raises
    ------
    ConfigError
        If a known key has the wrong type or an unsupported value.
    """
    unknown = sorted(set(data) - set(DEFAULT_CONFIG))
    if unknown:
        logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

    config = dict(DEFAULT_CONFIG)
    for key, allowed in _ALLOWED_VALUES.items():
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, str):
            raise ConfigError(f"'{key}' must be a string")
        if value not in allowed:
            raise ConfigError(
                f"Invalid value for '{key}': {value!r} (expected one of: {', '.join(allowed)})"
            )
        config[key] = value
    return config


def load_config(
    config_path: Optional[Path] = None, repo_root: Optional[Path] = None
) -> Dict[str, Any]:
    """Load the render options and return them as a dictionary.

    Args:
        config_path: Explicit configuration file. Takes precedence over
                     the environment variable and the repository file.
        repo_root: Directory searched for ``.changelog.json``. Defaults
                   to the current working directory.

    Returns:
        A dictionary with the keys:
        - emoji_style (str): ``unicode`` or ``shortcode``
        - tie_break (str): ``first-seen`` or ``alphabetical``

    Raises:
        ConfigError: If a requested file is missing, or any file is
                     malformed or invalid.
    """
    path = _resolve_config_path(config_path, repo_root)
    if path is None:
        return dict(DEFAULT_CONFIG)

    if not path.exists():
        logger.error("Configuration file '%s' does not exist", path)
        raise ConfigError(f"Missing configuration file: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data: Any = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {path.name}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {path.name} must be a JSON object")

    config = validate_config(data)
    logger.debug("Loaded configuration from %s: %s", path, config)
    return config
