"""
Reader for pre-collected commit messages.

Callers that already hold the commit messages of a release range (for
example a CI job that queried a hosting API) can hand them over as a
JSON array of strings, either in a file or on standard input.
"""

from __future__ import annotations

import json
import logging
from typing import IO, Any, List


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class InputError(Exception):
    """Raised when commit messages cannot be read from the given input."""

    pass


def read_messages(stream: IO[str]) -> List[str]:
    """Read a JSON array of commit messages from ``stream``.

    Raises
    ------
    InputError
        If the content is not valid JSON or not a list of strings.
    """
    name = getattr(stream, "name", "<input>")
    try:
        data: Any = json.load(stream)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read commit messages from %s: %s", name, exc)
        raise InputError(f"Invalid JSON in {name}: {exc}") from exc

    if not isinstance(data, list):
        raise InputError(f"Expected a JSON array of commit messages in {name}")
    bad = [index for index, item in enumerate(data) if not isinstance(item, str)]
    if bad:
        raise InputError(
            f"Commit messages must be strings; invalid entries at index {', '.join(map(str, bad))}"
        )

    logger.debug("Read %d commit message(s) from %s", len(data), name)
    return data
