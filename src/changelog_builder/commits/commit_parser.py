"""
Parser for Conventional Commit messages.

The parser splits a raw commit message into its header, body and footer
and extracts the commit type, scope and subject from the header. It is
total: any string, including an empty one or a header without a colon,
produces a :class:`ClassifiedCommit`. Messages that do not follow the
``type(scope): subject`` convention simply get ``type=None`` so that the
renderer can file them under its fallback category.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Tuple

from .commit_model import ClassifiedCommit


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# type, optional (scope), optional breaking marker, colon, rest of the line
HEADER_PATTERN = re.compile(
    r"^(?P<type>\w+)(?:\((?P<scope>[^()\r\n]*)\))?(?P<breaking>!)?:(?P<subject>.*)$"
)

# Footer trailers: "Token: value", "Token #value" or "BREAKING CHANGE: value"
TRAILER_PATTERN = re.compile(
    r"^(?P<token>BREAKING[ -]CHANGE|[\w-]+)(?::[ \t]|[ \t]#)(?P<value>.*)$"
)

BREAKING_TOKENS = {"BREAKING CHANGE", "BREAKING-CHANGE"}

# Only LF and CRLF end a line; str.splitlines would also break on form
# feeds, U+2028 and other separators that belong to the text
LINE_BREAK_PATTERN = re.compile(r"\r?\n")


def _last_paragraph_start(lines: List[str]) -> int:
    """Return the index of the first line of the last paragraph in ``lines``.

    ``lines`` must not end with blank lines.
    """
    index = len(lines)
    while index > 0 and lines[index - 1].strip():
        index -= 1
    return index


def _split_body_and_footer(lines: List[str]) -> Tuple[Optional[str], Optional[str]]:
    """Split the lines following the header into body and footer text."""
    # Drop the blank separator lines around the content
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    end = len(lines)
    while end > start and not lines[end - 1].strip():
        end -= 1
    content = lines[start:end]
    if not content:
        return None, None

    footer_start = _last_paragraph_start(content)
    if not TRAILER_PATTERN.match(content[footer_start]):
        return "\n".join(content), None

    footer = "\n".join(content[footer_start:])
    body_lines = content[:footer_start]
    while body_lines and not body_lines[-1].strip():
        body_lines.pop()
    body = "\n".join(body_lines) if body_lines else None
    return body, footer


def _breaking_notes(footer: Optional[str]) -> Tuple[str, ...]:
    """Collect the texts of ``BREAKING CHANGE`` trailers in ``footer``.

    A trailer value continues on following lines until the next trailer.
    """
    if not footer:
        return ()
    notes: List[str] = []
    current: Optional[List[str]] = None
    for line in footer.split("\n"):
        match = TRAILER_PATTERN.match(line)
        if match:
            if current is not None:
                notes.append("\n".join(current).strip())
                current = None
            if match.group("token") in BREAKING_TOKENS:
                current = [match.group("value")]
        elif current is not None:
            current.append(line.strip())
    if current is not None:
        notes.append("\n".join(current).strip())
    return tuple(note for note in notes if note)


def classify(message: Optional[str]) -> ClassifiedCommit:
    """Parse a raw commit message into a :class:`ClassifiedCommit`.

    Parameters
    ----------
    message : Optional[str]
        The full commit message. ``None`` is treated as an empty message.

    Returns
    -------
    ClassifiedCommit
        The parsed commit. ``type`` is ``None`` when the first line does
        not start with ``type(scope):``.

    Examples
    --------
    >>> classify("feat(auth): add login").type
    'feat'
    >>> classify("Update README").type is None
    True
    """
    lines = LINE_BREAK_PATTERN.split(message or "")
    header = lines[0]
    body, footer = _split_body_and_footer(lines[1:])
    notes = _breaking_notes(footer)

    match = HEADER_PATTERN.match(header)
    if not match:
        logger.debug("Commit header does not follow the convention: %r", header)
        return ClassifiedCommit(
            type=None,
            scope=None,
            subject="",
            header=header,
            body=body,
            footer=footer,
            breaking=bool(notes),
            notes=notes,
        )

    scope = (match.group("scope") or "").strip()
    return ClassifiedCommit(
        type=match.group("type").lower(),
        scope=scope or None,
        subject=match.group("subject").strip(),
        header=header,
        body=body,
        footer=footer,
        breaking=bool(match.group("breaking")) or bool(notes),
        notes=notes,
    )


def classify_all(messages: Iterable[Optional[str]]) -> List[ClassifiedCommit]:
    """Classify every message in ``messages``, keeping their order."""
    return [classify(message) for message in messages]
