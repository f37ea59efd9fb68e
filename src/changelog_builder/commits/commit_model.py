"""
Data model for parsed commit messages.

A :class:`ClassifiedCommit` is the structured form of one raw commit
message. It is immutable; the renderer only reads ``type``, ``subject``
and ``header``, the remaining fields are kept for callers that want them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class ClassifiedCommit:
    """Representation of a parsed commit message.

    Attributes
    ----------
    type : Optional[str]
        Lowercase Conventional Commit type (``feat``, ``fix``, ...), or
        ``None`` when the header does not follow ``type(scope): subject``.
    scope : Optional[str]
        Text inside the parentheses after the type, if any.
    subject : str
        Trimmed text after the colon on the header line. May be empty.
    header : str
        The verbatim first line of the message.
    body : Optional[str]
        Free text between the header and the footer.
    footer : Optional[str]
        Trailing block of trailers such as ``Refs: #12``.
    breaking : bool
        True when the header has ``!`` before the colon or the footer
        carries a ``BREAKING CHANGE`` trailer.
    notes : Tuple[str, ...]
        Texts of the breaking change trailers, in order.
    """

    type: Optional[str]
    scope: Optional[str]
    subject: str
    header: str
    body: Optional[str] = None
    footer: Optional[str] = None
    breaking: bool = False
    notes: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def display_text(self) -> str:
        """Text shown for this commit: the subject, or the header when empty."""
        return self.subject or self.header
