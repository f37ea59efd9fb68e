"""
Changelog rendering.

The renderer groups classified commits by category, orders the groups by
the category table and formats them as Markdown sections::

    ### ✨ Features:
    - Add login

    ### 🐛 Bug Fixes:
    - Null check

Rendering is deterministic: the same commits in the same order always
produce the same text. Categories sharing an ``order`` value are laid
out according to the ``tie_break`` policy, either the order in which
each category first appears in the input (``first-seen``, the default)
or by category key (``alphabetical``).
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from changelog_builder.commits.commit_model import ClassifiedCommit
from changelog_builder.commits.commit_parser import classify_all

from .categories import bucket_key, get_category
from .section_model import EMOJI_STYLES, ChangelogSection


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


TIE_BREAKS = ("first-seen", "alphabetical")

SECTION_SEPARATOR = "\n\n"

# Control annotation removed verbatim from display text
CI_SKIP_ANNOTATION = "[ci skip]"


def format_line(commit: ClassifiedCommit) -> str:
    """Format a single commit as a changelog list item.

    The subject is used when present, otherwise the full header. Every
    literal ``[ci skip]`` is removed and the text trimmed first; only then
    is the first letter capitalized, so ``"[ci skip] bump"`` becomes
    ``- Bump`` rather than ``- bump``. Whitespace around an annotation in
    the middle of the text is left as it was.
    """
    text = commit.display_text.replace(CI_SKIP_ANNOTATION, "").strip()
    return f"- {text[:1].upper()}{text[1:]}"


def group_commits(commits: Iterable[ClassifiedCommit]) -> Dict[str, List[ClassifiedCommit]]:
    """Partition ``commits`` by category key.

    The returned dict is ordered by the first appearance of each key and
    every list keeps the input order of its commits.
    """
    grouped: Dict[str, List[ClassifiedCommit]] = {}
    for commit in commits:
        grouped.setdefault(bucket_key(commit.type), []).append(commit)
    return grouped


def order_keys(keys: Sequence[str], tie_break: str = "first-seen") -> List[str]:
    """Sort category keys by rank, resolving equal ranks with ``tie_break``."""
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"Unknown tie-break policy: {tie_break!r}")
    if tie_break == "alphabetical":
        return sorted(keys, key=lambda key: (get_category(key).order, key))
    # sorted() is stable, so equal ranks keep their first-seen order
    return sorted(keys, key=lambda key: get_category(key).order)


def build_sections(
    commits: Iterable[ClassifiedCommit], tie_break: str = "first-seen"
) -> List[ChangelogSection]:
    """Group, order and format ``commits`` into changelog sections."""
    grouped = group_commits(commits)
    sections = [
        ChangelogSection(
            category=get_category(key),
            lines=tuple(format_line(commit) for commit in grouped[key]),
        )
        for key in order_keys(list(grouped), tie_break)
    ]
    logger.debug(
        "Built %d section(s): %s",
        len(sections),
        ", ".join(f"{s.category.key}={len(s.lines)}" for s in sections),
    )
    return sections


def render_sections(sections: Iterable[ChangelogSection], emoji_style: str = "unicode") -> str:
    """Join rendered sections with a blank line between them."""
    return SECTION_SEPARATOR.join(section.to_markdown(emoji_style) for section in sections)


def render(
    commits: Iterable[ClassifiedCommit],
    *,
    emoji_style: str = "unicode",
    tie_break: str = "first-seen",
) -> str:
    """Render classified commits as a changelog.

    Parameters
    ----------
    commits : Iterable[ClassifiedCommit]
        Commits in the order returned by the version control comparison.
    emoji_style : str, optional
        ``unicode`` for glyphs such as ``✨`` or ``shortcode`` for
        ``:sparkles:``. Defaults to ``unicode``.
    tie_break : str, optional
        ``first-seen`` or ``alphabetical``. Defaults to ``first-seen``.

    Returns
    -------
    str
        The changelog text, or an empty string when there are no commits.

    Raises
    ------
    ValueError
        If ``emoji_style`` or ``tie_break`` is not a known value.
    """
    if emoji_style not in EMOJI_STYLES:
        raise ValueError(f"Unknown emoji style: {emoji_style!r}")
    return render_sections(build_sections(commits, tie_break), emoji_style)


def generate_changelog(
    messages: Iterable[Optional[str]],
    *,
    emoji_style: str = "unicode",
    tie_break: str = "first-seen",
) -> str:
    """Classify raw commit messages and render them in one step."""
    return render(classify_all(messages), emoji_style=emoji_style, tie_break=tie_break)
