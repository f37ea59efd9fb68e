"""
Command line interface for the changelog_builder tool.

This module defines the ``main`` function which is used as the entry
point when executing the ``changelog-builder`` command. It collects the
commit messages of a release range, either from the local Git history
or from a JSON file, runs them through the classifier and renderer, and
writes the changelog to standard output or a file.

Only the changelog itself is written to standard output; status
messages go to standard error so the output can be piped or captured.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import IO, List, Optional

import click

from changelog_builder import __version__
from changelog_builder.commits.message_reader import InputError, read_messages
from changelog_builder.config.loader import ConfigError, load_config
from changelog_builder.rendering.renderer import TIE_BREAKS, generate_changelog
from changelog_builder.rendering.section_model import EMOJI_STYLES
from changelog_builder.vcs.git_client import GitClient, GitError

# Create a module-level logger with a null handler; records reach the
# root handlers once main() configures logging.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_INVALID_USAGE = 2
EXIT_NO_REPO = 3
EXIT_CONFIG_ERROR = 4
EXIT_VCS_FAILURE = 5
EXIT_INPUT_ERROR = 6


# ---------------------------------------------------------------------------
# Status display utilities
# ---------------------------------------------------------------------------

class ProgressIndicator:
    """Report the start and duration of a step on standard error."""

    def __init__(self, message: str):
        self.message = message
        self.start_time = None

    def __enter__(self):
        self.start_time = time.time()
        click.echo(f"→ {self.message}...", err=True)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            elapsed = time.time() - self.start_time
            click.echo(f"  ✓ Done ({elapsed:.1f}s)", err=True)
        return False


def print_info(message: str, indent: int = 0):
    """Print an info message."""
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}", err=True)


def print_success(message: str, indent: int = 0):
    """Print a success message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {message}", err=True)


def print_warning(message: str, indent: int = 0):
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {message}", err=True)


def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


# ---------------------------------------------------------------------------
# Core functionality
# ---------------------------------------------------------------------------

def collect_from_git(revision_range: str, repo_root: Optional[Path]) -> List[str]:
    """Return the commit messages of ``revision_range`` in ``repo_root``.

    Raises
    ------
    click.exceptions.Exit
        With EXIT_NO_REPO outside a Git repository, EXIT_INVALID_USAGE for a
        malformed range, or EXIT_VCS_FAILURE when Git fails.
    """
    if repo_root is None:
        print_error("Current directory is not inside a Git repository.")
        raise click.exceptions.Exit(EXIT_NO_REPO)

    try:
        base, head = GitClient.parse_range(revision_range)
    except GitError as exc:
        print_error(str(exc))
        raise click.exceptions.Exit(EXIT_INVALID_USAGE)

    try:
        with ProgressIndicator(f"Reading commits {base}..{head}"):
            messages = GitClient(repo_root).get_commit_messages(base, head)
    except GitError as exc:
        print_error(f"Git error: {exc}")
        raise click.exceptions.Exit(EXIT_VCS_FAILURE)
    return messages


def collect_from_file(stream: IO[str]) -> List[str]:
    """Return the commit messages stored as a JSON array in ``stream``."""
    try:
        return read_messages(stream)
    except InputError as exc:
        print_error(f"Input error: {exc}")
        raise click.exceptions.Exit(EXIT_INPUT_ERROR)


@click.command()
@click.option("--range", "revision_range", metavar="BASE..HEAD",
              help="Read the commits of this revision range from the local Git repository.")
@click.option("--input", "input_file", type=click.File("r", encoding="utf-8"),
              help="Read commit messages from a JSON array file ('-' for stdin).")
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Path to a JSON configuration file.")
@click.option("--emoji-style", type=click.Choice(EMOJI_STYLES),
              help="Render unicode glyphs or GitHub shortcodes.")
@click.option("--tie-break", type=click.Choice(TIE_BREAKS),
              help="Order of categories that share the same rank.")
@click.option("--output", "output_path", type=click.Path(dir_okay=False, writable=True, path_type=Path),
              help="Write the changelog to this file instead of stdout.")
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="changelog-builder")
def main(
    revision_range: Optional[str],
    input_file: Optional[IO[str]],
    config_path: Optional[Path],
    emoji_style: Optional[str],
    tie_break: Optional[str],
    output_path: Optional[Path],
    verbose: bool,
) -> None:
    """Build a categorized changelog from conventional commit messages.

    Commits are read either from a Git revision range (--range v1.0..v1.1)
    or from a JSON array of messages (--input commits.json).
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    try:
        if (revision_range is None) == (input_file is None):
            print_error("Specify exactly one of --range or --input.")
            raise click.exceptions.Exit(EXIT_INVALID_USAGE)

        repo_root = GitClient.find_repo_root(Path.cwd())
        logger.debug("Repository root: %s", repo_root)

        try:
            config = load_config(config_path, repo_root)
        except ConfigError as exc:
            print_error(f"Configuration error: {exc}")
            raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

        emoji_style = emoji_style or config["emoji_style"]
        tie_break = tie_break or config["tie_break"]

        if input_file is not None:
            messages = collect_from_file(input_file)
        else:
            messages = collect_from_git(revision_range, repo_root)

        print_info(f"Found {len(messages)} commit{'s' if len(messages) != 1 else ''}")

        changelog = generate_changelog(messages, emoji_style=emoji_style, tie_break=tie_break)
        if not changelog:
            print_warning("No commits in range; the changelog is empty.")

        if output_path is not None:
            output_path.write_text(changelog, encoding="utf-8")
            print_success(f"Changelog written to {output_path}")
        elif changelog:
            click.echo(changelog)

        raise click.exceptions.Exit(EXIT_SUCCESS)

    except click.exceptions.Exit:
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        raise click.exceptions.Exit(EXIT_GENERIC_ERROR)
