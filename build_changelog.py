#!/usr/bin/env python
"""
Thin wrapper script to invoke the changelog_builder CLI.

Running ``python build_changelog.py`` is equivalent to running the
``changelog-builder`` console script installed via ``pyproject.toml``.
"""

from changelog_builder.cli import main


if __name__ == "__main__":
    main(prog_name="changelog-builder")
