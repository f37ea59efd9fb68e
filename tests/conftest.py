import logging

import pytest

from changelog_builder.config.loader import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def isolate_config_env(monkeypatch):
    """Keep a developer's CHANGELOG_BUILDER_CONFIG from leaking into tests.

    Several tests expect the default configuration, which only applies
    when no configuration file is requested through the environment.
    """
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    yield


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo the ``logging.basicConfig(force=True)`` done by the CLI.

    The CLI binds a stream handler to the stderr that CliRunner swaps in;
    once the runner closes it, later log records would hit a closed stream.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
