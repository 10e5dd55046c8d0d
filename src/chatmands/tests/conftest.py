"""
Shared pytest configuration for Chatmands tests.
"""

import pytest

from chatmands.config import ChatmandsConfig, CommandsConfig, ConfigLoader

from .fixtures.command_fixtures import SAMPLE_CONFIG, hello_tree, write_config


@pytest.fixture
def loader():
    """Config loader that ignores config files in the working directory."""
    return ConfigLoader(search_paths=[])


@pytest.fixture
def commands_config():
    return CommandsConfig(cooldown=30.0, responses={"lurk": "Enjoy the lurk ^^"})


@pytest.fixture
def bot_config(commands_config):
    return ChatmandsConfig(commands=commands_config)


@pytest.fixture
def config_file(tmp_path):
    """Sample configuration written to a temporary YAML file."""
    return write_config(tmp_path / "chatmands.yaml", SAMPLE_CONFIG)


@pytest.fixture
def greeting_tree():
    return hello_tree()


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
