"""
Tests for CommandRegistry dispatch, reload and logging of rejected calls.
"""

import logging

import pytest

from chatmands.commands import (
    AuthorityLevel,
    CommandCall,
    CommandRegistry,
    CommandTree,
    HelloCommand,
    ReloadConfig,
    Say,
    SayCommand,
    builtin_commands,
    configured_commands,
)
from chatmands.config import CommandsConfig
from chatmands.grammar import CommandBuilder, command

REGISTRY_LOGGER = "chatmands.commands.registry"

pytestmark = pytest.mark.unit


@pytest.fixture
def registry(commands_config):
    return CommandRegistry(commands_config)


def viewer(message):
    return CommandCall(message, AuthorityLevel.VIEWER)


class TestBuiltinCommands:
    """The hardcoded command set."""

    def test_builtin_set(self):
        trees = builtin_commands()

        assert [tree.root.literals for tree in trees] == [["!reload"], ["!hello"], ["!bye"], ["!gn"]]

    def test_reload_requires_broadcaster(self):
        reload_tree = builtin_commands()[0]

        assert reload_tree.authority_level is AuthorityLevel.BROADCASTER
        assert reload_tree.cooldown == 0.0

    def test_greetings_open_to_viewers(self):
        for tree in builtin_commands()[1:]:
            assert tree.authority_level is AuthorityLevel.VIEWER
            assert tree.cooldown == 30.0

    @pytest.mark.parametrize("message, reply", [
        ("!hello World", "Hi, World ^^"),
        ("!bye World", "cya, World!"),
        ("!gn World", "Good night, World ^^"),
    ])
    def test_greeting_dispatch(self, registry, message, reply):
        assert registry.dispatch(viewer(message)) == [Say(reply)]


class TestConfiguredCommands:
    """Commands built from the configuration."""

    def test_one_tree_per_response(self):
        trees = configured_commands(CommandsConfig(cooldown=5, responses={"a": "A", "b": "B"}))

        assert [tree.root.literals for tree in trees] == [["!a"], ["!b"]]
        assert all(tree.cooldown == 5.0 for tree in trees)
        assert all(tree.authority_level is AuthorityLevel.VIEWER for tree in trees)

    def test_configured_dispatch(self, registry):
        assert registry.dispatch(viewer("!lurk")) == [Say("Enjoy the lurk ^^")]

    def test_configured_takes_no_arguments(self, registry):
        assert registry.dispatch(viewer("!lurk now")) == []

    def test_empty_config(self):
        registry = CommandRegistry()

        assert registry.configured == []
        assert registry.dispatch(viewer("!lurk")) == []


class TestDispatch:
    """Dispatch over all trees."""

    def test_no_match_is_empty(self, registry):
        assert registry.dispatch(viewer("hello everyone")) == []

    def test_configured_trees_come_first(self, registry):
        trees = list(registry.trees())

        assert trees[:len(registry.configured)] == registry.configured
        assert trees[len(registry.configured):] == registry.hardcoded

    def test_multiple_trees_fire(self):
        hardcoded = [CommandTree(command("!x", SayCommand("two")))]
        registry = CommandRegistry(CommandsConfig(responses={"x": "one"}), hardcoded=hardcoded)

        assert registry.dispatch(viewer("!x")) == [Say("one"), Say("two")]

    def test_cooldown_suppresses_repeat(self, registry):
        assert registry.dispatch(viewer("!hello World")) == [Say("Hi, World ^^")]
        assert registry.dispatch(viewer("!hello World")) == []

        registry.update(30)

        assert registry.dispatch(viewer("!hello World")) == [Say("Hi, World ^^")]

    def test_update_reaches_configured_trees(self, registry):
        registry.dispatch(viewer("!lurk"))
        registry.update(29)
        assert registry.dispatch(viewer("!lurk")) == []

        registry.update(1)
        assert registry.dispatch(viewer("!lurk")) == [Say("Enjoy the lurk ^^")]

    def test_reload_command_authority(self, registry):
        assert registry.dispatch(viewer("!reload")) == []
        assert registry.dispatch(CommandCall("!reload", AuthorityLevel.BROADCASTER)) == [ReloadConfig()]
        # no cooldown on reload
        assert registry.dispatch(CommandCall("!reload", AuthorityLevel.HOST)) == [ReloadConfig()]

    def test_extra_greeting_argument_is_ignored(self, registry):
        assert registry.dispatch(viewer("!hello World Extra")) == []


class TestReload:
    """Replacing the configured commands."""

    def test_reload_replaces_commands(self, registry):
        registry.reload(CommandsConfig(responses={"discord": "Join us"}))

        assert registry.dispatch(viewer("!lurk")) == []
        assert registry.dispatch(viewer("!discord")) == [Say("Join us")]

    def test_reload_resets_configured_cooldowns(self, registry):
        registry.dispatch(viewer("!lurk"))
        registry.reload(CommandsConfig(responses={"lurk": "Enjoy the lurk ^^"}))

        assert registry.dispatch(viewer("!lurk")) == [Say("Enjoy the lurk ^^")]

    def test_reload_keeps_builtin_cooldowns(self, registry):
        registry.dispatch(viewer("!hello World"))
        registry.reload(CommandsConfig())

        assert registry.dispatch(viewer("!hello World")) == []

    def test_reload_applies_new_cooldown(self, registry):
        registry.reload(CommandsConfig(cooldown=0, responses={"lurk": "x"}))

        assert registry.configured[0].cooldown == 0.0


class TestRejectionLogging:
    """Rejected calls are logged, grammar mismatches are not."""

    def test_mismatch_is_silent(self, registry, caplog):
        caplog.set_level(logging.DEBUG, logger=REGISTRY_LOGGER)

        registry.dispatch(viewer("just chatting"))

        assert caplog.records == []

    def test_unauthorized_logged_at_debug(self, registry, caplog):
        caplog.set_level(logging.DEBUG, logger=REGISTRY_LOGGER)

        registry.dispatch(viewer("!reload"))

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.DEBUG
        assert "Command rejected: Unauthorized" in record.getMessage()

    def test_cooldown_logged_at_debug(self, registry, caplog):
        caplog.set_level(logging.DEBUG, logger=REGISTRY_LOGGER)
        registry.dispatch(viewer("!hello World"))

        registry.dispatch(viewer("!hello World"))

        assert any(
            "Command rejected: Command is on cooldown" in record.getMessage()
            and record.levelno == logging.DEBUG
            for record in caplog.records
        )

    def test_configured_arity_error_logged_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger=REGISTRY_LOGGER)
        registry = CommandRegistry(hardcoded=[])
        registry.configured = [CommandTree(command("!hello {word} {word}", HelloCommand()))]

        assert registry.dispatch(viewer("!hello World Extra")) == []

        rejections = [record for record in caplog.records if record.levelno >= logging.WARNING
                      or "could not be formed" in record.getMessage()]
        assert len(rejections) == 1
        assert rejections[0].levelno == logging.DEBUG
        assert "Action could not be formed: Too many arguments" in rejections[0].getMessage()

    def test_builtin_arity_error_logged_as_warning(self, caplog):
        caplog.set_level(logging.DEBUG, logger=REGISTRY_LOGGER)
        broken = CommandTree(CommandBuilder().literal("!hello").word().word().finalize(True, HelloCommand()))
        registry = CommandRegistry(hardcoded=[broken])

        assert registry.dispatch(viewer("!hello World Extra")) == []

        warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Built-in command has inconsistent arity: Too many arguments" in warnings[0].getMessage()
