import pytest

from indent_engine.commands import (
    DEFAULT_COMMANDS,
    CommandConflictError,
    CommandHandler,
    CommandRef,
    CommandRegistry,
    load_default_commands,
)


def make_command(command_id: str = "test.command") -> CommandRef:
    return CommandRef(id=command_id, handler=lambda view, args: None)


def test_register_command_success() -> None:
    registry = CommandRegistry()
    command = make_command()

    registry.register(command)

    assert registry.stats().command_count == 1
    assert list(registry.iter_commands()) == [command]
    assert "test.command" in registry


def test_register_duplicate_raises_conflict() -> None:
    registry = CommandRegistry()
    registry.register(make_command())

    with pytest.raises(CommandConflictError) as excinfo:
        registry.register(make_command())

    assert excinfo.value.command.id == "test.command"


def test_register_with_replace() -> None:
    registry = CommandRegistry()
    first = make_command()
    second = make_command()

    registry.register(first)
    registry.register(second, replace=True)

    assert registry.get("test.command") is second
    assert registry.revision() == 2


def test_unregister_command() -> None:
    registry = CommandRegistry()
    command = make_command()
    registry.register(command)

    assert registry.unregister("test.command") == command
    assert registry.unregister("test.command") is None
    assert registry.stats().command_count == 0


def test_get_unknown_command_raises_key_error() -> None:
    with pytest.raises(KeyError, match="missing"):
        CommandRegistry().get("missing")


def test_command_ref_validation() -> None:
    with pytest.raises(ValueError):
        CommandRef(id="", handler=lambda view, args: None)
    with pytest.raises(TypeError):
        CommandRef(id="broken", handler="not callable")  # type: ignore[arg-type]

    command = make_command("named")
    assert command.telemetry_name == "named"


def test_load_default_commands() -> None:
    registry = load_default_commands(CommandRegistry())

    assert registry.stats().command_ids == ("indent", "unindent")
    assert len(DEFAULT_COMMANDS) == 2


def test_load_default_commands_include_filter() -> None:
    registry = load_default_commands(CommandRegistry(), include=("unindent",))

    assert registry.stats().command_ids == ("unindent",)


def test_handler_with_custom_registry_skips_defaults() -> None:
    registry = CommandRegistry()

    handler = CommandHandler(registry)

    assert handler.registry is registry
    assert registry.stats().command_count == 0
    assert "indent" in CommandHandler().registry
