import io

import pytest
from rich.console import Console

from argtree import Argtree, ConsoleEventHandler, command
from argtree.event_handler import (
    CommandHelpEvent,
    GlobalHelpEvent,
    NoopEventHandler,
    VersionEvent,
)
from argtree.parser import boolean, number, positional, string
from argtree.themes import get_argtree_theme


@pytest.fixture
def console():
    return Console(
        file=io.StringIO(), width=200, color_system=None, theme=get_argtree_theme()
    )


def output(console):
    return console.file.getvalue()


@pytest.fixture
def commands():
    migrate = command(
        "migrate",
        aliases=["m"],
        description="Run migrations",
        long_description="Apply every pending migration to the target database.",
        options={
            "target": string().enum("up", "down").required().desc("Direction"),
            "steps": number().int().min(1).default(1),
            "dry": boolean().alias("d"),
            "secret": string().hide(),
        },
        handler=lambda options: options,
    )
    db = command("db", description="Database tools", subcommands=[migrate])
    greet = command(
        "greet",
        aliases=["hi"],
        description="Say hello",
        options={"name": positional().required()},
        handler=lambda options: options,
    )
    internal = command("internal", description="Do not show", hidden=True)
    return [db, greet, internal]


@pytest.mark.asyncio
async def test_global_help_lists_visible_commands(console, commands):
    atr = Argtree(
        commands, event_handler=ConsoleEventHandler(console=console, program_name="tool")
    )
    await atr.run([])
    text = output(console)
    assert "usage: tool <command> [options]" in text
    assert "db" in text and "Database tools" in text
    assert "greet" in text and "(hi)" in text
    assert "internal" not in text


@pytest.mark.asyncio
async def test_command_help_shows_options(console, commands):
    atr = Argtree(
        commands, event_handler=ConsoleEventHandler(console=console, program_name="tool")
    )
    await atr.run(["db", "migrate", "--help"])
    text = output(console)
    assert "usage: tool db migrate [options]" in text
    assert "Apply every pending migration" in text
    assert "aliases: m" in text
    assert "--target {up|down}" in text
    assert "(required)" in text
    assert "Direction" in text
    assert "--steps <integer>" in text
    assert "[default: 1]" in text
    assert "[min: 1]" in text
    assert "--dry, -d [true|false]" in text
    assert "--secret" not in text
    assert "-h, --help" in text


@pytest.mark.asyncio
async def test_group_help_lists_subcommands(console, commands):
    atr = Argtree(
        commands, event_handler=ConsoleEventHandler(console=console, program_name="tool")
    )
    await atr.run(["help", "db"])
    text = output(console)
    assert "usage: tool db <subcommand>" in text
    assert "subcommands:" in text
    assert "migrate" in text and "Run migrations" in text


@pytest.mark.asyncio
async def test_positional_usage(console, commands):
    atr = Argtree(
        commands, event_handler=ConsoleEventHandler(console=console, program_name="tool")
    )
    await atr.run(["greet", "-h"])
    text = output(console)
    assert "usage: tool greet <name>" in text
    assert "positional:" in text


@pytest.mark.asyncio
async def test_custom_global_help_text(console, commands):
    handler = ConsoleEventHandler(
        console=console, program_name="tool", help="Custom [help] text"
    )
    await Argtree(commands, event_handler=handler).run(["--help"])
    assert output(console).strip() == "Custom [help] text"


@pytest.mark.asyncio
async def test_custom_command_help_callable(console):
    seen = []

    async def custom_help():
        seen.append("called")

    cmd = command("cmd", help=custom_help, handler=lambda options: None)
    handler = ConsoleEventHandler(console=console)
    await Argtree([cmd], event_handler=handler).run(["cmd", "--help"])
    assert seen == ["called"]
    assert output(console) == ""


@pytest.mark.asyncio
async def test_version_output(console, commands):
    handler = ConsoleEventHandler(console=console, version="1.2.3")
    await Argtree(commands, event_handler=handler).run(["--version"])
    assert output(console).strip() == "1.2.3"


@pytest.mark.asyncio
async def test_missing_version(console, commands):
    handler = ConsoleEventHandler(console=console)
    await Argtree(commands, event_handler=handler).run(["-v"])
    assert "No version information available." in output(console)


def test_default_handler_uses_runner_settings(commands):
    atr = Argtree(commands, program_name="tool", version="9.9.9")
    assert isinstance(atr.event_handler, ConsoleEventHandler)
    assert atr.event_handler.program_name == "tool"
    assert atr.event_handler.version == "9.9.9"


@pytest.mark.asyncio
async def test_noop_handler_records_events(commands):
    events = NoopEventHandler()
    atr = Argtree(commands, event_handler=events)
    assert events.last is None
    await atr.run([])
    await atr.run(["greet", "--help"])
    await atr.run(["--version"])
    assert [type(event) for event in events.events] == [
        GlobalHelpEvent,
        CommandHelpEvent,
        VersionEvent,
    ]
    assert [event.type for event in events.events] == [
        "global_help",
        "command_help",
        "version",
    ]


@pytest.mark.asyncio
async def test_unsupported_event_rejected(console):
    with pytest.raises(TypeError):
        await ConsoleEventHandler(console=console)(object())
