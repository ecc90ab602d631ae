from datetime import date

import pytest

from gooberbot.context import Context, Data, User
from gooberbot.config import get_config_key
from gooberbot.debug import (
    CommandInfo,
    ErrorKind,
    Parameter,
    command_string,
    commands_markdown,
    delete_config,
    raise_example_error,
)
from gooberbot.emoji import FLOOF_MUG
from gooberbot.errors import CustomData, UserError
from gooberbot.storage import JsonStore, NotFoundError


def test_command_string_parameters():
    command = CommandInfo(
        "history",
        (Parameter("user", True), Parameter("all", False)),
        qualified_name="strike history",
    )
    assert command_string(command) == "- `/strike history <user> [all]`\n"


def test_command_string_markers():
    early = CommandInfo("hamburger", custom_data=CustomData(early_access=True))
    assert command_string(early).endswith(" (Early Access)\n")
    assert command_string(CommandInfo("vote")).endswith(" ❤️\n")


def test_command_string_group_lists_subcommands():
    give = CommandInfo("give", (Parameter("user"),), qualified_name="strike give")
    repeal = CommandInfo("repeal", (Parameter("user"),), qualified_name="strike repeal")
    group = CommandInfo("strike", subcommands=(give, repeal), category="Strikes")
    assert command_string(group) == command_string(give) + command_string(repeal)


def test_commands_markdown_order():
    commands = [
        CommandInfo("anon", category="Other"),
        CommandInfo("boop", category="Silly"),
        CommandInfo("hug", category="Silly"),
        CommandInfo("config", category="Config"),
        CommandInfo("debug"),
    ]
    text = commands_markdown(commands, date(2025, 1, 5))
    assert text.startswith("```md\n## Commands\n\n*Last updated Jan 5, 2025*\n")
    assert text.endswith("\n```")
    assert text.index("### Silly") < text.index("### Config") < text.index("### Other")
    assert "/debug" not in text


def test_commands_markdown_requires_other():
    with pytest.raises(ValueError):
        commands_markdown([CommandInfo("boop", category="Silly")], date(2025, 1, 5))


@pytest.mark.parametrize(
    ("kind", "error", "text"),
    [
        (ErrorKind.USER, UserError, "user error"),
        (ErrorKind.INTERNAL, RuntimeError, "internal error"),
        (ErrorKind.PANIC, AssertionError, "panic"),
    ],
)
def test_raise_example_error(kind, error, text):
    with pytest.raises(error, match=text):
        raise_example_error(kind)


@pytest.mark.asyncio
async def test_delete_config():
    store = JsonStore()
    ctx = Context(Data(store), User(1, "mod"), bot_id=99, channel_id=5, guild_id=7)
    key = get_config_key(ctx)
    store.write_serialized(key, {"anon_enabled": True})
    reply = await delete_config(ctx)
    assert reply.content == f"Server config file deleted {FLOOF_MUG}"
    assert reply.ephemeral
    with pytest.raises(NotFoundError):
        store.read_serialized(key)