"""Commands that help with developing the bot."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from gooberbot.config import get_config_key
from gooberbot.context import Context, Reply
from gooberbot.emoji import FLOOF_MUG
from gooberbot.errors import CustomData, UserError

OTHER_CATEGORY = "Other"


class ErrorKind(Enum):
    """Kinds of error the error example can raise."""

    USER = "User"
    INTERNAL = "Internal"
    PANIC = "Panic"


@dataclass(frozen=True)
class Parameter:
    """A command parameter."""

    name: str
    required: bool = True


@dataclass(frozen=True)
class CommandInfo:
    """What the command list needs to know about a command."""

    name: str
    parameters: tuple[Parameter, ...] = ()
    subcommands: tuple[CommandInfo, ...] = ()
    category: str | None = None
    custom_data: CustomData | None = None
    qualified_name: str | None = None

    @property
    def full_name(self) -> str:
        return self.qualified_name or self.name


def command_string(command: CommandInfo) -> str:
    """Markdown list lines describing ``command`` or, for a group, its subcommands."""
    if command.subcommands:
        return "".join(command_string(sub) for sub in command.subcommands)
    parts = [f"- `/{command.full_name}"]
    for parameter in command.parameters:
        parts.append(f" <{parameter.name}>" if parameter.required else f" [{parameter.name}]")
    parts.append("`")
    if command.custom_data is not None and command.custom_data.early_access:
        parts.append(" (Early Access)")
    if command.name == "vote":
        parts.append(" ❤️")
    parts.append("\n")
    return "".join(parts)


def commands_markdown(commands: list[CommandInfo], today: date) -> str:
    """The command list in Markdown, largest category first and "Other" last."""
    categories: dict[str, list[CommandInfo]] = {}
    for command in commands:
        if command.category is not None:
            categories.setdefault(command.category, []).append(command)
    if OTHER_CATEGORY not in categories:
        raise ValueError('there should be a command category called "Other"')
    keys = sorted(categories, key=lambda key: -len(categories[key]))
    keys.remove(OTHER_CATEGORY)
    keys.append(OTHER_CATEGORY)

    text = f"## Commands\n\n*Last updated {today:%b} {today.day}, {today.year}*\n"
    for key in keys:
        text += f"\n### {key}\n\n"
        text += "".join(command_string(command) for command in categories[key])
    return f"```md\n{text.rstrip()}\n```"


def raise_example_error(kind: ErrorKind) -> None:
    """Fail on purpose with the given kind of error."""
    if kind is ErrorKind.USER:
        raise UserError(
            "this is an example of extra context: this is an example of a user error"
        )
    if kind is ErrorKind.INTERNAL:
        raise RuntimeError(
            "this is an example of extra context: "
            "this is an example of an internal error"
        )
    # Stands in for an unrecoverable bug.
    raise AssertionError("this is an example of a panic")


async def delete_config(ctx: Context) -> Reply:
    """Delete the config of the current server."""
    ctx.data.store.delete(get_config_key(ctx))
    return await ctx.send(
        Reply(content=f"Server config file deleted {FLOOF_MUG}", ephemeral=True)
    )