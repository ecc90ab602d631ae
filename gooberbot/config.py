"""Per-server configuration and the commands that read and change it."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import datetime, timezone
from typing import Any

from gooberbot.context import COLOR_BLUE, Context, Reply, mention_channel
from gooberbot.emoji import FLOOF_HAPPY
from gooberbot.errors import UserError
from gooberbot.storage import read_or_write_default


@dataclass(frozen=True)
class ConfigOption:
    """Describes one configuration option; ``kind`` is bool or int (channel)."""

    name: str
    title: str
    description: str
    kind: type


OPTIONS = (
    ConfigOption(
        "strikes_enabled",
        "Strikes Enabled",
        "Whether to enable the strikes moderation system, `/strike`, and its subcommands",
        bool,
    ),
    ConfigOption(
        "strikes_log_channel",
        "Strikes Log Channel",
        "Channel to log strike events in",
        int,
    ),
    ConfigOption(
        "anon_enabled",
        "Anon Enabled",
        "Whether to enable the `/anon` command, which allows members to send messages anonymously",
        bool,
    ),
    ConfigOption(
        "anon_channel",
        "Anon Channel",
        "Channel to restrict `/anon` to, if anon is enabled",
        int,
    ),
    ConfigOption(
        "anon_log_channel",
        "Anon Log Channel",
        "Channel to log `/anon` uses to, if anon is enabled",
        int,
    ),
)
_OPTIONS_BY_NAME = {option.name: option for option in OPTIONS}

_LIST_DESCRIPTION = (
    "These are the configuration options for this server. "
    "Use `/config get <option>` to get more information about an option."
)


def _decode(option: ConfigOption, raw: Any) -> Any:
    if option.kind is bool:
        if not isinstance(raw, bool):
            raise ValueError(f"{option.name} must be a boolean, got {raw!r}")
        return raw
    if raw is None:
        return None
    if isinstance(raw, str) and raw.isdigit():
        return int(raw)
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    raise ValueError(f"{option.name} must be a channel id or null, got {raw!r}")


@dataclass(frozen=True)
class Config:
    """Server configuration; every option has a default."""

    strikes_enabled: bool = False
    strikes_log_channel: int | None = None
    anon_enabled: bool = False
    anon_channel: int | None = None
    anon_log_channel: int | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if _OPTIONS_BY_NAME[item.name].kind is int and value is not None:
                value = str(value)
            result[item.name] = value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a config; missing options take defaults, unknown keys are ignored."""
        values = {
            name: _decode(option, data[name])
            for name, option in _OPTIONS_BY_NAME.items()
            if name in data
        }
        return cls(**values)


def to_config_string(value: Any) -> str:
    """Render an option value as it is shown to users."""
    if value is None:
        return "none"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return mention_channel(value)
    raise TypeError(f"unsupported configuration value: {value!r}")


def get_config_key(ctx: Context) -> str:
    """Storage key of the config for the server in ``ctx``."""
    if ctx.guild_id is None:
        raise RuntimeError("expected context to be in guild")
    return f"config_{ctx.guild_id}"


def load_config(ctx: Context) -> Config:
    """Load the server's config, storing the default if there is none."""
    data = read_or_write_default(
        ctx.data.store, get_config_key(ctx), lambda: Config().to_dict()
    )
    return Config.from_dict(data)


def _option(name: str) -> ConfigOption:
    try:
        return _OPTIONS_BY_NAME[name]
    except KeyError:
        raise UserError(f"unknown configuration option {name!r}") from None


def _field(name: str, value: str) -> dict[str, Any]:
    return {"name": name, "value": value, "inline": False}


async def list_config(ctx: Context) -> Reply:
    """Send all configuration options for this server."""
    config = load_config(ctx)
    embed = {
        "title": "Configuration",
        "description": _LIST_DESCRIPTION,
        "fields": [
            _field(option.title, to_config_string(getattr(config, option.name)))
            for option in OPTIONS
        ],
        "timestamp": datetime.now(timezone.utc),
        "color": COLOR_BLUE,
    }
    return await ctx.send(Reply(embeds=[embed]))


async def get_config(ctx: Context, name: str) -> Reply:
    """Send one configuration option with its description and current value."""
    option = _option(name)
    config = load_config(ctx)
    embed = {
        "title": option.title,
        "description": option.description,
        "fields": [_field("Current Value", to_config_string(getattr(config, name)))],
        "timestamp": datetime.now(timezone.utc),
        "color": COLOR_BLUE,
    }
    return await ctx.send(Reply(embeds=[embed]))


async def set_config(ctx: Context, name: str, value: Any) -> Reply:
    """Change one configuration option and confirm it."""
    option = _option(name)
    if option.kind is bool:
        valid = isinstance(value, bool)
    else:
        valid = value is None or (isinstance(value, int) and not isinstance(value, bool))
    if not valid:
        raise UserError(f"invalid value for {option.title}: {value!r}")
    key = get_config_key(ctx)
    config = replace(load_config(ctx), **{name: value})
    ctx.data.store.write_serialized(key, config.to_dict())
    return await ctx.say(
        f"**{option.title}** has been set to **{to_config_string(value)}** {FLOOF_HAPPY}"
    )