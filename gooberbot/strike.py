"""Strikes: a moderation record of rule infractions for server members."""

from __future__ import annotations

import calendar
import math
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any

from gooberbot.config import load_config
from gooberbot.context import COLOR_FOOYOO, COLOR_RED, Context, Reply, User, mention_user
from gooberbot.emoji import FLOOF_HAPPY, FLOOF_INNOCENT, FLOOF_SAD
from gooberbot.errors import UserError, contextualize_log_channel_error
from gooberbot.storage import read_or_write_default

RULE_MAX_LENGTH = 7
VIEW_AUDIT_LOG = "VIEW_AUDIT_LOG"


def _unix(moment: datetime) -> int:
    return math.floor(moment.timestamp())


def _format_time(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _parse_time(raw: Any) -> datetime:
    if not isinstance(raw, str):
        raise ValueError(f"expected a timestamp string, got {raw!r}")
    text = raw[:-1] + "+00:00" if raw.endswith("Z") else raw
    moment = datetime.fromisoformat(text)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def _parse_id(raw: Any) -> int:
    if isinstance(raw, bool):
        raise ValueError(f"expected an id, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.isdigit():
        return int(raw)
    raise ValueError(f"expected an id, got {raw!r}")


def parse_rule(value: Any) -> str | None:
    """Accept a stored rule given as a non-negative integer, a string, or null."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return str(value)
    raise ValueError(f"expected an integer, a string, or none, got {value!r}")


def add_months(moment: datetime, months: int) -> datetime:
    """Add calendar months, clamping the day to the end of the target month."""
    if months < 0:
        raise ValueError("months must not be negative")
    total = moment.year * 12 + (moment.month - 1) + months
    year, month_index = divmod(total, 12)
    if not 1 <= year <= 9999:
        raise OverflowError("failed to create timestamp from months")
    month = month_index + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


@dataclass(frozen=True)
class Strike:
    """One strike given to a member."""

    issuer: int
    issued: datetime
    rule: str | None = None
    comment: str | None = None
    expiration: datetime | None = None
    repealer: int | None = None

    def to_string(self, user_mention: str, with_issuer: bool, with_issued: bool) -> str:
        """Describe the strike as a sentence about the struck user."""
        on = f" on <t:{_unix(self.issued)}:d>" if with_issued else ""
        for_rule = f" for breaking **rule {self.rule}**" if self.rule is not None else ""
        with_comment = (
            f' with comment **"{self.comment}"**' if self.comment is not None else ""
        )
        expires = (
            f" which expires <t:{_unix(self.expiration)}:R>"
            if self.expiration is not None
            else ""
        )
        ave = f"ave {user_mention} a strike{on}{for_rule}{with_comment}{expires}"
        message = f"{mention_user(self.issuer)} g{ave}" if with_issuer else f"G{ave}"
        if self.repealer is not None:
            return f"~~{message}~~ **repealed** by {mention_user(self.repealer)}"
        return message

    def is_expired(self, now: datetime | None = None) -> bool:
        current = now if now is not None else datetime.now(timezone.utc)
        return self.expiration is not None and self.expiration <= current

    def to_dict(self) -> dict[str, Any]:
        return {
            "issuer": str(self.issuer),
            "issued": _format_time(self.issued),
            "rule": self.rule,
            "comment": self.comment,
            "expiration": (
                _format_time(self.expiration) if self.expiration is not None else None
            ),
            "repealer": str(self.repealer) if self.repealer is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Strike:
        try:
            issuer = data["issuer"]
            issued = data["issued"]
        except KeyError as missing:
            raise ValueError(f"strike is missing field {missing}") from None
        expiration = data.get("expiration")
        repealer = data.get("repealer")
        comment = data.get("comment")
        if comment is not None and not isinstance(comment, str):
            raise ValueError(f"strike comment must be a string, got {comment!r}")
        return cls(
            issuer=_parse_id(issuer),
            issued=_parse_time(issued),
            rule=parse_rule(data.get("rule")),
            comment=comment,
            expiration=_parse_time(expiration) if expiration is not None else None,
            repealer=_parse_id(repealer) if repealer is not None else None,
        )


def get_strikes_key(ctx: Context, user_id: int) -> str:
    """Storage key of ``user_id``'s strikes in the server of ``ctx``."""
    if ctx.guild_id is None:
        raise RuntimeError("expected context to be in guild")
    return f"strikes_{ctx.guild_id}_{user_id}"


def pre_strike_command(ctx: Context) -> int | None:
    """Raise if strikes are disabled; otherwise return the log channel, if any."""
    config = load_config(ctx)
    if not config.strikes_enabled:
        raise UserError('strikes are not enabled, see "/config get strikes_enabled"')
    return config.strikes_log_channel


def _load_strikes(ctx: Context, key: str) -> list[Strike]:
    raw = read_or_write_default(ctx.data.store, key, list)
    return [Strike.from_dict(item) for item in raw]


def _save_strikes(ctx: Context, key: str, strikes: list[Strike]) -> None:
    ctx.data.store.write_serialized(key, [strike.to_dict() for strike in strikes])


def _can_view_audit_log(ctx: Context) -> bool:
    """Whether the author holds the View Audit Log permission in this server."""
    permissions = getattr(ctx, "author_permissions", None) or ()
    return VIEW_AUDIT_LOG in permissions


async def _send_to_log_channel(ctx: Context, channel_id: int, reply: Reply) -> None:
    if ctx.transport is None:
        return
    try:
        await ctx.transport(channel_id, reply)
    except Exception as error:
        raise contextualize_log_channel_error(error) from error


async def give(
    ctx: Context,
    user_id: int,
    rule: str | None = None,
    comment: str | None = None,
    expiration: int | None = None,
) -> Strike:
    """Give a strike to a member; ``expiration`` is in months."""
    if rule is not None and len(rule) > RULE_MAX_LENGTH:
        raise UserError(f"rule must be at most {RULE_MAX_LENGTH} characters long")
    if expiration is not None and expiration < 0:
        raise UserError("expiration must not be negative")
    log_channel = pre_strike_command(ctx)
    key = get_strikes_key(ctx, user_id)
    strikes = _load_strikes(ctx, key)
    now = datetime.now(timezone.utc)
    strike = Strike(
        issuer=ctx.author.id,
        issued=now,
        rule=rule,
        comment=comment,
        expiration=add_months(now, expiration) if expiration is not None else None,
    )
    strikes.append(strike)
    _save_strikes(ctx, key, strikes)

    mention = mention_user(user_id)
    await ctx.send(
        Reply(
            content=f"{strike.to_string(mention, False, False)} {FLOOF_SAD}",
            ephemeral=True,
            allowed_user_mentions=(),
        )
    )
    if log_channel is not None:
        embed = {
            "title": "Strike Given",
            "description": strike.to_string(mention, True, False),
            "timestamp": strike.issued,
            "color": COLOR_RED,
        }
        await _send_to_log_channel(
            ctx, log_channel, Reply(embeds=[embed], allowed_user_mentions=())
        )
    return strike


async def history(ctx: Context, user: User | None = None, all: bool | None = None) -> Reply:
    """Show a member's strikes; other members need the View Audit Log permission.

    The author's server permissions are read from ``ctx.author_permissions``.
    """
    pre_strike_command(ctx)
    target = user if user is not None else ctx.author
    if target.id != ctx.author.id and not _can_view_audit_log(ctx):
        raise UserError(
            "you must have the View Audit Log permission to see the strike "
            "history of other users"
        )
    strikes = _load_strikes(ctx, get_strikes_key(ctx, target.id))
    show_all = bool(all)
    now = datetime.now(timezone.utc)
    description = ""
    clean = True
    for i, strike in enumerate(strikes):
        if strike.is_expired(now) or (strike.repealer is not None and not show_all):
            continue
        clean = False
        if i != 0:
            description += "\n"
        description += f"- #{i + 1}: {strike.to_string(target.mention(), True, True)}"
    if clean:
        description = f"All clean! {FLOOF_INNOCENT}"
    embed = {
        "author": {"name": target.name, "icon_url": target.avatar_url},
        "title": "Strike History",
        "description": description,
        "timestamp": now,
        "color": COLOR_FOOYOO if clean else COLOR_RED,
    }
    return await ctx.send(
        Reply(embeds=[embed], ephemeral=True, allowed_user_mentions=())
    )


async def repeal(ctx: Context, user_id: int, strike_i: int | None = None) -> Strike:
    """Repeal a member's strike, numbered from 1 (the most recent by default)."""
    if user_id == ctx.author.id:
        raise UserError("you cannot repeal one of your own strikes")
    log_channel = pre_strike_command(ctx)
    key = get_strikes_key(ctx, user_id)
    strikes = _load_strikes(ctx, key)
    number = strike_i if strike_i is not None else len(strikes)
    if not 1 <= number <= len(strikes):
        raise UserError(f"user does not have a strike #{number}")
    mention = mention_user(user_id)
    target = strikes[number - 1]
    if target.repealer is not None:
        raise UserError(f"{mention}'s strike #{number} has already been repealed")
    repealed = replace(target, repealer=ctx.author.id)
    strikes[number - 1] = repealed
    _save_strikes(ctx, key, strikes)

    await ctx.send(
        Reply(
            content=f"{mention}'s strike #{number} has been repealed {FLOOF_HAPPY}",
            ephemeral=True,
            allowed_user_mentions=(),
        )
    )
    if log_channel is not None:
        embed = {
            "title": "Strike Repealed",
            "description": (
                f"{mention}'s strike #{number} was repealed by {ctx.author.mention()}"
            ),
            "timestamp": datetime.now(timezone.utc),
            "color": COLOR_FOOYOO,
        }
        await _send_to_log_channel(
            ctx, log_channel, Reply(embeds=[embed], allowed_user_mentions=())
        )
    return repealed