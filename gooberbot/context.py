"""Invocation context shared by all commands."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Awaitable, Callable

from gooberbot.storage import JsonStore

COLOR_BLUE = 0x3498DB
COLOR_RED = 0xE74C3C
COLOR_FOOYOO = 0x11CA80
COLOR_BLURPLE = 0x5865F2


def mention_user(user_id: int) -> str:
    """Markup that mentions a user."""
    return f"<@{user_id}>"


def mention_channel(channel_id: int) -> str:
    """Markup that mentions a channel."""
    return f"<#{channel_id}>"


@dataclass(frozen=True)
class User:
    """A chat user."""

    id: int
    name: str = ""
    avatar_url: str | None = None

    def mention(self) -> str:
        return mention_user(self.id)


@dataclass
class Reply:
    """A message to send; ``allowed_user_mentions`` of None allows all pings."""

    content: str | None = None
    embeds: list[dict[str, Any]] = field(default_factory=list)
    ephemeral: bool = False
    attachments: dict[str, bytes] = field(default_factory=dict)
    allowed_user_mentions: tuple[int, ...] | None = None


@dataclass
class Data:
    """State available to every command invocation."""

    store: JsonStore
    vote_checker: Callable[[int], Awaitable[bool]] | None = None


Transport = Callable[[int, Reply], Awaitable[None]]


@dataclass
class Context:
    """One command invocation: who ran it, where, and what was sent back."""

    data: Data
    author: User
    bot_id: int
    channel_id: int
    guild_id: int | None = None
    ephemeral: bool = False
    transport: Transport | None = None
    sent: list[Reply] = field(default_factory=list)

    async def send(self, reply: Reply) -> Reply:
        """Send ``reply`` in the invoking channel and return what was sent."""
        if self.ephemeral and not reply.ephemeral:
            reply = replace(reply, ephemeral=True)
        self.sent.append(reply)
        if self.transport is not None:
            await self.transport(self.channel_id, reply)
        return reply

    async def say(self, content: str) -> Reply:
        """Send a plain text reply."""
        return await self.send(Reply(content=content))