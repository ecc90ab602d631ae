"""Send a message to a channel without revealing who wrote it."""

from __future__ import annotations

from datetime import datetime, timezone

from gooberbot.config import load_config
from gooberbot.context import COLOR_BLURPLE, Context, Reply, mention_channel
from gooberbot.emoji import FLOOF_HAPPY
from gooberbot.errors import UserError, contextualize_log_channel_error


async def _send_to_log_channel(ctx: Context, channel_id: int, reply: Reply) -> None:
    if ctx.transport is None:
        return
    try:
        await ctx.transport(channel_id, reply)
    except Exception as error:
        raise contextualize_log_channel_error(error) from error


async def anon(ctx: Context, message: str) -> Reply:
    """Post ``message`` anonymously in the invoking channel."""
    config = load_config(ctx)
    if not config.anon_enabled:
        raise UserError(
            '/anon is not enabled, the "anon_enabled" config option is set to "false"'
        )
    if config.anon_channel is not None and config.anon_channel != ctx.channel_id:
        raise UserError(
            f"/anon is only allowed in {mention_channel(config.anon_channel)} "
            'due to the "anon_channel" config option being set'
        )
    if ctx.transport is None:
        raise RuntimeError("failed to send anon message: no transport available")

    author = ctx.author
    if config.anon_log_channel is not None:
        embed = {
            "author": {"name": author.name, "icon_url": author.avatar_url},
            "title": "Anonymous Message Sent",
            "description": message,
            "timestamp": datetime.now(timezone.utc),
            "color": COLOR_BLURPLE,
        }
        await _send_to_log_channel(
            ctx,
            config.anon_log_channel,
            Reply(embeds=[embed], allowed_user_mentions=()),
        )

    try:
        await ctx.transport(ctx.channel_id, Reply(content=message))
    except Exception as error:
        raise RuntimeError(f"failed to send anon message: {error}") from error

    return await ctx.send(
        Reply(content=f"Message sent anonymously {FLOOF_HAPPY}", ephemeral=True)
    )