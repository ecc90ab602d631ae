"""Ask users to vote for the bot on its listing site."""

from __future__ import annotations

from gooberbot.context import Context, Reply
from gooberbot.emoji import FLOOF_HAPPY, FLOOF_HEART


def vote_message(has_voted: bool, bot_id: int) -> str:
    """Reply text depending on whether the user voted today."""
    if has_voted:
        return f"You've already voted today, thank you so much! ily {FLOOF_HEART}"
    return (
        f"You're able to vote for <@{bot_id}> on Top.gg today still! You can "
        f"[do so here](https://top.gg/bot/{bot_id}/vote). Thank you for your "
        f"consideration! {FLOOF_HAPPY}"
    )


async def vote(ctx: Context) -> Reply:
    """Tell the author whether they can still vote today."""
    checker = ctx.data.vote_checker
    if checker is None:
        raise RuntimeError("top.gg dun goofed: could not check if user has voted")
    try:
        has_voted = await checker(ctx.author.id)
    except Exception as error:
        raise RuntimeError(
            f"top.gg dun goofed: could not check if user has voted: {error}"
        ) from error
    return await ctx.send(
        Reply(content=vote_message(has_voted, ctx.bot_id), ephemeral=True)
    )