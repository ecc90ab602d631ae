import pytest

from gooberbot.context import (
    Context,
    Data,
    Reply,
    User,
    mention_channel,
    mention_user,
)
from gooberbot.storage import JsonStore


def make_ctx(**kwargs):
    return Context(Data(JsonStore()), User(1, "author"), bot_id=2, channel_id=3, **kwargs)


def test_mentions():
    assert mention_user(42) == "<@42>"
    assert mention_channel(7) == "<#7>"
    assert User(42, "someone").mention() == mention_user(42)


@pytest.mark.asyncio
async def test_say_records_reply():
    ctx = make_ctx()
    reply = await ctx.say("hello")
    assert reply.content == "hello"
    assert ctx.sent == [reply]
    assert reply.ephemeral is False


@pytest.mark.asyncio
async def test_ephemeral_context_marks_replies():
    ctx = make_ctx(ephemeral=True)
    reply = await ctx.send(Reply(content="secret stuff"))
    assert reply.ephemeral is True
    assert ctx.sent[0].ephemeral is True


@pytest.mark.asyncio
async def test_transport_receives_channel_and_reply():
    delivered = []

    async def transport(channel_id, reply):
        delivered.append((channel_id, reply.content))

    ctx = make_ctx(transport=transport)
    reply = await ctx.say("hi")
    assert reply.content == "hi"
    assert delivered == [(3, reply.content)]