# gooberbot

The command logic of a playful chat bot, kept apart from any particular chat
service. Each command takes a `gooberbot.context.Context`. The context holds
the author, the bot id, the channel and server ids and a `Data` object with a
JSON store. A command builds `Reply` objects, records them in `ctx.sent` and,
if the context has a `transport` coroutine, passes them to it together with
the target channel id.

## Modules

- `gooberbot.context`: `User`, `Reply`, `Data` and `Context`.
  `Context.send(reply)` and `Context.say(content)` send replies. When the
  context is ephemeral, every reply is marked ephemeral. The module also holds
  `mention_user` and `mention_channel`, which build mention markup.
- `gooberbot.storage`: `JsonStore` keeps JSON values under string keys. It
  keeps them in memory, or as `<key>.json` files when it is given a directory.
  It has `read_serialized`, `write_serialized` and `delete`. Reading a missing
  key raises `NotFoundError`. `read_or_write_default(store, key,
  default_factory)` stores the default first when the key is missing.
- `gooberbot.config`: per-server settings held in the `Config` dataclass:
  `strikes_enabled`, `strikes_log_channel`, `anon_enabled`, `anon_channel`
  and `anon_log_channel`. The commands `list_config`, `get_config(ctx, name)`
  and `set_config(ctx, name, value)` read and change them. `load_config` and
  `get_config_key` are helpers for other commands.
- `gooberbot.strike`: the strikes moderation system, with `give`, `history`
  and `repeal`. A strike can carry a rule of at most 7 characters, a comment,
  and an expiration given in months. `history` lets the author look at other
  members' strikes only when the context has an `author_permissions`
  attribute that contains `"VIEW_AUDIT_LOG"`. When a strikes log channel is
  configured, events are also posted there through the transport.
- `gooberbot.anon`: `anon(ctx, message)` posts a message in the invoking
  channel through the transport, without naming the author. It follows the
  anon settings: whether anon is enabled, which channel it is restricted to,
  and which channel it logs to.
- `gooberbot.timestamp`: `build_datetime` and `format_timestamp` build
  `<t:UNIX:STYLE>` markup from a date, a time and a UTC offset of -12 to +14
  hours. `timestamp(ctx, ...)` sends that markup. The display styles are in
  `TimestampStyle`.
- `gooberbot.rock_paper_scissors`: `BotGame` is a game against the bot.
  `ChallengeGame` is a game between two users: the challenged user accepts,
  then chooses first, then the challenger chooses. Each button press returns a
  list of `Response` actions for the caller to carry out. `outcome_against_bot`
  and `outcome_between` build the result messages.
- `gooberbot.analytics`: `Analytics` keeps command invocations from the last
  24 hours. `load` and `increment` keep them in the store under
  `"analytics"`. `render_chart(ranking)` returns a PNG horizontal bar chart,
  drawn with matplotlib.
- `gooberbot.debug`: `commands_markdown(commands, today)` builds a Markdown
  command list from `CommandInfo` descriptions. It puts the largest category
  first and "Other" last. `raise_example_error(kind)` fails on purpose.
  `delete_config(ctx)` removes the server's config.
- `gooberbot.updates`: `commits_string` and `updates_description` format the
  ten most recent `Commit` records.
- `gooberbot.vote`: `vote(ctx)` asks `Data.vote_checker` whether the author
  has voted, and replies with `vote_message`.
- `gooberbot.activity`: a rotating bot status. `start_activity_loop(set_activity)`
  calls `set_activity` with a random `Activity` every ten minutes, and never
  repeats the one before. Setting the returned `threading.Event` stops it.
- `gooberbot.errors`: `UserError` is an error meant to be shown to the user.
  `LogChannelError` and `contextualize_log_channel_error` describe failures
  to post in a log channel.
- `gooberbot.emoji`: custom emoji markup constants such as `FLOOF_HAPPY`.
  `emoji_table(release)` gives the full table.

## Example

```python
import asyncio
from gooberbot.context import Context, Data, User
from gooberbot.storage import JsonStore
from gooberbot.config import set_config
from gooberbot.strike import give

ctx = Context(Data(JsonStore()), author=User(1, "mod"), bot_id=99,
              channel_id=10, guild_id=5)
asyncio.run(set_config(ctx, "strikes_enabled", True))
asyncio.run(give(ctx, 2, rule="3", expiration=1))
print(ctx.sent[-1].content)
```

## What this package does not do

It does not connect to any chat service. It does not register slash commands
and does not dispatch events. The caller supplies the transport, reads the
button presses and runs the commands. Vote checks and commit history come
from the caller as well. The package has no "silly" interaction commands such
as boop or hug. It has no early-access entitlement check. It has no single
registry that lists every command.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```