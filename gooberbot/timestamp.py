"""Build timestamp markup that chat clients render in the reader's time zone."""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from datetime import timezone as _tz
from enum import Enum

from gooberbot.context import Context, Reply
from gooberbot.emoji import FLOOF_HAPPY
from gooberbot.errors import UserError

MIN_TIMEZONE = -12
MAX_TIMEZONE = 14


class TimestampStyle(Enum):
    """Display styles; values are the style letters used in the markup."""

    SHORT_TIME = "t"
    LONG_TIME = "T"
    SHORT_DATE = "d"
    LONG_DATE = "D"
    SHORT_DATE_TIME = "f"
    LONG_DATE_TIME = "F"
    RELATIVE_TIME = "R"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    TimestampStyle.SHORT_TIME: "Short time",
    TimestampStyle.LONG_TIME: "Long time",
    TimestampStyle.SHORT_DATE: "Short date",
    TimestampStyle.LONG_DATE: "Long date",
    TimestampStyle.SHORT_DATE_TIME: "Short date time",
    TimestampStyle.LONG_DATE_TIME: "Long date time",
    TimestampStyle.RELATIVE_TIME: "Relative time",
}


def format_timestamp(unix: int, style: TimestampStyle | None = None) -> str:
    """Markup for a Unix timestamp, optionally with a display style."""
    if style is None:
        return f"<t:{unix}>"
    return f"<t:{unix}:{style.value}>"


def build_datetime(
    now: datetime,
    year: int | None = None,
    month: int | None = None,
    day: int | None = None,
    hour: int | None = None,
    minute: int | None = None,
    second: int | None = None,
    timezone: int | None = None,
) -> datetime:
    """Combine the given fields, in UTC offset ``timezone`` hours, filling gaps from ``now``."""
    offset_hours = timezone if timezone is not None else 0
    if not MIN_TIMEZONE <= offset_hours <= MAX_TIMEZONE:
        raise UserError("entered timezone difference is invalid")
    zone = _tz(timedelta(hours=offset_hours))
    if now.tzinfo is None:
        now = now.replace(tzinfo=_tz.utc)
    local = now.astimezone(zone)
    try:
        return datetime(
            year if year is not None else local.year,
            month if month is not None else local.month,
            day if day is not None else local.day,
            hour if hour is not None else local.hour,
            minute if minute is not None else local.minute,
            second if second is not None else local.second,
            tzinfo=zone,
        )
    except (ValueError, OverflowError):
        raise UserError("entered date/time is invalid") from None


async def timestamp(
    ctx: Context,
    year: int | None = None,
    month: int | None = None,
    day: int | None = None,
    hour: int | None = None,
    minute: int | None = None,
    second: int | None = None,
    timezone: int | None = None,
    style: TimestampStyle | None = None,
) -> Reply:
    """Reply with timestamp markup for the given date and time."""
    moment = build_datetime(
        datetime.now(_tz.utc), year, month, day, hour, minute, second, timezone
    )
    formatted = format_timestamp(math.floor(moment.timestamp()), style)
    content = (
        f"Copy this and use it anywhere that supports Discord formatting {FLOOF_HAPPY}\n"
        f"```\n{formatted}\n```\n"
        f"Looks like this btw: {formatted}\n"
        "*If this isn't the timestamp you expected, make sure you set `timezone` "
        "to your timezone!*"
    )
    return await ctx.send(Reply(content=content, ephemeral=True))