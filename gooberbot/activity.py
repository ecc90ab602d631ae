"""Rotating bot activity status."""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

logger = logging.getLogger(__name__)

SLEEP_SECS = 10 * 60


class ActivityType(Enum):
    PLAYING = "playing"
    STREAMING = "streaming"
    LISTENING = "listening"
    WATCHING = "watching"
    CUSTOM = "custom"
    COMPETING = "competing"


@dataclass(frozen=True)
class Activity:
    """A status shown on the bot's profile."""

    kind: ActivityType
    name: str
    state: str | None = None


_PREFIXES = {
    ActivityType.PLAYING: "Playing ",
    ActivityType.STREAMING: "Streaming ",
    ActivityType.LISTENING: "Listening to ",
    ActivityType.WATCHING: "Watching ",
    ActivityType.COMPETING: "Competing in ",
}


def _custom(state: str) -> Activity:
    return Activity(ActivityType.CUSTOM, "~", state)


ACTIVITIES = (
    _custom("Testing random activities"),
    Activity(ActivityType.PLAYING, "Undertale"),
    Activity(ActivityType.WATCHING, "Markiplier"),
    Activity(ActivityType.LISTENING, "Daft Punk"),
    Activity(ActivityType.PLAYING, "ULTRAKILL"),
    _custom("Configuring servers"),
    Activity(ActivityType.COMPETING, "Silliness Competition"),
    _custom("Doing your mom"),
    _custom("Goobing"),
    Activity(ActivityType.PLAYING, "with a rhombicosidodecahedron"),
    _custom("Reading The Rust Book"),
    Activity(ActivityType.WATCHING, "cat videos"),
    Activity(ActivityType.WATCHING, "Gravity Falls"),
    Activity(ActivityType.WATCHING, "Doctor Who"),
    Activity(ActivityType.PLAYING, "ENA: Dream BBQ"),
    Activity(ActivityType.WATCHING, "speedrunning videos"),
)


def activity_to_string(activity: Activity) -> str:
    """Human-readable description of an activity."""
    if activity.state is not None:
        return activity.state
    prefix = _PREFIXES.get(activity.kind)
    if prefix is None:
        return repr(activity)
    return prefix + activity.name


def choose_activity(
    activities: Sequence[Activity],
    last: Activity | None = None,
    rng: random.Random | None = None,
) -> Activity:
    """Pick a random activity that differs from ``last``."""
    if not activities:
        raise ValueError("activities should not be empty")
    candidates = [activity for activity in activities if activity != last]
    if not candidates:
        raise ValueError("no activity differs from the current one")
    return (rng or random.Random()).choice(candidates)


def start_activity_loop(
    set_activity: Callable[[Activity], object],
    interval: float = SLEEP_SECS,
    rng: random.Random | None = None,
) -> threading.Event:
    """Change the activity every ``interval`` seconds; set the returned event to stop."""
    chooser = rng if rng is not None else random.Random()
    stop = threading.Event()

    def run() -> None:
        last: Activity | None = None
        while not stop.is_set():
            chosen = choose_activity(ACTIVITIES, last, chooser)
            set_activity(chosen)
            last = chosen
            logger.info("Set activity to %r", activity_to_string(chosen))
            if stop.wait(interval):
                break

    threading.Thread(target=run, name="activity-loop", daemon=True).start()
    logger.info("Activity loop started")
    return stop