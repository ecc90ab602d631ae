"""Usage counts of commands over the last 24 hours."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from io import BytesIO
from typing import Any, Iterable

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from gooberbot.storage import JsonStore, read_or_write_default

KEY = "analytics"
WINDOW = timedelta(days=1)
CHART_TITLE = "Command Invocations in the Last 24 Hours"
SERIES_NAME = "Invocations"

_BACKGROUND = "#1f1d1d"
_FOREGROUND = "#d8d9da"
_BAR = "#5470c6"


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


def _now(now: datetime | None) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


@dataclass
class Analytics:
    """Invocation times of each command."""

    invocations: dict[str, list[datetime]] = field(default_factory=dict)

    def prune(self, command_names: Iterable[str], now: datetime | None = None) -> None:
        """Track exactly ``command_names`` and drop invocations older than a day."""
        current = _now(now)
        names = set(command_names)
        for name in names:
            self.invocations.setdefault(name, [])
        self.invocations = {
            name: [moment for moment in times if current - moment <= WINDOW]
            for name, times in self.invocations.items()
            if name in names
        }

    def increment(self, command: str, now: datetime | None = None) -> None:
        """Record one invocation of ``command``."""
        self.invocations.setdefault(command, []).append(_now(now))

    def ranking(self) -> list[tuple[str, int]]:
        """Commands with their invocation counts, most used first."""
        counts = [(name, len(times)) for name, times in self.invocations.items()]
        return sorted(counts, key=lambda item: (-item[1], item[0]))

    def to_dict(self) -> dict[str, list[str]]:
        return {
            name: [_format_time(moment) for moment in times]
            for name, times in self.invocations.items()
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Analytics:
        if not isinstance(data, dict):
            raise ValueError(f"expected a mapping of commands, got {data!r}")
        return cls({name: [_parse_time(raw) for raw in times] for name, times in data.items()})


def load(
    store: JsonStore, command_names: Iterable[str], now: datetime | None = None
) -> Analytics:
    """Read the stored analytics, prune them and store the result."""
    analytics = Analytics.from_dict(read_or_write_default(store, KEY, dict))
    analytics.prune(command_names, now)
    store.write_serialized(KEY, analytics.to_dict())
    return analytics


def increment(
    store: JsonStore,
    command_names: Iterable[str],
    command: str,
    now: datetime | None = None,
) -> Analytics:
    """Record an invocation of the root command ``command`` in the store."""
    current = _now(now)
    analytics = load(store, command_names, current)
    analytics.increment(command, current)
    store.write_serialized(KEY, analytics.to_dict())
    return analytics


def render_chart(ranking: list[tuple[str, int]]) -> bytes:
    """Draw a horizontal bar chart of ``ranking`` and return it as PNG bytes."""
    figure = Figure(figsize=(9, 6), facecolor=_BACKGROUND)
    FigureCanvasAgg(figure)
    axes = figure.add_subplot()
    axes.set_facecolor(_BACKGROUND)
    labels = [f"/{command}" for command, _ in ranking]
    counts = [count for _, count in ranking]
    if ranking:
        axes.barh(labels, counts, color=_BAR, label=SERIES_NAME)
        axes.invert_yaxis()
        legend = axes.legend(loc="upper right", facecolor=_BACKGROUND)
        for text in legend.get_texts():
            text.set_color(_FOREGROUND)
    axes.set_title(CHART_TITLE, color=_FOREGROUND)
    axes.tick_params(colors=_FOREGROUND)
    for spine in axes.spines.values():
        spine.set_color(_FOREGROUND)
    figure.tight_layout()
    buffer = BytesIO()
    figure.savefig(buffer, format="png", facecolor=figure.get_facecolor())
    return buffer.getvalue()