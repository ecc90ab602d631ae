"""Description of the most recent changes to the bot."""

from __future__ import annotations

from dataclasses import dataclass

REPOSITORY_URL = "https://git.example.com/goober-bot"
MAX_COMMITS = 10


@dataclass(frozen=True)
class Commit:
    """A commit: its hex id, Unix commit time and message."""

    id: str
    time: int
    message: str

    @property
    def summary(self) -> str:
        lines = self.message.splitlines()
        return lines[0] if lines else ""


def commits_string(commits: list[Commit]) -> str:
    """Markdown listing the ten most recent of ``commits`` (newest first)."""
    text = ""
    for i, commit in enumerate(commits[:MAX_COMMITS]):
        if i == 0:
            text += f"The last change was <t:{commit.time}:R>.\n"
        text += (
            f"\n[`{commit.id[:7]}`]({REPOSITORY_URL}/commit/{commit.id}): "
            f"{commit.summary}"
        )
    return text


def updates_description(commits: list[Commit]) -> str:
    """Description of the updates embed."""
    return (
        f"{commits_string(commits)}\n. . .\n\n"
        f"See the [GitHub repository]({REPOSITORY_URL}/commits/v1/) for more!"
    )