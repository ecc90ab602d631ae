"""Rock Paper Scissors against the bot or between two users."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, auto

from gooberbot.context import mention_user
from gooberbot.emoji import FLOOF_BLEP, FLOOF_HAPPY, FLOOF_OWO, FLOOF_SAD

SEND = "send"
EDIT = "edit"
RESPOND = "respond"
FOLLOWUP = "followup"
DELETE_RESPONSE = "delete_response"
DELETE_FOLLOWUP = "delete_followup"

CHOICE_BUTTONS = ("rock", "paper", "scissors")
ACCEPT_BUTTONS = ("accept", "decline")

BOT_ACCEPT_MESSAGE = (
    "Okay, I accept! I've chosen which one I'm gonna do, now you choose"
)


class Choice(Enum):
    """A hand in Rock Paper Scissors; values are the button ids."""

    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    def beats(self, other: Choice) -> bool:
        return _BEATS[self] is other


_BEATS = {
    Choice.ROCK: Choice.SCISSORS,
    Choice.PAPER: Choice.ROCK,
    Choice.SCISSORS: Choice.PAPER,
}


@dataclass(frozen=True)
class Response:
    """Something the bot does in reply to a button press.

    ``action`` is one of SEND, EDIT, RESPOND, FOLLOWUP, DELETE_RESPONSE and
    DELETE_FOLLOWUP. ``allowed_user_mentions`` of None allows all pings.
    """

    action: str
    content: str | None = None
    ephemeral: bool = False
    buttons: tuple[str, ...] = ()
    buttons_disabled: bool = False
    allowed_user_mentions: tuple[int, ...] | None = None


def parse_choice(custom_id: str) -> Choice:
    """Turn a button id into a choice."""
    try:
        return Choice(custom_id)
    except ValueError:
        raise ValueError(
            'expected component to have custom ID of either "rock", "paper", '
            f'or "scissors", got {custom_id!r}'
        ) from None


def _win_phrase(first: Choice, second: Choice) -> str:
    winner, loser = (first, second) if first.beats(second) else (second, first)
    return f"{winner.value.capitalize()} beats {loser.value}"


def _tie(first: Choice, second: Choice) -> str:
    return f"{first.value.capitalize()} and {second.value}... it's a tie! {FLOOF_OWO}"


def outcome_against_bot(bot_choice: Choice, user_choice: Choice) -> str:
    """Outcome message of a game between the bot and a user."""
    if bot_choice is user_choice:
        return _tie(bot_choice, user_choice)
    who = "I win" if bot_choice.beats(user_choice) else "you win"
    return f"{_win_phrase(bot_choice, user_choice)} and {who}! {FLOOF_HAPPY}"


def outcome_between(
    user_choice: Choice,
    author_choice: Choice,
    user_mention: str,
    author_mention: str,
) -> str:
    """Outcome message of a game between the challenged user and the challenger."""
    if user_choice is author_choice:
        return _tie(user_choice, author_choice)
    winner = user_mention if user_choice.beats(author_choice) else author_mention
    return (
        f"{_win_phrase(user_choice, author_choice)} and {winner} wins! {FLOOF_HAPPY}"
    )


@dataclass
class BotGame:
    """A game against the bot; the first button press decides it."""

    rng: random.Random | None = None
    bot_choice: Choice | None = None
    finished: bool = False

    def press(self, custom_id: str) -> list[Response]:
        """Handle the player's choice and return what the bot does."""
        if self.finished:
            raise RuntimeError("the game is already over")
        self.finished = True
        user_choice = parse_choice(custom_id)
        if self.bot_choice is None:
            self.bot_choice = (self.rng or random.Random()).choice(list(Choice))
        return [
            Response(EDIT, buttons=CHOICE_BUTTONS, buttons_disabled=True),
            Response(
                RESPOND,
                content=outcome_against_bot(self.bot_choice, user_choice),
                ephemeral=True,
            ),
        ]


class _Stage(Enum):
    NEW = auto()
    AWAIT_ACCEPT = auto()
    AWAIT_USER_CHOICE = auto()
    AWAIT_AUTHOR_CHOICE = auto()
    FINISHED = auto()


@dataclass
class ChallengeGame:
    """A game where ``author_id`` challenges ``user_id``; the challenged user chooses first."""

    author_id: int
    user_id: int
    user_choice: Choice | None = None
    _stage: _Stage = field(default=_Stage.NEW, repr=False)

    @property
    def finished(self) -> bool:
        return self._stage is _Stage.FINISHED

    @property
    def _user_mention(self) -> str:
        return mention_user(self.user_id)

    @property
    def _author_mention(self) -> str:
        return mention_user(self.author_id)

    def _asking(self, mention: str) -> Response:
        return Response(
            RESPOND,
            content=f"I'm asking {mention}, not you silly! {FLOOF_BLEP}",
            ephemeral=True,
        )

    def start(self) -> Response:
        """Send the challenge, or refuse a challenge to oneself."""
        if self._stage is not _Stage.NEW:
            raise RuntimeError("the game has already started")
        if self.user_id == self.author_id:
            self._stage = _Stage.FINISHED
            return Response(
                SEND,
                content=(
                    "You can't play Rock Paper Scissors with yourself, silly "
                    f"{FLOOF_BLEP}"
                ),
                ephemeral=True,
            )
        self._stage = _Stage.AWAIT_ACCEPT
        user = self._user_mention
        return Response(
            SEND,
            content=(
                f"{self._author_mention} has challenged {user} to a game of "
                f"Rock Paper Scissors! {user}, do you accept?"
            ),
            buttons=ACCEPT_BUTTONS,
            allowed_user_mentions=(self.user_id,),
        )

    def press(self, presser_id: int, custom_id: str) -> list[Response]:
        """Handle a button press by ``presser_id`` and return what the bot does."""
        if self._stage is _Stage.NEW:
            raise RuntimeError("the game has not started")
        if self._stage is _Stage.FINISHED:
            raise RuntimeError("the game is already over")
        if self._stage is _Stage.AWAIT_ACCEPT:
            return self._press_accept(presser_id, custom_id)
        if self._stage is _Stage.AWAIT_USER_CHOICE:
            return self._press_user_choice(presser_id, custom_id)
        return self._press_author_choice(presser_id, custom_id)

    def _press_accept(self, presser_id: int, custom_id: str) -> list[Response]:
        user = self._user_mention
        if presser_id != self.user_id:
            return [self._asking(user)]
        disable = Response(EDIT, buttons=ACCEPT_BUTTONS, buttons_disabled=True)
        if custom_id == "accept":
            self._stage = _Stage.AWAIT_USER_CHOICE
            return [
                disable,
                Response(
                    RESPOND,
                    content=(
                        f"{user} accepted! {user}, what would you like to choose?"
                    ),
                    buttons=CHOICE_BUTTONS,
                ),
            ]
        self._stage = _Stage.FINISHED
        if custom_id == "decline":
            return [
                disable,
                Response(
                    RESPOND,
                    content=f"{user} declined {FLOOF_SAD}",
                    allowed_user_mentions=(),
                ),
            ]
        raise ValueError(
            'expected component to have custom ID of either "accept" or '
            f'"decline", got {custom_id!r}'
        )

    def _press_user_choice(self, presser_id: int, custom_id: str) -> list[Response]:
        user = self._user_mention
        if presser_id == self.author_id:
            return [
                Response(
                    RESPOND,
                    content=(
                        f"{user} gets to choose first, then you choose! {FLOOF_HAPPY}"
                    ),
                    ephemeral=True,
                )
            ]
        if presser_id != self.user_id:
            return [self._asking(user)]
        self.user_choice = parse_choice(custom_id)
        self._stage = _Stage.AWAIT_AUTHOR_CHOICE
        return [
            Response(DELETE_RESPONSE),
            Response(
                FOLLOWUP,
                content=(
                    f"{user} has chosen! Now {self._author_mention}, what would "
                    "*you* like to choose?"
                ),
                buttons=CHOICE_BUTTONS,
                allowed_user_mentions=(self.author_id,),
            ),
        ]

    def _press_author_choice(self, presser_id: int, custom_id: str) -> list[Response]:
        author = self._author_mention
        if presser_id == self.user_id:
            return [
                Response(
                    RESPOND,
                    content=(
                        f"You already chose, silly, now it's {author}'s turn "
                        f"{FLOOF_BLEP}"
                    ),
                    ephemeral=True,
                )
            ]
        if presser_id != self.author_id:
            return [self._asking(author)]
        author_choice = parse_choice(custom_id)
        assert self.user_choice is not None
        self._stage = _Stage.FINISHED
        return [
            Response(DELETE_FOLLOWUP),
            Response(
                FOLLOWUP,
                content=outcome_between(
                    self.user_choice, author_choice, self._user_mention, author
                ),
            ),
        ]