import random

import pytest

from gooberbot.emoji import FLOOF_BLEP, FLOOF_HAPPY, FLOOF_OWO, FLOOF_SAD
from gooberbot.rock_paper_scissors import (
    ACCEPT_BUTTONS,
    CHOICE_BUTTONS,
    DELETE_FOLLOWUP,
    DELETE_RESPONSE,
    EDIT,
    FOLLOWUP,
    RESPOND,
    SEND,
    BotGame,
    ChallengeGame,
    Choice,
    outcome_against_bot,
    outcome_between,
    parse_choice,
)

AUTHOR = 11
USER = 22
OTHER = 33


@pytest.mark.parametrize("custom_id", ["rock", "paper", "scissors"])
def test_parse_choice_round_trip(custom_id):
    assert parse_choice(custom_id).value == custom_id


def test_parse_choice_rejects_unknown():
    with pytest.raises(ValueError, match="lizard"):
        parse_choice("lizard")


@pytest.mark.parametrize(
    "bot, user, expected",
    [
        (Choice.ROCK, Choice.PAPER, "Paper beats rock and you win!"),
        (Choice.ROCK, Choice.SCISSORS, "Rock beats scissors and I win!"),
        (Choice.PAPER, Choice.ROCK, "Paper beats rock and I win!"),
        (Choice.PAPER, Choice.SCISSORS, "Scissors beats paper and you win!"),
        (Choice.SCISSORS, Choice.ROCK, "Rock beats scissors and you win!"),
        (Choice.SCISSORS, Choice.PAPER, "Scissors beats paper and I win!"),
    ],
)
def test_outcome_against_bot(bot, user, expected):
    assert outcome_against_bot(bot, user) == f"{expected} {FLOOF_HAPPY}"


def test_outcome_against_bot_tie():
    assert (
        outcome_against_bot(Choice.SCISSORS, Choice.SCISSORS)
        == f"Scissors and scissors... it's a tie! {FLOOF_OWO}"
    )


@pytest.mark.parametrize(
    "user, author, expected",
    [
        (Choice.ROCK, Choice.PAPER, "Paper beats rock and <@2> wins!"),
        (Choice.ROCK, Choice.SCISSORS, "Rock beats scissors and <@1> wins!"),
        (Choice.PAPER, Choice.ROCK, "Paper beats rock and <@1> wins!"),
        (Choice.PAPER, Choice.SCISSORS, "Scissors beats paper and <@2> wins!"),
        (Choice.SCISSORS, Choice.ROCK, "Rock beats scissors and <@2> wins!"),
        (Choice.SCISSORS, Choice.PAPER, "Scissors beats paper and <@1> wins!"),
    ],
)
def test_outcome_between(user, author, expected):
    assert outcome_between(user, author, "<@1>", "<@2>") == f"{expected} {FLOOF_HAPPY}"


def test_outcome_between_tie():
    assert (
        outcome_between(Choice.ROCK, Choice.ROCK, "<@1>", "<@2>")
        == f"Rock and rock... it's a tie! {FLOOF_OWO}"
    )


def test_bot_game_with_fixed_choice():
    game = BotGame(bot_choice=Choice.ROCK)
    edit, outcome = game.press("paper")
    assert edit.action == EDIT
    assert edit.buttons == CHOICE_BUTTONS and edit.buttons_disabled
    assert outcome.action == RESPOND and outcome.ephemeral
    assert outcome.content == outcome_against_bot(Choice.ROCK, Choice.PAPER)
    assert game.finished


def test_bot_game_random_choice_is_consistent():
    game = BotGame(rng=random.Random(5))
    _, outcome = game.press("rock")
    assert game.bot_choice in set(Choice)
    assert outcome.content == outcome_against_bot(game.bot_choice, Choice.ROCK)


def test_bot_game_only_first_press_counts():
    game = BotGame(bot_choice=Choice.PAPER)
    game.press("rock")
    with pytest.raises(RuntimeError):
        game.press("scissors")


def test_bot_game_rejects_unknown_button():
    with pytest.raises(ValueError):
        BotGame(bot_choice=Choice.PAPER).press("spock")


def test_challenge_self():
    game = ChallengeGame(author_id=AUTHOR, user_id=AUTHOR)
    reply = game.start()
    assert reply.action == SEND and reply.ephemeral
    assert reply.content == (
        f"You can't play Rock Paper Scissors with yourself, silly {FLOOF_BLEP}"
    )
    assert game.finished


def test_challenge_start_message():
    reply = ChallengeGame(author_id=AUTHOR, user_id=USER).start()
    assert reply.content == (
        "<@11> has challenged <@22> to a game of Rock Paper Scissors! "
        "<@22>, do you accept?"
    )
    assert reply.buttons == ACCEPT_BUTTONS
    assert reply.allowed_user_mentions == (USER,)


def test_press_before_start_raises():
    with pytest.raises(RuntimeError):
        ChallengeGame(author_id=AUTHOR, user_id=USER).press(USER, "accept")


def test_wrong_person_accepting():
    game = ChallengeGame(author_id=AUTHOR, user_id=USER)
    game.start()
    [response] = game.press(OTHER, "accept")
    assert response.content == f"I'm asking <@22>, not you silly! {FLOOF_BLEP}"
    assert response.ephemeral
    assert not game.finished


def test_decline():
    game = ChallengeGame(author_id=AUTHOR, user_id=USER)
    game.start()
    edit, response = game.press(USER, "decline")
    assert edit.action == EDIT and edit.buttons_disabled
    assert response.content == f"<@22> declined {FLOOF_SAD}"
    assert response.allowed_user_mentions == ()
    assert game.finished


def test_unknown_accept_button():
    game = ChallengeGame(author_id=AUTHOR, user_id=USER)
    game.start()
    with pytest.raises(ValueError, match="maybe"):
        game.press(USER, "maybe")
    assert game.finished


def test_full_game():
    game = ChallengeGame(author_id=AUTHOR, user_id=USER)
    game.start()
    _, accepted = game.press(USER, "accept")
    assert accepted.content == "<@22> accepted! <@22>, what would you like to choose?"
    assert accepted.buttons == CHOICE_BUTTONS

    [early] = game.press(AUTHOR, "rock")
    assert early.content == (
        f"<@22> gets to choose first, then you choose! {FLOOF_HAPPY}"
    )
    [stranger] = game.press(OTHER, "rock")
    assert stranger.content == f"I'm asking <@22>, not you silly! {FLOOF_BLEP}"

    delete, prompt = game.press(USER, "scissors")
    assert delete.action == DELETE_RESPONSE
    assert prompt.action == FOLLOWUP
    assert prompt.allowed_user_mentions == (AUTHOR,)
    assert game.user_choice is Choice.SCISSORS

    [again] = game.press(USER, "rock")
    assert again.content == (
        f"You already chose, silly, now it's <@11>'s turn {FLOOF_BLEP}"
    )
    [stranger] = game.press(OTHER, "rock")
    assert stranger.content == f"I'm asking <@11>, not you silly! {FLOOF_BLEP}"

    delete, outcome = game.press(AUTHOR, "rock")
    assert delete.action == DELETE_FOLLOWUP
    assert outcome.content == outcome_between(
        Choice.SCISSORS, Choice.ROCK, "<@22>", "<@11>"
    )
    assert game.finished
    with pytest.raises(RuntimeError):
        game.press(AUTHOR, "rock")


def test_full_game_tie():
    game = ChallengeGame(author_id=AUTHOR, user_id=USER)
    game.start()
    game.press(USER, "accept")
    game.press(USER, "paper")
    _, outcome = game.press(AUTHOR, "paper")
    assert outcome.content == f"Paper and paper... it's a tie! {FLOOF_OWO}"