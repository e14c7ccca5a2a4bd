"""Local game rules: the 5x5 board, hints, guesses, scoring and turn order."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum
from os import PathLike
from typing import Optional, Union

from codenames.chatlog import ChatLog

BOARD_SIZE = 5
MAX_CARDS = BOARD_SIZE * BOARD_SIZE
RED_CARDS = 9
BLUE_CARDS = 8
NEUTRAL_CARDS = 7
PLAYER_COUNT = 6

MSG_GAME_START = "[게임 시작!]"
MSG_RED_TURN = "[레드팀의 턴입니다.]"
MSG_BLUE_TURN = "[블루팀의 턴입니다.]"
MSG_RED_CORRECT = "[정답! 레드팀 득점]"
MSG_BLUE_CORRECT = "[정답! 블루팀 득점]"
MSG_RED_WRONG = "[오답! 레드팀 득점]"
MSG_BLUE_WRONG = "[오답! 블루팀 득점]"
MSG_NEUTRAL = "[일반카드! 차례가 넘어갑니다.]"


class Team(IntEnum):
    """The two teams; red always starts."""

    RED = 0
    BLUE = 1

    @property
    def other(self) -> "Team":
        return Team.BLUE if self is Team.RED else Team.RED


class CardType(IntEnum):
    """What a card turns out to be once revealed."""

    RED = 1
    BLUE = 2
    NEUTRAL = 3
    ASSASSIN = 4


@dataclass
class Card:
    """A word on the board."""

    name: str
    type: CardType
    used: bool = False


@dataclass(frozen=True)
class GuessOutcome:
    """What one guess did: the card it hit, if any, and the log lines it produced."""

    found: bool
    card: Optional[Card] = None
    messages: tuple[str, ...] = ()


def read_words(path: Union[str, PathLike]) -> list[str]:
    """Read the first 25 whitespace-separated words from ``path``."""
    with open(path, encoding="utf-8") as handle:
        words = handle.read().split()
    if len(words) < MAX_CARDS:
        raise ValueError(f"need {MAX_CARDS} words, found {len(words)} in {path}")
    return words[:MAX_CARDS]


def default_user_names() -> list[str]:
    """Names given to the six seats before real players join."""
    return [f"guest{i}" for i in range(PLAYER_COUNT)]


def _card_type_for_slot(slot: int) -> CardType:
    if slot < RED_CARDS:
        return CardType.RED
    if slot < RED_CARDS + BLUE_CARDS:
        return CardType.BLUE
    if slot < RED_CARDS + BLUE_CARDS + NEUTRAL_CARDS:
        return CardType.NEUTRAL
    return CardType.ASSASSIN


@dataclass
class Game:
    """State of one local game.

    ``phase`` is 0 for the red leader, 1 for red members, 2 for the blue
    leader and 3 for blue members.
    """

    cards: list[Card]
    red_score: int = 0
    blue_score: int = 0
    turn: Team = Team.RED
    phase: int = 0
    current_tries: int = 0
    game_over: bool = False
    hint_word: str = ""
    hint_number: int = 0
    user_names: list[str] = field(default_factory=default_user_names)
    log: ChatLog = field(default_factory=ChatLog)

    @classmethod
    def from_words(cls, words, rng: Optional[random.Random] = None) -> "Game":
        """Deal the first 25 ``words`` in random order onto a fresh board."""
        pool = list(words)[:MAX_CARDS]
        if len(pool) < MAX_CARDS:
            raise ValueError(f"need {MAX_CARDS} words, got {len(pool)}")
        rng = rng if rng is not None else random.Random()
        rng.shuffle(pool)
        cards = [Card(name, _card_type_for_slot(slot)) for slot, name in enumerate(pool)]
        game = cls(cards=cards)
        game.log.append(MSG_GAME_START)
        game.log.append(MSG_RED_TURN)
        return game

    @property
    def leader_phase(self) -> bool:
        """True while the team leader is to give a hint."""
        return self.phase % 2 == 0

    def _say(self, messages: list[str], text: str) -> None:
        messages.append(text)
        self.log.append(text)

    def give_hint(self, word: str, count: int) -> None:
        """Record the leader's hint and hand the turn to the team's members."""
        if self.game_over:
            raise RuntimeError("the game is over")
        if not self.leader_phase:
            raise RuntimeError("a hint can only be given in the leader's phase")
        self.hint_word = word
        self.hint_number = int(count)
        self.current_tries = 0
        self.phase += 1

    def guess(self, answer: str) -> GuessOutcome:
        """Reveal the unused card named ``answer`` and apply the scoring rules."""
        if self.game_over:
            raise RuntimeError("the game is over")
        if self.leader_phase:
            raise RuntimeError("guesses can only be made in the members' phase")

        card = next((c for c in self.cards if not c.used and c.name == answer), None)
        if card is None:
            return GuessOutcome(found=False)

        card.used = True
        messages: list[str] = []
        kind = card.type
        if self.turn is Team.RED:
            if kind is CardType.RED:
                self._say(messages, MSG_RED_CORRECT)
                self.red_score += 1
                self.current_tries += 1
            else:
                if kind is CardType.BLUE:
                    self._say(messages, MSG_BLUE_WRONG)
                    self.blue_score += 1
                else:
                    self._say(messages, MSG_NEUTRAL)
                    self.turn = Team.BLUE
                    self.phase = 2
                self._say(messages, MSG_BLUE_TURN)
        else:
            if kind is CardType.BLUE:
                self._say(messages, MSG_BLUE_CORRECT)
                self.blue_score += 1
                self.current_tries += 1
            else:
                if kind is CardType.RED:
                    self._say(messages, MSG_RED_WRONG)
                    self.red_score += 1
                else:
                    self._say(messages, MSG_NEUTRAL)
                    self.turn = Team.RED
                    self.phase = 0
                self._say(messages, MSG_RED_TURN)
        if kind is CardType.ASSASSIN:
            self.game_over = True

        self.check_game_over()
        if self.current_tries >= self.hint_number + 1:
            self.turn = self.turn.other
            self.phase = 0 if self.turn is Team.RED else 2

        return GuessOutcome(found=True, card=card, messages=tuple(messages))

    def check_game_over(self) -> bool:
        """End the game once a team has found all of its words."""
        if self.red_score == RED_CARDS or self.blue_score == BLUE_CARDS:
            self.game_over = True
        return self.game_over

    def winner(self) -> Optional[Team]:
        """The winning team, or None while the game is still running."""
        if not self.game_over:
            return None
        if self.red_score == RED_CARDS or self.turn is Team.RED:
            return Team.RED
        return Team.BLUE