"""Line-based messages exchanged with the game server during a match."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

from codenames.editor import InputMode

MAX_CARDS = 25
FIELDS_PER_CARD = 3
CARD_NAME_MAX_BYTES = 31
HINT_WORD_MAX_BYTES = 31
LINE_BUFFER_SIZE = 4096
SYSTEM_TEAM = 2
RED_TEAM = 0
RED_COLOR_PAIR = 2
BLUE_COLOR_PAIR = 3

REQUEST_ALL_CARDS = "GET_ALL_CARDS\n"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class ProtocolError(ValueError):
    """A known message arrived with missing or malformed fields."""


def _atoi(text: str) -> int:
    """Read the leading integer of ``text``; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _truncate_utf8(text: str, limit: int) -> str:
    data = text.encode("utf-8")
    if len(data) <= limit:
        return text
    return data[:limit].decode("utf-8", errors="ignore")


def _tokens(text: str) -> list[str]:
    """Split on ``|``, dropping empty fields as consecutive separators do."""
    return [token for token in text.split("|") if token]


def _leading_fields(text: str, count: int) -> tuple[list[str], str]:
    """Take up to ``count`` non-empty ``|`` fields and return them with the remainder."""
    fields: list[str] = []
    pos = 0
    size = len(text)
    for _ in range(count):
        while pos < size and text[pos] == "|":
            pos += 1
        if pos >= size:
            return fields, ""
        end = text.find("|", pos)
        if end == -1:
            fields.append(text[pos:])
            pos = size
        else:
            fields.append(text[pos:end])
            pos = end + 1
    return fields, text[pos:]


@dataclass(frozen=True)
class CardInfo:
    """One card as the server describes it."""

    name: str
    type: int
    used: bool


@dataclass(frozen=True)
class AllCards:
    """The whole board, sent in answer to ``GET_ALL_CARDS``."""

    cards: tuple[CardInfo, ...]

    @property
    def is_valid(self) -> bool:
        """True when every card has a name and a type from 0 to 3."""
        return len(self.cards) == MAX_CARDS and all(
            card.name and 0 <= card.type <= 3 for card in self.cards
        )


@dataclass(frozen=True)
class CardUpdate:
    """A card changed its used flag."""

    index: int
    used: bool


@dataclass(frozen=True)
class TurnUpdate:
    """Whose turn it is, the phase within it, and the scores."""

    turn_team: int
    phase: int
    red_score: int
    blue_score: int


@dataclass(frozen=True)
class HintMessage:
    """A leader's hint as relayed by the server."""

    team: int
    word: str
    count: int


@dataclass(frozen=True)
class ChatMessage:
    """A chat line; team 2 marks a system notice."""

    team: int
    is_leader: bool
    nickname: str
    content: str

    @property
    def is_system(self) -> bool:
        return self.team == SYSTEM_TEAM

    @property
    def color_pair(self) -> Optional[int]:
        """Colour pair for the log line, or None for system notices."""
        if self.is_system:
            return None
        return RED_COLOR_PAIR if self.team == RED_TEAM else BLUE_COLOR_PAIR

    @property
    def display_text(self) -> str:
        if self.is_system:
            return f"[{self.content}]"
        return f"{self.nickname}: {self.content}"


@dataclass(frozen=True)
class GameOver:
    """The server ended the match."""

    payload: str = ""


@dataclass(frozen=True)
class SessionAck:
    """The server accepted the session; the board should be requested."""


Message = Union[AllCards, CardUpdate, TurnUpdate, HintMessage, ChatMessage, GameOver, SessionAck]


class LineSplitter:
    """Collects received bytes and yields complete, non-empty lines."""

    def __init__(self, capacity: int = LINE_BUFFER_SIZE - 1) -> None:
        self.capacity = capacity
        self._buffer = b""

    @property
    def pending(self) -> bytes:
        """Bytes received after the last newline."""
        return self._buffer

    def feed(self, data: Union[bytes, str]) -> list[str]:
        """Add ``data`` and return the lines it completed.

        Data that would grow the pending buffer past ``capacity`` is dropped.
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        room = max(self.capacity - len(self._buffer), 0)
        buffer = self._buffer + data[:room]
        *lines, rest = buffer.split(b"\n")
        self._buffer = rest
        return [line.decode("utf-8", errors="replace") for line in lines if line]


def _parse_all_cards(payload: str) -> AllCards:
    tokens = _tokens(payload)
    expected = MAX_CARDS * FIELDS_PER_CARD
    if len(tokens) != expected:
        raise ProtocolError(f"ALL_CARDS has {len(tokens)} fields, expected {expected}")
    cards = tuple(
        CardInfo(
            name=_truncate_utf8(tokens[i], CARD_NAME_MAX_BYTES),
            type=_atoi(tokens[i + 1]),
            used=bool(_atoi(tokens[i + 2])),
        )
        for i in range(0, expected, FIELDS_PER_CARD)
    )
    return AllCards(cards)


def _require(tokens: list[str], count: int, kind: str) -> list[str]:
    if len(tokens) < count:
        raise ProtocolError(f"{kind} needs {count} fields, got {len(tokens)}")
    return tokens[:count]


def parse_line(line: str) -> Optional[Message]:
    """Decode one server line; None for lines the client does not handle."""
    if line.startswith("SESSION_ACK"):
        return SessionAck()
    if line.startswith("ALL_CARDS|"):
        return _parse_all_cards(line[len("ALL_CARDS|"):])
    if line.startswith("CARD_UPDATE|"):
        index, used = _require(_tokens(line[len("CARD_UPDATE|"):]), 2, "CARD_UPDATE")
        return CardUpdate(_atoi(index), bool(_atoi(used)))
    if line.startswith("TURN_UPDATE|"):
        fields = _require(_tokens(line[len("TURN_UPDATE|"):]), 4, "TURN_UPDATE")
        turn, phase, red, blue = (_atoi(field) for field in fields)
        return TurnUpdate(turn, phase, red, blue)
    if line.startswith("HINT|"):
        team, word, count = _require(_tokens(line[len("HINT|"):]), 3, "HINT")
        return HintMessage(_atoi(team), _truncate_utf8(word, HINT_WORD_MAX_BYTES), _atoi(count))
    if line.startswith("CHAT|"):
        fields, content = _leading_fields(line[len("CHAT|"):], 3)
        if len(fields) < 3 or not content:
            raise ProtocolError("CHAT needs team, leader flag, nickname and content")
        team, leader, nickname = fields
        return ChatMessage(_atoi(team), bool(_atoi(leader)), nickname, content)
    if line.startswith("GAME_OVER|"):
        return GameOver(line[len("GAME_OVER|"):])
    return None


def chat_visible(sender_team: int, sender_is_leader: bool, my_team: int, my_is_leader: bool) -> bool:
    """Decide whether a chat line reaches this player.

    System notices reach everyone; members' talk reaches everyone; a leader's
    talk reaches only leaders, of either team.
    """
    if sender_team == SYSTEM_TEAM:
        return True
    if not sender_is_leader:
        return True
    return bool(my_is_leader)


def input_mode_for_turn(my_team: int, is_leader: bool, turn_team: int, phase: int) -> InputMode:
    """The input the local player is asked for after a turn update."""
    if my_team == turn_team:
        if is_leader and phase == 0:
            return InputMode.HINT
        if not is_leader and phase == 1:
            return InputMode.ANSWER
    return InputMode.NONE


def format_chat(text: str) -> str:
    """Build a chat request."""
    return f"CHAT|{text}\n"


def format_hint(word: str, count: int) -> str:
    """Build a hint request."""
    return f"HINT|{word}|{int(count)}\n"


def format_answer(answer: str) -> str:
    """Build an answer request."""
    return f"ANSWER|{answer}\n"