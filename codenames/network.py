"""Client-side match state and the connection to the game server."""

from __future__ import annotations

import re
import socket
from dataclasses import dataclass, field, replace
from typing import Optional, Union

from codenames.chatlog import ChatLog
from codenames.editor import InputMode
from codenames.protocol import (
    MAX_CARDS,
    REQUEST_ALL_CARDS,
    AllCards,
    CardInfo,
    CardUpdate,
    ChatMessage,
    GameOver,
    HintMessage,
    Message,
    SessionAck,
    TurnUpdate,
    chat_visible,
    input_mode_for_turn,
    parse_line,
)

SERVER_IP = "127.0.0.1"
SSL_PORT = 55014
TCP_PORT = 55015
PLAYERS_PER_MATCH = 6
WAIT_REPLY_BUFFER_SIZE = 64

QUERY_WAIT = "CMD|QUERY_WAIT"
MSG_WAITING = "매칭 대기 중..."
MSG_MATCHED = "매칭 완료! 게임 시작..."
MSG_NO_REPLY = "서버 응답 없음"
MSG_BAD_REPLY = "❌ 서버 응답 오류"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _turn_message(team: int) -> str:
    return f"[{'레드' if team == 0 else '블루'}팀의 턴입니다.]"


@dataclass(frozen=True)
class PlayerEntry:
    """One seat in the match."""

    nickname: str
    role_num: int = 0
    team: int = 0
    is_leader: bool = False


@dataclass(frozen=True)
class GameInitInfo:
    """The players of a match and which of them is the local player."""

    players: tuple[PlayerEntry, ...]
    my_player_index: int = 0

    @property
    def me(self) -> PlayerEntry:
        return self.players[self.my_player_index]


def _blank_cards() -> list[CardInfo]:
    return [CardInfo("", 0, False) for _ in range(MAX_CARDS)]


@dataclass
class GameState:
    """What the client knows about a running match, updated from server messages."""

    info: GameInitInfo
    cards: list[CardInfo] = field(default_factory=_blank_cards)
    red_score: int = 0
    blue_score: int = 0
    turn_team: int = 0
    phase: int = 0
    game_over: bool = False
    hint_word: str = ""
    hint_count: int = 0
    cards_initialized: bool = False
    input_mode: InputMode = InputMode.NONE
    log: ChatLog = field(default_factory=ChatLog)

    @property
    def cards_valid(self) -> bool:
        """True when every card has a name and a known type."""
        return AllCards(tuple(self.cards)).is_valid

    @property
    def is_my_turn(self) -> bool:
        """True when the local player is the one expected to act."""
        me = self.info.me
        if me.team != self.turn_team:
            return False
        return (self.phase == 0 and me.is_leader) or (self.phase == 1 and not me.is_leader)

    def apply(self, message: Union[Message, str, None]) -> Optional[str]:
        """Apply one server message, given parsed or as a raw line.

        Returns a request to send back to the server, if the message calls
        for one. Malformed known messages raise ``ProtocolError``.
        """
        if isinstance(message, str):
            message = parse_line(message)
        if message is None:
            return None

        if isinstance(message, SessionAck):
            return REQUEST_ALL_CARDS
        if isinstance(message, AllCards):
            self.cards = list(message.cards)
            self.cards_initialized = True
        elif isinstance(message, CardUpdate):
            if 0 <= message.index < len(self.cards):
                self.cards[message.index] = replace(self.cards[message.index], used=message.used)
        elif isinstance(message, TurnUpdate):
            self.turn_team = message.turn_team
            self.phase = message.phase
            self.red_score = message.red_score
            self.blue_score = message.blue_score
            self.log.append(_turn_message(self.turn_team))
            me = self.info.me
            self.input_mode = input_mode_for_turn(me.team, me.is_leader, self.turn_team, self.phase)
        elif isinstance(message, HintMessage):
            self.turn_team = message.team
            self.hint_word = message.word
            self.hint_count = message.count
            self.log.append(
                f"[팀장 입력 힌트: {self.hint_word}, 연결 수 - {self.hint_count}, "
                f"{self.hint_count}번 시도 가능합니다.]"
            )
        elif isinstance(message, ChatMessage):
            me = self.info.me
            if chat_visible(message.team, message.is_leader, me.team, me.is_leader):
                if message.color_pair is None:
                    self.log.append(message.display_text)
                else:
                    self.log.append_colored(message.display_text, message.color_pair)
        elif isinstance(message, GameOver):
            self.game_over = True
        return None


@dataclass(frozen=True)
class MatchStatus:
    """Progress of matchmaking as shown on the waiting screen."""

    done: bool
    progress: int
    message: str


def connect_to_server(ip: str = SERVER_IP, port: int = TCP_PORT) -> socket.socket:
    """Open a TCP connection to the server; raises ``OSError`` on failure."""
    return socket.create_connection((ip, port))


def parse_wait_reply(reply: str) -> MatchStatus:
    """Interpret the server's answer to a matchmaking query."""
    prefix = "WAIT_REPLY|"
    if not reply.startswith(prefix):
        return MatchStatus(True, 100, MSG_BAD_REPLY)
    count = _atoi(reply[len(prefix):])
    scaled = count * 100
    progress = abs(scaled) // PLAYERS_PER_MATCH * (1 if scaled >= 0 else -1)
    if count >= PLAYERS_PER_MATCH:
        return MatchStatus(True, progress, MSG_MATCHED)
    return MatchStatus(False, progress, MSG_WAITING)


def wait_for_match(sock: Optional[socket.socket]) -> MatchStatus:
    """Ask the server how many players are waiting and report the progress.

    Without a socket there is nothing to wait for, so matching counts as done.
    """
    if sock is None:
        return MatchStatus(True, 0, MSG_WAITING)
    try:
        sock.sendall(QUERY_WAIT.encode("utf-8"))
        data = sock.recv(WAIT_REPLY_BUFFER_SIZE - 1)
    except OSError:
        data = b""
    if not data:
        return MatchStatus(True, 100, MSG_NO_REPLY)
    return parse_wait_reply(data.decode("utf-8", errors="replace"))