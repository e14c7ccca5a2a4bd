"""Scene states, game results and the result report sent to the game server."""

from __future__ import annotations

import socket
from enum import Enum, auto

REPLY_BUFFER_SIZE = 256


class SceneState(Enum):
    """Screens the client can be on, and the ways a screen can end."""

    LOGIN = auto()
    SIGNUP = auto()
    MAIN = auto()
    BOARD = auto()
    INVALID_TOKEN = auto()
    ERROR = auto()
    RESULT = auto()
    EXIT = auto()


class Result(Enum):
    """Outcome of a finished game for the local player."""

    WIN = auto()
    LOSE = auto()


_MESSAGES = {
    Result.WIN: "Y O U   W I N !",
    Result.LOSE: "Y O U   L O S E !",
}

_WIRE_WORDS = {
    Result.WIN: "WIN",
    Result.LOSE: "LOSS",
}


def result_message(result: Result) -> str:
    """Return the banner shown on the result screen."""
    return _MESSAGES.get(result, "")


def format_result_request(token: str, result: Result) -> str:
    """Build the ``RESULT|<token>|WIN|LOSS`` request."""
    try:
        word = _WIRE_WORDS[result]
    except (KeyError, TypeError):
        raise ValueError(f"not a game result: {result!r}") from None
    return f"RESULT|{token}|{word}"


def parse_result_reply(reply: str) -> SceneState:
    """Map the server's reply to a result report onto the next scene."""
    if reply == "INVALID_TOKEN":
        return SceneState.INVALID_TOKEN
    if reply == "ERROR":
        return SceneState.ERROR
    return SceneState.RESULT


def send_game_result(sock: socket.socket, token: str, result: Result) -> SceneState:
    """Report the result over ``sock`` and return the scene to move to.

    The socket is closed when the server rejects the token or reports an error.
    """
    request = format_result_request(token, result)
    try:
        sock.sendall(request.encode("utf-8"))
        data = sock.recv(REPLY_BUFFER_SIZE - 1)
    except OSError:
        return SceneState.ERROR
    if not data:
        return SceneState.ERROR

    scene = parse_result_reply(data.decode("utf-8", errors="replace"))
    if scene in (SceneState.INVALID_TOKEN, SceneState.ERROR):
        sock.close()
    return scene