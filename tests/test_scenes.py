import socket

import pytest

from codenames.scenes import (
    Result,
    SceneState,
    format_result_request,
    parse_result_reply,
    result_message,
    send_game_result,
)


def test_result_messages():
    assert result_message(Result.WIN) == "Y O U   W I N !"
    assert result_message(Result.LOSE) == "Y O U   L O S E !"


def test_format_win_request():
    assert format_result_request("token", Result.WIN) == "RESULT|token|WIN"


def test_format_lose_request_uses_loss():
    assert format_result_request("token", Result.LOSE) == "RESULT|token|LOSS"


def test_format_rejects_unknown_result():
    with pytest.raises(ValueError):
        format_result_request("token", "WIN")


@pytest.mark.parametrize(
    "reply, expected",
    [
        ("INVALID_TOKEN", SceneState.INVALID_TOKEN),
        ("ERROR", SceneState.ERROR),
        ("OK", SceneState.RESULT),
        ("", SceneState.RESULT),
    ],
)
def test_parse_result_reply(reply, expected):
    assert parse_result_reply(reply) is expected


@pytest.fixture
def pair():
    a, b = socket.socketpair()
    yield a, b
    a.close()
    b.close()


def test_send_game_result_success(pair):
    client, server = pair
    server.sendall(b"OK")
    scene = send_game_result(client, "token", Result.WIN)
    assert scene is SceneState.RESULT
    assert server.recv(256) == b"RESULT|token|WIN"
    assert client.fileno() != -1


def test_send_game_result_invalid_token_closes(pair):
    client, server = pair
    server.sendall(b"INVALID_TOKEN")
    scene = send_game_result(client, "token", Result.LOSE)
    assert scene is SceneState.INVALID_TOKEN
    assert client.fileno() == -1
    assert server.recv(256) == b"RESULT|token|LOSS"


def test_send_game_result_error_closes(pair):
    client, server = pair
    server.sendall(b"ERROR")
    assert send_game_result(client, "token", Result.WIN) is SceneState.ERROR
    assert client.fileno() == -1


def test_send_game_result_connection_closed(pair):
    client, server = pair
    server.shutdown(socket.SHUT_WR)
    assert send_game_result(client, "token", Result.WIN) is SceneState.ERROR