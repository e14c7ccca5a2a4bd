import random

import pytest

from codenames.game import CardType, Game, Team, default_user_names
from codenames.render import (
    CARD_BORDER,
    card_color_pair,
    render_board,
    render_card,
    render_team_panel,
    turn_banner,
)

WORDS = [f"w{i}" for i in range(25)]


def _game():
    return Game.from_words(WORDS, random.Random(7))


def test_hidden_cards_are_neutral():
    for kind in CardType:
        assert card_color_pair(kind, False) == 1


def test_revealed_colors():
    assert card_color_pair(CardType.RED, True) == 2
    assert card_color_pair(CardType.BLUE, True) == 3
    assert card_color_pair(CardType.NEUTRAL, True) == 4
    assert card_color_pair(CardType.ASSASSIN, True) == 1


def test_card_shape():
    lines, pair = render_card("cat", CardType.BLUE, True, False)
    assert lines[0] == "+--------+"
    assert lines[2] == CARD_BORDER
    assert lines[1].startswith("|") and lines[1].endswith("|")
    assert len(lines[1]) == len(CARD_BORDER)
    assert "cat" in lines[1]
    assert pair == 3


def test_card_word_is_centred():
    _, pair = render_card("ab", CardType.RED, False, False)
    middle = render_card("ab", CardType.RED, False, False)[0][1]
    left = middle.index("ab") - 1
    right = len(middle) - 1 - (middle.index("ab") + 2)
    assert left == right
    assert pair == 1


def test_used_card_shows_label():
    lines, _ = render_card("cat", CardType.RED, True, True)
    assert "완료" in lines[1]
    assert "cat" not in lines[1]


def test_board_layout_and_reveal():
    game = _game()
    board = render_board(game.cards, True)
    assert len(board) == 5
    assert all(len(row) == 5 for row in board)
    flat = [cell for row in board for cell in row]
    for card, (lines, pair) in zip(game.cards, flat):
        assert card.name in lines[1]
        assert pair == card_color_pair(card.type, True)


def test_board_hidden_except_used():
    game = _game()
    game.cards[3].used = True
    flat = [cell for row in render_board(game.cards, False) for cell in row]
    assert flat[3][1] == card_color_pair(game.cards[3].type, True)
    assert all(pair == 1 for i, (_, pair) in enumerate(flat) if i != 3)


def test_board_needs_25_cards():
    with pytest.raises(ValueError):
        render_board(_game().cards[:24], True)


def test_team_panel():
    names = default_user_names()
    panel = render_team_panel(names, 0, 0, None)
    assert len(panel) == 9
    assert panel[0][0].startswith("빨강 팀      남은 단어 - ")
    assert panel[5][0].startswith("파랑 팀      남은 단어 - ")
    assert "guest0" in panel[1][0]
    assert "guest5" in panel[8][0]
    assert not any(high for _, high in panel)


def test_team_panel_remaining_decreases():
    names = default_user_names()
    fresh = render_team_panel(names, 0, 0, None)
    later = render_team_panel(names, 2, 3, None)
    assert fresh[0][0] != later[0][0]
    assert int(fresh[0][0].rsplit(" ", 1)[1]) - int(later[0][0].rsplit(" ", 1)[1]) == 2
    assert int(fresh[5][0].rsplit(" ", 1)[1]) - int(later[5][0].rsplit(" ", 1)[1]) == 3


def test_team_panel_highlight():
    panel = render_team_panel(default_user_names(), 0, 0, 4)
    highlighted = [text for text, high in panel if high]
    assert len(highlighted) == 1
    assert "guest4" in highlighted[0]


def test_team_panel_needs_six_names():
    with pytest.raises(ValueError):
        render_team_panel(["a", "b"], 0, 0, None)


def test_turn_banner():
    assert turn_banner(Team.RED, 0) == "[빨강팀 팀장 차례]"
    assert turn_banner(Team.BLUE, 3) == "[파랑팀 팀원 차례]"
    assert turn_banner(Team.BLUE, 2) == turn_banner(1, 0)