"""Text layout of the game screen: cards, the board, the team panel and the turn banner."""

from __future__ import annotations

import unicodedata
from typing import Optional, Sequence

from codenames.game import BOARD_SIZE, MAX_CARDS, PLAYER_COUNT, RED_CARDS, BLUE_CARDS, Team

NEUTRAL_PAIR = 1
RED_PAIR = 2
BLUE_PAIR = 3
ASSASSIN_PAIR = 4

CARD_BORDER = "+--------+"
CARD_BODY = "|        |"
CARD_INNER_WIDTH = 8
USED_LABEL = "완료"

_REVEALED_PAIRS = {1: RED_PAIR, 2: BLUE_PAIR, 3: ASSASSIN_PAIR}

CardLines = tuple[str, str, str]
RenderedCard = tuple[CardLines, int]


def _display_width(text: str) -> int:
    """Number of terminal columns ``text`` takes up."""
    width = 0
    for char in text:
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def card_color_pair(card_type: int, revealed: bool) -> int:
    """Colour pair a card is drawn in; hidden cards all look neutral."""
    if not revealed:
        return NEUTRAL_PAIR
    return _REVEALED_PAIRS.get(int(card_type), NEUTRAL_PAIR)


def render_card(word: str, card_type: int, revealed: bool, used: bool) -> RenderedCard:
    """Return the three lines of a card and the colour pair to draw them in.

    The word is centred in the box; a used card shows the completion label
    at the word's position instead.
    """
    padding = max((CARD_INNER_WIDTH - _display_width(word)) // 2, 0)
    label = USED_LABEL if used else word
    inner = " " * padding + label
    covered = _display_width(inner)
    middle = "|" + inner + CARD_BODY[1 + covered:]
    return (CARD_BORDER, middle, CARD_BORDER), card_color_pair(card_type, revealed)


def render_board(cards: Sequence, reveal_all: bool) -> list[list[RenderedCard]]:
    """Lay out 25 cards as five rows of five rendered cards.

    A card is shown in its colour when ``reveal_all`` is set or it has been used.
    """
    if len(cards) != MAX_CARDS:
        raise ValueError(f"a board holds {MAX_CARDS} cards, got {len(cards)}")
    rendered = [
        render_card(card.name, card.type, reveal_all or bool(card.used), bool(card.used))
        for card in cards
    ]
    return [rendered[row:row + BOARD_SIZE] for row in range(0, MAX_CARDS, BOARD_SIZE)]


def render_team_panel(
    names: Sequence[str], red_score: int, blue_score: int, selected: Optional[int]
) -> list[tuple[str, bool]]:
    """Lines of the team panel, each paired with whether it is highlighted.

    ``selected`` is the seat under the report cursor, or None outside report mode.
    """
    if len(names) != PLAYER_COUNT:
        raise ValueError(f"expected {PLAYER_COUNT} player names, got {len(names)}")
    lines: list[tuple[str, bool]] = [(f"빨강 팀      남은 단어 - {RED_CARDS - red_score}", False)]
    lines.extend((f"  {name}     신고", selected == seat) for seat, name in enumerate(names[:3]))
    lines.append(("", False))
    lines.append((f"파랑 팀      남은 단어 - {BLUE_CARDS - blue_score}", False))
    lines.extend(
        (f"  {name}      신고", selected == seat)
        for seat, name in enumerate(names[3:], start=3)
    )
    return lines


def turn_banner(team: int, phase: int) -> str:
    """The header saying which team and which role is to act."""
    team_name = "빨강팀" if int(team) == Team.RED else "파랑팀"
    role = "팀장" if phase % 2 == 0 else "팀원"
    return f"[{team_name} {role} 차례]"