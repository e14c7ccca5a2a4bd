# codenames

Building blocks for a terminal client of a six-player game of Codenames. Two
teams, red and blue, each have one leader who gives hints and two members who
guess words on a 5×5 board. Red must find 9 words, blue 8; the one assassin
card ends the game at once. Messages and labels are in Korean.

The package uses only the standard library.

## Modules

- `codenames.scenes` – `SceneState` (the screens a client moves between) and
  `Result` (`WIN` or `LOSE`). `result_message` gives the banner of the result
  screen. `format_result_request` builds `RESULT|<token>|WIN` or
  `RESULT|<token>|LOSS`; `parse_result_reply` maps the server's reply to the
  next scene (`INVALID_TOKEN`, `ERROR`, otherwise `RESULT`);
  `send_game_result` does the exchange over a socket and closes it when the
  token is rejected or the server reports an error.
- `codenames.chatlog` – `ChatLog`, a thread-safe history of at most 100
  `ChatEntry` lines with a scroll offset. `append` and `append_colored` add
  lines (cut to 127 UTF-8 bytes), `scroll_up` / `scroll_down` move the window,
  `visible(lines)` returns the lines to draw.
- `codenames.game` – a complete local game. `Game.from_words` shuffles 25
  words onto the board (9 red, 8 blue, 7 neutral, 1 assassin); `give_hint` and
  `guess` play a turn and log what happened; `check_game_over` and `winner`
  decide the end. `read_words` loads the first 25 words from a file,
  `default_user_names` gives `guest0` … `guest5`.
- `codenames.editor` – `LineEditor` edits one line of printable ASCII key by
  key and reports Enter, Tab, Ctrl+A and (optionally) arrow keys as
  `EditResult` values. `ModeController` switches between the `InputMode`s:
  Tab toggles chat and returns to the stage left for it, Ctrl+A and the arrow
  keys drive the report cursor.
- `codenames.protocol` – the line-based match protocol. `LineSplitter` cuts a
  byte stream into lines; `parse_line` turns a line into `AllCards`,
  `CardUpdate`, `TurnUpdate`, `HintMessage`, `ChatMessage`, `GameOver` or
  `SessionAck` (or `None` for unknown lines) and raises `ProtocolError` for
  malformed ones. `format_chat`, `format_hint` and `format_answer` build
  requests. `chat_visible` decides who sees a chat line: system notices and
  members' lines reach everyone, a leader's lines reach only leaders.
  `input_mode_for_turn` says what the local player should type next.
- `codenames.network` – `GameState` keeps what the client knows of a match
  and updates itself with `apply`, which accepts parsed messages or raw lines
  and returns a request to send back when one is due. `GameInitInfo` and
  `PlayerEntry` describe the six seats. `connect_to_server` opens a TCP
  connection (default `127.0.0.1:55015`); `wait_for_match` and
  `parse_wait_reply` turn the `CMD|QUERY_WAIT` exchange into a `MatchStatus`.
- `codenames.render` – text layout: `render_card`, `render_board`,
  `render_team_panel`, `turn_banner` and `card_color_pair` return strings and
  colour-pair numbers for a screen to draw.

## A local game

```python
import random

from codenames.game import Game, read_words

words = read_words("words.txt")            # at least 25 whitespace-separated words
game = Game.from_words(words, random.Random(7))

game.give_hint("동물", 2)                   # the red leader's hint
outcome = game.guess(game.cards[0].name)   # a red member's guess
print(outcome.messages, game.red_score, game.winner())
```

`give_hint` and `guess` raise `RuntimeError` when called in the wrong phase or
after the game has ended.

## Following a match

```python
from codenames.network import GameInitInfo, GameState, PlayerEntry
from codenames.protocol import LineSplitter

players = (
    PlayerEntry("red-leader", team=0, is_leader=True),
    PlayerEntry("red-1", team=0),
    PlayerEntry("red-2", team=0),
    PlayerEntry("blue-leader", team=1, is_leader=True),
    PlayerEntry("blue-1", team=1),
    PlayerEntry("blue-2", team=1),
)
state = GameState(GameInitInfo(players, my_player_index=1))
splitter = LineSplitter()

for line in splitter.feed(b"TURN_UPDATE|0|1|0|0\nHINT|0|animal|2\n"):
    reply = state.apply(line)
    if reply is not None:
        ...  # send reply to the server

print(state.input_mode, state.hint_word, [e.text for e in state.log.visible()])
```

## What the package does not do

It draws nothing itself: there is no curses screen, no login or sign-up
screen, no lobby, waiting or result screen, and no command to run. It does not
open the TLS connection used for logging in, and it contains no game server.
`codenames.render` only produces text and colour-pair numbers, and a word list
for `read_words` is not included.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.