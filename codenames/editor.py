"""Keyboard handling for the game screen: line editing and input-mode switching."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Union

from codenames.chatlog import ChatLog
from codenames.game import default_user_names

KEY_ENTER = 10
KEY_TAB = 9
KEY_CTRL_A = 1
KEY_DELETE = 127
KEY_DOWN = 0o402
KEY_UP = 0o403
KEY_BACKSPACE = 0o407

HINT_MAX_LEN = 19
LINK_MAX_LEN = 3
ANSWER_MAX_LEN = 31
CHAT_MAX_LEN = 99

REPORT_MESSAGE = "[신고 완료] {name} 님을 신고했습니다."

Key = Union[int, str]


def _key_code(key: Key) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"expected a single character, got {key!r}")
        return ord(key)
    return int(key)


class InputMode(Enum):
    """What the keyboard is currently typing into."""

    NONE = auto()
    HINT = auto()
    LINK = auto()
    ANSWER = auto()
    CHAT = auto()
    REPORT = auto()


_STAGE_MODES = (InputMode.HINT, InputMode.LINK, InputMode.ANSWER)


class EditResult(Enum):
    """What a key press did to a line being edited."""

    PENDING = auto()
    SUBMIT = auto()
    TOGGLE_CHAT = auto()
    REPORT = auto()
    SCROLL_UP = auto()
    SCROLL_DOWN = auto()


@dataclass
class LineEditor:
    """A single line of printable ASCII, at most ``max_length`` characters long.

    With ``scroll_keys`` set, the up and down arrows are reported so the
    chat log can be scrolled while the line is being typed.
    """

    max_length: int = CHAT_MAX_LEN
    scroll_keys: bool = False
    _chars: list[str] = field(default_factory=list, init=False, repr=False)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def feed(self, key: Key) -> EditResult:
        """Apply one key press and report what it means to the caller."""
        code = _key_code(key)
        if code == KEY_ENTER:
            return EditResult.SUBMIT
        if code == KEY_TAB:
            return EditResult.TOGGLE_CHAT
        if code == KEY_CTRL_A:
            return EditResult.REPORT
        if code in (KEY_BACKSPACE, KEY_DELETE):
            if self._chars:
                self._chars.pop()
            return EditResult.PENDING
        if self.scroll_keys and code == KEY_UP:
            return EditResult.SCROLL_UP
        if self.scroll_keys and code == KEY_DOWN:
            return EditResult.SCROLL_DOWN
        if 32 <= code <= 126 and len(self._chars) < self.max_length:
            self._chars.append(chr(code))
        return EditResult.PENDING


@dataclass
class ModeController:
    """Tracks the input mode, the stage to return to from chat, and the report cursor."""

    user_names: list[str] = field(default_factory=default_user_names)
    log: Optional[ChatLog] = None
    mode: InputMode = InputMode.NONE
    last_stage: InputMode = InputMode.HINT
    report_index: int = 0

    def enter(self, mode: InputMode) -> InputMode:
        """Switch to ``mode``, remembering it if it is a hint, link or answer stage."""
        if mode in _STAGE_MODES:
            self.last_stage = mode
        self.mode = mode
        return self.mode

    def toggle_chat(self) -> InputMode:
        """Go into chat, or from chat back to the stage that was left for it."""
        if self.mode is InputMode.CHAT:
            self.mode = self.last_stage
        else:
            self.mode = InputMode.CHAT
        return self.mode

    def report_key(self, key: Key) -> Optional[str]:
        """Handle a key in report mode; return the log line when a report is made."""
        code = _key_code(key)
        if code == KEY_UP:
            if self.report_index > 0:
                self.report_index -= 1
        elif code == KEY_DOWN:
            if self.report_index < len(self.user_names) - 1:
                self.report_index += 1
        elif code == KEY_ENTER:
            message = REPORT_MESSAGE.format(name=self.user_names[self.report_index])
            if self.log is not None:
                self.log.append(message)
            self.mode = InputMode.CHAT
            return message
        elif code == KEY_TAB:
            self.mode = InputMode.CHAT
        elif code == KEY_CTRL_A:
            self.mode = InputMode.HINT
        return None