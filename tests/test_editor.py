import pytest

from codenames.chatlog import ChatLog
from codenames.editor import (
    ANSWER_MAX_LEN,
    HINT_MAX_LEN,
    KEY_BACKSPACE,
    KEY_DELETE,
    KEY_DOWN,
    KEY_UP,
    LINK_MAX_LEN,
    EditResult,
    InputMode,
    LineEditor,
    ModeController,
)


def type_text(editor, text):
    return [editor.feed(ch) for ch in text]


def test_typing_builds_text_and_stays_pending():
    editor = LineEditor(max_length=HINT_MAX_LEN)
    results = type_text(editor, "apple")
    assert editor.text == "apple"
    assert set(results) == {EditResult.PENDING}


def test_enter_submits_without_changing_text():
    editor = LineEditor()
    type_text(editor, "hi")
    assert editor.feed("\n") is EditResult.SUBMIT
    assert editor.text == "hi"


def test_tab_and_ctrl_a():
    editor = LineEditor()
    assert editor.feed("\t") is EditResult.TOGGLE_CHAT
    assert editor.feed(1) is EditResult.REPORT


@pytest.mark.parametrize("key", [KEY_BACKSPACE, KEY_DELETE])
def test_backspace_removes_last_char(key):
    editor = LineEditor()
    type_text(editor, "abc")
    editor.feed(key)
    assert editor.text == "ab"


def test_backspace_on_empty_is_harmless():
    editor = LineEditor()
    assert editor.feed(KEY_BACKSPACE) is EditResult.PENDING
    assert editor.text == ""


@pytest.mark.parametrize("limit", [LINK_MAX_LEN, HINT_MAX_LEN, ANSWER_MAX_LEN])
def test_length_limit(limit):
    editor = LineEditor(max_length=limit)
    type_text(editor, "x" * (limit + 5))
    assert len(editor.text) == limit


def test_non_printable_and_non_ascii_ignored():
    editor = LineEditor()
    editor.feed(7)
    editor.feed(200)
    editor.feed("é")
    assert editor.text == ""


def test_scroll_keys_only_when_enabled():
    chat = LineEditor(scroll_keys=True)
    assert chat.feed(KEY_UP) is EditResult.SCROLL_UP
    assert chat.feed(KEY_DOWN) is EditResult.SCROLL_DOWN
    plain = LineEditor()
    assert plain.feed(KEY_UP) is EditResult.PENDING
    assert plain.text == ""


def test_multi_char_string_key_rejected():
    with pytest.raises(ValueError):
        LineEditor().feed("ab")


def test_enter_records_stage_and_toggle_returns_to_it():
    ctl = ModeController()
    ctl.enter(InputMode.LINK)
    assert ctl.last_stage is InputMode.LINK
    assert ctl.toggle_chat() is InputMode.CHAT
    assert ctl.toggle_chat() is InputMode.LINK


def test_entering_chat_does_not_change_stage():
    ctl = ModeController()
    ctl.enter(InputMode.ANSWER)
    ctl.enter(InputMode.CHAT)
    ctl.enter(InputMode.REPORT)
    assert ctl.last_stage is InputMode.ANSWER


def test_default_stage_is_hint():
    ctl = ModeController(mode=InputMode.CHAT)
    assert ctl.toggle_chat() is InputMode.HINT


def test_report_cursor_is_bounded():
    ctl = ModeController(mode=InputMode.REPORT)
    ctl.report_key(KEY_UP)
    assert ctl.report_index == 0
    for _ in range(10):
        ctl.report_key(KEY_DOWN)
    assert ctl.report_index == len(ctl.user_names) - 1


def test_report_enter_logs_and_switches_to_chat():
    log = ChatLog()
    ctl = ModeController(log=log, mode=InputMode.REPORT)
    ctl.report_key(KEY_DOWN)
    message = ctl.report_key("\n")
    assert message == "[신고 완료] guest1 님을 신고했습니다."
    assert log.entries[-1].text == message
    assert ctl.mode is InputMode.CHAT


def test_report_tab_and_ctrl_a():
    ctl = ModeController(mode=InputMode.REPORT)
    assert ctl.report_key("\t") is None
    assert ctl.mode is InputMode.CHAT
    ctl.mode = InputMode.REPORT
    ctl.report_key(1)
    assert ctl.mode is InputMode.HINT


def test_report_other_keys_do_nothing():
    ctl = ModeController(mode=InputMode.REPORT)
    assert ctl.report_key("z") is None
    assert ctl.mode is InputMode.REPORT
    assert ctl.report_index == 0