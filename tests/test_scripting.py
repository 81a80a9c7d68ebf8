import pytest

from ramla.button import ButtonState
from ramla.colors import Color
from ramla.scripting import (
    TEST_BUTTON_TEXT,
    WELCOME_MESSAGE,
    ScriptError,
    ScriptHost,
    button_from_table,
    state_to_table,
)


class _RecordingUi:
    def __init__(self, state=ButtonState()):
        self.state = state
        self.buttons = []

    def __call__(self, btn):
        self.buttons.append(btn)
        return self.state


def test_call_text_welcome_message():
    host = ScriptHost(_RecordingUi())
    assert host.call_text("getWelcomeMessage") == WELCOME_MESSAGE


def test_call_math_multiply():
    host = ScriptHost(_RecordingUi())
    assert host.call_math("multiply", 3, 2) == 6.0


def test_missing_function_defaults():
    host = ScriptHost(_RecordingUi())
    assert host.call_text("nothing") is None
    assert host.call_math("nothing", 1, 2) == 0.0
    assert host.call_button("nothing") == ButtonState(False, False, False)


def test_call_missing_raises():
    host = ScriptHost(_RecordingUi())
    with pytest.raises(ScriptError):
        host.call("nothing")


def test_call_wraps_failures():
    host = ScriptHost(_RecordingUi())

    def broken():
        raise ValueError("bad")

    host.register("broken", broken)
    with pytest.raises(ScriptError):
        host.call("broken")
    assert host.call_text("broken") is None


def test_register_rejects_non_callable():
    host = ScriptHost(_RecordingUi())
    with pytest.raises(TypeError):
        host.register("value", 5)


def test_call_text_number_result():
    host = ScriptHost(_RecordingUi())
    host.register("answer", lambda: 42)
    assert host.call_text("answer") == "42"


def test_call_text_non_text_result_is_none():
    host = ScriptHost(_RecordingUi())
    host.register("table", lambda: {"a": 1})
    assert host.call_text("table") is None


def test_draw_test_button_passes_layout_and_state():
    ui = _RecordingUi(ButtonState(hovered=True, pressed=False, clicked=True))
    host = ScriptHost(ui)
    marker = object()
    host.font = marker
    state = host.call_button("drawTestButton")
    assert state == ButtonState(hovered=True, pressed=False, clicked=True)
    btn = ui.buttons[0]
    assert btn.x == (1920 - 300) / 2
    assert btn.y == (1080 - 120) / 2
    assert (btn.width, btn.height) == (300, 120)
    assert btn.text == TEST_BUTTON_TEXT
    assert btn.font is marker


def test_call_button_non_table_result():
    host = ScriptHost(_RecordingUi())
    host.register("plain", lambda: "text")
    assert host.call_button("plain") == ButtonState()


def test_call_button_uses_script_truthiness():
    host = ScriptHost(_RecordingUi())
    host.register("custom", lambda: {"hovered": 0, "pressed": None, "clicked": False})
    assert host.call_button("custom") == ButtonState(hovered=True, pressed=False, clicked=False)


def test_close_disables_calls():
    host = ScriptHost(_RecordingUi())
    host.close()
    assert host.closed
    assert host.call_text("getWelcomeMessage") is None
    with pytest.raises(ScriptError):
        host.call("multiply", 1, 2)


def test_context_manager_closes():
    with ScriptHost(_RecordingUi()) as host:
        assert host.call_text("getWelcomeMessage") == WELCOME_MESSAGE
    assert host.closed


def test_button_from_table_defaults():
    btn = button_from_table({"x": 1, "y": 2, "width": 3, "height": 4, "text": "Go"}, None)
    assert (btn.x, btn.y, btn.width, btn.height) == (1, 2, 3, 4)
    assert btn.text == "Go"
    assert btn.font_size == 56
    assert btn.border_width == 2.0
    assert btn.border_radius == 0.3
    assert btn.segments == 16
    assert btn.background_color == Color(74, 144, 226)
    assert btn.pressed_color == Color(54, 124, 206)


def test_button_from_table_missing_fields_are_zero():
    btn = button_from_table({}, None)
    assert (btn.x, btn.y, btn.width, btn.height) == (0.0, 0.0, 0.0, 0.0)
    assert btn.text == ""


def test_button_from_table_numeric_strings_and_text_number():
    btn = button_from_table({"fontSize": "40", "text": 12}, None)
    assert btn.font_size == 40
    assert btn.text == "12"


def test_button_from_table_font_choice():
    marker = object()
    assert button_from_table({}, marker).font is marker
    assert button_from_table({"useRoboto": False}, marker).font is None
    assert button_from_table({"useRoboto": "no"}, marker).font is marker


def test_button_from_table_requires_table():
    with pytest.raises(ScriptError):
        button_from_table("not a table", None)


def test_button_binding_rejects_non_table():
    host = ScriptHost(_RecordingUi())
    with pytest.raises(ScriptError):
        host.call("button", 5)


def test_state_to_table():
    table = state_to_table(ButtonState(hovered=True, pressed=False, clicked=True))
    assert table == {"hovered": True, "pressed": False, "clicked": True}