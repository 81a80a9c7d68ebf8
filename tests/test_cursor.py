import pytest

from ramla.cursor import Cursor, CursorType, cursor_style


def _recording_cursor():
    applied = []
    return Cursor(apply=applied.append), applied


def test_cursor_style_names():
    assert cursor_style(CursorType.DEFAULT) == "default"
    assert cursor_style(CursorType.POINTER) == "pointer"
    assert cursor_style(CursorType.NOT_ALLOWED) == "not-allowed"
    assert cursor_style(CursorType.GRABBING) == "grabbing"


@pytest.mark.parametrize("kind", list(CursorType))
def test_style_round_trip(kind):
    assert CursorType(cursor_style(kind)) is kind


def test_unknown_style_rejected():
    with pytest.raises(ValueError):
        cursor_style("spinner")


def test_starts_at_default():
    cursor, applied = _recording_cursor()
    assert cursor.current is CursorType.DEFAULT
    assert applied == []


def test_set_applies_and_records():
    cursor, applied = _recording_cursor()
    cursor.set(CursorType.POINTER)
    assert applied == [CursorType.POINTER]
    assert cursor.current is CursorType.POINTER


def test_set_accepts_style_name():
    cursor, applied = _recording_cursor()
    cursor.set("grab")
    assert cursor.current is CursorType.GRAB
    assert applied == [CursorType.GRAB]


def test_set_unknown_leaves_state():
    cursor, applied = _recording_cursor()
    cursor.set_pointer()
    with pytest.raises(ValueError):
        cursor.set("bogus")
    assert cursor.current is CursorType.POINTER
    assert applied == [CursorType.POINTER]


def test_convenience_setters():
    cursor, applied = _recording_cursor()
    cursor.set_text()
    cursor.set_pointer()
    cursor.set_default()
    assert applied == [CursorType.TEXT, CursorType.POINTER, CursorType.DEFAULT]
    assert cursor.current is CursorType.DEFAULT


def test_repeated_set_is_applied_each_time():
    cursor, applied = _recording_cursor()
    cursor.set_pointer()
    cursor.set_pointer()
    assert applied == [CursorType.POINTER, CursorType.POINTER]


def test_default_apply_without_window_keeps_state():
    cursor = Cursor()
    cursor.set(CursorType.MOVE)
    assert cursor.current is CursorType.MOVE