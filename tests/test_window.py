import pytest

from rpgkit.keys import Key, key_to_glfw
from rpgkit.window import Action, Window, get_window


def test_key_press_and_release():
    window = Window(640, 480, "test")
    code = key_to_glfw(Key.E)
    window.handle_key(code, Action.PRESS)
    assert window.get_key(Key.E)
    window.handle_key(code, Action.RELEASE)
    assert not window.get_key(Key.E)


def test_repeat_keeps_key_state():
    window = Window(640, 480, "test")
    code = key_to_glfw(Key.W)
    window.handle_key(code, Action.PRESS)
    window.handle_key(code, Action.REPEAT)
    assert window.get_key(Key.W)


def test_input_handlers_receive_events():
    window = Window(640, 480, "test")
    events = []
    window.on_input.append(lambda key, action: events.append((key, action)))
    code = key_to_glfw(Key.SPACE)
    window.handle_key(code, Action.PRESS)
    assert events == [(code, int(Action.PRESS))]


def test_negative_key_is_ignored():
    window = Window(640, 480, "test")
    events = []
    window.on_input.append(lambda key, action: events.append(key))
    window.handle_key(-1, Action.PRESS)
    assert events == []
    assert not window.get_key(Key.UNKNOWN)


def test_out_of_range_key_raises():
    window = Window(640, 480, "test")
    with pytest.raises(ValueError):
        window.handle_key(10_000, Action.PRESS)


def test_mouse_buttons():
    window = Window(640, 480, "test")
    window.handle_mouse_button(0, Action.PRESS)
    assert window.get_mouse_button(0)
    assert not window.get_mouse_button(1)
    window.handle_mouse_button(0, Action.RELEASE)
    assert not window.get_mouse_button(0)
    with pytest.raises(ValueError):
        window.get_mouse_button(8)


def test_cursor_position_without_resize_is_unchanged():
    window = Window(640, 480, "test")
    window.handle_cursor(12.0, 34.0)
    assert window.cursor_position() == (12.0, 34.0)


def test_cursor_position_scales_with_framebuffer():
    window = Window(100, 50, "test")
    window.handle_resize(200, 100)
    window.handle_cursor(10.0, 5.0)
    assert window.cursor_position() == (20.0, 10.0)


def test_resize_updates_size_and_notifies():
    window = Window(100, 50, "test")
    sizes = []
    window.on_resize.append(lambda w, h: sizes.append((w, h)))
    window.handle_resize(300, 200)
    assert (window.width, window.height) == (300, 200)
    assert sizes == [(300, 200)]


def test_close():
    window = Window(100, 50, "test")
    assert window.is_open()
    window.close()
    assert not window.is_open()


def test_get_window_is_a_singleton():
    first = get_window(1280, 720, "TRUE RPG")
    second = get_window(1, 1, "other")
    assert second is first
    assert second.title == first.title