import pytest

from dodengine.input import (
    GAMEPAD_BUTTON_COUNT,
    KEY_COUNT,
    TYPED_FIRST_DELAY,
    TYPED_INPUT_SIZE,
    Button,
    Controller,
    GamepadButton,
    GamepadState,
    Input,
    InputState,
    Key,
)


def test_key_count_bounds_input_state():
    assert KEY_COUNT == 47
    assert Key.LEFT_ALT == KEY_COUNT - 1
    state = InputState()
    state.set_button_state(Key.LEFT_ALT, True)
    state.update_all_buttons(0.0)
    assert state.is_button_held(Key.LEFT_ALT) is True
    assert state.is_button_pressed(KEY_COUNT) is False
    with pytest.raises(IndexError):
        state.set_button_state(KEY_COUNT, True)


def test_gamepad_button_values_index_controller():
    assert GamepadButton.A == 0
    assert GamepadButton.DPAD_LEFT == GAMEPAD_BUTTON_COUNT - 1
    pressed = [False] * GAMEPAD_BUTTON_COUNT
    pressed[GamepadButton.DPAD_LEFT] = True
    state = InputState()
    state.update_all_buttons(0.0, [GamepadState(buttons=tuple(pressed))])
    c = state.controller
    assert c.buttons[GamepadButton.DPAD_LEFT].pressed is True
    assert c.buttons[GamepadButton.A].pressed is False
    assert c.buttons[GamepadButton.A].released is True


def test_button_press_hold_release():
    b = Button()
    b.process_event(True)
    b.update(0.016)
    assert (b.pressed, b.held, b.released, b.typed) == (True, True, False, True)
    assert b.typed_time == TYPED_FIRST_DELAY
    assert b.new_state is None

    b.update(0.016)
    assert (b.pressed, b.held, b.released) == (False, True, False)

    b.process_event(False)
    b.update(0.016)
    assert (b.pressed, b.held, b.released) == (False, False, True)
    assert b.typed is False

    b.update(0.016)
    assert (b.pressed, b.held, b.released) == (False, False, False)


def test_repeated_press_event_is_not_new_press():
    b = Button()
    b.process_event(True)
    b.update(0.0)
    b.process_event(True)
    b.update(0.0)
    assert b.pressed is False
    assert b.held is True


def test_typing_repeat():
    b = Button()
    b.process_event(True)
    b.update(0.0)
    b.update(0.01)
    assert b.typed is False
    b.update(TYPED_FIRST_DELAY)
    assert b.typed is True
    assert b.typed_time >= 0.0


def test_merge():
    a = Button(pressed=True)
    b = Button(held=True, released=True)
    a.merge(b)
    assert (a.pressed, a.held, a.released) == (True, True, True)


def test_reset():
    b = Button(pressed=True, held=True, released=True, typed=True)
    b.reset()
    assert (b.pressed, b.held, b.released) == (False, False, False)
    assert b.typed is True


def test_controller_reset():
    c = Controller()
    c.lt = 0.5
    c.buttons[0].held = True
    c.reset()
    assert c == Controller()


def test_input_state_out_of_range_keys():
    state = InputState()
    assert state.is_button_held(-1) is False
    assert state.is_button_pressed(KEY_COUNT) is False
    assert state.is_button_released(KEY_COUNT + 5) is False
    assert state.is_button_typed(-3) is False


def test_set_button_state_out_of_range():
    with pytest.raises(IndexError):
        InputState().set_button_state(KEY_COUNT, True)


def test_set_button_state_and_update():
    state = InputState()
    state.set_button_state(Key.SPACE, True)
    assert state.is_button_pressed(Key.SPACE) is False
    state.update_all_buttons(0.016)
    assert state.is_button_pressed(Key.SPACE) is True
    assert state.is_button_held(Key.SPACE) is True
    assert state.is_button_typed(Key.SPACE) is True
    state.set_button_state(Key.SPACE, False)
    state.update_all_buttons(0.016)
    assert state.is_button_released(Key.SPACE) is True


def test_mouse_states():
    state = InputState()
    state.set_left_mouse_state(True)
    state.set_right_mouse_state(False)
    state.update_all_buttons(0.0)
    frame = state.snapshot(0.0, True)
    assert frame.is_lmouse_pressed() is True
    assert frame.is_lmouse_held() is True
    assert frame.is_lmouse_released() is False
    assert frame.is_rmouse_released() is True
    assert frame.is_rmouse_pressed() is False
    assert frame.is_rmouse_held() is False


def test_reset_inputs_to_zero():
    state = InputState()
    state.set_button_state(Key.A, True)
    state.update_all_buttons(0.0)
    state.add_to_typed_input("a")
    state.controller.lt = 1.0
    state.reset_inputs_to_zero()
    assert state.is_button_held(Key.A) is False
    assert state.typed_input == ""
    assert state.controller == Controller()


def test_typed_input_accepts_codes():
    state = InputState()
    state.add_to_typed_input(8)
    state.add_to_typed_input("x")
    assert state.typed_input == chr(8) + "x"
    state.reset_typed_input()
    assert state.typed_input == ""


def test_snapshot_truncates_typed_input():
    state = InputState()
    for _ in range(30):
        state.add_to_typed_input("z")
    frame = state.snapshot(0.1, True, 3, 4)
    assert len(frame.typed_input) == TYPED_INPUT_SIZE - 1
    assert (frame.mouse_x, frame.mouse_y, frame.delta_time) == (3, 4, 0.1)


def test_snapshot_is_independent():
    state = InputState()
    state.set_button_state(Key.W, True)
    state.update_all_buttons(0.0)
    frame = state.snapshot(0.0, True)
    state.set_button_state(Key.W, False)
    state.update_all_buttons(0.0)
    assert frame.is_button_held(Key.W) is True
    assert frame.is_button_pressed(Key.W) is True
    assert state.is_button_held(Key.W) is False


def test_input_methods_match_buttons():
    frame = Input()
    frame.buttons[Key.UP].held = True
    frame.buttons[Key.UP].typed = True
    assert frame.is_button_held(Key.UP) is True
    assert frame.is_button_typed(Key.UP) is True
    assert frame.is_button_pressed(Key.UP) is False
    assert frame.is_button_released(Key.UP) is False


def test_controller_hidden_without_focus():
    state = InputState()
    state.controller.lt = 0.5
    assert state.controller_buttons(False) == Controller()
    assert state.controller_buttons(True).lt == state.controller.lt


def test_gamepad_update_uses_first_pad():
    pressed = [False] * GAMEPAD_BUTTON_COUNT
    pressed[GamepadButton.A] = True
    first = GamepadState(buttons=tuple(pressed), left_x=0.25, left_y=-0.5,
                         right_x=0.75, right_y=-0.25,
                         left_trigger=0.1, right_trigger=0.9)
    second = GamepadState(buttons=(True,) * GAMEPAD_BUTTON_COUNT)
    state = InputState()
    state.update_all_buttons(0.0, [None, first, second])
    c = state.controller
    assert c.buttons[GamepadButton.A].pressed is True
    assert c.buttons[GamepadButton.B].pressed is False
    assert c.buttons[GamepadButton.B].released is True
    assert c.lt == first.right_trigger
    assert c.rt == first.left_trigger
    assert (c.l_stick.x, c.l_stick.y) == (first.left_x, first.left_y)
    assert (c.r_stick.x, c.r_stick.y) == (first.right_x, first.right_y)


def test_no_gamepad_leaves_controller():
    state = InputState()
    state.update_all_buttons(0.0, [None, None])
    assert state.controller == Controller()