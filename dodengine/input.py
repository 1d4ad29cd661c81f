"""Keyboard, mouse and gamepad button state with press, release and typing repeat."""

from __future__ import annotations

import copy
import enum
from collections.abc import Iterable
from dataclasses import dataclass, field

from .strings import strlcpy

TYPED_FIRST_DELAY = 0.48
TYPED_REPEAT_DELAY = 0.07
TYPED_INPUT_SIZE = 20


class Key(enum.IntEnum):
    A = 0
    B = enum.auto()
    C = enum.auto()
    D = enum.auto()
    E = enum.auto()
    F = enum.auto()
    G = enum.auto()
    H = enum.auto()
    I = enum.auto()  # noqa: E741
    J = enum.auto()
    K = enum.auto()
    L = enum.auto()
    M = enum.auto()
    N = enum.auto()
    O = enum.auto()  # noqa: E741
    P = enum.auto()
    Q = enum.auto()
    R = enum.auto()
    S = enum.auto()
    T = enum.auto()
    U = enum.auto()
    V = enum.auto()
    W = enum.auto()
    X = enum.auto()
    Y = enum.auto()
    Z = enum.auto()
    NR0 = enum.auto()
    NR1 = enum.auto()
    NR2 = enum.auto()
    NR3 = enum.auto()
    NR4 = enum.auto()
    NR5 = enum.auto()
    NR6 = enum.auto()
    NR7 = enum.auto()
    NR8 = enum.auto()
    NR9 = enum.auto()
    SPACE = enum.auto()
    ENTER = enum.auto()
    ESCAPE = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    LEFT_CTRL = enum.auto()
    TAB = enum.auto()
    LEFT_SHIFT = enum.auto()
    LEFT_ALT = enum.auto()


KEY_COUNT = len(Key)


class GamepadButton(enum.IntEnum):
    A = 0
    B = 1
    X = 2
    Y = 3
    LEFT_BUMPER = 4
    RIGHT_BUMPER = 5
    BACK = 6
    START = 7
    GUIDE = 8
    LEFT_THUMB = 9
    RIGHT_THUMB = 10
    DPAD_UP = 11
    DPAD_RIGHT = 12
    DPAD_DOWN = 13
    DPAD_LEFT = 14


GAMEPAD_BUTTON_COUNT = len(GamepadButton)


@dataclass
class Button:
    """State of one button; ``new_state`` is None when no event arrived this frame."""

    pressed: bool = False
    held: bool = False
    released: bool = False
    new_state: bool | None = None
    typed: bool = False
    typed_time: float = 0.0

    def merge(self, other: Button) -> None:
        self.pressed |= other.pressed
        self.released |= other.released
        self.held |= other.held

    def reset(self) -> None:
        self.pressed = False
        self.held = False
        self.released = False

    def process_event(self, new_state) -> None:
        self.new_state = bool(new_state)

    def update(self, delta_time: float) -> None:
        """Advance one frame, applying the pending event and typing repeat."""
        if self.new_state is True:
            self.pressed = not self.held
            self.held = True
            self.released = False
        elif self.new_state is False:
            self.held = False
            self.pressed = False
            self.released = True
        else:
            self.pressed = False
            self.released = False

        if self.pressed:
            self.typed = True
            self.typed_time = TYPED_FIRST_DELAY
        elif self.held:
            self.typed_time -= delta_time
            if self.typed_time < 0.0:
                self.typed_time += TYPED_REPEAT_DELAY
                self.typed = True
            else:
                self.typed = False
        else:
            self.typed_time = 0.0
            self.typed = False

        self.new_state = None


def _buttons(count: int) -> list[Button]:
    return [Button() for _ in range(count)]


@dataclass
class Stick:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Controller:
    buttons: list[Button] = field(default_factory=lambda: _buttons(GAMEPAD_BUTTON_COUNT))
    lt: float = 0.0
    rt: float = 0.0
    l_stick: Stick = field(default_factory=Stick)
    r_stick: Stick = field(default_factory=Stick)

    def reset(self) -> None:
        fresh = Controller()
        self.buttons = fresh.buttons
        self.lt = fresh.lt
        self.rt = fresh.rt
        self.l_stick = fresh.l_stick
        self.r_stick = fresh.r_stick


@dataclass
class GamepadState:
    """One polled gamepad: pressed flags per button and axis values."""

    buttons: tuple[bool, ...] = (False,) * GAMEPAD_BUTTON_COUNT
    left_x: float = 0.0
    left_y: float = 0.0
    right_x: float = 0.0
    right_y: float = 0.0
    left_trigger: float = 0.0
    right_trigger: float = 0.0


@dataclass
class Input:
    """Per-frame snapshot of input handed to the game."""

    lmouse: Button = field(default_factory=Button)
    rmouse: Button = field(default_factory=Button)
    mouse_x: int = 0
    mouse_y: int = 0
    buttons: list[Button] = field(default_factory=lambda: _buttons(KEY_COUNT))
    typed_input: str = ""
    delta_time: float = 0.0
    has_focus: bool = False
    controller: Controller = field(default_factory=Controller)

    def is_button_held(self, key: int) -> bool:
        return self.buttons[key].held

    def is_button_pressed(self, key: int) -> bool:
        return self.buttons[key].pressed

    def is_button_released(self, key: int) -> bool:
        return self.buttons[key].released

    def is_button_typed(self, key: int) -> bool:
        return self.buttons[key].typed

    def is_lmouse_pressed(self) -> bool:
        return self.lmouse.pressed

    def is_rmouse_pressed(self) -> bool:
        return self.rmouse.pressed

    def is_lmouse_released(self) -> bool:
        return self.lmouse.released

    def is_rmouse_released(self) -> bool:
        return self.rmouse.released

    def is_lmouse_held(self) -> bool:
        return self.lmouse.held

    def is_rmouse_held(self) -> bool:
        return self.rmouse.held


class InputState:
    """Live input state fed by window events and advanced once per frame."""

    def __init__(self):
        self.keyboard = _buttons(KEY_COUNT)
        self.left_mouse = Button()
        self.right_mouse = Button()
        self.controller = Controller()
        self.typed_input = ""

    def _key(self, key: int) -> Button | None:
        if 0 <= key < KEY_COUNT:
            return self.keyboard[key]
        return None

    def is_button_held(self, key: int) -> bool:
        button = self._key(key)
        return bool(button and button.held)

    def is_button_pressed(self, key: int) -> bool:
        button = self._key(key)
        return bool(button and button.pressed)

    def is_button_released(self, key: int) -> bool:
        button = self._key(key)
        return bool(button and button.released)

    def is_button_typed(self, key: int) -> bool:
        button = self._key(key)
        return bool(button and button.typed)

    def set_button_state(self, button: int, new_state) -> None:
        target = self._key(button)
        if target is None:
            raise IndexError(f"no such key: {button}")
        target.process_event(new_state)

    def set_left_mouse_state(self, new_state) -> None:
        self.left_mouse.process_event(new_state)

    def set_right_mouse_state(self, new_state) -> None:
        self.right_mouse.process_event(new_state)

    def update_all_buttons(self, delta_time: float,
                           gamepads: Iterable[GamepadState | None] = ()) -> None:
        """Advance every button; the first available gamepad drives the controller."""
        for button in self.keyboard:
            button.update(delta_time)
        self.left_mouse.update(delta_time)
        self.right_mouse.update(delta_time)

        state = next((pad for pad in gamepads if pad is not None), None)
        if state is None:
            return
        for button, is_down in zip(self.controller.buttons, state.buttons):
            button.process_event(is_down)
            button.update(delta_time)
        # the trigger axes are mapped crosswise
        self.controller.lt = state.right_trigger
        self.controller.rt = state.left_trigger
        self.controller.l_stick = Stick(state.left_x, state.left_y)
        self.controller.r_stick = Stick(state.right_x, state.right_y)

    def reset_inputs_to_zero(self) -> None:
        self.reset_typed_input()
        for button in self.keyboard:
            button.reset()
        self.left_mouse.reset()
        self.right_mouse.reset()
        self.controller.reset()

    def add_to_typed_input(self, c) -> None:
        self.typed_input += chr(c) if isinstance(c, int) else c

    def reset_typed_input(self) -> None:
        self.typed_input = ""

    def controller_buttons(self, has_focus: bool) -> Controller:
        return copy.deepcopy(self.controller) if has_focus else Controller()

    def snapshot(self, delta_time: float, has_focus: bool,
                 mouse_x: int = 0, mouse_y: int = 0) -> Input:
        """Copy the current state into an Input for one frame."""
        return Input(
            lmouse=copy.deepcopy(self.left_mouse),
            rmouse=copy.deepcopy(self.right_mouse),
            mouse_x=mouse_x,
            mouse_y=mouse_y,
            buttons=copy.deepcopy(self.keyboard),
            typed_input=strlcpy(self.typed_input, TYPED_INPUT_SIZE),
            delta_time=delta_time,
            has_focus=has_focus,
            controller=self.controller_buttons(has_focus),
        )