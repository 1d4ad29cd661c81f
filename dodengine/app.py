"""The window, event handling and main loop."""

from __future__ import annotations

import argparse
import time

import pygame

from .game import RECT_SIZE, Game
from .input import GAMEPAD_BUTTON_COUNT, GamepadState, InputState, Key

MAX_DELTA_TIME = 1.0 / 10
BACKSPACE = 8

_SPECIAL_KEYS = {
    pygame.K_SPACE: Key.SPACE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LCTRL: Key.LEFT_CTRL,
    pygame.K_TAB: Key.TAB,
    pygame.K_LSHIFT: Key.LEFT_SHIFT,
    pygame.K_LALT: Key.LEFT_ALT,
}

_BLUE = (0, 0, 255)
_BLACK = (0, 0, 0)


def key_to_button(key: int) -> Key | None:
    """Map a window-system key code to an engine key, or None if it is not tracked."""
    if pygame.K_a <= key <= pygame.K_z:
        return Key(Key.A + key - pygame.K_a)
    if pygame.K_0 <= key <= pygame.K_9:
        return Key(Key.NR0 + key - pygame.K_0)
    return _SPECIAL_KEYS.get(key)


def clamp_delta_time(delta_time: float) -> float:
    """Limit the time step handed to the game so long stalls do not jump."""
    return min(delta_time, MAX_DELTA_TIME)


def _poll_gamepad(joystick) -> GamepadState:
    count = min(joystick.get_numbuttons(), GAMEPAD_BUTTON_COUNT)
    pressed = [bool(joystick.get_button(i)) for i in range(count)]
    pressed += [False] * (GAMEPAD_BUTTON_COUNT - count)
    axes = [joystick.get_axis(i) for i in range(joystick.get_numaxes())]
    axes += [0.0] * (6 - len(axes))
    return GamepadState(
        buttons=tuple(pressed),
        left_x=axes[0],
        left_y=axes[1],
        left_trigger=axes[2],
        right_x=axes[3],
        right_y=axes[4],
        right_trigger=axes[5],
    )


class Window:
    """A game window feeding window events into the input state."""

    def __init__(self, width: int = 500, height: int = 500, title: str = "geam"):
        self.width = width
        self.height = height
        self.title = title
        self.input_state = InputState()
        self.has_focus = True
        self.mouse_moved = False
        self.mouse_x = 0
        self.mouse_y = 0
        self.full_screen = False
        self.current_full_screen = False
        self.should_close = False
        self._windowed_size = (width, height)

    def handle_event(self, event) -> None:
        """Apply one window event to the input state and window flags."""
        state = self.input_state
        if event.type == pygame.QUIT:
            self.should_close = True
        elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
            pressed = event.type == pygame.KEYDOWN
            if pressed and event.key == pygame.K_BACKSPACE:
                state.add_to_typed_input(BACKSPACE)
            button = key_to_button(event.key)
            if button is not None:
                state.set_button_state(button, pressed)
        elif event.type == pygame.TEXTINPUT:
            for ch in event.text:
                if ord(ch) < 127:
                    state.add_to_typed_input(ch)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            pressed = event.type == pygame.MOUSEBUTTONDOWN
            if event.button == 1:
                state.set_left_mouse_state(pressed)
            elif event.button == 3:
                state.set_right_mouse_state(pressed)
        elif event.type == pygame.MOUSEMOTION:
            self.mouse_moved = True
            self.mouse_x, self.mouse_y = event.pos
        elif event.type == pygame.WINDOWFOCUSGAINED:
            self.has_focus = True
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.has_focus = False
            # releases that happen while unfocused are never seen
            state.reset_inputs_to_zero()
        elif event.type in (pygame.VIDEORESIZE, pygame.WINDOWRESIZED):
            state.reset_inputs_to_zero()

    def _gamepads(self) -> list[GamepadState]:
        return [_poll_gamepad(pygame.joystick.Joystick(i))
                for i in range(pygame.joystick.get_count())]

    def _apply_full_screen(self, surface):
        if not self.has_focus or self.current_full_screen == self.full_screen:
            return surface
        if self.full_screen:
            self._windowed_size = surface.get_size()
            surface = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            surface = pygame.display.set_mode(self._windowed_size, pygame.RESIZABLE)
        self.current_full_screen = self.full_screen
        return surface

    def run(self, game: Game) -> None:
        """Open the window and drive ``game`` until the window is closed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
            pygame.display.set_caption(self.title)
            if not game.init():
                return

            last = time.perf_counter()
            while not self.should_close:
                now = time.perf_counter()
                delta_time = now - last
                last = now
                step = clamp_delta_time(delta_time)

                frame = self.input_state.snapshot(step, self.has_focus,
                                                  self.mouse_x, self.mouse_y)
                width, height = surface.get_size()
                surface.fill(_BLACK)
                if not game.logic(step, frame, width, height):
                    game.close()
                    return
                pygame.draw.rect(surface, _BLUE,
                                 (int(game.data.x), int(game.data.y), RECT_SIZE, RECT_SIZE))

                surface = self._apply_full_screen(surface)

                self.mouse_moved = False
                self.input_state.update_all_buttons(delta_time, self._gamepads())
                self.input_state.reset_typed_input()

                pygame.display.flip()
                for event in pygame.event.get():
                    self.handle_event(event)

            game.close()
        finally:
            pygame.quit()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Move a square around a window.")
    parser.add_argument("--save", default="gameData.data", help="file holding saved game data")
    parser.add_argument("--width", type=int, default=500)
    parser.add_argument("--height", type=int, default=500)
    args = parser.parse_args(argv)
    Window(args.width, args.height, "geam").run(Game(args.save))
    return 0