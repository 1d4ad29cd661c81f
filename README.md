# dodengine

A small 2D game platform layer built on pygame, with a demo game: a blue
square you move around a window with the arrow keys.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the demo

```
dodengine
```

Options:

- `--save PATH`: file holding the saved game data (default `gameData.data`)
- `--width N`, `--height N`: initial window size (default 500 x 500)

The square's position is loaded from the save file at start (a missing or
short file keeps the default position) and written back when the window is
closed. The square is kept inside the window.

## Modules

- `dodengine.input`: button state for the keyboard (`Key`), the mouse and a
  gamepad (`GamepadButton`, `Controller`, `GamepadState`). Each `Button` has
  `pressed`, `held`, `released` and an auto-repeating `typed` flag (first
  repeat after 0.48 s, then every 0.07 s). `InputState` receives events
  (`set_button_state`, `set_left_mouse_state`, `set_right_mouse_state`,
  `add_to_typed_input`), is advanced once per frame with
  `update_all_buttons(delta_time, gamepads)`, and hands the game a per-frame
  `Input` through `snapshot(...)`. Typed text in a snapshot is cut to 19
  characters.
- `dodengine.logs`: `LogManager` writes timestamped lines (`LogLevel.NORMAL`,
  `WARNING`, `ERROR`) to a file, to the console and to an in-memory history
  of the last 100 lines. The file is emptied on the first write; an empty
  name means `logs.txt`. `log()` and `get_logs_manager()` use one
  process-wide manager.
- `dodengine.files`: `write_entire_file`, `append_to_file`,
  `read_entire_file`, `read_entire_text` and `get_file_size` (0 when the file
  cannot be read).
- `dodengine.strings`: `to_lower`, `to_upper`, `find_char`, `strlcpy` and
  `split` (which drops empty pieces), all treating a NUL as end of string.
- `dodengine.monitors`: `Rect`, `overlap_area` and `current_monitor`, which
  picks the monitor a window overlaps the most.
- `dodengine.gldebug`: `is_ignored` and `format_debug_message` for filtering
  and formatting graphics driver debug messages.
- `dodengine.game`: the demo's `Game` and its saved `GameData`.
- `dodengine.app`: the pygame `Window` and its main loop, `key_to_button`,
  `clamp_delta_time` (time steps are capped at 0.1 s) and `main`.

## Example

```python
from dodengine.input import InputState, Key
from dodengine.logs import LogManager, LogLevel

state = InputState()
state.set_button_state(Key.SPACE, True)
state.update_all_buttons(1 / 60, [])
assert state.is_button_pressed(Key.SPACE)

logs = LogManager("game.log")
logs.log("level loaded", LogLevel.WARNING)
```

Your own game plugs into `dodengine.app.Window.run` with an object shaped like
`dodengine.game.Game`: `init()`, `logic(delta_time, input, width, height)`,
`close()` and a `data` attribute with `x` and `y` for the square drawn each
frame.

## What it does not do

There is no frame profiler and no in-game debug or menu interface: the window
only clears the screen and draws the square. There is no audio, and no
assertion or byte-size helper module.