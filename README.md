# ramla

A small UI engine built on pygame. You lay out a screen against a
1920×1080 reference design, and the engine scales it to the real window.
The scale works like CSS "cover": `Viewport.scale_factor()` takes the
larger of the horizontal and vertical ratios of the logical size to the
reference size.

## Installation

```
pip install .
```

## Running the demo

```
ramla
ramla --width 1280 --height 720
```

`--width` and `--height` set the starting window size (default 800×600)
and must be positive. The window is resizable. It shows:

- a button at the centre of the design. The cursor turns into a hand
  while the mouse is over it, and each click raises a counter by one;
- the counter above the button;
- a welcome message from the script host;
- the counter multiplied by two;
- the frame rate in the top right corner.

Close the window to quit.

The demo looks for `Roboto-Regular.ttf` and `Roboto-Bold.ttf` in
`assets/fonts` below the current directory. These fonts do not come with
the package. If a file cannot be loaded, the demo uses pygame's built-in
font in its place.

## Modules

- `ramla.viewport`: `Viewport` holds the screen size (physical pixels)
  and the logical size. Its methods are:
  - `scale_factor()`
  - `set_screen_dimensions(width, height)`
  - `set_logical_dimensions(width, height)`
  - `to_physical(value)`, which scales a reference length and rounds it
    to whole pixels. Negative dimensions raise `ValueError`.
- `ramla.colors`: `Color`, an RGBA dataclass whose channels must be ints
  in 0..255, with `to_tuple()`. It also has the palettes `Primary`,
  `ButtonColors`, `TextColors`, `BackgroundColors`, `StatusColors`,
  `Gray` and `Border`.
- `ramla.button`:
  - `Button` is laid out in reference coordinates.
  - `draw_button(surface, btn, viewport, mouse)` draws it and returns a
    `ButtonState` (`hovered`, `pressed`, `clicked`).
  - `MouseInput.poll(events)` reads the mouse for one frame. `released`
    comes from a left-button `MOUSEBUTTONUP` among the events.
  - Helpers: `adjust_color`, `physical_rect`, `is_point_inside`.
- `ramla.text`: `measure_text`, `draw_text_logical` and
  `draw_text_logical_centered`. The last one places and sizes text in
  design points and centres it on the logical width.
- `ramla.fps_counter`: `format_fps`, `draw_fps_counter` and
  `draw_fps_counter_ex`, which takes an optional font and scale.
- `ramla.cursor`:
  - `CursorType`, whose values are style names such as `"pointer"`.
  - `cursor_style(cursor)`.
  - `Cursor`, which records the current kind and sets the matching
    pygame system cursor once a window is open. You can also give it
    your own apply function.
- `ramla.fonts`: `FontManager(font_dir)` loads the regular and bold
  fonts at size 64. It works as a context manager.
- `ramla.scripting`: `ScriptHost(ui)` holds named callables. It starts
  with `button`, `getWelcomeMessage`, `multiply` and `drawTestButton`.
  - `register(name, function)` adds a callable.
  - `call(name, *args)` raises `ScriptError` on any failure.
  - `call_text`, `call_math` and `call_button` return `None`, `0.0` or
    an all-false `ButtonState` instead of raising.
  - `button_from_table` and `state_to_table` convert between
    dictionaries and buttons or states.
- `ramla.app`: `Engine` draws one frame with
  `update_draw_frame(surface, mouse, fps)`. `run()` opens the window.
  `main(argv)` is the `ramla` command.

```python
from ramla.viewport import Viewport

viewport = Viewport()
viewport.set_logical_dimensions(960, 540)
viewport.scale_factor()    # 0.5
viewport.to_physical(300)  # 150
```

## What it does not do

The script host is not a scripting language. It has no interpreter and
does not load script files. Its functions are Python callables,
registered with `ScriptHost.register`. Rounded corners are drawn with
pygame's `border_radius`, so the `segments` field of `Button` is stored
but does not change how the button is drawn.

## Tests

```
pip install .[test]
pytest
```