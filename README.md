# golubrun

A small pixel-art game shell written with pygame. When started it opens a
resizable window the size of the desktop, plays a three-part sprite-sheet
introduction laid out on a 311×175 pixel grid and scaled to the window
height, and then switches the game into its main-menu state.

## Installing

```
pip install .
```

This pulls in pygame. To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
golubrun
```

`python -m golubrun.app` does the same.

Keys:

- **F11** switches between windowed and fullscreen mode. After a switch it
  has no effect again until more than a second of game time has passed.
- **Escape** quits while the window has focus. Closing the window also quits.

Game time stands still while the window does not have focus: the
introduction, the mouse tracking and the error overlay do not advance.

## Resources

Images, fonts and sounds are looked up first in a `Resourcepack/` directory
beside the program path the game was started with, for example
`Resourcepack/Images/Introduction/introduction0.png` or
`Resourcepack/Shrift/pixel_font_by_BLACKFIRE.otf`. When a file is not there,
the game falls back to the same relative path inside a `Resources/`
directory in the installed `golubrun` package.

The introduction needs the three sheets `Images/Introduction/introduction0.png`
to `introduction2.png`; the window icon is `Images/icon.png`. These files are
not part of the package itself, so supply them in one of the two places.

When a resource cannot be loaded from either place, an error report is
written to standard error and shown in an overlay at the top of the window
that fades in, stays for a while and fades out again.

## Using the pieces

The building blocks can be used on their own:

- `golubrun.names` – the shared `Settings`, `GameStatus`, `FloatRect`,
  `ResourceLoader` (`load_image`, `load_font`, `load_sound`, `load_shader`),
  and the helpers `hyphenate`, `wrap_text`, `executable_dir` and
  `centered_x`.
- `golubrun.errors` – `ErrorReport`, the constructors
  `texture_load_error`, `font_load_error`, `image_load_error`,
  `sound_load_error` and `shader_load_error`, and `ErrorOverlay`, which
  fades the latest report in and out and computes its layout.
- `golubrun.mouse` – `MouseTracker`, which keeps the cursor hit box and
  reports a left click once per press, at most every half second of game
  time.
- `golubrun.button` – `Button` and `ImageButton` hit areas that can be
  tested against a `MouseTracker`.
- `golubrun.introduction` – the `Introduction` animation, `AnimationStage`,
  `sheet_frame_rect` and `load_introduction`.
- `golubrun.window` – `GameWindow`, its `Camera` and `WindowMode`.
- `golubrun.app` – `Game`, whose `step` runs one frame and whose `run`
  runs the main loop, and `main`.

```python
from golubrun.names import wrap_text

print(wrap_text("a fairly long line of text to break", 10))
```

## What it does not do

- There is no actual main menu or gameplay: once the introduction ends,
  the window shows only the clear colour (and the error overlay, if any).
- The fragment shader is not applied. `GameWindow` reads `shader.frag` from
  the current directory and fills `shader_uniforms` during the
  introduction, but frames are drawn without it.
- No sound is played; `ResourceLoader.load_sound` is available but unused.
- There is no in-game way to turn on the hit-box debug drawing; set
  `Settings.hitboxes_drawn` yourself.