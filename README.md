# twentygames

A small 2D game engine built around a fixed-timestep simulation loop, with
Pong as its first game. Windowing, keyboard polling and drawing go through
pygame.

## Install

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Play Pong

```
twentygames-pong
```

W moves the left paddle up and S moves it down. Close the window to quit.
The game writes its log to `pong.log` in the current directory.

The game has one paddle, on the left, and the ball bounces off the top and
bottom walls. When the ball leaves the field on either side it is served
again from the centre, alternating direction. There is no score, no second
paddle and no opponent.

## Writing a game

Subclass `twentygames.game.Game`, implement `update`, and hand an instance to
`twentygames.engine.Engine.run`:

```python
from twentygames.color import Color
from twentygames.engine import Engine
from twentygames.game import Game
from twentygames.keycodes import KeyCode
from twentygames.platform import Platform


class Blink(Game):
    def __init__(self):
        self.lit = False

    def fixed_update(self, ctx, dt):
        if ctx.keyboard.just_pressed(KeyCode.SPACE):
            self.lit = not self.lit

    def update(self, ctx, dt):
        ctx.renderer.set_projection_extent(800, 600)
        ctx.renderer.set_clear_color(Color.black())
        if self.lit:
            ctx.renderer.draw_quad(350, 250, 100, 100, Color.hsv(0.6, 0.8, 1.0))


with Platform("Blink") as platform:
    engine = Engine(platform)
    engine.init_renderer("Blink")
    engine.run(Blink())
```

`fixed_update` runs zero or more times per frame at 60 Hz
(`twentygames.engine.FIXED_DT`); put movement and collision there. After a
long stall at most four steps' worth of time is added in one frame. `update`
runs once per frame, between `Renderer.begin_frame` and `Renderer.end_frame`.
`ctx.alpha` is how far the frame is into the next fixed step, in [0, 1); use
it to interpolate positions so that motion looks smooth.

`Engine.init_renderer` raises `RuntimeError` if the platform has no drawable
surface, and `Engine.run` returns at once if the renderer was never set up.

## Building blocks

- `twentygames.platform.Platform` opens a hidden, resizable 800x600 window,
  shows it with `show()`, drains events with `poll_events()` and reports the
  held keys with `poll_pressed_keys()`. It is a context manager; `close()`
  destroys the window. `keycode_from_pygame` maps a pygame key constant to a
  `KeyCode`.
- `twentygames.renderer.Renderer` clears the surface and fills solid quads
  (`draw_quad`) and discs (`draw_disc`). Colours are linear and are
  sRGB-encoded when written. Coordinates are pixels with a top-left origin
  unless `set_projection_extent(w, h)` picks another space for the frame.
  `begin_frame()` returns `False` while the surface has no area.
- `twentygames.projection` holds `ortho_rh_zo`, `transform_point`,
  `disc_rect` and `QuadPushConstants`, whose `pack()` gives a 96-byte
  little-endian block.
- `twentygames.color.Color` stores RGBA in linear space. It can build a
  colour from HSV (hue wraps modulo 1) and replace one HSV axis at a time,
  for example `c.with_value(0.9)`.
- `twentygames.angle.Angle` is an angle that carries its unit. Build one with
  `Angle.from_degrees`, `Angle.from_radians`, `deg(...)` or `rad(...)`; it
  supports addition, subtraction, scaling and comparison.
- `twentygames.input.KeyboardInput` holds the keys that are down and the keys
  that were just pressed or just released. `update()` folds in a snapshot of
  the keys held down.
- `twentygames.log.init(LogConfig(...))` sets up the `engine` logger with a
  rotating log file (5 MiB per file, 3 backups, INFO level by default) and
  returns it. `twentygames.log.shutdown()` flushes and closes it.
- `twentygames.pong_physics.step_physics` moves a
  `twentygames.pong_state.GameState` forward by one fixed step, in place.