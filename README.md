# physim

A small 2D physics sandbox. 256 coloured balls fall under gravity, bounce off
the window edges and off each other. A white block, the player, can be steered
into them. A hoop sits on the right edge of the window.

Balls and the player are measured in metres: 30 pixels make one metre, and
gravity is 9.81 m/s². The hoop's position and size are kept in pixels.

## Installing

```
pip install .
```

This also installs pygame, which draws the window.

## Running

```
physim
```

Options:

- `--width`, `--height`: initial window size in pixels (default 800 × 600;
  both must be positive)
- `--fps`: frame-rate cap (default 120)

### Controls

| Key    | Action                                             |
|--------|----------------------------------------------------|
| A/D    | accelerate the player left/right                   |
| W      | jump                                               |
| S      | slam: the vertical speed becomes a downward speed twice as large |
| R      | restart with a fresh set of balls and the player at its start |
| `      | show or hide the one-metre grid                    |
| Escape | quit                                               |

The window can be resized; the walls move with it. Closing the window also
quits. Each ball is labelled with its index, the player shows its speed
(refreshed every tenth of a second), and the frame rate is shown in the top
left corner.

## Using the simulation from code

The simulation itself does not need a window. `physim.game.Game` holds the
balls, the player and the hoop. `Game.step(dt, controls)` advances it by `dt`
seconds and returns the balls the hoop removed during that step:

```python
import random

from physim.game import Game
from physim.player import Controls
from physim.vector import Vector2

game = Game.new(Vector2(800.0, 600.0), random.Random(1))
for _ in range(120):
    game.step(1 / 120, Controls())
print(len(game.balls), game.player.speed())
```

`Game` also has `reset()`, `toggle_background()` and `resize(screen)`.
`physim.game.grid_cells(screen)` yields the one-metre grid rectangles, and
`physim.game.draw(game, surface, font)` renders a frame onto a pygame surface.

The building blocks can also be used on their own:

- `physim.vector` provides `Vector2`, `Rectangle`, `Color`, the colour
  constants, `float_equals`, `get_color` and the collision tests
  `check_collision_circles`, `check_collision_circle_rec`,
  `check_collision_point_rec` and `check_collision_circle_line`.
- `physim.ball` provides `Ball` (with `Ball.random` and `Ball.random_many`)
  and `update_ball_to_ball_collision`.
- `physim.player` provides `Player` and `Controls`.

## What it does not do

There is no score, no goal and no saved state. `Hoop.update` removes balls
whose circle overlaps the hoop's rectangle, but it compares ball positions in
metres against a rectangle in pixels, so in a normal window the hoop rarely
catches anything.

## Tests

```
pip install .[test]
pytest
```