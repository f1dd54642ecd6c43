# motoracer

A two-player, top-down motorbike race on a walled circuit of 15 × 20 tiles.
Both riders start side by side on the left of the track, facing up. Riding
into a wall, tree or building at speed knocks the rider back. The first to
cross the finish line on the left edge wins.

## Installing

```
pip install .
```

The game uses pygame for the window, drawing and keyboard input. It loads
its images from a `Res` directory in the working directory: `building.png`,
`tree.png`, `border.png`, `endLine.png`, `moto.png` and `moto2.png`.

## Playing

```
motoracer
```

This opens an 800 × 600 window titled "Racing".

| Action        | Player 1    | Player 2 |
|---------------|-------------|----------|
| Accelerate    | Up arrow    | W        |
| Brake/reverse | Down arrow  | S        |
| Steer left    | Left arrow  | A        |
| Steer right   | Right arrow | D        |

Steering only takes effect while a bike is moving faster than 25 units per
second, forwards or backwards. When a race ends, `Player N wins!` is printed
to the console and the bikes stop responding. Press **Enter** to start a new
race and **Escape** (or close the window) to quit.

## Using the pieces

The engine parts can be used on their own:

- `motoracer.vector2.Vector2`: immutable 2D vectors.
- `motoracer.maths`: helpers such as `to_radians`, `near_zero`, `clamp` and `lerp`.
- `motoracer.rng.RandomSource`: seedable random floats, integers and vectors.
- `motoracer.timer.Timer`: frame delta time, capped at 50 ms, and 60 FPS limiting.
- `motoracer.actor`: `Actor`, `Component` and `ActorState`.
- `motoracer.collision`: circle and rectangle colliders and `intersect`.
- `motoracer.movement`: `MoveComponent` and the keyboard-driven `InputComponent`.
- `motoracer.texture`: `Texture`, `Font` and the named `Assets` store.
- `motoracer.renderer`: `Window`, `Renderer` and `Flip`.
- `motoracer.sprites`: static, animated and scrolling background sprites.
- `motoracer.track`: `Tile`, `Grid` and `Border`.
- `motoracer.game`: `Game` and `main`.

```python
from motoracer.vector2 import Vector2

v = Vector2(3.0, 4.0)
print(v.length())       # 5.0
print(v.normalized())   # Vector2(x=0.6, y=0.8)
```

## What it does not do

There are no menus, no on-screen text and no scores: the winner is only
printed to the console. The track layout is fixed, and the game does not use
the mouse, although `Grid.process_click` can toggle tile selection when called
directly. `Assets.load_font` can load fonts, but the game draws no text with
them.

## Tests

```
pip install .[test]
pytest
```