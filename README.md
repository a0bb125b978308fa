# ceoclash

A small two-player side-view brawler. Two fighters stand on the floor of a
window, walk left and right, jump, stay between the side walls, and are pushed
apart when their hitboxes overlap. Each fighter is drawn as the outline of its
hitbox: player 1 in blue, player 2 in red.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
ceoclash
```

| Player    | Jump     | Left       | Right       |
|-----------|----------|------------|-------------|
| 1 (blue)  | `w`      | `a`        | `d`         |
| 2 (red)   | Up arrow | Left arrow | Right arrow |

The down keys (`s` and the Down arrow) are tracked but have no effect yet.
A jump can only start from the floor. Close the window to quit. The game runs
at up to 60 frames per second.

## What the game does not do

There are no attacks, no health, no rounds and no winner: the fighters can
only move, jump and push against each other. The stage size is taken from the
window when the game starts; resizing the window afterwards does not move the
floor or the walls. Nothing is saved.

## Using the library

The simulation in `ceoclash.game` runs without a window: `Arena`, `Fighter`
(`place`, `steer`, `move`), `Controls` (`press`), `resolve_overlap` and
`step`, which advances both fighters one frame.

The package also has the helpers the game is built on:

- `ceoclash.vec2d`: `Vec2`, an immutable 2D vector with arithmetic, dot and
  cross products, headings (exact and rough 8/16/32-way), rotation and polar
  conversion, plus `inside_angle` and `medicenter`.
- `ceoclash.rects`: `Rect` with point, overlap and touch tests, `union` and
  `fit_into`; `rect_overlap`; `Index2D`; and `RectCluster`, which cuts
  rectangles out of a rectangle and keeps the pieces that remain.
- `ceoclash.transform`: `Transform`, a translate-and-scale mapping between
  world and screen coordinates.
- `ceoclash.colors`: `Color`, packing and unpacking RGBA values, channel
  access, `brightness` and colour interpolation.
- `ceoclash.mathutil`: range mapping (linear, elliptical, sigmoid), clamping
  and wrapping, angle helpers, random helpers that take an optional
  `random.Random`, and `PolarGaussian`.
- `ceoclash.text`: string utilities, UTF-8 helpers and `StringBuilder`, an
  editable UTF-8 buffer with cursor-aware `handle_key` and `handle_text`.
- `ceoclash.scanning`: reading helpers for seekable text streams (seek to a
  string, scan up to a terminator, read separated lists).

```python
from ceoclash.vec2d import Vec2
from ceoclash.rects import Rect, RectCluster

v = Vec2(3, 4)
print(v.mag())                 # 5.0

cluster = RectCluster(0, 0, 10, 10)
cluster.clip(Rect(2, 2, 3, 3))
print(cluster.area())          # 91
```