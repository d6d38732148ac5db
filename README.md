# orbitview

A small 3D scene in which a red, cone-shaped spaceship flies around a green
planet. The planet is drawn with more detail as the ship gets closer. The
view can be switched between a first-person and a third-person camera.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
orbitview
```

This opens a resizable 800×600 window titled "Spaceship Around Sphere". The
program draws with the fixed-function OpenGL pipeline, so it needs a
graphics driver that provides a legacy (compatibility) OpenGL context.

### Controls

| Key              | Action                                                        |
|------------------|---------------------------------------------------------------|
| Space            | Move forward in the camera's direction and face the ship that way |
| Left / Right     | Turn the camera and direction of travel left / right          |
| Up / Down        | Tilt the ship model down / up; the camera direction is unchanged |
| C, Enter or Tab  | Switch between the first-person and third-person camera       |

The planet's detail (slices and stacks of its sphere) is 50 minus twice the
whole-unit distance from the ship to the planet's centre, kept between 1
and 50.

## Using it as a library

The scene logic does not need a window, so it can be driven and inspected
directly:

```python
from orbitview.spaceship import Spaceship
from orbitview.app import Scene, level_of_detail

ship = Spaceship()
ship.turn_right()
ship.move_forward()
eye, center, up = ship.camera_view()

print(level_of_detail(3.0))   # 44

scene = Scene()
print(scene.planet_detail())  # 40: the ship starts 5 units from the planet
scene.handle_key("c")         # switch to the third-person camera
```

The modules:

- `orbitview.spaceship` — `Spaceship`: position, camera look direction,
  ship heading and up vector, with methods to move, turn, pitch and roll.
  `camera_view()` returns `(eye, center, up)` and `model_transform(scale)`
  returns the translation, yaw, pitch and scale factor used to draw the ship.
- `orbitview.world` — `Sphere`, `Cube` and a `World` container of
  renderable objects, plus a `Matrix` grid of `Region` cells numbered from 1
  in row-major order (`Matrix.at` raises `IndexError` outside the grid).
- `orbitview.app` — `Scene`, `SpecialKey`, `level_of_detail`,
  `distance_between`, the `GLRenderer` that draws through OpenGL, and the
  `main` function behind the `orbitview` command.
- `orbitview.shaders` — `load_shader_code`, `compile_shader` and
  `create_shader_program` for GLSL shaders; compiling and linking need a
  current OpenGL context.

Objects draw themselves through any renderer object that provides
`push_matrix`, `pop_matrix`, `translate`, `rotate`, `scale`, `color`,
`solid_sphere`, `solid_cube`, `solid_cone` and `look_at`, so a recording
renderer can stand in for `GLRenderer` when no display is available.

## What it does not do

The interactive scene holds only the ship and one planet; `Cube` and `World`
are not placed in it. The scene does not use the shader helpers, has no
lighting, and keeps no state between runs.