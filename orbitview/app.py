"""Interactive scene: a spaceship flying around a planet, drawn with OpenGL."""

from __future__ import annotations

import argparse
import enum
import math
from typing import Any, Iterable, Sequence

from .spaceship import Spaceship
from .world import Sphere

Vector = tuple[float, float, float]
Vertex = tuple[Vector, Vector]  # (normal, position)
Triangle = tuple[Vertex, Vertex, Vertex]

MAX_DETAIL = 50
MIN_DETAIL = 1

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Spaceship Around Sphere"

FIELD_OF_VIEW = 45.0
NEAR_PLANE = 0.1
FAR_PLANE = 100.0

SHIP_SCALE = 5


def level_of_detail(distance: float) -> int:
    """Return the sphere tessellation for a viewer ``distance`` away.

    Detail drops by two for each whole unit of distance, between
    ``MIN_DETAIL`` and ``MAX_DETAIL``.
    """
    detail = max(MIN_DETAIL, MAX_DETAIL - int(distance) * 2)
    return min(detail, MAX_DETAIL)


def distance_between(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the Euclidean distance between two points."""
    return math.dist(a, b)


class SpecialKey(enum.Enum):
    """Arrow keys that steer the ship."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_TOGGLE_KEYS = frozenset({"c", "C", "\r", "\t"})
_FORWARD_KEYS = frozenset({" "})


class Scene:
    """The spaceship, the planet, and how keys act on them."""

    def __init__(self) -> None:
        self.spaceship = Spaceship()
        self.planet = Sphere(0.0, 0.0, 0.0, 1.0, 10, 10)

    def planet_detail(self) -> int:
        """Level of detail for the planet seen from the ship's position."""
        return level_of_detail(
            distance_between(self.spaceship.position, self.planet.position)
        )

    def handle_special_key(self, key: SpecialKey) -> None:
        """Steer the ship with an arrow key; up pitches down, down pitches up."""
        ship = self.spaceship
        actions = {
            SpecialKey.UP: ship.turn_down,
            SpecialKey.DOWN: ship.turn_up,
            SpecialKey.LEFT: ship.turn_left,
            SpecialKey.RIGHT: ship.turn_right,
        }
        try:
            action = actions[key]
        except KeyError:
            raise ValueError(f"not a special key: {key!r}") from None
        action()

    def handle_key(self, key: str | int) -> None:
        """React to a character key: space moves, c/C/Enter/Tab switch camera."""
        char = chr(key) if isinstance(key, int) else key
        if char in _TOGGLE_KEYS:
            self.spaceship.toggle_camera_view()
        elif char in _FORWARD_KEYS:
            self.spaceship.move_forward()

    def draw(self, renderer: Any) -> None:
        """Set the camera and draw the ship and planet with ``renderer``."""
        detail = self.planet_detail()
        self.planet.slices = detail
        self.planet.stacks = detail
        renderer.look_at(*self.spaceship.camera_view())
        self.spaceship.render(renderer, SHIP_SCALE)
        self.planet.render(renderer)


def _sub(a: Vector, b: Vector) -> Vector:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vector, b: Vector) -> Vector:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _unit(v: Vector) -> Vector:
    length = math.hypot(*v)
    if length == 0.0:
        return v
    return (v[0] / length, v[1] / length, v[2] / length)


def _look_at_matrix(eye: Vector, center: Vector, up: Vector) -> tuple[float, ...]:
    """Column-major view matrix placing ``eye`` at the origin looking down -z."""
    forward = _unit(_sub(center, eye))
    side = _unit(_cross(forward, _unit(up)))
    upward = _cross(side, forward)
    return (
        side[0], upward[0], -forward[0], 0.0,
        side[1], upward[1], -forward[1], 0.0,
        side[2], upward[2], -forward[2], 0.0,
        -_dot(side, eye), -_dot(upward, eye), _dot(forward, eye), 1.0,
    )


def _perspective_matrix(
    fovy: float, aspect: float, near: float, far: float
) -> tuple[float, ...]:
    """Column-major perspective projection with vertical field of view ``fovy``."""
    f = 1.0 / math.tan(math.radians(fovy) / 2.0)
    depth = near - far
    return (
        f / aspect, 0.0, 0.0, 0.0,
        0.0, f, 0.0, 0.0,
        0.0, 0.0, (far + near) / depth, -1.0,
        0.0, 0.0, 2.0 * far * near / depth, 0.0,
    )


def _sphere_triangles(radius: float, slices: int, stacks: int) -> list[Triangle]:
    """Triangles of a sphere about the origin, its poles on the z axis."""

    def vertex(stack: int, slice_: int) -> Vertex:
        phi = math.pi * stack / stacks
        theta = 2.0 * math.pi * slice_ / slices
        normal = (
            math.sin(phi) * math.cos(theta),
            math.sin(phi) * math.sin(theta),
            math.cos(phi),
        )
        return normal, (normal[0] * radius, normal[1] * radius, normal[2] * radius)

    triangles: list[Triangle] = []
    for stack in range(stacks):
        for slice_ in range(slices):
            a = vertex(stack, slice_)
            b = vertex(stack + 1, slice_)
            c = vertex(stack + 1, slice_ + 1)
            d = vertex(stack, slice_ + 1)
            triangles.append((a, b, c))
            triangles.append((a, c, d))
    return triangles


def _cone_triangles(
    base: float, height: float, slices: int, stacks: int
) -> list[Triangle]:
    """Triangles of a cone with its base at z=0 and apex at z=height."""
    slant = math.hypot(base, height) or 1.0

    def side(stack: int, slice_: int) -> Vertex:
        theta = 2.0 * math.pi * slice_ / slices
        ring = base * (1.0 - stack / stacks)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        normal = (cos_t * height / slant, sin_t * height / slant, base / slant)
        return normal, (ring * cos_t, ring * sin_t, height * stack / stacks)

    down = (0.0, 0.0, -1.0)
    triangles: list[Triangle] = []
    for slice_ in range(slices):
        _, rim_a = side(0, slice_)
        _, rim_b = side(0, slice_ + 1)
        triangles.append(((down, (0.0, 0.0, 0.0)), (down, rim_b), (down, rim_a)))
    for stack in range(stacks):
        for slice_ in range(slices):
            a = side(stack, slice_)
            b = side(stack, slice_ + 1)
            c = side(stack + 1, slice_ + 1)
            d = side(stack + 1, slice_)
            triangles.append((a, b, c))
            triangles.append((a, c, d))
    return triangles


def _cube_triangles(size: float) -> list[Triangle]:
    """Triangles of an axis-aligned cube of edge ``size`` about the origin."""
    h = size / 2.0
    faces = [
        ((1.0, 0.0, 0.0), [(h, -h, -h), (h, h, -h), (h, h, h), (h, -h, h)]),
        ((-1.0, 0.0, 0.0), [(-h, -h, h), (-h, h, h), (-h, h, -h), (-h, -h, -h)]),
        ((0.0, 1.0, 0.0), [(-h, h, -h), (-h, h, h), (h, h, h), (h, h, -h)]),
        ((0.0, -1.0, 0.0), [(-h, -h, h), (-h, -h, -h), (h, -h, -h), (h, -h, h)]),
        ((0.0, 0.0, 1.0), [(-h, -h, h), (h, -h, h), (h, h, h), (-h, h, h)]),
        ((0.0, 0.0, -1.0), [(h, -h, -h), (-h, -h, -h), (-h, h, -h), (h, h, -h)]),
    ]
    triangles: list[Triangle] = []
    for normal, (a, b, c, d) in faces:
        triangles.append(((normal, a), (normal, b), (normal, c)))
        triangles.append(((normal, a), (normal, c), (normal, d)))
    return triangles


def _legacy_gl() -> Any:
    try:
        from pyglet.gl import gl_compat
    except ImportError:
        from pyglet import gl as gl_compat
    return gl_compat


class GLRenderer:
    """Draws through the fixed-function OpenGL pipeline of the current context."""

    def __init__(self) -> None:
        self._gl = _legacy_gl()

    def _load(self, matrix: Sequence[float], multiply: bool = True) -> None:
        gl = self._gl
        array = (gl.GLfloat * 16)(*matrix)
        if multiply:
            gl.glMultMatrixf(array)
        else:
            gl.glLoadMatrixf(array)

    def _draw(self, triangles: Iterable[Triangle]) -> None:
        gl = self._gl
        gl.glBegin(gl.GL_TRIANGLES)
        try:
            for triangle in triangles:
                for normal, position in triangle:
                    gl.glNormal3f(*normal)
                    gl.glVertex3f(*position)
        finally:
            gl.glEnd()

    def push_matrix(self) -> None:
        self._gl.glPushMatrix()

    def pop_matrix(self) -> None:
        self._gl.glPopMatrix()

    def translate(self, x: float, y: float, z: float) -> None:
        self._gl.glTranslatef(x, y, z)

    def rotate(self, angle: float, x: float, y: float, z: float) -> None:
        self._gl.glRotatef(angle, x, y, z)

    def scale(self, x: float, y: float, z: float) -> None:
        self._gl.glScalef(x, y, z)

    def color(self, r: float, g: float, b: float) -> None:
        self._gl.glColor3f(r, g, b)

    def solid_sphere(self, radius: float, slices: int, stacks: int) -> None:
        self._draw(_sphere_triangles(radius, slices, stacks))

    def solid_cube(self, size: float) -> None:
        self._draw(_cube_triangles(size))

    def solid_cone(self, base: float, height: float, slices: int, stacks: int) -> None:
        self._draw(_cone_triangles(base, height, slices, stacks))

    def look_at(self, eye: Vector, center: Vector, up: Vector) -> None:
        self._load(_look_at_matrix(eye, center, up))

    def _reshape(self, width: int, height: int) -> None:
        gl = self._gl
        height = height or 1
        gl.glViewport(0, 0, width, height)
        gl.glMatrixMode(gl.GL_PROJECTION)
        self._load(
            _perspective_matrix(FIELD_OF_VIEW, width / height, NEAR_PLANE, FAR_PLANE),
            multiply=False,
        )
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glLoadIdentity()

    def _init_state(self) -> None:
        gl = self._gl
        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glClearColor(0.0, 0.0, 0.0, 1.0)

    def _begin_frame(self) -> None:
        gl = self._gl
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glLoadIdentity()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the interactive scene until it is closed."""
    parser = argparse.ArgumentParser(
        prog="orbitview",
        description="Fly a spaceship around a planet. Arrows steer, space moves, "
        "c, Enter or Tab switch the camera.",
    )
    parser.parse_args(argv)

    import pyglet
    from pyglet.window import key as keys

    config = pyglet.gl.Config(
        double_buffer=True, depth_size=24, major_version=2, minor_version=1
    )
    window = pyglet.window.Window(
        WINDOW_WIDTH, WINDOW_HEIGHT, caption=WINDOW_TITLE, config=config,
        resizable=True,
    )
    scene = Scene()
    renderer = GLRenderer()
    renderer._init_state()

    special = {
        keys.UP: SpecialKey.UP,
        keys.DOWN: SpecialKey.DOWN,
        keys.LEFT: SpecialKey.LEFT,
        keys.RIGHT: SpecialKey.RIGHT,
    }
    characters = {
        keys.SPACE: " ",
        keys.RETURN: "\r",
        keys.ENTER: "\r",
        keys.TAB: "\t",
        keys.C: "c",
    }

    @window.event
    def on_draw() -> None:
        renderer._begin_frame()
        scene.draw(renderer)

    @window.event
    def on_resize(width: int, height: int) -> bool:
        fb_width, fb_height = window.get_framebuffer_size()
        renderer._reshape(fb_width, fb_height)
        return pyglet.event.EVENT_HANDLED

    @window.event
    def on_key_press(symbol: int, modifiers: int) -> None:
        if symbol in special:
            scene.handle_special_key(special[symbol])
        elif symbol in characters:
            scene.handle_key(characters[symbol])

    pyglet.app.run()
    return 0