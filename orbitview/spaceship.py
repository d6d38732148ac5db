"""A spaceship that moves and turns in 3D and provides the camera view."""

from __future__ import annotations

import math
from typing import Any

Vector = tuple[float, float, float]


def _cross(a: Vector, b: Vector) -> Vector:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _scaled(v: Vector, factor: float) -> Vector:
    return (v[0] * factor, v[1] * factor, v[2] * factor)


def _added(a: Vector, b: Vector) -> Vector:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _normalized(v: Vector) -> Vector:
    length = math.hypot(*v)
    if length == 0.0:
        return v
    return _scaled(v, 1.0 / length)


class Spaceship:
    """Ship state: position, camera look direction, ship heading and up vector.

    ``look`` follows the yaw/pitch angles and drives the camera; ``target_look``
    is the heading the ship model shows, updated when the ship moves forward
    and pitched directly by :meth:`turn_up` and :meth:`turn_down`.
    """

    def __init__(self) -> None:
        self.position: Vector = (0.0, 0.0, 5.0)
        self.look: Vector = (0.0, 0.0, -1.0)
        self.up: Vector = (0.0, 1.0, 0.0)
        self.angle_x = 0.0
        self.angle_y = 0.0
        self.move_step = 0.1
        self.rotate_step = 5.0
        self.third_person_view = False
        self.update_look_vector()
        self.target_look: Vector = self.look

    def update_look_vector(self) -> None:
        """Recompute ``look`` from the current pitch and yaw angles."""
        yaw = math.radians(self.angle_y)
        pitch = math.radians(self.angle_x)
        self.look = _normalized(
            (
                math.cos(pitch) * math.sin(yaw),
                math.sin(pitch),
                -math.cos(pitch) * math.cos(yaw),
            )
        )

    def toggle_camera_view(self) -> None:
        self.third_person_view = not self.third_person_view

    def move_forward(self) -> None:
        """Step along ``look`` and turn the ship to face that way."""
        self.position = _added(self.position, _scaled(self.look, self.move_step))
        self.target_look = self.look

    def move_backward(self) -> None:
        self.position = _added(self.position, _scaled(self.look, -self.move_step))

    def rotate_yaw(self) -> None:
        self.angle_y += self.rotate_step
        self.update_look_vector()

    def rotate_pitch(self) -> None:
        self.angle_x += self.rotate_step
        self.update_look_vector()

    def rotate_roll(self) -> None:
        """Rotate the up vector about the look axis by one rotation step."""
        right = _cross(self.look, self.up)
        if math.hypot(*right) == 0.0:
            return
        right = _normalized(right)
        theta = math.radians(self.rotate_step)
        self.up = _normalized(
            _added(_scaled(self.up, math.cos(theta)), _scaled(right, math.sin(theta)))
        )

    def turn_left(self) -> None:
        self.angle_y -= self.rotate_step
        self.update_look_vector()

    def turn_right(self) -> None:
        self.angle_y += self.rotate_step
        self.update_look_vector()

    def pitch_ship(self, degrees: float) -> None:
        """Rotate the ship heading about its right axis by ``degrees``."""
        facing = self.target_look
        right = _cross(facing, self.up)
        if math.hypot(*right) == 0.0:
            return
        right = _normalized(right)
        theta = math.radians(degrees)
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        along = _scaled(right, _dot(right, facing) * (1.0 - cos_t))
        self.target_look = _added(
            _added(_scaled(facing, cos_t), _scaled(_cross(right, facing), sin_t)),
            along,
        )

    def turn_up(self) -> None:
        self.pitch_ship(self.rotate_step)
        self.update_look_vector()

    def turn_down(self) -> None:
        self.pitch_ship(-self.rotate_step)
        self.update_look_vector()

    def camera_view(self) -> tuple[Vector, Vector, Vector]:
        """Return ``(eye, center, up)`` for the current camera mode."""
        px, py, pz = self.position
        lx, ly, lz = self.look
        if self.third_person_view:
            eye = (px - lx, 0.0, pz - lz)
            return eye, self.position, self.up
        return self.position, (px + lx, py + ly, pz + lz), self.up

    def model_transform(self, scale: int) -> tuple[Vector, float, float, float]:
        """Return ``(translation, yaw_degrees, pitch_degrees, scale_factor)``."""
        if scale == 0:
            raise ValueError("scale must be non-zero")
        tx, ty, tz = self.target_look
        yaw = math.degrees(math.atan2(tx, tz))
        pitch = -math.degrees(math.asin(max(-1.0, min(1.0, ty))))
        return self.position, yaw, pitch, 1.0 / scale

    def render(self, renderer: Any, scale: int) -> None:
        """Draw the ship as a red cone oriented along its heading."""
        translation, yaw, pitch, factor = self.model_transform(scale)
        renderer.push_matrix()
        try:
            renderer.translate(*translation)
            renderer.rotate(yaw, 0.0, 1.0, 0.0)
            renderer.rotate(pitch, 1.0, 0.0, 0.0)
            renderer.scale(factor, factor, factor)
            renderer.color(1.0, 0.0, 0.0)
            renderer.solid_cone(0.1, 0.3, 10, 10)
        finally:
            renderer.pop_matrix()