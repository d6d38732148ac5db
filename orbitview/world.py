"""Scene building blocks: a grid of regions and renderable primitives.

Renderable objects draw through a renderer object that provides
``push_matrix``, ``pop_matrix``, ``translate``, ``rotate``, ``scale``,
``color``, ``solid_sphere``, ``solid_cube``, ``solid_cone`` and ``look_at``.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator


@contextmanager
def _transformed(renderer: Any) -> Iterator[Any]:
    """Run a block between a matching push and pop of the renderer's matrix."""
    renderer.push_matrix()
    try:
        yield renderer
    finally:
        renderer.pop_matrix()


@dataclass(frozen=True)
class Region:
    """A single cell of a :class:`Matrix`."""

    id: int = 0

    def __str__(self) -> str:
        return f"Region({self.id})"


class Matrix:
    """A rows x cols grid of regions, numbered from 1 in row-major order."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("Matrix dimensions must be non-negative")
        self.rows = rows
        self.cols = cols
        self._data = [
            [Region(row * cols + col + 1) for col in range(cols)]
            for row in range(rows)
        ]

    def at(self, row: int, col: int) -> Region:
        """Return the region at ``(row, col)``; raise IndexError when outside."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError("Matrix index out of bounds")
        return self._data[row][col]

    def __str__(self) -> str:
        return "".join(
            "".join(f"{region} " for region in row) + "\n" for row in self._data
        )

    def print(self) -> None:
        """Write the grid to standard output, one row per line."""
        sys.stdout.write(str(self))


class RenderableObject(ABC):
    """An object placed at a point in the scene that knows how to draw itself."""

    def __init__(self, x: float, y: float, z: float) -> None:
        self.x = x
        self.y = y
        self.z = z

    @property
    def position(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @abstractmethod
    def render(self, renderer: Any) -> None:
        """Draw the object with the given renderer."""


class Sphere(RenderableObject):
    """A green solid sphere whose tessellation can be changed for level of detail."""

    def __init__(
        self, x: float, y: float, z: float, radius: float, slices: int, stacks: int
    ) -> None:
        super().__init__(x, y, z)
        self.radius = radius
        self.slices = slices
        self.stacks = stacks

    def render(self, renderer: Any) -> None:
        with _transformed(renderer):
            renderer.translate(self.x, self.y, self.z)
            renderer.color(0.2, 0.7, 0.3)
            renderer.solid_sphere(self.radius, self.slices, self.stacks)


class Cube(RenderableObject):
    """A grey solid cube."""

    def __init__(self, x: float, y: float, z: float, size: float) -> None:
        super().__init__(x, y, z)
        self.size = size

    def render(self, renderer: Any) -> None:
        with _transformed(renderer):
            renderer.translate(self.x, self.y, self.z)
            renderer.color(0.5, 0.5, 0.5)
            renderer.solid_cube(self.size)


class World:
    """An ordered collection of renderable objects."""

    def __init__(self) -> None:
        self.objects: list[RenderableObject] = []

    def add_object(self, obj: RenderableObject) -> None:
        self.objects.append(obj)

    def render(self, renderer: Any) -> None:
        for obj in self.objects:
            obj.render(renderer)