"""Loading, compiling and linking GLSL shaders."""

from __future__ import annotations

from pathlib import Path
from typing import Any

_SHADER_TYPES = frozenset(
    {"vertex", "fragment", "geometry", "compute", "tescontrol", "tesevaluation"}
)


def load_shader_code(filepath: str | Path) -> str:
    """Return the text of a shader source file.

    Raises OSError (such as FileNotFoundError) if the file cannot be read.
    """
    return Path(filepath).read_text(encoding="utf-8")


def compile_shader(shader_type: str, shader_code: str) -> Any:
    """Compile ``shader_code`` as a shader of the given type.

    ``shader_type`` is one of ``"vertex"``, ``"fragment"``, ``"geometry"``,
    ``"compute"``, ``"tescontrol"`` or ``"tesevaluation"``. A current GL
    context is required; compilation failures raise the GL layer's shader
    exception carrying the info log.
    """
    if shader_type not in _SHADER_TYPES:
        raise ValueError(f"unknown shader type: {shader_type!r}")
    from pyglet.graphics.shader import Shader

    return Shader(shader_code, shader_type)


def create_shader_program(vertex_path: str | Path, fragment_path: str | Path) -> Any:
    """Build and link a program from a vertex and a fragment shader file."""
    vertex_code = load_shader_code(vertex_path)
    fragment_code = load_shader_code(fragment_path)

    from pyglet.graphics.shader import ShaderProgram

    vertex_shader = compile_shader("vertex", vertex_code)
    fragment_shader = compile_shader("fragment", fragment_code)
    try:
        return ShaderProgram(vertex_shader, fragment_shader)
    finally:
        vertex_shader.delete()
        fragment_shader.delete()