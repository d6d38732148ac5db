[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbitview"
version = "0.1.0"
description = "Fly a small spaceship around a planet with distance-based level of detail"
requires-python = ">=3.10"
keywords = ["3d", "opengl", "pyglet", "spaceship", "camera", "level-of-detail"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
orbitview = "orbitview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["orbitview"]

[tool.pytest.ini_options]
addopts = "-ra"
