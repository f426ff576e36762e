[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enginekit"
version = "0.1.0"
description = "Vector, matrix, quaternion, animation, skinning, particle, scene and WAVE utilities for a small 3D engine"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "3d",
    "math",
    "matrix",
    "quaternion",
    "animation",
    "skeleton",
    "skinning",
    "particles",
    "wave",
    "game-engine",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enginekit"]

[tool.pytest.ini_options]
addopts = "-ra"
