[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelcraft"
version = "0.1.0"
description = "Core logic of a voxel sandbox game: Perlin noise, block registry, entity-component system, physics, input state and UI layout"
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "game", "perlin", "noise", "ecs", "physics", "blocks", "atlas"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["voxelcraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
