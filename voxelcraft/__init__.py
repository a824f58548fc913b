"""Voxel sandbox game logic: noise, blocks, entities, physics, input, UI and atlases."""

__version__ = "0.1.0"

__all__ = [
    "noise",
    "blocks",
    "ecs",
    "physics",
    "movement",
    "controls",
    "ui",
    "atlas",
    "cameras",
]