"""Configuration constants for the infinite Life engine and host."""

from dataclasses import dataclass
from typing import Tuple

from infinite_life.types import ChunkKey, Color


@dataclass
class Config:
    """Application configuration."""

    # World settings
    CHUNK_SIZE: int = 64
    CELL_PIXEL_SIZE: int = 20
    INITIAL_CHUNKS: Tuple[ChunkKey, ...] = ((0, 0), (1, 0), (1, 1), (0, 1))

    # Simulation settings
    DEFAULT_TICK_INTERVAL: float = 100.0  # ms between generations
    BASE_TICK_INTERVAL: float = 100.0  # interval at speed multiplier x1
    DEFAULT_RULE: str = "B3/S23"

    # View settings
    MIN_ZOOM: float = 0.1
    ZOOM_WHEEL_DIVISOR: float = 1000.0

    # Colors (RGBA)
    ALIVE_COLOR: Color = (255, 255, 255, 255)
    BACKGROUND_COLOR: Color = (0, 0, 0, 255)
