"""Core utilities for the run profile encoder."""

from .utils import (
    haversine_distance,
    calculate_path_length,
    keep_in,
)
from .config import EncoderSettings

__all__ = [
    "haversine_distance",
    "calculate_path_length",
    "keep_in",
    "EncoderSettings",
]
