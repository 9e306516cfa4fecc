"""Run Profile - priority and terrain-aware speed encoding for running ultras."""

__version__ = "0.1.0"

# Expose main classes for programmatic use
from .core import EncoderSettings
from .encoder import (
    PriorityCode,
    RouteNetwork,
    WayTags,
    EdgeFlags,
    Edge,
    PointList,
    RunFlagEncoder,
    classify,
    slope_speed,
)

__all__ = [
    "__version__",
    "EncoderSettings",
    "PriorityCode",
    "RouteNetwork",
    "WayTags",
    "EdgeFlags",
    "Edge",
    "PointList",
    "RunFlagEncoder",
    "classify",
    "slope_speed",
]
