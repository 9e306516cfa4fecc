"""Priority and terrain-aware speed encoding for running edges."""

from .models import (
    PriorityCode,
    RouteNetwork,
    WayTags,
    MIN_SPEED,
    SLOW_SPEED,
    MEAN_SPEED,
    MAX_SPEED,
    FERRY_SPEED,
)
from .flags import EdgeFlags
from .geometry import Edge, PointList
from .priority import classify
from .slope import slope_speed
from .run import RunFlagEncoder

__all__ = [
    "PriorityCode",
    "RouteNetwork",
    "WayTags",
    "MIN_SPEED",
    "SLOW_SPEED",
    "MEAN_SPEED",
    "MAX_SPEED",
    "FERRY_SPEED",
    "EdgeFlags",
    "Edge",
    "PointList",
    "classify",
    "slope_speed",
    "RunFlagEncoder",
]
