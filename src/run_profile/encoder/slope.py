"""Terrain-aware average speed for running edges."""

import logging
from math import sqrt
from typing import Optional

from .flags import BooleanEncodedValue, DecimalEncodedValue
from .geometry import Edge
from .models import WayTags, MIN_SPEED, SLOW_SPEED, MEAN_SPEED, MAX_SPEED
from ..core.utils import keep_in

logger = logging.getLogger(__name__)

# Edges shorter than this (meters) keep their speed, their slope is noise
MIN_SLOPE_DISTANCE = 2.0

# Slopes within +/- this are treated as flat
FLAT_SLOPE = 0.005


def slope_speed(slope: float) -> Optional[float]:
    """
    Average speed in km/h over a slope, or None if the slope counts as flat.
    
    Climbing uses ``v = sqrt(1 + slope²) / (slope + 1/v_hor)``, the 3D distance
    divided by the time spent on the horizontal part at ``v_hor`` plus the
    vertical part. Uphill runs at SLOW_SPEED horizontally, downhill at
    MEAN_SPEED with the signed slope, so gentle descents run faster
    than the flat. The result is kept in [MIN_SPEED, MAX_SPEED].
    
    Args:
        slope: Elevation change over planar distance, negative downhill
    """
    if slope > FLAT_SLOPE:
        horizontal_speed = SLOW_SPEED
    elif slope < -FLAT_SLOPE:
        # TODO: confirm MEAN_SPEED is the intended downhill speed rather than a faster constant
        horizontal_speed = MEAN_SPEED
    else:
        return None
    
    denominator = slope + 1.0 / horizontal_speed
    if denominator == 0:
        return MAX_SPEED
    speed = sqrt(1 + slope * slope) / denominator
    return keep_in(speed, MIN_SPEED, MAX_SPEED)


def edge_slope(edge: Edge) -> Optional[float]:
    """Unsigned slope between the first and last sample, None if not computable."""
    geometry = edge.fetch_way_geometry(3)
    if not geometry.is_3d:
        return None
    if edge.distance < MIN_SLOPE_DISTANCE:
        return None
    
    ele_delta = abs(geometry.get_elevation(geometry.size() - 1) - geometry.get_elevation(0))
    return ele_delta / edge.distance


def adjust_speed(
    way: WayTags,
    edge: Edge,
    avg_speed_enc: DecimalEncodedValue,
    forward_access_enc: BooleanEncodedValue,
    backward_access_enc: BooleanEncodedValue,
) -> bool:
    """
    Rewrite the average speed of an edge from its slope.
    
    Leaves the edge untouched when it has no elevation, is a tunnel, bridge or
    steps, is shorter than MIN_SLOPE_DISTANCE, has no access in either
    direction, or is flat.
    
    Returns:
        True if the speed was rewritten
    """
    if not edge.geometry.is_3d:
        logger.debug("Keeping speed, edge has no elevation: %r", edge)
        return False
    
    # elevation data inside tunnels and on bridges is unlikely to be correct
    if way.has_tag('tunnel', 'yes') or way.has_tag('bridge', 'yes') or way.has_tag('highway', 'steps'):
        logger.debug("Keeping speed for tunnel, bridge or steps: %r", way)
        return False
    
    slope = edge_slope(edge)
    if slope is None:
        logger.debug("Keeping speed, edge too short for a slope: %r", edge)
        return False
    
    flags = edge.flags
    if not (forward_access_enc.get_bool(flags) or backward_access_enc.get_bool(flags)):
        return False
    
    speed = slope_speed(slope)
    if speed is None:
        return False
    
    avg_speed_enc.set_decimal(flags, speed)
    return True
