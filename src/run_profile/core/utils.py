"""Shared utility functions for edge encoding."""

from math import radians, sin, cos, sqrt, atan2, isfinite


def haversine_distance(lat1, lon1, lat2, lon2):
    """
    Calculate distance between two points in meters using Haversine formula.
    
    Args:
        lat1, lon1: Coordinates of first point
        lat2, lon2: Coordinates of second point
        
    Returns:
        Distance in meters
    """
    R = 6371000  # Earth radius in meters
    
    lat1, lon1, lat2, lon2 = map(radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    
    a = sin(dlat/2)**2 + cos(lat1) * cos(lat2) * sin(dlon/2)**2
    c = 2 * atan2(sqrt(a), sqrt(1-a))
    
    return R * c


def calculate_path_length(points):
    """
    Calculate planar length of a point sequence in meters.
    
    Args:
        points: Sequence of (lat, lon) or (lat, lon, ele) tuples
        
    Returns:
        Total length in meters (elevation ignored)
    """
    total = 0.0
    for i in range(len(points) - 1):
        total += haversine_distance(
            points[i][0], points[i][1],
            points[i+1][0], points[i+1][1]
        )
    return total


def keep_in(value, min_value, max_value):
    """Clamp value into [min_value, max_value]."""
    if not isfinite(value):
        raise ValueError(f"Cannot clamp non-finite value: {value}")
    return max(min_value, min(max_value, value))
