"""GPX track loading for profiling routes edge by edge."""

from pathlib import Path
from typing import List, Optional, Tuple

import gpxpy

from ..encoder.geometry import Edge

TrackPoint = Tuple[float, float, Optional[float]]


def load_gpx_track(gpx_file) -> List[TrackPoint]:
    """
    Load and parse a GPX file into elevation-aware points.
    
    Args:
        gpx_file: Path to GPX file
        
    Returns:
        List of (latitude, longitude, elevation) tuples, elevation may be None
        
    Raises:
        ValueError: If no points found in GPX file
    """
    gpx_file = Path(gpx_file)
    
    with open(gpx_file) as f:
        gpx = gpxpy.parse(f)
    
    points = []
    
    # Try tracks first
    for track in gpx.tracks:
        for segment in track.segments:
            for point in segment.points:
                points.append((point.latitude, point.longitude, point.elevation))
    
    # Then planned routes
    if not points:
        for route in gpx.routes:
            for point in route.points:
                points.append((point.latitude, point.longitude, point.elevation))
    
    # Fall back to waypoints
    if not points:
        for waypoint in gpx.waypoints:
            points.append((waypoint.latitude, waypoint.longitude, waypoint.elevation))
    
    if not points:
        raise ValueError(f"No points found in GPX file: {gpx_file}")
    
    return points


def split_into_edges(points: List[TrackPoint]) -> List[Edge]:
    """
    Turn consecutive track points into edges.
    
    Points without elevation are kept as 2D so the edge reports no elevation.
    Consecutive duplicate points are skipped.
    """
    edges = []
    for start, end in zip(points[:-1], points[1:]):
        if start[:2] == end[:2]:
            continue
        edges.append(Edge.from_points([_strip_missing_ele(start), _strip_missing_ele(end)]))
    return edges


def _strip_missing_ele(point: TrackPoint) -> Tuple[float, ...]:
    if point[2] is None:
        return point[:2]
    return point
