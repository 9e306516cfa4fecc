"""Edge geometry and the edge handle the encoder writes into."""

from typing import List, Optional, Sequence, Tuple

from shapely.geometry import LineString

from .flags import EdgeFlags
from ..core.utils import calculate_path_length

Point = Tuple[float, ...]  # (lat, lon) or (lat, lon, ele)


class PointList:
    """Ordered (lat, lon[, ele]) samples along an edge."""
    
    def __init__(self, points: Sequence[Sequence[float]]):
        if not points:
            raise ValueError("PointList needs at least one point")
        self.points: List[Point] = [tuple(p) for p in points]
    
    def __len__(self) -> int:
        return len(self.points)
    
    def __getitem__(self, index: int) -> Point:
        return self.points[index]
    
    def size(self) -> int:
        return len(self.points)
    
    @property
    def is_3d(self) -> bool:
        """True if every sample carries an elevation."""
        return all(len(p) >= 3 and p[2] is not None for p in self.points)
    
    def get_elevation(self, index: int) -> float:
        point = self.points[index]
        if len(point) < 3 or point[2] is None:
            raise ValueError(f"Point {index} has no elevation")
        return point[2]
    
    def sample(self, count: int = 3) -> 'PointList':
        """Return first, evenly spaced inner and last samples."""
        if count < 2 or len(self.points) <= count:
            return PointList(self.points)
        last = len(self.points) - 1
        indices = sorted({round(i * last / (count - 1)) for i in range(count)})
        return PointList([self.points[i] for i in indices])
    
    def length(self) -> float:
        """Planar length in meters."""
        return calculate_path_length(self.points)
    
    def to_linestring(self) -> LineString:
        """Shapely line in (lon, lat[, ele]) order."""
        if self.is_3d:
            coords = [(p[1], p[0], p[2]) for p in self.points]
        else:
            coords = [(p[1], p[0]) for p in self.points]
        if len(coords) == 1:
            coords = coords * 2
        return LineString(coords)
    
    def __repr__(self) -> str:
        return f"PointList({len(self.points)} points, 3d={self.is_3d})"


class Edge:
    """Directed graph edge: geometry, planar distance and attribute record."""
    
    def __init__(
        self,
        geometry: PointList,
        distance: float,
        flags: Optional[EdgeFlags] = None,
    ):
        self.geometry = geometry
        self.distance = distance
        self.flags = flags if flags is not None else EdgeFlags()
    
    @classmethod
    def from_points(cls, points: Sequence[Sequence[float]]) -> 'Edge':
        """Build an edge whose distance is the haversine length of its points."""
        geometry = PointList(points)
        return cls(geometry, geometry.length())
    
    def fetch_way_geometry(self, count: int = 3) -> PointList:
        return self.geometry.sample(count)
    
    def __repr__(self) -> str:
        return f"Edge(distance={self.distance:.1f}m, {self.geometry!r}, {self.flags!r})"
