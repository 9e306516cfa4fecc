"""Data models for the run edge encoder."""

import re
from enum import Enum, IntEnum
from typing import Collection, Dict, Iterator, Mapping, Optional, Union

# Running speeds in km/h
MIN_SPEED = 3
SLOW_SPEED = 5
MEAN_SPEED = 8
MAX_SPEED = 10
FERRY_SPEED = 15

# Speed assumed for maxspeed=walk
WALK_MAX_SPEED = 6


class PriorityCode(IntEnum):
    """How desirable an edge is for running, ordered from worst to best."""
    
    WORST = 0
    AVOID_AT_ALL_COSTS = 1
    REACH_DEST = 2
    AVOID_IF_POSSIBLE = 3
    UNCHANGED = 4
    PREFER = 5
    VERY_NICE = 6
    BEST = 7
    
    @property
    def factor(self) -> float:
        """Multiplier a priority-aware weighting applies to the edge cost."""
        return self.value / PriorityCode.BEST.value


class RouteNetwork(Enum):
    """Scope of the hiking/walking route relation a way belongs to."""
    
    INTERNATIONAL = "international"
    NATIONAL = "national"
    REGIONAL = "regional"
    LOCAL = "local"
    OTHER = "other"
    
    @classmethod
    def from_tag(cls, value: Optional[str]) -> Optional['RouteNetwork']:
        """Map a relation ``network`` code (``iwn``, ``nwn``, ...) or plain name."""
        if value is None:
            return None
        return _NETWORK_CODES.get(value.strip().lower(), cls.OTHER)


_NETWORK_CODES = {
    'iwn': RouteNetwork.INTERNATIONAL,
    'international': RouteNetwork.INTERNATIONAL,
    'nwn': RouteNetwork.NATIONAL,
    'national': RouteNetwork.NATIONAL,
    'rwn': RouteNetwork.REGIONAL,
    'regional': RouteNetwork.REGIONAL,
    'lwn': RouteNetwork.LOCAL,
    'local': RouteNetwork.LOCAL,
}


class WayTags(Mapping[str, str]):
    """Read-only view over the tags of a single OSM way."""
    
    FERRY_ROUTES = frozenset({'ferry', 'shuttle_train'})
    
    def __init__(self, tags: Optional[Mapping[str, str]] = None, **kwargs: str):
        self._tags: Dict[str, str] = dict(tags or {})
        self._tags.update(kwargs)
    
    def __getitem__(self, key: str) -> str:
        return self._tags[key]
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)
    
    def __len__(self) -> int:
        return len(self._tags)
    
    def __repr__(self) -> str:
        return f"WayTags({self._tags!r})"
    
    def get_tag(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._tags.get(key, default)
    
    def has_tag(self, key: str, *values: Union[str, Collection[str]]) -> bool:
        """
        Check whether a tag is present, optionally with one of the given values.
        
        Args:
            key: Tag key
            *values: Accepted values, given inline or as one collection
        """
        if key not in self._tags:
            return False
        if not values:
            return True
        
        accepted = set()
        for value in values:
            if isinstance(value, str):
                accepted.add(value)
            else:
                accepted.update(value)
        return self._tags[key] in accepted
    
    @property
    def max_speed(self) -> float:
        """
        Declared maximum speed in km/h, 0 if missing or unparseable.
        
        When direction-specific limits are tagged, the smallest one counts.
        """
        speeds = [
            parse_maxspeed(self._tags.get(key))
            for key in ('maxspeed', 'maxspeed:forward', 'maxspeed:backward')
        ]
        declared = [s for s in speeds if s > 0]
        return min(declared) if declared else 0
    
    @property
    def is_ferry(self) -> bool:
        return self.has_tag('route', self.FERRY_ROUTES)


def parse_maxspeed(maxspeed: Optional[str]) -> float:
    """Parse maxspeed tag to km/h."""
    if not maxspeed:
        return 0
    
    value = str(maxspeed).strip().lower()
    if value == 'walk':
        return WALK_MAX_SPEED
    
    # Handle "50 mph", "80 km/h", "10 knots", etc.
    match = re.match(r'^(\d+(?:\.\d+)?)\s*(mph|knots|kmh|km/h|kph)?$', value)
    if not match:
        return 0
    
    speed = float(match.group(1))
    unit = match.group(2)
    if unit == 'mph':
        speed *= 1.609344
    elif unit == 'knots':
        speed *= 1.852
    return speed
