"""Running priority classification from way tags.

Every heuristic votes for a priority under a numeric weight. A more specific
rule claims a higher weight, and a second write to the same weight refines
the earlier vote instead of adding a new one. The highest weight wins.
"""

from typing import Dict, Optional

from .models import PriorityCode, RouteNetwork, WayTags
from ..core.config import EncoderSettings

# Priority of ways that are part of a hiking/walking route relation
ROUTE_NETWORK_PRIORITY: Dict[RouteNetwork, PriorityCode] = {
    RouteNetwork.INTERNATIONAL: PriorityCode.BEST,
    RouteNetwork.NATIONAL: PriorityCode.BEST,
    RouteNetwork.REGIONAL: PriorityCode.VERY_NICE,
    RouteNetwork.LOCAL: PriorityCode.VERY_NICE,
}

RELATION_WEIGHT = 110.0
FOOT_DESIGNATED_WEIGHT = 100.0
SAFE_WAY_WEIGHT = 40.0
BUSY_ROAD_WEIGHT = 45.0
CYCLEWAY_WEIGHT = 44.0

# Speed limits in km/h
SAFE_MAX_SPEED = 20
BUSY_MAX_SPEED = 50


def collect(
    way: WayTags,
    weight_to_prio: Dict[float, PriorityCode],
    settings: EncoderSettings,
) -> None:
    """
    Add the tag-derived priority votes of a way to the vote table.
    
    Args:
        way: Tags of the way
        weight_to_prio: Vote table, mutated in place
        settings: Encoder settings with the tag vocabulary
    """
    highway = way.get_tag('highway')
    if way.has_tag('foot', 'designated'):
        weight_to_prio[FOOT_DESIGNATED_WEIGHT] = PriorityCode.PREFER
    
    max_speed = way.max_speed
    no_sidewalk = way.has_tag('sidewalk', settings.sidewalk_no_values)
    if settings.is_safe_highway(highway) or 0 < max_speed <= SAFE_MAX_SPEED:
        weight_to_prio[SAFE_WAY_WEIGHT] = PriorityCode.PREFER
        if way.has_tag('tunnel', settings.intended_values):
            if no_sidewalk:
                weight_to_prio[SAFE_WAY_WEIGHT] = PriorityCode.REACH_DEST
            else:
                weight_to_prio[SAFE_WAY_WEIGHT] = PriorityCode.UNCHANGED
    elif max_speed > BUSY_MAX_SPEED or settings.is_avoid_highway(highway):
        if no_sidewalk:
            weight_to_prio[BUSY_ROAD_WEIGHT] = PriorityCode.WORST
        else:
            weight_to_prio[BUSY_ROAD_WEIGHT] = PriorityCode.REACH_DEST
    
    if way.has_tag('bicycle', 'official', 'designated'):
        weight_to_prio[CYCLEWAY_WEIGHT] = PriorityCode.AVOID_IF_POSSIBLE


def handle_priority(
    way: WayTags,
    network: Optional[RouteNetwork],
    settings: EncoderSettings,
) -> PriorityCode:
    """
    Resolve the running priority of a way.
    
    Args:
        way: Tags of the way
        network: Route network class of the relation the way belongs to, if any
        settings: Encoder settings with the tag vocabulary and default priority
        
    Returns:
        The priority voted under the highest weight
    """
    weight_to_prio: Dict[float, PriorityCode] = {}
    relation_priority = ROUTE_NETWORK_PRIORITY.get(network)
    if relation_priority is not None:
        weight_to_prio[RELATION_WEIGHT] = relation_priority
    
    collect(way, weight_to_prio, settings)
    
    if not weight_to_prio:
        return PriorityCode[settings.default_priority]
    return weight_to_prio[max(weight_to_prio)]


def classify(
    way: WayTags,
    network: Optional[RouteNetwork] = None,
    settings: Optional[EncoderSettings] = None,
) -> PriorityCode:
    """
    Classify a way, reading the network class from ``route_network`` if not given.
    
    Args:
        way: Tags of the way
        network: Route network class; derived from the way's tags when None
        settings: Encoder settings (defaults if None)
    """
    if network is None:
        network = RouteNetwork.from_tag(way.get_tag('route_network'))
    return handle_priority(way, network, settings or EncoderSettings())
