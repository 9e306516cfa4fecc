"""Base pedestrian access and speed encoding the run profile builds on."""

from enum import Enum

from .models import WayTags, FERRY_SPEED, MEAN_SPEED, SLOW_SPEED
from ..core.config import EncoderSettings


class Access(Enum):
    """Outcome of the access check for a way."""
    
    WAY = "way"
    FERRY = "ferry"
    CAN_SKIP = "can_skip"
    
    @property
    def can_skip(self) -> bool:
        return self is Access.CAN_SKIP
    
    @property
    def is_ferry(self) -> bool:
        return self is Access.FERRY


# Tags whose restricted values forbid foot traffic
RESTRICTION_KEYS = ('foot', 'access')

# sac_scale grades still passable on foot
HIKING_SAC_SCALES = frozenset({
    'hiking', 'mountain_hiking', 'demanding_mountain_hiking', 'alpine_hiking',
})

SIDEWALK_VALUES = frozenset({'yes', 'both', 'left', 'right'})


def is_restricted(way: WayTags, settings: EncoderSettings) -> bool:
    return any(way.has_tag(key, settings.restricted_values) for key in RESTRICTION_KEYS)


def get_access(way: WayTags, settings: EncoderSettings) -> Access:
    """
    Decide whether a runner may use the way at all.
    
    Args:
        way: Tags of the way
        settings: Encoder settings with the tag vocabulary
        
    Returns:
        Access.WAY, Access.FERRY or Access.CAN_SKIP
    """
    highway = way.get_tag('highway')
    if highway is None:
        accept = Access.CAN_SKIP
        if way.is_ferry:
            foot = way.get_tag('foot')
            if foot is None or foot in settings.intended_values:
                accept = Access.FERRY
        
        # Platforms and piers are walkable without a highway tag
        if way.has_tag('railway', 'platform') or way.has_tag('man_made', 'pier'):
            accept = Access.WAY
        
        if not accept.can_skip and is_restricted(way, settings):
            return Access.CAN_SKIP
        return accept
    
    sac_scale = way.get_tag('sac_scale')
    if sac_scale is not None and sac_scale not in HIKING_SAC_SCALES:
        return Access.CAN_SKIP
    
    if way.has_tag('foot', settings.intended_values):
        return Access.WAY
    
    if is_restricted(way, settings):
        return Access.CAN_SKIP
    
    if way.has_tag('sidewalk', SIDEWALK_VALUES):
        return Access.WAY
    
    if not settings.is_allowed_highway(highway):
        return Access.CAN_SKIP
    
    if way.has_tag('motorroad', 'yes'):
        return Access.CAN_SKIP
    
    # do not get our feet wet
    if settings.block_fords and (highway == 'ford' or way.has_tag('ford')):
        return Access.CAN_SKIP
    
    return Access.WAY


def base_speed(way: WayTags, access: Access) -> float:
    """Average running speed before any terrain adjustment."""
    if access.is_ferry:
        return FERRY_SPEED
    
    sac_scale = way.get_tag('sac_scale')
    if sac_scale is not None and sac_scale != 'hiking':
        return SLOW_SPEED
    return MEAN_SPEED
