"""Edge encoder for running ultras."""

import logging
from typing import Optional

from .access import Access, base_speed, get_access
from .flags import (
    BooleanEncodedValue,
    DecimalEncodedValue,
    EdgeFlags,
    EncodingManager,
    IntEncodedValue,
)
from .geometry import Edge
from .models import PriorityCode, RouteNetwork, WayTags
from .priority import handle_priority
from .slope import adjust_speed
from ..core.config import EncoderSettings

logger = logging.getLogger(__name__)

PRIORITY_BITS = 3

# Weightings any speed-based encoder can serve
BASE_FEATURES = frozenset({'fastest', 'shortest', 'short_fastest'})
PRIORITY_FEATURE = 'priority'


class RunFlagEncoder:
    """
    Encode access, average speed and priority of running edges.
    
    The run profile assumes walking up all hills, trotting down them and
    running or walking the flats at up to MEAN_SPEED.
    """
    
    # Bump whenever the bit layout or any speed/priority constant changes
    VERSION = 5
    name = "run"
    
    def __init__(self, settings: Optional[EncoderSettings] = None):
        """
        Initialize encoder and lay out its values in the edge flags.
        
        Args:
            settings: EncoderSettings (defaults if None)
        """
        self.settings = settings or EncoderSettings()
        
        self.encoding = EncodingManager()
        self.access_enc = self.encoding.register(BooleanEncodedValue(f"{self.name}_access"))
        self.backward_access_enc = self.encoding.register(
            BooleanEncodedValue(f"{self.name}_access_backward")
        )
        self.avg_speed_enc = self.encoding.register(DecimalEncodedValue(
            f"{self.name}_average_speed",
            self.settings.speed_bits,
            self.settings.speed_factor,
        ))
        self.priority_enc = self.encoding.register(
            IntEncodedValue(f"{self.name}_priority", PRIORITY_BITS)
        )
    
    @classmethod
    def from_properties(cls, properties) -> 'RunFlagEncoder':
        return cls(EncoderSettings.from_properties(properties))
    
    def get_version(self) -> int:
        return self.VERSION
    
    def get_access(self, way: WayTags) -> Access:
        return get_access(way, self.settings)
    
    def handle_way_tags(
        self,
        way: WayTags,
        flags: EdgeFlags,
        network: Optional[RouteNetwork] = None,
    ) -> EdgeFlags:
        """
        Write access, base speed and priority for an accepted way.
        
        Args:
            way: Tags of the way
            flags: Edge flags to write into
            network: Route network class of a relation containing the way
            
        Returns:
            The same flags; untouched if runners cannot use the way
        """
        access = self.get_access(way)
        if access.can_skip:
            logger.debug("Skipping way runners cannot use: %r", way)
            return flags
        
        self.avg_speed_enc.set_decimal(flags, base_speed(way, access))
        self.access_enc.set_bool(flags, True)
        self.backward_access_enc.set_bool(flags, True)
        
        priority = handle_priority(way, network, self.settings)
        self.priority_enc.set_int(flags, priority.value)
        return flags
    
    def apply_way_tags(self, way: WayTags, edge: Edge) -> bool:
        """Adjust the average speed of an encoded edge to its slope."""
        return adjust_speed(
            way,
            edge,
            self.avg_speed_enc,
            self.access_enc,
            self.backward_access_enc,
        )
    
    def encode_edge(
        self,
        way: WayTags,
        edge: Edge,
        network: Optional[RouteNetwork] = None,
    ) -> Edge:
        """Run the full pipeline on one edge: tags first, then slope."""
        self.handle_way_tags(way, edge.flags, network)
        self.apply_way_tags(way, edge)
        return edge
    
    def supports(self, feature: str) -> bool:
        """Check whether a weighting can be served from this encoder's values."""
        return feature in BASE_FEATURES or feature == PRIORITY_FEATURE
    
    def is_forward(self, flags: EdgeFlags) -> bool:
        return self.access_enc.get_bool(flags)
    
    def is_backward(self, flags: EdgeFlags) -> bool:
        return self.backward_access_enc.get_bool(flags)
    
    def get_speed(self, flags: EdgeFlags) -> float:
        return self.avg_speed_enc.get_decimal(flags)
    
    def get_priority(self, flags: EdgeFlags) -> PriorityCode:
        return PriorityCode(self.priority_enc.get_int(flags))
    
    def __str__(self) -> str:
        return self.name
