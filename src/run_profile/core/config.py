"""Encoder configuration management."""

from pathlib import Path
from typing import Any, Dict, FrozenSet, Mapping, Optional
import logging

import yaml

logger = logging.getLogger(__name__)


class EncoderSettings:
    """Parse and manage the run encoder configuration and tag vocabulary."""
    
    DEFAULT_SPEED_BITS = 4
    DEFAULT_SPEED_FACTOR = 1.0
    DEFAULT_BLOCK_FORDS = True
    DEFAULT_PRIORITY = 'UNCHANGED'
    
    # Highway classes that are quiet enough to prefer
    DEFAULT_SAFE_HIGHWAYS = [
        'footway', 'path', 'steps', 'pedestrian', 'living_street',
        'track', 'residential', 'service', 'platform',
    ]
    
    # Highway classes with fast or heavy traffic
    DEFAULT_AVOID_HIGHWAYS = [
        'secondary', 'secondary_link', 'tertiary', 'tertiary_link',
        'trunk', 'trunk_link', 'primary', 'primary_link',
    ]
    
    # Highway classes a runner may use at all
    DEFAULT_ALLOWED_HIGHWAYS = [
        'footway', 'path', 'steps', 'pedestrian', 'living_street',
        'track', 'residential', 'service', 'platform',
        'secondary', 'secondary_link', 'tertiary', 'tertiary_link',
        'trunk', 'trunk_link', 'primary', 'primary_link',
        'cycleway', 'unclassified', 'road',
    ]
    
    DEFAULT_SIDEWALK_NO_VALUES = ['no', 'none', 'separate']
    DEFAULT_INTENDED_VALUES = ['yes', 'designated', 'official', 'permissive']
    DEFAULT_RESTRICTED_VALUES = [
        'private', 'no', 'restricted', 'military', 'emergency',
    ]
    
    def __init__(self, config_file: Optional[str] = None, **overrides: Any):
        """
        Initialize encoder settings.
        
        Args:
            config_file: Path to YAML config file. If None, uses defaults.
            **overrides: Individual settings that win over file and defaults.
        """
        self.speed_bits = self.DEFAULT_SPEED_BITS
        self.speed_factor = self.DEFAULT_SPEED_FACTOR
        self.block_fords = self.DEFAULT_BLOCK_FORDS
        self.default_priority = self.DEFAULT_PRIORITY
        self.safe_highways = frozenset(self.DEFAULT_SAFE_HIGHWAYS)
        self.avoid_highways = frozenset(self.DEFAULT_AVOID_HIGHWAYS)
        self.allowed_highways = frozenset(self.DEFAULT_ALLOWED_HIGHWAYS)
        self.sidewalk_no_values = frozenset(self.DEFAULT_SIDEWALK_NO_VALUES)
        self.intended_values = frozenset(self.DEFAULT_INTENDED_VALUES)
        self.restricted_values = frozenset(self.DEFAULT_RESTRICTED_VALUES)
        
        if config_file:
            self._load_config(config_file)
        
        self._apply(overrides)
        self._validate()
    
    @classmethod
    def from_yaml(cls, yaml_path: str) -> 'EncoderSettings':
        """
        Load settings from YAML file, falling back to defaults if it is missing.
        
        Args:
            yaml_path: Path to YAML configuration file
            
        Returns:
            EncoderSettings instance
        """
        if not Path(yaml_path).exists():
            logger.warning("Encoder config not found: %s, using defaults", yaml_path)
            return cls()
        
        return cls(config_file=yaml_path)
    
    @classmethod
    def from_properties(cls, properties: Mapping[str, Any]) -> 'EncoderSettings':
        """
        Build settings from a flat property map such as ``speed_bits=5|speed_factor=2``.
        
        Args:
            properties: Mapping of property names to raw values (strings allowed)
        """
        values = {}
        if 'speed_bits' in properties:
            values['speed_bits'] = int(properties['speed_bits'])
        if 'speed_factor' in properties:
            values['speed_factor'] = float(properties['speed_factor'])
        if 'block_fords' in properties:
            values['block_fords'] = _parse_bool(properties['block_fords'])
        return cls(**values)
    
    def _load_config(self, config_file: str):
        """Load configuration from YAML file."""
        config_path = Path(config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        
        try:
            with open(config_path) as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")
        
        if not isinstance(config, dict):
            raise ValueError(f"Config file must contain a mapping: {config_file}")
        
        values: Dict[str, Any] = {}
        if 'encoder' in config:
            values.update(config['encoder'] or {})
        if 'highway_types' in config:
            highway_types = config['highway_types'] or {}
            for section in ('safe', 'avoid', 'allowed'):
                if section in highway_types:
                    values[f'{section}_highways'] = highway_types[section]
        if 'tag_values' in config:
            tag_values = config['tag_values'] or {}
            for section in ('sidewalk_no', 'intended', 'restricted'):
                if section in tag_values:
                    values[f'{section}_values'] = tag_values[section]
        
        self._apply(values)
    
    def _apply(self, values: Mapping[str, Any]):
        for key, value in values.items():
            if key == 'speed_bits':
                self.speed_bits = int(value)
            elif key == 'speed_factor':
                self.speed_factor = float(value)
            elif key == 'block_fords':
                self.block_fords = _parse_bool(value)
            elif key == 'default_priority':
                self.default_priority = str(value).upper()
            elif key in ('safe_highways', 'avoid_highways', 'allowed_highways',
                         'sidewalk_no_values', 'intended_values', 'restricted_values'):
                setattr(self, key, _to_frozenset(value))
            else:
                logger.debug("Ignoring unknown encoder setting %r", key)
    
    def _validate(self):
        if self.speed_bits < 1:
            raise ValueError(f"speed_bits must be at least 1, got {self.speed_bits}")
        if self.speed_factor <= 0:
            raise ValueError(f"speed_factor must be positive, got {self.speed_factor}")
        
        from ..encoder.models import PriorityCode
        if self.default_priority not in PriorityCode.__members__:
            raise ValueError(f"Unknown default priority: {self.default_priority}")
    
    def is_safe_highway(self, highway: Optional[str]) -> bool:
        """Check if highway class is quiet enough to prefer."""
        return highway in self.safe_highways
    
    def is_avoid_highway(self, highway: Optional[str]) -> bool:
        """Check if highway class carries fast or heavy traffic."""
        return highway in self.avoid_highways
    
    def is_allowed_highway(self, highway: Optional[str]) -> bool:
        return highway in self.allowed_highways
    
    def __repr__(self) -> str:
        return (
            f"EncoderSettings(speed_bits={self.speed_bits}, "
            f"speed_factor={self.speed_factor}, block_fords={self.block_fords})"
        )


def _to_frozenset(value: Any) -> FrozenSet[str]:
    if isinstance(value, str):
        return frozenset(v.strip() for v in value.split(',') if v.strip())
    return frozenset(str(v) for v in value)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ('true', 'yes', '1', 'on')
    return bool(value)
