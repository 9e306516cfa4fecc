"""CLI command for classifying a single way."""

import sys

from . import parse_tags
from ..core.config import EncoderSettings
from ..encoder.models import RouteNetwork, WayTags
from ..encoder.priority import classify


def run_classify(args):
    """Execute the classify command."""
    try:
        settings = EncoderSettings.from_yaml(args.config) if args.config else EncoderSettings()
        way = WayTags(parse_tags(args.tags))
        network = RouteNetwork(args.network) if args.network else None
        
        priority = classify(way, network, settings)
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    
    print(f"{priority.name} ({priority.value})")
    return 0
