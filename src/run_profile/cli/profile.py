"""CLI command for profiling a GPX track."""

import sys

from . import parse_tags
from ..core.config import EncoderSettings
from ..core.gpx import load_gpx_track, split_into_edges
from ..encoder.models import RouteNetwork, WayTags
from ..encoder.run import RunFlagEncoder
from ..exporters.geojson import export_edges_geojson

DEFAULT_TAGS = {'highway': 'path'}


def summarize(edges, encoder):
    """
    Sum distance and running time over encoded edges.
    
    Returns:
        Dict with distance_km, hours and per-priority distance in km
    """
    distance = 0.0
    hours = 0.0
    by_priority = {}
    for edge in edges:
        if not encoder.is_forward(edge.flags):
            continue
        speed = encoder.get_speed(edge.flags)
        km = edge.distance / 1000.0
        distance += km
        if speed > 0:
            hours += km / speed
        name = encoder.get_priority(edge.flags).name
        by_priority[name] = by_priority.get(name, 0.0) + km
    
    return {
        'distance_km': distance,
        'hours': hours,
        'by_priority': by_priority,
    }


def run_profile(args):
    """Execute the profile command."""
    try:
        settings = EncoderSettings.from_yaml(args.config) if args.config else EncoderSettings()
        tags = parse_tags(args.tags) or dict(DEFAULT_TAGS)
        network = RouteNetwork(args.network) if args.network else None
        points = load_gpx_track(args.gpx_file)
    except FileNotFoundError as e:
        print(f"\n❌ Error: File not found: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"\n❌ Error: {e}", file=sys.stderr)
        return 1
    
    encoder = RunFlagEncoder(settings)
    way = WayTags(tags)
    
    print("=" * 60)
    print("🏃 RUN PROFILE")
    print("=" * 60)
    print(f"Track: {args.gpx_file}")
    print(f"Tags: {tags}")
    print(f"Encoder: {encoder} v{encoder.get_version()} ({settings})")
    
    edges = split_into_edges(points)
    adjusted = 0
    for edge in edges:
        encoder.handle_way_tags(way, edge.flags, network)
        if encoder.apply_way_tags(way, edge):
            adjusted += 1
    
    if not edges:
        print("\n⚠️  Track has no segments to encode")
        return 0
    
    summary = summarize(edges, encoder)
    print(f"\nSegments: {len(edges)} ({adjusted} slope-adjusted)")
    print(f"Distance: {summary['distance_km']:.2f} km")
    print(f"Estimated time: {summary['hours']:.2f} h")
    for name, km in sorted(summary['by_priority'].items()):
        print(f"  {name}: {km:.2f} km")
    
    if args.output_geojson:
        export_edges_geojson(edges, encoder, args.output_geojson)
    
    return 0
