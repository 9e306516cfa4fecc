"""Command-line interface for the run profile encoder."""

import sys
import argparse

from ..encoder.models import RouteNetwork


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="run-profile",
        description="Classify ways and profile routes for running ultras"
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    
    # Classify subcommand
    classify_parser = subparsers.add_parser(
        "classify",
        help="Classify the running priority of a way from its tags"
    )
    classify_parser.add_argument(
        "--tag",
        dest="tags",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Way tag, repeat for several tags (e.g. --tag highway=track)"
    )
    classify_parser.add_argument(
        "--network",
        choices=[n.value for n in RouteNetwork],
        help="Route network class of a relation containing the way"
    )
    classify_parser.add_argument(
        "--config",
        help="Path to encoder config YAML (default: built-in settings)"
    )
    
    # Profile subcommand
    profile_parser = subparsers.add_parser(
        "profile",
        help="Encode every segment of a GPX track and estimate running time"
    )
    profile_parser.add_argument(
        "--gpx",
        dest="gpx_file",
        required=True,
        help="Input GPX track file (elevations used for slope)"
    )
    profile_parser.add_argument(
        "--tag",
        dest="tags",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Tag applied to every segment (default: highway=path)"
    )
    profile_parser.add_argument(
        "--network",
        choices=[n.value for n in RouteNetwork],
        help="Route network class the whole track belongs to"
    )
    profile_parser.add_argument(
        "--config",
        help="Path to encoder config YAML (default: built-in settings)"
    )
    profile_parser.add_argument(
        "--output-geojson",
        help="Output GeoJSON file with encoded segments"
    )
    
    # Parse arguments
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        sys.exit(1)
    
    # Route to appropriate subcommand
    if args.command == "classify":
        from .classify import run_classify
        sys.exit(run_classify(args))
    elif args.command == "profile":
        from .profile import run_profile
        sys.exit(run_profile(args))


def parse_tags(pairs):
    """
    Parse ``KEY=VALUE`` strings into a tag dict.
    
    Raises:
        ValueError: If a pair has no ``=`` or an empty key
    """
    tags = {}
    for pair in pairs:
        key, sep, value = pair.partition('=')
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Invalid tag (expected KEY=VALUE): {pair}")
        tags[key] = value.strip()
    return tags


if __name__ == "__main__":
    main()
