"""GeoJSON exporter for encoded edges."""

import json
from pathlib import Path
from typing import List

from shapely.geometry import mapping

from ..encoder.geometry import Edge
from ..encoder.models import PriorityCode
from ..encoder.run import RunFlagEncoder
from ..encoder.slope import edge_slope

PRIORITY_COLORS = {
    PriorityCode.WORST: "#FF0000",
    PriorityCode.AVOID_AT_ALL_COSTS: "#FF4400",
    PriorityCode.REACH_DEST: "#FF8800",
    PriorityCode.AVOID_IF_POSSIBLE: "#FFCC00",
    PriorityCode.UNCHANGED: "#FFFF00",
    PriorityCode.PREFER: "#88FF00",
    PriorityCode.VERY_NICE: "#44DD00",
    PriorityCode.BEST: "#00FF00",
}


def edge_to_feature(edge: Edge, encoder: RunFlagEncoder, index: int) -> dict:
    """Build a GeoJSON feature with the decoded attributes of an edge."""
    priority = encoder.get_priority(edge.flags)
    color = PRIORITY_COLORS.get(priority, "#808080")
    slope = edge_slope(edge)
    return {
        "type": "Feature",
        "geometry": mapping(edge.geometry.to_linestring()),
        "properties": {
            "type": "edge",
            "index": index,
            "distance_m": round(edge.distance, 1),
            "slope": round(slope, 4) if slope is not None else None,
            "forward": encoder.is_forward(edge.flags),
            "backward": encoder.is_backward(edge.flags),
            "speed_kmh": encoder.get_speed(edge.flags),
            "priority": priority.name,
            "priority_value": priority.value,
            "color": color,
            "stroke": color,
            "stroke-width": 4,
            "stroke-opacity": 1.0,
        }
    }


def export_edges_geojson(
    edges: List[Edge],
    encoder: RunFlagEncoder,
    output_path: str,
) -> Path:
    """
    Export encoded edges to a GeoJSON FeatureCollection.
    
    Args:
        edges: Encoded edges
        encoder: Encoder that wrote the edge flags
        output_path: Path to output GeoJSON file
        
    Returns:
        Path of the written file
    """
    features = [
        edge_to_feature(edge, encoder, i)
        for i, edge in enumerate(edges)
    ]
    
    geojson = {
        "type": "FeatureCollection",
        "features": features
    }
    
    # Ensure output directory exists
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    
    with open(output_file, 'w', encoding='utf-8') as f:
        json.dump(geojson, f, indent=2)
    
    print(f"✓ Exported {len(features)} edges to GeoJSON: {output_path}")
    return output_file
