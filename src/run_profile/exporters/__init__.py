"""Export encoded edges."""

from .geojson import export_edges_geojson

__all__ = ["export_edges_geojson"]
