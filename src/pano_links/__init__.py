"""Panorama link library initialization."""

from .geometry import Point, bearing, distance
from .graph import Edge, Graph
from .mst import InputShapeError, compute_mst, total_weight
from .panoramas import PanoramaRecord, parse_dms
from .pipeline import PanoramaLinker, PanoramaLinkerConfig, PanoramaLinkerResult, PanoramaLinkerStats
from .runner import link_file
from .structures import DisjointSet, UnknownNodeError

__all__ = [
    "PanoramaLinker",
    "PanoramaLinkerConfig",
    "PanoramaLinkerResult",
    "PanoramaLinkerStats",
    "PanoramaRecord",
    "parse_dms",
    "Point",
    "bearing",
    "distance",
    "Edge",
    "Graph",
    "DisjointSet",
    "UnknownNodeError",
    "InputShapeError",
    "compute_mst",
    "total_weight",
    "link_file",
]
