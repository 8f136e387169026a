"""Command line entry point for the panorama linker."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .geometry import Point
from .pipeline import PanoramaLinkerConfig
from .runner import link_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Link geotagged panoramas into a minimum spanning tree.")
    parser.add_argument("input", type=Path, help="Path to the panorama metadata CSV or Excel file")
    parser.add_argument("output", type=Path, help="Path where the tree edges will be written")
    parser.add_argument(
        "--max-distance",
        type=float,
        default=float(os.getenv("PANO_LINKS_MAX_DISTANCE", "0.001")),
        help="Largest distance, in decimal degrees, between two linked panoramas (default: 0.001)",
    )
    parser.add_argument(
        "--id-column",
        default=os.getenv("PANO_LINKS_ID_COLUMN", "id"),
        help="Column containing the panorama identifiers (default: id)",
    )
    parser.add_argument("--latitude-column", default="latitude", help="Column containing latitude D;M;S values")
    parser.add_argument("--longitude-column", default="longitude", help="Column containing longitude D;M;S values")
    parser.add_argument("--heading-column", default="heading", help="Column containing the pose heading in degrees")
    parser.add_argument(
        "--bounds",
        nargs=4,
        type=float,
        metavar=("MIN_LON", "MIN_LAT", "MAX_LON", "MAX_LAT"),
        help="Only link panoramas strictly inside this box",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print errors")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    bounds = None
    if args.bounds:
        min_lon, min_lat, max_lon, max_lat = args.bounds
        bounds = (Point(min_lon, min_lat), Point(max_lon, max_lat))

    config = PanoramaLinkerConfig(
        id_column=args.id_column,
        latitude_column=args.latitude_column,
        longitude_column=args.longitude_column,
        heading_column=args.heading_column or None,
        max_link_distance=args.max_distance,
        bounds=bounds,
        use_tqdm=not args.disable_tqdm,
        verbose=not args.quiet,
    )

    result = link_file(args.input, args.output, config)
    return 0 if result is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
