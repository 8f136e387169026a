"""Core pipeline that links geotagged panoramas into a navigation tree."""

from __future__ import annotations

import time
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from sklearn.neighbors import NearestNeighbors
from tqdm import tqdm

from .geometry import Point, bearing, bounds_contain, distance
from .graph import Edge
from .mst import compute_mst, total_weight
from .panoramas import PanoramaRecord, filter_located, record_from_row
from .structures import DisjointSet

RESULT_COLUMNS = ["from_id", "to_id", "weight", "bearing", "from_heading", "to_heading"]


@dataclass
class PanoramaLinkerStats:
    """Summary metrics for a linking run."""

    total_panoramas: int
    located_panoramas: int
    candidate_edges: int
    accepted_edges: int
    component_count: int
    total_weight: float
    runtime_seconds: float


@dataclass
class PanoramaLinkerResult:
    """Result bundle returned by :class:PanoramaLinker."""

    dataframe: pd.DataFrame
    edges: List[Edge]
    component_map: Dict[str, List[str]]
    stats: PanoramaLinkerStats


@dataclass
class PanoramaLinkerConfig:
    """Configuration parameters for :class:PanoramaLinker.

    `max_link_distance` is measured in decimal degrees, the same planar
    units used for edge weights. When `bounds` is set, only panoramas strictly
    inside the (lower-left, upper-right) box are linked.
    """

    id_column: str = "id"
    latitude_column: str = "latitude"
    longitude_column: str = "longitude"
    heading_column: str | None = "heading"
    max_link_distance: float = 0.001
    bounds: Optional[Tuple[Point, Point]] = None
    use_tqdm: bool = True
    verbose: bool = True


class PanoramaLinker:
    """Connect nearby panoramas with a minimum spanning tree of distance-weighted links."""

    def __init__(self, config: PanoramaLinkerConfig | None = None) -> None:
        self.config = config or PanoramaLinkerConfig()
        if self.config.max_link_distance <= 0:
            raise ValueError("max_link_distance must be positive")

    def link(
        self,
        dataframe: pd.DataFrame,
        output_path: str | Path | None = None,
    ) -> PanoramaLinkerResult:
        """Build the link tree for the panoramas in `dataframe`, optionally saving the edge table."""

        for column in self._required_columns:
            if column not in dataframe.columns:
                raise KeyError(f"Column '{column}' not found in dataframe")

        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- Panorama Linking Started ---")
            print("\n1. Loading panorama metadata...")

        t0 = time.time()
        records = [
            record_from_row(
                row,
                id_column=self.config.id_column,
                latitude_column=self.config.latitude_column,
                longitude_column=self.config.longitude_column,
                heading_column=self._heading_column(dataframe),
            )
            for row in dataframe.to_dict(orient="records")
        ]
        located = filter_located(records)
        if self.config.bounds is not None:
            low, high = self.config.bounds
            located = [record for record in located if bounds_contain(record.point, low, high)]
        self._check_unique_ids(located)
        if verbose:
            print(f"   Loaded {len(records)} panoramas, {len(located)} with usable GPS positions.")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("2. Finding candidate links between nearby panoramas...")
        pairs = self._build_candidate_pairs(located, self.config.max_link_distance)
        if verbose:
            print(f"   Found {len(pairs)} candidate links within {self.config.max_link_distance}.")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("3. Computing link weights and bearings...")
        from_nodes: List[str] = []
        to_nodes: List[str] = []
        weights: List[float] = []
        bearings: List[float] = []

        iterator: Iterable[Tuple[int, int]] = pairs
        if pairs and self.config.use_tqdm:
            iterator = tqdm(pairs, desc="   Measuring Links", unit="link")
        for left, right in iterator:
            start = located[left]
            end = located[right]
            from_nodes.append(start.id)
            to_nodes.append(end.id)
            weights.append(distance(start.point, end.point))
            bearings.append(bearing(start.point, end.point))
        if verbose:
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("4. Building minimum spanning tree...")
        edges = compute_mst(len(located), len(pairs), from_nodes, to_nodes, weights, bearings)
        component_map = self._build_component_map([record.id for record in located], edges)
        if verbose:
            print(f"   Accepted {len(edges)} of {len(pairs)} candidate links.")
            print(f"   Done in {time.time() - t0:.2f}s")

        headings = {record.id: record.heading for record in located}
        df = pd.DataFrame(
            [
                (edge.v1, edge.v2, edge.weight, edge.bearing, headings[edge.v1], headings[edge.v2])
                for edge in edges
            ],
            columns=RESULT_COLUMNS,
        )

        if verbose:
            print("\n--- Results Summary ---")
            print(f"   - Panoramas linked: {len(located)}")
            print(f"   - Connected components: {len(component_map)}")
            print(f"   - Total link weight: {total_weight(edges):.6f}")
            if len(component_map) > 1:
                print("   - Graph is disconnected; result is a spanning forest.")

        if output_path is not None:
            output_str = str(output_path)
            self._save_dataframe(df, output_str)
            if verbose:
                print(f"\n   Processing complete. Results saved to '{output_str}'")

        elapsed = time.time() - overall_start_time
        summary = PanoramaLinkerStats(
            total_panoramas=len(records),
            located_panoramas=len(located),
            candidate_edges=len(pairs),
            accepted_edges=len(edges),
            component_count=len(component_map),
            total_weight=total_weight(edges),
            runtime_seconds=elapsed,
        )

        if verbose:
            print(f"\n--- Panorama Linking Finished in {elapsed:.2f} seconds ---")

        return PanoramaLinkerResult(dataframe=df, edges=edges, component_map=component_map, stats=summary)

    @property
    def _required_columns(self) -> List[str]:
        return [self.config.id_column, self.config.latitude_column, self.config.longitude_column]

    def _heading_column(self, dataframe: pd.DataFrame) -> str | None:
        column = self.config.heading_column
        if column and column in dataframe.columns:
            return column
        return None

    @staticmethod
    def _check_unique_ids(records: Sequence[PanoramaRecord]) -> None:
        seen: set[str] = set()
        for record in records:
            if record.id in seen:
                raise ValueError(f"Duplicate panorama id '{record.id}'")
            seen.add(record.id)

    @staticmethod
    def _build_candidate_pairs(records: Sequence[PanoramaRecord], radius: float) -> List[Tuple[int, int]]:
        if len(records) < 2:
            return []

        coords = np.array([[record.point.x, record.point.y] for record in records], dtype=float)
        index = NearestNeighbors(radius=radius).fit(coords)
        neighborhoods = index.radius_neighbors(coords, return_distance=False)

        pairs: List[Tuple[int, int]] = []
        for left, neighbors in enumerate(neighborhoods):
            for right in sorted(int(n) for n in neighbors):
                if right > left:
                    pairs.append((left, right))
        return pairs

    @staticmethod
    def _build_component_map(nodes: Sequence[str], edges: Iterable[Edge]) -> Dict[str, List[str]]:
        components = DisjointSet(nodes)
        for edge in edges:
            components.union(edge.v1, edge.v2)

        component_map: Dict[str, List[str]] = defaultdict(list)
        for node in nodes:
            component_map[components.find(node)].append(node)
        return dict(component_map)

    @staticmethod
    def _save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
        path = Path(output_path)
        suffix = path.suffix.lower()
        if suffix == ".csv":
            dataframe.to_csv(path, index=False)
            return
        if suffix in {".xls", ".xlsx"}:
            dataframe.to_excel(path, index=False)
            return
        raise ValueError(f"Unsupported output file format: '{suffix}'")


__all__ = [
    "PanoramaLinker",
    "PanoramaLinkerConfig",
    "PanoramaLinkerResult",
    "PanoramaLinkerStats",
]
