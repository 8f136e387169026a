import pandas as pd
import pytest

from pano_links.geometry import Point, bearing
from pano_links.pipeline import PanoramaLinker, PanoramaLinkerConfig


def _panoramas():
    return pd.DataFrame(
        {
            "id": ["a", "b", "c", "d", "e", "f"],
            "latitude": ["40.0000", "40.0001", "40.0002", "40.0003", None, "41.0"],
            "longitude": ["75.0", "75.0", "75.0", "75.0", "75.0", "75.0"],
            "heading": ["0", "90", "180", "270", None, "45"],
        }
    )


def _linker(**overrides):
    config = PanoramaLinkerConfig(verbose=False, use_tqdm=False, **overrides)
    return PanoramaLinker(config)


def test_link_chain_with_isolated_panorama():
    result = _linker(max_link_distance=0.00015).link(_panoramas())

    assert list(result.dataframe.columns) == ["from_id", "to_id", "weight", "bearing", "from_heading", "to_heading"]
    assert {(e.v1, e.v2) for e in result.edges} == {("a", "b"), ("b", "c"), ("c", "d")}
    assert result.stats.total_panoramas == 6
    assert result.stats.located_panoramas == 5
    assert result.stats.candidate_edges == 3
    assert result.stats.accepted_edges == 3
    assert result.stats.component_count == 2
    assert sorted(len(members) for members in result.component_map.values()) == [1, 4]


def test_link_dense_neighbourhood_keeps_spanning_tree():
    result = _linker(max_link_distance=0.001).link(_panoramas())

    assert result.stats.candidate_edges == 6
    assert result.stats.accepted_edges == 3
    assert result.stats.total_weight == pytest.approx(0.0003)


def test_link_records_bearing_of_each_edge():
    result = _linker(max_link_distance=0.00015).link(_panoramas())
    row = result.dataframe[result.dataframe["from_id"] == "a"].iloc[0]
    expected = bearing(Point(75.0, 40.0), Point(75.0, 40.0001))
    assert row["to_id"] == "b"
    assert row["bearing"] == pytest.approx(expected)


def test_link_without_heading_column():
    frame = _panoramas().drop(columns=["heading"])
    result = _linker(max_link_distance=0.00015).link(frame)
    assert result.stats.accepted_edges == 3


def test_link_missing_column_raises():
    with pytest.raises(KeyError):
        _linker().link(pd.DataFrame({"id": ["a"]}))


def test_link_duplicate_ids_raise():
    frame = pd.DataFrame({"id": ["a", "a"], "latitude": ["1", "1"], "longitude": ["2", "2"]})
    with pytest.raises(ValueError):
        _linker().link(frame)


def test_link_too_few_panoramas():
    frame = pd.DataFrame({"id": ["a"], "latitude": ["1"], "longitude": ["2"]})
    result = _linker().link(frame)
    assert result.edges == []
    assert result.dataframe.empty
    assert result.stats.component_count == 1


def test_link_saves_csv(tmp_path):
    output = tmp_path / "links.csv"
    _linker(max_link_distance=0.00015).link(_panoramas(), output)
    saved = pd.read_csv(output)
    assert len(saved) == 3


def test_link_rejects_unknown_output_format(tmp_path):
    with pytest.raises(ValueError):
        _linker().link(_panoramas(), tmp_path / "links.json")


def test_non_positive_distance_rejected():
    with pytest.raises(ValueError):
        PanoramaLinker(PanoramaLinkerConfig(max_link_distance=0))


def test_link_carries_headings_of_both_panoramas():
    result = _linker(max_link_distance=0.00015).link(_panoramas())
    rows = result.dataframe.set_index("from_id")

    assert rows.loc["a", "from_heading"] == 0
    assert rows.loc["a", "to_heading"] == 90
    assert rows.loc["c", "from_heading"] == 180
    assert rows.loc["c", "to_heading"] == 270


def test_link_headings_differ_between_runs_with_same_positions():
    turned = _panoramas()
    turned["heading"] = ["180", "270", "0", "90", None, "45"]

    original = _linker(max_link_distance=0.00015).link(_panoramas()).dataframe
    rotated = _linker(max_link_distance=0.00015).link(turned).dataframe

    assert original[["from_id", "to_id", "weight", "bearing"]].equals(rotated[["from_id", "to_id", "weight", "bearing"]])
    assert not original["from_heading"].equals(rotated["from_heading"])


def test_link_restricted_to_bounds():
    bounds = (Point(74.9, 39.9999), Point(75.1, 40.00025))
    result = _linker(max_link_distance=0.00015, bounds=bounds).link(_panoramas())

    assert result.stats.located_panoramas == 3
    assert {(e.v1, e.v2) for e in result.edges} == {("a", "b"), ("b", "c")}
    assert result.stats.component_count == 1
