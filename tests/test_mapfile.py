import io

import pytest

from raycub.mapfile import (
    MapError,
    MapLayout,
    check_forbidden,
    check_map_path,
    extract_map,
    report_error,
    scan_map,
)

GRID = ["111", "1N01", "111"]


def test_report_error_format_and_status():
    out = io.StringIO()
    assert report_error("Map not found", out) == 1
    assert out.getvalue() == "Error\nMap not found\n"


def test_check_forbidden_accepts_valid_line():
    assert check_forbidden("10 NSWE") is None


def test_check_forbidden_rejects_other_characters():
    with pytest.raises(MapError) as info:
        check_forbidden("1X0")
    assert info.value.message == "Found extra element or forbidden character"


def test_scan_map_measures_grid():
    layout = scan_map(["", ""] + GRID)
    assert layout == MapLayout(
        width=max(len(row) for row in GRID), height=len(GRID), leading_blank=2
    )


def test_scan_map_blank_inside_grid():
    with pytest.raises(MapError) as info:
        scan_map(["111", "", "111"])
    assert info.value.message == "Empty line on map"


def test_scan_map_blank_after_grid():
    with pytest.raises(MapError) as info:
        scan_map(GRID + [""])
    assert str(info.value) == "Empty line on map"


def test_scan_map_without_grid():
    with pytest.raises(MapError) as info:
        scan_map(["", ""])
    assert info.value.message == "Map not found"


def test_scan_map_forbidden_character():
    with pytest.raises(MapError) as info:
        scan_map(["111", "1Q1"])
    assert info.value.message == "Found extra element or forbidden character"


def test_extract_map_round_trip():
    elements = ["NO ./north.xpm", "F 1,2,3"]
    lines = elements + ["", ""] + GRID
    layout = scan_map(lines[len(elements):])
    rows = extract_map(lines, len(elements) + layout.leading_blank, layout.height)
    assert rows == GRID


def test_extract_map_accepts_iterator():
    rows = extract_map(iter(["a", "b"] + GRID), 2, len(GRID))
    assert rows == GRID


def test_extract_map_rejects_negative():
    with pytest.raises(ValueError):
        extract_map(GRID, -1, 1)


def test_check_map_path_missing(tmp_path):
    with pytest.raises(MapError) as info:
        check_map_path(tmp_path / "missing.cub")
    assert info.value.message == "Map can't be accessed"


def test_check_map_path_wrong_extension(tmp_path):
    target = tmp_path / "scene.txt"
    target.write_text("111\n")
    with pytest.raises(MapError) as info:
        check_map_path(target)
    assert info.value.message == "Map needs to have .cub file name extension"


def test_check_map_path_valid(tmp_path):
    target = tmp_path / "scene.cub"
    target.write_text("111\n")
    assert check_map_path(str(target)) == target