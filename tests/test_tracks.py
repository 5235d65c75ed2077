import pytest

from transportkit.tracks import (
    append_segment,
    convert_segments,
    format_segment,
    read_segments,
    segments_to_vtk,
)

HEADER = [
    "# vtk DataFile Version 2.0",
    "Unstructured Grid by M++",
    "ASCII",
    "DATASET UNSTRUCTURED_GRID",
]


def test_format_segment_uses_compact_numbers():
    assert format_segment((0, 20, -70), (1.5, 2, 3)) == "0 20 -70 1.5 2 3"


def test_format_segment_rejects_wrong_dimension():
    with pytest.raises(ValueError):
        format_segment((0, 1), (1, 2, 3))


def test_append_and_read_round_trip(tmp_path):
    path = tmp_path / "steps.txt"
    first = ((0.0, 1.0, 2.0), (3.0, 4.0, 5.0))
    second = ((-1.5, 0.25, 7.0), (8.0, -9.0, 10.5))
    append_segment(path, *first)
    append_segment(path, *second)
    assert read_segments(path) == [first, second]


def test_append_keeps_existing_content(tmp_path):
    path = tmp_path / "steps.txt"
    append_segment(path, (1, 2, 3), (4, 5, 6))
    append_segment(path, (7, 8, 9), (10, 11, 12))
    assert len(path.read_text().splitlines()) == 2


def test_read_segments_rejects_short_line(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1 2 3 4 5\n")
    with pytest.raises(ValueError):
        read_segments(path)


def test_read_segments_rejects_non_numeric(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1 2 3 4 five 6\n")
    with pytest.raises(ValueError):
        read_segments(path)


def test_vtk_empty():
    lines = segments_to_vtk([]).splitlines()
    assert lines == HEADER + ["POINTS 0 float", "CELLS 0 0", "CELL_TYPES 0"]


def test_vtk_structure():
    segments = [((0, 0, 0), (1, 0, 0)), ((1, 0, 0), (1, 2, 0))]
    lines = segments_to_vtk(segments).splitlines()
    assert lines[:4] == HEADER
    assert lines[4] == "POINTS 4 float"
    assert lines[5:9] == ["0 0 0", "1 0 0", "1 0 0", "1 2 0"]
    assert lines[9] == "CELLS 2 6"
    assert lines[10:12] == ["2 0 1", "2 2 3"]
    assert lines[12] == "CELL_TYPES 2"
    assert lines[13:] == ["3", "3"]


def test_vtk_ends_with_newline():
    assert segments_to_vtk([((0, 0, 0), (1, 1, 1))]).endswith("\n")


def test_convert_segments(tmp_path):
    source = tmp_path / "output.vtk"
    target = tmp_path / "output2.vtk"
    segments = [((0.0, 1.0, 2.0), (3.0, 4.0, 5.0)), ((5.0, 4.0, 3.0), (2.0, 1.0, 0.0))]
    for start, end in segments:
        append_segment(source, start, end)
    assert convert_segments(source, target) == 2
    assert target.read_text() == segments_to_vtk(segments)


def test_convert_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        convert_segments(tmp_path / "missing.txt", tmp_path / "out.vtk")