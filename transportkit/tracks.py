"""Recording of particle step segments and their conversion to a VTK line mesh."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from os import PathLike
from pathlib import Path

Point = tuple[float, float, float]
Segment = tuple[Point, Point]

_VTK_HEADER = (
    "# vtk DataFile Version 2.0",
    "Unstructured Grid by M++",
    "ASCII",
    "DATASET UNSTRUCTURED_GRID",
)
_VTK_LINE = 3


def _point(values: Sequence[float]) -> Point:
    if len(values) != 3:
        raise ValueError(f"a point needs 3 coordinates, got {len(values)}")
    x, y, z = (float(v) for v in values)
    return x, y, z


def _format_point(point: Point) -> str:
    return " ".join(f"{value:g}" for value in point)


def format_segment(start: Sequence[float], end: Sequence[float]) -> str:
    """Return the text line for a step from ``start`` to ``end`` (no newline)."""
    return f"{_format_point(_point(start))} {_format_point(_point(end))}"


def append_segment(
    path: str | PathLike[str], start: Sequence[float], end: Sequence[float]
) -> None:
    """Append one step segment as a line to the file at ``path``."""
    line = format_segment(start, end)
    with Path(path).open("a", encoding="utf-8", newline="\n") as stream:
        stream.write(line + "\n")


def _parse_segment(line: str, number: int) -> Segment:
    fields = line.split()
    if len(fields) < 6:
        raise ValueError(f"line {number}: expected 6 numbers, got {len(fields)}")
    try:
        values = [float(field) for field in fields[:6]]
    except ValueError:
        raise ValueError(f"line {number}: not a number in {line.strip()!r}") from None
    return _point(values[:3]), _point(values[3:])


def read_segments(path: str | PathLike[str]) -> list[Segment]:
    """Read step segments, one per non-blank line of six coordinates."""
    with Path(path).open(encoding="utf-8") as stream:
        return [
            _parse_segment(line, number)
            for number, line in enumerate(stream, start=1)
            if line.strip()
        ]


def segments_to_vtk(segments: Iterable[Segment]) -> str:
    """Render segments as a legacy ASCII VTK unstructured grid of line cells."""
    items = [(_point(start), _point(end)) for start, end in segments]
    count = len(items)
    lines = list(_VTK_HEADER)
    lines.append(f"POINTS {2 * count} float")
    for start, end in items:
        lines.append(_format_point(start))
        lines.append(_format_point(end))
    lines.append(f"CELLS {count} {3 * count}")
    lines.extend(f"2 {2 * i} {2 * i + 1}" for i in range(count))
    lines.append(f"CELL_TYPES {count}")
    lines.extend(str(_VTK_LINE) for _ in range(count))
    return "\n".join(lines) + "\n"


def convert_segments(
    source: str | PathLike[str], target: str | PathLike[str]
) -> int:
    """Convert a segment list file to a VTK file; return the number of segments."""
    segments = read_segments(source)
    Path(target).write_text(segments_to_vtk(segments), encoding="utf-8", newline="\n")
    return len(segments)