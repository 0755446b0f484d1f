"""
GFA 1 loader.

Reads segment (S), link (L) and path (P) records into a HandleGraph.
Every other record type is skipped. The file is read in binary mode so
path names reach the graph as raw bytes; decoding them is left to the
queries that print them.
"""

from pathlib import Path

from .handles import Handle, Orientation
from .packed import HandleGraph


class GFAParseError(Exception):
    """Raised when a GFA file is not well-formed."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


def parse_gfa_file(path: str | Path) -> HandleGraph:
    """
    Parse a GFA file from disk.

    Args:
        path: Location of the .gfa file

    Returns:
        Loaded HandleGraph

    Raises:
        FileNotFoundError: If the file does not exist
        GFAParseError: If a record is malformed or references unknown segments
    """
    with open(path, "rb") as f:
        return parse_gfa_lines(f)


def parse_gfa_text(text: str | bytes) -> HandleGraph:
    """Parse GFA content held in memory."""
    if isinstance(text, str):
        text = text.encode("utf-8")
    return parse_gfa_lines(text.splitlines())


def parse_gfa_lines(lines) -> HandleGraph:
    """
    Build a HandleGraph from an iterable of GFA lines (bytes).

    Segments are registered first, then links and paths, so records may
    reference segments declared later in the file.
    """
    segments: list[tuple[int, int, bytes]] = []
    links: list[tuple[int, Handle, Handle]] = []
    paths: list[tuple[int, bytes, list[Handle]]] = []

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip(b"\r\n")
        if not line or line.startswith(b"#"):
            continue

        fields = line.split(b"\t")
        record_type = fields[0]

        if record_type == b"S":
            _require_fields(fields, 3, "segment", line_number)
            segments.append((line_number, _parse_id(fields[1], line_number), _parse_sequence(fields[2])))
        elif record_type == b"L":
            _require_fields(fields, 5, "link", line_number)
            left = Handle(_parse_id(fields[1], line_number), _parse_orientation(fields[2], line_number))
            right = Handle(_parse_id(fields[3], line_number), _parse_orientation(fields[4], line_number))
            links.append((line_number, left, right))
        elif record_type == b"P":
            _require_fields(fields, 3, "path", line_number)
            paths.append((line_number, fields[1], _parse_path_segments(fields[2], line_number)))

    graph = HandleGraph()

    for line_number, node_id, sequence in segments:
        if graph.has_node(node_id):
            raise GFAParseError(f"duplicate segment {node_id}", line_number)
        graph.add_node(node_id, sequence)

    for line_number, left, right in links:
        for handle in (left, right):
            if not graph.has_node(handle.node_id):
                raise GFAParseError(f"link references unknown segment {handle.node_id}", line_number)
        graph.create_edge(left, right)

    for line_number, name, handles in paths:
        for handle in handles:
            if not graph.has_node(handle.node_id):
                raise GFAParseError(
                    f"path {name!r} references unknown segment {handle.node_id}", line_number
                )
        if graph.get_path_id(name) is not None:
            raise GFAParseError(f"duplicate path {name!r}", line_number)
        graph.add_path(name, handles)

    return graph


def _require_fields(fields: list[bytes], count: int, kind: str, line_number: int) -> None:
    if len(fields) < count:
        raise GFAParseError(
            f"{kind} record has {len(fields)} fields, expected at least {count}", line_number
        )


def _parse_id(value: bytes, line_number: int) -> int:
    """Segment names must be unsigned integers to become node ids."""
    if not value.isdigit():
        raise GFAParseError(f"segment name {value!r} is not an unsigned integer", line_number)
    return int(value)


def _parse_orientation(value: bytes, line_number: int) -> Orientation:
    try:
        return Orientation.parse(value)
    except ValueError as e:
        raise GFAParseError(str(e), line_number) from e


def _parse_sequence(value: bytes) -> bytes:
    return b"" if value == b"*" else value


def _parse_path_segments(value: bytes, line_number: int) -> list[Handle]:
    """Parse "11+,12-,13+" into handles."""
    handles = []
    for item in value.split(b","):
        if len(item) < 2:
            raise GFAParseError(f"malformed path step {item!r}", line_number)
        handles.append(Handle(_parse_id(item[:-1], line_number), _parse_orientation(item[-1:], line_number)))
    return handles
