"""
Graph provider for the query benchmarks.

This package provides the read-only handle-graph the queries run against:
- handles: Handle, Orientation, Direction and StepRef primitives
- packed: HandleGraph, the NetworkX-backed in-memory store
- gfa: loader turning GFA 1 files into a HandleGraph
"""

from .gfa import GFAParseError, parse_gfa_file, parse_gfa_lines, parse_gfa_text
from .handles import Direction, Handle, Orientation, StepRef
from .packed import HandleGraph

__all__ = [
    # Primitives
    "Direction",
    "Handle",
    "Orientation",
    "StepRef",
    # Storage
    "HandleGraph",
    # Loading
    "GFAParseError",
    "parse_gfa_file",
    "parse_gfa_lines",
    "parse_gfa_text",
]
