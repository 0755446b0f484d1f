"""
Pytest fixtures for query benchmark tests.

Provides:
- The example pangenome graph shipped under benchmark/graphs
- A two-node, one-path graph
- Helpers for writing GFA text to temporary files
"""

from pathlib import Path

import pytest

from pangraph_bench.graph import HandleGraph, parse_gfa_file, parse_gfa_text

BENCHMARK_DIR = Path(__file__).parent.parent / "benchmark"
EXAMPLE_GFA = BENCHMARK_DIR / "graphs" / "tiny.gfa"
EXAMPLE_CONFIG = BENCHMARK_DIR / "bench.yaml"

TWO_NODE_GFA = "\n".join([
    "S\t1\tACGT",
    "S\t2\tGG",
    "L\t1\t+\t2\t+\t0M",
    "P\tp1\t1+,2+\t*",
])


@pytest.fixture
def example_gfa_path() -> Path:
    """Path to the example graph: 5 nodes, 5 links, 3 paths."""
    return EXAMPLE_GFA


@pytest.fixture
def example_config_path() -> Path:
    """Path to the example YAML settings."""
    return EXAMPLE_CONFIG


@pytest.fixture
def pangenome(example_gfa_path) -> HandleGraph:
    """
    Example graph loaded from benchmark/graphs/tiny.gfa.

    sample1#1: 1+ 2+ 4+
    sample2#1: 1+ 3+ 4+
    sample3#1: 1+ 2+ 4+ 2-   (revisits node 2)
    Node 5 is not on any path.
    """
    return parse_gfa_file(example_gfa_path)


@pytest.fixture
def two_node_graph() -> HandleGraph:
    """Nodes 1 and 2 joined by one edge, path p1 = 1+ 2+."""
    return parse_gfa_text(TWO_NODE_GFA)


@pytest.fixture
def write_gfa(tmp_path):
    """Write GFA text to a temporary file and return its path."""

    def _write(text: str | bytes, name: str = "graph.gfa") -> Path:
        path = tmp_path / name
        if isinstance(text, str):
            text = text.encode("utf-8")
        path.write_bytes(text)
        return path

    return _write


@pytest.fixture
def two_node_gfa_path(write_gfa) -> Path:
    """The two-node graph written to a temporary .gfa file."""
    return write_gfa(TWO_NODE_GFA)
