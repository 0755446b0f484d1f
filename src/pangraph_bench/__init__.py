"""
pangraph-bench - query latency benchmarks over pangenome variation graphs.

Loads a GFA graph into an in-memory handle graph and times four fixed
read-only queries against it, reporting query-only and parse-inclusive
latency.
"""

__version__ = "0.1.0"
