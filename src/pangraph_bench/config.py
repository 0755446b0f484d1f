"""
Benchmark configuration.

Settings come from an optional YAML file and are overridden by
command-line flags. Only the node lookup query needs a target; the
other settings tune the worker pool and the empty-target policy.
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from .graph import Handle, Orientation


class ConfigError(Exception):
    """Raised when configuration values are missing or invalid."""

    pass


@dataclass(frozen=True)
class BenchConfig:
    """Configuration for a benchmark run."""

    target_node: int | None = None  # Node looked up by path_lengths_through_node
    target_orientation: Orientation = Orientation.FORWARD
    workers: int | None = None  # None = handlers.DEFAULT_WORKERS
    allow_empty_target: bool = False  # Treat a target without steps as an empty result

    def target_handle(self) -> Handle:
        """
        Handle for the node lookup query.

        Raises:
            ConfigError: If no target node is configured
        """
        if self.target_node is None:
            raise ConfigError(
                "path_lengths_through_node needs a target node "
                "(--target-node or target_node in the config file)"
            )
        return Handle(self.target_node, self.target_orientation)

    def with_overrides(self, **overrides: Any) -> "BenchConfig":
        """Return a copy with every non-None override applied and validated."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return _validated(replace(self, **_coerce(values)))


def load_config(path: str | Path) -> BenchConfig:
    """
    Load a BenchConfig from a YAML file.

    Example file:
        target_node: 51273
        target_orientation: "+"
        workers: 8
        allow_empty_target: false

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the file has unknown keys or invalid values
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return BenchConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(BenchConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(map(str, unknown))}")

    return _validated(BenchConfig(**_coerce(data)))


def _coerce(values: dict[str, Any]) -> dict[str, Any]:
    values = dict(values)
    orientation = values.get("target_orientation")
    if orientation is not None and not isinstance(orientation, Orientation):
        orientation = str(orientation)
        if orientation.upper() in Orientation.__members__:
            values["target_orientation"] = Orientation[orientation.upper()]
            return values
        try:
            values["target_orientation"] = Orientation.parse(orientation)
        except ValueError as e:
            raise ConfigError(str(e)) from e
    return values


def _validated(config: BenchConfig) -> BenchConfig:
    # bool is an int subclass; reject it explicitly
    if config.target_node is not None:
        if isinstance(config.target_node, bool) or not isinstance(config.target_node, int):
            raise ConfigError(f"target_node must be an integer, got {config.target_node!r}")
        if config.target_node < 0:
            raise ConfigError(f"target_node must be unsigned, got {config.target_node}")
    if config.workers is not None:
        if isinstance(config.workers, bool) or not isinstance(config.workers, int):
            raise ConfigError(f"workers must be an integer, got {config.workers!r}")
        if config.workers < 1:
            raise ConfigError(f"workers must be positive, got {config.workers}")
    if not isinstance(config.allow_empty_target, bool):
        raise ConfigError(
            f"allow_empty_target must be true or false, got {config.allow_empty_target!r}"
        )
    return config
