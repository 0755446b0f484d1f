"""
Handle-graph primitives.

A handle is an oriented reference to a node. Steps are occurrences of a
path at a handle, addressed by (path id, index) and walked through the
provider's next/previous step lookups.
"""

from enum import Enum
from typing import NamedTuple


class Orientation(Enum):
    """Strand of a handle."""

    FORWARD = "+"
    REVERSE = "-"

    @classmethod
    def parse(cls, value: str | bytes) -> "Orientation":
        """
        Parse a GFA orientation marker.

        Raises:
            ValueError: If value is not "+" or "-"
        """
        if isinstance(value, bytes):
            value = value.decode("ascii", errors="replace")
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid orientation {value!r}, expected '+' or '-'") from None


class Direction(Enum):
    """Side of a handle used for degree queries."""

    LEFT = "left"
    RIGHT = "right"


class Handle(NamedTuple):
    """Oriented reference to a node (node_id, orientation)."""

    node_id: int
    orientation: Orientation = Orientation.FORWARD

    @classmethod
    def forward(cls, node_id: int) -> "Handle":
        return cls(node_id, Orientation.FORWARD)

    @classmethod
    def reverse(cls, node_id: int) -> "Handle":
        return cls(node_id, Orientation.REVERSE)

    @property
    def is_reverse(self) -> bool:
        return self.orientation is Orientation.REVERSE

    def flip(self) -> "Handle":
        """Same node, opposite orientation."""
        if self.is_reverse:
            return Handle(self.node_id, Orientation.FORWARD)
        return Handle(self.node_id, Orientation.REVERSE)

    def __str__(self):
        return f"{self.node_id}{self.orientation.value}"


class StepRef(NamedTuple):
    """A path occurrence: index is the 0-based slot within the path."""

    path_id: int
    index: int
