"""Story events and the tree nodes that hold them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Story:
    """One event of a story and the numbers of the events it leads to."""

    description: str = ""
    event_number: int = 0
    left_event_number: int = -1
    right_event_number: int = -1


@dataclass(eq=False)
class Node(Generic[T]):
    """A binary tree node holding a value and two optional children."""

    data: T
    left: Optional["Node[T]"] = None
    right: Optional["Node[T]"] = None

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None