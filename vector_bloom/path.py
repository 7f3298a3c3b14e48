"""Closed cubic-Bezier paths built from anchor nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .point import Point

Coord = Tuple[float, float]


class Node:
    """Anchor point of a :class:`Path` together with its two Bezier handles.

    ``curve_to`` is filled in by the owning path and refers to the next node
    in its ring.
    """

    __slots__ = ("position", "control_point1", "control_point2", "curve_to")

    def __init__(self, x: float, y: float) -> None:
        self.position = Point(x, y)
        self.control_point1 = Point(x, y)
        self.control_point2 = Point(x, y)
        self.curve_to: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node(x={self.position.x!r}, y={self.position.y!r})"

    @property
    def successor(self) -> "Node":
        if self.curve_to is None:
            raise RuntimeError("node is not attached to a path")
        return self.curve_to


@dataclass(frozen=True)
class BezierSegment:
    """One cubic segment ending at ``end``."""

    control1: Coord
    control2: Coord
    end: Coord


class Path:
    """Closed ring of nodes compiled into cubic Bezier segments."""

    def __init__(self, nodes: Sequence[Node]) -> None:
        if len(nodes) < 2:
            raise ValueError(f"a path needs at least 2 nodes, got {len(nodes)}")
        self.nodes: List[Node] = list(nodes)
        count = len(self.nodes)
        for index, node in enumerate(self.nodes):
            node.curve_to = self.nodes[(index + 1) % count]
        self.start: Coord = (0.0, 0.0)
        self.segments: List[BezierSegment] = []
        self.compile()

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"Path(nodes={len(self.nodes)})"

    def compile(self) -> List[BezierSegment]:
        """Rebuild :attr:`start` and :attr:`segments` from the current nodes.

        Must be called again after any node position or handle changes.
        """

        self.start = self.nodes[0].position.as_tuple()
        segments: List[BezierSegment] = []
        for node in self.nodes:
            target = node.successor
            segments.append(
                BezierSegment(
                    control1=node.control_point2.as_tuple(),
                    control2=target.control_point1.as_tuple(),
                    end=target.position.as_tuple(),
                )
            )
        self.segments = segments
        return segments

    def positions(self) -> List[Coord]:
        return [node.position.as_tuple() for node in self.nodes]
