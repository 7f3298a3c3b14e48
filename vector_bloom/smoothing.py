"""Bezier handle construction shared by the petal and center generators."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from .path import Node
from .point import Point


def apply_smoothing(node: Node, origin_node: Node, value: float) -> None:
    """Set ``node``'s handles along the averaged tangent of its two edges.

    ``origin_node`` is the node preceding ``node``. The handle lengths are
    ``value`` times the distance to the neighbour on that side, so ``value``
    of zero produces a sharp corner.
    """

    target = node.successor
    tangent = Point().set(node.position).subtract(origin_node.position).normalize()
    outgoing = Point().set(target.position).subtract(node.position).normalize()
    tangent.add(outgoing).normalize()

    handle = Point().set(tangent).scale(value * target.position.distance_from(node.position))
    node.control_point2.set(node.position).add(handle)
    handle.set(tangent).scale(-value * node.position.distance_from(origin_node.position))
    node.control_point1.set(node.position).add(handle)


def make_perpendicular(point: Point) -> Point:
    """Normalize ``point`` in place and turn it a quarter turn."""

    point.normalize()
    x = point.x
    y = point.y
    point.x = -y
    point.y = x
    return point


def radial_node(
    angle: float,
    distance: float,
    position: Optional[Point] = None,
    smoothing: Optional[float] = None,
    jitter: Optional[float] = None,
    rng: Optional[np.random.Generator] = None,
) -> Node:
    """Create a node ``distance`` away from ``position`` at ``angle``.

    Angles are measured from 12 o'clock (positive y) and increase
    clockwise. A non-zero ``smoothing`` sets the handles perpendicular to
    the radius, ``smoothing`` units to either side of the node.
    """

    x = math.sin(angle) * distance
    y = math.cos(angle) * distance
    if position is not None:
        x += position.x
        y += position.y
    if jitter:
        if rng is None:
            rng = np.random.default_rng()
        x += (float(rng.random()) - 0.5) * jitter
        y += (float(rng.random()) - 0.5) * jitter

    node = Node(x, y)
    if smoothing:
        origin = position if position is not None else Point()
        perpendicular = make_perpendicular(Point().set(node.position).subtract(origin))
        node.control_point1.set(perpendicular.scale(smoothing)).add(node.position)
        node.control_point2.set(perpendicular.scale(-1).add(node.position))
    return node
