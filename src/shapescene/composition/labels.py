"""Label placement and marker geometry shared by the scene assemblers.

Every helper is a pure function of its inputs.  There is no collision
avoidance: labels on degenerate geometry may overlap.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np

from shapescene.model import Point2D, Primitive, Viewport

_TWO_PI = 2 * math.pi


def midpoint(p1: Point2D, p2: Point2D) -> Point2D:
    return Point2D((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)


def centroid(points: Sequence[Point2D]) -> Point2D:
    """Arithmetic mean of *points*.

    Raises:
        ValueError: If *points* is empty.
    """
    if not points:
        raise ValueError("centroid needs at least one point")
    n = len(points)
    return Point2D(
        sum(p.x for p in points) / n,
        sum(p.y for p in points) / n,
    )


def unit_normal(p1: Point2D, p2: Point2D) -> Point2D:
    """Unit normal ``(-dy, dx) / len`` of the segment p1 to p2.

    A zero-length segment has no normal; the zero vector is returned.
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    length = math.hypot(dx, dy)
    if length < 1e-12:
        return Point2D(0.0, 0.0)
    return Point2D(-dy / length, dx / length)


def place_label(
    p1: Point2D | Sequence[Point2D],
    p2: Point2D | None = None,
    offset: float = 0.0,
) -> Point2D:
    """Return an anchor position for a label.

    Called with two points, returns the midpoint of the segment displaced
    by *offset* along its normal (see :func:`unit_normal`); the sign of
    *offset* picks the side.  Called with a single sequence of points,
    returns their centroid, for face and area labels.
    """
    if p2 is None:
        if isinstance(p1, Point2D):
            return p1
        return centroid(p1)
    if not isinstance(p1, Point2D):
        raise TypeError("place_label(p1, p2, offset) needs two points")
    return midpoint(p1, p2) + unit_normal(p1, p2) * offset


def outward_offset(
    p1: Point2D, p2: Point2D, centre: Point2D, offset: float,
) -> Point2D:
    """Midpoint of p1-p2 pushed *offset* away from *centre*."""
    mid = midpoint(p1, p2)
    normal = unit_normal(p1, p2)
    if (mid.x - centre.x) * normal.x + (mid.y - centre.y) * normal.y < 0:
        normal = normal * -1.0
    return mid + normal * offset


def polar(origin: Point2D, angle: float, distance: float) -> Point2D:
    return Point2D(
        origin.x + math.cos(angle) * distance,
        origin.y + math.sin(angle) * distance,
    )


def direction(origin: Point2D, target: Point2D) -> float:
    """Screen angle (radians) of the ray from *origin* to *target*."""
    return math.atan2(target.y - origin.y, target.x - origin.x)


def radial_offset(point: Point2D, centre: Point2D, distance: float) -> Point2D:
    """Push *point* *distance* further from *centre* along their ray."""
    return polar(point, direction(centre, point), distance)


def right_angle_marker(
    vertex: Point2D, arm1: Point2D, arm2: Point2D, size: float,
) -> tuple[Point2D, Point2D, Point2D]:
    """Three-point open path drawing the square corner at *vertex*.

    The marker runs *size* along the arm towards *arm1*, across to the
    square's far corner, then back to the arm towards *arm2*.
    """
    u1 = _unit(arm1 - vertex) * size
    u2 = _unit(arm2 - vertex) * size
    return (vertex + u1, vertex + u1 + u2, vertex + u2)


def _unit(v: Point2D) -> Point2D:
    length = math.hypot(v.x, v.y)
    if length < 1e-12:
        return Point2D(0.0, 0.0)
    return Point2D(v.x / length, v.y / length)


def interior_arc(
    vertex: Point2D, prev: Point2D, nxt: Point2D,
) -> tuple[float, float]:
    """Start angle and sweep of the interior angle arc at *vertex*.

    The arc runs from the direction of the next vertex to that of the
    previous one.  If that sweep exceeds π the ends are swapped, so
    the arc always spans the angle of at most 180° between the two
    edges, whichever way the polygon is wound.

    Returns:
        ``(start, sweep)`` in radians with ``0 <= sweep <= π``.
    """
    start = direction(vertex, nxt)
    end = direction(vertex, prev)
    if (end - start) % _TWO_PI > math.pi:
        start, end = end, start
    return start, (end - start) % _TWO_PI


def exterior_arc(
    vertex: Point2D, prev: Point2D, nxt: Point2D,
) -> tuple[float, float]:
    """Start angle and signed sweep of the exterior angle at *vertex*.

    The incoming edge (prev to vertex) is extended past *vertex*; the
    arc turns from that extension to the outgoing edge along the
    shorter way.  Its magnitude is the exterior angle for clockwise and
    counter-clockwise windings alike; only the sign differs.

    Returns:
        ``(start, sweep)`` in radians with ``-π <= sweep < π``.
    """
    start = direction(prev, vertex)
    to_next = direction(vertex, nxt)
    sweep = (to_next - start + math.pi) % _TWO_PI - math.pi
    return start, sweep


def arc_points(
    centre: Point2D,
    radius: float,
    start: float,
    sweep: float,
    segments: int,
) -> tuple[Point2D, ...]:
    """Sample a circular arc as ``segments + 1`` points."""
    theta = start + np.linspace(0.0, sweep, segments + 1)
    xs = centre.x + np.cos(theta) * radius
    ys = centre.y + np.sin(theta) * radius
    return tuple(Point2D(float(x), float(y)) for x, y in zip(xs, ys))


def circle_points(
    centre: Point2D, radius: float, segments: int,
) -> tuple[Point2D, ...]:
    """Sample a closed circle as *segments* points (no repeated end)."""
    return arc_points(centre, radius, 0.0, _TWO_PI, segments)[:-1]


def format_number(value: float, places: int = 2) -> str:
    """Round to *places* decimals and drop trailing zeros.

    ``5.0 -> "5"``, ``7.0710678 -> "7.07"``, ``2.5 -> "2.5"``.
    """
    rounded = round(float(value), places)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.{places}f}".rstrip("0").rstrip(".")


def compute_viewport(
    primitives: Iterable[Primitive], padding: float,
) -> Viewport:
    """Bounding box of every primitive's points, grown by *padding*.

    Text contributes its anchor only.  An empty scene gives a box of
    side ``2 * padding`` centred on the origin.
    """
    coords = [
        (p.x, p.y) for prim in primitives for p in prim.coordinates()
    ]
    if not coords:
        return Viewport(-padding, -padding, 2 * padding, 2 * padding)
    xy = np.asarray(coords, dtype=float)
    lo = xy.min(axis=0) - padding
    hi = xy.max(axis=0) + padding
    return Viewport(
        min_x=float(lo[0]),
        min_y=float(lo[1]),
        width=float(hi[0] - lo[0]),
        height=float(hi[1] - lo[1]),
    )
