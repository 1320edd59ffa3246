"""Vertex generation, measurements and triangulations for regular
polygons.

All measurement helpers are closed-form functions of the side count
and radius.  Side counts outside ``[3, 12]`` raise
:class:`~shapescene.model.errors.InvalidSideCount`.
"""

from __future__ import annotations

import math

import numpy as np

from shapescene._constants import POLYGON_NAMES
from shapescene.model import (
    Point2D,
    PolygonGeometry,
    PolygonSpec,
    PolygonVertex,
)
from shapescene.model.errors import check_dimension, check_sides


def interior_angle(sides: int) -> float:
    """Each interior angle in degrees, ``(n - 2) * 180 / n``."""
    check_sides(sides)
    return (sides - 2) * 180 / sides


def exterior_angle(sides: int) -> float:
    """Each exterior angle in degrees, ``360 / n``."""
    check_sides(sides)
    return 360 / sides


def sum_of_interior_angles(sides: int) -> int:
    check_sides(sides)
    return (sides - 2) * 180


def sum_of_exterior_angles() -> int:
    return 360


def apothem(sides: int, radius: float) -> float:
    """Distance from the centre to the midpoint of a side."""
    check_sides(sides)
    check_dimension("radius", radius)
    return radius * math.cos(math.pi / sides)


def side_length(sides: int, radius: float) -> float:
    check_sides(sides)
    check_dimension("radius", radius)
    return 2 * radius * math.sin(math.pi / sides)


def area(sides: int, radius: float) -> float:
    """Enclosed area, ``n r² sin(2π / n) / 2``."""
    check_sides(sides)
    check_dimension("radius", radius)
    return 0.5 * sides * radius * radius * math.sin(2 * math.pi / sides)


def perimeter(sides: int, radius: float) -> float:
    return sides * side_length(sides, radius)


def polygon_name(sides: int) -> str:
    check_sides(sides)
    return POLYGON_NAMES[sides]


def triangulate_from_centre(sides: int) -> tuple[tuple[int, int], ...]:
    """Split a polygon into one triangle per side around the centre.

    Returns:
        ``sides`` vertex-index pairs ``(i, i + 1)``; each pair forms a
        triangle with the centre.
    """
    check_sides(sides)
    return tuple((i, (i + 1) % sides) for i in range(sides))


def triangulate_from_vertex(
    sides: int, vertex: int = 0,
) -> tuple[tuple[tuple[int, int], ...], tuple[tuple[int, int, int], ...]]:
    """Fan-triangulate a polygon from one vertex.

    Diagonals run from *vertex* to every non-adjacent vertex, splitting
    the polygon into ``sides - 2`` triangles, which is why the interior
    angles sum to ``(sides - 2) * 180``.  A triangle has no diagonals
    and is its own single triangle.

    Args:
        sides: Number of sides.
        vertex: Index of the fan origin.

    Returns:
        Tuple of ``(diagonals, triangles)``: ``sides - 3`` index pairs
        and ``sides - 2`` index triples, both in order round the
        polygon from *vertex*.

    Raises:
        InvalidSideCount: If *sides* is out of range.
        ValueError: If *vertex* is not in ``[0, sides)``.
    """
    check_sides(sides)
    if not 0 <= vertex < sides:
        raise ValueError(
            f"vertex must be between 0 and {sides - 1}, got {vertex}"
        )
    diagonals = tuple(
        (vertex, (vertex + j) % sides) for j in range(2, sides - 1)
    )
    triangles = tuple(
        (vertex, (vertex + j) % sides, (vertex + j + 1) % sides)
        for j in range(1, sides - 1)
    )
    return diagonals, triangles


def generate(spec: PolygonSpec) -> PolygonGeometry:
    """Place a regular polygon's vertices and derive its measurements.

    Vertex *i* sits at angle ``rotation + i * 2π / n`` on the circle of
    radius ``spec.radius``, centred on the origin.

    Returns:
        A :class:`PolygonGeometry`.  Identical inputs give identical
        (deep-equal) outputs.
    """
    n, r = spec.sides, spec.radius
    start = math.radians(spec.rotation_degrees)
    angles = start + np.arange(n) * (2 * math.pi / n)
    xy = np.column_stack([np.cos(angles), np.sin(angles)]) * r
    vertices = tuple(
        PolygonVertex(index=i, point=Point2D.from_xy(xy[i]), angle=float(angles[i]))
        for i in range(n)
    )
    return PolygonGeometry(
        spec=spec,
        vertices=vertices,
        interior_angle_degrees=interior_angle(n),
        exterior_angle_degrees=exterior_angle(n),
        apothem=apothem(n, r),
        side_length=side_length(n, r),
        area=area(n, r),
        perimeter=perimeter(n, r),
        name=polygon_name(n),
    )


class PolygonGeometryOps:
    """Namespace of the pure regular-polygon functions.

    Every method is a plain function of the side count (and radius)::

        PolygonGeometryOps.interior_angle(6)  # 120.0
    """

    interior_angle = staticmethod(interior_angle)
    exterior_angle = staticmethod(exterior_angle)
    sum_of_interior_angles = staticmethod(sum_of_interior_angles)
    sum_of_exterior_angles = staticmethod(sum_of_exterior_angles)
    apothem = staticmethod(apothem)
    side_length = staticmethod(side_length)
    area = staticmethod(area)
    perimeter = staticmethod(perimeter)
    polygon_name = staticmethod(polygon_name)
    triangulate_from_centre = staticmethod(triangulate_from_centre)
    triangulate_from_vertex = staticmethod(triangulate_from_vertex)
    generate = staticmethod(generate)
