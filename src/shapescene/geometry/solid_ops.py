"""Isometric projection and derived measurements for cuboids.

The measurement helpers take only the three edge lengths, so question
generators can compute answers that agree with a diagram without
building one.
"""

from __future__ import annotations

import math

import numpy as np

from shapescene._constants import (
    CORNER_FRACTIONS,
    DEFAULT_ISO_SCALE,
    ISO_ANGLE,
    VERTEX_NAMES,
)
from shapescene.model import Point2D, SolidGeometry, SolidSpec
from shapescene.model.errors import check_dimension

# Rows map (x, y, z) to unscaled screen (isoX, isoY).
_ISO_MATRIX = np.array([
    [math.cos(ISO_ANGLE), math.cos(ISO_ANGLE), 0.0],
    [-math.sin(ISO_ANGLE), math.sin(ISO_ANGLE), -1.0],
])

_CORNERS = np.array([CORNER_FRACTIONS[v] for v in VERTEX_NAMES], dtype=float)


def base_diagonal(width: float, depth: float) -> float:
    """Length of the diagonal across the bottom face."""
    return math.sqrt(width * width + depth * depth)


def space_diagonal(width: float, depth: float, height: float) -> float:
    """Length of the diagonal through the interior, A to G."""
    return math.sqrt(width * width + depth * depth + height * height)


def face_areas(width: float, depth: float, height: float) -> dict[str, float]:
    """Area of each of the six faces, keyed by face name."""
    return {
        "top": width * depth,
        "bottom": width * depth,
        "front": width * height,
        "back": width * height,
        "left": depth * height,
        "right": depth * height,
    }


def surface_area(width: float, depth: float, height: float) -> float:
    return 2 * (width * depth + width * height + depth * height)


def volume(width: float, depth: float, height: float) -> float:
    return width * depth * height


def isometric(
    x: float, y: float, z: float, scale: float = DEFAULT_ISO_SCALE,
) -> Point2D:
    """Project a single 3D point to isometric screen coordinates.

    ``isoX = (x + y) cos(30°) s`` and ``isoY = ((y - x) sin(30°) - z) s``,
    with y growing downwards on screen so that +z points up.
    """
    xy = _ISO_MATRIX @ np.array([x, y, z], dtype=float) * scale
    return Point2D.from_xy(xy)


def project(spec: SolidSpec, scale: float = DEFAULT_ISO_SCALE) -> SolidGeometry:
    """Project a cuboid's eight corners and derive its measurements.

    Corner A sits at the origin; B, C and D follow along the width then
    the depth, and E to H sit directly above A to D.

    Args:
        spec: The cuboid dimensions.
        scale: Display units per model unit.  Affects the projected
            coordinates only.

    Returns:
        A :class:`SolidGeometry`.  Identical inputs give identical
        (deep-equal) outputs.

    Raises:
        InvalidDimension: If *scale* is not a finite positive number.
    """
    check_dimension("scale", scale)
    w, d, h = spec.width, spec.depth, spec.height
    corners_3d = _CORNERS * np.array([w, d, h], dtype=float)  # (8, 3)
    corners_2d = corners_3d @ _ISO_MATRIX.T * scale  # (8, 2)
    vertices = {
        name: Point2D.from_xy(xy)
        for name, xy in zip(VERTEX_NAMES, corners_2d)
    }
    return SolidGeometry(
        spec=spec,
        vertices=vertices,
        scale=scale,
        base_diagonal_length=base_diagonal(w, d),
        space_diagonal_length=space_diagonal(w, d, h),
        face_areas=face_areas(w, d, h),
        total_surface_area=surface_area(w, d, h),
        volume=volume(w, d, h),
    )


class SolidGeometryOps:
    """Namespace of the pure cuboid measurement functions.

    Every method is a plain function of the edge lengths::

        SolidGeometryOps.space_diagonal(4, 3, 5)  # 7.0710...
    """

    base_diagonal = staticmethod(base_diagonal)
    space_diagonal = staticmethod(space_diagonal)
    face_areas = staticmethod(face_areas)
    surface_area = staticmethod(surface_area)
    volume = staticmethod(volume)
    isometric = staticmethod(isometric)
    project = staticmethod(project)
