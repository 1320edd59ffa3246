"""Core data model for shapescene: shape specifications, derived
geometry, visibility records, styles and drawable primitives.

Everything is re-exported here so that ``from shapescene.model import
SolidSpec`` works.
"""

from shapescene.model.colour import Colour, colour_to_hex, normalise_colour
from shapescene.model.errors import InvalidDimension, InvalidSideCount
from shapescene.model.point import Point2D
from shapescene.model.polygon_spec import (
    PolygonGeometry,
    PolygonSpec,
    PolygonVertex,
)
from shapescene.model.scene import Primitive, PrimitiveKind, Scene, Viewport
from shapescene.model.solid_spec import SolidGeometry, SolidSpec
from shapescene.model.style import (
    CuboidStyle,
    PolygonStyle,
    PrimitiveStyle,
    resolve_style,
)
from shapescene.model.visibility import (
    PolygonVisibility,
    SolidVisibility,
    TriangulationMode,
)

__all__ = [
    "Colour",
    "CuboidStyle",
    "InvalidDimension",
    "InvalidSideCount",
    "Point2D",
    "PolygonGeometry",
    "PolygonSpec",
    "PolygonStyle",
    "PolygonVertex",
    "PolygonVisibility",
    "Primitive",
    "PrimitiveKind",
    "PrimitiveStyle",
    "Scene",
    "SolidGeometry",
    "SolidSpec",
    "SolidVisibility",
    "TriangulationMode",
    "Viewport",
    "colour_to_hex",
    "normalise_colour",
    "resolve_style",
]
