"""Geometry: cuboid projection and regular polygon generation."""

from shapescene.geometry.polygon_ops import PolygonGeometryOps, generate
from shapescene.geometry.solid_ops import SolidGeometryOps, project

__all__ = [
    "PolygonGeometryOps",
    "SolidGeometryOps",
    "generate",
    "project",
]
