"""Scene assembly: turn a shape spec and a visibility record into an
ordered list of drawable primitives."""

from shapescene.composition.labels import (
    centroid,
    compute_viewport,
    format_number,
    place_label,
    right_angle_marker,
)
from shapescene.composition.polygon_scene import assemble_polygon_scene
from shapescene.composition.solid_scene import assemble_solid_scene, canonical_edge

cuboid_scene = assemble_solid_scene
polygon_scene = assemble_polygon_scene

__all__ = [
    "assemble_polygon_scene",
    "assemble_solid_scene",
    "canonical_edge",
    "centroid",
    "compute_viewport",
    "cuboid_scene",
    "format_number",
    "place_label",
    "polygon_scene",
    "right_angle_marker",
]
