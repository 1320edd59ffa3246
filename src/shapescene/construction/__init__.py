"""Scene construction: lesson presets and style files."""

from shapescene.construction.presets import (
    angle_sum_polygon,
    centre_triangles_polygon,
    exterior_angles_polygon,
    interior_angles_polygon,
    labelling_cuboid,
    plain_cuboid,
    pythagoras_cuboid,
    surface_area_cuboid,
    volume_cuboid,
)
from shapescene.construction.styles import StyleSet, load_styles, save_styles

__all__ = [
    "StyleSet",
    "angle_sum_polygon",
    "centre_triangles_polygon",
    "exterior_angles_polygon",
    "interior_angles_polygon",
    "labelling_cuboid",
    "load_styles",
    "plain_cuboid",
    "pythagoras_cuboid",
    "save_styles",
    "surface_area_cuboid",
    "volume_cuboid",
]
