"""shapescene: labelled geometry diagrams for maths lessons.

shapescene turns a cuboid or regular polygon description into an
ordered list of drawing primitives (an isometric cuboid with its
hidden edges, diagonals and face areas, or a polygon with its angles,
triangulations and labels), ready for any back-to-front renderer.  A
matplotlib renderer is included.

Example usage::

    from shapescene import SolidSpec, SolidVisibility, cuboid_scene

    vis = SolidVisibility(show_space_triangle=True,
                          show_space_diagonal_label=True)
    scene = cuboid_scene(SolidSpec(width=4, depth=3, height=5), vis)
    scene.render_mpl("cuboid.svg")
"""

from shapescene.composition import (
    assemble_polygon_scene,
    assemble_solid_scene,
    cuboid_scene,
    place_label,
    polygon_scene,
)
from shapescene.construction import (
    StyleSet,
    angle_sum_polygon,
    centre_triangles_polygon,
    exterior_angles_polygon,
    interior_angles_polygon,
    labelling_cuboid,
    load_styles,
    plain_cuboid,
    pythagoras_cuboid,
    save_styles,
    surface_area_cuboid,
    volume_cuboid,
)
from shapescene.geometry import PolygonGeometryOps, SolidGeometryOps, generate, project
from shapescene.model import (
    Colour,
    CuboidStyle,
    InvalidDimension,
    InvalidSideCount,
    Point2D,
    PolygonGeometry,
    PolygonSpec,
    PolygonStyle,
    PolygonVertex,
    PolygonVisibility,
    Primitive,
    PrimitiveKind,
    PrimitiveStyle,
    Scene,
    SolidGeometry,
    SolidSpec,
    SolidVisibility,
    TriangulationMode,
    Viewport,
    normalise_colour,
    resolve_style,
)
from shapescene.rendering import render_mpl

__all__ = [
    "Colour",
    "CuboidStyle",
    "InvalidDimension",
    "InvalidSideCount",
    "Point2D",
    "PolygonGeometry",
    "PolygonGeometryOps",
    "PolygonSpec",
    "PolygonStyle",
    "PolygonVertex",
    "PolygonVisibility",
    "Primitive",
    "PrimitiveKind",
    "PrimitiveStyle",
    "Scene",
    "SolidGeometry",
    "SolidGeometryOps",
    "SolidSpec",
    "SolidVisibility",
    "StyleSet",
    "TriangulationMode",
    "Viewport",
    "angle_sum_polygon",
    "assemble_polygon_scene",
    "assemble_solid_scene",
    "centre_triangles_polygon",
    "cuboid_scene",
    "exterior_angles_polygon",
    "generate",
    "interior_angles_polygon",
    "labelling_cuboid",
    "load_styles",
    "normalise_colour",
    "place_label",
    "plain_cuboid",
    "polygon_scene",
    "project",
    "pythagoras_cuboid",
    "render_mpl",
    "resolve_style",
    "save_styles",
    "surface_area_cuboid",
    "volume_cuboid",
]
