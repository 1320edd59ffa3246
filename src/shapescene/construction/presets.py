"""Ready-made spec and visibility pairs for common lessons.

Each preset returns a ``(spec, visibility)`` tuple to pass straight to
the matching scene assembler::

    spec, vis = pythagoras_cuboid(show_base_diagonal=True)
    scene = assemble_solid_scene(spec, vis)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from shapescene._constants import (
    EDGE_DIMENSIONS,
    FACE_NAMES,
    FACE_VERTICES,
    VERTEX_NAMES,
)
from shapescene.composition.solid_scene import canonical_edge
from shapescene.model import (
    PolygonSpec,
    PolygonVisibility,
    SolidSpec,
    SolidVisibility,
    TriangulationMode,
)

logger = logging.getLogger(__name__)

# Presets draw every face, hidden ones included.
_ALL_FACES = FACE_NAMES

# Faces can also be named by their corners, e.g. "ABFE" for the front.
_FACE_BY_LETTERS = {"".join(v): face for face, v in FACE_VERTICES.items()}


def _face_name(name: str | None) -> str | None:
    if name is None:
        return None
    if name.lower() in FACE_NAMES:
        return name.lower()
    face = _FACE_BY_LETTERS.get(name.upper())
    if face is None:
        logger.debug("Ignoring unknown face %r", name)
    return face


def pythagoras_cuboid(
    width: float = 4,
    depth: float = 3,
    height: float = 5,
    units: str = "cm",
    *,
    show_base_diagonal: bool = False,
    show_space_diagonal: bool = False,
    show_vertices: bool = False,
) -> tuple[SolidSpec, SolidVisibility]:
    """Cuboid for 3D Pythagoras questions.

    The diagonal flags switch on both the right triangle overlay and
    its length label.
    """
    spec = SolidSpec(width=width, depth=depth, height=height, units=units)
    vis = SolidVisibility(
        faces=_ALL_FACES,
        show_base_triangle=show_base_diagonal,
        show_space_triangle=show_space_diagonal,
        show_base_diagonal_label=show_base_diagonal,
        show_space_diagonal_label=show_space_diagonal,
        show_vertex_labels=show_vertices,
    )
    return spec, vis


def surface_area_cuboid(
    width: float = 4,
    depth: float = 3,
    height: float = 5,
    units: str = "cm",
    *,
    highlight_face: str | None = None,
    show_all_face_areas: bool = False,
    show_vertices: bool = False,
) -> tuple[SolidSpec, SolidVisibility]:
    """Cuboid for surface area questions.

    Args:
        highlight_face: A face name to highlight and label with its
            area, ``"all"`` for every face, or ``None``.
        show_all_face_areas: Switch on face labels even without a
            highlighted face.
    """
    if highlight_face is None:
        highlighted: frozenset[str] = frozenset()
    elif highlight_face == "all":
        highlighted = _ALL_FACES
    else:
        face = _face_name(highlight_face)
        highlighted = frozenset({face}) if face else frozenset()
    spec = SolidSpec(width=width, depth=depth, height=height, units=units)
    vis = SolidVisibility(
        faces=_ALL_FACES,
        highlight_faces=highlighted,
        show_vertex_labels=show_vertices,
        show_face_labels=show_all_face_areas or highlight_face is not None,
    )
    return spec, vis


def volume_cuboid(
    width: float = 4,
    depth: float = 3,
    height: float = 5,
    units: str = "cm",
    *,
    highlight_dimensions: bool = False,
    show_vertices: bool = False,
) -> tuple[SolidSpec, SolidVisibility]:
    """Cuboid for volume questions, optionally with the three
    labelled edges highlighted."""
    spec = SolidSpec(width=width, depth=depth, height=height, units=units)
    vis = SolidVisibility(
        faces=_ALL_FACES,
        highlight_edges=(
            frozenset({"width", "depth", "height"})
            if highlight_dimensions else frozenset()
        ),
        show_vertex_labels=show_vertices,
    )
    return spec, vis


def labelling_cuboid(
    width: float = 4,
    depth: float = 3,
    height: float = 5,
    units: str = "cm",
    *,
    vertex_names: Sequence[str] = VERTEX_NAMES,
    show_dimensions: bool = True,
    highlight_edge: str | None = None,
    highlight_face: str | None = None,
) -> tuple[SolidSpec, SolidVisibility]:
    """Cuboid for naming vertices, edges and faces.

    Args:
        vertex_names: Letters for corners A to H.
        show_dimensions: Label the width, depth and height edges.
        highlight_edge: Any of the twelve edge names, in either order.
            The labelled edge of the same dimension is highlighted, so
            ``"AB"`` highlights the width edge DC.
        highlight_face: A face name or its corner letters, e.g.
            ``"front"`` or ``"ABFE"``.
    """
    highlight_edges: frozenset[str] = frozenset()
    if highlight_edge is not None:
        edge = canonical_edge(highlight_edge)
        if edge is not None and edge in EDGE_DIMENSIONS:
            highlight_edges = frozenset({EDGE_DIMENSIONS[edge]})
        else:
            logger.debug("Ignoring unknown edge %r", highlight_edge)
    face = _face_name(highlight_face)
    spec = SolidSpec(width=width, depth=depth, height=height, units=units)
    vis = SolidVisibility(
        faces=_ALL_FACES,
        highlight_faces=frozenset({face}) if face else frozenset(),
        highlight_edges=highlight_edges,
        show_dimensions=show_dimensions,
        show_vertex_labels=True,
        vertex_names=tuple(vertex_names),
    )
    return spec, vis


def plain_cuboid(
    width: float = 4,
    depth: float = 3,
    height: float = 5,
    units: str = "cm",
    *,
    show_dimensions: bool = True,
) -> tuple[SolidSpec, SolidVisibility]:
    spec = SolidSpec(width=width, depth=depth, height=height, units=units)
    vis = SolidVisibility(faces=_ALL_FACES, show_dimensions=show_dimensions)
    return spec, vis


def interior_angles_polygon(
    sides: int = 6,
    radius: float = 100.0,
    *,
    angle_at: int | None = 0,
    show_vertex_labels: bool = False,
) -> tuple[PolygonSpec, PolygonVisibility]:
    """Polygon with every interior angle arced and one shaded and
    labelled in degrees."""
    spec = PolygonSpec(sides=sides, radius=radius)
    vis = PolygonVisibility(
        show_interior_angles=True,
        interior_angle_at=angle_at,
        show_interior_angle_label=angle_at is not None,
        show_vertex_labels=show_vertex_labels,
    )
    return spec, vis


def exterior_angles_polygon(
    sides: int = 6,
    radius: float = 100.0,
    *,
    angle_at: int | None = None,
    show_labels: bool = True,
) -> tuple[PolygonSpec, PolygonVisibility]:
    """Polygon with every side extended and its exterior angles
    marked.  They sum to 360°."""
    spec = PolygonSpec(sides=sides, radius=radius)
    vis = PolygonVisibility(
        show_exterior_angles=True,
        exterior_angle_at=angle_at,
        show_exterior_angle_label=show_labels,
    )
    return spec, vis


def angle_sum_polygon(
    sides: int = 6,
    radius: float = 100.0,
    *,
    from_vertex: int = 0,
) -> tuple[PolygonSpec, PolygonVisibility]:
    """Polygon split into ``sides - 2`` triangles by diagonals from one
    vertex, for deriving the interior angle sum."""
    spec = PolygonSpec(sides=sides, radius=radius)
    vis = PolygonVisibility(
        triangulation=TriangulationMode.FROM_VERTEX,
        triangle_vertex=from_vertex,
        highlight_angles=frozenset({from_vertex}),
        show_vertex_labels=True,
    )
    return spec, vis


def centre_triangles_polygon(
    sides: int = 6,
    radius: float = 100.0,
    *,
    show_apothem: bool = False,
) -> tuple[PolygonSpec, PolygonVisibility]:
    """Polygon split into ``sides`` congruent triangles meeting at the
    centre, for area and angle-at-centre questions."""
    spec = PolygonSpec(sides=sides, radius=radius)
    vis = PolygonVisibility(
        triangulation=TriangulationMode.FROM_CENTRE,
        show_centre=True,
        show_centre_label=True,
        show_apothem=show_apothem,
    )
    return spec, vis
