"""Declarative show/highlight records consumed by the scene assemblers.

Nothing here is derived from geometry.  Names and indices are only
checked against a concrete shape at assembly time, where unknown ones
are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

from shapescene._constants import VERTEX_NAMES
from shapescene.model._util import _freeze
from shapescene.model.colour import Colour


class TriangulationMode(StrEnum):
    """How a polygon is split into triangles.

    Attributes:
        NONE: No triangulation overlay.
        FROM_CENTRE: One triangle per side, each sharing the centre.
        FROM_VERTEX: A fan of ``n - 2`` triangles from one vertex,
            drawn with its ``n - 3`` diagonals.
    """

    NONE = "none"
    FROM_CENTRE = "from_centre"
    FROM_VERTEX = "from_vertex"


@dataclass(frozen=True)
class SolidVisibility:
    """What to draw, highlight and label on a cuboid.

    Set-valued fields accept any iterable of names (or a single name)
    and are stored as ``frozenset``.

    Attributes:
        faces: Faces to draw.  Bottom and back are hidden from the
            fixed isometric viewpoint and are off by default.
        highlight_faces: Faces drawn in the highlight style.
        highlight_edges: Visible edges drawn in the highlight style,
            by name (``"AD"``, ``"CD"``) or by the dimension they are
            labelled with (``"width"``, ``"depth"``, ``"height"``).
        highlight_vertices: Corners marked with a dot and a
            highlighted label.
        show_base_triangle: Overlay triangle ABC with the base
            diagonal AC and a right angle at B.
        show_space_triangle: Overlay triangle ACG with the space
            diagonal AG and a right angle at C.
        show_dimensions: Label the width, depth and height edges.
        show_base_diagonal_label: Label AC with its length.  Only
            drawn with the base triangle.
        show_space_diagonal_label: Label AG with its length.  Only
            drawn with the space triangle.
        show_vertex_labels: Letter each corner.
        show_face_labels: Print the area on each highlighted face that
            is also drawn.
        vertex_names: Letters for corners A to H, in order.  Missing
            or empty entries fall back to the default letter.
        edge_labels: Text overrides keyed by edge name or dimension.
            Keys naming an edge without a dimension label get their
            own label.
        face_labels: Text overrides for face area labels.
        vertex_label_colour: One colour for every vertex label, in
            place of the bottom/top colour scheme.
    """

    faces: frozenset[str] = frozenset({"left", "top", "front", "right"})
    highlight_faces: frozenset[str] = frozenset()
    highlight_edges: frozenset[str] = frozenset()
    highlight_vertices: frozenset[str] = frozenset()
    show_base_triangle: bool = False
    show_space_triangle: bool = False
    show_dimensions: bool = True
    show_base_diagonal_label: bool = False
    show_space_diagonal_label: bool = False
    show_vertex_labels: bool = False
    show_face_labels: bool = False
    vertex_names: tuple[str, ...] = VERTEX_NAMES
    edge_labels: Mapping[str, str] = field(default_factory=dict)
    face_labels: Mapping[str, str] = field(default_factory=dict)
    vertex_label_colour: Colour | None = None

    def __post_init__(self) -> None:
        _freeze(self, "faces", self.faces)
        _freeze(self, "highlight_faces", self.highlight_faces)
        _freeze(self, "highlight_edges", self.highlight_edges)
        _freeze(self, "highlight_vertices", self.highlight_vertices)
        object.__setattr__(self, "vertex_names", tuple(self.vertex_names))
        object.__setattr__(
            self, "edge_labels", MappingProxyType(dict(self.edge_labels)),
        )
        object.__setattr__(
            self, "face_labels", MappingProxyType(dict(self.face_labels)),
        )

    def vertex_label(self, index: int) -> str:
        """Return the display letter for corner *index* (0 = A)."""
        if index < len(self.vertex_names) and self.vertex_names[index]:
            return self.vertex_names[index]
        return VERTEX_NAMES[index]


@dataclass(frozen=True)
class PolygonVisibility:
    """What to draw, highlight and label on a regular polygon.

    Attributes:
        show_fill: Fill the polygon body.  Ignored under
            :attr:`TriangulationMode.FROM_CENTRE`, whose triangles
            provide the fill.
        show_interior_angles: Arc every interior angle.
        show_exterior_angles: Extend every side past its end vertex
            and arc every exterior angle.
        interior_angle_at: Vertex index for a single shaded interior
            angle, or ``None``.
        exterior_angle_at: Vertex index for a single shaded exterior
            angle, or ``None``.
        show_centre: Mark the centre point.
        show_radii: Dashed lines from the centre to every vertex.
            Ignored under centre triangulation.
        show_apothem: Dashed line from the centre to the midpoint of
            side 0.
        triangulation: Triangulation overlay mode.
        triangle_vertex: Fan origin for
            :attr:`TriangulationMode.FROM_VERTEX`.
        highlight_angles: Vertex indices whose angle arcs use the
            highlight style and which get a highlight dot.
        highlight_sides: Side indices (side *i* joins vertex *i* to
            *i + 1*) drawn in the highlight style.
        show_vertex_labels: Letter each vertex.
        show_side_labels: Label each side with :attr:`side_labels`.
        show_interior_angle_label: Print the interior angle in degrees
            next to interior arcs.
        show_exterior_angle_label: Print the exterior angle in degrees
            next to exterior arcs.
        show_centre_label: Letter the centre ``"O"``.
        vertex_names: Letters for the vertices.  Missing or empty
            entries fall back to ``A``, ``B``, ``C``, ...
        side_labels: A single label for every side, or one per side.
        vertex_label_colour: Colour for every vertex label.
    """

    show_fill: bool = True
    show_interior_angles: bool = False
    show_exterior_angles: bool = False
    interior_angle_at: int | None = None
    exterior_angle_at: int | None = None
    show_centre: bool = False
    show_radii: bool = False
    show_apothem: bool = False
    triangulation: TriangulationMode = TriangulationMode.NONE
    triangle_vertex: int = 0
    highlight_angles: frozenset[int] = frozenset()
    highlight_sides: frozenset[int] = frozenset()
    show_vertex_labels: bool = False
    show_side_labels: bool = False
    show_interior_angle_label: bool = False
    show_exterior_angle_label: bool = False
    show_centre_label: bool = False
    vertex_names: tuple[str, ...] = ()
    side_labels: str | tuple[str, ...] = ""
    vertex_label_colour: Colour | None = None

    def __post_init__(self) -> None:
        if isinstance(self.triangulation, str):
            object.__setattr__(
                self, "triangulation", TriangulationMode(self.triangulation),
            )
        _freeze(self, "highlight_angles", self.highlight_angles)
        _freeze(self, "highlight_sides", self.highlight_sides)
        object.__setattr__(self, "vertex_names", tuple(self.vertex_names))
        if not isinstance(self.side_labels, str):
            object.__setattr__(self, "side_labels", tuple(self.side_labels))

    def vertex_label(self, index: int) -> str:
        """Return the display letter for vertex *index* (0 = A)."""
        if index < len(self.vertex_names) and self.vertex_names[index]:
            return self.vertex_names[index]
        return chr(ord("A") + index)

    def side_label(self, index: int) -> str:
        """Return the label text for side *index* (may be empty)."""
        labels: str | Sequence[str] = self.side_labels
        if isinstance(labels, str):
            return labels
        if index < len(labels):
            return labels[index]
        return ""
