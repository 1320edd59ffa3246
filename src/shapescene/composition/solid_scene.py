"""Scene assembly for isometric cuboids.

Paint order, back to front:

1. hidden-tier faces (bottom, back, left)
2. hidden edges AB, BC, BF (always dashed)
3. visible faces (top, front, right)
4. base-diagonal triangle overlay
5. space-diagonal triangle overlay
6. visible edges
7. highlighted vertex dots
8. labels: dimensions, diagonals, face areas, vertices
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from shapescene._constants import (
    ALL_EDGES,
    DIMENSION_EDGES,
    FACE_NAMES,
    HIDDEN_EDGES,
    VERTEX_NAMES,
    VISIBLE_EDGES,
)
from shapescene.composition.labels import (
    centroid,
    circle_points,
    compute_viewport,
    format_number,
    place_label,
    right_angle_marker,
)
from shapescene.geometry.solid_ops import project
from shapescene.model import (
    CuboidStyle,
    Point2D,
    Primitive,
    PrimitiveStyle,
    Scene,
    SolidGeometry,
    SolidSpec,
    SolidVisibility,
    resolve_style,
)
from shapescene.model.style import _resolve_palette

logger = logging.getLogger(__name__)

_HIDDEN_TIER_FACES = ("bottom", "back", "left")
_VISIBLE_TIER_FACES = ("top", "front", "right")

_FACE_TONE = {
    "top": "top",
    "front": "front",
    "bottom": "side",
    "back": "side",
    "left": "side",
    "right": "side",
}
_FACE_OPACITY = {"top": 0.15, "front": 0.1, "side": 0.08}
_HIGHLIGHTED_FACE_OPACITY = 0.4
_HIGHLIGHTED_FACE_STROKE_WIDTH = 2.0

_BASE_TRIANGLE_OPACITY = 0.2
_SPACE_TRIANGLE_OPACITY = 0.25
_BASE_DIAGONAL_RESTROKE_WIDTH = 3.0
_MARKER_WIDTH = 1.5

_HIDDEN_DASH = (6.0, 4.0)

# Text offsets from each corner, and the anchor, for vertex letters.
_VERTEX_LABEL_OFFSETS: dict[str, tuple[float, float]] = {
    "A": (-15.0, 5.0),
    "B": (8.0, 5.0),
    "C": (8.0, 5.0),
    "D": (-15.0, 12.0),
    "E": (-15.0, -5.0),
    "F": (8.0, -5.0),
    "G": (8.0, -5.0),
    "H": (-5.0, -5.0),
}

_LINE = PrimitiveStyle(linestyle="solid")
_FILL = PrimitiveStyle()
_TEXT = PrimitiveStyle(text_anchor="middle")


def canonical_edge(name: str) -> str | None:
    """Map an edge name or dimension alias to a cuboid edge name.

    Edge names are order-insensitive (``"CD"`` is ``"DC"``).  The
    dimension aliases resolve to the edge carrying that dimension's
    label.  Returns ``None`` for anything else, including non-strings.
    """
    if not isinstance(name, str):
        return None
    key = name.strip()
    if key.lower() in DIMENSION_EDGES:
        return DIMENSION_EDGES[key.lower()]
    key = key.upper()
    if key in ALL_EDGES:
        return key
    if key[::-1] in ALL_EDGES:
        return key[::-1]
    return None


def _known(names: Iterable[str], valid: Iterable[str], what: str) -> set[str]:
    valid = set(valid)
    kept: set[str] = set()
    for name in names:
        if name in valid:
            kept.add(name)
        else:
            logger.debug("Ignoring unknown %s %r", what, name)
    return kept


def _highlighted_edges(names: Iterable[str]) -> set[str]:
    edges: set[str] = set()
    for name in names:
        edge = canonical_edge(name)
        if edge is None:
            logger.debug("Ignoring unknown edge %r", name)
        elif edge in HIDDEN_EDGES:
            logger.debug("Ignoring highlight on hidden edge %s", edge)
        else:
            edges.add(edge)
    return edges


def _face_primitives(
    geom: SolidGeometry,
    faces: tuple[str, ...],
    shown: set[str],
    highlighted: set[str],
    palette: CuboidStyle,
) -> list[Primitive]:
    prims: list[Primitive] = []
    for face in faces:
        if face not in shown:
            continue
        if face in highlighted:
            overrides = {
                "fill": palette.highlighted_face_colour,
                "fill_opacity": _HIGHLIGHTED_FACE_OPACITY,
                "stroke": palette.highlighted_face_colour,
                "stroke_width": _HIGHLIGHTED_FACE_STROKE_WIDTH,
            }
        else:
            tone = _FACE_TONE[face]
            overrides = {
                "fill": getattr(palette, f"{tone}_face_colour"),
                "fill_opacity": _FACE_OPACITY[tone],
            }
        prims.append(Primitive.polygon(
            geom.face(face), resolve_style(_FILL, overrides), f"face:{face}",
        ))
    return prims


def _hidden_edges(geom: SolidGeometry, palette: CuboidStyle) -> list[Primitive]:
    style = resolve_style(_LINE, {
        "stroke": palette.hidden_edge_colour,
        "stroke_width": palette.hidden_edge_width,
        "linestyle": "dashed",
        "dash_pattern": _HIDDEN_DASH,
    })
    return [
        Primitive.line(*geom.edge(edge), style, f"edge:{edge}")
        for edge in HIDDEN_EDGES
    ]


def _visible_edges(
    geom: SolidGeometry, highlighted: set[str], palette: CuboidStyle,
) -> list[Primitive]:
    normal = resolve_style(_LINE, {
        "stroke": palette.edge_colour,
        "stroke_width": palette.edge_width,
    })
    highlight = resolve_style(_LINE, {
        "stroke": palette.highlight_colour,
        "stroke_width": palette.highlight_edge_width,
    })
    return [
        Primitive.line(
            *geom.edge(edge),
            highlight if edge in highlighted else normal,
            f"edge:{edge}",
        )
        for edge in VISIBLE_EDGES
    ]


def _marker(
    vertex: Point2D, arm1: Point2D, arm2: Point2D,
    colour: object, palette: CuboidStyle, role: str,
) -> Primitive:
    style = resolve_style(_LINE, {"stroke": colour, "stroke_width": _MARKER_WIDTH})
    return Primitive.path(
        right_angle_marker(vertex, arm1, arm2, palette.right_angle_size),
        style, role,
    )


def _base_triangle(geom: SolidGeometry, palette: CuboidStyle) -> list[Primitive]:
    v = geom.vertices
    colour = palette.base_diagonal_colour
    fill = resolve_style(_FILL, {
        "fill": colour,
        "fill_opacity": _BASE_TRIANGLE_OPACITY,
        "stroke": colour,
        "stroke_width": palette.overlay_width,
    })
    return [
        Primitive.polygon((v["A"], v["B"], v["C"]), fill, "triangle:base"),
        _marker(v["B"], v["A"], v["C"], colour, palette, "marker:base"),
    ]


def _space_triangle(geom: SolidGeometry, palette: CuboidStyle) -> list[Primitive]:
    v = geom.vertices
    colour = palette.space_diagonal_colour
    fill = resolve_style(_FILL, {
        "fill": colour,
        "fill_opacity": _SPACE_TRIANGLE_OPACITY,
        "stroke": colour,
        "stroke_width": palette.overlay_width,
    })
    diagonal = resolve_style(_LINE, {
        "stroke": colour, "stroke_width": _BASE_DIAGONAL_RESTROKE_WIDTH,
    })
    return [
        Primitive.polygon((v["A"], v["C"], v["G"]), fill, "triangle:space"),
        Primitive.line(v["A"], v["C"], diagonal, "triangle:space:diagonal"),
        _marker(v["C"], v["A"], v["G"], colour, palette, "marker:space"),
    ]


def _vertex_dots(
    geom: SolidGeometry, highlighted: set[str], palette: CuboidStyle,
) -> list[Primitive]:
    style = resolve_style(_FILL, {"fill": palette.highlight_colour})
    return [
        Primitive.polygon(
            circle_points(
                geom.vertices[name], palette.vertex_dot_radius,
                palette.circle_segments,
            ),
            style, f"vertex:{name}",
        )
        for name in VERTEX_NAMES if name in highlighted
    ]


def _edge_label_override(vis: SolidVisibility, dimension: str) -> str | None:
    """Label override for a dimension, by alias or by any spelling of
    its labelled edge."""
    edge = DIMENSION_EDGES[dimension]
    for key, text in vis.edge_labels.items():
        if key == dimension or canonical_edge(key) == edge:
            return text
    return None


def _dimension_labels(
    geom: SolidGeometry, vis: SolidVisibility, palette: CuboidStyle,
) -> list[Primitive]:
    spec = geom.spec
    style = resolve_style(_TEXT, {
        "fill": palette.edge_colour, "font_size": palette.label_size,
    })
    offsets = {
        "width": palette.dimension_offset,
        "depth": palette.dimension_offset,
        "height": palette.height_offset,
    }
    prims: list[Primitive] = []
    for dimension in ("width", "depth", "height"):
        p1, p2 = geom.edge(DIMENSION_EDGES[dimension])
        text = _edge_label_override(vis, dimension)
        if text is None:
            text = f"{format_number(getattr(spec, dimension))} {spec.units}"
        prims.append(Primitive.label(
            place_label(p1, p2, offsets[dimension]), text, style,
            f"label:dimension:{dimension}",
        ))
    return prims


def _extra_edge_labels(
    geom: SolidGeometry, vis: SolidVisibility, palette: CuboidStyle,
) -> list[Primitive]:
    """Labels for override keys naming edges without a dimension label."""
    style = resolve_style(_TEXT, {
        "fill": palette.edge_colour, "font_size": palette.label_size,
    })
    dimension_edges = set(DIMENSION_EDGES.values())
    prims: list[Primitive] = []
    for key, text in vis.edge_labels.items():
        edge = canonical_edge(key)
        if edge is None:
            logger.debug("Ignoring label for unknown edge %r", key)
            continue
        if edge in dimension_edges:
            continue
        p1, p2 = geom.edge(edge)
        prims.append(Primitive.label(
            place_label(p1, p2, palette.dimension_offset), text, style,
            f"label:edge:{edge}",
        ))
    return prims


def _diagonal_label(
    p1: Point2D, p2: Point2D, length: float, units: str,
    colour: object, offset: float, palette: CuboidStyle, role: str,
) -> Primitive:
    style = resolve_style(_TEXT, {
        "fill": colour,
        "font_size": palette.label_size + 1,
        "font_weight": "bold",
    })
    return Primitive.label(
        place_label(p1, p2, offset), f"{format_number(length)} {units}",
        style, role,
    )


def _face_labels(
    geom: SolidGeometry, vis: SolidVisibility,
    shown: set[str], highlighted: set[str], palette: CuboidStyle,
) -> list[Primitive]:
    style = resolve_style(_TEXT, {
        "fill": palette.highlighted_face_colour,
        "font_size": palette.face_label_size,
        "font_weight": "bold",
    })
    prims: list[Primitive] = []
    for face in _VISIBLE_TIER_FACES + _HIDDEN_TIER_FACES:
        if face not in shown or face not in highlighted:
            continue
        text = vis.face_labels.get(face)
        if text is None:
            area = format_number(geom.face_areas[face])
            text = f"{area} {geom.spec.units}²"
        prims.append(Primitive.label(
            centroid(geom.face(face)), text, style, f"label:face:{face}",
        ))
    return prims


def _vertex_labels(
    geom: SolidGeometry, vis: SolidVisibility,
    highlighted: set[str], palette: CuboidStyle,
) -> list[Primitive]:
    prims: list[Primitive] = []
    for i, name in enumerate(VERTEX_NAMES):
        if name in highlighted:
            colour = palette.highlight_colour
        elif vis.vertex_label_colour is not None:
            colour = vis.vertex_label_colour
        elif i < 4:
            colour = palette.vertex_bottom_colour
        else:
            colour = palette.vertex_top_colour
        style = resolve_style(_TEXT, {
            "fill": colour,
            "font_size": palette.vertex_label_size,
            "font_weight": "bold",
            "text_anchor": "start",
        })
        dx, dy = _VERTEX_LABEL_OFFSETS[name]
        prims.append(Primitive.label(
            geom.vertices[name] + Point2D(dx, dy), vis.vertex_label(i),
            style, f"label:vertex:{name}",
        ))
    return prims


def assemble_solid_scene(
    spec: SolidSpec | None = None,
    visibility: SolidVisibility | None = None,
    style: CuboidStyle | None = None,
    **style_kwargs: object,
) -> Scene:
    """Build the isometric drawing of a cuboid.

    Example usage::

        spec = SolidSpec(width=4, depth=3, height=5)
        vis = SolidVisibility(show_base_triangle=True,
                              show_base_diagonal_label=True)
        scene = assemble_solid_scene(spec, vis, scale=40)
        scene.render_mpl("cuboid.svg")

    Args:
        spec: Cuboid dimensions.  ``None`` uses ``SolidSpec()``.
        visibility: What to draw and highlight.  ``None`` uses the
            defaults: four faces, all edges, dimension labels.
        style: Palette.  ``None`` uses ``CuboidStyle()``.
        **style_kwargs: Any :class:`CuboidStyle` field as a keyword
            override.  Unknown names raise :class:`TypeError`.

    Returns:
        A :class:`Scene` whose primitives are ordered back to front.
        Unknown face, edge and vertex names in *visibility* are
        ignored.
    """
    spec = spec if spec is not None else SolidSpec()
    vis = visibility if visibility is not None else SolidVisibility()
    palette = _resolve_palette(CuboidStyle, style, **style_kwargs)
    geom = project(spec, scale=palette.scale)

    shown_faces = _known(vis.faces, FACE_NAMES, "face")
    highlight_faces = _known(vis.highlight_faces, FACE_NAMES, "face")
    highlight_vertices = _known(vis.highlight_vertices, VERTEX_NAMES, "vertex")
    highlight_edges = _highlighted_edges(vis.highlight_edges)

    prims: list[Primitive] = []
    prims += _face_primitives(
        geom, _HIDDEN_TIER_FACES, shown_faces, highlight_faces, palette,
    )
    prims += _hidden_edges(geom, palette)
    prims += _face_primitives(
        geom, _VISIBLE_TIER_FACES, shown_faces, highlight_faces, palette,
    )
    if vis.show_base_triangle:
        prims += _base_triangle(geom, palette)
    if vis.show_space_triangle:
        prims += _space_triangle(geom, palette)
    prims += _visible_edges(geom, highlight_edges, palette)
    prims += _vertex_dots(geom, highlight_vertices, palette)

    if vis.show_dimensions:
        prims += _dimension_labels(geom, vis, palette)
    prims += _extra_edge_labels(geom, vis, palette)
    v = geom.vertices
    if vis.show_base_triangle and vis.show_base_diagonal_label:
        prims.append(_diagonal_label(
            v["A"], v["C"], geom.base_diagonal_length, spec.units,
            palette.base_diagonal_colour, palette.base_diagonal_offset,
            palette, "label:diagonal:base",
        ))
    if vis.show_space_triangle and vis.show_space_diagonal_label:
        prims.append(_diagonal_label(
            v["A"], v["G"], geom.space_diagonal_length, spec.units,
            palette.space_diagonal_colour, palette.space_diagonal_offset,
            palette, "label:diagonal:space",
        ))
    if vis.show_face_labels:
        prims += _face_labels(
            geom, vis, shown_faces, highlight_faces, palette,
        )
    if vis.show_vertex_labels:
        prims += _vertex_labels(geom, vis, highlight_vertices, palette)

    logger.debug("Assembled cuboid scene with %d primitives", len(prims))
    return Scene(tuple(prims), compute_viewport(prims, palette.padding))
