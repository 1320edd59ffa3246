"""Scene assembly for regular polygons.

Paint order, back to front:

1. centre triangulation
2. vertex triangulation fan and its diagonals
3. body fill (skipped under centre triangulation)
4. radii, then the apothem
5. the outline, then highlighted sides over it
6. interior angle arcs, then the single shaded interior angle
7. exterior extensions and arcs, then the single shaded exterior angle
8. angle labels
9. centre point and its label
10. side labels, vertex labels, highlighted vertex dots
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from numbers import Integral

from shapescene.composition.labels import (
    arc_points,
    circle_points,
    compute_viewport,
    exterior_arc,
    format_number,
    interior_arc,
    midpoint,
    outward_offset,
    polar,
    radial_offset,
)
from shapescene.geometry.polygon_ops import (
    generate,
    triangulate_from_centre,
    triangulate_from_vertex,
)
from shapescene.model import (
    Point2D,
    PolygonGeometry,
    PolygonSpec,
    PolygonStyle,
    PolygonVisibility,
    Primitive,
    PrimitiveStyle,
    Scene,
    TriangulationMode,
    resolve_style,
)
from shapescene.model.style import _resolve_palette

logger = logging.getLogger(__name__)

_CENTRE_TRIANGLE_OPACITY = (0.1, 0.15)
_FAN_TRIANGLE_OPACITY = (0.08, 0.14)
_WEDGE_OPACITY = 0.2

_THIN_WIDTH = 1.0
_FAN_WIDTH = 1.5
_EXTENSION_WIDTH = 1.5

_RADIUS_DASH = (4.0, 4.0)
_FAN_DASH = (5.0, 3.0)
_APOTHEM_DASH = (5.0, 3.0)
_EXTENSION_DASH = (4.0, 3.0)

_CENTRE_LABEL_OFFSET = Point2D(12.0, 5.0)

_LINE = PrimitiveStyle()
_FILL = PrimitiveStyle()
_TEXT = PrimitiveStyle(text_anchor="middle")


def _in_range(index: object, n: int) -> bool:
    return (
        isinstance(index, Integral)
        and not isinstance(index, bool)
        and 0 <= index < n
    )


def _valid_indices(indices: Iterable[int], n: int, what: str) -> list[int]:
    kept = []
    for i in indices:
        if _in_range(i, n):
            kept.append(int(i))
        else:
            logger.debug("Ignoring %s index %r for %d-gon", what, i, n)
    return sorted(kept)


def _valid_index(index: int | None, n: int, what: str) -> int | None:
    if index is None:
        return None
    if _in_range(index, n):
        return int(index)
    logger.debug("Ignoring %s index %r for %d-gon", what, index, n)
    return None


def _dashed(colour: object, width: float, dash: tuple[float, float]) -> PrimitiveStyle:
    return resolve_style(_LINE, {
        "stroke": colour,
        "stroke_width": width,
        "linestyle": "dashed",
        "dash_pattern": dash,
    })


def _centre_triangles(
    geom: PolygonGeometry, palette: PolygonStyle,
) -> list[Primitive]:
    prims = []
    for i, (a, b) in enumerate(triangulate_from_centre(geom.spec.sides)):
        style = resolve_style(_FILL, {
            "fill": palette.triangle_fill_colour,
            "fill_opacity": _CENTRE_TRIANGLE_OPACITY[i % 2],
            "stroke": palette.radii_colour,
            "stroke_width": _THIN_WIDTH,
        })
        prims.append(Primitive.polygon(
            (geom.centre, geom.point(a), geom.point(b)), style,
            f"triangle:centre:{i}",
        ))
    return prims


def _fan_triangles(
    geom: PolygonGeometry, vertex: int, palette: PolygonStyle,
) -> list[Primitive]:
    diagonals, triangles = triangulate_from_vertex(geom.spec.sides, vertex)
    prims = []
    for k, (a, b, c) in enumerate(triangles):
        style = resolve_style(_FILL, {
            "fill": palette.triangle_fill_colour,
            "fill_opacity": _FAN_TRIANGLE_OPACITY[k % 2],
            "stroke": palette.interior_angle_colour,
            "stroke_width": _FAN_WIDTH,
            "linestyle": "dashed",
            "dash_pattern": _FAN_DASH,
        })
        prims.append(Primitive.polygon(
            (geom.point(a), geom.point(b), geom.point(c)), style,
            f"triangle:fan:{k}",
        ))
    diagonal = _dashed(palette.interior_angle_colour, _FAN_WIDTH, _FAN_DASH)
    for a, b in diagonals:
        prims.append(Primitive.line(
            geom.point(a), geom.point(b), diagonal, f"diagonal:{a}-{b}",
        ))
    return prims


def _angle_label(
    position: Point2D, degrees: float, colour: object, palette: PolygonStyle,
    role: str,
) -> Primitive:
    style = resolve_style(_TEXT, {
        "fill": colour,
        "font_size": palette.angle_label_size,
        "font_weight": "bold",
    })
    return Primitive.label(
        position, f"{format_number(degrees, places=0)}°", style, role,
    )


def _interior_arcs(
    geom: PolygonGeometry, vis: PolygonVisibility,
    highlighted: set[int], skip_label: int | None, palette: PolygonStyle,
) -> tuple[list[Primitive], list[Primitive]]:
    arcs, labels = [], []
    n = geom.spec.sides
    for i in range(n):
        vertex = geom.point(i)
        start, sweep = interior_arc(vertex, geom.point(i - 1), geom.point(i + 1))
        if i in highlighted:
            colour, width = palette.highlight_colour, palette.highlight_angle_width
        else:
            colour, width = palette.interior_angle_colour, palette.angle_width
        style = resolve_style(_LINE, {"stroke": colour, "stroke_width": width})
        arcs.append(Primitive.path(
            arc_points(vertex, palette.interior_arc_radius, start, sweep,
                       palette.arc_segments),
            style, f"arc:interior:{i}",
        ))
        if vis.show_interior_angle_label and i != skip_label:
            labels.append(_angle_label(
                polar(vertex, start + sweep / 2, palette.interior_label_distance),
                geom.interior_angle_degrees, colour, palette,
                f"label:angle:interior:{i}",
            ))
    return arcs, labels


def _interior_wedge(
    geom: PolygonGeometry, vis: PolygonVisibility, i: int,
    palette: PolygonStyle,
) -> tuple[list[Primitive], list[Primitive]]:
    vertex = geom.point(i)
    start, sweep = interior_arc(vertex, geom.point(i - 1), geom.point(i + 1))
    colour = palette.interior_angle_colour
    style = resolve_style(_FILL, {
        "fill": colour,
        "fill_opacity": _WEDGE_OPACITY,
        "stroke": colour,
        "stroke_width": palette.angle_width,
    })
    arc = arc_points(vertex, palette.interior_arc_radius, start, sweep,
                     palette.arc_segments)
    prims = [Primitive.polygon((vertex,) + arc, style, f"wedge:interior:{i}")]
    labels = []
    if vis.show_interior_angle_label:
        labels.append(_angle_label(
            polar(vertex, start + sweep / 2, palette.interior_label_distance),
            geom.interior_angle_degrees, colour, palette,
            f"label:angle:interior:{i}",
        ))
    return prims, labels


def _exterior_arcs(
    geom: PolygonGeometry, vis: PolygonVisibility,
    highlighted: set[int], skip_label: int | None, palette: PolygonStyle,
) -> tuple[list[Primitive], list[Primitive]]:
    prims, labels = [], []
    extension = _dashed(
        palette.exterior_angle_colour, _EXTENSION_WIDTH, _EXTENSION_DASH,
    )
    for i in range(geom.spec.sides):
        vertex = geom.point(i)
        start, sweep = exterior_arc(vertex, geom.point(i - 1), geom.point(i + 1))
        prims.append(Primitive.line(
            vertex, polar(vertex, start, palette.extension_length),
            extension, f"extension:{i}",
        ))
        if i in highlighted:
            colour, width = palette.highlight_colour, palette.highlight_angle_width
        else:
            colour, width = palette.exterior_angle_colour, palette.angle_width
        style = resolve_style(_LINE, {"stroke": colour, "stroke_width": width})
        prims.append(Primitive.path(
            arc_points(vertex, palette.exterior_arc_radius, start, sweep,
                       palette.arc_segments),
            style, f"arc:exterior:{i}",
        ))
        if vis.show_exterior_angle_label and i != skip_label:
            labels.append(_angle_label(
                polar(vertex, start + sweep / 2, palette.exterior_label_distance),
                geom.exterior_angle_degrees, colour, palette,
                f"label:angle:exterior:{i}",
            ))
    return prims, labels


def _exterior_wedge(
    geom: PolygonGeometry, vis: PolygonVisibility, i: int,
    palette: PolygonStyle,
) -> tuple[list[Primitive], list[Primitive]]:
    vertex = geom.point(i)
    start, sweep = exterior_arc(vertex, geom.point(i - 1), geom.point(i + 1))
    colour = palette.exterior_angle_colour
    extension = _dashed(colour, palette.angle_width, _EXTENSION_DASH)
    wedge = resolve_style(_FILL, {
        "fill": colour,
        "fill_opacity": _WEDGE_OPACITY,
        "stroke": colour,
        "stroke_width": palette.angle_width,
    })
    arc = arc_points(vertex, palette.exterior_arc_radius, start, sweep,
                     palette.arc_segments)
    prims = [
        Primitive.line(
            vertex, polar(vertex, start, palette.single_extension_length),
            extension, f"extension:single:{i}",
        ),
        Primitive.polygon((vertex,) + arc, wedge, f"wedge:exterior:{i}"),
    ]
    labels = []
    if vis.show_exterior_angle_label:
        labels.append(_angle_label(
            polar(vertex, start + sweep / 2, palette.exterior_label_distance),
            geom.exterior_angle_degrees, colour, palette,
            f"label:angle:exterior:{i}",
        ))
    return prims, labels


def _side_labels(
    geom: PolygonGeometry, vis: PolygonVisibility,
    highlighted: set[int], palette: PolygonStyle,
) -> list[Primitive]:
    prims = []
    for i in range(geom.spec.sides):
        text = vis.side_label(i)
        if not text:
            continue
        colour = (
            palette.highlight_colour if i in highlighted
            else palette.stroke_colour
        )
        style = resolve_style(_TEXT, {
            "fill": colour, "font_size": palette.side_label_size,
        })
        p1, p2 = geom.side(i)
        prims.append(Primitive.label(
            outward_offset(p1, p2, geom.centre, palette.side_label_offset),
            text, style, f"label:side:{i}",
        ))
    return prims


def _vertex_labels(
    geom: PolygonGeometry, vis: PolygonVisibility,
    highlighted: set[int], palette: PolygonStyle,
) -> list[Primitive]:
    prims = []
    for i in range(geom.spec.sides):
        if i in highlighted:
            colour = palette.highlight_colour
        elif vis.vertex_label_colour is not None:
            colour = vis.vertex_label_colour
        else:
            colour = palette.vertex_colour
        style = resolve_style(_TEXT, {
            "fill": colour,
            "font_size": palette.vertex_label_size,
            "font_weight": "bold",
        })
        prims.append(Primitive.label(
            radial_offset(geom.point(i), geom.centre, palette.vertex_label_offset),
            vis.vertex_label(i), style, f"label:vertex:{i}",
        ))
    return prims


def assemble_polygon_scene(
    spec: PolygonSpec | None = None,
    visibility: PolygonVisibility | None = None,
    style: PolygonStyle | None = None,
    **style_kwargs: object,
) -> Scene:
    """Build the drawing of a regular polygon.

    Example usage::

        vis = PolygonVisibility(show_interior_angles=True,
                                interior_angle_at=0,
                                show_interior_angle_label=True)
        scene = assemble_polygon_scene(PolygonSpec(sides=5), vis)

    Args:
        spec: Polygon parameters.  ``None`` uses ``PolygonSpec()``.
        visibility: What to draw and highlight.  ``None`` draws the
            filled outline only.
        style: Palette.  ``None`` uses ``PolygonStyle()``.
        **style_kwargs: Any :class:`PolygonStyle` field as a keyword
            override.  Unknown names raise :class:`TypeError`.

    Returns:
        A :class:`Scene` whose primitives are ordered back to front.
        Vertex and side indices outside the polygon are ignored; an
        out-of-range fan origin falls back to vertex 0.
    """
    spec = spec if spec is not None else PolygonSpec()
    vis = visibility if visibility is not None else PolygonVisibility()
    palette = _resolve_palette(PolygonStyle, style, **style_kwargs)
    geom = generate(spec)
    n = spec.sides

    highlight_angles = set(_valid_indices(vis.highlight_angles, n, "angle"))
    highlight_sides = set(_valid_indices(vis.highlight_sides, n, "side"))
    interior_at = _valid_index(vis.interior_angle_at, n, "interior angle")
    exterior_at = _valid_index(vis.exterior_angle_at, n, "exterior angle")
    from_centre = vis.triangulation is TriangulationMode.FROM_CENTRE

    prims: list[Primitive] = []
    if from_centre:
        prims += _centre_triangles(geom, palette)
    elif vis.triangulation is TriangulationMode.FROM_VERTEX:
        fan_origin = _valid_index(vis.triangle_vertex, n, "fan origin")
        if fan_origin is None:
            fan_origin = 0
        prims += _fan_triangles(geom, fan_origin, palette)

    if vis.show_fill and not from_centre:
        body = resolve_style(_FILL, {
            "fill": palette.fill_colour, "fill_opacity": palette.fill_opacity,
        })
        prims.append(Primitive.polygon(geom.points, body, "body"))

    if vis.show_radii and not from_centre:
        radius = _dashed(palette.radii_colour, _THIN_WIDTH, _RADIUS_DASH)
        prims += [
            Primitive.line(geom.centre, geom.point(i), radius, f"radius:{i}")
            for i in range(n)
        ]
    if vis.show_apothem:
        prims.append(Primitive.line(
            geom.centre, midpoint(*geom.side(0)),
            _dashed(palette.centre_colour, palette.angle_width, _APOTHEM_DASH),
            "apothem",
        ))

    outline = resolve_style(_FILL, {
        "stroke": palette.stroke_colour, "stroke_width": palette.stroke_width,
    })
    prims.append(Primitive.polygon(geom.points, outline, "outline"))
    side = resolve_style(_LINE, {
        "stroke": palette.highlight_colour,
        "stroke_width": palette.highlight_side_width,
    })
    prims += [
        Primitive.line(*geom.side(i), side, f"side:{i}")
        for i in sorted(highlight_sides)
    ]

    labels: list[Primitive] = []
    if vis.show_interior_angles:
        arcs, arc_labels = _interior_arcs(
            geom, vis, highlight_angles, interior_at, palette,
        )
        prims += arcs
        labels += arc_labels
    if interior_at is not None:
        wedge, wedge_labels = _interior_wedge(geom, vis, interior_at, palette)
        prims += wedge
        labels += wedge_labels
    if vis.show_exterior_angles:
        arcs, arc_labels = _exterior_arcs(
            geom, vis, highlight_angles, exterior_at, palette,
        )
        prims += arcs
        labels += arc_labels
    if exterior_at is not None:
        wedge, wedge_labels = _exterior_wedge(geom, vis, exterior_at, palette)
        prims += wedge
        labels += wedge_labels
    prims += labels

    if vis.show_centre:
        dot = resolve_style(_FILL, {"fill": palette.centre_colour})
        prims.append(Primitive.polygon(
            circle_points(geom.centre, palette.centre_dot_radius,
                          palette.circle_segments),
            dot, "centre",
        ))
    if vis.show_centre_label:
        style = resolve_style(_TEXT, {
            "fill": palette.centre_colour,
            "font_size": palette.vertex_label_size,
            "font_weight": "bold",
            "text_anchor": "start",
        })
        prims.append(Primitive.label(
            geom.centre + _CENTRE_LABEL_OFFSET, "O", style, "label:centre",
        ))

    if vis.show_side_labels:
        prims += _side_labels(geom, vis, highlight_sides, palette)
    if vis.show_vertex_labels:
        prims += _vertex_labels(geom, vis, highlight_angles, palette)

    dot = resolve_style(_FILL, {"fill": palette.highlight_colour})
    prims += [
        Primitive.polygon(
            circle_points(geom.point(i), palette.vertex_dot_radius,
                          palette.circle_segments),
            dot, f"vertex:{i}",
        )
        for i in sorted(highlight_angles)
    ]

    logger.debug(
        "Assembled %s scene with %d primitives", geom.name, len(prims),
    )
    return Scene(tuple(prims), compute_viewport(prims, palette.padding))
