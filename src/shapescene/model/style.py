from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, replace

from shapescene._constants import DEFAULT_ISO_SCALE
from shapescene.model._util import _field_defaults
from shapescene.model.colour import Colour, colour_to_hex, normalise_colour

_VALID_LINESTYLES = frozenset({"solid", "dashed", "dotted", "dashdot"})
_VALID_FONT_WEIGHTS = frozenset({"normal", "bold"})
_VALID_TEXT_ANCHORS = frozenset({"start", "middle", "end"})


@dataclass(frozen=True)
class PrimitiveStyle:
    """Resolved paint attributes for a single drawable primitive.

    Colours are normalised to ``#rrggbb`` strings on construction;
    ``None`` means "no paint" (SVG ``none``).

    Attributes:
        stroke: Outline or line colour.
        stroke_width: Outline or line width in display units.
        fill: Fill colour for polygons and text.
        fill_opacity: Fill opacity from 0 (transparent) to 1.
        linestyle: ``"solid"``, ``"dashed"``, ``"dotted"`` or
            ``"dashdot"``.
        dash_pattern: Explicit alternating mark/gap lengths, or
            ``None`` for the *linestyle* default.
        font_size: Text size in display units.
        font_weight: ``"normal"`` or ``"bold"``.
        text_anchor: Horizontal text alignment, ``"start"``,
            ``"middle"`` or ``"end"`` (SVG ``text-anchor``).
    """

    stroke: Colour | None = None
    stroke_width: float = 0.0
    fill: Colour | None = None
    fill_opacity: float = 1.0
    linestyle: str = "solid"
    dash_pattern: tuple[float, ...] | None = None
    font_size: float = 13.0
    font_weight: str = "normal"
    text_anchor: str = "middle"

    def __post_init__(self) -> None:
        object.__setattr__(self, "stroke", colour_to_hex(self.stroke))
        object.__setattr__(self, "fill", colour_to_hex(self.fill))
        if self.stroke_width < 0:
            raise ValueError(
                f"stroke_width must be non-negative, got {self.stroke_width}"
            )
        if not 0.0 <= self.fill_opacity <= 1.0:
            raise ValueError(
                f"fill_opacity must be between 0.0 and 1.0, "
                f"got {self.fill_opacity}"
            )
        if self.linestyle not in _VALID_LINESTYLES:
            raise ValueError(
                f"linestyle must be one of {sorted(_VALID_LINESTYLES)}, "
                f"got {self.linestyle!r}"
            )
        if self.dash_pattern is not None:
            pattern = tuple(float(v) for v in self.dash_pattern)
            if not pattern or any(v <= 0 for v in pattern):
                raise ValueError(
                    f"dash_pattern must be non-empty and positive, "
                    f"got {self.dash_pattern!r}"
                )
            object.__setattr__(self, "dash_pattern", pattern)
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")
        if self.font_weight not in _VALID_FONT_WEIGHTS:
            raise ValueError(
                f"font_weight must be one of {sorted(_VALID_FONT_WEIGHTS)}, "
                f"got {self.font_weight!r}"
            )
        if self.text_anchor not in _VALID_TEXT_ANCHORS:
            raise ValueError(
                f"text_anchor must be one of {sorted(_VALID_TEXT_ANCHORS)}, "
                f"got {self.text_anchor!r}"
            )

    @property
    def dashed(self) -> bool:
        return self.dash_pattern is not None or self.linestyle != "solid"


_PRIMITIVE_FIELDS = frozenset(f.name for f in dataclasses.fields(PrimitiveStyle))

# Fields where ``None`` is a meaningful value (not just "unset").
_NULLABLE_PRIMITIVE_FIELDS = frozenset({"stroke", "fill", "dash_pattern"})


def resolve_style(
    defaults: PrimitiveStyle,
    overrides: Mapping[str, object] | None = None,
) -> PrimitiveStyle:
    """Merge per-primitive *overrides* onto a *defaults* style.

    Keys must be :class:`PrimitiveStyle` field names.  A ``None``
    value keeps the default, except for ``stroke``, ``fill`` and
    ``dash_pattern`` where ``None`` explicitly removes the paint or
    pattern.  *defaults* itself is never modified.

    Raises:
        TypeError: If an override key is not a ``PrimitiveStyle`` field.
    """
    if not overrides:
        return defaults
    unknown = overrides.keys() - _PRIMITIVE_FIELDS
    if unknown:
        raise TypeError(
            f"Unknown style attribute(s): {', '.join(sorted(unknown))}"
        )
    kept = {
        k: v for k, v in overrides.items()
        if v is not None or k in _NULLABLE_PRIMITIVE_FIELDS
    }
    if not kept:
        return defaults
    return replace(defaults, **kept)


def _check_palette(palette: object) -> None:
    """Validate numeric palette fields by naming convention.

    ``*_width`` fields must be non-negative, ``*_opacity`` fields in
    ``[0, 1]`` and ``*_segments`` fields >= 3.  ``*_offset`` fields
    may take either sign; every other numeric field must be positive.
    """
    for f in dataclasses.fields(palette):  # type: ignore[arg-type]
        val = getattr(palette, f.name)
        name = f.name
        if name.endswith("_colour"):
            normalise_colour(val)
        elif name.endswith("_width"):
            if val < 0:
                raise ValueError(f"{name} must be non-negative, got {val}")
        elif name.endswith("_opacity"):
            if not 0.0 <= val <= 1.0:
                raise ValueError(
                    f"{name} must be between 0.0 and 1.0, got {val}"
                )
        elif name.endswith("_segments"):
            if val < 3:
                raise ValueError(f"{name} must be >= 3, got {val}")
        elif name.endswith("_offset"):
            continue
        elif name == "padding":
            if val < 0:
                raise ValueError(f"padding must be non-negative, got {val}")
        elif val <= 0:
            raise ValueError(f"{name} must be positive, got {val}")


def _palette_to_dict(palette: object) -> dict:
    """Serialise a palette, omitting fields at their default values.

    Colours are compared and written in normalised ``[r, g, b]`` form.
    """
    defaults = _field_defaults(type(palette))
    d: dict = {}
    for field_name, default in defaults.items():
        val = getattr(palette, field_name)
        if field_name.endswith("_colour"):
            if normalise_colour(val) != normalise_colour(default):
                d[field_name] = list(normalise_colour(val))
        elif val != default:
            d[field_name] = val
    return d


def _palette_kwargs(cls: type, d: dict) -> dict:
    """Collect constructor kwargs for *cls* from a serialised dict.

    Unknown keys raise :class:`ValueError`; colour lists become tuples.
    """
    defaults = _field_defaults(cls)
    unknown = set(d) - set(defaults)
    if unknown:
        raise ValueError(
            f"unknown {cls.__name__} field(s): {sorted(unknown)}"
        )
    kwargs: dict = {}
    for field_name, val in d.items():
        if field_name.endswith("_colour") and isinstance(val, list):
            val = tuple(val)
        kwargs[field_name] = val
    return kwargs


@dataclass(frozen=True)
class CuboidStyle:
    """Colours, widths and sizes for isometric cuboid scenes.

    A default ``CuboidStyle()`` gives the standard lesson look: blue
    tinted faces, dark edges, dashed grey hidden edges, red highlights.
    Override individual fields at assembly time with keyword arguments::

        scene = cuboid_scene(spec, vis, scale=40, label_size=18)

    Attributes:
        scale: Display units per model unit.  Only affects the
            projected coordinates, never the derived lengths.
        padding: Margin added around the scene bounding box.
        edge_colour: Visible edge colour.
        hidden_edge_colour: Dashed hidden edge colour.
        highlight_colour: Highlighted edges and vertices.
        top_face_colour: Top face tint.
        front_face_colour: Front face tint.
        side_face_colour: Tint for left, right, bottom and back faces.
        highlighted_face_colour: Highlighted face fill and outline, and
            face area labels.
        base_diagonal_colour: Base-diagonal triangle and its label.
        space_diagonal_colour: Space-diagonal triangle and its label.
        vertex_bottom_colour: Labels for corners A to D.
        vertex_top_colour: Labels for corners E to H.
        edge_width: Visible edge line width.
        hidden_edge_width: Hidden edge line width.
        highlight_edge_width: Highlighted edge line width.
        overlay_width: Outline width of the diagonal triangles.
        label_size: Dimension and diagonal label font size.
        vertex_label_size: Vertex letter font size.
        face_label_size: Face area label font size.
        right_angle_size: Arm length of right-angle markers.
        vertex_dot_radius: Radius of highlighted vertex dots.
        dimension_offset: Perpendicular offset of the width and depth
            labels.
        height_offset: Perpendicular offset of the height label.
        base_diagonal_offset: Perpendicular offset of the AC label.
        space_diagonal_offset: Perpendicular offset of the AG label.
        circle_segments: Segments used to approximate vertex dots.
    """

    scale: float = DEFAULT_ISO_SCALE
    padding: float = 50.0
    edge_colour: Colour = "#2c3e50"
    hidden_edge_colour: Colour = "#bdc3c7"
    highlight_colour: Colour = "#e74c3c"
    top_face_colour: Colour = "#3498db"
    front_face_colour: Colour = "#2980b9"
    side_face_colour: Colour = "#1a5276"
    highlighted_face_colour: Colour = "#f39c12"
    base_diagonal_colour: Colour = "#e74c3c"
    space_diagonal_colour: Colour = "#9b59b6"
    vertex_bottom_colour: Colour = "#e74c3c"
    vertex_top_colour: Colour = "#2980b9"
    edge_width: float = 2.0
    hidden_edge_width: float = 1.5
    highlight_edge_width: float = 3.0
    overlay_width: float = 2.5
    label_size: float = 13.0
    vertex_label_size: float = 14.0
    face_label_size: float = 14.0
    right_angle_size: float = 8.0
    vertex_dot_radius: float = 4.0
    dimension_offset: float = 20.0
    height_offset: float = -25.0
    base_diagonal_offset: float = -15.0
    space_diagonal_offset: float = 15.0
    circle_segments: int = 24

    def __post_init__(self) -> None:
        _check_palette(self)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.
        """
        return _palette_to_dict(self)

    @classmethod
    def from_dict(cls, d: dict) -> CuboidStyle:
        """Deserialise from a dictionary.  Missing fields use defaults."""
        return cls(**_palette_kwargs(cls, d))


@dataclass(frozen=True)
class PolygonStyle:
    """Colours, widths and sizes for regular polygon scenes.

    Attributes:
        padding: Margin added around the scene bounding box.
        fill_colour: Polygon body fill.
        fill_opacity: Polygon body fill opacity.
        stroke_colour: Outline and side label colour.
        stroke_width: Outline width.
        highlight_colour: Highlighted sides, angles and vertex dots.
        interior_angle_colour: Interior arcs and the vertex fan.
        exterior_angle_colour: Exterior arcs and side extensions.
        radii_colour: Radii and centre-triangle outlines.
        centre_colour: Centre point, its label and the apothem.
        vertex_colour: Vertex labels.
        triangle_fill_colour: Triangulation fill.
        vertex_label_size: Vertex and centre letter font size.
        angle_label_size: Angle label font size.
        side_label_size: Side label font size.
        interior_arc_radius: Radius of interior angle arcs.
        exterior_arc_radius: Radius of exterior angle arcs.
        interior_label_distance: Distance of interior angle labels
            from their vertex.
        exterior_label_distance: Distance of exterior angle labels
            from their vertex.
        extension_length: Length of side extensions when every
            exterior angle is shown.
        single_extension_length: Length of the side extension for a
            single exterior angle.
        angle_width: Line width of angle arcs.
        highlight_angle_width: Line width of highlighted angle arcs.
        highlight_side_width: Line width of highlighted sides.
        side_label_offset: Distance of side labels outside each side.
        vertex_label_offset: Radial distance of vertex labels outside
            each vertex.
        centre_dot_radius: Radius of the centre point.
        vertex_dot_radius: Radius of highlighted vertex dots.
        arc_segments: Segments used to approximate each angle arc.
        circle_segments: Segments used to approximate dots.
    """

    padding: float = 60.0
    fill_colour: Colour = "#3498db"
    fill_opacity: float = 0.15
    stroke_colour: Colour = "#2c3e50"
    stroke_width: float = 2.0
    highlight_colour: Colour = "#e74c3c"
    interior_angle_colour: Colour = "#27ae60"
    exterior_angle_colour: Colour = "#9b59b6"
    radii_colour: Colour = "#95a5a6"
    centre_colour: Colour = "#e67e22"
    vertex_colour: Colour = "#2c3e50"
    triangle_fill_colour: Colour = "#3498db"
    vertex_label_size: float = 16.0
    angle_label_size: float = 14.0
    side_label_size: float = 14.0
    interior_arc_radius: float = 25.0
    exterior_arc_radius: float = 30.0
    interior_label_distance: float = 40.0
    exterior_label_distance: float = 45.0
    extension_length: float = 40.0
    single_extension_length: float = 50.0
    angle_width: float = 2.0
    highlight_angle_width: float = 3.0
    highlight_side_width: float = 4.0
    side_label_offset: float = 20.0
    vertex_label_offset: float = 20.0
    centre_dot_radius: float = 4.0
    vertex_dot_radius: float = 5.0
    arc_segments: int = 12
    circle_segments: int = 24

    def __post_init__(self) -> None:
        _check_palette(self)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.
        """
        return _palette_to_dict(self)

    @classmethod
    def from_dict(cls, d: dict) -> PolygonStyle:
        """Deserialise from a dictionary.  Missing fields use defaults."""
        return cls(**_palette_kwargs(cls, d))


Palette = CuboidStyle | PolygonStyle


def _resolve_palette(
    cls: type[CuboidStyle] | type[PolygonStyle],
    style: Palette | None,
    **kwargs: object,
) -> Palette:
    """Build a palette from an optional base plus keyword overrides.

    Any kwarg whose name matches a field of *cls* replaces that field's
    value; ``None`` is treated as "not provided".

    Raises:
        TypeError: If *style* is not a *cls* instance or a kwarg name
            does not match any field.
    """
    if style is not None and not isinstance(style, cls):
        raise TypeError(
            f"style must be a {cls.__name__}, got {type(style).__name__}"
        )
    valid = frozenset(f.name for f in dataclasses.fields(cls))
    unknown = kwargs.keys() - valid
    if unknown:
        raise TypeError(
            f"Unknown style keyword argument(s): {', '.join(sorted(unknown))}"
        )
    base = style if style is not None else cls()
    overrides = {k: v for k, v in kwargs.items() if v is not None}
    if overrides:
        base = replace(base, **overrides)
    return base
