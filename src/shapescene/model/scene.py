from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING

from shapescene.model.colour import Colour
from shapescene.model.point import Point2D
from shapescene.model.style import PrimitiveStyle

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure


class PrimitiveKind(StrEnum):
    """The drawable primitive variants.

    Attributes:
        PATH: An open polyline (angle arcs, right-angle markers).
        POLYGON: A closed outline, optionally filled (faces,
            triangles, dots).
        LINE: A straight segment between two points (edges, radii).
        TEXT: A label anchored at a single position.
    """

    PATH = "path"
    POLYGON = "polygon"
    LINE = "line"
    TEXT = "text"


_MIN_POINTS = {
    PrimitiveKind.PATH: 2,
    PrimitiveKind.POLYGON: 3,
    PrimitiveKind.LINE: 2,
}


@dataclass(frozen=True)
class Primitive:
    """One renderer-agnostic drawing instruction.

    Attributes:
        kind: Which variant this is.
        points: Vertices for paths, polygons and lines (exactly two
            for a line).  Empty for text.
        style: Resolved paint attributes.
        role: Stable dotted identifier describing what the primitive
            depicts, e.g. ``"edge:AD"``, ``"face:top"`` or
            ``"label:dimension:width"``.
        position: Anchor point for text; ``None`` otherwise.
        text: Label content for text; ``""`` otherwise.

    Raises:
        ValueError: If the points, position or text do not match
            *kind*.
    """

    kind: PrimitiveKind
    points: tuple[Point2D, ...]
    style: PrimitiveStyle
    role: str = ""
    position: Point2D | None = None
    text: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.kind, str):
            object.__setattr__(self, "kind", PrimitiveKind(self.kind))
        object.__setattr__(self, "points", tuple(self.points))
        if self.kind is PrimitiveKind.TEXT:
            if self.position is None:
                raise ValueError("text primitives need a position")
            if self.points:
                raise ValueError("text primitives take no points")
            return
        if self.position is not None:
            raise ValueError(f"{self.kind.value} primitives take no position")
        n_min = _MIN_POINTS[self.kind]
        if len(self.points) < n_min:
            raise ValueError(
                f"{self.kind.value} primitives need at least {n_min} points, "
                f"got {len(self.points)}"
            )
        if self.kind is PrimitiveKind.LINE and len(self.points) != 2:
            raise ValueError(
                f"line primitives need exactly 2 points, got {len(self.points)}"
            )

    @classmethod
    def path(cls, points, style, role="") -> Primitive:
        return cls(PrimitiveKind.PATH, tuple(points), style, role)

    @classmethod
    def polygon(cls, points, style, role="") -> Primitive:
        return cls(PrimitiveKind.POLYGON, tuple(points), style, role)

    @classmethod
    def line(cls, p1: Point2D, p2: Point2D, style, role="") -> Primitive:
        return cls(PrimitiveKind.LINE, (p1, p2), style, role)

    @classmethod
    def label(cls, position: Point2D, text: str, style, role="") -> Primitive:
        return cls(PrimitiveKind.TEXT, (), style, role, position, text)

    def coordinates(self) -> tuple[Point2D, ...]:
        """Every point this primitive occupies (its anchor, for text)."""
        if self.position is not None:
            return (self.position,)
        return self.points


@dataclass(frozen=True)
class Viewport:
    """Axis-aligned bounding box of a scene, in screen coordinates.

    Attributes:
        min_x: Left edge.
        min_y: Top edge (y grows downwards).
        width: Horizontal extent.
        height: Vertical extent.
    """

    min_x: float
    min_y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"viewport size must be non-negative, "
                f"got {self.width} x {self.height}"
            )

    @property
    def max_x(self) -> float:
        return self.min_x + self.width

    @property
    def max_y(self) -> float:
        return self.min_y + self.height

    def contains(self, point: Point2D) -> bool:
        return (
            self.min_x <= point.x <= self.max_x
            and self.min_y <= point.y <= self.max_y
        )

    def as_viewbox(self) -> str:
        """Return the SVG ``viewBox`` attribute value."""
        return f"{self.min_x:g} {self.min_y:g} {self.width:g} {self.height:g}"


@dataclass(frozen=True)
class Scene:
    """An ordered, back-to-front list of primitives plus their viewport.

    Scenes are built by
    :func:`~shapescene.composition.solid_scene.assemble_solid_scene` and
    :func:`~shapescene.composition.polygon_scene.assemble_polygon_scene`.
    A renderer should paint :attr:`primitives` in order.

    Attributes:
        primitives: Drawing instructions, back to front.
        viewport: Bounding box of every primitive plus padding.
    """

    primitives: tuple[Primitive, ...]
    viewport: Viewport

    def __len__(self) -> int:
        return len(self.primitives)

    def __iter__(self):
        return iter(self.primitives)

    def with_role(self, prefix: str) -> tuple[Primitive, ...]:
        """Return primitives whose role is *prefix* or starts with
        ``prefix + ":"``, in paint order."""
        return tuple(
            p for p in self.primitives
            if p.role == prefix or p.role.startswith(prefix + ":")
        )

    def roles(self) -> list[str]:
        return [p.role for p in self.primitives]

    def render_mpl(
        self,
        output: str | Path | None = None,
        *,
        ax: Axes | None = None,
        figsize: tuple[float, float] = (5.0, 5.0),
        dpi: int = 150,
        background: Colour = "white",
        show: bool | None = None,
    ) -> Figure:
        """Paint the scene with matplotlib.

        See :func:`shapescene.rendering.static.render_mpl` for the
        arguments.

        Returns:
            The matplotlib :class:`~matplotlib.figure.Figure`.
        """
        from shapescene.rendering.static import render_mpl

        return render_mpl(
            self, output, ax=ax, figsize=figsize, dpi=dpi,
            background=background, show=show,
        )
