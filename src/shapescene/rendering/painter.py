"""Draw a :class:`~shapescene.model.Scene` into a matplotlib Axes.

Primitives are painted in scene order: each artist gets a ``zorder``
equal to its index, so later primitives cover earlier ones whatever
their artist type.  Scene coordinates are screen units with y growing
downwards; the y axis is inverted to match.
"""

from __future__ import annotations

from matplotlib.axes import Axes
from matplotlib.colors import to_rgba
from matplotlib.patches import Polygon

from shapescene.model import Primitive, PrimitiveKind, Scene, Viewport

_HORIZONTAL_ALIGNMENT = {"start": "left", "middle": "center", "end": "right"}

_LINESTYLES = {
    "solid": "-",
    "dashed": "--",
    "dotted": ":",
    "dashdot": "-.",
}


def _points_per_unit(ax: Axes, viewport: Viewport) -> float:
    """Typographic points per scene unit once the axes is fitted to
    *viewport* with equal aspect."""
    fig = ax.get_figure()
    bbox = ax.get_position()
    width_in, height_in = fig.get_size_inches()
    sx = bbox.width * width_in * 72.0 / max(viewport.width, 1e-9)
    sy = bbox.height * height_in * 72.0 / max(viewport.height, 1e-9)
    return min(sx, sy)


def _linestyle(prim: Primitive, linewidth: float):
    style = prim.style
    if style.dash_pattern is not None and linewidth > 0:
        # Dash lengths are scaled by the line width in matplotlib.
        return (0, tuple(d / linewidth for d in style.dash_pattern))
    return _LINESTYLES[style.linestyle]


def _draw_polygon(ax: Axes, prim: Primitive, ppu: float, zorder: int) -> None:
    style = prim.style
    face = (
        to_rgba(style.fill, style.fill_opacity)
        if style.fill is not None else "none"
    )
    edge = style.stroke if style.stroke is not None else "none"
    linewidth = style.stroke_width * ppu if style.stroke is not None else 0.0
    patch = Polygon(
        [p.as_tuple() for p in prim.points],
        closed=True,
        facecolor=face,
        edgecolor=edge,
        linewidth=linewidth,
        linestyle=_linestyle(prim, style.stroke_width),
        joinstyle="round",
        zorder=zorder,
    )
    ax.add_patch(patch)


def _draw_line(ax: Axes, prim: Primitive, ppu: float, zorder: int) -> None:
    style = prim.style
    if style.stroke is None or style.stroke_width <= 0:
        return
    xs = [p.x for p in prim.points]
    ys = [p.y for p in prim.points]
    ax.plot(
        xs, ys,
        color=style.stroke,
        linewidth=style.stroke_width * ppu,
        linestyle=_linestyle(prim, style.stroke_width),
        solid_capstyle="round",
        solid_joinstyle="round",
        zorder=zorder,
    )


def _draw_text(ax: Axes, prim: Primitive, ppu: float, zorder: int) -> None:
    style = prim.style
    pos = prim.position
    ax.text(
        pos.x, pos.y, prim.text,
        color=style.fill if style.fill is not None else "black",
        fontsize=style.font_size * ppu,
        fontweight=style.font_weight,
        ha=_HORIZONTAL_ALIGNMENT[style.text_anchor],
        va="baseline",
        zorder=zorder,
    )


def _draw_primitives(ax: Axes, scene: Scene) -> None:
    """Paint every primitive of *scene* onto *ax*, back to front.

    Sets equal aspect, fits the limits to the scene viewport (y
    inverted) and hides the axis frame.  Does **not** create or show
    the figure; the caller owns the figure lifecycle.
    """
    vp = scene.viewport
    ax.set_aspect("equal")
    ax.set_xlim(vp.min_x, vp.max_x)
    ax.set_ylim(vp.max_y, vp.min_y)
    ax.axis("off")

    ppu = _points_per_unit(ax, vp)
    for zorder, prim in enumerate(scene.primitives, start=1):
        if prim.kind is PrimitiveKind.POLYGON:
            _draw_polygon(ax, prim, ppu, zorder)
        elif prim.kind is PrimitiveKind.TEXT:
            _draw_text(ax, prim, ppu, zorder)
        else:
            _draw_line(ax, prim, ppu, zorder)
