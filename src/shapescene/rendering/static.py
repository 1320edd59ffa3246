"""Static matplotlib renderer: :func:`render_mpl` entry point."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from shapescene.model import Colour, Scene, normalise_colour
from shapescene.rendering.painter import _draw_primitives


def render_mpl(
    scene: Scene,
    output: str | Path | None = None,
    *,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (5.0, 5.0),
    dpi: int = 150,
    background: Colour = "white",
    show: bool | None = None,
) -> Figure:
    """Render a Scene as a static matplotlib figure.

    Example usage::

        scene = assemble_solid_scene(SolidSpec(4, 3, 5))

        # Save to file (no interactive window):
        render_mpl(scene, "cuboid.svg")

        # Render into an existing axes for multi-panel figures:
        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(10, 5))
        render_mpl(cuboid, ax=ax1)
        render_mpl(hexagon, ax=ax2)
        fig.savefig("panel.pdf", bbox_inches="tight")

    Args:
        scene: The scene to render.
        output: Optional file path to save the figure.  The format is
            inferred from the extension (e.g. ``.svg``, ``.pdf``,
            ``.png``).  Ignored when *ax* is provided.
        ax: Optional matplotlib :class:`~matplotlib.axes.Axes` to draw
            into.  The caller then owns the parent figure, and
            *output*, *figsize*, *dpi*, *background* and *show* are
            ignored.
        figsize: Figure size in inches ``(width, height)``.
        dpi: Resolution for raster output formats.
        background: Background colour (CSS name, hex string, grey
            float, or RGB tuple).
        show: Whether to call ``plt.show()``.  Defaults to ``True``
            when *output* is ``None``, ``False`` when saving to a file.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure` object.
    """
    if ax is not None:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")
        _draw_primitives(ax, scene)
        return fig

    bg_rgb = normalise_colour(background)
    fig, ax = plt.subplots(1, 1, figsize=figsize, dpi=dpi)
    fig.set_facecolor(bg_rgb)
    ax.set_position((0.0, 0.0, 1.0, 1.0))

    _draw_primitives(ax, scene)

    if output is not None:
        fig.savefig(str(output), dpi=dpi, facecolor=bg_rgb)

    if show is None:
        show = output is None

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
