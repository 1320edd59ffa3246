"""Rendering: matplotlib output for assembled scenes."""

from shapescene.rendering.static import render_mpl

__all__ = ["render_mpl"]
