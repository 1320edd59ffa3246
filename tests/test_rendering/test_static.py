"""Tests for the static matplotlib renderer."""

import matplotlib.pyplot as plt
import pytest
from matplotlib.figure import Figure

from shapescene.composition import assemble_polygon_scene, assemble_solid_scene
from shapescene.model import PolygonVisibility, SolidVisibility
from shapescene.rendering.static import render_mpl


@pytest.fixture
def cuboid(cuboid_spec):
    vis = SolidVisibility(
        show_base_triangle=True, show_base_diagonal_label=True,
        show_vertex_labels=True,
    )
    return assemble_solid_scene(cuboid_spec, vis)


@pytest.fixture
def hexagon(hexagon_spec):
    vis = PolygonVisibility(
        show_interior_angles=True, interior_angle_at=0,
        show_interior_angle_label=True, show_vertex_labels=True,
    )
    return assemble_polygon_scene(hexagon_spec, vis)


class TestRenderMpl:
    def test_returns_figure(self, cuboid):
        fig = render_mpl(cuboid, show=False)
        assert isinstance(fig, Figure)

    @pytest.mark.parametrize("suffix", [".svg", ".png"])
    def test_saves_file(self, hexagon, tmp_path, suffix):
        out = tmp_path / f"hexagon{suffix}"
        render_mpl(hexagon, out)
        assert out.exists()
        assert out.stat().st_size > 0

    def test_scene_method(self, cuboid, tmp_path):
        out = tmp_path / "cuboid.svg"
        fig = cuboid.render_mpl(out)
        assert isinstance(fig, Figure)
        assert out.read_text().lstrip().startswith("<?xml")

    def test_existing_axes(self, cuboid, hexagon):
        fig, (ax1, ax2) = plt.subplots(1, 2)
        try:
            assert render_mpl(cuboid, ax=ax1) is fig
            assert render_mpl(hexagon, ax=ax2) is fig
        finally:
            plt.close(fig)

    def test_axes_fitted_to_viewport(self, cuboid):
        fig, ax = plt.subplots()
        try:
            render_mpl(cuboid, ax=ax)
            vp = cuboid.viewport
            assert ax.get_xlim() == pytest.approx((vp.min_x, vp.max_x))
            # y grows downwards on screen.
            assert ax.get_ylim() == pytest.approx((vp.max_y, vp.min_y))
            assert not ax.axison
        finally:
            plt.close(fig)

    def test_artists_follow_paint_order(self, cuboid):
        fig, ax = plt.subplots()
        try:
            render_mpl(cuboid, ax=ax)
            n_text = len(cuboid.with_role("label"))
            assert len(ax.texts) == n_text
            assert len(ax.patches) == len(
                [p for p in cuboid if p.kind.value == "polygon"]
            )
            max_shape = max(a.get_zorder() for a in [*ax.patches, *ax.lines])
            min_text = min(t.get_zorder() for t in ax.texts)
            assert max_shape < min_text
        finally:
            plt.close(fig)
