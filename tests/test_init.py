"""Tests for the shapescene public API."""

import shapescene


class TestPublicAPI:
    def test_all_names_importable(self):
        for name in shapescene.__all__:
            assert hasattr(shapescene, name), f"{name} not importable from shapescene"

    def test_end_to_end_cuboid(self, tmp_path):
        spec, vis = shapescene.pythagoras_cuboid(show_space_diagonal=True)
        scene = shapescene.cuboid_scene(spec, vis)
        assert isinstance(scene, shapescene.Scene)
        out = tmp_path / "cuboid.svg"
        scene.render_mpl(output=out)
        assert out.exists()
        assert out.stat().st_size > 0

    def test_end_to_end_polygon(self, tmp_path):
        spec, vis = shapescene.angle_sum_polygon(sides=8)
        scene = shapescene.polygon_scene(spec, vis)
        out = tmp_path / "octagon.png"
        shapescene.render_mpl(scene, out)
        assert out.exists()

    def test_measurements_without_scenes(self):
        assert shapescene.SolidGeometryOps.surface_area(4, 3, 5) == 94
        assert shapescene.PolygonGeometryOps.sum_of_interior_angles(5) == 540
