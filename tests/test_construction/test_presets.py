"""Tests for the lesson presets."""

import pytest

from shapescene.composition import assemble_polygon_scene, assemble_solid_scene
from shapescene.construction.presets import (
    angle_sum_polygon,
    centre_triangles_polygon,
    exterior_angles_polygon,
    interior_angles_polygon,
    labelling_cuboid,
    plain_cuboid,
    pythagoras_cuboid,
    surface_area_cuboid,
    volume_cuboid,
)
from shapescene.model import (
    InvalidDimension,
    PolygonSpec,
    SolidSpec,
    TriangulationMode,
)

ALL_FACES = frozenset({"top", "bottom", "front", "back", "left", "right"})


class TestPythagorasCuboid:
    def test_defaults(self):
        spec, vis = pythagoras_cuboid()
        assert spec == SolidSpec(4, 3, 5, "cm")
        assert vis.faces == ALL_FACES
        assert not vis.show_base_triangle
        assert vis.show_dimensions

    def test_diagonals(self):
        _, vis = pythagoras_cuboid(show_base_diagonal=True, show_space_diagonal=True)
        assert vis.show_base_triangle and vis.show_base_diagonal_label
        assert vis.show_space_triangle and vis.show_space_diagonal_label

    def test_assembles(self):
        scene = assemble_solid_scene(*pythagoras_cuboid(show_space_diagonal=True))
        texts = [p.text for p in scene.with_role("label:diagonal")]
        assert texts == ["7.07 cm"]

    def test_invalid_dimension(self):
        with pytest.raises(InvalidDimension):
            pythagoras_cuboid(width=0)


class TestSurfaceAreaCuboid:
    def test_single_face(self):
        _, vis = surface_area_cuboid(highlight_face="front")
        assert vis.highlight_faces == frozenset({"front"})
        assert vis.show_face_labels

    def test_all_faces(self):
        _, vis = surface_area_cuboid(highlight_face="all")
        assert vis.highlight_faces == ALL_FACES

    def test_no_face(self):
        _, vis = surface_area_cuboid()
        assert vis.highlight_faces == frozenset()
        assert not vis.show_face_labels

    def test_unknown_face_highlights_nothing(self):
        _, vis = surface_area_cuboid(highlight_face="roof")
        assert vis.highlight_faces == frozenset()

    def test_face_area_label(self):
        scene = assemble_solid_scene(*surface_area_cuboid(highlight_face="top"))
        labels = scene.with_role("label:face")
        assert [p.text for p in labels] == ["12 cm²"]


class TestVolumeCuboid:
    def test_plain(self):
        _, vis = volume_cuboid()
        assert vis.highlight_edges == frozenset()

    def test_highlight_dimensions(self):
        spec, vis = volume_cuboid(highlight_dimensions=True, units="m")
        assert spec.units == "m"
        scene = assemble_solid_scene(spec, vis)
        highlighted = [
            p.role for p in scene.with_role("edge")
            if p.style.stroke == "#e74c3c"
        ]
        assert highlighted == ["edge:AD", "edge:DC", "edge:AE"]


class TestLabellingCuboid:
    def test_vertex_labels_on(self):
        _, vis = labelling_cuboid()
        assert vis.show_vertex_labels

    @pytest.mark.parametrize("edge, dimension", [
        ("AB", "width"), ("HG", "width"), ("GH", "width"),
        ("BC", "depth"), ("FG", "depth"),
        ("CG", "height"), ("BF", "height"),
    ])
    def test_edge_maps_to_dimension(self, edge, dimension):
        _, vis = labelling_cuboid(highlight_edge=edge)
        assert vis.highlight_edges == frozenset({dimension})

    def test_unknown_edge(self):
        _, vis = labelling_cuboid(highlight_edge="AG")
        assert vis.highlight_edges == frozenset()

    @pytest.mark.parametrize("name, face", [
        ("top", "top"), ("EFGH", "top"), ("ABCD", "bottom"),
        ("ABFE", "front"), ("DCGH", "back"), ("ADHE", "left"),
        ("BCGF", "right"), ("Front", "front"),
    ])
    def test_face_by_name_or_letters(self, name, face):
        _, vis = labelling_cuboid(highlight_face=name)
        assert vis.highlight_faces == frozenset({face})

    def test_custom_vertex_names(self):
        _, vis = labelling_cuboid(vertex_names="PQRSTUVW")
        assert vis.vertex_label(0) == "P"

    def test_hide_dimensions(self):
        _, vis = labelling_cuboid(show_dimensions=False)
        assert not vis.show_dimensions


class TestPlainCuboid:
    def test_plain(self):
        spec, vis = plain_cuboid(width=2, depth=2, height=2)
        assert spec == SolidSpec(2, 2, 2)
        assert vis.faces == ALL_FACES
        assert not vis.show_vertex_labels
        assert vis.highlight_faces == frozenset()


class TestPolygonPresets:
    def test_interior_angles(self):
        spec, vis = interior_angles_polygon(sides=5)
        assert spec == PolygonSpec(sides=5)
        assert vis.show_interior_angles
        assert vis.interior_angle_at == 0
        assert vis.show_interior_angle_label

    def test_interior_angles_without_single(self):
        _, vis = interior_angles_polygon(angle_at=None)
        assert vis.interior_angle_at is None
        assert not vis.show_interior_angle_label

    def test_exterior_angles(self):
        spec, vis = exterior_angles_polygon(sides=8, angle_at=3)
        scene = assemble_polygon_scene(spec, vis)
        assert len(scene.with_role("arc:exterior")) == 8
        assert [p.text for p in scene.with_role("label:angle:exterior:3")] == ["45°"]

    def test_angle_sum(self):
        spec, vis = angle_sum_polygon(sides=7, from_vertex=2)
        assert vis.triangulation is TriangulationMode.FROM_VERTEX
        assert vis.triangle_vertex == 2
        scene = assemble_polygon_scene(spec, vis)
        assert len(scene.with_role("triangle:fan")) == 5
        assert len(scene.with_role("diagonal")) == 4

    def test_centre_triangles(self):
        spec, vis = centre_triangles_polygon(sides=6, show_apothem=True)
        scene = assemble_polygon_scene(spec, vis)
        assert len(scene.with_role("triangle:centre")) == 6
        assert len(scene.with_role("apothem")) == 1
        assert [p.text for p in scene.with_role("label:centre")] == ["O"]
