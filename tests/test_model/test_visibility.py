"""Tests for the visibility records."""

import pytest

from shapescene.model import (
    PolygonVisibility,
    SolidVisibility,
    TriangulationMode,
)


class TestSolidVisibility:
    def test_default_faces(self):
        vis = SolidVisibility()
        assert vis.faces == frozenset({"left", "top", "front", "right"})
        assert "bottom" not in vis.faces
        assert "back" not in vis.faces

    def test_default_flags(self):
        vis = SolidVisibility()
        assert vis.show_dimensions is True
        assert vis.show_base_triangle is False
        assert vis.show_space_triangle is False
        assert vis.show_vertex_labels is False

    def test_iterables_frozen(self):
        vis = SolidVisibility(
            highlight_faces=["top", "front"], highlight_edges=("AD",),
        )
        assert vis.highlight_faces == frozenset({"top", "front"})
        assert vis.highlight_edges == frozenset({"AD"})

    def test_single_string_is_one_name(self):
        vis = SolidVisibility(highlight_faces="top")
        assert vis.highlight_faces == frozenset({"top"})

    def test_mappings_copied(self):
        labels = {"width": "x"}
        vis = SolidVisibility(edge_labels=labels)
        labels["width"] = "changed"
        assert vis.edge_labels == {"width": "x"}

    def test_mappings_read_only(self):
        vis = SolidVisibility(edge_labels={"width": "x"}, face_labels={"top": "A"})
        with pytest.raises(TypeError):
            vis.edge_labels["width"] = "changed"  # type: ignore[index]
        with pytest.raises(TypeError):
            vis.face_labels["front"] = "B"  # type: ignore[index]

    def test_frozen(self):
        vis = SolidVisibility()
        with pytest.raises(AttributeError):
            vis.show_dimensions = False  # type: ignore[misc]

    def test_vertex_label_default(self):
        assert SolidVisibility().vertex_label(6) == "G"

    def test_vertex_label_custom(self):
        vis = SolidVisibility(vertex_names=("P", "Q", "R", "S"))
        assert vis.vertex_label(1) == "Q"
        assert vis.vertex_label(5) == "F"

    def test_empty_vertex_name_falls_back(self):
        vis = SolidVisibility(vertex_names=("", "Q"))
        assert vis.vertex_label(0) == "A"


class TestPolygonVisibility:
    def test_defaults(self):
        vis = PolygonVisibility()
        assert vis.show_fill is True
        assert vis.triangulation is TriangulationMode.NONE
        assert vis.interior_angle_at is None
        assert vis.highlight_sides == frozenset()

    def test_triangulation_string_coerced(self):
        vis = PolygonVisibility(triangulation="from_vertex")
        assert vis.triangulation is TriangulationMode.FROM_VERTEX

    def test_unknown_triangulation_rejected(self):
        with pytest.raises(ValueError):
            PolygonVisibility(triangulation="spiral")

    def test_indices_frozen(self):
        vis = PolygonVisibility(highlight_angles=[0, 2, 2])
        assert vis.highlight_angles == frozenset({0, 2})

    def test_vertex_label_fallback_letters(self):
        vis = PolygonVisibility(vertex_names=("P",))
        assert vis.vertex_label(0) == "P"
        assert vis.vertex_label(1) == "B"
        assert vis.vertex_label(11) == "L"

    def test_side_label_single_string(self):
        vis = PolygonVisibility(side_labels="5 cm")
        assert vis.side_label(0) == "5 cm"
        assert vis.side_label(4) == "5 cm"

    def test_side_label_per_side(self):
        vis = PolygonVisibility(side_labels=["a", "b"])
        assert vis.side_labels == ("a", "b")
        assert vis.side_label(1) == "b"
        assert vis.side_label(2) == ""
