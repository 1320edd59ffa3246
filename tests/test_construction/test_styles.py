"""Tests for palette file I/O."""

import json

import pytest

from shapescene.construction.styles import StyleSet, load_styles, save_styles
from shapescene.model import CuboidStyle, PolygonStyle, normalise_colour


class TestSaveStyles:
    def test_only_given_sections_written(self, tmp_path):
        path = tmp_path / "styles.json"
        save_styles(path, cuboid_style=CuboidStyle(scale=40.0))
        data = json.loads(path.read_text())
        assert data == {"cuboid_style": {"scale": 40.0}}

    def test_default_palette_written_empty(self, tmp_path):
        path = tmp_path / "styles.json"
        save_styles(path, polygon_style=PolygonStyle())
        assert json.loads(path.read_text()) == {"polygon_style": {}}

    def test_indented(self, tmp_path):
        path = tmp_path / "styles.json"
        save_styles(path, cuboid_style=CuboidStyle(scale=40.0))
        assert '\n  "cuboid_style"' in path.read_text()


class TestLoadStyles:
    def test_round_trip(self, tmp_path):
        path = tmp_path / "styles.json"
        cuboid = CuboidStyle(edge_colour="black", label_size=16.0)
        polygon = PolygonStyle(fill_opacity=0.3, arc_segments=24)
        save_styles(path, cuboid_style=cuboid, polygon_style=polygon)
        loaded = load_styles(path)
        assert isinstance(loaded, StyleSet)
        assert loaded.polygon_style == polygon
        assert loaded.cuboid_style.label_size == 16.0
        assert normalise_colour(loaded.cuboid_style.edge_colour) == (0.0, 0.0, 0.0)

    def test_missing_section_is_none(self, tmp_path):
        path = tmp_path / "styles.json"
        path.write_text(json.dumps({"polygon_style": {"stroke_width": 3.0}}))
        loaded = load_styles(path)
        assert loaded.cuboid_style is None
        assert loaded.polygon_style.stroke_width == 3.0

    def test_unknown_section_raises(self, tmp_path):
        path = tmp_path / "styles.json"
        path.write_text(json.dumps({"atom_styles": {}}))
        with pytest.raises(ValueError, match="unknown top-level keys"):
            load_styles(path)

    def test_unknown_field_raises(self, tmp_path):
        path = tmp_path / "styles.json"
        path.write_text(json.dumps({"cuboid_style": {"bond_radius": 0.1}}))
        with pytest.raises(ValueError, match="unknown CuboidStyle"):
            load_styles(path)

    def test_invalid_value_raises(self, tmp_path):
        path = tmp_path / "styles.json"
        path.write_text(json.dumps({"polygon_style": {"fill_opacity": 3.0}}))
        with pytest.raises(ValueError, match="fill_opacity"):
            load_styles(path)

    def test_string_path(self, tmp_path):
        path = tmp_path / "styles.json"
        save_styles(str(path), polygon_style=PolygonStyle(padding=10.0))
        assert load_styles(str(path)).polygon_style.padding == 10.0
