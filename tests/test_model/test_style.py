"""Tests for primitive styles, palettes and style resolution."""

import pytest

from shapescene.model import CuboidStyle, PolygonStyle, PrimitiveStyle, resolve_style
from shapescene.model.colour import normalise_colour
from shapescene.model.style import _resolve_palette


class TestPrimitiveStyle:
    def test_defaults(self):
        style = PrimitiveStyle()
        assert style.stroke is None
        assert style.fill is None
        assert style.fill_opacity == 1.0
        assert style.text_anchor == "middle"
        assert not style.dashed

    def test_colours_normalised_to_hex(self):
        style = PrimitiveStyle(stroke="red", fill=(0.0, 0.0, 1.0))
        assert style.stroke == "#ff0000"
        assert style.fill == "#0000ff"

    def test_dash_pattern_makes_dashed(self):
        style = PrimitiveStyle(dash_pattern=[6, 4])
        assert style.dash_pattern == (6.0, 4.0)
        assert style.dashed

    def test_dashed_linestyle(self):
        assert PrimitiveStyle(linestyle="dashed").dashed

    @pytest.mark.parametrize("kwargs, match", [
        ({"stroke_width": -1.0}, "stroke_width"),
        ({"fill_opacity": 1.5}, "fill_opacity"),
        ({"linestyle": "wavy"}, "linestyle"),
        ({"dash_pattern": (4.0, 0.0)}, "dash_pattern"),
        ({"dash_pattern": ()}, "dash_pattern"),
        ({"font_size": 0}, "font_size"),
        ({"font_weight": "heavy"}, "font_weight"),
        ({"text_anchor": "left"}, "text_anchor"),
    ])
    def test_invalid_values_rejected(self, kwargs, match):
        with pytest.raises(ValueError, match=match):
            PrimitiveStyle(**kwargs)


class TestResolveStyle:
    BASE = PrimitiveStyle(stroke="black", stroke_width=2.0, fill="white")

    def test_no_overrides_returns_defaults(self):
        assert resolve_style(self.BASE) is self.BASE
        assert resolve_style(self.BASE, {}) is self.BASE

    def test_override_applied(self):
        resolved = resolve_style(self.BASE, {"stroke_width": 4.0})
        assert resolved.stroke_width == 4.0
        assert resolved.stroke == "#000000"

    def test_none_keeps_default(self):
        resolved = resolve_style(self.BASE, {"stroke_width": None})
        assert resolved.stroke_width == 2.0

    def test_none_removes_paint(self):
        resolved = resolve_style(self.BASE, {"fill": None})
        assert resolved.fill is None

    def test_defaults_not_mutated(self):
        resolve_style(self.BASE, {"stroke": "red"})
        assert self.BASE.stroke == "#000000"

    def test_unknown_key_raises(self):
        with pytest.raises(TypeError, match="Unknown style attribute"):
            resolve_style(self.BASE, {"colour": "red"})

    def test_overrides_validated(self):
        with pytest.raises(ValueError):
            resolve_style(self.BASE, {"fill_opacity": 2.0})


class TestCuboidStyle:
    def test_defaults(self):
        style = CuboidStyle()
        assert style.scale == 28.0
        assert style.padding == 50.0
        assert style.hidden_edge_colour == "#bdc3c7"

    @pytest.mark.parametrize("kwargs", [
        {"scale": 0},
        {"edge_width": -1},
        {"circle_segments": 2},
        {"padding": -5},
        {"label_size": 0},
        {"edge_colour": "notacolour"},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            CuboidStyle(**kwargs)

    def test_negative_offsets_allowed(self):
        style = CuboidStyle(height_offset=-40.0)
        assert style.height_offset == -40.0

    def test_to_dict_omits_defaults(self):
        assert CuboidStyle().to_dict() == {}

    def test_to_dict_colour_as_list(self):
        d = CuboidStyle(edge_colour="red").to_dict()
        assert d == {"edge_colour": [1.0, 0.0, 0.0]}

    def test_round_trip(self):
        style = CuboidStyle(scale=40.0, highlight_colour="green")
        restored = CuboidStyle.from_dict(style.to_dict())
        assert restored.scale == 40.0
        assert normalise_colour(restored.highlight_colour) == normalise_colour("green")

    def test_from_dict_unknown_key_raises(self):
        with pytest.raises(ValueError, match="unknown CuboidStyle"):
            CuboidStyle.from_dict({"atom_scale": 1.0})


class TestPolygonStyle:
    def test_defaults(self):
        style = PolygonStyle()
        assert style.padding == 60.0
        assert style.fill_opacity == 0.15
        assert style.arc_segments == 12

    def test_opacity_validated(self):
        with pytest.raises(ValueError, match="fill_opacity"):
            PolygonStyle(fill_opacity=1.2)

    def test_round_trip(self):
        style = PolygonStyle(stroke_width=3.0, arc_segments=20)
        assert PolygonStyle.from_dict(style.to_dict()) == style


class TestResolvePalette:
    def test_none_gives_default(self):
        assert _resolve_palette(CuboidStyle, None) == CuboidStyle()

    def test_kwarg_overrides_base(self):
        base = CuboidStyle(scale=40.0)
        resolved = _resolve_palette(CuboidStyle, base, label_size=18.0)
        assert resolved.scale == 40.0
        assert resolved.label_size == 18.0

    def test_none_kwarg_preserves_base(self):
        base = PolygonStyle(stroke_width=5.0)
        resolved = _resolve_palette(PolygonStyle, base, stroke_width=None)
        assert resolved.stroke_width == 5.0

    def test_unknown_kwarg_raises(self):
        with pytest.raises(TypeError, match="Unknown style keyword"):
            _resolve_palette(CuboidStyle, None, atom_scale=0.5)

    def test_wrong_palette_type_raises(self):
        with pytest.raises(TypeError, match="must be a CuboidStyle"):
            _resolve_palette(CuboidStyle, PolygonStyle())
