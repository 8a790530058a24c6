"""
Test colour ramp generation and hex helpers
"""
import pytest
import os
import random
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from tokenforge.colors import (
    parse_hex,
    to_hex,
    generate_shades,
    generate_color_scale,
    pick_text_color,
    random_color,
    render_colors_css,
)
from tokenforge.errors import InvalidParameter
from tokenforge.models import ColorAdjustment, SHADE_NAMES


def _values(shades):
    return {shade.name: shade.value for shade in shades}


class TestHexHelpers:
    """Parsing and formatting of #RRGGBB"""

    def test_parse_with_and_without_hash(self):
        assert parse_hex('#3B82F6') == (59, 130, 246)
        assert parse_hex('3b82f6') == (59, 130, 246)

    @pytest.mark.parametrize("value", ['#FFF', '#GGGGGG', '', '#3B82F6FF', 'blue', None])
    def test_parse_rejects_malformed(self, value):
        with pytest.raises(InvalidParameter):
            parse_hex(value)

    def test_to_hex_is_lowercase(self):
        assert to_hex((59, 130, 246)) == '#3b82f6'
        assert to_hex((0, 0, 0)) == '#000000'


class TestShadeRamp:
    """Unadjusted ramp towards white"""

    def test_eleven_names_in_order(self):
        shades = generate_shades('#3B82F6')
        assert [s.name for s in shades] == SHADE_NAMES

    def test_lightest_is_white(self):
        assert _values(generate_shades('#3B82F6'))['50'] == '#ffffff'

    def test_darkest_is_base(self):
        """The last step has lightness factor 0, so it is the base colour"""
        assert _values(generate_shades('#3B82F6'))['950'] == '#3b82f6'
        assert _values(generate_shades('#10b981'))['950'] == '#10b981'

    def test_midpoint(self):
        """'500' is halfway to white, ties rounded up"""
        assert _values(generate_shades('#3B82F6'))['500'] == '#9dc1fb'

    def test_monotonic_without_adjustment(self):
        shades = generate_shades('#C06040')
        channels = [parse_hex(s.value) for s in shades]
        for lighter, darker in zip(channels, channels[1:]):
            assert all(l >= d for l, d in zip(lighter, darker))

    def test_deterministic(self):
        assert generate_shades('#EC4899') == generate_shades('#EC4899')

    def test_white_stays_white(self):
        assert set(_values(generate_shades('#FFFFFF')).values()) == {'#ffffff'}


class TestAdjustments:
    """Luminance, contrast and saturation sliders"""

    def test_luminance_lightens(self):
        shades = _values(generate_shades('#3B82F6', ColorAdjustment(luminance=50)))
        assert shades['500'] == '#cee0fd'
        # Past white is clamped
        assert shades['50'] == '#ffffff'
        assert shades['950'] == '#3b82f6'

    def test_negative_luminance_darkens(self):
        plain = _values(generate_shades('#3B82F6'))
        darker = _values(generate_shades('#3B82F6', ColorAdjustment(luminance=-50)))
        assert parse_hex(darker['500'])[0] < parse_hex(plain['500'])[0]

    def test_contrast_pushes_away_from_grey(self):
        shades = _values(generate_shades('#404040', ColorAdjustment(contrast=50)))
        assert shades['950'] == '#303030'

    def test_saturation_pushes_away_from_average(self):
        shades = _values(generate_shades('#C06040', ColorAdjustment(saturation=50)))
        assert shades['950'] == '#e55525'

    def test_zero_saturation_on_grey_is_identity(self):
        assert generate_shades('#808080', ColorAdjustment(saturation=50)) == generate_shades('#808080')

    @pytest.mark.parametrize("adjust", [
        ColorAdjustment(contrast=51),
        ColorAdjustment(saturation=-51),
        ColorAdjustment(luminance=100),
        ColorAdjustment(contrast=1.5),
    ])
    def test_out_of_range_rejected(self, adjust):
        with pytest.raises(InvalidParameter):
            generate_shades('#3B82F6', adjust)

    def test_invalid_hex_rejected(self):
        with pytest.raises(InvalidParameter):
            generate_shades('#12345')


class TestColorScale:
    """Named scales and helpers"""

    def test_generate_color_scale(self):
        scale = generate_color_scale('Brand', '#0EA5E9')
        assert scale.name == 'Brand'
        assert scale.base_color == '#0EA5E9'
        assert len(scale.shades) == 11
        assert scale.shade('950').value == '#0ea5e9'
        assert scale.shade('1000') is None

    @pytest.mark.parametrize("background,expected", [
        ('#3B82F6', '#ffffff'),
        ('#FFFF00', '#000000'),
        ('#FFFFFF', '#000000'),
        ('#000000', '#ffffff'),
        ('#808080', '#000000'),
    ])
    def test_pick_text_color(self, background, expected):
        assert pick_text_color(background) == expected

    def test_random_color_repeatable_with_seed(self):
        first = random_color(random.Random(42))
        second = random_color(random.Random(42))
        assert first == second
        assert parse_hex(first)

    def test_random_color_format(self):
        for _ in range(20):
            value = random_color()
            assert len(value) == 7
            assert value == value.lower()


class TestColorsCss:
    """Colour-only CSS with nested dark overrides"""

    def test_light_and_dark_values(self, state):
        css = render_colors_css(state.colors)
        assert css.startswith(":root {\n  --primary-50: #EFF6FF;\n")
        assert "\n  .dark {\n    --primary-50: #172554;\n" in css
        assert "    --primary-950: #EFF6FF;\n" in css
        assert css.endswith("  }\n}")
