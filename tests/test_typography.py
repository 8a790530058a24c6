"""
Test type scale generation and standalone typography output
"""
import pytest
import os
import sys
from dataclasses import replace

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from tokenforge.errors import InvalidParameter
from tokenforge.formatting import format_number, to_fixed, round_half_up
from tokenforge.models import TypographySettings
from tokenforge.typography import (
    generate_scale,
    calculate_line_height,
    calculate_letter_spacing,
    calculate_rhythm,
    resolve_ratio,
    render_typography_css,
    render_typography_scss,
    RATIO_OPTIONS,
)


class TestFormatting:
    """Number rendering shared by every emitter"""

    def test_format_number_drops_trailing_zero(self):
        assert format_number(16) == '16'
        assert format_number(16.0) == '16'
        assert format_number(0.0) == '0'
        assert format_number(-0.0) == '0'

    def test_format_number_keeps_shortest_repr(self):
        assert format_number(0.25) == '0.25'
        assert format_number(1.333) == '1.333'
        assert format_number(1.5) == '1.5'

    def test_to_fixed_rounds_ties_away_from_zero(self):
        """1.5625 is exactly representable, so it is a real tie"""
        assert to_fixed(1.5625, 3) == '1.563'
        assert to_fixed(2.3125, 3) == '2.313'
        assert to_fixed(0.0625, 3) == '0.063'

    def test_to_fixed_negative_and_zero(self):
        assert to_fixed(-0.02, 3) == '-0.020'
        assert to_fixed(0, 3) == '0.000'
        assert to_fixed(-0.0001, 3) == '0.000'

    def test_round_half_up(self):
        assert round_half_up(19.5) == 20
        assert round_half_up(18.5) == 19
        assert round_half_up(18.49) == 18


class TestScaleShape:
    """Structure of the generated scale"""

    def test_eleven_steps_in_order(self, default_settings):
        scale = generate_scale(default_settings)
        assert len(scale) == 11
        assert [s.step for s in scale] == list(range(-2, 9))

    @pytest.mark.parametrize("ratio", [1.067, 1.25, 1.618, 2.0])
    def test_geometric_progression(self, default_settings, ratio):
        scale = generate_scale(replace(default_settings, scale_ratio=ratio))
        for lower, upper in zip(scale, scale[1:]):
            assert upper.size_px == pytest.approx(lower.size_px * ratio)

    def test_regenerated_in_full(self, default_settings):
        """Same input gives equal, independent results"""
        first = generate_scale(default_settings)
        second = generate_scale(default_settings)
        assert first == second
        assert first is not second

    def test_changing_settings_changes_every_step(self, default_settings):
        before = generate_scale(default_settings)
        after = generate_scale(replace(default_settings, base_font_size_px=18))
        for old, new in zip(before, after):
            assert old.size_px != new.size_px


class TestScaleValues:
    """Concrete values for the default 16px / 1.333 scale"""

    def test_step_zero(self, default_settings):
        step = generate_scale(default_settings)[2]
        assert step.step == 0
        assert step.size_px == 16.0
        assert step.px == '16.0'
        assert step.rem == '1.000'
        assert step.line_height == '1.500'
        assert step.letter_spacing_em == '0.000'
        assert step.rhythm.single == '1.500'
        assert step.rhythm.half == '0.750'
        assert step.rhythm.double == '3.000'

    def test_step_one(self, default_settings):
        step = generate_scale(default_settings)[3]
        assert step.size_px == pytest.approx(21.328)
        assert step.rem == '1.333'
        assert step.px == '21.3'
        assert step.line_height == '1.500'

    def test_small_steps_loosen_tracking(self, default_settings):
        smallest = generate_scale(default_settings)[0]
        assert smallest.px == '9.0'
        assert smallest.line_height == '1.600'
        assert smallest.letter_spacing_em == '0.015'

    def test_rhythm_ties_round_up(self, default_settings):
        """Step 2: round(28.43 * 1.3) = 37px -> 2.3125rem"""
        step = generate_scale(default_settings)[4]
        assert step.line_height == '1.300'
        assert step.rhythm.single == '2.313'

    def test_headings_tighten_tracking(self, default_settings):
        scale = generate_scale(default_settings)
        step_three = scale[5]
        assert step_three.is_heading
        assert step_three.size_px > 32
        assert step_three.line_height == '1.200'
        assert step_three.letter_spacing_em == '-0.020'

    def test_small_heading_tracking(self):
        """A heading at or below 32px gets -0.01em"""
        settings = TypographySettings(base_font_size_px=8, scale_ratio=1.2)
        step_three = generate_scale(settings)[5]
        assert step_three.size_px <= 32
        assert step_three.letter_spacing_em == '-0.010'


class TestScaleHelpers:
    """Piecewise helpers"""

    @pytest.mark.parametrize("size,expected", [
        (12, 1.6), (15.99, 1.6), (16, 1.5), (24, 1.5), (24.01, 1.3), (32, 1.3), (32.01, 1.2), (96, 1.2),
    ])
    def test_line_height_thresholds(self, size, expected):
        assert calculate_line_height(size) == expected

    def test_letter_spacing(self):
        assert calculate_letter_spacing(40, is_heading=True) == -0.02
        assert calculate_letter_spacing(30, is_heading=True) == -0.01
        assert calculate_letter_spacing(12) == 0.015
        assert calculate_letter_spacing(16) == 0

    def test_rhythm(self):
        assert calculate_rhythm(16, 1.5) == (24, 12, 48)
        assert calculate_rhythm(13, 1.5) == (20, 10, 40)


class TestValidation:
    """Invalid settings are rejected before computing"""

    @pytest.mark.parametrize("field,value", [
        ('base_font_size_px', 0),
        ('base_font_size_px', -16),
        ('scale_ratio', 0),
        ('scale_ratio', -1.2),
        ('scale_ratio', float('nan')),
        ('base_unit_px', 0),
        ('base_line_height', float('inf')),
    ])
    def test_rejects_bad_parameters(self, default_settings, field, value):
        with pytest.raises(InvalidParameter):
            generate_scale(replace(default_settings, **{field: value}))

    @pytest.mark.parametrize("field,value", [
        ('scale_ratio', 2000),
        ('scale_ratio', 1e50),
        ('scale_ratio', 1e-200),
        ('base_font_size_px', 1e307),
    ])
    def test_rejects_overflowing_scale(self, default_settings, field, value):
        """Sizes too large to format are rejected up front"""
        with pytest.raises(InvalidParameter, match='too large'):
            generate_scale(replace(default_settings, **{field: value}))

    def test_largest_formattable_scale(self, default_settings):
        scale = generate_scale(replace(default_settings, base_font_size_px=1e20, scale_ratio=1.5))
        assert len(scale) == 11
        assert scale[-1].px.endswith('.0')

    def test_rejects_non_numbers(self, default_settings):
        with pytest.raises(InvalidParameter):
            generate_scale(replace(default_settings, base_font_size_px='16'))


class TestRatioPresets:
    """Scale ratio presets"""

    def test_label_lookup(self):
        assert resolve_ratio('Perfect Fourth (1.333)') == 1.333

    def test_slug_lookup(self):
        assert resolve_ratio('golden-ratio') == 1.618
        assert resolve_ratio('Minor-Third') == 1.2

    def test_numbers(self):
        assert resolve_ratio('1.414') == 1.414
        assert resolve_ratio(2) == 2.0

    def test_rejects_unknown(self):
        with pytest.raises(InvalidParameter):
            resolve_ratio('perfect-eleventh')
        with pytest.raises(InvalidParameter):
            resolve_ratio('-1.2')

    def test_all_presets_above_one(self):
        assert len(RATIO_OPTIONS) == 7
        assert all(value > 1 for value in RATIO_OPTIONS.values())


class TestStandaloneOutput:
    """Typography-only CSS and SCSS"""

    def test_css_base_values(self, default_settings):
        css = render_typography_css(default_settings)
        assert css.startswith(":root {\n  /* Base Values */\n  --base-font-size: 16px;\n")
        assert "  --scale-ratio: 1.333;\n" in css
        assert "  --base-unit: 8px;\n" in css
        assert "  --font-family-mono: monospace;\n" in css

    def test_css_steps_and_spacing(self, default_settings):
        css = render_typography_css(default_settings)
        assert "  /* Font Scale with Computed Metrics */\n\n  /* Step -2 - 9.0px */\n" in css
        assert "  --rhythm-0-half: 0.750rem;\n  --rhythm-0-double: 3.000rem;\n\n  /* Step 1" in css
        assert "  --space-1: 0.5rem;\n" in css
        assert "  --space-8: 4rem;\n}" in css
        assert css.endswith("\n}")

    def test_scss(self, default_settings):
        scss = render_typography_scss(default_settings)
        assert scss.startswith("// Typography System\n$base-font-size: 16px;\n")
        assert "\n// Step 0 - 16.0px\n$text-0: 1.000rem;\n" in scss
        assert scss.rstrip().endswith("rem;")

    def test_uses_given_scale(self, default_settings):
        scale = generate_scale(default_settings)
        assert render_typography_css(default_settings, scale) == render_typography_css(default_settings)
