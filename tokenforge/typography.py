"""
Typography Scale Engine

Derives an 11-step modular type scale (steps -2..8) from the base font
size and scale ratio, with line height, letter spacing and vertical
rhythm computed per step.
"""
import math
from typing import List, Optional, Tuple, Union

from .errors import InvalidParameter
from .formatting import format_number, to_fixed, round_half_up
from .logger import app_logger
from .models import TypographySettings, ScaleStep, Rhythm


# First and last step of the scale (inclusive)
MIN_STEP = -2
MAX_STEP = 8

# Root font size the rem values are relative to
ROOT_FONT_SIZE_PX = 16

# Steps above this are treated as headings for letter spacing
HEADING_STEP_THRESHOLD = 2

# Largest step size that still formats to fixed-point text
MAX_FONT_SIZE_PX = 1e24

# Classical scale ratios offered as presets
RATIO_OPTIONS = {
    'Minor Second (1.067)': 1.067,
    'Major Second (1.125)': 1.125,
    'Minor Third (1.2)': 1.2,
    'Major Third (1.25)': 1.25,
    'Perfect Fourth (1.333)': 1.333,
    'Perfect Fifth (1.5)': 1.5,
    'Golden Ratio (1.618)': 1.618,
}


def _preset_slug(label: str) -> str:
    """'Perfect Fourth (1.333)' -> 'perfect-fourth'"""
    return label.split('(')[0].strip().lower().replace(' ', '-')


def resolve_ratio(value: Union[str, float, int]) -> float:
    """
    Resolve a scale ratio from a preset label, preset slug or number

    Examples:
        'Perfect Fourth (1.333)' -> 1.333
        'golden-ratio' -> 1.618
        '1.2' -> 1.2
    """
    if isinstance(value, bool):
        raise InvalidParameter(f"Invalid scale ratio: {value!r}")
    if isinstance(value, (int, float)):
        ratio = float(value)
    else:
        text = str(value).strip()
        if text in RATIO_OPTIONS:
            return RATIO_OPTIONS[text]
        for label, preset in RATIO_OPTIONS.items():
            if _preset_slug(label) == text.lower():
                return preset
        try:
            ratio = float(text)
        except ValueError:
            raise InvalidParameter(f"Unknown scale ratio: {value!r}") from None

    if not ratio > 0 or ratio == float('inf'):
        raise InvalidParameter(f"scale_ratio must be a positive number, got {value!r}")
    return ratio


def calculate_line_height(font_size: float) -> float:
    """Line height for a font size: larger text gets tighter leading"""
    if font_size < 16:
        return 1.6
    elif font_size <= 24:
        return 1.5
    elif font_size <= 32:
        return 1.3
    return 1.2


def calculate_letter_spacing(font_size: float, is_heading: bool = False) -> float:
    """Letter spacing in em: tighten large headings, loosen small body text"""
    if is_heading:
        return -0.02 if font_size > 32 else -0.01
    return 0.015 if font_size < 16 else 0


def calculate_rhythm(font_size: float, line_height: float):
    """Baseline rhythm in px as (single, half, double)"""
    base_rhythm = round_half_up(font_size * line_height)
    return base_rhythm, base_rhythm / 2, base_rhythm * 2


def _rem(px: float) -> str:
    return to_fixed(px / ROOT_FONT_SIZE_PX, 3)


def _step_sizes(settings: TypographySettings) -> List[Tuple[int, float]]:
    """(step, size_px) for every step; raises InvalidParameter when a size overflows"""
    sizes = []
    for step in range(MIN_STEP, MAX_STEP + 1):
        try:
            size = settings.base_font_size_px * settings.scale_ratio ** step
        except OverflowError:
            size = math.inf
        if not math.isfinite(size) or size > MAX_FONT_SIZE_PX:
            raise InvalidParameter(
                f"Step {step} of the type scale is too large "
                f"(base_font_size_px={settings.base_font_size_px!r}, "
                f"scale_ratio={settings.scale_ratio!r})")
        sizes.append((step, size))
    return sizes


def generate_scale(settings: TypographySettings) -> List[ScaleStep]:
    """
    Generate the full type scale for the given settings.

    The scale is rebuilt from scratch on every call: step i has size
    base_font_size_px * scale_ratio ** i for i in -2..8.

    Raises:
        InvalidParameter: a base parameter is non-positive or not finite,
            or a step size overflows
    """
    settings.validate()
    sizes = _step_sizes(settings)

    scale = []
    for step, size in sizes:
        line_height = calculate_line_height(size)
        letter_spacing = calculate_letter_spacing(size, step > HEADING_STEP_THRESHOLD)
        single, half, double = calculate_rhythm(size, line_height)

        scale.append(ScaleStep(
            step=step,
            size_px=size,
            px=to_fixed(size, 1),
            rem=_rem(size),
            line_height=to_fixed(line_height, 3),
            letter_spacing_em=to_fixed(letter_spacing, 3),
            rhythm=Rhythm(single=_rem(single), half=_rem(half), double=_rem(double)),
        ))

    app_logger.debug(
        f"Generated type scale: base={format_number(settings.base_font_size_px)}px, "
        f"ratio={format_number(settings.scale_ratio)}, "
        f"{scale[0].px}px..{scale[-1].px}px"
    )
    return scale


# =============================================================================
# Standalone typography output
# =============================================================================

def render_typography_css(settings: TypographySettings,
                          scale: Optional[List[ScaleStep]] = None) -> str:
    """CSS custom properties for the type scale alone, with base values and an 8-step spacing scale"""
    if scale is None:
        scale = generate_scale(settings)
    fonts = settings.font_family

    steps = '\n'.join(
        f"\n  /* Step {s.step} - {s.px}px */"
        f"\n  --text-{s.step}: {s.rem}rem;"
        f"\n  --leading-{s.step}: {s.line_height};"
        f"\n  --tracking-{s.step}: {s.letter_spacing_em}em;"
        f"\n  --rhythm-{s.step}: {s.rhythm.single}rem;"
        f"\n  --rhythm-{s.step}-half: {s.rhythm.half}rem;"
        f"\n  --rhythm-{s.step}-double: {s.rhythm.double}rem;"
        for s in scale
    )
    spacing = '\n'.join(
        f"  --space-{i + 1}: {format_number((settings.base_unit_px * (i + 1)) / ROOT_FONT_SIZE_PX)}rem;"
        for i in range(8)
    )

    return (
        ":root {\n"
        "  /* Base Values */\n"
        f"  --base-font-size: {format_number(settings.base_font_size_px)}px;\n"
        f"  --base-line-height: {format_number(settings.base_line_height)};\n"
        f"  --scale-ratio: {format_number(settings.scale_ratio)};\n"
        f"  --base-unit: {format_number(settings.base_unit_px)}px;\n"
        f"  --font-family-body: {fonts.body};\n"
        f"  --font-family-heading: {fonts.heading};\n"
        f"  --font-family-mono: {fonts.monospace};\n"
        "\n"
        "  /* Font Scale with Computed Metrics */\n"
        f"{steps}\n"
        "\n"
        "  /* Spacing Scale */\n"
        f"{spacing}\n"
        "}"
    )


def render_typography_scss(settings: TypographySettings,
                           scale: Optional[List[ScaleStep]] = None) -> str:
    """SCSS variables for the type scale alone"""
    if scale is None:
        scale = generate_scale(settings)
    fonts = settings.font_family

    steps = '\n'.join(
        f"\n// Step {s.step} - {s.px}px"
        f"\n$text-{s.step}: {s.rem}rem;"
        f"\n$leading-{s.step}: {s.line_height};"
        f"\n$tracking-{s.step}: {s.letter_spacing_em}em;"
        f"\n$rhythm-{s.step}: {s.rhythm.single}rem;"
        f"\n$rhythm-{s.step}-half: {s.rhythm.half}rem;"
        f"\n$rhythm-{s.step}-double: {s.rhythm.double}rem;"
        for s in scale
    )

    return (
        "// Typography System\n"
        f"$base-font-size: {format_number(settings.base_font_size_px)}px;\n"
        f"$base-line-height: {format_number(settings.base_line_height)};\n"
        f"$scale-ratio: {format_number(settings.scale_ratio)};\n"
        f"$base-unit: {format_number(settings.base_unit_px)}px;\n"
        f"$font-family-body: {fonts.body};\n"
        f"$font-family-heading: {fonts.heading};\n"
        f"$font-family-mono: {fonts.monospace};\n"
        "\n"
        "// Font Scale with Computed Metrics\n"
        f"{steps}"
    )
