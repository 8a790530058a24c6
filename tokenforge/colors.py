"""
Color Ramp Engine

Builds an 11-step shade ramp (50..950) from a base colour by linear
interpolation towards white, with optional luminance, contrast and
saturation adjustments. Also hosts the hex helpers and the YIQ
text-colour picker.
"""
import random
import re
from typing import Dict, List, Optional, Tuple

import numpy as np

from .errors import InvalidParameter
from .logger import app_logger
from .models import ColorAdjustment, ColorShade, ColorScale, SHADE_NAMES


_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{6})$')

# YIQ brightness at or above which dark text is used
YIQ_THRESHOLD = 128


def parse_hex(value: str) -> Tuple[int, int, int]:
    """
    Parse '#RRGGBB' (or 'RRGGBB') into an (r, g, b) tuple

    Raises:
        InvalidParameter: wrong length or non-hex characters
    """
    if not isinstance(value, str):
        raise InvalidParameter(f"Hex colour must be a string, got {value!r}")
    match = _HEX_RE.match(value.strip())
    if not match:
        raise InvalidParameter(f"Invalid hex colour: {value!r} (expected #RRGGBB)")
    digits = match.group(1)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def to_hex(rgb) -> str:
    """(r, g, b) -> '#rrggbb'"""
    r, g, b = (int(c) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def _round_clip(channels: np.ndarray) -> np.ndarray:
    """Round half up and clamp to the 0..255 channel range"""
    return np.clip(np.floor(channels + 0.5), 0, 255)


def generate_shades(base_hex: str, adjust: Optional[ColorAdjustment] = None) -> List[ColorShade]:
    """
    Generate the 11 shades of a base colour.

    Step k (0 for '50' .. 10 for '950') mixes the base towards white by
    lightness_factor = 1 - k/10, scaled by (1 + luminance/100). Contrast
    then pushes channels away from mid-grey and saturation away from the
    per-shade channel average. Each stage rounds and clamps on its own,
    so with contrast or saturation set the ramp is not guaranteed to be
    monotonic in lightness.

    Args:
        base_hex: Base colour as '#RRGGBB'
        adjust: Slider values, each in [-50, 50] (default: all 0)

    Returns:
        11 ColorShade records named '50'..'950', values lowercase '#rrggbb'

    Raises:
        InvalidParameter: malformed hex or adjustment out of range
    """
    if adjust is None:
        adjust = ColorAdjustment()
    adjust.validate()
    base = np.array(parse_hex(base_hex), dtype=np.float64)

    steps = len(SHADE_NAMES)
    lightness = 1.0 - np.arange(steps, dtype=np.float64) / (steps - 1)

    # (11, 3) matrix: one row per shade
    shades = base + (255.0 - base) * lightness[:, np.newaxis] * (1 + adjust.luminance / 100)
    shades = _round_clip(shades)

    if adjust.contrast != 0:
        factor = 1 + adjust.contrast / 200
        shades = _round_clip((shades - 128.0) * factor + 128.0)

    if adjust.saturation != 0:
        factor = 1 + adjust.saturation / 100
        average = shades.mean(axis=1, keepdims=True)
        shades = _round_clip((shades - average) * factor + average)

    values = [to_hex(row) for row in shades.astype(np.uint8)]
    app_logger.debug(f"Generated {steps} shades for {base_hex} "
                     f"(contrast={adjust.contrast}, saturation={adjust.saturation}, "
                     f"luminance={adjust.luminance})")
    return [ColorShade(name=name, value=value) for name, value in zip(SHADE_NAMES, values)]


def generate_color_scale(name: str, base_hex: str,
                         adjust: Optional[ColorAdjustment] = None) -> ColorScale:
    """Build a complete ColorScale for a named base colour"""
    shades = generate_shades(base_hex, adjust)
    return ColorScale(name=name, base_color=base_hex, shades=shades)


def pick_text_color(hex_color: str) -> str:
    """
    Choose black or white text for a background colour

    Uses YIQ perceived brightness: (R*299 + G*587 + B*114) / 1000.
    """
    r, g, b = parse_hex(hex_color)
    yiq = (r * 299 + g * 587 + b * 114) / 1000
    return '#000000' if yiq >= YIQ_THRESHOLD else '#ffffff'


def random_color(rng: Optional[random.Random] = None) -> str:
    """Random '#rrggbb' colour; pass a seeded Random for repeatable results"""
    rng = rng or random
    return f"#{rng.randrange(0xFFFFFF):06x}"


def render_colors_css(colors: Dict[str, ColorScale]) -> str:
    """
    CSS for the colour roles alone, with dark-mode overrides

    The .dark block is nested inside :root and maps shade i to the
    value at N-1-i of the same role.
    """
    css = ":root {\n"
    dark_css = "  .dark {\n"

    for key, scale in colors.items():
        count = len(scale.shades)
        for index, shade in enumerate(scale.shades):
            css += f"  --{key}-{shade.name}: {shade.value};\n"
            dark_index = count - 1 - index
            dark_css += f"    --{key}-{shade.name}: {scale.shades[dark_index].value};\n"

    return css + "\n" + dark_css + "  }\n}"
