"""
Spacing scale editing

Pure functions over SpacingSettings. Each returns a new settings value;
the input is left untouched.
"""
from dataclasses import replace

from .errors import InvalidParameter, DuplicateToken
from .formatting import format_number
from .logger import app_logger
from .models import SpacingSettings


def _require_positive_int(value, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidParameter(f"{label} must be a positive integer, got {value!r}")
    return value


def set_base_unit(spacing: SpacingSettings, value: int) -> SpacingSettings:
    _require_positive_int(value, 'Base unit')
    app_logger.info(f"Base unit set to {value}px")
    return replace(spacing, base_unit=value)


def add_spacing_value(spacing: SpacingSettings, value: int) -> SpacingSettings:
    """
    Insert a px value into the scale, keeping it sorted

    Raises:
        DuplicateToken: value already in the scale
    """
    _require_positive_int(value, 'Spacing value')
    if value in spacing.scale:
        raise DuplicateToken(f"{value}px already exists in the spacing scale")
    app_logger.info(f"Added {value}px to spacing scale")
    return replace(spacing, scale=sorted([*spacing.scale, value]))


def remove_spacing_value(spacing: SpacingSettings, value: int) -> SpacingSettings:
    if value not in spacing.scale:
        raise InvalidParameter(f"{value}px is not in the spacing scale")
    app_logger.info(f"Removed {value}px from spacing scale")
    return replace(spacing, scale=[v for v in spacing.scale if v != value])


def update_breakpoint(spacing: SpacingSettings, key: str, value: int) -> SpacingSettings:
    if key not in spacing.breakpoints:
        raise InvalidParameter(f"Unknown breakpoint: {key!r}")
    _require_positive_int(value, f"Breakpoint {key}")
    breakpoints = dict(spacing.breakpoints)
    breakpoints[key] = value
    return replace(spacing, breakpoints=breakpoints)


def render_spacing_css(spacing: SpacingSettings) -> str:
    """CSS custom properties for the spacing scale and breakpoints alone"""
    css = ":root {\n"
    css += "  /* Spacing Scale */\n"
    for index, value in enumerate(spacing.scale):
        css += f"  --space-{index}: {format_number(value / 16)}rem; /* {value}px */\n"

    css += "\n  /* Breakpoints */\n"
    for key, value in spacing.breakpoints.items():
        css += f"  --breakpoint-{key}: {value}px;\n"

    css += "}"
    return css
