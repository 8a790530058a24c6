"""
TokenForge - design system token generator

Typography scales, colour ramps, spacing and component tokens, exported
as CSS custom properties, SCSS, a Tailwind config or JSON.
"""
from .errors import TokenForgeError, InvalidParameter, DuplicateToken, UnsupportedFormat
from .models import (
    TypographySettings, FontFamily, ScaleStep, Rhythm,
    ColorAdjustment, ColorShade, ColorScale,
    SpacingSettings, ComponentSettings, DesignSystemState,
    ExportFormat, ExportOptions, SHADE_NAMES, COLOR_ROLES,
)
from .typography import generate_scale, resolve_ratio, RATIO_OPTIONS
from .colors import generate_shades, generate_color_scale, pick_text_color, parse_hex, random_color
from .defaults import default_state
from .state import (
    reset_to_defaults, update_typography, update_colors, update_spacing,
    update_components, regenerate_color_role, state_to_dict, state_from_dict,
)
from .export import render, export_filename, write_export

__all__ = [
    'TokenForgeError', 'InvalidParameter', 'DuplicateToken', 'UnsupportedFormat',
    'TypographySettings', 'FontFamily', 'ScaleStep', 'Rhythm',
    'ColorAdjustment', 'ColorShade', 'ColorScale',
    'SpacingSettings', 'ComponentSettings', 'DesignSystemState',
    'ExportFormat', 'ExportOptions', 'SHADE_NAMES', 'COLOR_ROLES',
    'generate_scale', 'resolve_ratio', 'RATIO_OPTIONS',
    'generate_shades', 'generate_color_scale', 'pick_text_color', 'parse_hex', 'random_color',
    'default_state',
    'reset_to_defaults', 'update_typography', 'update_colors', 'update_spacing',
    'update_components', 'regenerate_color_role', 'state_to_dict', 'state_from_dict',
    'render', 'export_filename', 'write_export',
]
