"""
Design System Export
Serialises a DesignSystemState to CSS custom properties, SCSS, a
Tailwind config or JSON

Each renderer is a pure function of (state, options): the same input
always gives byte-identical text.
"""
import json
import os
from typing import Optional

from app_config import EXPORT_FILENAMES

from .components import shadow_name
from .formatting import format_number
from .logger import app_logger
from .models import DesignSystemState, ExportFormat, ExportOptions
from .state import state_to_dict
from .typography import generate_scale


TAILWIND_TRANSITION_PROPERTY = (
    'color, background-color, border-color, text-decoration-color, fill, '
    'stroke, opacity, box-shadow, transform, filter, backdrop-filter'
)


def _rem(px) -> str:
    return format_number(px / 16)


# =============================================================================
# CSS
# =============================================================================

def render_css(state: DesignSystemState, options: Optional[ExportOptions] = None) -> str:
    """CSS custom properties in :root, plus a .dark block with reversed ramps"""
    options = options or ExportOptions()
    css = ":root {\n"

    if options.include_typography:
        typography = state.typography
        fonts = typography.font_family
        css += "  /* Typography */\n"
        css += f"  --base-font-size: {format_number(typography.base_font_size_px)}px;\n"
        css += f"  --base-line-height: {format_number(typography.base_line_height)};\n"
        css += f"  --font-family-body: {fonts.body};\n"
        css += f"  --font-family-heading: {fonts.heading};\n"
        css += f"  --font-family-mono: {fonts.monospace};\n\n"

        for size in generate_scale(typography):
            css += f"  --text-{size.step}: {size.rem}rem;\n"
            css += f"  --leading-{size.step}: {size.line_height};\n"
            css += f"  --tracking-{size.step}: {size.letter_spacing_em}em;\n"
            css += f"  --rhythm-{size.step}: {size.rhythm.single}rem;\n"
        css += "\n"

    if options.include_colors:
        css += "  /* Colors */\n"
        for role, scale in state.colors.items():
            for shade in scale.shades:
                css += f"  --{role}-{shade.name}: {shade.value};\n"
        css += "\n"

    if options.include_spacing:
        css += "  /* Spacing */\n"
        for index, value in enumerate(state.spacing.scale):
            css += f"  --space-{index}: {_rem(value)}rem;\n"
        css += "\n"

        css += "  /* Breakpoints */\n"
        for key, value in state.spacing.breakpoints.items():
            css += f"  --breakpoint-{key}: {value}px;\n"
        css += "\n"

    if options.include_components:
        components = state.components
        css += "  /* Border Radius */\n"
        for name, value in components.border_radius.items():
            css += f"  --radius-{name}: {value};\n"
        css += "\n"

        css += "  /* Border Width */\n"
        for name, value in components.border_width.items():
            css += f"  --border-{name}: {value};\n"
        css += "\n"

        css += "  /* Box Shadow */\n"
        for index, shadow in enumerate(components.box_shadow):
            css += f"  --shadow-{shadow_name(index)}: {shadow};\n"
        css += "\n"

        css += "  /* Transitions */\n"
        for name, value in components.transitions.items():
            css += f"  --transition-{name}: {value};\n"

    css += "}\n"

    if options.include_dark_mode:
        css += "\n.dark {\n"
        if options.include_colors:
            for role, scale in state.colors.items():
                count = len(scale.shades)
                for index, shade in enumerate(scale.shades):
                    # Shade i takes the value of shade N-1-i (950 <-> 50)
                    dark_value = scale.shades[count - 1 - index].value
                    css += f"  --{role}-{shade.name}: {dark_value};\n"
        css += "}\n"

    return css


# =============================================================================
# SCSS
# =============================================================================

def render_scss(state: DesignSystemState, options: Optional[ExportOptions] = None) -> str:
    """SCSS variables and maps with color() and space() lookup functions"""
    options = options or ExportOptions()
    scss = ""

    if options.include_typography:
        typography = state.typography
        fonts = typography.font_family
        scss += "// Typography\n"
        scss += f"$base-font-size: {format_number(typography.base_font_size_px)}px;\n"
        scss += f"$base-line-height: {format_number(typography.base_line_height)};\n"
        scss += f"$font-family-body: {fonts.body};\n"
        scss += f"$font-family-heading: {fonts.heading};\n"
        scss += f"$font-family-mono: {fonts.monospace};\n\n"

        scss += "// Type Scale\n"
        for size in generate_scale(typography):
            scss += f"$text-{size.step}: {size.rem}rem;\n"
            scss += f"$leading-{size.step}: {size.line_height};\n"
            scss += f"$tracking-{size.step}: {size.letter_spacing_em}em;\n"
            scss += f"$rhythm-{size.step}: {size.rhythm.single}rem;\n\n"

    if options.include_colors:
        scss += "// Colors\n"
        for role, scale in state.colors.items():
            scss += f"${role}: (\n"
            for shade in scale.shades:
                scss += f"  {shade.name}: {shade.value},\n"
            scss += ");\n\n"

        scss += "// Color function\n"
        scss += "@function color($color, $shade) {\n"
        scss += "  @return map-get($#{$color}, $shade);\n"
        scss += "}\n\n"

    if options.include_spacing:
        scss += "// Spacing\n"
        scss += "$spacing: (\n"
        for index, value in enumerate(state.spacing.scale):
            scss += f"  {index}: {_rem(value)}rem,\n"
        scss += ");\n\n"

        scss += "// Spacing function\n"
        scss += "@function space($size) {\n"
        scss += "  @return map-get($spacing, $size);\n"
        scss += "}\n\n"

        scss += "// Breakpoints\n"
        scss += "$breakpoints: (\n"
        for key, value in state.spacing.breakpoints.items():
            scss += f"  {key}: {value}px,\n"
        scss += ");\n\n"

    if options.include_components:
        components = state.components
        scss += "// Border Radius\n"
        scss += "$border-radius: (\n"
        for name, value in components.border_radius.items():
            scss += f"  {name}: {value},\n"
        scss += ");\n\n"

        scss += "// Border Width\n"
        scss += "$border-width: (\n"
        for name, value in components.border_width.items():
            scss += f"  {name}: {value},\n"
        scss += ");\n\n"

        scss += "// Box Shadow\n"
        scss += "$shadow: (\n"
        for index, shadow in enumerate(components.box_shadow):
            scss += f"  {shadow_name(index)}: {shadow},\n"
        scss += ");\n\n"

        scss += "// Transitions\n"
        scss += "$transitions: (\n"
        for name, value in components.transitions.items():
            scss += f"  {name}: {value},\n"
        scss += ");\n"

    return scss


# =============================================================================
# TAILWIND
# =============================================================================

def render_tailwind(state: DesignSystemState, options: Optional[ExportOptions] = None) -> str:
    """tailwind.config.js with the tokens under theme.extend"""
    options = options or ExportOptions()
    config = (
        "/** @type {import('tailwindcss').Config} */\n"
        "module.exports = {\n"
        "  theme: {\n"
        "    extend: {"
    )

    if options.include_typography:
        typography = state.typography
        fonts = typography.font_family
        config += "\n      fontSize: {"
        for size in generate_scale(typography):
            config += (
                f"\n        '{size.step}': ['{size.rem}rem', {{\n"
                f"          lineHeight: {size.line_height},\n"
                f"          letterSpacing: '{size.letter_spacing_em}em'\n"
                f"        }}],"
            )
        config += "\n      },"

        config += (
            "\n      fontFamily: {\n"
            f"        sans: ['{fonts.body.split(',')[0]}', 'sans-serif'],\n"
            f"        heading: ['{fonts.heading.split(',')[0]}', 'sans-serif'],\n"
            f"        mono: ['{fonts.monospace.split(',')[0]}', 'monospace'],\n"
            "      },"
        )

    if options.include_colors:
        config += "\n      colors: {"
        for role, scale in state.colors.items():
            config += f"\n        {role}: {{"
            for shade in scale.shades:
                config += f"\n          '{shade.name}': '{shade.value}',"
            config += "\n        },"
        config += "\n      },"

    if options.include_spacing:
        config += "\n      spacing: {"
        for index, value in enumerate(state.spacing.scale):
            config += f"\n        '{index}': '{_rem(value)}rem',"
        config += "\n      },"

        config += "\n      screens: {"
        for key, value in state.spacing.breakpoints.items():
            config += f"\n        '{key}': '{value}px',"
        config += "\n      },"

    if options.include_components:
        components = state.components
        config += "\n      borderRadius: {"
        for name, value in components.border_radius.items():
            config += f"\n        '{name}': '{value}',"
        config += "\n      },"

        config += "\n      borderWidth: {"
        for name, value in components.border_width.items():
            config += f"\n        '{name}': '{value}',"
        config += "\n      },"

        config += "\n      boxShadow: {"
        for index, shadow in enumerate(components.box_shadow):
            config += f"\n        '{shadow_name(index)}': '{shadow}',"
        config += "\n      },"

        config += (
            "\n      transitionProperty: {\n"
            f"        'DEFAULT': '{TAILWIND_TRANSITION_PROPERTY}',\n"
            "      },"
        )

    config += "\n    },\n  },"

    if options.include_dark_mode:
        config += "\n  darkMode: 'class',"

    config += "\n}"
    return config


# =============================================================================
# JSON
# =============================================================================

def render_json(state: DesignSystemState, options: Optional[ExportOptions] = None) -> str:
    """The state document restricted to the enabled sections, indented by 2"""
    options = options or ExportOptions()
    document = state_to_dict(state, include_scale=options.include_typography)

    sections = {
        'typography': options.include_typography,
        'colors': options.include_colors,
        'spacing': options.include_spacing,
        'components': options.include_components,
    }
    filtered = {key: document[key] for key, enabled in sections.items() if enabled}
    return json.dumps(filtered, indent=2, ensure_ascii=False)


_RENDERERS = {
    ExportFormat.CSS: render_css,
    ExportFormat.SCSS: render_scss,
    ExportFormat.TAILWIND: render_tailwind,
    ExportFormat.JSON: render_json,
}


def render(state: DesignSystemState, fmt, options: Optional[ExportOptions] = None) -> str:
    """
    Render the design system in the requested format

    Args:
        state: Design system to export
        fmt: ExportFormat or tag ('css', 'scss', 'tailwind', 'json')
        options: Sections to include (default: everything)

    Raises:
        UnsupportedFormat: unknown format tag
        InvalidParameter: the typography settings are invalid
    """
    export_format = ExportFormat.parse(fmt)
    return _RENDERERS[export_format](state, options or ExportOptions())


def export_filename(fmt) -> str:
    """Download file name for a format ('tailwind' -> 'tailwind.config.js')"""
    return EXPORT_FILENAMES[ExportFormat.parse(fmt).value]


def write_export(state: DesignSystemState, fmt, path: str,
                 options: Optional[ExportOptions] = None) -> str:
    """
    Render and write an export file

    Args:
        path: Target file, or an existing directory to write export_filename(fmt) into

    Returns:
        The path written
    """
    text = render(state, fmt, options)
    if os.path.isdir(path):
        path = os.path.join(path, export_filename(fmt))

    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(text)

    app_logger.info(f"Design system exported as {ExportFormat.parse(fmt).value.upper()}: {path}")
    return path
