"""
Design system state updates

A DesignSystemState is owned by the caller; each function here returns a
new state with one whole field replaced and never mutates its input.
state_to_dict/state_from_dict convert to and from the camelCase document
used by the JSON export.
"""
from dataclasses import replace
from typing import Any, Dict, Mapping, Optional

from .colors import generate_color_scale, parse_hex
from .defaults import (
    default_state, default_typography, default_colors,
    default_spacing, default_components,
)
from .errors import InvalidParameter
from .logger import app_logger
from .models import (
    DesignSystemState, TypographySettings, FontFamily, ColorScale, ColorShade,
    ColorAdjustment, SpacingSettings, ComponentSettings, COLOR_ROLES, SHADE_NAMES,
)
from .typography import generate_scale


def reset_to_defaults() -> DesignSystemState:
    """Fresh state holding the default tokens"""
    app_logger.info("Design system reset to defaults")
    return default_state()


def update_typography(state: DesignSystemState, typography: TypographySettings) -> DesignSystemState:
    typography.validate()
    return replace(state, typography=typography)


def update_colors(state: DesignSystemState, colors: Mapping[str, ColorScale]) -> DesignSystemState:
    """Replace the given colour roles; roles not named keep their scale"""
    for role, scale in colors.items():
        if role not in COLOR_ROLES:
            raise InvalidParameter(f"Unknown colour role: {role!r}")
        _validate_color_scale(role, scale)
    merged = dict(state.colors)
    merged.update(colors)
    return replace(state, colors=merged)


def update_spacing(state: DesignSystemState, spacing: SpacingSettings) -> DesignSystemState:
    _validate_spacing(spacing)
    return replace(state, spacing=spacing)


def update_components(state: DesignSystemState, components: ComponentSettings) -> DesignSystemState:
    _validate_components(components)
    return replace(state, components=components)


def regenerate_color_role(state: DesignSystemState, role: str, base_hex: str,
                          adjust: Optional[ColorAdjustment] = None,
                          name: Optional[str] = None) -> DesignSystemState:
    """Regenerate one role's ramp from a new base colour"""
    if role not in COLOR_ROLES:
        raise InvalidParameter(f"Unknown colour role: {role!r}")
    if name is None:
        name = state.colors[role].name if role in state.colors else role.capitalize()
    scale = generate_color_scale(name, base_hex, adjust)
    return update_colors(state, {role: scale})


def _validate_color_scale(role: str, scale: ColorScale) -> None:
    parse_hex(scale.base_color)
    for shade in scale.shades:
        try:
            parse_hex(shade.value)
        except InvalidParameter as e:
            raise InvalidParameter(f"{role}-{shade.name}: {e}") from None
    names = [shade.name for shade in scale.shades]
    if names != SHADE_NAMES:
        raise InvalidParameter(
            f"{role} must have shades {', '.join(SHADE_NAMES)} in order, got {names}")


def _non_negative_int(value, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidParameter(f"{label} must be a non-negative integer, got {value!r}")
    return value


def _validate_spacing(spacing: SpacingSettings) -> None:
    _non_negative_int(spacing.base_unit, 'baseUnit')
    for value in spacing.scale:
        _non_negative_int(value, 'spacing value')
    for key, value in spacing.breakpoints.items():
        _non_negative_int(value, f"breakpoint {key}")


def _validate_components(components: ComponentSettings) -> None:
    named = (
        ('border radius', components.border_radius),
        ('border width', components.border_width),
        ('transition', components.transitions),
    )
    for label, tokens in named:
        for key, value in tokens.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise InvalidParameter(f"{label} {key!r} must map a name to a string value")
    for shadow in components.box_shadow:
        if not isinstance(shadow, str):
            raise InvalidParameter(f"box shadow must be a string, got {shadow!r}")


# =============================================================================
# Dict conversion
# =============================================================================

def state_to_dict(state: DesignSystemState, include_scale: bool = True) -> Dict[str, Any]:
    """
    Convert state to the exported document shape

    Args:
        state: Design system state
        include_scale: Add the derived type scale under typography.scale
    """
    typography = state.typography.to_dict()
    if include_scale:
        typography['scale'] = [step.to_dict() for step in generate_scale(state.typography)]

    return {
        'typography': typography,
        'colors': {role: scale.to_dict() for role, scale in state.colors.items()},
        'spacing': state.spacing.to_dict(),
        'components': state.components.to_dict(),
    }


def _number(data: Mapping[str, Any], key: str, default):
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameter(f"{key} must be a number, got {value!r}")
    return value


def _typography_from_dict(data: Mapping[str, Any]) -> TypographySettings:
    defaults = default_typography()
    fonts = data.get('fontFamily', {})
    font_family = FontFamily(
        body=str(fonts.get('body', defaults.font_family.body)),
        heading=str(fonts.get('heading', defaults.font_family.heading)),
        monospace=str(fonts.get('monospace', defaults.font_family.monospace)),
    )
    settings = TypographySettings(
        base_font_size_px=_number(data, 'baseFontSize', defaults.base_font_size_px),
        base_line_height=_number(data, 'baseLineHeight', defaults.base_line_height),
        scale_ratio=_number(data, 'scaleRatio', defaults.scale_ratio),
        base_unit_px=_number(data, 'baseUnit', defaults.base_unit_px),
        font_family=font_family,
    )
    settings.validate()
    return settings


def _colors_from_dict(data: Mapping[str, Any]) -> Dict[str, ColorScale]:
    colors = default_colors()
    for role, entry in data.items():
        if role not in COLOR_ROLES:
            raise InvalidParameter(f"Unknown colour role: {role!r}")
        name = entry.get('name', colors[role].name)
        base = entry.get('color', colors[role].base_color)
        if 'shades' in entry:
            scale = ColorScale(
                name=name,
                base_color=base,
                shades=[ColorShade(name=str(s['name']), value=s['value']) for s in entry['shades']],
            )
            _validate_color_scale(role, scale)
        else:
            scale = generate_color_scale(name, base)
        colors[role] = scale
    return colors


def _spacing_from_dict(data: Mapping[str, Any]) -> SpacingSettings:
    defaults = default_spacing()
    spacing = SpacingSettings(
        base_unit=data.get('baseUnit', defaults.base_unit),
        scale=list(data.get('scale', defaults.scale)),
        breakpoints={str(k): v for k, v in data.get('breakpoints', defaults.breakpoints).items()},
    )
    _validate_spacing(spacing)
    return spacing


def _components_from_dict(data: Mapping[str, Any]) -> ComponentSettings:
    defaults = default_components()
    return ComponentSettings(
        border_radius={str(k): str(v) for k, v in data.get('borderRadius', defaults.border_radius).items()},
        border_width={str(k): str(v) for k, v in data.get('borderWidth', defaults.border_width).items()},
        box_shadow=[str(v) for v in data.get('boxShadow', defaults.box_shadow)],
        transitions={str(k): str(v) for k, v in data.get('transitions', defaults.transitions).items()},
    )


def state_from_dict(data: Mapping[str, Any]) -> DesignSystemState:
    """
    Build a state from an exported document

    Missing sections (and missing keys inside a section) fall back to the
    defaults, so a partial JSON export can be loaded. A derived
    typography.scale entry is ignored; it is always recomputed.

    Raises:
        InvalidParameter: a value fails validation
    """
    if not isinstance(data, Mapping):
        raise InvalidParameter("Design system document must be a JSON object")
    try:
        return DesignSystemState(
            typography=_typography_from_dict(data.get('typography', {})),
            colors=_colors_from_dict(data.get('colors', {})),
            spacing=_spacing_from_dict(data.get('spacing', {})),
            components=_components_from_dict(data.get('components', {})),
        )
    except (AttributeError, KeyError, TypeError) as e:
        raise InvalidParameter(f"Malformed design system document: {e}") from e
