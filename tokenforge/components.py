"""
Component token editing

Named border radii, border widths and transitions, plus the ordered
box-shadow list. Every function returns a new ComponentSettings.
"""
from dataclasses import replace

from .component_styles import COMPONENT_STYLES
from .errors import InvalidParameter
from .logger import app_logger
from .models import ComponentSettings


# Shadow names by position in the box-shadow list; index 5 and up share '2xl'
SHADOW_NAMES = ['none', 'sm', 'md', 'lg', 'xl']


def shadow_name(index: int) -> str:
    """Token name of the box shadow at `index`"""
    return SHADOW_NAMES[index] if index < len(SHADOW_NAMES) else '2xl'


def _require_text(value, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidParameter(f"{label} must be a non-empty string")
    return value.strip()


def _add_named(components: ComponentSettings, attr: str, label: str,
               name: str, value: str) -> ComponentSettings:
    name = _require_text(name, f"{label} name")
    value = _require_text(value, f"{label} value")
    tokens = dict(getattr(components, attr))
    tokens[name] = value
    app_logger.info(f"{label} '{name}' set to {value}")
    return replace(components, **{attr: tokens})


def add_border_radius(components: ComponentSettings, name: str, value: str) -> ComponentSettings:
    return _add_named(components, 'border_radius', 'Border radius', name, value)


def add_border_width(components: ComponentSettings, name: str, value: str) -> ComponentSettings:
    return _add_named(components, 'border_width', 'Border width', name, value)


def add_transition(components: ComponentSettings, name: str, value: str) -> ComponentSettings:
    return _add_named(components, 'transitions', 'Transition', name, value)


def add_box_shadow(components: ComponentSettings, shadow: str) -> ComponentSettings:
    """Append a box shadow; it is named by its position (see shadow_name)"""
    shadow = _require_text(shadow, 'Box shadow')
    app_logger.info(f"Box shadow '{shadow_name(len(components.box_shadow))}' added")
    return replace(components, box_shadow=[*components.box_shadow, shadow])


def component_snippet(component: str, variant: str = 'basic') -> str:
    """
    Starter styles for a component

    Args:
        component: 'button', 'input', 'dropdown' or 'card'
        variant: 'basic' (plain CSS on the exported custom properties)
                 or 'tailwind' (@layer components with @apply)
    """
    try:
        return COMPONENT_STYLES[component][variant].strip('\n')
    except KeyError:
        raise InvalidParameter(f"No '{variant}' styles for component {component!r}") from None
