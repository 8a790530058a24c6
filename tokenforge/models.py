"""
Design System Data Model

Dataclasses shared by the typography, colour and export modules.
All records are frozen: a change is made by building a new value
(see tokenforge.state), never by mutating one in place.
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Any, Optional

from .errors import InvalidParameter, UnsupportedFormat


# Conventional shade names, lightest first
SHADE_NAMES = ['50', '100', '200', '300', '400', '500', '600', '700', '800', '900', '950']

# Semantic colour roles, in export order
COLOR_ROLES = ['primary', 'secondary', 'accent', 'neutral', 'success', 'warning', 'error', 'info']

# Adjustment slider range
ADJUSTMENT_MIN = -50
ADJUSTMENT_MAX = 50


def _require_positive(name: str, value) -> None:
    """Raise InvalidParameter unless value is a finite number > 0"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameter(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameter(f"{name} must be a positive number, got {value!r}")


# =============================================================================
# Typography
# =============================================================================

@dataclass(frozen=True)
class FontFamily:
    """Font stacks for body copy, headings and code"""
    body: str = 'Inter, system-ui, sans-serif'
    heading: str = 'Inter, system-ui, sans-serif'
    monospace: str = 'monospace'

    def to_dict(self) -> Dict[str, str]:
        return {'body': self.body, 'heading': self.heading, 'monospace': self.monospace}


@dataclass(frozen=True)
class TypographySettings:
    """
    Base parameters of the type scale.

    Every derived value (sizes, line heights, tracking, rhythm) is a pure
    function of these four numbers; see tokenforge.typography.
    """
    base_font_size_px: float = 16
    base_line_height: float = 1.5
    scale_ratio: float = 1.333
    base_unit_px: float = 8
    font_family: FontFamily = field(default_factory=FontFamily)

    def validate(self) -> None:
        """Reject non-positive or non-finite parameters"""
        _require_positive('base_font_size_px', self.base_font_size_px)
        _require_positive('base_line_height', self.base_line_height)
        _require_positive('scale_ratio', self.scale_ratio)
        _require_positive('base_unit_px', self.base_unit_px)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'baseFontSize': self.base_font_size_px,
            'baseLineHeight': self.base_line_height,
            'scaleRatio': self.scale_ratio,
            'baseUnit': self.base_unit_px,
            'fontFamily': self.font_family.to_dict(),
        }


@dataclass(frozen=True)
class Rhythm:
    """Vertical rhythm in rem, formatted to 3 decimals"""
    single: str
    half: str
    double: str

    def to_dict(self) -> Dict[str, str]:
        return {'single': self.single, 'half': self.half, 'double': self.double}


@dataclass(frozen=True)
class ScaleStep:
    """One step of the type scale (steps -2..8)"""
    step: int
    size_px: float            # Raw computed size
    px: str                   # size_px, 1 decimal
    rem: str                  # size_px / 16, 3 decimals
    line_height: str          # Unitless, 3 decimals
    letter_spacing_em: str    # em, 3 decimals
    rhythm: Rhythm

    @property
    def is_heading(self) -> bool:
        return self.step > 2

    def to_dict(self) -> Dict[str, Any]:
        return {
            'step': self.step,
            'rem': self.rem,
            'px': self.px,
            'lineHeight': self.line_height,
            'letterSpacing': self.letter_spacing_em,
            'rhythm': self.rhythm.to_dict(),
        }


# =============================================================================
# Colour
# =============================================================================

@dataclass(frozen=True)
class ColorAdjustment:
    """Transient slider values applied while generating a ramp"""
    contrast: int = 0
    saturation: int = 0
    luminance: int = 0

    def validate(self) -> None:
        for name in ('contrast', 'saturation', 'luminance'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParameter(f"{name} must be an integer, got {value!r}")
            if not ADJUSTMENT_MIN <= value <= ADJUSTMENT_MAX:
                raise InvalidParameter(
                    f"{name} must be between {ADJUSTMENT_MIN} and {ADJUSTMENT_MAX}, got {value}")

    @property
    def is_neutral(self) -> bool:
        return self.contrast == 0 and self.saturation == 0 and self.luminance == 0


@dataclass(frozen=True)
class ColorShade:
    name: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        return {'name': self.name, 'value': self.value}


@dataclass(frozen=True)
class ColorScale:
    """A named base colour and its 11 shades (50 lightest .. 950 darkest)"""
    name: str
    base_color: str
    shades: List[ColorShade] = field(default_factory=list)

    def shade(self, name: str) -> Optional[ColorShade]:
        """Look up a shade by its step name ('50' .. '950')"""
        for shade in self.shades:
            if shade.name == name:
                return shade
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'color': self.base_color,
            'shades': [shade.to_dict() for shade in self.shades],
        }


# =============================================================================
# Spacing & components
# =============================================================================

@dataclass(frozen=True)
class SpacingSettings:
    base_unit: int = 4
    scale: List[int] = field(default_factory=list)
    breakpoints: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'baseUnit': self.base_unit,
            'scale': list(self.scale),
            'breakpoints': dict(self.breakpoints),
        }


@dataclass(frozen=True)
class ComponentSettings:
    border_radius: Dict[str, str] = field(default_factory=dict)
    border_width: Dict[str, str] = field(default_factory=dict)
    box_shadow: List[str] = field(default_factory=list)
    transitions: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'borderRadius': dict(self.border_radius),
            'borderWidth': dict(self.border_width),
            'boxShadow': list(self.box_shadow),
            'transitions': dict(self.transitions),
        }


@dataclass(frozen=True)
class DesignSystemState:
    """
    Complete design system: typography, colour roles, spacing, components.

    Owned by the caller. Use the functions in tokenforge.state to derive
    an updated copy; the export functions only read it.
    """
    typography: TypographySettings
    colors: Dict[str, ColorScale]
    spacing: SpacingSettings
    components: ComponentSettings


# =============================================================================
# Export
# =============================================================================

class ExportFormat(Enum):
    """Textual export formats"""
    CSS = 'css'
    SCSS = 'scss'
    TAILWIND = 'tailwind'
    JSON = 'json'

    @classmethod
    def parse(cls, value) -> 'ExportFormat':
        """Accept an ExportFormat or a case-insensitive tag"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        supported = ', '.join(f.value for f in cls)
        raise UnsupportedFormat(f"Unsupported export format {value!r} (expected one of: {supported})")


@dataclass(frozen=True)
class ExportOptions:
    """Which sections an export includes"""
    include_typography: bool = True
    include_colors: bool = True
    include_spacing: bool = True
    include_components: bool = True
    include_dark_mode: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExportOptions':
        """Build from a config-style dict ({'typography': True, 'dark_mode': False, ...})"""
        return cls(
            include_typography=bool(data.get('typography', True)),
            include_colors=bool(data.get('colors', True)),
            include_spacing=bool(data.get('spacing', True)),
            include_components=bool(data.get('components', True)),
            include_dark_mode=bool(data.get('dark_mode', True)),
        )

    def to_dict(self) -> Dict[str, bool]:
        return {
            'typography': self.include_typography,
            'colors': self.include_colors,
            'spacing': self.include_spacing,
            'components': self.include_components,
            'dark_mode': self.include_dark_mode,
        }
