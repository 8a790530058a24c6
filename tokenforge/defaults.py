"""
Default design system tokens

Fixed tables used by "reset to defaults". The ramps are the stock
Tailwind palettes for each role, stored verbatim rather than generated,
so a reset reproduces the same export text every time.
"""
import copy

from .models import (
    TypographySettings, FontFamily, ColorScale, ColorShade,
    SpacingSettings, ComponentSettings, DesignSystemState, SHADE_NAMES,
)


# =============================================================================
# TYPOGRAPHY
# =============================================================================

DEFAULT_TYPOGRAPHY = {
    'base_font_size_px': 16,
    'base_line_height': 1.5,
    'scale_ratio': 1.333,
    'base_unit_px': 8,
    'font_family': {
        'body': 'Inter, system-ui, sans-serif',
        'heading': 'Inter, system-ui, sans-serif',
        'monospace': 'monospace',
    },
}


# =============================================================================
# COLOR PALETTE
# =============================================================================

# role: (display name, base colour, shades 50..950)
DEFAULT_COLORS = {
    'primary': ('Primary', '#3B82F6', [
        '#EFF6FF', '#DBEAFE', '#BFDBFE', '#93C5FD', '#60A5FA', '#3B82F6',
        '#2563EB', '#1D4ED8', '#1E40AF', '#1E3A8A', '#172554',
    ]),
    'secondary': ('Secondary', '#EC4899', [
        '#FDF2F8', '#FCE7F3', '#FBCFE8', '#F9A8D4', '#F472B6', '#EC4899',
        '#DB2777', '#BE185D', '#9D174D', '#831843', '#500724',
    ]),
    'accent': ('Accent', '#8B5CF6', [
        '#F5F3FF', '#EDE9FE', '#DDD6FE', '#C4B5FD', '#A78BFA', '#8B5CF6',
        '#7C3AED', '#6D28D9', '#5B21B6', '#4C1D95', '#2E1065',
    ]),
    'neutral': ('Neutral', '#6B7280', [
        '#F9FAFB', '#F3F4F6', '#E5E7EB', '#D1D5DB', '#9CA3AF', '#6B7280',
        '#4B5563', '#374151', '#1F2937', '#111827', '#030712',
    ]),
    'success': ('Success', '#10B981', [
        '#ECFDF5', '#D1FAE5', '#A7F3D0', '#6EE7B7', '#34D399', '#10B981',
        '#059669', '#047857', '#065F46', '#064E3B', '#022C22',
    ]),
    'warning': ('Warning', '#F59E0B', [
        '#FFFBEB', '#FEF3C7', '#FDE68A', '#FCD34D', '#FBBF24', '#F59E0B',
        '#D97706', '#B45309', '#92400E', '#78350F', '#451A03',
    ]),
    'error': ('Error', '#EF4444', [
        '#FEF2F2', '#FEE2E2', '#FECACA', '#FCA5A5', '#F87171', '#EF4444',
        '#DC2626', '#B91C1C', '#991B1B', '#7F1D1D', '#450A0A',
    ]),
    'info': ('Info', '#06B6D4', [
        '#ECFEFF', '#CFFAFE', '#A5F3FC', '#67E8F9', '#22D3EE', '#06B6D4',
        '#0891B2', '#0E7490', '#155E75', '#164E63', '#083344',
    ]),
}


# =============================================================================
# SPACING
# =============================================================================

DEFAULT_SPACING = {
    'base_unit': 4,
    'scale': [0, 4, 8, 16, 24, 32, 48, 64, 80, 96, 128, 160, 192, 224, 256],
    'breakpoints': {
        'xs': 320,
        'sm': 640,
        'md': 768,
        'lg': 1024,
        'xl': 1280,
        'xxl': 1536,
    },
}


# =============================================================================
# COMPONENTS
# =============================================================================

DEFAULT_COMPONENTS = {
    'border_radius': {
        'none': '0',
        'sm': '0.125rem',
        'md': '0.25rem',
        'lg': '0.5rem',
        'xl': '0.75rem',
        '2xl': '1rem',
        '3xl': '1.5rem',
        'full': '9999px',
    },
    'border_width': {
        'none': '0',
        'thin': '1px',
        'thick': '2px',
        'thicker': '3px',
    },
    'box_shadow': [
        'none',
        '0 1px 2px 0 rgba(0, 0, 0, 0.05)',
        '0 1px 3px 0 rgba(0, 0, 0, 0.1), 0 1px 2px 0 rgba(0, 0, 0, 0.06)',
        '0 4px 6px -1px rgba(0, 0, 0, 0.1), 0 2px 4px -1px rgba(0, 0, 0, 0.06)',
        '0 10px 15px -3px rgba(0, 0, 0, 0.1), 0 4px 6px -2px rgba(0, 0, 0, 0.05)',
        '0 20px 25px -5px rgba(0, 0, 0, 0.1), 0 10px 10px -5px rgba(0, 0, 0, 0.04)',
        '0 25px 50px -12px rgba(0, 0, 0, 0.25)',
    ],
    'transitions': {
        'default': 'all 0.3s ease',
        'slow': 'all 0.6s ease',
        'fast': 'all 0.15s ease',
    },
}


def default_typography() -> TypographySettings:
    data = copy.deepcopy(DEFAULT_TYPOGRAPHY)
    font_family = FontFamily(**data.pop('font_family'))
    return TypographySettings(font_family=font_family, **data)


def default_colors():
    """Fresh role -> ColorScale mapping"""
    return {
        role: ColorScale(
            name=name,
            base_color=base,
            shades=[ColorShade(name=step, value=value) for step, value in zip(SHADE_NAMES, shades)],
        )
        for role, (name, base, shades) in DEFAULT_COLORS.items()
    }


def default_spacing() -> SpacingSettings:
    return SpacingSettings(**copy.deepcopy(DEFAULT_SPACING))


def default_components() -> ComponentSettings:
    return ComponentSettings(**copy.deepcopy(DEFAULT_COMPONENTS))


def default_state() -> DesignSystemState:
    """A new DesignSystemState holding the default tokens"""
    return DesignSystemState(
        typography=default_typography(),
        colors=default_colors(),
        spacing=default_spacing(),
        components=default_components(),
    )
