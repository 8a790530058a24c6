"""
Application Configuration - Central place for app identity
Change these values when renaming the application
"""

# Application Identity
APP_NAME = "TokenForge"
APP_DISPLAY_NAME = "TokenForge"
APP_SUBTITLE = "Design System Token Generator"
APP_DESCRIPTION = "Typographic scales, colour ramps and design tokens as CSS, SCSS, Tailwind or JSON"

# Directory names (used for app data paths)
APP_DATA_FOLDER = APP_NAME

# File names
MAIN_CONFIG_FILE = "config.json"
LOG_FILE = "tokenforge.log"

# Export file names per format tag
EXPORT_FILENAMES = {
    "css": "design-system.css",
    "scss": "design-system.scss",
    "tailwind": "tailwind.config.js",
    "json": "design-system.json",
}


def get_window_title(version: str = None) -> str:
    """Get formatted program title with optional version"""
    if version:
        return f"{APP_DISPLAY_NAME} v{version}"
    return APP_DISPLAY_NAME
