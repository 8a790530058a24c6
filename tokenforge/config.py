"""
Configuration management for TokenForge
Persists the command-line defaults (export format, sections, output folder)
"""
import copy
import json
import os

from app_config import MAIN_CONFIG_FILE
from utils_paths import get_app_data_dir

from .errors import TokenForgeError
from .logger import app_logger
from .models import ExportFormat, ExportOptions

DEFAULT_CONFIG = {
    # Export settings
    "export_format": "css",  # "css" | "scss" | "tailwind" | "json"
    "export_options": {
        "typography": True,
        "colors": True,
        "spacing": True,
        "components": True,
        "dark_mode": True
    },

    # Where exports land when no --output is given ("" = current directory)
    "output_directory": "",

    # Typography overrides applied on top of the default design system
    "typography": {
        "base_font_size_px": 16,
        "base_line_height": 1.5,
        "scale_ratio": 1.333,
        "base_unit_px": 8
    }
}


class Config:
    def __init__(self, config_path=None):
        # Store config in user data directory
        if config_path is None:
            config_path = os.path.join(get_app_data_dir(), MAIN_CONFIG_FILE)

        self.config_path = config_path
        self.data = self.load()

    def load(self):
        """Load configuration from JSON file or return defaults"""
        config = copy.deepcopy(DEFAULT_CONFIG)
        if not os.path.exists(self.config_path):
            return config

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            app_logger.warning(f"Error loading config {self.config_path}: {e}")
            return config

        if not isinstance(loaded, dict):
            app_logger.warning(f"Ignoring config {self.config_path}: not a JSON object")
            return config

        # Deep merge for nested configs like export_options, typography
        for key, value in loaded.items():
            if isinstance(value, dict) and key in config and isinstance(config[key], dict):
                config[key].update(value)
            else:
                config[key] = value

        return config

    def save(self):
        """Save current configuration to JSON file"""
        try:
            directory = os.path.dirname(self.config_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(self.data, f, indent=2)
            return True
        except OSError as e:
            app_logger.error(f"Error saving config: {e}")
            return False

    def get(self, key, default=None):
        """Get configuration value"""
        return self.data.get(key, default)

    def set(self, key, value):
        """Set configuration value"""
        self.data[key] = value

    def get_export_format(self):
        """Configured export format, falling back to CSS when the tag is unknown"""
        try:
            return ExportFormat.parse(self.data.get("export_format", "css"))
        except TokenForgeError as e:
            app_logger.warning(f"{e}; using CSS")
            return ExportFormat.CSS

    def get_export_options(self):
        """Configured export sections as ExportOptions"""
        return ExportOptions.from_dict(self.data.get("export_options", {}))

    def set_export_options(self, options):
        """Store ExportOptions"""
        self.data["export_options"] = options.to_dict()
