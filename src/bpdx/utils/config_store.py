import os
import json
import platform
from pathlib import Path
from typing import Any, Dict, Optional
from datetime import datetime

SETTING_KEYS = ("log_level", "data_file", "output_dir")


class ConfigStore:
    def __init__(self):
        self.base_dir = self._get_config_dir()
        self.settings_file = self.base_dir / "settings.json"
        self._ensure_config_dir()

    def _get_config_dir(self) -> Path:
        """Get platform-specific config directory"""
        system = platform.system()
        if system == "Windows":
            base_dir = os.environ.get("APPDATA", "")
            return Path(base_dir) / "bpdx"
        elif system == "Darwin":  # macOS
            return Path.home() / "Library" / "Application Support" / "bpdx"
        else:  # Linux and others
            xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
            if xdg_config:
                return Path(xdg_config) / "bpdx"
            return Path.home() / ".bpdx"

    def _ensure_config_dir(self):
        """Ensure config directory exists"""
        os.makedirs(self.base_dir, exist_ok=True)

    def get_settings(self) -> Dict[str, Any]:
        """Get stored settings"""
        if not self.settings_file.exists():
            return {}
        try:
            with open(self.settings_file, "r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, IOError):
            return {}

    def get_setting(self, key: str, default: Optional[Any] = None) -> Any:
        """Get a single stored setting"""
        return self.get_settings().get(key, default)

    def save_settings(self, updates: Dict[str, Any]) -> Dict[str, Any]:
        """Merge updates into the stored settings.

        Keys mapped to None are left untouched.
        """
        unknown = set(updates) - set(SETTING_KEYS)
        if unknown:
            raise ValueError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

        settings = self.get_settings()
        settings.update({k: v for k, v in updates.items() if v is not None})
        settings["updated_at"] = datetime.now().isoformat()

        with open(self.settings_file, "w", encoding="utf-8") as f:
            json.dump(settings, f, indent=2)
        return settings
