"""Persistent settings for the preview window."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

APP_NAME = "LayoutPreview"
HOME_ENV_VAR = "LAYOUTPREVIEW_HOME"

DEFAULT_SETTINGS: Dict[str, str] = {
    "window_width": "1200",
    "window_height": "800",
    "code_font_size": "10",
    "default_tab": "preview",
}


def app_data_dir() -> Path:
    """Return the platform-specific application data directory."""
    override = os.getenv(HOME_ENV_VAR)
    if override:
        target = Path(override)
    elif os.name == "nt":
        target = Path(os.getenv("LOCALAPPDATA", Path.home())) / APP_NAME
    else:
        target = Path.home() / ".local" / "share" / APP_NAME
    target.mkdir(parents=True, exist_ok=True)
    return target


class Settings:
    """Very small settings helper storing JSON data."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else app_data_dir() / "settings.json"
        self._settings: Dict[str, str] = {}
        self.load()

    def load(self) -> None:
        self._settings = {}
        if self.path.exists():
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                logger.warning("Ignoring unreadable settings file %s: %s", self.path, exc)
                data = {}
            if isinstance(data, dict):
                self._settings = {str(k): str(v) for k, v in data.items()}

        changed = False
        for key, value in DEFAULT_SETTINGS.items():
            if self._settings.get(key, "") == "":
                self._settings[key] = value
                changed = True

        if changed:
            try:
                self.save()
            except OSError as exc:
                logger.warning("Unable to write settings file %s: %s", self.path, exc)

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._settings, indent=2), encoding="utf-8")

    def get(self, key: str, default: str = "") -> str:
        return self._settings.get(key, default)

    def get_int(self, key: str, default: int = 0) -> int:
        try:
            return int(self.get(key, str(default)))
        except ValueError:
            return default

    def set(self, key: str, value: str) -> None:
        self._settings[key] = value
        self.save()
