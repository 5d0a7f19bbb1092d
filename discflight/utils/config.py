"""
Application configuration management for discflight.

Handles the default drawing canvas and the user's throwing preferences.
Settings are persisted to ~/.discflight/config.json.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from discflight.models.flight import CanvasConfig, ThrowStyle
from discflight.utils.constants import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_MAX_DISTANCE_FT,
    DEFAULT_SAMPLE_POINTS,
    DEFAULT_START_X,
    DEFAULT_START_Y,
)

logger = logging.getLogger(__name__)


class Config:
    """Manages application settings with JSON file persistence."""

    _APP_DIR = Path.home() / ".discflight"
    _CONFIG_FILE = _APP_DIR / "config.json"

    _defaults = {
        "canvas_width": DEFAULT_CANVAS_WIDTH,
        "canvas_height": DEFAULT_CANVAS_HEIGHT,
        "canvas_start_x": DEFAULT_START_X,
        "canvas_start_y": DEFAULT_START_Y,
        "max_distance_ft": DEFAULT_MAX_DISTANCE_FT,  # feet shown on the chart
        "throwing_hand": "right",     # "right", "left"
        "default_motion": "backhand", # "backhand", "forehand"
        "sample_points": DEFAULT_SAMPLE_POINTS,
    }

    _instance: Optional["Config"] = None
    _settings: dict

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._settings = {}
            cls._instance._load()
        return cls._instance

    def _load(self):
        """Load settings from disk, merging with defaults."""
        if self._CONFIG_FILE.exists():
            try:
                with open(self._CONFIG_FILE) as f:
                    saved = json.load(f)
                # Merge: defaults first, then saved values override
                self._settings = {**self._defaults, **saved}
            except (json.JSONDecodeError, OSError) as e:
                logger.warning(f"Ignoring unreadable config {self._CONFIG_FILE}: {e}")
                self._settings = dict(self._defaults)
        else:
            self._settings = dict(self._defaults)

    def save(self):
        """Persist current settings to disk."""
        self._APP_DIR.mkdir(parents=True, exist_ok=True)
        with open(self._CONFIG_FILE, "w") as f:
            json.dump(self._settings, f, indent=2)

    def get(self, key: str, default=None):
        """Get a setting value."""
        return self._settings.get(key, default)

    def set(self, key: str, value):
        """Set a setting value and save."""
        self._settings[key] = value
        self.save()

    @classmethod
    def get_canvas_config(cls) -> CanvasConfig:
        """Build the default drawing canvas from settings."""
        instance = cls()
        return CanvasConfig(
            width=instance.get("canvas_width"),
            height=instance.get("canvas_height"),
            start_x=instance.get("canvas_start_x"),
            start_y=instance.get("canvas_start_y"),
            max_distance=instance.get("max_distance_ft"),
        )

    @classmethod
    def get_default_throw_style(cls) -> ThrowStyle:
        """Throw style from the saved throwing hand and motion."""
        instance = cls()
        return ThrowStyle.from_hand(
            instance.get("throwing_hand"), instance.get("default_motion")
        )
