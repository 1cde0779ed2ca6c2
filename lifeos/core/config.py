"""
Configuration management for LifeOS.

Loads settings from an optional JSON file and environment variables.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict, Any

DEFAULT_SETTINGS_PATH = "config/settings.json"


@dataclass
class Config:
    """Application configuration."""

    # Database
    database_path: str = "data/lifeos.db"

    # Identity proof photos
    photo_dir: str = "data/photos"

    # Timezone used to decide what "today" is
    timezone: str = "Asia/Karachi"

    # Discipline rules (from settings JSON)
    lockout_max_gap_days: int = 2
    streak_max_gap_days: float = 1.5
    required_namaz: int = 5
    review_days: int = 7

    # Gemini
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-1.5-pro"

    # Silent discipline mode: no motivation, only data
    silent_mode: bool = False

    settings_file: Optional[str] = None

    @classmethod
    def _load_json(cls, json_path: Path) -> Dict[str, Any]:
        """Load JSON configuration file."""
        if not json_path.exists():
            raise FileNotFoundError(f"Config file not found: {json_path}")

        with open(json_path, 'r') as f:
            return json.load(f)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from the settings JSON + environment variables."""
        # An explicitly requested settings file must exist, the default may not
        requested = os.getenv("LIFEOS_SETTINGS")
        settings_path = Path(requested or DEFAULT_SETTINGS_PATH)

        settings: Dict[str, Any] = {}
        if requested or settings_path.exists():
            settings = cls._load_json(settings_path)

        rules = settings.get("rules", {})

        config = cls(
            database_path=os.getenv("LIFEOS_DB_PATH", settings.get("database_path", "data/lifeos.db")),
            photo_dir=os.getenv("LIFEOS_PHOTO_DIR", settings.get("photo_dir", "data/photos")),
            timezone=os.getenv("TIMEZONE", settings.get("timezone", "Asia/Karachi")),

            # From settings JSON
            lockout_max_gap_days=int(rules.get("lockout_max_gap_days", 2)),
            streak_max_gap_days=float(rules.get("streak_max_gap_days", 1.5)),
            required_namaz=int(rules.get("required_namaz", 5)),
            review_days=int(rules.get("review_days", 7)),

            # Gemini
            gemini_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY"),
            gemini_model=os.getenv("GEMINI_MODEL", settings.get("gemini_model", "gemini-1.5-pro")),

            silent_mode=os.getenv("SILENT_MODE", str(settings.get("silent_mode", False))).lower()
            in ("1", "true", "yes"),

            settings_file=str(settings_path) if settings else None,
        )

        return config

    def get_summary(self) -> str:
        """Get a summary of current settings."""
        return f"""Settings: {self.settings_file or "defaults"}
Database: {self.database_path}
Photos: {self.photo_dir}
Timezone: {self.timezone}
Silent Mode: {"ON" if self.silent_mode else "OFF"}

Discipline Rules:
  Lockout After: {self.lockout_max_gap_days} missed day(s)
  Streak Gap Tolerance: {self.streak_max_gap_days} day(s)
  Required Namaz: {self.required_namaz}
  Review Window: {self.review_days} day(s)

AI Analysis: {"configured (" + self.gemini_model + ")" if self.gemini_api_key else "not configured"}
"""
