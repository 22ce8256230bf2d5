"""Application settings loader from YAML configuration."""
import os
import yaml
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

from statementflow.utils.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


@dataclass
class AppSettings:
    """Application-wide settings loaded from config.yaml."""

    # App info
    app_name: str
    app_version: str

    # Logging
    log_level: str

    # Parser
    min_description_length: int
    total_mismatch_tolerance: float

    # PDF
    pdf_min_text_length: int

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "AppSettings":
        """Load settings from YAML file."""
        if config_path is None:
            override = os.getenv("STATEMENTFLOW_CONFIG")
            config_path = Path(override) if override else DEFAULT_CONFIG_PATH

        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        try:
            return cls(
                app_name=config["app"]["name"],
                app_version=config["app"]["version"],
                log_level=config["logging"]["level"],
                min_description_length=int(config["parser"]["min_description_length"]),
                total_mismatch_tolerance=float(config["parser"]["total_mismatch_tolerance"]),
                pdf_min_text_length=int(config["pdf"]["min_text_length"])
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration in {config_path}: {e}")


# Global settings instance
_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings.load()
    return _settings
