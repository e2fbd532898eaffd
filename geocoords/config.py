"""Configuration management for geocoords."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

CONFIG_FILE_NAME = "geocoords.yaml"
# Defaults shipped as package data
DEFAULT_CONFIG_DIR = Path(__file__).parent / "data"


@dataclass
class FormattingConfig:
    """Default precisions used when a formatter receives the -1 sentinel."""

    latlng_precision: int = 6
    dms_precision: int = 6
    ddm_precision: int = 6
    utm_precision: int = 9
    geohash_length: int = 12
    pad_longitude_degrees: bool = False  # render 13°E as 013°E in DMS/DDM


@dataclass
class ProjectionConfig:
    """Inverse transverse Mercator solver settings."""

    newton_tolerance: float = 1e-12
    newton_max_iterations: int = 100


@dataclass
class Config:
    """Main configuration container."""

    formatting: FormattingConfig = field(default_factory=FormattingConfig)
    projection: ProjectionConfig = field(default_factory=ProjectionConfig)

    @classmethod
    def load(cls, config_dir: Path | None = None) -> "Config":
        """Load configuration from files and environment variables."""
        # Load .env file if present
        env_file = Path(__file__).parent.parent / ".env"
        if env_file.exists():
            load_dotenv(env_file)

        config = cls()

        if config_dir and config_dir.exists():
            config_file = config_dir / CONFIG_FILE_NAME
            if config_file.exists():
                config._load_yaml(config_file)

        # Override with environment variables
        config._load_from_env()

        return config

    def _load_yaml(self, path: Path) -> None:
        """Load configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
            if data:
                self._apply_yaml_config(data)

    def _apply_yaml_config(self, data: dict[str, Any]) -> None:
        """Apply YAML configuration data."""
        if "formatting" in data:
            fmt = data["formatting"]
            for key in ("latlng_precision", "dms_precision", "ddm_precision", "utm_precision", "geohash_length"):
                if key in fmt:
                    setattr(self.formatting, key, int(fmt[key]))
            if "pad_longitude_degrees" in fmt:
                self.formatting.pad_longitude_degrees = bool(fmt["pad_longitude_degrees"])

        if "projection" in data:
            proj = data["projection"]
            if "newton_tolerance" in proj:
                self.projection.newton_tolerance = float(proj["newton_tolerance"])
            if "newton_max_iterations" in proj:
                self.projection.newton_max_iterations = int(proj["newton_max_iterations"])

    def _load_from_env(self) -> None:
        """Override configuration from environment variables."""
        # Formatting
        if precision := os.getenv("GEOCOORDS_LATLNG_PRECISION"):
            self.formatting.latlng_precision = int(precision)
        if precision := os.getenv("GEOCOORDS_DMS_PRECISION"):
            self.formatting.dms_precision = int(precision)
        if precision := os.getenv("GEOCOORDS_DDM_PRECISION"):
            self.formatting.ddm_precision = int(precision)
        if precision := os.getenv("GEOCOORDS_UTM_PRECISION"):
            self.formatting.utm_precision = int(precision)
        if length := os.getenv("GEOCOORDS_GEOHASH_LENGTH"):
            self.formatting.geohash_length = int(length)
        if pad := os.getenv("GEOCOORDS_PAD_LONGITUDE"):
            self.formatting.pad_longitude_degrees = pad.lower() in ("true", "1", "yes")

        # Projection
        if tolerance := os.getenv("GEOCOORDS_NEWTON_TOLERANCE"):
            self.projection.newton_tolerance = float(tolerance)
        if iterations := os.getenv("GEOCOORDS_NEWTON_MAX_ITERATIONS"):
            self.projection.newton_max_iterations = int(iterations)


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load(DEFAULT_CONFIG_DIR)
    return _config


def reload_config(config_dir: Path | None = None) -> Config:
    """Reload configuration (useful for testing)."""
    global _config
    _config = Config.load(config_dir)
    return _config
