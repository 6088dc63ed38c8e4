"""
Configuration management for the quiz engine.

This module centralizes all configuration settings:
- Overrides loaded from environment variables (and a .env file)
- Sensible defaults matching the published quiz
- Type hints for IDE support
- Single source of truth for scoring constants and UI timings
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_path(name: str) -> Optional[Path]:
    value = os.getenv(name)
    return Path(value) if value else None


@dataclass
class PathConfig:
    """File system paths - single source of truth for all directories."""

    project_root: Path = field(default_factory=lambda: Path(__file__).parent.parent)

    # Optional catalog document replacing the built-in questions
    catalog_file: Optional[Path] = field(
        default_factory=lambda: _env_path("QUIZ_CATALOG_FILE")
    )

    schemas_dir: Path = field(init=False)
    catalog_schema: Path = field(init=False)

    def __post_init__(self):
        """Initialize computed paths."""
        self.schemas_dir = self.project_root / "schemas"
        self.catalog_schema = self.schemas_dir / "question_catalog.schema.json"


@dataclass
class ScoringConfig:
    """Constants used by the scoring engine."""

    # Used when the size answer is missing or unparseable
    default_size: float = 12.0

    # Starting increase when the size category is unknown
    base_increase: float = 7.0

    # Realistic bounds for the projected increase
    min_increase: float = 3.0
    max_increase: float = 10.0

    # Fixed program facts shown on the results page
    success_rate: int = 97
    time_required: int = 15  # minutes per day
    program_duration: int = 30  # days


@dataclass
class UIConfig:
    """Front end settings, including the question transition timings."""

    transition_out_ms: int = 150
    transition_settle_ms: int = 50
    transition_in_ms: int = 300

    server_name: str = field(
        default_factory=lambda: os.getenv("QUIZ_SERVER_NAME", "127.0.0.1")
    )
    server_port: int = field(
        default_factory=lambda: int(os.getenv("QUIZ_SERVER_PORT", "7860"))
    )

    @property
    def transition_total_ms(self) -> int:
        """Time the transition guard stays set for one question change."""
        return self.transition_out_ms + self.transition_settle_ms + self.transition_in_ms


@dataclass
class LoggingConfig:
    """Logging configuration."""

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Config:
    """
    Main configuration class. Singleton pattern.

    Usage:
        from src.config import config

        # Access settings
        floor = config.scoring.min_increase
        port = config.ui.server_port

        # Check settings before starting the front end
        errors = config.validate()
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.paths = PathConfig()
            cls._instance.scoring = ScoringConfig()
            cls._instance.ui = UIConfig()
            cls._instance.logging = LoggingConfig()

        return cls._instance

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        # Scoring validation
        if self.scoring.min_increase > self.scoring.max_increase:
            errors.append(
                f"min_increase ({self.scoring.min_increase}) must be <= "
                f"max_increase ({self.scoring.max_increase})"
            )

        if not (0 <= self.scoring.success_rate <= 100):
            errors.append(
                f"success_rate must be in [0, 100], got {self.scoring.success_rate}"
            )

        if self.scoring.time_required <= 0:
            errors.append(f"time_required must be > 0, got {self.scoring.time_required}")

        if self.scoring.program_duration <= 0:
            errors.append(
                f"program_duration must be > 0, got {self.scoring.program_duration}"
            )

        # UI validation
        for name in (
            "transition_out_ms",
            "transition_settle_ms",
            "transition_in_ms",
        ):
            value = getattr(self.ui, name)
            if value < 0:
                errors.append(f"{name} must be >= 0, got {value}")

        if not (1 <= self.ui.server_port <= 65535):
            errors.append(f"server_port must be in [1, 65535], got {self.ui.server_port}")

        # Logging validation
        if self.logging.log_level.upper() not in {
            "DEBUG",
            "INFO",
            "WARNING",
            "ERROR",
            "CRITICAL",
        }:
            errors.append(f"Unknown log_level: {self.logging.log_level}")

        # Path validation
        if not self.paths.catalog_schema.exists():
            errors.append(f"Catalog schema not found: {self.paths.catalog_schema}")

        if self.paths.catalog_file is not None and not self.paths.catalog_file.exists():
            errors.append(f"Catalog file not found: {self.paths.catalog_file}")

        return errors


# Global config instance
config = Config()
