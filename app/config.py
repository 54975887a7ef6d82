# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_PROJECT_ROOT = Path(__file__).parent.parent

_LOGS_DIR = os.getenv("LOGS_DIR", str(_PROJECT_ROOT / "logs"))
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Onboarding Settings
_ONBOARDING_ENABLED = os.getenv("ONBOARDING_ENABLED", "true").lower() in ("true", "1", "yes")
_WELCOME_BONUS_ETH = float(os.getenv("WELCOME_BONUS_ETH", "0.1"))


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Blockcast"
    APP_TITLE: str = "Blockcast - Prediction Markets & AI Fact-Checking"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Blockcast"

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT
    LOGS_DIR: Path = Path(_LOGS_DIR)
    LOG_PATH: Path = LOGS_DIR / "blockcast.log"

    # Logging
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    LOG_BACKUP_COUNT: int = 3
    LOG_LEVEL: str = _LOG_LEVEL  # console threshold

    # Onboarding
    # Set ONBOARDING_ENABLED=false to never show the wizard on startup
    ONBOARDING_ENABLED: bool = _ONBOARDING_ENABLED
    ONBOARDING_SETTINGS_KEY: str = "onboarding/completed"
    WELCOME_BONUS_ETH: float = _WELCOME_BONUS_ETH

    # Wizard window
    WIZARD_MIN_WIDTH: int = 560
    WIZARD_MIN_HEIGHT: int = 520
