# -*- coding: utf-8 -*-
"""
Onboarding status service.

Remembers whether the user has finished onboarding. Only the completion
flag is stored; wizard position is never persisted.
"""

from typing import Optional

from PyQt5.QtCore import QSettings

from app.config import Config
from utils.logger import get_logger

logger = get_logger(__name__)


class OnboardingStatusService:
    """Reads and writes the onboarding-completed flag in QSettings."""

    def __init__(self, settings: Optional[QSettings] = None, enabled: Optional[bool] = None):
        """
        Initialize the service.

        Args:
            settings: Settings store (defaults to the per-user application settings)
            enabled: Override for Config.ONBOARDING_ENABLED
        """
        self.settings = settings or QSettings(Config.ORGANIZATION, Config.APP_NAME)
        self.enabled = Config.ONBOARDING_ENABLED if enabled is None else enabled

    def is_onboarding_complete(self) -> bool:
        """Check if onboarding was completed in an earlier session."""
        return self.settings.value(Config.ONBOARDING_SETTINGS_KEY, False, type=bool)

    def should_show_onboarding(self) -> bool:
        """Check if the onboarding wizard should be shown on startup."""
        completed = self.is_onboarding_complete()
        show = self.enabled and not completed
        logger.debug(f"Onboarding check: enabled={self.enabled}, completed={completed}, show={show}")
        return show

    def mark_onboarding_complete(self):
        """Record that the user finished (or skipped) onboarding."""
        self.settings.setValue(Config.ONBOARDING_SETTINGS_KEY, True)
        self.settings.sync()
        logger.info("Onboarding marked as complete")

    def reset(self):
        """Forget the completion flag so onboarding shows again."""
        self.settings.remove(Config.ONBOARDING_SETTINGS_KEY)
        self.settings.sync()
        logger.info("Onboarding status reset")
