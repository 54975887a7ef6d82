# -*- coding: utf-8 -*-
"""
Onboarding Wizard.

Introduces new users to Blockcast in six steps:
1. Welcome
2. How prediction markets work
3. AI fact-checking
4. Managing your wallet
5. Social features
6. Ready to start

Users can skip the tutorial at any step. Hosts may also open the quick
tour (welcome bonus card) with show_quick_tour().
"""

from typing import Optional

from PyQt5.QtWidgets import QWidget

from app.config import Config
from services.wizard import StepCatalog
from ui.wizards.framework import BaseWizard
from ui.wizards.onboarding.onboarding_steps import create_onboarding_catalog
from ui.wizards.onboarding.quick_tour_overlay import QuickTourOverlay
from utils.logger import get_logger

logger = get_logger(__name__)


class OnboardingWizard(BaseWizard):
    """First-run onboarding wizard."""

    def __init__(self, on_complete=None, catalog: Optional[StepCatalog] = None,
                 parent: Optional[QWidget] = None):
        """
        Initialize the wizard.

        Args:
            on_complete: Zero-argument callback invoked once when onboarding concludes
            catalog: Steps to show (default: the Blockcast onboarding steps)
            parent: Parent widget
        """
        self._catalog = catalog
        super().__init__(on_complete=on_complete, parent=parent)
        self.setMinimumSize(Config.WIZARD_MIN_WIDTH, Config.WIZARD_MIN_HEIGHT)
        logger.info(f"Onboarding wizard created with {self.catalog.length()} steps")

    def create_catalog(self) -> StepCatalog:
        if self._catalog is not None:
            return self._catalog
        return create_onboarding_catalog()

    def create_overlay(self) -> QuickTourOverlay:
        overlay = QuickTourOverlay()
        overlay.start_exploring_clicked.connect(self.controller.complete_quick_tour)
        return overlay

    def get_wizard_title(self) -> str:
        return f"Welcome to {Config.APP_NAME}"

    def get_skip_text(self) -> str:
        return "Skip Tutorial"

    def get_submit_button_text(self) -> str:
        return "Get Started ⚡"
