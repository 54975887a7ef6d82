#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Blockcast - Prediction Markets & AI Fact-Checking
Main entry point for the onboarding wizard.
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from services.onboarding_status_service import OnboardingStatusService
from ui.font_utils import set_application_default_font
from ui.wizards.onboarding import OnboardingWizard
from utils.logger import setup_logger


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)  # type: ignore
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)  # type: ignore

    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setOrganizationName(Config.ORGANIZATION)
        set_application_default_font()

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info("=" * 80)

        status_service = OnboardingStatusService()
        if not status_service.should_show_onboarding():
            logger.info(">> Onboarding already completed or disabled, nothing to show")
            sys.exit(0)

        wizard = None

        def handle_onboarding_complete():
            status_service.mark_onboarding_complete()
            wizard.close()

        wizard = OnboardingWizard(on_complete=handle_onboarding_complete)
        wizard.show()
        logger.info(">> Onboarding wizard displayed")

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        error_msg = f"Fatal error during application startup: {e}"
        print(f"\n[ERROR] {error_msg}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        logger.exception(error_msg)
        sys.exit(1)


if __name__ == "__main__":
    main()
