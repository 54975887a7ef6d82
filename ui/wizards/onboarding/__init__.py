# -*- coding: utf-8 -*-
"""
Onboarding Wizard Package.

This package contains:
- ONBOARDING_STEPS: The Blockcast onboarding step catalog
- OnboardingWizard: Main wizard class
- QuickTourOverlay: Welcome bonus card for the quick tour
"""

from .onboarding_steps import ONBOARDING_STEPS, create_onboarding_catalog
from .onboarding_wizard import OnboardingWizard
from .quick_tour_overlay import QuickTourOverlay

__all__ = [
    'ONBOARDING_STEPS',
    'create_onboarding_catalog',
    'OnboardingWizard',
    'QuickTourOverlay'
]
