# -*- coding: utf-8 -*-
"""
Wizard Framework - Unified Wizard System for Blockcast.

Provides base classes for multi-step wizards with consistent navigation,
progress display and single-shot completion.
"""

from .base_wizard import BaseWizard
from .step_content_view import StepContentView
from .wizard_controller import WizardController

__all__ = [
    'BaseWizard',
    'StepContentView',
    'WizardController'
]
