# -*- coding: utf-8 -*-
"""
Wizard services - step catalog, progress and navigation rules without UI coupling.
"""

from .step_catalog import Step, StepContent, StepCatalog
from .progress import project_progress
from .wizard_state import WizardIntent, WizardState, Transition, apply

__all__ = [
    'Step',
    'StepContent',
    'StepCatalog',
    'project_progress',
    'WizardIntent',
    'WizardState',
    'Transition',
    'apply',
]
