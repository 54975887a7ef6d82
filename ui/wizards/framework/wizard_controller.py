# -*- coding: utf-8 -*-
"""
Wizard Controller - Manages navigation between wizard steps.

Handles:
- Step progression (next/previous)
- Skipping the wizard
- Quick tour overlay flag
- Progress tracking
- Single-shot completion callback
"""

from typing import Callable, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from services.wizard import (
    Step, StepCatalog, WizardIntent, WizardState, apply, project_progress
)
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardController(QObject):
    """
    Owns the wizard state and is the only place it changes.

    Responsibilities:
    - Apply user intents through the pure transition rules
    - Emit signals for UI updates
    - Invoke the completion callback at most once
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    quick_tour_changed = pyqtSignal(bool)
    wizard_completed = pyqtSignal()

    def __init__(
        self,
        catalog: StepCatalog,
        on_complete: Optional[Callable[[], None]] = None,
        parent: Optional[QObject] = None
    ):
        """
        Initialize the controller.

        Args:
            catalog: Steps to navigate
            on_complete: Zero-argument callback invoked when onboarding concludes
            parent: Parent QObject
        """
        super().__init__(parent)
        self.catalog = catalog
        self.on_complete = on_complete
        self.state = WizardState()

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def current_index(self) -> int:
        return self.state.current_step_index

    @property
    def is_completed(self) -> bool:
        return self.state.completed

    @property
    def quick_tour_active(self) -> bool:
        return self.state.quick_tour_active

    def current_step(self) -> Step:
        """Get the current step."""
        return self.catalog.get(self.state.current_step_index)

    def step_count(self) -> int:
        """Get total number of steps."""
        return self.catalog.length()

    def can_go_next(self) -> bool:
        """Check if we can navigate to the next step (not counting completion)."""
        return not self.is_completed and self.current_index < self.step_count() - 1

    def can_go_previous(self) -> bool:
        """Check if we can navigate to the previous step."""
        return not self.is_completed and self.current_index > 0

    def is_last_step(self) -> bool:
        return self.current_index == self.step_count() - 1

    def progress(self) -> float:
        """Get current progress as percentage."""
        return project_progress(self.current_index, self.step_count())

    # =========================================================================
    # Intents
    # =========================================================================

    def next(self):
        """Go to the next step, or complete the wizard from the last step."""
        self.dispatch(WizardIntent.NEXT)

    def previous(self):
        """Go back one step; ignored on the first step."""
        self.dispatch(WizardIntent.PREVIOUS)

    def skip(self):
        """Complete the wizard from any step."""
        self.dispatch(WizardIntent.SKIP)

    def start_quick_tour(self):
        """Show the quick tour overlay."""
        self.dispatch(WizardIntent.START_QUICK_TOUR)

    def complete_quick_tour(self):
        """Complete the wizard from the quick tour overlay."""
        self.dispatch(WizardIntent.COMPLETE_QUICK_TOUR)

    def dispatch(self, intent: WizardIntent):
        """
        Apply an intent and notify listeners.

        Args:
            intent: User intent from the host UI
        """
        old_state = self.state
        if old_state.completed:
            logger.debug(f"Ignoring {intent.value}: wizard already completed")
            return

        transition = apply(old_state, intent, self.step_count())
        if transition.state == old_state:
            logger.debug(f"Ignoring {intent.value} at step {old_state.current_step_index}")
            return

        # Completed flag is set before the callback runs, so re-entrant calls are no-ops
        self.state = transition.state

        if transition.state.current_step_index != old_state.current_step_index:
            logger.info(
                f"Navigating: Step {old_state.current_step_index} → "
                f"{transition.state.current_step_index}"
            )
            self.step_changed.emit(old_state.current_step_index, transition.state.current_step_index)

        if transition.state.quick_tour_active != old_state.quick_tour_active:
            logger.info(f"Quick tour {'started' if transition.state.quick_tour_active else 'closed'}")
            self.quick_tour_changed.emit(transition.state.quick_tour_active)

        if transition.fire_completion:
            self._fire_completion(intent)

    def _fire_completion(self, intent: WizardIntent):
        """Invoke the completion callback (single shot)."""
        logger.info(f"Wizard completed via {intent.value} at step {self.current_index}")
        if self.on_complete is not None:
            self.on_complete()
        self.wizard_completed.emit()
