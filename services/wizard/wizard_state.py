# -*- coding: utf-8 -*-
"""
Wizard State - navigation state and transition rules for wizards.

The state is a plain value; apply() computes the next state for a user
intent so the navigation rules can be tested without any UI.

Rules:
- NEXT moves forward, and from the last step completes the wizard
- PREVIOUS moves back, and is ignored on the first step
- SKIP completes the wizard from any step
- START_QUICK_TOUR shows the quick tour overlay
- COMPLETE_QUICK_TOUR completes the wizard while the overlay is shown
- Once completed, every intent leaves the state unchanged
"""

from dataclasses import dataclass, replace
from enum import Enum


class WizardIntent(Enum):
    """User intents dispatched by the host UI."""
    NEXT = "next"
    PREVIOUS = "previous"
    SKIP = "skip"
    START_QUICK_TOUR = "start_quick_tour"
    COMPLETE_QUICK_TOUR = "complete_quick_tour"


@dataclass(frozen=True)
class WizardState:
    """Position and overlay flag of one wizard session."""
    current_step_index: int = 0
    quick_tour_active: bool = False
    completed: bool = False


@dataclass(frozen=True)
class Transition:
    """Result of applying an intent."""
    state: WizardState
    fire_completion: bool = False


def _complete(state: WizardState) -> Transition:
    return Transition(replace(state, completed=True), fire_completion=True)


def apply(state: WizardState, intent: WizardIntent, step_count: int) -> Transition:
    """
    Apply an intent to a wizard state.

    Args:
        state: Current state
        intent: Intent to apply
        step_count: Number of steps in the catalog (> 0)

    Returns:
        Transition with the new state; fire_completion is True only for the
        transition that completes the wizard.
    """
    if state.completed:
        return Transition(state)

    index = state.current_step_index

    if intent is WizardIntent.NEXT:
        if index < step_count - 1:
            return Transition(replace(state, current_step_index=index + 1))
        return _complete(state)

    if intent is WizardIntent.PREVIOUS:
        if index > 0:
            return Transition(replace(state, current_step_index=index - 1))
        return Transition(state)

    if intent is WizardIntent.SKIP:
        return _complete(state)

    if intent is WizardIntent.START_QUICK_TOUR:
        return Transition(replace(state, quick_tour_active=True))

    if intent is WizardIntent.COMPLETE_QUICK_TOUR:
        if state.quick_tour_active:
            return _complete(state)
        return Transition(state)

    raise ValueError(f"Unknown wizard intent: {intent!r}")
