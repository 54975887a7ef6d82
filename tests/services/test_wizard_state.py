# -*- coding: utf-8 -*-
"""
Tests for wizard navigation rules.

Tests cover:
- Forward/backward navigation
- Completion via next, skip and quick tour
- Behaviour after completion
"""

import pytest

from services.wizard import WizardIntent, WizardState, apply


def run(intents, step_count, state=None):
    """Apply intents in order, returning the final state and completion count."""
    state = state or WizardState()
    fired = 0
    for intent in intents:
        transition = apply(state, intent, step_count)
        state = transition.state
        fired += transition.fire_completion
    return state, fired


class TestInitialState:
    """Test the initial state."""

    def test_defaults(self):
        """Test a new state is at step 0 with no overlay and not completed."""
        state = WizardState()

        assert state.current_step_index == 0
        assert state.quick_tour_active is False
        assert state.completed is False


class TestNext:
    """Test NEXT."""

    @pytest.mark.parametrize("step_count", [1, 2, 3, 6, 10])
    def test_walk_to_last_step_then_complete(self, step_count):
        """Test N-1 nexts reach the last step and one more completes once."""
        state, fired = run([WizardIntent.NEXT] * (step_count - 1), step_count)
        assert state.current_step_index == step_count - 1
        assert state.completed is False
        assert fired == 0

        transition = apply(state, WizardIntent.NEXT, step_count)
        assert transition.state.completed is True
        assert transition.fire_completion is True
        assert transition.state.current_step_index == step_count - 1

    def test_next_moves_forward(self):
        """Test next from step 2 goes to step 3."""
        transition = apply(WizardState(current_step_index=2), WizardIntent.NEXT, 6)

        assert transition.state.current_step_index == 3
        assert transition.fire_completion is False


class TestPrevious:
    """Test PREVIOUS."""

    @pytest.mark.parametrize("index", [1, 2, 5])
    def test_previous_moves_back(self, index):
        """Test previous from step i goes to step i-1."""
        transition = apply(WizardState(current_step_index=index), WizardIntent.PREVIOUS, 6)

        assert transition.state.current_step_index == index - 1
        assert transition.fire_completion is False

    def test_previous_on_first_step_is_noop(self):
        """Test previous at step 0 stays at step 0."""
        state = WizardState()
        transition = apply(state, WizardIntent.PREVIOUS, 6)

        assert transition.state == state
        assert transition.fire_completion is False

    def test_previous_on_first_step_is_idempotent(self):
        """Test repeated previous at step 0 stays at step 0."""
        state, fired = run([WizardIntent.PREVIOUS] * 3, 6)

        assert state.current_step_index == 0
        assert fired == 0


class TestSkip:
    """Test SKIP."""

    @pytest.mark.parametrize("index", range(6))
    def test_skip_completes_from_any_step(self, index):
        """Test skip completes from every step and fires once."""
        transition = apply(WizardState(current_step_index=index), WizardIntent.SKIP, 6)

        assert transition.state.completed is True
        assert transition.fire_completion is True


class TestQuickTour:
    """Test the quick tour intents."""

    def test_start_quick_tour_sets_flag(self):
        """Test START_QUICK_TOUR shows the overlay without changing position."""
        transition = apply(WizardState(current_step_index=2), WizardIntent.START_QUICK_TOUR, 6)

        assert transition.state.quick_tour_active is True
        assert transition.state.current_step_index == 2
        assert transition.fire_completion is False

    def test_complete_quick_tour_fires_completion(self):
        """Test COMPLETE_QUICK_TOUR completes while the overlay is active."""
        state = WizardState(quick_tour_active=True)
        transition = apply(state, WizardIntent.COMPLETE_QUICK_TOUR, 6)

        assert transition.state.completed is True
        assert transition.state.quick_tour_active is True
        assert transition.fire_completion is True

    def test_complete_quick_tour_without_overlay_is_noop(self):
        """Test COMPLETE_QUICK_TOUR is ignored when the overlay is not active."""
        state = WizardState()
        transition = apply(state, WizardIntent.COMPLETE_QUICK_TOUR, 6)

        assert transition.state == state
        assert transition.fire_completion is False


class TestAfterCompletion:
    """Test that completion fires at most once."""

    @pytest.mark.parametrize("intent", list(WizardIntent))
    def test_every_intent_is_ignored(self, intent):
        """Test no intent changes a completed state or fires again."""
        state = WizardState(current_step_index=5, completed=True)
        transition = apply(state, intent, 6)

        assert transition.state == state
        assert transition.fire_completion is False

    def test_six_step_walkthrough(self):
        """Test five nexts reach step 5, the sixth completes, later intents do nothing."""
        intents = [WizardIntent.NEXT] * 6 + [
            WizardIntent.NEXT,
            WizardIntent.SKIP,
            WizardIntent.PREVIOUS,
            WizardIntent.START_QUICK_TOUR,
            WizardIntent.COMPLETE_QUICK_TOUR,
        ]
        state, fired = run(intents, 6)

        assert state.completed is True
        assert state.current_step_index == 5
        assert fired == 1

    def test_skip_from_middle_then_more_intents(self):
        """Test skip at step 2 fires once; later next/skip do not fire."""
        state, fired = run(
            [WizardIntent.NEXT, WizardIntent.NEXT, WizardIntent.SKIP, WizardIntent.NEXT, WizardIntent.SKIP],
            6
        )

        assert state.current_step_index == 2
        assert fired == 1


class TestInvalidIntent:
    """Test unknown intents."""

    def test_unknown_intent_raises(self):
        """Test a non-intent value raises ValueError."""
        with pytest.raises(ValueError):
            apply(WizardState(), "next", 6)
