# -*- coding: utf-8 -*-
"""
Tests for the Wizard Controller.

Tests cover:
- Initial state and queries
- Navigation signals
- Single-shot completion callback
- Re-entrant callbacks
"""

import pytest

from ui.wizards.framework import WizardController
from ui.wizards.onboarding.onboarding_steps import create_onboarding_catalog


class CompletionRecorder:
    """Counts completion callback invocations."""

    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


@pytest.fixture
def recorder():
    return CompletionRecorder()


@pytest.fixture
def controller(qapp, recorder):
    """Controller over the six onboarding steps."""
    return WizardController(create_onboarding_catalog(), on_complete=recorder)


class TestControllerInitialization:
    """Test controller initial state."""

    def test_starts_at_first_step(self, controller):
        """Test controller starts at step 0."""
        assert controller.current_index == 0
        assert controller.current_step().title == "Welcome to Blockcast"
        assert controller.quick_tour_active is False
        assert controller.is_completed is False

    def test_navigation_queries(self, controller):
        """Test can_go_previous is False and can_go_next is True at start."""
        assert controller.can_go_previous() is False
        assert controller.can_go_next() is True
        assert controller.is_last_step() is False

    def test_initial_progress(self, controller):
        """Test progress at step 0 of 6."""
        assert controller.progress() == pytest.approx(16.67, abs=0.01)


class TestControllerNavigation:
    """Test next/previous."""

    def test_five_nexts_reach_last_step(self, controller, recorder):
        """Test five nexts reach step 5 at 100% without completing."""
        for _ in range(5):
            controller.next()

        assert controller.current_index == 5
        assert controller.is_last_step() is True
        assert controller.progress() == 100.0
        assert recorder.calls == 0

    def test_next_on_last_step_completes_once(self, controller, recorder):
        """Test the sixth next fires the callback exactly once."""
        for _ in range(6):
            controller.next()

        assert controller.is_completed is True
        assert recorder.calls == 1

    def test_previous_on_first_step_is_ignored(self, controller):
        """Test previous at step 0 keeps step 0 and emits nothing."""
        emitted = []
        controller.step_changed.connect(lambda old, new: emitted.append((old, new)))

        controller.previous()

        assert controller.current_index == 0
        assert emitted == []

    def test_step_changed_signal(self, controller):
        """Test step_changed carries old and new index."""
        emitted = []
        controller.step_changed.connect(lambda old, new: emitted.append((old, new)))

        controller.next()
        controller.next()
        controller.previous()

        assert emitted == [(0, 1), (1, 2), (2, 1)]


class TestControllerCompletion:
    """Test completion via skip, next and quick tour."""

    def test_skip_from_middle(self, controller, recorder):
        """Test skip at step 2 fires once; later next/skip do not fire again."""
        controller.next()
        controller.next()
        controller.skip()

        assert controller.is_completed is True
        assert recorder.calls == 1

        controller.next()
        controller.skip()
        controller.previous()

        assert recorder.calls == 1
        assert controller.current_index == 2

    def test_wizard_completed_signal(self, controller, qtbot):
        """Test wizard_completed is emitted on completion."""
        with qtbot.waitSignal(controller.wizard_completed, timeout=1000):
            controller.skip()

    def test_navigation_queries_after_completion(self, controller):
        """Test navigation queries are False once completed."""
        controller.next()
        controller.skip()

        assert controller.can_go_next() is False
        assert controller.can_go_previous() is False

    def test_quick_tour(self, controller, recorder):
        """Test start then complete quick tour fires once."""
        flags = []
        controller.quick_tour_changed.connect(flags.append)

        controller.start_quick_tour()
        assert controller.quick_tour_active is True
        assert flags == [True]

        controller.complete_quick_tour()
        controller.complete_quick_tour()

        assert recorder.calls == 1

    def test_complete_quick_tour_without_start_is_ignored(self, controller, recorder):
        """Test complete_quick_tour does nothing while the overlay is inactive."""
        controller.complete_quick_tour()

        assert controller.is_completed is False
        assert recorder.calls == 0

    def test_reentrant_callback_fires_once(self, qapp):
        """Test a callback that calls back into the controller does not fire twice."""
        calls = []

        def on_complete():
            calls.append(1)
            controller.skip()
            controller.next()

        controller = WizardController(create_onboarding_catalog(), on_complete=on_complete)
        controller.skip()

        assert calls == [1]

    def test_callback_error_propagates(self, qapp):
        """Test callback exceptions reach the caller and completion still sticks."""
        def on_complete():
            raise RuntimeError("host failed")

        controller = WizardController(create_onboarding_catalog(), on_complete=on_complete)

        with pytest.raises(RuntimeError):
            controller.skip()

        assert controller.is_completed is True

    def test_without_callback(self, qapp):
        """Test the controller works with no callback (signal only)."""
        controller = WizardController(create_onboarding_catalog())
        controller.skip()

        assert controller.is_completed is True
