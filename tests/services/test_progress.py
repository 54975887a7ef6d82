# -*- coding: utf-8 -*-
"""
Tests for progress projection.
"""

import pytest

from services.wizard import project_progress


class TestProjectProgress:
    """Test the step position to percentage mapping."""

    def test_first_of_six(self):
        """Test first step of six is about 16.67%."""
        assert project_progress(0, 6) == pytest.approx(16.67, abs=0.01)

    def test_last_step_is_complete(self):
        """Test last step is 100%."""
        assert project_progress(5, 6) == 100.0

    def test_single_step_catalog(self):
        """Test a one-step wizard is at 100% immediately."""
        assert project_progress(0, 1) == 100.0

    @pytest.mark.parametrize("step_count", [1, 2, 3, 6, 10])
    def test_formula(self, step_count):
        """Test ((i + 1) / N) * 100 for every valid i."""
        for i in range(step_count):
            assert project_progress(i, step_count) == pytest.approx((i + 1) / step_count * 100)

    @pytest.mark.parametrize("step_count", [2, 3, 6, 10])
    def test_strictly_increasing(self, step_count):
        """Test progress strictly increases with the step index."""
        values = [project_progress(i, step_count) for i in range(step_count)]
        assert all(a < b for a, b in zip(values, values[1:]))

    @pytest.mark.parametrize("step_count", [1, 2, 6])
    def test_range(self, step_count):
        """Test progress stays in (0, 100]."""
        for i in range(step_count):
            assert 0 < project_progress(i, step_count) <= 100
