# -*- coding: utf-8 -*-
"""Progress projection for wizard step positions."""


def project_progress(current_step_index: int, step_count: int) -> float:
    """
    Get completion percentage for a step position.

    Args:
        current_step_index: Current step index (0-based)
        step_count: Total number of steps, must be > 0

    Returns:
        Progress percentage in (0.0, 100.0]; the first step already counts
        as started, the last step is 100.
    """
    return ((current_step_index + 1) / step_count) * 100.0
