# -*- coding: utf-8 -*-
"""
Blockcast Service Layer
"""

# Lazy imports to avoid importing PyQt5 for the pure wizard services
__all__ = [
    "OnboardingStatusService",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "OnboardingStatusService":
        from .onboarding_status_service import OnboardingStatusService
        return OnboardingStatusService
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
