# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class StepOutOfRangeError(IndexError):
    """Exception raised when a step position falls outside the catalog."""

    def __init__(self, index: int, step_count: int, context: str = None):
        message = f"Step index {index} out of range (valid range: 0-{step_count - 1})"
        super().__init__(message)
        self.message = message
        self.index = index
        self.step_count = step_count
        self.context = context

    def __str__(self):
        if self.context:
            return f"[{self.context}] {self.message}"
        return self.message


class InvalidCatalogError(ValueError):
    """Exception raised for a malformed step catalog."""

    def __init__(self, message: str, errors: list = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        self.context = context
