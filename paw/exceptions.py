# Copyright 2025 Loopper-AI
# Error taxonomy for paw

from __future__ import annotations


class PawError(Exception):
    """Base class for paw errors."""


class MissingFieldError(PawError, ValueError):
    """Invocation input lacks a required field."""

    def __init__(self, field: str):
        super().__init__(f"Missing required field: {field}")
        self.field = field


class InvalidFieldError(PawError, ValueError):
    """Invocation input has a required field of the wrong type."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid field {field}: {reason}")
        self.field = field


class UnroutedStatusError(PawError):
    """Workflow received a status code with no matching branch."""

    def __init__(self, status_code: int):
        super().__init__(f"No route for statusCode={status_code}")
        self.status_code = status_code


class InvocationError(PawError):
    """Remote function invocation failed or returned an unusable payload."""
