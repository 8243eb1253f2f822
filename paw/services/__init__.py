# Copyright 2025 Loopper-AI
# Service modules

from .retry_service import RetryReport, RetryService

__all__ = ["RetryReport", "RetryService"]
