# Copyright 2025 Loopper-AI
# paw: request classifier Lambda and its decision workflow

from .exceptions import InvalidFieldError, InvocationError, MissingFieldError, PawError, UnroutedStatusError
from .handler import handle, lambda_handler
from .models import Request, Result, StatusCode, WorkflowOutcome, WorkflowState
from .workflow import DecisionWorkflow, route

__all__ = [
    "DecisionWorkflow",
    "InvalidFieldError",
    "InvocationError",
    "MissingFieldError",
    "PawError",
    "Request",
    "Result",
    "StatusCode",
    "UnroutedStatusError",
    "WorkflowOutcome",
    "WorkflowState",
    "handle",
    "lambda_handler",
    "route",
]
