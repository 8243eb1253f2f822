# Copyright 2025 Loopper-AI
# Decision workflow: invoke handler → route on statusCode → Success | Failure
#
# Local counterpart of the deployed state machine (see definition.py).
# Invoking → Routing → {Success, Failure}. Single synchronous pass, no retries.
# Handler errors propagate untouched; the run then ends without a terminal state.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from .exceptions import UnroutedStatusError
from .handler import handle
from .models import Request, Result, StatusCode, WorkflowOutcome, WorkflowState

logger = logging.getLogger(__name__)

Invoker = Callable[[Request], Result]

ROUTES: dict[int, WorkflowOutcome] = {
    StatusCode.OK.value: WorkflowOutcome.SUCCESS,
    StatusCode.NOT_FOUND.value: WorkflowOutcome.FAILURE,
}

_TERMINAL_STATES = {
    WorkflowOutcome.SUCCESS: WorkflowState.SUCCESS,
    WorkflowOutcome.FAILURE: WorkflowState.FAILURE,
}


def route(result: Result) -> WorkflowOutcome:
    """Pick the terminal outcome for a result. Raises UnroutedStatusError."""
    outcome = ROUTES.get(result.status_code)
    if outcome is None:
        raise UnroutedStatusError(result.status_code)
    return outcome


@dataclass
class WorkflowRun:
    """States visited by one run, plus the handler result once available."""

    history: list[WorkflowState] = field(default_factory=list)
    result: Result | None = None
    outcome: WorkflowOutcome | None = None

    @property
    def state(self) -> WorkflowState | None:
        return self.history[-1] if self.history else None

    @property
    def finished(self) -> bool:
        return self.state is not None and self.state.is_terminal


class DecisionWorkflow:
    """Two-branch routing over the handler result."""

    def __init__(self, invoker: Invoker = handle):
        self.invoker = invoker

    def execute(self, request: Request | Mapping[str, Any], run: WorkflowRun | None = None) -> WorkflowRun:
        """Run once and return the full run record.

        ``request`` may be a raw invocation mapping; a missing body then
        raises MissingFieldError while still Invoking. Pass ``run`` to
        observe the visited states even when the invocation or routing raises.
        """
        run = run if run is not None else WorkflowRun()

        run.history.append(WorkflowState.INVOKING)
        if not isinstance(request, Request):
            request = Request.from_event(request)
        run.result = self.invoker(request)

        run.history.append(WorkflowState.ROUTING)
        run.outcome = route(run.result)

        run.history.append(_TERMINAL_STATES[run.outcome])
        logger.info("Workflow finished: status=%d outcome=%s", run.result.status_code, run.outcome.value)
        return run

    def run(self, request: Request | Mapping[str, Any]) -> WorkflowOutcome:
        return self.execute(request).outcome  # type: ignore[return-value]
