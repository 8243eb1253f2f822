# Copyright 2025 Loopper-AI
# Retry failed state machine executions with their original input

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from ..clients import StepFunctionsClient
from ..models import ExecutionInput, StateMachine, StateMachineExecution

logger = logging.getLogger(__name__)


@dataclass
class RetryReport:
    """Outcome of a retry batch."""

    started: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class RetryService:
    """Find failed executions and start them again."""

    def __init__(self, client: StepFunctionsClient):
        self.client = client

    def find_machine(self, name: str) -> StateMachine | None:
        return next((m for m in self.client.list_machines() if m.name == name), None)

    def find_failed(
        self,
        machine: StateMachine,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[StateMachineExecution]:
        return self.client.list_failed_executions(machine, start, end)

    def retry(
        self,
        executions: list[StateMachineExecution],
        on_progress: Callable[[StateMachineExecution], None] | None = None,
    ) -> RetryReport:
        """Restart each execution with the input it was originally given.

        Listings carry no input, so each execution is described first.
        """
        report = RetryReport()

        for execution in executions:
            full = self.client.describe_execution(execution.arn)
            if on_progress:
                on_progress(full)

            if full.input is None:
                logger.warning("No input recorded, skipping: name=%s", full.name)
                report.skipped.append(full.name)
                continue

            new_arn = self.client.start_execution(ExecutionInput(machine_arn=full.machine_arn, input=full.input))
            if new_arn:
                report.started.append(new_arn)
            else:
                report.failed.append(full.name)

        logger.info(
            "Retry finished: started=%d skipped=%d failed=%d",
            len(report.started),
            len(report.skipped),
            len(report.failed),
        )
        return report
