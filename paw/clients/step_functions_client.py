# Copyright 2025 Loopper-AI
# AWS Step Functions client

from __future__ import annotations

import logging
from datetime import datetime

import boto3
from botocore.exceptions import ClientError

from ..models import ExecutionInput, StateMachine, StateMachineExecution

logger = logging.getLogger(__name__)


def in_window(moment: datetime, start: datetime | None, end: datetime | None) -> bool:
    """Inclusive window check. A missing bound leaves that side open."""
    if start is not None and moment < start:
        return False
    if end is not None and moment > end:
        return False
    return True


class StepFunctionsClient:
    """Client for Step Functions state machines and executions."""

    def __init__(self, region: str | None = None, max_results: int = 1000):
        self.max_results = max_results
        self._client = boto3.client("stepfunctions", region_name=region)

    def list_machines(self) -> list[StateMachine]:
        paginator = self._client.get_paginator("list_state_machines")
        machines = [
            StateMachine.from_api(item)
            for page in paginator.paginate()
            for item in page.get("stateMachines", [])
        ]
        logger.info("Listed state machines: count=%d", len(machines))
        return machines

    def list_failed_executions(
        self,
        machine: StateMachine,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[StateMachineExecution]:
        """Failed executions of ``machine`` started within [start, end].

        Only the first page (up to max_results) is read.
        """
        response = self._client.list_executions(
            stateMachineArn=machine.arn,
            statusFilter="FAILED",
            maxResults=self.max_results,
        )
        executions = [StateMachineExecution.from_api(item) for item in response.get("executions", [])]
        selected = [e for e in executions if in_window(e.start_date, start, end)]
        logger.info(
            "Failed executions: machine=%s total=%d in_window=%d",
            machine.name,
            len(executions),
            len(selected),
        )
        return selected

    def describe_execution(self, execution_arn: str) -> StateMachineExecution:
        response = self._client.describe_execution(executionArn=execution_arn)
        return StateMachineExecution.from_api(response)

    def start_execution(self, execution_input: ExecutionInput) -> str | None:
        """Start an execution. Returns executionArn or None on failure."""
        try:
            response = self._client.start_execution(
                stateMachineArn=execution_input.machine_arn,
                input=execution_input.input,
            )
            execution_arn = response.get("executionArn")
            logger.info("Execution started: arn=%s", execution_arn)
            return execution_arn

        except ClientError as e:
            logger.error("Step Functions error [%s]: %s", e.response.get("Error", {}).get("Code"), e)
            return None
