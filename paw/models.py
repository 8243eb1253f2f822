# Copyright 2025 Loopper-AI
# Data models for paw

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from .exceptions import InvalidFieldError, MissingFieldError


class StatusCode(enum.IntEnum):
    """Classification produced by the handler. The integer is the wire value."""

    OK = 200
    NOT_FOUND = 404


KNOWN_STATUS_CODES = frozenset(s.value for s in StatusCode)


class WorkflowOutcome(enum.Enum):
    SUCCESS = "Success"
    FAILURE = "Failure"


class WorkflowState(enum.Enum):
    INVOKING = "Invoking"
    ROUTING = "Routing"
    SUCCESS = "Success"
    FAILURE = "Failure"

    @property
    def is_terminal(self) -> bool:
        return self in (WorkflowState.SUCCESS, WorkflowState.FAILURE)


@dataclass(frozen=True)
class Request:
    """Invocation input. Only ``body`` is read."""

    body: str

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> Request:
        """Build from a raw invocation mapping.

        Raises MissingFieldError without ``body`` and InvalidFieldError when it is not text.
        """
        if not isinstance(event, Mapping) or "body" not in event:
            raise MissingFieldError("body")
        body = event["body"]
        if not isinstance(body, str):
            raise InvalidFieldError("body", f"expected text, got {type(body).__name__}")
        return cls(body=body)


@dataclass(frozen=True)
class Result:
    """Handler output: a status plus the request body, unchanged."""

    status: StatusCode | int
    body: str

    @property
    def status_code(self) -> int:
        return int(self.status)

    def to_dict(self) -> dict[str, Any]:
        return {"statusCode": self.status_code, "body": self.body}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Result:
        """Parse a serialized result.

        Codes outside StatusCode are kept as plain ints so routing can reject
        them. A non-numeric statusCode raises ValueError or TypeError.
        """
        if "statusCode" not in data:
            raise MissingFieldError("statusCode")
        if "body" not in data:
            raise MissingFieldError("body")
        code = int(data["statusCode"])
        status = StatusCode(code) if code in KNOWN_STATUS_CODES else code
        return cls(status=status, body=data["body"])


@dataclass(frozen=True)
class StateMachine:
    """Deployed state machine summary."""

    arn: str
    name: str

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> StateMachine:
        return cls(arn=item["stateMachineArn"], name=item["name"])

    def __str__(self) -> str:
        return self.name


@dataclass
class StateMachineExecution:
    """Single execution of a state machine."""

    arn: str
    machine_arn: str
    name: str
    start_date: datetime
    status: str = ""
    input: str | None = None
    output: str | None = None

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> StateMachineExecution:
        """Build from a ListExecutions item or a DescribeExecution response."""
        return cls(
            arn=item["executionArn"],
            machine_arn=item["stateMachineArn"],
            name=item["name"],
            start_date=item["startDate"],
            status=item.get("status", ""),
            input=item.get("input"),
            output=item.get("output"),
        )

    def __str__(self) -> str:
        return f"{self.name} : {self.start_date.isoformat()}"


@dataclass(frozen=True)
class ExecutionInput:
    """Parameters for starting an execution."""

    machine_arn: str
    input: str
