# Copyright 2025 Loopper-AI
# Amazon States Language document for the decision workflow
#
# Invoke (Lambda task, OutputPath $.Payload) → Processor (Choice on $.statusCode)
#   200 → DeuBom (Succeed)
#   404 → DeuRuim (Fail)
# No Default branch: any other status fails the execution with
# States.NoChoiceMatched, same as UnroutedStatusError locally.

from __future__ import annotations

import json
from typing import Any

from .models import WorkflowOutcome
from .workflow import ROUTES

INVOKE_STATE = "Invoke"
CHOICE_STATE = "Processor"
TERMINAL_STATE_NAMES = {
    WorkflowOutcome.SUCCESS: "DeuBom",
    WorkflowOutcome.FAILURE: "DeuRuim",
}

LAMBDA_INVOKE_RESOURCE = "arn:aws:states:::lambda:invoke"


def build_definition(function_name: str) -> dict[str, Any]:
    """Build the state machine definition for a deployed handler function (name or ARN)."""
    choices = [
        {
            "Variable": "$.statusCode",
            "NumericEquals": status_code,
            "Next": TERMINAL_STATE_NAMES[outcome],
        }
        for status_code, outcome in ROUTES.items()
    ]

    return {
        "StartAt": INVOKE_STATE,
        "States": {
            INVOKE_STATE: {
                "Type": "Task",
                "Resource": LAMBDA_INVOKE_RESOURCE,
                "Parameters": {
                    "FunctionName": function_name,
                    "Payload.$": "$",
                },
                "OutputPath": "$.Payload",
                "Next": CHOICE_STATE,
            },
            CHOICE_STATE: {
                "Type": "Choice",
                "Choices": choices,
            },
            TERMINAL_STATE_NAMES[WorkflowOutcome.SUCCESS]: {"Type": "Succeed"},
            TERMINAL_STATE_NAMES[WorkflowOutcome.FAILURE]: {"Type": "Fail"},
        },
    }


def to_json(definition: dict[str, Any]) -> str:
    return json.dumps(definition, indent=2)
