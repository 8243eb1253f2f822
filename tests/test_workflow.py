# Copyright 2025 Loopper-AI
# Tests for the decision workflow and its state machine definition

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest


class TestDecisionWorkflow:
    """Test suite for DecisionWorkflow."""

    def test_erro_reaches_failure(self):
        from paw.models import Request, WorkflowOutcome
        from paw.workflow import DecisionWorkflow

        assert DecisionWorkflow().run(Request(body="erro")) is WorkflowOutcome.FAILURE

    @pytest.mark.parametrize("body", ["ok", "", "anything else"])
    def test_other_bodies_reach_success(self, body):
        from paw.models import Request, WorkflowOutcome
        from paw.workflow import DecisionWorkflow

        assert DecisionWorkflow().run(Request(body=body)) is WorkflowOutcome.SUCCESS

    def test_history(self):
        from paw.models import Request, WorkflowState
        from paw.workflow import DecisionWorkflow

        run = DecisionWorkflow().execute(Request(body="erro"))

        assert run.history == [WorkflowState.INVOKING, WorkflowState.ROUTING, WorkflowState.FAILURE]
        assert run.finished
        assert run.result.to_dict() == {"statusCode": 404, "body": "erro"}

    def test_custom_invoker(self):
        from paw.models import Request, Result, StatusCode, WorkflowOutcome
        from paw.workflow import DecisionWorkflow

        invoker = MagicMock(return_value=Result(status=StatusCode.OK, body="remote"))
        outcome = DecisionWorkflow(invoker).run(Request(body="erro"))

        assert outcome is WorkflowOutcome.SUCCESS
        invoker.assert_called_once_with(Request(body="erro"))

    def test_invoker_error_reaches_no_terminal_state(self):
        """Handler errors propagate and the run stops in Invoking."""
        from paw.exceptions import MissingFieldError
        from paw.models import Request, WorkflowState
        from paw.workflow import DecisionWorkflow, WorkflowRun

        invoker = MagicMock(side_effect=MissingFieldError("body"))
        run = WorkflowRun()

        with pytest.raises(MissingFieldError):
            DecisionWorkflow(invoker).execute(Request(body="x"), run)

        assert run.state is WorkflowState.INVOKING
        assert run.outcome is None
        assert not run.finished

    def test_raw_mapping(self):
        from paw.models import WorkflowOutcome
        from paw.workflow import DecisionWorkflow

        assert DecisionWorkflow().run({"body": "erro"}) is WorkflowOutcome.FAILURE
        assert DecisionWorkflow().run({"body": "ok"}) is WorkflowOutcome.SUCCESS

    def test_empty_mapping_reaches_no_terminal_state(self):
        from paw.exceptions import MissingFieldError
        from paw.models import WorkflowState
        from paw.workflow import DecisionWorkflow, WorkflowRun

        with pytest.raises(MissingFieldError):
            DecisionWorkflow().run({})

        run = WorkflowRun()
        invoker = MagicMock()
        with pytest.raises(MissingFieldError):
            DecisionWorkflow(invoker).execute({}, run)

        assert run.history == [WorkflowState.INVOKING]
        assert run.outcome is None
        invoker.assert_not_called()

    def test_unrouted_status(self):
        from paw.exceptions import UnroutedStatusError
        from paw.models import Request, WorkflowState
        from paw.workflow import DecisionWorkflow, WorkflowRun

        result = MagicMock(status_code=500, body="x")
        run = WorkflowRun()

        with pytest.raises(UnroutedStatusError) as exc_info:
            DecisionWorkflow(MagicMock(return_value=result)).execute(Request(body="x"), run)

        assert exc_info.value.status_code == 500
        assert run.state is WorkflowState.ROUTING


class TestRoute:
    """Test suite for route()."""

    def test_routes(self):
        from paw.models import Result, StatusCode, WorkflowOutcome
        from paw.workflow import route

        assert route(Result(status=StatusCode.OK, body="")) is WorkflowOutcome.SUCCESS
        assert route(Result(status=StatusCode.NOT_FOUND, body="")) is WorkflowOutcome.FAILURE

    def test_every_status_is_routed(self):
        from paw.models import StatusCode
        from paw.workflow import ROUTES

        assert set(ROUTES) == {s.value for s in StatusCode}


class TestDefinition:
    """Test suite for the state machine definition."""

    def test_structure(self):
        from paw.definition import build_definition

        definition = build_definition("PawLambda")
        states = definition["States"]

        assert definition["StartAt"] == "Invoke"
        assert states["Invoke"]["Type"] == "Task"
        assert states["Invoke"]["Resource"] == "arn:aws:states:::lambda:invoke"
        assert states["Invoke"]["Parameters"] == {"FunctionName": "PawLambda", "Payload.$": "$"}
        assert states["Invoke"]["OutputPath"] == "$.Payload"
        assert states["Invoke"]["Next"] == "Processor"
        assert states["DeuBom"] == {"Type": "Succeed"}
        assert states["DeuRuim"] == {"Type": "Fail"}

    def test_choices_match_local_routes(self):
        from paw.definition import build_definition

        processor = build_definition("PawLambda")["States"]["Processor"]
        branches = {c["NumericEquals"]: c["Next"] for c in processor["Choices"]}

        assert processor["Type"] == "Choice"
        assert branches == {200: "DeuBom", 404: "DeuRuim"}
        assert all(c["Variable"] == "$.statusCode" for c in processor["Choices"])
        assert "Default" not in processor

    def test_to_json(self):
        from paw.definition import build_definition, to_json

        definition = build_definition("arn:aws:lambda:us-east-1:123456789012:function:PawLambda")
        assert json.loads(to_json(definition)) == definition
