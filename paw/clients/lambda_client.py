# Copyright 2025 Loopper-AI
# AWS Lambda client: invoke the deployed handler as a workflow invoker

from __future__ import annotations

import json
import logging

import boto3
from botocore.exceptions import ClientError

from ..exceptions import InvocationError
from ..models import Request, Result

logger = logging.getLogger(__name__)


class LambdaClient:
    """Synchronous RequestResponse invocations of the handler function."""

    def __init__(self, function_name: str, region: str | None = None):
        self.function_name = function_name
        self._client = boto3.client("lambda", region_name=region)

    def invoke(self, request: Request) -> Result:
        """Invoke with ``{"body": ...}``. Raises InvocationError on any failed invocation."""
        try:
            response = self._client.invoke(
                FunctionName=self.function_name,
                InvocationType="RequestResponse",
                Payload=json.dumps({"body": request.body}).encode("utf-8"),
            )
        except ClientError as e:
            logger.error("Lambda error [%s]: %s", e.response.get("Error", {}).get("Code"), e)
            raise InvocationError(f"Invoke {self.function_name} failed: {e}") from e

        raw = response["Payload"].read().decode("utf-8", errors="replace")

        # Handler exceptions come back as 200 with FunctionError set
        if response.get("FunctionError"):
            logger.error("Function error: type=%s payload=%s", response["FunctionError"], raw[:500])
            raise InvocationError(f"{self.function_name} raised {response['FunctionError']}: {raw[:200]}")

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise InvocationError(f"Invalid JSON from {self.function_name}: {raw[:200]}") from e

        if not isinstance(data, dict) or "statusCode" not in data:
            raise InvocationError(f"Unexpected payload from {self.function_name}: {raw[:200]}")

        # Unknown numeric codes pass through; route() rejects them
        try:
            result = Result.from_dict(data)
        except (TypeError, ValueError) as e:
            logger.error("Unreadable result from %s: %s", self.function_name, e)
            raise InvocationError(f"Unreadable result from {self.function_name}: {raw[:200]}") from e

        logger.info("Invoked %s: status=%d", self.function_name, result.status_code)
        return result
