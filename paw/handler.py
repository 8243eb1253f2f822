# Copyright 2025 Loopper-AI
# Lambda handler: classify request body → statusCode + body
#
# "erro" → 404, anything else → 200. Body is echoed unchanged.
# A missing body fails the invocation instead of defaulting to 200, so the
# workflow never mistakes a bad request for the "erro" branch.

from __future__ import annotations

import logging
from typing import Any, Mapping

from .config import Config
from .exceptions import InvalidFieldError, MissingFieldError
from .models import Request, Result, StatusCode

logger = logging.getLogger()

ERROR_BODY = "erro"


def handle(request: Request | Mapping[str, Any]) -> Result:
    """Classify a request or a raw invocation mapping. Pure: no I/O, no shared state."""
    if not isinstance(request, Request):
        request = Request.from_event(request)
    status = StatusCode.NOT_FOUND if request.body == ERROR_BODY else StatusCode.OK
    return Result(status=status, body=request.body)


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Direct or Step Functions invocation → {"statusCode", "body"}."""
    config = Config.from_environment()
    logger.setLevel(getattr(logging, config.log_level, logging.INFO))

    request_id = getattr(context, "aws_request_id", "") if context else ""
    logger.info("lambda_handler started request_id=%s bucket=%s", request_id, config.bucket)

    try:
        request = Request.from_event(event)
    except (MissingFieldError, InvalidFieldError) as e:
        logger.error("Rejected invocation: %s request_id=%s", e, request_id)
        raise

    result = handle(request)

    logger.info("Classified: status=%d request_id=%s", result.status_code, request_id)
    return result.to_dict()
