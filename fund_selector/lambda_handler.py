"""
AWS Lambda handler: parses the API Gateway event, runs the pipeline, returns JSON.

PURPOSE:
- Entry point behind API Gateway (POST /plan).
- Invalid submissions get a 400 with per-field messages; unexpected failures get a
  500 with an error body. Every request is logged with request and correlation ids.
"""

from __future__ import annotations
import json
import time
import traceback
import uuid
from typing import Any, Dict

from jsonschema import ValidationError

from fund_selector.config import load_settings
from fund_selector.form_io import InputValidationError, error_to_string
from fund_selector.logging_setup import configure_logging
from fund_selector.observability import init_observability, xray_segment
from fund_selector.pipeline import run_pipeline

log = configure_logging()
init_observability()


def _response(body: Dict[str, Any], status_code: int = 200) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, ensure_ascii=False),
    }


def _parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Pull the submission out of the event.

    raises:
    - InputValidationError – when the body is not a JSON object.
    """
    if not isinstance(event, dict) or "body" not in event:
        return event if isinstance(event, dict) else {}
    body = event["body"]
    if isinstance(body, str):
        try:
            body = json.loads(body)
        except json.JSONDecodeError:
            raise InputValidationError({"body": "Request body must be valid JSON."})
    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise InputValidationError({"body": "Request body must be a JSON object."})
    return body


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """
    Lambda entry point.

    flow:
    1) Bind request/correlation ids.
    2) Parse the body and run the pipeline inside an X-Ray subsegment.
    3) 200 on success, 400 on invalid input, 500 otherwise.
    """
    t0 = time.time()
    request_id = getattr(context, "aws_request_id", None) or str(uuid.uuid4())
    headers = (event.get("headers") if isinstance(event, dict) else None) or {}
    correlation_id = headers.get("x-correlation-id") or str(uuid.uuid4())
    rlog = log.bind(request_id=request_id, correlation_id=correlation_id)
    rlog.info("request.received", event_type=type(event).__name__)

    try:
        payload = _parse_body(event)
        with xray_segment("run_pipeline"):
            result = run_pipeline(payload, settings=load_settings())
        rlog.info(
            "response.success",
            final_risk=result["profile"]["final_risk"],
            fund_search=result["fund_search"]["status"],
            latency_ms=round((time.time() - t0) * 1000, 1),
        )
        return _response(result, 200)

    except InputValidationError as e:
        latency_ms = round((time.time() - t0) * 1000, 1)
        rlog.info("response.invalid_input", fields=sorted(e.errors), latency_ms=latency_ms)
        return _response({"status": "error", "errors": e.errors, "latency_ms": latency_ms}, 400)

    except ValidationError as e:
        latency_ms = round((time.time() - t0) * 1000, 1)
        rlog.error("response.schema_invalid", error=error_to_string(e), latency_ms=latency_ms)
        return _response({"status": "error", "message": f"Output schema violation: {error_to_string(e)}",
                          "latency_ms": latency_ms}, 500)

    except Exception as e:
        latency_ms = round((time.time() - t0) * 1000, 1)
        rlog.error(
            "response.error",
            error=str(e),
            traceback=traceback.format_exc(limit=2),
            latency_ms=latency_ms,
        )
        return _response({"status": "error", "message": error_to_string(e), "latency_ms": latency_ms}, 500)
