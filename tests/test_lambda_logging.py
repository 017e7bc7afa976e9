import json
import logging

from fund_selector.lambda_handler import handler


class Ctx:
    aws_request_id = "req-123"


def test_handler_exception_path(monkeypatch, payload):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")
    monkeypatch.setattr("fund_selector.lambda_handler.run_pipeline", boom)

    resp = handler({"body": json.dumps(payload)}, Ctx())
    assert resp["statusCode"] == 500
    body = json.loads(resp["body"])
    assert body["status"] == "error"
    assert body["message"] == "RuntimeError: boom"
    assert "latency_ms" in body

def test_handler_schema_violation_becomes_500(monkeypatch, payload):
    from fund_selector import pipeline

    def bad_profile(profile):
        d = {"horizon": "SOMEDAY"}
        return d
    monkeypatch.setattr(pipeline, "profile_to_dict", bad_profile)

    resp = handler({"body": json.dumps(payload)}, Ctx())
    assert resp["statusCode"] == 500
    assert "Output schema violation" in json.loads(resp["body"])["message"]

def test_handler_logs_correlation_id(caplog, payload):
    with caplog.at_level(logging.INFO):
        handler({"body": json.dumps(payload), "headers": {"x-correlation-id": "corr-abc"}}, Ctx())
    lines = [json.loads(r.getMessage()) for r in caplog.records if r.getMessage().startswith("{")]
    received = [l for l in lines if l.get("event") == "request.received"]
    assert received and received[-1]["correlation_id"] == "corr-abc"
    assert received[-1]["request_id"] == "req-123"
    assert received[-1]["service"] == "FundSelector"
    assert any(l.get("event") == "response.success" and l["final_risk"] == "HIGH" for l in lines)
