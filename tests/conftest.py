import os

import pytest


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    # Keep tests offline and deterministic regardless of the developer's shell.
    for k in ("FUND_SEARCH_URL", "USE_XRAY", "LOG_LEVEL", "ENV"):
        monkeypatch.delenv(k, raising=False)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", os.environ.get("AWS_DEFAULT_REGION", "ap-south-1"))
    monkeypatch.setenv("AWS_REGION", "ap-south-1")


@pytest.fixture
def payload():
    return {
        "age": 30,
        "monthly_income": 100000,
        "monthly_expenses": 40000,
        "has_debt_service": True,
        "debt_service_amount": 10000,
        "stated_risk": "MEDIUM",
    }


class FakeResponse:
    def __init__(self, status_code=200, data=None, bad_json=False):
        self.status_code = status_code
        self._data = data
        self._bad_json = bad_json

    def json(self):
        if self._bad_json:
            raise ValueError("not json")
        return self._data


class FakeSession:
    """Stands in for requests.Session; records every POST."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def post(self, url, json=None, timeout=None):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        if self.exc:
            raise self.exc
        return self.response


@pytest.fixture
def fund_record():
    return {
        "scheme_name": "Alpha Flexi Cap Fund",
        "plan": "Direct",
        "category": "Flexi-Cap Funds",
        "expense_ratio": 0.62,
        "aum_cr": 25000,
        "returns": {"1y": 14.2, "3y": 16.1},
        "rationale": "Low cost and consistent.",
        "citations": ["https://amfiindia.com/x"],
    }


@pytest.fixture
def make_session():
    """make_session(status, data) or make_session(exc=...) -> FakeSession."""
    def _make(status_code=200, data=None, bad_json=False, exc=None):
        if exc is not None:
            return FakeSession(exc=exc)
        return FakeSession(FakeResponse(status_code, data, bad_json))
    return _make
