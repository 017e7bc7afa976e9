import pathlib

import pytest

pytest.importorskip("plotly")
AppTest = pytest.importorskip("streamlit.testing.v1").AppTest

from fund_selector import pipeline, state_manager
from fund_selector.form_io import InputValidationError

APP = pathlib.Path(__file__).resolve().parents[1] / "apps" / "fund_selector_streamlit.py"


@pytest.fixture
def app(monkeypatch, payload):
    monkeypatch.setattr(state_manager, "save_form_fields", lambda sid, fields: {"ok": True})
    at = AppTest.from_file(str(APP), default_timeout=30)
    # Start on the last wizard step with a complete form.
    at.session_state["session_id"] = "sess-test"
    at.session_state["form"] = dict(payload)
    at.session_state["step"] = 3
    at.session_state["result"] = None
    at.session_state["run_errors"] = []
    return at


def _see_plan(at):
    at.run()
    [btn] = [b for b in at.button if b.label == "See my plan"]
    btn.click().run()
    return at


def test_validation_errors_survive_rerun(app, monkeypatch):
    def fail(form):
        raise InputValidationError({"age": "Enter a valid age between 16 and 100."})

    monkeypatch.setattr(pipeline, "run_pipeline", fail)
    at = _see_plan(app)
    assert "Enter a valid age between 16 and 100." in [e.value for e in at.error]
    assert at.session_state["result"] is None


def test_unexpected_pipeline_error_is_shown(app, monkeypatch):
    def fail(form):
        raise RuntimeError("schema mismatch")

    monkeypatch.setattr(pipeline, "run_pipeline", fail)
    at = _see_plan(app)
    assert not at.exception
    assert any("Could not build your plan" in e.value for e in at.error)


def test_successful_run_clears_errors(app):
    app.session_state["run_errors"] = ["stale"]
    at = _see_plan(app)
    assert at.session_state["run_errors"] == []
    assert at.session_state["result"]["profile"]["final_risk"] == "HIGH"
