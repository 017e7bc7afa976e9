# PURPOSE: Submission pipeline: validate the form, build the profile, raise alerts,
#          optionally enrich with fund ideas, and validate the final output.
# CONTEXT: Shared by the Lambda handler, the CLI and the Streamlit app.

from __future__ import annotations
import json, time, uuid
from datetime import datetime
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo

from fund_selector.config import Settings, load_settings
from fund_selector.constants.templates import template_for
from fund_selector.form_io import parse_inputs, validate_profile_output
from fund_selector.horizon import classify_horizon
from fund_selector.logging_setup import get_logger
from fund_selector.model_interface.types import FinancialInputs, Profile
from fund_selector.render import profile_to_dict
from fund_selector.risk_resolver import compute_ratios, resolve_risk
from fund_selector.tools.fund_search import FundSearchError, build_request, search_funds
from fund_selector.tools.risk_alerts import alerts_for_profile

TZ = ZoneInfo("Asia/Kolkata")
log = get_logger(__name__)


def _run_id() -> str:
    """Short random prefix plus a local timestamp, e.g. 'a1b2c3d4-20261017093000'."""
    return uuid.uuid4().hex[:8] + "-" + datetime.now(TZ).strftime("%Y%m%d%H%M%S")


def build_profile(inputs: FinancialInputs) -> Profile:
    """
    Compute the recommendation for one submission.

    steps:
    1) Horizon from age.
    2) Cash-flow ratios and investable surplus.
    3) Final risk tier.
    4) Allocation template for that tier.
    """
    horizon = classify_horizon(inputs.age)
    ratios = compute_ratios(inputs.monthly_income, inputs.monthly_expenses, inputs.debt_service_amount)
    final = resolve_risk(
        inputs.stated_risk_tier,
        horizon,
        inputs.monthly_income,
        inputs.monthly_expenses,
        inputs.debt_service_amount,
    )
    return Profile(
        inputs=inputs,
        horizon=horizon,
        investable_surplus=ratios.surplus,
        final_risk_tier=final,
        template=template_for(final),
        ratios=ratios,
    )


def enrich_with_funds(profile: Profile, settings: Settings, session=None) -> Dict[str, Any]:
    """
    Ask the fund-search backend for candidates.

    returns:
    - dict – {"status": "ok"|"error"|"skipped", ...}. Failures are reported here and
      never change the profile.
    """
    if not settings.fund_search_enabled:
        return {"status": "skipped", "message": "Fund search is not configured."}
    request = build_request(profile, settings)
    try:
        funds = search_funds(profile, settings, session=session)
    except FundSearchError as e:
        log.warning("fund_search.failed", error=str(e), status_code=e.status_code)
        return {"status": "error", "message": str(e), "request": request}
    return {"status": "ok", "request": request, "funds": [f.to_dict() for f in funds]}


def run_pipeline(payload: Dict[str, Any], settings: Optional[Settings] = None,
                 search: bool = True, session=None) -> Dict[str, Any]:
    """
    End-to-end run for one wizard submission.

    steps:
    1) Validate and parse the form (raises InputValidationError).
    2) Build the profile.
    3) Alerts.
    4) Fund-search enrichment if enabled.
    5) Assemble and validate the output.

    returns:
    - dict – {status, run_id, profile, alerts, fund_search, latency_ms}.
    """
    t0 = time.time()
    settings = settings or load_settings()

    inputs = parse_inputs(payload)
    profile = build_profile(inputs)
    alerts = alerts_for_profile(profile)
    log.info(
        "profile.built",
        horizon=profile.horizon.name,
        stated_risk=inputs.stated_risk_tier.name,
        final_risk=profile.final_risk_tier.name,
        alerts=len(alerts),
    )

    if search:
        fund_search = enrich_with_funds(profile, settings, session=session)
    else:
        fund_search = {"status": "skipped", "message": "Fund search not requested."}

    out = {
        "status": "ok",
        "run_id": _run_id(),
        "profile": profile_to_dict(profile),
        "alerts": alerts,
        "fund_search": fund_search,
        "latency_ms": round((time.time() - t0) * 1000, 1),
    }
    validate_profile_output(out)
    return out


if __name__ == "__main__":
    demo = {"age": 30, "monthly_income": 100000, "monthly_expenses": 40000,
            "has_debt_service": True, "debt_service_amount": 10000, "stated_risk": "MEDIUM"}
    print(json.dumps(run_pipeline(demo, search=False), indent=2, ensure_ascii=False))
