from fund_selector.form_io import parse_inputs
from fund_selector.pipeline import build_profile
from fund_selector.render import profile_to_dict, render_text


def test_profile_to_dict(payload):
    d = profile_to_dict(build_profile(parse_inputs(payload)))
    assert d["horizon"] == "LONG"
    assert d["stated_risk"] == "MEDIUM"
    assert d["final_risk"] == "HIGH"
    assert d["investable_surplus"] == 50000
    assert d["asset_split"] == {"Debt": 10, "Equity": 90}
    assert d["categories"][0] == {
        "name": "Corporate Bond Funds",
        "why": "Debt funds holding high-quality corporate bonds for stability and modest income.",
        "percent": 10,
        "alt": None,
    }

def test_render_text_mentions_changes_and_alternatives():
    profile = build_profile(parse_inputs({
        "age": 60, "monthly_income": 60000, "monthly_expenses": 30000,
        "has_debt_service": False, "stated_risk": "HIGH",
    }))
    text = render_text(profile, [{"type": "short_horizon_cap", "severity": "info", "message": "Capped."}])
    assert "₹30,000 / month" in text
    assert "LOW (you chose HIGH)" in text
    assert "Alternative: Large-Cap Index Funds" in text
    assert "  - Capped." in text
    assert "[" not in text.split("Suggested categories")[1]

def test_render_text_lists_funds(payload):
    profile = build_profile(parse_inputs(payload))
    funds = [{"scheme_name": "Alpha Flexi Cap", "plan": "Direct", "expense_ratio": 0.5, "rationale": "Low cost."}]
    text = render_text(profile, [], funds)
    assert "Alpha Flexi Cap (Direct, TER 0.50%)" in text
    assert "[30%]" in text
