# PURPOSE: Turn a Profile into a JSON-ready dict and a plain-text result card.
# CONTEXT: Used by the pipeline (dict), the CLI and the Streamlit app (text/cards).

from __future__ import annotations
from typing import Any, Dict, List, Optional

from fund_selector.model_interface.types import Profile
from fund_selector.utils.formatting import format_inr, format_ratio


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Serialise a Profile to the `profile` block of the output schema."""
    return {
        "horizon": profile.horizon.name,
        "horizon_label": profile.horizon.label,
        "investable_surplus": profile.investable_surplus,
        "stated_risk": profile.inputs.stated_risk_tier.name,
        "final_risk": profile.final_risk_tier.name,
        "debt_service_ratio": round(profile.debt_service_ratio, 4),
        "savings_rate": round(profile.savings_rate, 4),
        "asset_split": profile.template.split_as_dict(),
        "categories": [
            {"name": c.name, "why": c.why, "percent": c.percent, "alt": c.alt}
            for c in profile.template.categories
        ],
    }


def render_text(profile: Profile, alerts: Optional[List[Dict[str, Any]]] = None,
                funds: Optional[List[Dict[str, Any]]] = None) -> str:
    lines = [
        "Your plan",
        "=========",
        f"Investable surplus : {format_inr(profile.investable_surplus)} / month",
        f"Horizon            : {profile.horizon.label}",
        f"Risk profile       : {profile.final_risk_tier.name}"
        + ("" if profile.final_risk_tier is profile.inputs.stated_risk_tier
           else f" (you chose {profile.inputs.stated_risk_tier.name})"),
        f"EMI / income       : {format_ratio(profile.debt_service_ratio)}",
        f"Savings rate       : {format_ratio(profile.savings_rate)}",
    ]

    if alerts:
        lines += ["", "Heads up"]
        lines += [f"  - {a['message']}" for a in alerts]

    lines += ["", "Asset allocation"]
    lines += [f"  {name:<8} {pct:>3}%" for name, pct in profile.template.asset_split]

    lines += ["", "Suggested categories"]
    for c in profile.template.categories:
        badge = f" [{c.percent}%]" if c.percent is not None else ""
        lines.append(f"  * {c.name}{badge}")
        lines.append(f"      {c.why}")
        if c.alt:
            lines.append(f"      Alternative: {c.alt}")

    if funds:
        lines += ["", "Fund ideas"]
        for f in funds:
            er = f.get("expense_ratio")
            er_txt = f", TER {er:.2f}%" if er is not None else ""
            lines.append(f"  * {f['scheme_name']} ({f.get('plan') or 'n/a'}{er_txt})")
            if f.get("rationale"):
                lines.append(f"      {f['rationale']}")

    lines += ["", "Educational only; not financial advice."]
    return "\n".join(lines)
