# PURPOSE: Plain-language alerts shown above the recommendation.
# CONTEXT: Called by the pipeline after the profile is built; reads the profile only.

from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from fund_selector.constants.rules import RULES
from fund_selector.model_interface.types import HorizonBucket, Profile


@dataclass
class Alert:
    """
    attributes:
    - type: str – short identifier, e.g. 'high_debt_service'.
    - severity: str – 'info', 'medium' or 'high'.
    - message: str – text shown to the user.
    """
    type: str
    severity: str
    message: str


def alerts_for_profile(profile: Profile) -> List[Dict[str, Any]]:
    """
    Evaluate the profile and return alerts as plain dicts (JSON-ready).
    """
    alerts: list[Alert] = []

    if profile.investable_surplus <= 0:
        alerts.append(Alert(
            "negative_surplus",
            "high",
            "Your investable surplus is zero or negative. Consider lowering expenses or EMIs "
            "and building an emergency fund before investing.",
        ))

    if profile.debt_service_ratio > RULES["debt_service_high_ratio"]:
        alerts.append(Alert(
            "high_debt_service",
            "medium",
            "Your EMI is a high share of income (>40%). We lowered your risk profile to "
            "prioritize stability.",
        ))

    if profile.horizon is HorizonBucket.SHORT:
        alerts.append(Alert(
            "short_horizon_cap",
            "info",
            "Short-term goals call for capital preservation. We capped your risk at Low.",
        ))

    return [asdict(a) for a in alerts]
