# PURPOSE: Resolve the final risk tier from the stated tier, the horizon and cash-flow ratios.
# CONTEXT: Pure rule evaluation. Rules run in a fixed order (downgrade, short-horizon cap,
#          nudge up) over one local tier; reordering them changes results.

from __future__ import annotations
from typing import Any

from fund_selector.constants.rules import RULES
from fund_selector.model_interface.types import HorizonBucket, Ratios, RiskTier


def compute_ratios(income: float, expenses: float, debt_service_amount: float) -> Ratios:
    """
    Derive the cash-flow ratios used by the rules.

    parameters:
    - income: float – monthly income.
    - expenses: float – monthly expenses.
    - debt_service_amount: float – monthly EMI total.

    returns:
    - Ratios – debt_service_ratio, surplus and savings_rate.

    notes:
    - Both ratios are 0 when income <= 0; surplus is still reported as-is.
    """
    surplus = income - expenses - debt_service_amount
    if income <= 0:
        return Ratios(debt_service_ratio=0.0, surplus=surplus, savings_rate=0.0)
    return Ratios(
        debt_service_ratio=debt_service_amount / income,
        surplus=surplus,
        savings_rate=surplus / income,
    )


def resolve_risk(stated_tier: Any, horizon: HorizonBucket, income: float,
                 expenses: float, debt_service_amount: float) -> RiskTier:
    """
    Apply the adjustment rules to the stated tier.

    flow:
    1) Start from the stated tier (unrecognised values start at LOW).
    2) Downgrade one step if debt service > 40% of income or savings rate < 10%.
    3) Force LOW for a SHORT horizon.
    4) Nudge up one step for a LONG horizon with debt service <= 20% and savings rate >= 25%.

    returns:
    - RiskTier – the final tier. Never raises.
    """
    ratios = compute_ratios(income, expenses, debt_service_amount)
    tier = RiskTier.from_label(stated_tier)

    # 1) Affordability stress: one step, even when both conditions hold
    if (ratios.debt_service_ratio > RULES["debt_service_high_ratio"]
            or ratios.savings_rate < RULES["low_savings_rate"]):
        tier = tier.step_down()

    # 2) Capital preservation for near-term goals
    if horizon is HorizonBucket.SHORT:
        tier = RiskTier.LOW

    # 3) Healthy cash flow on a long horizon
    if (horizon is HorizonBucket.LONG
            and ratios.debt_service_ratio <= RULES["nudge_up_debt_service_max"]
            and ratios.savings_rate >= RULES["nudge_up_savings_rate_min"]):
        tier = tier.step_up()

    return tier
