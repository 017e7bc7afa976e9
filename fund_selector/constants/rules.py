# Hand-tuned cash-flow thresholds for the risk resolver. Fractions of monthly income.
RULES = {
    "debt_service_high_ratio": 0.40,   # above this, downgrade one tier
    "low_savings_rate": 0.10,          # below this, downgrade one tier
    "nudge_up_debt_service_max": 0.20,
    "nudge_up_savings_rate_min": 0.25,
}

# Age bands for the horizon classifier (inclusive).
HORIZON_BANDS = {
    "long": (20, 45),
    "medium": (46, 55),
    "short_from": 56,
}
