# PURPOSE: Map an age to an investment-horizon bucket.

from __future__ import annotations

from fund_selector.constants.rules import HORIZON_BANDS
from fund_selector.model_interface.types import HorizonBucket


def classify_horizon(age: int) -> HorizonBucket:
    """
    Classify an age into LONG, MEDIUM or SHORT.

    notes:
    - Total over all integers. Ages under 20 (zero and negatives included) default to LONG.
    """
    long_lo, long_hi = HORIZON_BANDS["long"]
    med_lo, med_hi = HORIZON_BANDS["medium"]
    if long_lo <= age <= long_hi:
        return HorizonBucket.LONG
    if med_lo <= age <= med_hi:
        return HorizonBucket.MEDIUM
    if age >= HORIZON_BANDS["short_from"]:
        return HorizonBucket.SHORT
    return HorizonBucket.LONG
