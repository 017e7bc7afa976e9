# PURPOSE: Value types shared by the classifier, the resolver and the renderers.
# CONTEXT: Everything here is immutable once built; a Profile is constructed fresh
#          per submission and handed to the caller.

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class RiskTier(Enum):
    """
    Portfolio aggressiveness, totally ordered LOW < MEDIUM < HIGH.

    notes:
    - The enum value is the ordinal, so adjustments move along the order by +/-1.
    - step_up()/step_down() clamp at the boundaries instead of raising.
    """
    LOW = 0
    MEDIUM = 1
    HIGH = 2

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "RiskTier":
        return cls(max(cls.LOW.value, min(cls.HIGH.value, int(ordinal))))

    @classmethod
    def from_label(cls, label: Any) -> "RiskTier":
        """
        Map a stated tier (enum or string, any case) to a RiskTier.

        returns:
        - RiskTier – LOW when the value is missing or unrecognised.
        """
        if isinstance(label, cls):
            return label
        if not isinstance(label, str):
            return cls.LOW
        return cls.__members__.get(label.strip().upper(), cls.LOW)

    def step_down(self) -> "RiskTier":
        return RiskTier.from_ordinal(self.value - 1)

    def step_up(self) -> "RiskTier":
        return RiskTier.from_ordinal(self.value + 1)

    def __lt__(self, other: "RiskTier") -> bool:
        if not isinstance(other, RiskTier):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: "RiskTier") -> bool:
        if not isinstance(other, RiskTier):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: "RiskTier") -> bool:
        if not isinstance(other, RiskTier):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: "RiskTier") -> bool:
        if not isinstance(other, RiskTier):
            return NotImplemented
        return self.value >= other.value


class HorizonBucket(Enum):
    """Time-to-goal bucket derived from age. Values are the display labels."""
    LONG = "Long-Term (10+ years)"
    MEDIUM = "Medium-Term (5-10 years)"
    SHORT = "Short-Term (1-5 years)"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class FinancialInputs:
    """
    One wizard submission, already validated by form_io.

    attributes:
    - age: int – years, 16..100 once validated.
    - monthly_income: float – positive currency amount.
    - monthly_expenses: float – non-negative.
    - has_debt_service: bool – whether the user pays EMIs.
    - debt_service_amount: float – monthly EMI total; 0 when has_debt_service is False.
    - stated_risk_tier: RiskTier – the user's own risk preference.
    """
    age: int
    monthly_income: float
    monthly_expenses: float
    has_debt_service: bool
    debt_service_amount: float
    stated_risk_tier: RiskTier

    def __post_init__(self):
        if not self.has_debt_service and self.debt_service_amount:
            object.__setattr__(self, "debt_service_amount", 0.0)


@dataclass(frozen=True)
class CategoryEntry:
    name: str
    why: str
    percent: Optional[int] = None
    alt: Optional[str] = None


@dataclass(frozen=True)
class AllocationTemplate:
    """
    Fixed recommendation for one risk tier.

    attributes:
    - asset_split: tuple of (asset class, percent) pairs; percents sum to 100.
    - categories: ordered fund categories with their one-line explanations.
    """
    asset_split: Tuple[Tuple[str, int], ...]
    categories: Tuple[CategoryEntry, ...]

    def split_as_dict(self) -> Dict[str, int]:
        return dict(self.asset_split)


@dataclass(frozen=True)
class Ratios:
    debt_service_ratio: float
    surplus: float
    savings_rate: float


@dataclass(frozen=True)
class Profile:
    """The computed recommendation for one submission."""
    inputs: FinancialInputs
    horizon: HorizonBucket
    investable_surplus: float
    final_risk_tier: RiskTier
    template: AllocationTemplate
    ratios: Ratios = field(default_factory=lambda: Ratios(0.0, 0.0, 0.0))

    @property
    def debt_service_ratio(self) -> float:
        return self.ratios.debt_service_ratio

    @property
    def savings_rate(self) -> float:
        return self.ratios.savings_rate
