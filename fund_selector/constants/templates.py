# PURPOSE: Static allocation templates, one per risk tier, plus the category glossary.
# CONTEXT: Built once at import and never mutated; template_for() is the only lookup.

from __future__ import annotations
from types import MappingProxyType
from typing import Mapping

from fund_selector.model_interface.types import AllocationTemplate, CategoryEntry, RiskTier

# One sentence per category.
EXPLANATIONS: Mapping[str, str] = MappingProxyType({
    "Liquid Funds": "Ultra-short-duration debt funds that aim to park money safely and provide quick access.",
    "Short-Term Debt Funds": "Debt funds investing in short-duration bonds to seek relatively stable returns.",
    "Corporate Bond Funds": "Debt funds holding high-quality corporate bonds for stability and modest income.",
    "Conservative Hybrid Funds": "Mix of mostly debt with a small equity portion for limited growth potential.",
    "Large-Cap Index Funds": "Equity funds tracking India's biggest companies for broad, steady exposure.",
    "Large-Cap Funds": "Actively or passively invest in top-tier companies to provide resilient growth.",
    "Flexi-Cap Funds": "Equity funds that move across large, mid, and small caps to balance growth and flexibility.",
    "Mid-Cap Funds": "Equity funds in mid-sized companies with higher growth potential and higher volatility.",
    "Small-Cap Funds": "Equity funds in smaller companies with high growth potential and significant volatility.",
    "ELSS (Tax-saving)": "Equity funds with a 3-year lock-in that may offer Section 80C tax benefits.",
})


def _category(name: str, percent: int | None = None, alt: str | None = None) -> CategoryEntry:
    return CategoryEntry(name=name, why=EXPLANATIONS.get(name, ""), percent=percent, alt=alt)


TEMPLATES: Mapping[RiskTier, AllocationTemplate] = MappingProxyType({
    # The LOW equity sleeve can be a conservative hybrid or a large-cap index fund.
    RiskTier.LOW: AllocationTemplate(
        asset_split=(("Debt", 80), ("Equity", 20)),
        categories=(
            _category("Liquid Funds"),
            _category("Short-Term Debt Funds"),
            _category("Corporate Bond Funds"),
            _category("Conservative Hybrid Funds", alt="Large-Cap Index Funds"),
        ),
    ),
    RiskTier.MEDIUM: AllocationTemplate(
        asset_split=(("Debt", 30), ("Equity", 70)),
        categories=(
            _category("Short-Term Debt Funds", 30),
            _category("Large-Cap Funds", 40),
            _category("Flexi-Cap Funds", 20),
            _category("Mid-Cap Funds", 10),
        ),
    ),
    RiskTier.HIGH: AllocationTemplate(
        asset_split=(("Debt", 10), ("Equity", 90)),
        categories=(
            _category("Corporate Bond Funds", 10),
            _category("Flexi-Cap Funds", 30),
            _category("Mid-Cap Funds", 30),
            _category("Small-Cap Funds", 20),
            _category("ELSS (Tax-saving)", 10),
        ),
    ),
})


def template_for(tier: RiskTier) -> AllocationTemplate:
    """Return the allocation template for a risk tier (unknown values map to LOW)."""
    return TEMPLATES[RiskTier.from_label(tier)]
