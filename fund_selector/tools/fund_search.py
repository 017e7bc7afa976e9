# PURPOSE: Client for the external fund-search service that suggests concrete schemes
#          for a computed profile.
# CONTEXT: Enrichment only. Callers treat any FundSearchError as "no suggestions" and
#          keep the profile they already have.

from __future__ import annotations
import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

import requests

from fund_selector.config import Settings
from fund_selector.logging_setup import get_logger
from fund_selector.model_interface.types import Profile, RiskTier

log = get_logger(__name__)

# Search category heuristic per final tier.
CATEGORY_BY_TIER = {
    RiskTier.HIGH: "Flexi-Cap Funds",
    RiskTier.MEDIUM: "Large-Cap Funds",
    RiskTier.LOW: "Large-Cap Index",
}

# Benchmark index hinted to the backend for each category.
INDEX_BY_CATEGORY = {
    "Flexi-Cap Funds": "NIFTY 500 TRI",
    "Large-Cap Funds": "NIFTY 100 TRI",
    "Large-Cap Index": "NIFTY 50 TRI",
}


class FundSearchError(RuntimeError):
    """Transport failure, non-2xx status, malformed body or an empty result."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass
class FundCandidate:
    scheme_name: str
    plan: str = ""
    category: str = ""
    expense_ratio: Optional[float] = None
    aum_cr: Optional[float] = None
    returns: Dict[str, float] = field(default_factory=dict)
    rationale: str = ""
    citations: List[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, rec: Dict[str, Any]) -> "FundCandidate":
        """
        Build a candidate from one record of the response's `funds` array.

        notes:
        - Accepts `scheme_name` or `scheme`/`name`; returns may come as a mapping or
          as flat `return_1y`/`return_3y`/`return_5y` fields.
        """
        if not isinstance(rec, dict):
            raise FundSearchError(f"Fund record is not an object: {rec!r}")
        name = rec.get("scheme_name") or rec.get("scheme") or rec.get("name")
        if not name:
            raise FundSearchError("Fund record without a scheme name")
        citations = rec.get("citations") or []
        if not isinstance(citations, list):
            raise FundSearchError(f"Fund record citations must be a list, got {citations!r}")
        try:
            returns = rec.get("returns")
            if not isinstance(returns, dict):
                returns = {k[len("return_"):]: rec[k] for k in ("return_1y", "return_3y", "return_5y")
                           if rec.get(k) is not None}
            return cls(
                scheme_name=str(name),
                plan=str(rec.get("plan") or ""),
                category=str(rec.get("category") or ""),
                expense_ratio=_opt_float(rec.get("expense_ratio")),
                aum_cr=_opt_float(rec.get("aum_cr", rec.get("aum"))),
                returns={str(k): _opt_float(v) for k, v in returns.items() if v not in (None, "")},
                rationale=str(rec.get("rationale") or ""),
                citations=[str(c) for c in citations],
            )
        except (TypeError, AttributeError) as e:
            raise FundSearchError(f"Malformed fund record: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _opt_float(v) -> Optional[float]:
    if v is None or v == "":
        return None
    try:
        value = float(v)
    except (TypeError, ValueError):
        raise FundSearchError(f"Expected a number, got {v!r}")
    if not math.isfinite(value):
        raise FundSearchError(f"Expected a finite number, got {v!r}")
    return value


def category_for_tier(tier: RiskTier) -> str:
    return CATEGORY_BY_TIER[RiskTier.from_label(tier)]


def build_request(profile: Profile, settings: Settings) -> Dict[str, Any]:
    """
    Request body for the search backend.

    returns:
    - dict – country, category, risk, plan, max_expense_ratio, min_aum_cr, index, max_candidates.
    """
    category = category_for_tier(profile.final_risk_tier)
    return {
        "country": settings.fund_search_country,
        "category": category,
        "risk": profile.final_risk_tier.name,
        "plan": settings.fund_search_plan,
        "max_expense_ratio": settings.fund_search_max_expense_ratio,
        "min_aum_cr": settings.fund_search_min_aum_cr,
        "index": INDEX_BY_CATEGORY.get(category, ""),
        "max_candidates": settings.fund_search_max_candidates,
    }


def search_funds(profile: Profile, settings: Settings,
                 session: Optional[requests.Session] = None) -> List[FundCandidate]:
    """
    POST the search request and parse the candidates.

    parameters:
    - profile: Profile – the computed recommendation.
    - settings: Settings – must carry fund_search_url.
    - session: requests.Session (optional) – reused connection pool; defaults to requests.

    returns:
    - list[FundCandidate] – at most max_candidates entries.

    raises:
    - FundSearchError – on any failure, including an empty result.
    """
    if not settings.fund_search_url:
        raise FundSearchError("Fund search is not configured (FUND_SEARCH_URL unset)")

    body = build_request(profile, settings)
    http = session or requests
    try:
        r = http.post(settings.fund_search_url, json=body, timeout=settings.fund_search_timeout)
    except requests.exceptions.RequestException as e:
        raise FundSearchError(f"Fund search request failed: {e}") from e

    if not 200 <= r.status_code < 300:
        raise FundSearchError(f"Fund search returned HTTP {r.status_code}", status_code=r.status_code)

    try:
        data = r.json()
    except ValueError as e:
        raise FundSearchError("Fund search returned a non-JSON body", status_code=r.status_code) from e

    funds = data.get("funds") if isinstance(data, dict) else None
    if not isinstance(funds, list):
        raise FundSearchError("Fund search response has no 'funds' array", status_code=r.status_code)
    if not funds:
        raise FundSearchError("No funds matched the search filters", status_code=r.status_code)

    candidates = [FundCandidate.from_json(rec) for rec in funds if isinstance(rec, dict)]
    if not candidates:
        raise FundSearchError("No funds matched the search filters (no usable records)", status_code=r.status_code)
    log.info("fund_search.ok", category=body["category"], count=len(candidates))
    return candidates[: settings.fund_search_max_candidates]
