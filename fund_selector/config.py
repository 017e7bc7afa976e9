"""
Environment-driven settings.

PURPOSE:
- One place to read the environment variables used by the handler, the fund-search
  client and the session store.

CONTEXT:
- Values are read when load_settings() is called, so tests can monkeypatch the
  environment and reload without re-importing modules.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _int_env(name: str, default: int) -> int:
    return int(_float_env(name, default))


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration.

    attributes:
    - log_level / env / service_name: logging metadata.
    - fund_search_url: str or None – fund-search endpoint; None disables enrichment.
    - fund_search_*: defaults for the outbound search request.
    - session_table / session_ttl_days / aws_region: DynamoDB session store.
    - use_xray: bool – enable AWS X-Ray tracing.
    """
    log_level: str = "INFO"
    env: str = "dev"
    service_name: str = "FundSelector"
    fund_search_url: Optional[str] = None
    fund_search_timeout: float = 10.0
    fund_search_country: str = "IN"
    fund_search_plan: str = "Direct"
    fund_search_max_expense_ratio: float = 1.0
    fund_search_min_aum_cr: float = 500.0
    fund_search_max_candidates: int = 5
    session_table: str = "fund_selector_sessions"
    session_ttl_days: int = 14
    aws_region: str = "ap-south-1"
    use_xray: bool = False

    @property
    def fund_search_enabled(self) -> bool:
        return bool(self.fund_search_url)


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        env=os.getenv("ENV", "dev"),
        service_name=os.getenv("SERVICE_NAME", "FundSelector"),
        fund_search_url=os.getenv("FUND_SEARCH_URL") or None,
        fund_search_timeout=_float_env("FUND_SEARCH_TIMEOUT", 10.0),
        fund_search_country=os.getenv("FUND_SEARCH_COUNTRY", "IN"),
        fund_search_plan=os.getenv("FUND_SEARCH_PLAN", "Direct"),
        fund_search_max_expense_ratio=_float_env("FUND_SEARCH_MAX_EXPENSE_RATIO", 1.0),
        fund_search_min_aum_cr=_float_env("FUND_SEARCH_MIN_AUM_CR", 500.0),
        fund_search_max_candidates=_int_env("FUND_SEARCH_MAX_CANDIDATES", 5),
        session_table=os.getenv("DDB_SESSION_TABLE", "fund_selector_sessions"),
        session_ttl_days=_int_env("SESSION_TTL_DAYS", 14),
        aws_region=os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or "ap-south-1",
        use_xray=os.getenv("USE_XRAY", "0") == "1",
    )
