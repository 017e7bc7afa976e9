"""
Wizard session persistence.

PURPOSE:
- Keep a user's half-filled form across reloads, keyed by session id.
- Records expire through a DynamoDB TTL attribute.

NOTE:
- DynamoDB rejects Python floats, so numeric fields are stored as Decimal and
  handed back as int/float.
"""

from __future__ import annotations
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Dict, Optional

from fund_selector.config import load_settings
from fund_selector.tools import dynamodb_tool as ddb

# Only these wizard fields are persisted.
PERSISTED_FIELDS = (
    "age",
    "monthly_income",
    "monthly_expenses",
    "has_debt_service",
    "debt_service_amount",
    "stated_risk",
)


def _ttl_epoch(days: Optional[int] = None) -> int:
    days = load_settings().session_ttl_days if days is None else days
    return int((datetime.now(timezone.utc) + timedelta(days=days)).timestamp())


def _to_ddb(value: Any) -> Any:
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    return value


def _from_ddb(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return value


def init_session(session_id: str) -> Dict[str, Any]:
    item = {"session_id": session_id, "fields": {}, "ttl_epoch": _ttl_epoch()}
    return ddb.put_item(item)


def get_session(session_id: str) -> Optional[Dict[str, Any]]:
    return ddb.get_item(session_id)


def save_form_fields(session_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge known wizard fields into the session, creating it if needed.

    parameters:
    - session_id: str – session key.
    - fields: dict – any subset of PERSISTED_FIELDS; other keys are ignored.

    returns:
    - dict – {"ok": True} from the DynamoDB helper.
    """
    sess = ddb.get_item(session_id)
    if sess is None:
        init_session(session_id)
        sess = {"fields": {}}
    merged = dict(sess.get("fields") or {})
    for k in PERSISTED_FIELDS:
        if k in fields:
            merged[k] = _to_ddb(fields[k])
    return ddb.update_json(session_id, "fields", merged)


def load_form_fields(session_id: str) -> Dict[str, Any]:
    """Saved wizard fields for a session, or {} if there is none."""
    sess = ddb.get_item(session_id)
    if not sess:
        return {}
    return {k: _from_ddb(v) for k, v in (sess.get("fields") or {}).items()}


def clear_session(session_id: str) -> Dict[str, Any]:
    """Forget a session ("Start over")."""
    return ddb.delete_item(session_id)
