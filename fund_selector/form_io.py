"""
Form I/O: schema loading, input validation and output validation.

PURPOSE: Validate a wizard submission before it reaches the core, reporting one
         user-facing message per field, and check the final pipeline output against
         its JSON schema.
CONTEXT: The classifier and resolver never re-validate; everything that can be wrong
         with user input is caught here.
"""

from __future__ import annotations

import json
import math
import pathlib
from functools import lru_cache
from typing import Any, Dict

from jsonschema import Draft7Validator, ValidationError

from fund_selector.model_interface.types import FinancialInputs, RiskTier

SCHEMA_DIR = pathlib.Path(__file__).resolve().parent / "schemas"

# Messages shown next to each wizard field.
FIELD_MESSAGES: Dict[str, str] = {
    "age": "Enter a valid age between 16 and 100.",
    "monthly_income": "Enter a positive monthly income.",
    "monthly_expenses": "Expenses cannot be negative.",
    "has_debt_service": "Please select Yes or No.",
    "debt_service_amount": "EMI amount cannot be negative.",
    "stated_risk": "Please choose a risk tolerance.",
}

NUMERIC_FIELDS = ("age", "monthly_income", "monthly_expenses", "debt_service_amount")

# Wizard step -> fields validated on that step.
STEP_FIELDS = (
    ("age",),
    ("monthly_income", "monthly_expenses"),
    ("has_debt_service", "debt_service_amount"),
    ("stated_risk",),
)


class InputValidationError(ValueError):
    """Raised by parse_inputs when a submission fails validation."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


# -------------------- Schema loading -------------------- #

@lru_cache(maxsize=16)
def _load_schema_cached(abs_path: str) -> Dict[str, Any]:
    return json.loads(pathlib.Path(abs_path).read_text(encoding="utf-8"))


def load_schema(name: str) -> Dict[str, Any]:
    """
    Load a JSON schema by file name from the package's schemas/ directory.

    raises:
    - FileNotFoundError – if no such schema ships with the package.
    """
    p = SCHEMA_DIR / name
    if not p.exists():
        raise FileNotFoundError(f"Schema not found at: {p}")
    return _load_schema_cached(str(p))


def validate_with_schema(instance: Any, schema: Dict[str, Any]) -> None:
    Draft7Validator(schema).validate(instance)


def validate_profile_output(output: Dict[str, Any]) -> None:
    """Validate a run_pipeline() result. Raises ValidationError on mismatch."""
    validate_with_schema(output, load_schema("profile_output.schema.json"))


# -------------------- Input validation -------------------- #

def _normalise(payload: Dict[str, Any]) -> Dict[str, Any]:
    data = dict(payload or {})
    risk = data.get("stated_risk")
    if isinstance(risk, str):
        data["stated_risk"] = risk.strip().upper()
    # An unanswered EMI amount counts as zero, as does any amount when there is no EMI.
    if data.get("debt_service_amount") in ("", None):
        data["debt_service_amount"] = 0
    if data.get("has_debt_service") is False:
        data["debt_service_amount"] = 0
    return data


def validate_form(payload: Dict[str, Any], step: int | None = None) -> Dict[str, str]:
    """
    Validate a (possibly partial) submission.

    parameters:
    - payload: dict – raw field values keyed by field name.
    - step: int (optional) – only report errors for the fields of this wizard step.

    returns:
    - dict – field -> message; empty when valid.
    """
    data = _normalise(payload)
    schema = load_schema("financial_inputs.schema.json")
    errors: Dict[str, str] = {}

    for field in schema.get("required", []):
        if field not in data or data[field] is None:
            errors[field] = FIELD_MESSAGES[field]

    for err in Draft7Validator(schema).iter_errors(data):
        if not err.path:
            continue
        field = err.path[0]
        if field in FIELD_MESSAGES:
            errors.setdefault(field, FIELD_MESSAGES[field])

    # NaN and Infinity pass numeric bounds checks, so reject them explicitly.
    for field in NUMERIC_FIELDS:
        value = data.get(field)
        if isinstance(value, float) and not math.isfinite(value):
            errors.setdefault(field, FIELD_MESSAGES[field])

    if step is not None:
        wanted = STEP_FIELDS[step] if 0 <= step < len(STEP_FIELDS) else ()
        errors = {k: v for k, v in errors.items() if k in wanted}
    return {k: errors[k] for k in FIELD_MESSAGES if k in errors}


def parse_inputs(payload: Dict[str, Any]) -> FinancialInputs:
    """
    Validate a full submission and convert it to FinancialInputs.

    raises:
    - InputValidationError – with the per-field messages.
    """
    errors = validate_form(payload)
    if errors:
        raise InputValidationError(errors)
    data = _normalise(payload)
    has_debt = bool(data["has_debt_service"])
    return FinancialInputs(
        age=int(data["age"]),
        monthly_income=float(data["monthly_income"]),
        monthly_expenses=float(data["monthly_expenses"]),
        has_debt_service=has_debt,
        debt_service_amount=float(data["debt_service_amount"]) if has_debt else 0.0,
        stated_risk_tier=RiskTier.from_label(data["stated_risk"]),
    )


def error_to_string(err: Exception) -> str:
    """
    Readable message for an exception; ValidationError gets its JSON path (e.g. $.profile.final_risk).
    """
    if isinstance(err, InputValidationError):
        return str(err)
    if isinstance(err, ValidationError):
        path = "$" + "".join(f"[{repr(p)}]" if isinstance(p, int) else f".{p}" for p in err.path)
        return f"{err.message} at {path}"
    return f"{type(err).__name__}: {err}"


__all__ = [
    "FIELD_MESSAGES",
    "InputValidationError",
    "load_schema",
    "validate_with_schema",
    "validate_profile_output",
    "validate_form",
    "parse_inputs",
    "error_to_string",
]
