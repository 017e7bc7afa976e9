import pytest
from jsonschema import ValidationError

from fund_selector.form_io import (
    FIELD_MESSAGES,
    InputValidationError,
    error_to_string,
    load_schema,
    parse_inputs,
    validate_form,
)
from fund_selector.model_interface.types import RiskTier


def test_load_schema_reads_inputs_schema():
    schema = load_schema("financial_inputs.schema.json")
    assert schema["title"] == "FinancialInputs"

def test_load_schema_missing_file():
    with pytest.raises(FileNotFoundError):
        load_schema("nope.schema.json")

def test_valid_payload_has_no_errors(payload):
    assert validate_form(payload) == {}

@pytest.mark.parametrize("age", [15, 101, None, "thirty", 30.5])
def test_age_out_of_range(payload, age):
    payload["age"] = age
    assert validate_form(payload) == {"age": FIELD_MESSAGES["age"]}

@pytest.mark.parametrize("field,value", [
    ("monthly_income", 0),
    ("monthly_income", -5),
    ("monthly_expenses", -1),
    ("debt_service_amount", -100),
    ("stated_risk", "YOLO"),
])
def test_field_messages(payload, field, value):
    payload[field] = value
    assert validate_form(payload) == {field: FIELD_MESSAGES[field]}

def test_missing_fields_reported_in_form_order():
    errors = validate_form({})
    assert list(errors) == ["age", "monthly_income", "monthly_expenses", "has_debt_service", "stated_risk"]
    assert errors["has_debt_service"] == "Please select Yes or No."

def test_step_filter_only_reports_that_step():
    assert validate_form({"age": 40}, step=0) == {}
    assert validate_form({"age": 40}, step=1) == {
        "monthly_income": FIELD_MESSAGES["monthly_income"],
        "monthly_expenses": FIELD_MESSAGES["monthly_expenses"],
    }

def test_negative_emi_ignored_when_no_emi(payload):
    payload["has_debt_service"] = False
    payload["debt_service_amount"] = -100
    assert validate_form(payload) == {}
    assert parse_inputs(payload).debt_service_amount == 0.0

def test_blank_emi_amount_counts_as_zero(payload):
    payload["debt_service_amount"] = ""
    assert parse_inputs(payload).debt_service_amount == 0.0

def test_parse_inputs_builds_value(payload):
    payload["stated_risk"] = "medium"
    fi = parse_inputs(payload)
    assert fi.age == 30
    assert fi.monthly_income == 100000.0
    assert fi.debt_service_amount == 10000.0
    assert fi.stated_risk_tier is RiskTier.MEDIUM

def test_parse_inputs_raises_with_field_map(payload):
    payload["monthly_income"] = 0
    with pytest.raises(InputValidationError) as e:
        parse_inputs(payload)
    assert e.value.errors == {"monthly_income": "Enter a positive monthly income."}
    assert "monthly_income" in str(e.value)

def test_error_to_string_validationerror_path():
    from jsonschema import validate
    schema = {"type": "object", "properties": {"x": {"type": "number"}}, "required": ["x"]}
    with pytest.raises(ValidationError) as e:
        validate({"x": "nope"}, schema)
    assert error_to_string(e.value).endswith("at $.x")

def test_error_to_string_generic():
    assert error_to_string(RuntimeError("boom")) == "RuntimeError: boom"

@pytest.mark.parametrize("field", ["age", "monthly_income", "monthly_expenses", "debt_service_amount"])
@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_numbers_rejected(payload, field, value):
    payload[field] = value
    assert validate_form(payload) == {field: FIELD_MESSAGES[field]}
    with pytest.raises(InputValidationError):
        parse_inputs(payload)
