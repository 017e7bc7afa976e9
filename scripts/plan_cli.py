#!/usr/bin/env python3
# PURPOSE: Terminal version of the wizard: asks the four steps, prints the plan card.
# CONTEXT: Handy for trying rule changes locally without the Streamlit front end.

import json, sys

from fund_selector.form_io import parse_inputs, validate_form
from fund_selector.logging_setup import configure_logging
from fund_selector.pipeline import build_profile, run_pipeline
from fund_selector.render import render_text

configure_logging()


def _number(text):
    text = text.strip().replace(",", "")
    if text == "":
        return None
    try:
        return int(text)
    except ValueError:
        try:
            return float(text)
        except ValueError:
            return text


# Each step: list of (field, prompt, parser).
STEPS = [
    [("age", "Your age: ", _number)],
    [("monthly_income", "Monthly income (INR): ", _number),
     ("monthly_expenses", "Monthly expenses (INR): ", _number)],
    [("has_debt_service", "Do you pay any EMIs? [y/n]: ",
      lambda t: {"y": True, "yes": True, "n": False, "no": False}.get(t.strip().lower()))],
    [("stated_risk", "Risk tolerance [LOW/MEDIUM/HIGH]: ", lambda t: t.strip().upper() or None)],
]


def ask(payload, step_idx):
    while True:
        for field, prompt, parse in STEPS[step_idx]:
            payload[field] = parse(input(prompt))
            if field == "has_debt_service" and payload[field]:
                payload["debt_service_amount"] = _number(input("Total monthly EMI (INR): "))
        errors = validate_form(payload, step=step_idx)
        if not errors:
            return
        for msg in errors.values():
            print(f"  ! {msg}")


def main():
    print("Fund Selector: answer four quick steps. Ctrl+C to exit.")
    payload = {}
    try:
        for i in range(len(STEPS)):
            ask(payload, i)
    except (EOFError, KeyboardInterrupt):
        print("\nBye!")
        sys.exit(0)

    out = run_pipeline(payload)
    profile = build_profile(parse_inputs(payload))
    print()
    print(render_text(profile, out["alerts"], out["fund_search"].get("funds")))
    if "--json" in sys.argv:
        print(json.dumps(out, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
