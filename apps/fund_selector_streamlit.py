# PURPOSE: Streamlit wizard for the Fund Selector: four steps with a progress bar,
#          then the plan card with a doughnut chart of the asset split.
# CONTEXT: Field values are kept in st.session_state and, when a DynamoDB table is
#          configured, saved per session so a reload does not lose work.

import uuid

import plotly.express as px
import streamlit as st

from fund_selector.form_io import InputValidationError, STEP_FIELDS, validate_form
from fund_selector.logging_setup import configure_logging
from fund_selector.pipeline import run_pipeline
from fund_selector.utils.formatting import format_inr, format_ratio
from fund_selector import state_manager

log = configure_logging()

st.set_page_config(page_title="Fund Selector", layout="centered")
st.title("Personalized Mutual Fund Selector")
st.caption("Educational only; not financial advice.")

ss = st.session_state
if "session_id" not in ss:
    ss.session_id = st.query_params.get("sid") or uuid.uuid4().hex
    st.query_params["sid"] = ss.session_id
    try:
        ss.form = state_manager.load_form_fields(ss.session_id)
    except Exception as e:
        log.warning("session.load_failed", error=str(e))
        ss.form = {}
    ss.step = 0
    ss.result = None
    ss.run_errors = []


def _persist():
    try:
        state_manager.save_form_fields(ss.session_id, ss.form)
    except Exception as e:
        log.warning("session.save_failed", error=str(e))


def _start_over():
    try:
        state_manager.clear_session(ss.session_id)
    except Exception as e:
        log.warning("session.clear_failed", error=str(e))
    ss.form, ss.step, ss.result, ss.run_errors = {}, 0, None, []


def _wizard():
    form = ss.form
    st.progress((ss.step + 1) / len(STEP_FIELDS), text=f"Step {ss.step + 1} of {len(STEP_FIELDS)}")

    if ss.step == 0:
        form["age"] = st.number_input("Your age", min_value=0, max_value=120, step=1,
                                      value=int(form.get("age") or 30))
    elif ss.step == 1:
        form["monthly_income"] = st.number_input("Monthly income (INR)", min_value=0.0, step=1000.0,
                                                 value=float(form.get("monthly_income") or 0.0))
        form["monthly_expenses"] = st.number_input("Monthly expenses (INR)", min_value=0.0, step=1000.0,
                                                   value=float(form.get("monthly_expenses") or 0.0))
    elif ss.step == 2:
        choice = st.radio("Do you pay any EMIs?", ["Yes", "No"], horizontal=True,
                          index=None if form.get("has_debt_service") is None else (0 if form["has_debt_service"] else 1))
        form["has_debt_service"] = None if choice is None else choice == "Yes"
        if form["has_debt_service"]:
            form["debt_service_amount"] = st.number_input("Total monthly EMI (INR)", min_value=0.0, step=500.0,
                                                          value=float(form.get("debt_service_amount") or 0.0))
        else:
            form["debt_service_amount"] = 0
    else:
        options = ["LOW", "MEDIUM", "HIGH"]
        current = form.get("stated_risk")
        form["stated_risk"] = st.radio("Risk tolerance", options, horizontal=True,
                                       index=options.index(current) if current in options else None)

    for msg in ss.get("run_errors", []):
        st.error(msg)

    errors = validate_form(form, step=ss.step)
    for msg in errors.values():
        st.error(msg)

    c1, c2 = st.columns(2)
    if c1.button("Back", disabled=ss.step == 0):
        ss.step -= 1
        st.rerun()
    last = ss.step == len(STEP_FIELDS) - 1
    if c2.button("See my plan" if last else "Next", type="primary", disabled=bool(errors)):
        _persist()
        if not last:
            ss.step += 1
            st.rerun()
        ss.run_errors = []
        try:
            ss.result = run_pipeline(form)
        except InputValidationError as e:
            ss.run_errors = list(e.errors.values())
        except Exception as e:
            log.error("pipeline.failed", error=str(e))
            ss.run_errors = [f"Could not build your plan: {e}"]
        st.rerun()


def _results(out):
    p = out["profile"]
    c1, c2, c3 = st.columns(3)
    c1.metric("Investable surplus", format_inr(p["investable_surplus"]))
    c2.metric("Horizon", p["horizon_label"])
    c3.metric("Risk profile", p["final_risk"], help=f"You chose {p['stated_risk']}")
    st.caption(f"EMI / income {format_ratio(p['debt_service_ratio'])} · savings rate {format_ratio(p['savings_rate'])}")

    for a in out["alerts"]:
        (st.warning if a["severity"] != "info" else st.info)(a["message"])

    split = p["asset_split"]
    fig = px.pie(names=list(split), values=list(split.values()), hole=0.55,
                 title="Recommended Asset Allocation")
    fig.update_traces(hovertemplate="%{label}: %{value}%<extra></extra>")
    st.plotly_chart(fig, use_container_width=True)

    st.subheader("Suggested categories")
    for c in p["categories"]:
        with st.container(border=True):
            badge = f" · **{c['percent']}%**" if c["percent"] is not None else ""
            st.markdown(f"#### {c['name']}{badge}")
            st.write(c["why"])
            if c["alt"]:
                st.caption(f"Alternative: *{c['alt']}*")

    fs = out["fund_search"]
    if fs["status"] == "ok":
        st.subheader("Fund ideas")
        for f in fs["funds"]:
            st.markdown(f"**{f['scheme_name']}** ({f['plan'] or 'n/a'})")
            if f["rationale"]:
                st.caption(f["rationale"])
    elif fs["status"] == "error":
        st.info(f"Fund ideas are unavailable right now: {fs['message']}")

    b1, b2 = st.columns(2)
    if b1.button("Edit answers"):
        ss.result, ss.step = None, 0
        st.rerun()
    if b2.button("Start over"):
        _start_over()
        st.rerun()


if ss.result is None:
    _wizard()
else:
    _results(ss.result)
