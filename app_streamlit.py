import logging

import streamlit as st

from diagnosis_engine import diagnose
from pydantic_models import Feedback, Symptom

logger = logging.getLogger("symptom_checker.ui")

SEVERITY_ICONS = {"high": "🔴", "medium": "🟡", "low": "🟢"}

st.set_page_config(page_title="Symptom Checker", page_icon="🩺", layout="centered")

if "disclaimer_ack" not in st.session_state:
    st.session_state.disclaimer_ack = False
if "diagnosis" not in st.session_state:
    st.session_state.diagnosis = None

st.title("🩺 Symptom Checker")

if not st.session_state.disclaimer_ack:
    st.warning(
        "This assistant provides general guidance only and should never replace "
        "professional medical advice, diagnosis, or treatment. If you're experiencing "
        "severe symptoms or believe you have a medical emergency, call emergency services immediately."
    )
    if st.button("I Understand"):
        st.session_state.disclaimer_ack = True
        st.rerun()
    st.stop()

symptoms = st.text_area("Describe your symptoms:", placeholder="e.g. runny nose and sore throat with sneezing")
severity = st.radio("Severity:", ("mild", "moderate", "severe"), index=1, horizontal=True)

if st.button("Analyze"):
    if not symptoms.strip():
        st.warning("Please enter symptoms first.")
    else:
        try:
            st.session_state.diagnosis = diagnose([Symptom.from_text(symptoms, severity)])
        except Exception:
            logger.exception("error processing symptoms")
            st.error("An error occurred while processing your symptoms. Please try again.")

diagnosis = st.session_state.diagnosis
if diagnosis is not None:
    st.subheader(f"🔎 {diagnosis.condition}")
    st.caption(f"{round(diagnosis.confidence * 100)}% confidence")
    if diagnosis.should_see_doctor:
        st.error("We recommend consulting a healthcare professional about these symptoms.")
    st.markdown(f"{SEVERITY_ICONS[diagnosis.severity]} **{diagnosis.severity.capitalize()} Severity Level**")
    st.subheader("Recommendations")
    for rec in diagnosis.recommendations:
        st.write("•", rec)

    st.write("Was this assessment helpful?")
    yes, no = st.columns(2)
    answer = None
    if yes.button("Yes"):
        answer = True
    if no.button("No"):
        answer = False
    if answer is not None:
        fb = Feedback(diagnosis_id=diagnosis.id, was_helpful=answer)
        logger.info("feedback received diagnosis_id=%s was_helpful=%s", fb.diagnosis_id, fb.was_helpful)
        st.success("Thank you for your feedback! This helps improve our system.")

st.caption("Educational use only. Not medical advice.")
