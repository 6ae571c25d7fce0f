# app/ui/assessment.py

import streamlit as st
from app.services.api import list_leadership_values, submit_assessment


def assessment_page():
    st.title("🧭 Leadership Values Assessment")

    values = list_leadership_values()
    if isinstance(values, dict) and values.get("error"):
        st.error(values["error"])
        return
    if not values:
        st.info("No leadership values are available yet.")
        return

    by_name = {v["value"]: v for v in values}

    with st.form("assessment_form"):
        name = st.text_input("Your name")
        email = st.text_input("Email")
        company_code = st.text_input("Company code (optional)")
        selected = st.multiselect(
            "Choose your core leadership values",
            options=list(by_name),
            help="Pick the values that best describe how you lead.",
        )
        submitted = st.form_submit_button("Submit")

    for value in selected:
        st.markdown(f"**{value}**: {by_name[value]['description']}")

    if submitted:
        result = submit_assessment(name, email, selected, company_code.strip() or None)
        if result.get("error"):
            st.error(f"❌ {result['error']}")
        else:
            st.success("✅ Submission recorded. Thank you!")
