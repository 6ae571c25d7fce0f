# app/ui/admin.py

import streamlit as st
from app.services.api import (
    list_submissions,
    list_company_codes,
    export_submissions_csv,
    list_leadership_values,
    create_leadership_value,
    update_leadership_value,
    delete_leadership_value,
)

ALL_CODES = "all"


def submissions_page(token):
    st.title("📋 Submissions")

    codes = list_company_codes(token)
    if isinstance(codes, dict) and codes.get("error"):
        st.error(codes["error"])
        return

    selected = st.selectbox("Company code", options=[ALL_CODES] + codes)
    company_code = None if selected == ALL_CODES else selected

    submissions = list_submissions(token, company_code)
    if isinstance(submissions, dict) and submissions.get("error"):
        st.error(submissions["error"])
        return

    if not submissions:
        st.info("No submissions yet.")
    else:
        st.dataframe(
            [
                {
                    "Name": s["name"],
                    "Email": s["email"],
                    "Company Code": s.get("companyCode") or "",
                    "Core Values": ", ".join(s.get("coreValues") or []),
                    "Date Submitted": s["createdAt"],
                }
                for s in submissions
            ],
            use_container_width=True,
        )

    handle_export(token, selected, company_code)


def handle_export(token, selected, company_code):
    # fetched on demand, kept per filter until the filter changes
    cached = st.session_state.get("csv_export")
    if cached and cached[0] != selected:
        st.session_state.pop("csv_export")
        cached = None

    if cached is None:
        if st.button("📤 Prepare CSV export"):
            exported = export_submissions_csv(token, company_code)
            if exported is None:
                st.error("Export failed.")
                return
            st.session_state["csv_export"] = (selected, *exported)
            st.rerun()
        return

    _, filename, content = cached
    st.download_button("⬇️ Download CSV", data=content, file_name=filename, mime="text/csv")


def values_page(token):
    st.title("🃏 Leadership Values")

    values = list_leadership_values()
    if isinstance(values, dict) and values.get("error"):
        st.error(values["error"])
        return

    with st.expander("➕ Add a value"):
        handle_value_create(token)

    if not values:
        st.info("The catalog is empty.")
        return

    for item in values:
        with st.expander(item["value"]):
            handle_value_edit(token, item)


def handle_value_create(token):
    with st.form("create_value", clear_on_submit=True):
        value = st.text_input("Value")
        description = st.text_area("Description")
        submitted = st.form_submit_button("Create")

    if submitted:
        result = create_leadership_value(token, value, description)
        if result.get("error"):
            st.error(result["error"])
        else:
            st.success(result["message"])
            st.rerun()


def handle_value_edit(token, item):
    with st.form(f"edit_value_{item['id']}"):
        value = st.text_input("Value", value=item["value"])
        description = st.text_area("Description", value=item["description"])
        cols = st.columns(2)
        save = cols[0].form_submit_button("Save")
        delete = cols[1].form_submit_button("🗑️ Delete")

    if save:
        result = update_leadership_value(token, item["id"], value, description)
    elif delete:
        result = delete_leadership_value(token, item["id"])
    else:
        return

    if result.get("error"):
        st.error(result["error"])
    else:
        st.success(result["message"])
        st.rerun()
