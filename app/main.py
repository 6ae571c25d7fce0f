# app/main.py

import streamlit as st
from dotenv import load_dotenv
from app.ui.login import login_page, logout, get_session
from app.ui.assessment import assessment_page
from app.ui.admin import submissions_page, values_page


load_dotenv()


st.set_page_config(page_title="Leadership Values", layout="wide")


def admin_page(session, user):
    st.sidebar.markdown(f"Signed in as **{user['username']}**")

    if st.sidebar.button("📋 Submissions"):
        st.session_state["page"] = "submissions"
    if st.sidebar.button("🃏 Leadership values"):
        st.session_state["page"] = "values"
    if st.sidebar.button("🔓 Log out"):
        logout()
        st.session_state.clear()
        st.rerun()

    page = st.session_state.get("page", "submissions")
    if page == "values":
        values_page(session.token)
    else:
        submissions_page(session.token)


mode = st.sidebar.radio("Mode", ["Assessment", "Admin"])

if mode == "Assessment":
    assessment_page()
else:
    session = get_session()
    user = session.current_user()
    if user is None:
        login_page()
    else:
        admin_page(session, user)
