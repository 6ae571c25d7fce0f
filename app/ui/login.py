# app/ui/login.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from app.services.session import ClientSession

load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD")

cookies = EncryptedCookieManager(prefix="leadership-values/", password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def get_session() -> ClientSession:
    if "query_cache" not in st.session_state:
        st.session_state["query_cache"] = {}
    return ClientSession(cookies, st.session_state["query_cache"])


def logout():
    get_session().logout()
    st.success("You have been logged out of the admin portal.")


def login_page():
    st.title("🔐 Admin Login")

    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form()
    else:
        show_login_form()


def show_login_form():
    with st.form("login_form"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Log in")

    if submitted:
        with st.spinner("Logging in..."):
            result = get_session().login(username, password)
            if result.get("error"):
                if result.get("status") == 401:
                    st.error("❌ Login failed: please check your credentials and try again.")
                else:
                    st.error(f"❌ Login failed: {result['error']}")
            else:
                st.success("✅ You are now logged in to the admin portal.")
                st.rerun()

    if st.button("Create an account"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form():
    st.subheader("📝 Create admin account")

    new_user = st.text_input("Username", key="new_user")
    new_pass = st.text_input("Password", type="password", key="new_pass")

    if st.button("Register"):
        with st.spinner("Creating account..."):
            result = get_session().register(new_user, new_pass)
            if result.get("error"):
                st.error(f"❌ Registration failed: {result['error']}")
            else:
                st.success("🎉 Your admin account has been created.")
                st.session_state["show_register"] = False
                st.rerun()

    if st.button("← Back to login"):
        st.session_state["show_register"] = False
        st.rerun()
