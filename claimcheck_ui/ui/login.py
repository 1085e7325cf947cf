# claimcheck_ui/ui/login.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from claimcheck_ui.services.api import (
    error_message,
    forgot_password,
    forgot_username,
    login,
    signup,
)

load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD")

cookies = EncryptedCookieManager(prefix="claimcheck/", password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def remember(token, username):
    st.session_state["access_token"] = token
    st.session_state["username"] = username
    cookies["access_token"] = token
    cookies["username"] = username
    cookies.save()


def logout():
    for key in ("access_token", "username"):
        if key in cookies:
            del cookies[key]
    cookies.save()


def login_page():
    st.title("🔐 Sign in")

    if "access_token" not in st.session_state and cookies.get("access_token"):
        st.session_state["access_token"] = cookies["access_token"]
        st.session_state["username"] = cookies.get("username", "")
        st.rerun()

    view = st.session_state.get("auth_view", "login")
    if view == "signup":
        show_signup_form()
    elif view == "forgot":
        show_forgot_forms()
    else:
        show_login_form()


def switch_view(view):
    st.session_state["auth_view"] = view
    st.rerun()


def show_login_form():
    with st.form("login_form"):
        username = st.text_input("Username or email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign in")

    if submitted:
        with st.spinner("Signing in..."):
            result = login(username, password)
        if result["ok"]:
            remember(result["token"], result["user"]["username"])
            st.success("✅ Signed in")
            st.rerun()
        else:
            st.error(f"❌ {error_message(result, 'Login failed')}")

    cols = st.columns(2)
    with cols[0]:
        if st.button("Create an account"):
            switch_view("signup")
    with cols[1]:
        if st.button("Forgot username or password?"):
            switch_view("forgot")


def show_signup_form():
    st.subheader("📝 Create an account")

    with st.form("signup_form"):
        username = st.text_input("Username")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign up")

    if submitted:
        with st.spinner("Creating account..."):
            result = signup(username, email, password)
        if result["ok"]:
            remember(result["token"], result["user"]["username"])
            st.session_state["auth_view"] = "login"
            st.success("🎉 Account created")
            st.rerun()
        else:
            st.error(f"❌ {error_message(result, 'Sign up failed')}")

    if st.button("← Back to sign in"):
        switch_view("login")


def show_forgot_forms():
    st.subheader("Forgot your username?")
    with st.form("forgot_username_form"):
        email = st.text_input("Email", key="forgot_username_email")
        if st.form_submit_button("Email me my username"):
            result = forgot_username(email)
            if result["ok"]:
                st.success(result["message"])
            else:
                st.error(error_message(result))

    st.subheader("Forgot your password?")
    with st.form("forgot_password_form"):
        username = st.text_input("Username", key="forgot_password_username")
        email = st.text_input("Email", key="forgot_password_email")
        if st.form_submit_button("Send reset link"):
            result = forgot_password(username, email)
            if result["ok"]:
                st.success(result["message"])
            else:
                st.error(error_message(result))

    if st.button("← Back to sign in"):
        switch_view("login")
