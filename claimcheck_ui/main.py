# claimcheck_ui/main.py

import streamlit as st
from dotenv import load_dotenv
from claimcheck_ui.ui.login import login_page, logout
from claimcheck_ui.ui.analyze import analyze_page
from claimcheck_ui.ui.history import history_page
from claimcheck_ui.ui.reset import reset_password_page
from claimcheck_ui.services.api import accounts_enabled


load_dotenv()


st.set_page_config(page_title="Script Kiddos - Claim Check", layout="wide")

def main_page():
    st.title(f"Hello, {st.session_state['username']}!")

    st.sidebar.markdown("## 📋 Menu")

    if st.sidebar.button("🔎 Check a claim"):
        st.session_state["page"] = "analyze"
    if st.sidebar.button("🕘 Search history"):
        st.session_state["page"] = "history"
    if st.sidebar.button("🔓 Sign out"):
        logout()
        st.session_state.clear()
        st.rerun()

    page = st.session_state.get("page", "analyze")
    if page == "history":
        history_page()
    else:
        analyze_page()


if "accounts_enabled" not in st.session_state:
    st.session_state["accounts_enabled"] = accounts_enabled()

reset_token = st.query_params.get("token")

if not st.session_state["accounts_enabled"]:
    analyze_page()
elif reset_token:
    reset_password_page(reset_token)
elif "access_token" not in st.session_state:
    login_page()
else:
    main_page()
