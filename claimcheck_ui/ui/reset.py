# claimcheck_ui/ui/reset.py

import streamlit as st
from claimcheck_ui.services.api import error_message, reset_password


def reset_password_page(token):
    st.title("🔑 Choose a new password")

    with st.form("reset_password_form"):
        password = st.text_input("New password", type="password")
        confirm = st.text_input("Confirm new password", type="password")
        submitted = st.form_submit_button("Reset password")

    if not submitted:
        return
    if not password or password != confirm:
        st.error("Passwords do not match")
        return

    result = reset_password(token, password)
    if result["ok"]:
        st.success("✅ Password updated. You can sign in now.")
        st.query_params.clear()
    else:
        st.error(error_message(result))
