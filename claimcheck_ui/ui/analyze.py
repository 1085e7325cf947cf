# claimcheck_ui/ui/analyze.py

import streamlit as st
from claimcheck_ui.services.api import analyze_claim, error_message


def analyze_page():
    st.markdown("# 🔎 Check a claim")

    text = st.text_area("Paste the claim you want explained", height=150)
    if st.button("Analyze", disabled=not text.strip()):
        with st.spinner("Analyzing..."):
            result = analyze_claim(text, token=st.session_state.get("access_token"))
        if result["ok"]:
            st.session_state["last_analysis"] = result["analysis"]
        else:
            st.error(error_message(result, "Failed to analyze text"))

    if st.session_state.get("last_analysis"):
        st.markdown(st.session_state["last_analysis"])
