# claimcheck_ui/ui/history.py

import streamlit as st
from claimcheck_ui.services.api import clear_history, error_message, get_history


def history_page():
    st.markdown("# 🕘 Search history")

    token = st.session_state.get("access_token")
    result = get_history(token)
    if not result["ok"]:
        st.error(error_message(result, "Failed to fetch search history"))
        return

    entries = result.get("history", [])
    if not entries:
        st.info("No searches yet.")
        return

    if st.button("🗑️ Clear history"):
        cleared = clear_history(token)
        if cleared["ok"]:
            st.success(cleared["message"])
            st.rerun()
        else:
            st.error(error_message(cleared))

    for entry in entries:
        with st.expander(f"{entry['createdAt'][:16].replace('T', ' ')} · {entry['text'][:80]}"):
            st.markdown(f"**Claim:** {entry['text']}")
            st.markdown(entry["analysis"])
