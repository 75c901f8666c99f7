"""
streamlit_app.py — Glaucus App Entry Point
------------------------------------------

Run with `streamlit run streamlit_app.py`.

Sets up logging and the database, shows sign-in / sign-out in the sidebar,
then wires the pages into Streamlit navigation. With REQUIRE_LOGIN set, pages
are only shown to signed-in users. The reset page is only listed when DEBUG
is enabled.

Project: Glaucus Fish Identification
"""

import streamlit as st

from config.settings import DEBUG, REQUIRE_LOGIN, configure_logging
from db.db import init_db
from tools.auth_utils import auth_configured, signed_in_email

st.set_page_config(page_title="Glaucus | AI-Powered Fish Identification", page_icon="🐠", layout="wide")

configure_logging()
init_db()

# --- Sign-in (OIDC provider from secrets.toml [auth]) ---
with st.sidebar:
    if not auth_configured(st.secrets):
        st.caption("Sign-in is not configured; detections are stored as anonymous.")
    elif signed_in_email(st.user):
        st.write(f"Welcome, {signed_in_email(st.user)}")
        st.button("Sign Out", on_click=st.logout)
    else:
        st.button("Sign In", on_click=st.login)

if REQUIRE_LOGIN and auth_configured(st.secrets) and not signed_in_email(st.user):
    st.info("Please sign in to use Glaucus.")
    st.stop()

pages = {
    "Glaucus": [
        st.Page("app/identify_ui.py", title="Identify a Fish", icon="🐟", default=True),
        st.Page("app/analysis_ui.py", title="Analytics", icon="📊"),
    ],
    "About": [
        st.Page("appendix/project.py", title="Project Overview", icon="🔍"),
    ],
}
if DEBUG:
    pages["Developer"] = [st.Page("tools/reset.py", title="Reset Data", icon="⚠️")]

st.navigation(pages).run()
