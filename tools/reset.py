"""
reset.py — Destructive Data Reset Utility
------------------------------------------

⚠️ USE WITH EXTREME CAUTION ⚠️

This Streamlit module provides destructive options for developers during testing:

✅ Bulk deletes all detection records (non-destructive to schema)
✅ Clears the uploaded image directory

Only shown in the navigation when DEBUG is enabled.

Requirements:
- SQLAlchemy for database access
- Streamlit UI

Project: Glaucus Fish Identification
"""

import streamlit as st

from core.ingest import clear_upload_dir, delete_all_detections
from db.db import SessionLocal


st.write("⚠️ Use caution — destructive operations ahead.")

col1, col2 = st.columns([1, 1])

# --- Button Controls ---
with col1:
    delete_clicked = st.button("🔥 Delete All Detections")
with col2:
    uploads_clicked = st.button("🗂️ Clear Uploaded Images")


# --- Delete All Detection Records (Preserve Schema) ---
if delete_clicked:
    with SessionLocal() as session:
        deleted = delete_all_detections(session)
    st.success(f"✅ {deleted} detection records deleted successfully.")


# --- Clear Upload Directory ---
if uploads_clicked:
    if clear_upload_dir():
        st.success("✅ Upload directory cleared successfully.")
    else:
        st.warning("⚠️ Upload directory not found.")
