"""
analysis_ui.py — Fish Detection Analytics Dashboard
---------------------------------------------------

This Streamlit module summarises every stored identification so users can see
what is being found, by whom, and when.

Features:
- Summary cards: total detections, unique fish types, most common fish, most active time, most active user
- Fish Type Distribution: share of each extracted species label
- Detections by User: activity per submitter
- Detections by Time of Day: morning / afternoon / evening / night
- Raw Detection Data: collapsible table of every record

Dependencies:
- Streamlit for UI controls
- core.aggregate for the frequency maps
- core.analysis for charts and the table
- SQLAlchemy session for loading detections

Project: Glaucus Fish Identification
"""

import logging

import streamlit as st

from config.settings import DEFAULT_RECORD_LIMIT
from core.aggregate import aggregate
from core.analysis import (
    detection_table,
    no_signal,
    summary_cards,
    time_chart,
    type_chart,
    user_chart
)
from core.ingest import fetch_detection_records
from db.db import SessionLocal

logger = logging.getLogger(__name__)


# --- Sidebar Option: Limit Number of Detections for Analysis ---
limit = st.sidebar.slider("Number of Detections", 10, 1000, DEFAULT_RECORD_LIMIT)

with SessionLocal() as session:
    records = fetch_detection_records(session, limit=limit)

result = aggregate(records)
logger.debug("Aggregated %d detections into %d labels", result.total, result.distinct_labels)

st.header("🐠 Fish Detection Analytics")
st.caption("Comprehensive analysis of your fish identification data")

# --- Degenerate States ---
if not result.has_data:
    st.info("No detection data available for analysis 🐟")
    st.stop()

if no_signal(result):
    st.warning("Could not extract fish types from detection results 🐠")

# --- Summary Cards ---
cards = summary_cards(result)
for col, (title, value, icon) in zip(st.columns(len(cards)), cards):
    with col:
        st.metric(f"{icon} {title}", value)

# --- Fish Type Distribution ---
st.subheader("Fish Type Distribution")
st.plotly_chart(type_chart(result), use_container_width=True)

# --- User Activity & Time of Day ---
col1, col2 = st.columns(2)
with col1:
    st.subheader("Detections by User")
    st.plotly_chart(user_chart(result), use_container_width=True)
with col2:
    st.subheader("Detections by Time of Day")
    st.plotly_chart(time_chart(result), use_container_width=True)

# --- Raw Data Table ---
with st.expander(f"View Raw Detection Data ({result.total} records)"):
    st.dataframe(detection_table(records), use_container_width=True)
