"""
project.py — Glaucus Overview & Documentation
---------------------------------------------

This Streamlit module presents an interactive project overview for the Glaucus
fish identification app. It provides structured, expandable sections covering:

- Project goals
- System workflow
- How the analytics are computed
- Current limitations

Dependencies:
- Streamlit for UI rendering

Project: Glaucus Fish Identification
"""

import streamlit as st

# --- Project Overview Section ---
with st.expander("🔍 Project Overview"):
    st.write("""
    Glaucus is an AI-assisted fish identification app. Upload a photo of a fish and
    a hosted vision-language model answers as *Glaucus*, a friendly marine biology expert.

    - **Why This Project?**
      - Identifying fish from photos normally needs an expert.
      - A multimodal model can name the species and explain habitat, edibility, and conservation status.
      - Stored identifications show which species people find, who is most active, and when.
    """)

# --- System Workflow Section ---
with st.expander("📊 System Workflow"):
    st.write("""
    1. **Upload:** A JPEG/PNG photo is validated and normalised.
    2. **Identification:** The photo is sent to the vision model with the Glaucus prompt.
    3. **Storage:** The answer, submitter, and time are saved as a detection.
    4. **Follow-up:** Further questions about the same photo are answered in a chat.
    5. **Export:** The conversation can be downloaded as PNG or PDF.
    6. **Analytics:** Stored detections are summarised by species, user, and time of day.
    """)

# --- Analytics Section ---
with st.expander("🤖 How the Analytics Work"):
    st.write("""
    - **Species label:** a short name is pulled from the first sentence of each answer
      (e.g. *"This is a Clownfish."* → **Clownfish**). Answers without a recognisable name count as **Unknown**.
    - **Time of day:** morning 6–12, afternoon 12–18, evening 18–24, night 0–6 (local time).
    - **Ties:** the most common fish / most active user is the one seen first; time-of-day ties
      go to the earliest period of the day.
    """)

# --- Limitations Section ---
with st.expander("⚠️ Current Limitations"):
    st.write("""
    - Species labels come from a text heuristic, not structured model output.
    - There is no confidence score for an identification.
    - Submitter identity is whatever email the user enters.
    """)
