"""
identify_ui.py — Fish Identification & Follow-up Chat UI
--------------------------------------------------------

This Streamlit module is the main Glaucus page. It provides an interactive UI to:

- Upload a fish photo and ask Glaucus to identify it
- Store each identification as a detection for the analytics page
- Ask follow-up questions about the same photo
- Download the conversation as PNG or PDF

Dependencies:
- Streamlit for UI
- core.ingest for the upload → model → database pipeline
- core.chat for the follow-up conversation
- core.export for PNG/PDF rendering

Project: Glaucus Fish Identification
"""

import streamlit as st

from core.chat import ask_follow_up, start_conversation
from core.export import PDF_FILE_NAME, PNG_FILE_NAME, render_conversation_pdf, render_conversation_png
from core.ingest import analyze_upload
from tools.auth_utils import signed_in_email, submitter_label
from tools.image_utils import InvalidImageError
from tools.vision_utils import VisionError


# --- Session State Defaults ---
for key, default in {
    "chat_messages": [],
    "image_b64": None,
    "progress_log": [],
}.items():
    if key not in st.session_state:
        st.session_state[key] = default


# --- Sidebar: Submitter Identity ---
submitter = signed_in_email(st.user)
with st.sidebar:
    st.header("Your Details")
    st.write(f"Detections are saved as **{submitter_label(st.user)}**.")


# --- Expandable Process Overview UI ---
with st.expander("Show/Hide How Glaucus Works", expanded=False):
    st.write(
        """
        **Steps:**
        1. **Upload**: Your photo is checked and converted to JPEG.
        2. **Identify**: The photo is sent to a hosted vision model with the Glaucus prompt.
        3. **Store**: The answer, your sign-in email (or *anonymous*), and the time are saved as a detection.
        4. **Ask**: Follow-up questions reuse the same photo.
        """
    )


# --- Progress Log Helper Function ---
def update_status(message):
    """
    Append a status message to the progress log and display recent entries.
    """
    st.session_state.progress_log.append(message)
    progress_area.markdown("<br>".join(st.session_state.progress_log[-5:]), unsafe_allow_html=True)


# --- Step 1: Upload ---
st.subheader("📷 Upload Fish Image")
uploaded = st.file_uploader("Drag & drop or click to upload a fish image", type=["jpg", "jpeg", "png", "webp"])

if uploaded is not None:
    st.image(uploaded, caption="Preview", width=256)

analyze_clicked = st.button("Ask Glaucus 🐠", disabled=uploaded is None)
progress_area = st.empty()

# --- Step 2: Analyze ---
if analyze_clicked and uploaded is not None:
    st.session_state.progress_log = []
    with st.spinner("Analyzing your fish image..."):
        try:
            outcome = analyze_upload(
                uploaded.name,
                uploaded.getvalue(),
                submitter_id=submitter,
                update_status=update_status
            )
        except InvalidImageError as e:
            st.error(f"That file doesn't look like an image: {e}")
        except VisionError as e:
            st.error(f"Glaucus could not analyze the image: {e}")
        else:
            st.session_state.chat_messages = start_conversation(outcome.result_text)
            st.session_state.image_b64 = outcome.image_b64
            if outcome.detection_id is None:
                st.warning("The analysis could not be saved for analytics.")

# --- Step 3: Conversation ---
if st.session_state.chat_messages:
    st.subheader("🐟 Glaucus says:")
    for msg in st.session_state.chat_messages:
        role = "assistant" if msg.sender == "ai" else "user"
        with st.chat_message(role):
            st.markdown(msg.content)

    with st.form("follow_up_form", clear_on_submit=True):
        question = st.text_input("Ask a question about this fish...")
        asked = st.form_submit_button("Ask Question")

    if asked and question.strip():
        with st.spinner("Glaucus is thinking..."):
            try:
                st.session_state.chat_messages = ask_follow_up(
                    st.session_state.chat_messages,
                    st.session_state.image_b64,
                    question
                )
            except ValueError as e:
                st.warning(str(e))
            else:
                st.rerun()

    # --- Downloads ---
    col1, col2 = st.columns([1, 1])
    with col1:
        st.download_button(
            "PNG",
            data=render_conversation_png(st.session_state.chat_messages),
            file_name=PNG_FILE_NAME,
            mime="image/png"
        )
    with col2:
        st.download_button(
            "PDF",
            data=render_conversation_pdf(st.session_state.chat_messages),
            file_name=PDF_FILE_NAME,
            mime="application/pdf"
        )

st.caption("Glaucus AI - Advanced fish identification powered by AI")
