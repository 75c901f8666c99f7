"""
export.py — Conversation Report Export
--------------------------------------

Renders an identification transcript to PNG or PDF so users can download
and share Glaucus's analysis.

Dependencies:
- Matplotlib for text layout and PNG/PDF output

Project: Glaucus Fish Identification
"""

import re
import textwrap
from io import BytesIO

from matplotlib.figure import Figure

PNG_FILE_NAME = "glaucus-analysis.png"
PDF_FILE_NAME = "glaucus-analysis.pdf"
DEFAULT_TITLE = "Glaucus AI - Fish Analysis"

WRAP_WIDTH = 90
LINE_HEIGHT_IN = 0.22
PAGE_WIDTH_IN = 8.27  # A4

# Emoji and pictographs: the default DejaVu font has no glyphs for them
EMOJI_PATTERN = re.compile("[\U00010000-\U0010FFFF\u2600-\u27BF\u2B00-\u2BFF\uFE0F\u200D]")


def strip_emoji(text):
    lines = EMOJI_PATTERN.sub("", text).splitlines()
    return "\n".join(re.sub(r"[ \t]{2,}", " ", line).strip() for line in lines)


def _report_lines(messages, title):
    lines = [(strip_emoji(title), "title"), ("", "body")]
    for msg in messages:
        speaker = "Glaucus" if msg.sender == "ai" else "You"
        lines.append((f"{speaker}:", "speaker"))
        for paragraph in strip_emoji(msg.content).splitlines() or [""]:
            wrapped = textwrap.wrap(paragraph, WRAP_WIDTH) or [""]
            lines.extend((text, "body") for text in wrapped)
        lines.append(("", "body"))
    return lines


def _render(messages, title, fmt):
    lines = _report_lines(messages, title)
    height = max(2.0, LINE_HEIGHT_IN * (len(lines) + 2))

    fig = Figure(figsize=(PAGE_WIDTH_IN, height))
    fig.patch.set_facecolor("white")
    step = LINE_HEIGHT_IN / height
    y = 1 - step

    for text, style in lines:
        if style == "title":
            fig.text(0.05, y, text, fontsize=14, fontweight="bold", color="#1d4ed8", va="top")
        elif style == "speaker":
            fig.text(0.05, y, text, fontsize=10, fontweight="bold", color="#374151", va="top")
        else:
            fig.text(0.05, y, text, fontsize=9, color="#111827", va="top")
        y -= step

    buffer = BytesIO()
    fig.savefig(buffer, format=fmt, dpi=150)
    return buffer.getvalue()


def render_conversation_png(messages, title=DEFAULT_TITLE) -> bytes:
    return _render(messages, title, "png")


def render_conversation_pdf(messages, title=DEFAULT_TITLE) -> bytes:
    return _render(messages, title, "pdf")
