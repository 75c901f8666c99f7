"""
labels.py — Species Label Extraction
------------------------------------

Turns a free-text model answer into a short species label.

The heuristic looks for an optional lead-in ("is", "This is", "It's", "It is"),
an optional article, then captures words up to the first period, newline,
comma, " and", " which", " that" or end of text. Anything that does not match
degrades to the "Unknown" label; nothing here raises.

Project: Glaucus Fish Identification
"""

import re

from config.settings import UNKNOWN_LABEL


LABEL_PATTERN = re.compile(
    r"(?:is|This is|It's|It is)?(?: an?)?\s*([\w\s-]+?)(?=\.|\n|,| and| which| that|\Z)",
    re.IGNORECASE,
)


def extract_label(text):
    """
    Best-effort species label for a model response.

    Args:
        text (str | None): Free-text answer from the vision model

    Returns:
        str: Trimmed label, or "Unknown" when nothing usable is found
    """
    if not text:
        return UNKNOWN_LABEL
    match = LABEL_PATTERN.search(text)
    if not match:
        return UNKNOWN_LABEL
    label = match.group(1).strip()
    return label or UNKNOWN_LABEL
