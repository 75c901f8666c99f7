"""
chat.py — Follow-up Conversation About an Uploaded Fish
-------------------------------------------------------

Keeps the transcript shown under an identification: the initial answer,
the user's follow-up questions, and Glaucus's replies.

Project: Glaucus Fish Identification
"""

import logging
from dataclasses import dataclass
from typing import Callable, List

from tools.vision_utils import VisionError, analyze_fish_image

logger = logging.getLogger(__name__)

ERROR_REPLY = "Sorry, something went wrong. Please try again."


@dataclass(frozen=True)
class ChatMessage:
    sender: str   # "ai" or "user"
    content: str
    kind: str     # "initial-response", "question", "follow-up", "error"


def start_conversation(response: str) -> List[ChatMessage]:
    return [ChatMessage(sender="ai", content=response, kind="initial-response")]


def ask_follow_up(history: List[ChatMessage], image_b64: str, question: str,
                  analyzer: Callable = analyze_fish_image) -> List[ChatMessage]:
    """
    Ask Glaucus a question about the current image.

    Returns a new transcript with the question and the reply appended. A
    failed model call appends the apology message instead of raising.
    """
    if not question or not question.strip():
        return list(history)
    if not image_b64:
        raise ValueError("Upload an image before asking a question")

    messages = list(history) + [ChatMessage(sender="user", content=question, kind="question")]
    try:
        answer = analyzer(image_b64, question)
        messages.append(ChatMessage(sender="ai", content=answer, kind="follow-up"))
    except VisionError as e:
        logger.error("Follow-up question failed: %s", e)
        messages.append(ChatMessage(sender="ai", content=ERROR_REPLY, kind="error"))
    return messages
