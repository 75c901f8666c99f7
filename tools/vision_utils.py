"""
vision_utils.py — Glaucus Vision Model Client
---------------------------------------------

Sends fish photos to a hosted multimodal model and returns its answer.

Features:
- Initial identification prompt (names, characteristics, edibility, habitat,
  conservation status, a fun fact)
- Follow-up prompt that carries the user's question about the same image
- Single OpenAI chat completion with an inline base64 JPEG

Dependencies:
- OpenAI client API (v1)

Project: Glaucus Fish Identification
"""

import logging
from functools import lru_cache
from textwrap import dedent

from openai import OpenAI, OpenAIError

from config.settings import OPENAI_API_KEY, VISION_MODEL, VISION_MAX_TOKENS

logger = logging.getLogger(__name__)


class VisionError(RuntimeError):
    """Raised when the vision model cannot be reached or returns nothing."""


IDENTIFY_PROMPT = dedent("""
    You are Glaucus, a friendly AI marine biology expert 🐠.
    Analyze the fish in this image and provide a comprehensive identification.

    Include these details in your response:
    1. Common name and scientific name (if possible)
    2. Physical characteristics
    3. Edibility/toxicity information
    4. Natural habitat and distribution
    5. Conservation status
    6. One interesting fact about this species

    Format your response with clear sections and use emojis to make it engaging.
    Keep the tone professional but friendly.
""").strip()

FOLLOW_UP_PROMPT = dedent("""
    You are Glaucus, a marine biology expert AI.
    A user has asked about a previously uploaded fish image: "{question}"

    Please provide a detailed, accurate answer about the fish in the image, including:
    - Species identification (if not already identified)
    - Behavior and characteristics
    - Habitat information
    - Conservation status
    - Answer to their specific question
    - Any other relevant information

    Format your response with clear paragraphs and use emojis where appropriate.
    Maintain a friendly but professional tone.
""").strip()


def build_prompt(question=None):
    """
    Prompt text for an initial identification, or for a follow-up question.
    """
    if question:
        return FOLLOW_UP_PROMPT.format(question=question.strip())
    return IDENTIFY_PROMPT


@lru_cache(maxsize=1)
def get_client():
    if not OPENAI_API_KEY:
        raise VisionError("OPENAI_API_KEY is not configured")
    return OpenAI(api_key=OPENAI_API_KEY)


def analyze_fish_image(image_b64, question=None, client=None, model=None):
    """
    Ask the vision model about a fish photo.

    Args:
        image_b64 (str): Base64-encoded JPEG (no data-URL prefix)
        question (str | None): Follow-up question; None for the initial analysis
        client (OpenAI | None): Client to use; defaults to get_client()
        model (str | None): Model name; defaults to VISION_MODEL

    Returns:
        str: The model's free-text answer
    """
    client = client or get_client()
    model = model or VISION_MODEL

    try:
        response = client.chat.completions.create(
            model=model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": build_prompt(question)},
                        {
                            "type": "image_url",
                            "image_url": {"url": f"data:image/jpeg;base64,{image_b64}"}
                        }
                    ]
                }
            ],
            max_tokens=VISION_MAX_TOKENS,
        )
    except OpenAIError as e:
        logger.error("Error analyzing fish image with %s: %s", model, e)
        raise VisionError(f"Vision model request failed: {e}") from e

    content = response.choices[0].message.content if response.choices else None
    if not content:
        raise VisionError("Vision model returned an empty answer")
    return content.strip()
