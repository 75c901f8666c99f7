"""
Tests for the vision model client (OpenAI calls are mocked).
"""
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from openai import OpenAIError

import tools.vision_utils as vision
from tools.vision_utils import VisionError, analyze_fish_image, build_prompt


def _response(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def test_build_prompt_initial_and_follow_up():
    assert "Analyze the fish in this image" in build_prompt()
    follow_up = build_prompt("  Is it edible?  ")
    assert '"Is it edible?"' in follow_up
    assert "Answer to their specific question" in follow_up


def test_analyze_sends_text_and_inline_jpeg():
    client = MagicMock()
    client.chat.completions.create.return_value = _response("  This is a Tuna.  ")

    answer = analyze_fish_image("QUJD", client=client, model="test-model")

    assert answer == "This is a Tuna."
    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "test-model"
    content = kwargs["messages"][0]["content"]
    assert content[0] == {"type": "text", "text": build_prompt()}
    assert content[1]["image_url"]["url"] == "data:image/jpeg;base64,QUJD"


def test_analyze_passes_question_into_prompt():
    client = MagicMock()
    client.chat.completions.create.return_value = _response("They eat plankton.")

    analyze_fish_image("QUJD", "What does it eat?", client=client)

    text = client.chat.completions.create.call_args.kwargs["messages"][0]["content"][0]["text"]
    assert "What does it eat?" in text


def test_api_error_becomes_vision_error():
    client = MagicMock()
    client.chat.completions.create.side_effect = OpenAIError("rate limited")
    with pytest.raises(VisionError):
        analyze_fish_image("QUJD", client=client)


@pytest.mark.parametrize("content", [None, ""])
def test_empty_answer_is_vision_error(content):
    client = MagicMock()
    client.chat.completions.create.return_value = _response(content)
    with pytest.raises(VisionError):
        analyze_fish_image("QUJD", client=client)


def test_get_client_requires_api_key(monkeypatch):
    monkeypatch.setattr(vision, "OPENAI_API_KEY", None)
    vision.get_client.cache_clear()
    try:
        with pytest.raises(VisionError):
            vision.get_client()
    finally:
        vision.get_client.cache_clear()
