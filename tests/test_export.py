"""
Tests for PNG/PDF conversation export.
"""
from core.chat import ask_follow_up, start_conversation
from core.export import render_conversation_pdf, render_conversation_png, strip_emoji


def _conversation(fake_analyzer):
    fake_analyzer.answer = "Yes.\n\nClownfish are kept in home aquariums. " * 5
    history = start_conversation("This is a Clownfish.\nIt lives among sea anemones.")
    return ask_follow_up(history, "abc123", "Can I keep one?", analyzer=fake_analyzer)


def test_png_export(fake_analyzer):
    data = render_conversation_png(_conversation(fake_analyzer))
    assert data.startswith(b"\x89PNG\r\n\x1a\n")


def test_pdf_export(fake_analyzer):
    data = render_conversation_pdf(_conversation(fake_analyzer))
    assert data.startswith(b"%PDF")


def test_longer_conversation_gives_taller_image(fake_analyzer):
    short = render_conversation_png(start_conversation("This is a Tuna."))
    long = render_conversation_png(_conversation(fake_analyzer))
    assert len(long) > len(short)


def test_strip_emoji_removes_pictographs():
    text = "🐠 Clownfish  🐟\nHabitat: ☀️ warm reefs 🌊\nSafe ✅"
    assert strip_emoji(text) == "Clownfish\nHabitat: warm reefs\nSafe"


def test_strip_emoji_keeps_accented_text():
    assert strip_emoji("Pez ángel — Pomacanthus") == "Pez ángel — Pomacanthus"


def test_export_with_emoji_answer():
    messages = start_conversation("🐠 **Clownfish** (Amphiprion ocellaris) 🌊")
    assert render_conversation_png(messages).startswith(b"\x89PNG")
    assert render_conversation_pdf(messages).startswith(b"%PDF")
