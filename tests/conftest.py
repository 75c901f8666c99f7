# tests/conftest.py
from __future__ import annotations

import os
import tempfile
from io import BytesIO
from typing import Iterator

# Settings are read at import time; point them at throwaway locations first.
os.environ.setdefault("MEDIA_ROOT", tempfile.mkdtemp(prefix="glaucus-media-"))
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("OPENAI_API_KEY", None)

import pytest
from PIL import Image
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from db.detection_model import Base


@pytest.fixture()
def db_session() -> Iterator[Session]:
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, expire_on_commit=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def sample_rgb_image() -> Image.Image:
    # A small, deterministic RGB image.
    return Image.new("RGB", (320, 240), color=(80, 120, 200))


@pytest.fixture()
def sample_png_bytes(sample_rgb_image: Image.Image) -> bytes:
    buffer = BytesIO()
    sample_rgb_image.save(buffer, format="PNG")
    return buffer.getvalue()


class FakeAnalyzer:
    """Stands in for the vision model; records every call."""

    def __init__(self, answer: str = "This is a Clownfish. It lives in anemones.") -> None:
        self.answer = answer
        self.calls: list[tuple[str, str | None]] = []

    def __call__(self, image_b64: str, question: str | None = None) -> str:
        self.calls.append((image_b64, question))
        return self.answer


@pytest.fixture()
def fake_analyzer() -> FakeAnalyzer:
    return FakeAnalyzer()
