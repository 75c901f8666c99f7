"""
Tests for the upload pipeline and detection storage.
"""
from datetime import datetime
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import SQLAlchemyError

from core.aggregate import DetectionRecord
from core.ingest import (
    analyze_upload,
    clear_upload_dir,
    delete_all_detections,
    fetch_detection_records,
    insert_detection,
    save_upload,
)
from db.detection_model import Detection
from tools.image_utils import InvalidImageError


def test_analyze_upload_stores_detection(db_session, sample_png_bytes, fake_analyzer, tmp_path):
    messages = []
    outcome = analyze_upload(
        "reef.png",
        sample_png_bytes,
        submitter_id="diver@example.com",
        session=db_session,
        analyzer=fake_analyzer,
        update_status=messages.append,
        upload_dir=tmp_path,
    )

    assert outcome.result_text == fake_analyzer.answer
    assert outcome.detection_id is not None
    assert fake_analyzer.calls == [(outcome.image_b64, None)]

    row = db_session.get(Detection, outcome.detection_id)
    assert row.image_name == "reef.png"
    assert row.user_email == "diver@example.com"
    assert row.result == fake_analyzer.answer
    assert row.image_path.endswith("_reef.jpg")
    with open(row.image_path, "rb") as fh:
        assert fh.read(2) == b"\xff\xd8"  # JPEG

    record = row.to_record()
    assert record.submitter_id == "diver@example.com"
    assert record.captured_at == int(row.created_at.timestamp())
    assert any("Stored detection" in m for m in messages)


def test_analyze_upload_anonymous(db_session, sample_png_bytes, fake_analyzer, tmp_path):
    outcome = analyze_upload("fish.png", sample_png_bytes, session=db_session,
                             analyzer=fake_analyzer, upload_dir=tmp_path)
    assert db_session.get(Detection, outcome.detection_id).user_email == "anonymous"


def test_invalid_image_never_reaches_model(db_session, fake_analyzer, tmp_path):
    with pytest.raises(InvalidImageError):
        analyze_upload("notes.txt", b"not an image", session=db_session,
                       analyzer=fake_analyzer, upload_dir=tmp_path)
    assert fake_analyzer.calls == []
    assert db_session.query(Detection).count() == 0


def test_storage_failure_still_returns_answer(sample_png_bytes, fake_analyzer, tmp_path):
    session = MagicMock()
    session.commit.side_effect = SQLAlchemyError("database is down")

    outcome = analyze_upload("fish.png", sample_png_bytes, session=session,
                             analyzer=fake_analyzer, upload_dir=tmp_path)

    assert outcome.detection_id is None
    assert outcome.result_text == fake_analyzer.answer
    session.rollback.assert_called_once()
    session.close.assert_not_called()
    # the saved image is removed when its row is not stored
    assert list(tmp_path.rglob("*.jpg")) == []


def test_analyzer_errors_propagate(db_session, sample_png_bytes, tmp_path):
    def failing(image_b64, question=None):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        analyze_upload("fish.png", sample_png_bytes, session=db_session,
                       analyzer=failing, upload_dir=tmp_path)
    assert db_session.query(Detection).count() == 0


def test_save_upload_uses_date_directories(tmp_path):
    path = save_upload(b"jpeg", "photos/Nemo.PNG", tmp_path, now=datetime(2024, 5, 6, 7, 8, 9))
    assert path.parent == tmp_path / "2024" / "05" / "06"
    assert path.name.endswith("_Nemo.jpg")
    assert path.read_bytes() == b"jpeg"


def _seed(session):
    insert_detection(session, "a.jpg", None, "This is a Tuna.", "a@x.com", "m",
                     created_at=datetime(2024, 1, 1, 8, 0))
    insert_detection(session, "b.jpg", None, "This is a Cod.", None, "m",
                     created_at=datetime(2024, 1, 2, 20, 0))
    insert_detection(session, "c.jpg", None, "This is a Tuna.", "c@x.com", "m",
                     created_at=datetime(2024, 1, 3, 14, 0))


def test_fetch_detection_records_oldest_first(db_session):
    _seed(db_session)
    records = fetch_detection_records(db_session)

    assert [r.submitter_id for r in records] == ["a@x.com", "anonymous", "c@x.com"]
    assert records[0] == DetectionRecord(
        result_text="This is a Tuna.",
        submitter_id="a@x.com",
        captured_at=int(datetime(2024, 1, 1, 8, 0).timestamp()),
    )


def test_fetch_detection_records_limit_keeps_most_recent(db_session):
    _seed(db_session)
    records = fetch_detection_records(db_session, limit=2)
    assert [r.result_text for r in records] == ["This is a Cod.", "This is a Tuna."]
    assert records[-1].submitter_id == "c@x.com"


def test_missing_created_at_has_no_timestamp():
    row = Detection(image_name="x.jpg", result="This is a Tuna.", user_email=None, created_at=None)
    assert row.to_record() == DetectionRecord("This is a Tuna.", "anonymous", None)


def test_delete_all_detections(db_session):
    _seed(db_session)
    assert delete_all_detections(db_session) == 3
    assert fetch_detection_records(db_session) == []


def test_clear_upload_dir(tmp_path):
    upload_dir = tmp_path / "uploads"
    assert clear_upload_dir(upload_dir) is False
    save_upload(b"jpeg", "fish.jpg", upload_dir)
    assert clear_upload_dir(upload_dir) is True
    assert not upload_dir.exists()
