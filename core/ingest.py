"""
ingest.py — Fish Image Upload, Analysis, and Storage Pipeline
-------------------------------------------------------------

This module handles a single fish photo from upload to stored detection.
It validates the image, normalises it to JPEG, asks the vision model for an
identification, saves the image in a date-organised upload directory, and
inserts a detection record into the database.

Key Features:
- Image validation and JPEG normalisation with Pillow
- Identification via the hosted vision model (tools.vision_utils)
- Organised image storage by upload date (YYYY/MM/DD)
- Detection persistence with SQLAlchemy
- Read-back of stored detections as DetectionRecord values for analytics

Dependencies:
- PIL for image handling
- OpenAI vision model for identification
- SQLAlchemy for database operations

Project: Glaucus Fish Identification
"""

import logging
import shutil
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from config.settings import ANONYMOUS_SUBMITTER, UPLOAD_DIR, VISION_MODEL
from core.aggregate import DetectionRecord
from db.db import SessionLocal
from db.detection_model import Detection
from tools.image_utils import encode_base64, load_image, to_jpeg_bytes
from tools.vision_utils import analyze_fish_image

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadResult:
    detection_id: Optional[int]
    result_text: str
    image_b64: str


def _noop_status(message):
    logger.debug(message)


def save_upload(jpeg_bytes: bytes, file_name: str, upload_dir: Path = UPLOAD_DIR, now: Optional[datetime] = None) -> Path:
    """
    Write the normalised JPEG under upload_dir/YYYY/MM/DD and return its path.
    """
    now = now or datetime.now()
    target_dir = upload_dir / now.strftime("%Y/%m/%d")
    target_dir.mkdir(parents=True, exist_ok=True)

    stem = Path(file_name).stem or "upload"
    target = target_dir / f"{now.strftime('%H%M%S%f')}_{stem}.jpg"
    target.write_bytes(jpeg_bytes)
    return target


def insert_detection(session, file_name, image_path, result_text, submitter_id, model_name, created_at=None) -> int:
    """
    Insert one detection row and return its id.
    """
    detection = Detection(
        image_name=file_name,
        image_path=str(image_path) if image_path else None,
        result=result_text,
        user_email=submitter_id or ANONYMOUS_SUBMITTER,
        model_name=model_name,
        created_at=created_at or datetime.now(),
    )
    session.add(detection)
    session.commit()
    return detection.detection_id


def analyze_upload(
    file_name: str,
    data: bytes,
    submitter_id: Optional[str] = None,
    session=None,
    analyzer: Callable = analyze_fish_image,
    update_status: Optional[Callable[[str], None]] = None,
    upload_dir: Path = UPLOAD_DIR,
) -> UploadResult:
    """
    Full upload pipeline:
    - Validates and normalises the image
    - Runs the vision model identification
    - Saves the image to the upload directory
    - Inserts the detection into the database

    The model answer is returned even if storing it fails; analyzer errors
    propagate to the caller.
    """
    update_status = update_status or _noop_status

    image = load_image(data)
    jpeg_bytes = to_jpeg_bytes(image)
    image_b64 = encode_base64(jpeg_bytes)
    update_status(f"Prepared {file_name} ({image.size[0]}x{image.size[1]})")

    result_text = analyzer(image_b64)
    update_status(f"Analysis received for {file_name}")

    owns_session = session is None
    if owns_session:
        session = SessionLocal()
    detection_id = None
    image_path = None
    try:
        image_path = save_upload(jpeg_bytes, file_name, upload_dir)
        detection_id = insert_detection(
            session, file_name, image_path, result_text, submitter_id, VISION_MODEL
        )
        update_status(f"✅ Stored detection {detection_id} for {file_name}")
    except (SQLAlchemyError, OSError) as e:
        session.rollback()
        if image_path is not None:
            # No row points at the file
            image_path.unlink(missing_ok=True)
        logger.error("Failed to store detection for %s: %s", file_name, e)
        update_status(f"❌ Failed to store detection for {file_name}")
    finally:
        if owns_session:
            session.close()

    return UploadResult(detection_id=detection_id, result_text=result_text, image_b64=image_b64)


def fetch_detection_records(session, limit: Optional[int] = None) -> List[DetectionRecord]:
    """
    Load stored detections as DetectionRecord values, oldest first.
    """
    query = session.query(Detection).order_by(Detection.created_at.asc(), Detection.detection_id.asc())
    if limit:
        # Most recent `limit` rows, still returned oldest first
        recent = (
            select(Detection.detection_id)
            .order_by(Detection.created_at.desc(), Detection.detection_id.desc())
            .limit(limit)
        )
        query = query.filter(Detection.detection_id.in_(recent))
    return [row.to_record() for row in query.all()]


def delete_all_detections(session) -> int:
    deleted = session.query(Detection).delete()
    session.commit()
    logger.info("Deleted %d detections", deleted)
    return deleted


def clear_upload_dir(upload_dir: Path = UPLOAD_DIR) -> bool:
    if not upload_dir.exists():
        return False
    shutil.rmtree(upload_dir)
    return True
