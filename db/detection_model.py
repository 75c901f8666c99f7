"""
detection_model.py — Fish Detection ORM Model
---------------------------------------------

This module defines the SQLAlchemy ORM model for storing the result of each
fish image analysis in the Glaucus app.

Tables:
- `detection`: One row per analysed upload (image file, model answer, submitter, time)

Features:
- Keeps the raw model answer; species labels are derived at read time
- Converts rows into plain DetectionRecord values for the analytics core

Dependencies:
- SQLAlchemy ORM

Project: Glaucus Fish Identification
"""

from datetime import datetime

from sqlalchemy import Column, Integer, Text, DateTime
from sqlalchemy.orm import declarative_base

from config.settings import ANONYMOUS_SUBMITTER
from core.aggregate import DetectionRecord

Base = declarative_base()


class Detection(Base):
    """
    Table: detection

    Stores one analysed upload:
    - Original file name and stored JPEG path
    - Free-text answer returned by the vision model
    - Submitter email (or "anonymous")
    - Creation time
    """
    __tablename__ = "detection"

    detection_id = Column(Integer, primary_key=True)

    image_name = Column(Text, nullable=False)
    image_path = Column(Text)
    result = Column(Text)
    user_email = Column(Text, default=ANONYMOUS_SUBMITTER)
    model_name = Column(Text)

    # Naive local wall-clock time; day-parts are local
    created_at = Column(DateTime, default=datetime.now)

    def to_record(self) -> DetectionRecord:
        """
        Convert this row into an immutable DetectionRecord.
        """
        captured_at = int(self.created_at.timestamp()) if self.created_at else None
        return DetectionRecord(
            result_text=self.result,
            submitter_id=self.user_email or ANONYMOUS_SUBMITTER,
            captured_at=captured_at,
        )
