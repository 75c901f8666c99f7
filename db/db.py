"""
db.py — Database Engine & Session Factory
-----------------------------------------

Creates the SQLAlchemy engine from DATABASE_URL and exposes SessionLocal for
`with SessionLocal() as session:` blocks throughout the app.

Project: Glaucus Fish Identification
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from config.settings import DATABASE_URL, MEDIA_ROOT
from db.detection_model import Base


def make_engine(url: str = DATABASE_URL):
    """
    Build an engine; SQLite files get their parent directory created first.
    """
    connect_args = {}
    if url.startswith("sqlite"):
        MEDIA_ROOT.mkdir(parents=True, exist_ok=True)
        # Streamlit serves each session on its own thread
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


engine = make_engine()
SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)


def init_db(bind=None):
    """
    Create tables that do not exist yet.
    """
    Base.metadata.create_all(bind=bind or engine)
