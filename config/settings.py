"""
settings.py - Central configuration for the Glaucus fish identification app

All file system paths are derived from MEDIA_ROOT to ensure consistent structure.
Secrets (API keys) reside in .env or secrets.toml for Streamlit.
"""

import logging
import os
from dotenv import load_dotenv
from pathlib import Path


# --- Load .env ---

load_dotenv()


# --- Helper Functions ---

def normalize_root(env_var: str, default: str) -> Path:
    """
    Resolve a filesystem path from an environment variable, falling back to a default.
    """
    raw = os.getenv(env_var, default)
    if not (raw.startswith(os.sep) or raw.startswith('.') or raw.startswith('~')):
        raw = os.sep + raw
    return Path(raw).expanduser().resolve()


def env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


# --- Core Paths ---

MEDIA_ROOT = normalize_root('MEDIA_ROOT', './media')
UPLOAD_DIR = MEDIA_ROOT / "uploads"

# --- Database & Environment ---

DATABASE_URL = os.getenv('DATABASE_URL') or f"sqlite:///{MEDIA_ROOT / 'glaucus.sqlite3'}"
DEBUG = os.getenv('DEBUG', 'False').lower() in ('true', '1', 'yes')
REQUIRE_LOGIN = os.getenv('REQUIRE_LOGIN', 'False').lower() in ('true', '1', 'yes')
ENVIRONMENT = os.getenv('ENV', 'development')
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# --- Vision Model Config ---
VISION_MODEL = os.getenv('VISION_MODEL', 'gpt-4o-mini')
VISION_MAX_TOKENS = env_int('VISION_MAX_TOKENS', 800)
MAX_IMAGE_SIDE = env_int('MAX_IMAGE_SIDE', 1600)

# --- Analytics ---
DEFAULT_RECORD_LIMIT = env_int('DEFAULT_RECORD_LIMIT', 200)
ANONYMOUS_SUBMITTER = "anonymous"
UNKNOWN_LABEL = "Unknown"

# --- Secrets ---
OPENAI_API_KEY = os.getenv('OPENAI_API_KEY')
try:
    import streamlit as st
    OPENAI_API_KEY = st.secrets.get("OPENAI_API_KEY", OPENAI_API_KEY)
except (ImportError, FileNotFoundError):
    # No secrets.toml (tests, scripts): keep the environment value
    pass


def configure_logging(level: str = LOG_LEVEL) -> None:
    """
    Set up root logging once for the Streamlit process.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
