import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# --- Resources ---
# Unset paths fall back to the lexicon shipped with vaderSentiment and the
# bundled idiom list, see prose_vader.core.resources.
LEXICON_PATH = os.getenv("VADER_LEXICON_PATH") or None
IDIOMS_PATH = os.getenv("VADER_IDIOMS_PATH") or None

# --- NLP ---
NLTK_DOWNLOAD = os.getenv("VADER_NLTK_DOWNLOAD", "true").lower() == "true"

# --- Output ---
OUTPUT_DIR = Path(os.getenv("VADER_OUTPUT_DIR", "output"))

# --- API ---
API_HOST = os.getenv("VADER_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("VADER_API_PORT", "8000"))

# --- Logging ---
LOG_LEVEL = os.getenv("VADER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Set up root logging for the CLI and API entry points."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
