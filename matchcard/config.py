"""
Configuration constants for the match card service
"""
import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env file before reading them below
load_dotenv()

# The printed form has room for exactly this many player lines
ROSTER_SIZE = 25

# Page setup handed to the browser
PAGE_FORMAT = 'Letter'
PAGE_RANGES = '1'

# Card language - 'fr' (default) or 'en'
CARD_LOCALE = os.environ.get('CARD_LOCALE', 'fr').strip().lower() or 'fr'

# Browser
RENDER_TIMEOUT_MS = int(os.environ.get('RENDER_TIMEOUT_MS', 30000))

# HTTP
PDF_RATE_LIMIT = os.environ.get('PDF_RATE_LIMIT', '30 per minute')
RATELIMIT_ENABLED = os.environ.get('RATELIMIT_ENABLED', 'true').strip().lower() not in ('0', 'false', 'no')
MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 1024 * 1024))  # 1MB

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def is_production() -> bool:
    return os.environ.get('FLASK_ENV', '').strip().lower() == 'production'


def setup_logging(level: str = None) -> None:
    """Configure root logging once for the process"""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
