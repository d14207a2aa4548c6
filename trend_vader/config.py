import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

# Load .env files in priority order (later = lower priority)
_PACKAGE_DIR = Path(__file__).parent
_PROJECT_ROOT = _PACKAGE_DIR.parent

load_dotenv(_PACKAGE_DIR / ".env", override=True)   # trend_vader/.env (highest)
load_dotenv(_PROJECT_ROOT / ".env")                  # project .env

# --- Paths ---
DATA_DIR = _PACKAGE_DIR / "data"
BUNDLED_LEXICON = DATA_DIR / "vader_lexicon.txt"
LEXICON_PATH = os.getenv("TREND_VADER_LEXICON", str(BUNDLED_LEXICON))

# --- Logging ---
LOG_LEVEL = os.getenv("TREND_VADER_LOG_LEVEL", "INFO").upper()

# --- Scoring surfaces ---
MAX_TEXT_LENGTH = int(os.getenv("TREND_VADER_MAX_TEXT_LENGTH", "5000"))

# Label bands on compound: |c| >= LABEL_STRONG → Positive/Negative,
# |c| >= LABEL_WEAK → Somewhat-*, otherwise Neutral
LABEL_STRONG = float(os.getenv("TREND_VADER_LABEL_STRONG", "0.35"))
LABEL_WEAK = float(os.getenv("TREND_VADER_LABEL_WEAK", "0.15"))

# --- Server ---
SERVER_HOST = os.getenv("TREND_VADER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("TREND_VADER_PORT", "8000"))


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Replace loguru's default sink with a stderr sink at `level`.

    Library modules only emit through `logger`; entry points (CLI, server)
    call this once at startup.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}",
    )
