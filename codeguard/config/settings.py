"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
MAX_CODE_LOG_CHARS: int = int(os.getenv("MAX_CODE_LOG_CHARS", "200"))

# --- Validation ---
INLINE_STYLE_LIMIT: int = int(os.getenv("INLINE_STYLE_LIMIT", "10"))

# --- Extraction ---
SEPARATE_ASSETS: bool = os.getenv("SEPARATE_ASSETS", "false").lower() == "true"
