# File: wordharvest/core/config/settings.py

import os
import logging
from pathlib import Path
from typing import Tuple


logger = logging.getLogger(__name__)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default


def _split_paths(raw: str) -> Tuple[Path, ...]:
    return tuple(Path(p) for p in raw.split(os.pathsep) if p.strip())


class Settings:
    # --- Extensions ---
    MAX_EXTENSIONS: int = 5
    MAX_EXTENSION_LENGTH: int = 6
    ALWAYS_ALLOWED_EXTENSIONS: Tuple[str, ...] = ("txt", "text", "asc")
    PDF_EXTENSION: str = "pdf"

    # --- External Tools ---
    # Conventional install locations for pdftotext, checked before PATH
    PDFTOTEXT_CANDIDATES: Tuple[Path, ...] = _split_paths(
        os.getenv(
            "WORDHARVEST_PDFTOTEXT_PATHS",
            os.pathsep.join([
                "/usr/local/bin/pdftotext",
                "/usr/bin/pdftotext",
                "/bin/pdftotext",
                "/usr/local/sbin/pdftotext",
                "/usr/sbin/pdftotext",
            ]),
        )
    )

    # --- Harvest ---
    MIN_WORD_LENGTH: int = _int_env("WORDHARVEST_MIN_WORD_LENGTH", 1)
    WORKERS: int = _int_env("WORDHARVEST_WORKERS", 1)

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("WORDHARVEST_LOG_LEVEL", "INFO").upper()


settings = Settings()
