"""Centralized logger configuration.

Reads from config/.env (and a repository-root .env) and exposes typed
properties with sane defaults.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from daylog.severity import Severity, parse_severity

logger = logging.getLogger(__name__)


class AppConfig:
    """Logger configuration loaded from config/.env with defaults.

    Values already present in the process environment are never overridden
    by the .env files.
    """

    def __init__(self) -> None:
        root = Path(__file__).resolve().parent
        env_path = root / ".env"
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)
        repo_env = root.parent / ".env"
        if repo_env.exists():
            load_dotenv(dotenv_path=repo_env)

    @property
    def log_directory(self) -> Optional[str]:
        """Directory for the daily log file; None means the package directory."""
        v = os.getenv("LOG_DIRECTORY")
        if v is None or v == "":
            return None
        return v

    @property
    def log_severity(self) -> Severity:
        """Threshold from LOG_SEVERITY (name or number). Falls back to INFO."""
        v = os.getenv("LOG_SEVERITY")
        if v is None or v.strip() == "":
            return Severity.INFO
        try:
            return parse_severity(v)
        except ValueError:
            logger.warning("Ignoring invalid LOG_SEVERITY=%r; using INFO", v)
            return Severity.INFO

    @property
    def log_date_format(self) -> Optional[str]:
        """strftime format for line timestamps; None keeps the process default."""
        v = os.getenv("LOG_DATE_FORMAT")
        if v is None or v == "":
            return None
        return v
