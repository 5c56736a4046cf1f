"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    """Read a float from the environment, rejecting garbage loudly."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "FinLedger"
    DB_FILENAME = "finledger.db"
    DEBUG = False
    TESTING = False

    # Affordability thresholds (percent of monthly income).
    MORTGAGE_RATIO_LIMIT = 30.0
    DEBT_RATIO_LIMIT = 40.0

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("FINLEDGER_SECRET_KEY", "replace-me")
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = self.TESTING or _env_bool("FINLEDGER_DEV_MODE", default=True)
        self.DATABASE_URL = os.getenv("FINLEDGER_DATABASE_URL", self._build_sqlite_url())
        self.DEMO_USER_ID = os.getenv("FINLEDGER_DEMO_USER_ID", "demo-user-id")
        self.DEFAULT_MONTHLY_INCOME = _env_float("FINLEDGER_DEFAULT_MONTHLY_INCOME", 90000.0)
        self.LOG_LEVEL = os.getenv("FINLEDGER_LOG_LEVEL", "INFO").upper()
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("FINLEDGER_SECRET_KEY must be set in non-dev mode.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("FINLEDGER_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        db_path = self.DATA_DIR / self.DB_FILENAME
        return f"sqlite:///{db_path}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        options: dict[str, Any] = {}
        if self.DATABASE_URL.startswith("sqlite"):
            options["connect_args"] = {"check_same_thread": False}
        return options


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True


class TestConfig(BaseConfig):
    """Configuration used by the test-suite; always runs in dev mode."""

    __test__ = False
    TESTING = True
