from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from platformdirs import user_log_dir

load_dotenv()

APP_NAME = "Calm Calendar"
APP_AUTHOR = "CalmCalendar"


@dataclass(frozen=True)
class UiSettings:
    app_name: str
    timezone: str

    @property
    def tzinfo(self) -> ZoneInfo:
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            return ZoneInfo("UTC")


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class AppSettings:
    ui: UiSettings
    server: ServerSettings
    logging: LoggingSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    ui = UiSettings(
        app_name=os.getenv("CALM_APP_NAME", APP_NAME),
        timezone=os.getenv("CALM_APP_TIMEZONE", "UTC"),
    )

    server = ServerSettings(
        host=os.getenv("CALM_API_HOST", "127.0.0.1"),
        port=_int_from_env("CALM_API_PORT", 8000),
    )

    log_dir = os.getenv("CALM_CALENDAR_LOG_DIR")
    logging_settings = LoggingSettings(
        level=os.getenv("CALM_CALENDAR_LOG_LEVEL", "INFO").upper(),
        directory=Path(log_dir) if log_dir else Path(user_log_dir(APP_NAME, APP_AUTHOR)),
    )

    return AppSettings(ui=ui, server=server, logging=logging_settings)
