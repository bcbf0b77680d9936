"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, LoggingSettings, ServerSettings, UiSettings, get_settings

__all__ = ["AppSettings", "LoggingSettings", "ServerSettings", "UiSettings", "get_settings"]
