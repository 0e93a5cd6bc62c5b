"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "vodarr",
    "environment": "dev",
    "http": {
        "follow_redirects": True,
        "user_agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/131.0.0.0 Safari/537.36"
        ),
    },
    "search": {
        "max_pages": 5,
        "timeout_seconds": 8.0,
        "path": "?ac=videolist&wd={query}",
        "page_path": "?ac=videolist&wd={query}&pg={page}",
        "headers": {
            "Accept": "application/json",
        },
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
    "cache": {
        "time_seconds": 7200,
    },
    "sites": [],
}
