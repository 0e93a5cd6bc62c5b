"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


class SiteConfig(BaseModel):
    """One upstream video-index API (YAML list entry under ``sites``)."""

    key: str = Field(min_length=1, description="Short unique site key.")
    name: str = Field(min_length=1, description="Display name.")
    api: str = Field(min_length=1, description="Base API URL.")
    detail: str | None = Field(
        default=None,
        description="Optional detail-page base URL (passed through).",
    )
    path: str | None = Field(
        default=None,
        description="First-page template override ({query}).",
    )
    page_path: str | None = Field(
        default=None,
        description="Paged template override ({query}, {page}).",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Extra headers for this site, layered over search.headers.",
    )


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (http/search/logging/cache/sites).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < CLI) in load.py.
    """

    # General
    app_name: str = Field(default="vodarr", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # HTTP client (YAML section: http.*)
    http_follow_redirects: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "http_follow_redirects",
            AliasPath("http", "follow_redirects"),
        ),
        description="Whether HTTP client follows redirects.",
    )
    http_user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/131.0.0.0 Safari/537.36"
        ),
        validation_alias=AliasChoices(
            "http_user_agent",
            AliasPath("http", "user_agent"),
        ),
        description="User-Agent sent with every upstream request.",
    )

    # Upstream search (YAML section: search.*)
    search_max_pages: int = Field(
        default=5,
        validation_alias=AliasChoices(
            "search_max_pages",
            AliasPath("search", "max_pages"),
        ),
        description="Page budget per upstream and search (>= 1).",
    )
    search_timeout_seconds: float = Field(
        default=8.0,
        validation_alias=AliasChoices(
            "search_timeout_seconds",
            AliasPath("search", "timeout_seconds"),
        ),
        description="Timeout for a single upstream page request.",
    )
    search_path: str = Field(
        default="?ac=videolist&wd={query}",
        validation_alias=AliasChoices(
            "search_path",
            AliasPath("search", "path"),
        ),
        description="First-page URL template appended to the site API URL.",
    )
    search_page_path: str = Field(
        default="?ac=videolist&wd={query}&pg={page}",
        validation_alias=AliasChoices(
            "search_page_path",
            AliasPath("search", "page_path"),
        ),
        description="Page-N URL template appended to the site API URL.",
    )
    search_headers: dict[str, str] = Field(
        default_factory=lambda: {"Accept": "application/json"},
        validation_alias=AliasChoices(
            "search_headers",
            AliasPath("search", "headers"),
        ),
        description="Headers sent with every upstream request.",
    )

    # Response cache policy (YAML section: cache.*)
    cache_time_seconds: int = Field(
        default=7200,
        validation_alias=AliasChoices(
            "cache_time_seconds",
            AliasPath("cache", "time_seconds"),
        ),
        description="max-age for the Cache-Control response header.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    # Upstream sites (YAML list: sites)
    sites: list[SiteConfig] = Field(
        default_factory=list,
        description="Ordered upstream site list.",
    )

    @field_validator("search_max_pages")
    @classmethod
    def _validate_max_pages(cls, v: int) -> int:
        if v < 1:
            raise ValueError("search_max_pages must be >= 1")
        return v

    @field_validator("search_timeout_seconds")
    @classmethod
    def _validate_search_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("search_timeout_seconds must be > 0")
        return v

    @field_validator("cache_time_seconds")
    @classmethod
    def _validate_cache_time(cls, v: int) -> int:
        if v < 0:
            raise ValueError("cache_time_seconds must be >= 0")
        return v

    @field_validator("sites")
    @classmethod
    def _validate_unique_keys(cls, v: list[SiteConfig]) -> list[SiteConfig]:
        seen: set[str] = set()
        for site in v:
            if site.key in seen:
                raise ValueError(f"duplicate site key: {site.key!r}")
            seen.add(site.key)
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    Supported env var examples (flat, explicit):
    - VODARR_SEARCH_MAX_PAGES (or the legacy SEARCH_MAX_PAGE)
    - VODARR_SEARCH_TIMEOUT_SECONDS
    - VODARR_CACHE_TIME_SECONDS
    - VODARR_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="VODARR_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    http_follow_redirects: Optional[bool] = None
    http_user_agent: Optional[str] = None

    search_max_pages: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("vodarr_search_max_pages", "search_max_page"),
    )
    search_timeout_seconds: Optional[float] = None

    cache_time_seconds: Optional[int] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    def to_update_dict(self) -> dict[str, Any]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        return self.model_dump(exclude_none=True)
