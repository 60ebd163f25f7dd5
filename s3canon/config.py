"""Client configuration loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from s3canon.endpoints import BUCKET_LOOKUP_MODES, EndpointURL


class Settings(BaseSettings):
    """Runtime settings for request construction."""

    log_level: str = "WARNING"
    endpoint_url: str | None = None
    bucket_lookup: str = "auto"

    model_config = SettingsConfigDict(
        env_prefix="S3CANON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("endpoint_url")
    @classmethod
    def _validate_endpoint_url(cls, value: str | None) -> str | None:
        # Kept verbatim; host matching is exact, so no URL normalization here.
        if value is not None:
            EndpointURL.parse(value)
        return value

    @field_validator("bucket_lookup")
    @classmethod
    def _validate_bucket_lookup(cls, value: str) -> str:
        lowered = value.lower()
        if lowered not in BUCKET_LOOKUP_MODES:
            raise ValueError(f"bucket_lookup must be one of {sorted(BUCKET_LOOKUP_MODES)}")
        return lowered

    def endpoint(self) -> EndpointURL | None:
        """Return the configured endpoint, or None when none is set."""

        if self.endpoint_url is None:
            return None
        return EndpointURL.parse(self.endpoint_url)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings so env parsing only happens once."""

    return Settings()
