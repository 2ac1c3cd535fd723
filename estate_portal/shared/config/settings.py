# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import os
import sys
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiConfig(BaseModel):
    base_url: str = Field("http://localhost:3000", alias="API_BASE_URL")
    timeout: float = Field(15.0, ge=0.1, alias="API_TIMEOUT")

    model_config = ConfigDict(validate_by_name=True)

    @field_validator("base_url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class SessionConfig(BaseModel):
    file: Path = Field(Path("instance/session.json"), alias="SESSION_FILE")

    model_config = ConfigDict(validate_by_name=True)


class UploadConfig(BaseModel):
    cv_max_bytes: int = Field(5 * 1024 * 1024, ge=1, alias="CV_MAX_BYTES")
    property_images_max: int = Field(20, ge=1, alias="PROPERTY_IMAGES_MAX")

    model_config = ConfigDict(validate_by_name=True)


class SecurityConfig(BaseModel):
    # CORS
    allowed_origins: list[str] = Field(["*"], alias="ALLOWED_ORIGINS")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = ConfigDict(validate_by_name=True)

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


def _api_config_factory() -> ApiConfig:
    return ApiConfig.model_validate(dict(os.environ))


def _session_config_factory() -> SessionConfig:
    return SessionConfig.model_validate(dict(os.environ))


def _upload_config_factory() -> UploadConfig:
    return UploadConfig.model_validate(dict(os.environ))


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig.model_validate(dict(os.environ))


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field("dev", alias="SECRET_KEY")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    api: ApiConfig = Field(default_factory=_api_config_factory)
    session: SessionConfig = Field(default_factory=_session_config_factory)
    uploads: UploadConfig = Field(default_factory=_upload_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.secret_key in ("dev", "development", "test", ""):
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure SECRET_KEY detected in production!\n"
                "   SECRET_KEY must be a strong random value in production.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = []
        if "*" in self.security.allowed_origins:
            warnings.append("⚠️  CORS allows wildcard (*) origins")
        if not self.security.enable_hsts:
            warnings.append("⚠️  HSTS is DISABLED (recommended for HTTPS)")
        if not self.api.base_url.startswith("https://"):
            warnings.append("⚠️  API_BASE_URL is not HTTPS, tokens travel in clear text")

        if warnings:
            print("\n⚠️  PRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)
            print(
                "   Consider enabling these security features in production.\n",
                file=sys.stderr,
            )

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()


__all__ = ["ApiConfig", "AppConfig", "SecurityConfig", "SessionConfig", "UploadConfig", "load_config"]
