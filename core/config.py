"""
Configuration management using Pydantic Settings
Handles environment variables and validation
"""
from functools import lru_cache
from typing import List

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Environment
    environment: str = Field(default="development")

    # Application
    app_name: str = "ShopAudit"
    app_version: str = "2.0.0"

    # Fetching
    request_timeout: float = Field(default=20.0, description="Main page fetch timeout in seconds")
    max_redirects: int = Field(default=5, description="Redirects followed for the main page")
    auxiliary_timeout: float = Field(default=5.0, description="robots.txt / sitemap.xml timeout in seconds")
    user_agent: str = Field(default="ShopAudit/2.0 (SEO Auditor)")

    # API
    cors_origins: List[str] = Field(default=["*"])

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")  # json or text

    # Monitoring
    prometheus_enabled: bool = Field(default=True)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        allowed = ["development", "test", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v):
        if not 1 <= v <= 60:
            raise ValueError("request_timeout must be between 1 and 60 seconds")
        return v

    @field_validator("auxiliary_timeout")
    @classmethod
    def validate_auxiliary_timeout(cls, v):
        if not 0 < v < 10:
            raise ValueError("auxiliary_timeout must be under 10 seconds")
        return v

    @field_validator("max_redirects")
    @classmethod
    def validate_max_redirects(cls, v):
        if not 0 <= v <= 9:
            raise ValueError("max_redirects must be between 0 and 9")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
