"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, computed_field


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(default=["http://localhost:3000"])
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class JWTConfig(BaseModel):
    """JWT issuing and validation configuration."""

    secret: str | None = Field(
        default=None, description="Symmetric key used to sign access tokens"
    )
    algorithm: str = Field(default="HS256", description="Signing algorithm")
    allowed_algorithms: list[str] = Field(
        default_factory=lambda: ["HS256", "HS384", "HS512"],
        description="JWT algorithms allowed for token validation",
    )
    issuer: str = Field(
        default="bookstore-api", description="Issuer name to use when generating tokens"
    )
    audience: str = Field(
        default="bookstore-web", description="Audience that this API accepts"
    )
    access_token_ttl_seconds: int = Field(
        default=3600, description="Access token lifetime in seconds"
    )
    clock_skew: int = Field(default=60, description="Clock skew tolerance in seconds")


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="json", description="Log format")
    file: str = Field(default="logs/app.log", description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./bookstore.db",
        description="Database connection URL",
    )
    password_env_var: str | None = Field(
        default=None,
        description="Environment variable name containing database password",
    )
    pool_size: int = Field(default=20, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    echo: bool = Field(default=False, description="Echo SQL statements")

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @computed_field
    @property
    def connection_string(self) -> str:
        """Construct the database connection string, injecting the password if provided."""
        from sqlalchemy.engine import make_url

        base_url = make_url(self.url)
        if self.is_sqlite or not self.password_env_var:
            return self.url

        import os

        password = os.getenv(self.password_env_var)
        if not password:
            logger.warning(
                "Environment variable {} not set; connecting without a password",
                self.password_env_var,
            )
            return self.url

        if base_url.password:
            logger.warning(
                "Database URL already contains a password. Using password from environment variable."
            )
        return base_url.set(password=password).render_as_string(hide_password=False)


class EmailConfig(BaseModel):
    """Email provider configuration (HTTP API, SendGrid-style payloads)."""

    enabled: bool = Field(default=False, description="Send emails at all")
    api_url: str | None = Field(default=None, description="Provider send endpoint")
    api_key: str | None = Field(default=None, description="Provider API key")
    sender: str = Field(
        default="no-reply@bookstore.local", description="From address"
    )
    sender_name: str = Field(default="Book Store", description="From display name")
    timeout_seconds: float = Field(default=10.0, description="HTTP timeout")


class PhotoConfig(BaseModel):
    """Image hosting configuration (Cloudinary-compatible upload API)."""

    cloud_name: str | None = Field(default=None, description="Cloud name")
    api_key: str | None = Field(default=None, description="API key")
    api_secret: str | None = Field(default=None, description="API secret")
    folder: str = Field(default="bookstore/books", description="Upload folder")
    base_url: str = Field(
        default="https://api.cloudinary.com/v1_1", description="Upload API base URL"
    )
    max_file_size_bytes: int = Field(
        default=5 * 1024 * 1024, description="Largest accepted upload"
    )
    timeout_seconds: float = Field(default=30.0, description="HTTP timeout")

    @property
    def configured(self) -> bool:
        return bool(self.cloud_name and self.api_key and self.api_secret)


class PaginationConfig(BaseModel):
    """Paging limits for list endpoints."""

    default_page_size: int = Field(default=10, ge=1)
    max_page_size: int = Field(default=100, ge=1)


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")
    api_prefix: str = Field(default="/api/v1", description="Prefix for API routes")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    jwt: JWTConfig = Field(
        default_factory=JWTConfig, description="JWT configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    email: EmailConfig = Field(
        default_factory=EmailConfig, description="Email configuration"
    )
    photo: PhotoConfig = Field(
        default_factory=PhotoConfig, description="Image hosting configuration"
    )
    pagination: PaginationConfig = Field(
        default_factory=PaginationConfig, description="Paging configuration"
    )
