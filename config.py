"""
THEOLOGOS - Configuration

Centralized configuration management for the reference subsystem and
its command line.
Uses environment variables with sensible defaults.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional
from enum import Enum

from dotenv import load_dotenv

from core.errors import TheologosConfigError

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Deployment environments."""
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class DatabaseConfig:
    """Canonical store configuration."""
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///./theologos.db"))
    echo: bool = field(default_factory=lambda: os.getenv("DB_ECHO", "false").lower() == "true")

    # Connection pool settings (ignored by SQLite)
    pool_size: int = field(default_factory=lambda: int(os.getenv("DB_POOL_SIZE", "5")))
    pool_timeout: int = field(default_factory=lambda: int(os.getenv("DB_POOL_TIMEOUT", "30")))

    @property
    def is_sqlite(self) -> bool:
        """Check if the store URL points at SQLite."""
        return self.database_url.startswith("sqlite")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    json_format: bool = field(default_factory=lambda: os.getenv("LOG_FORMAT", "console").lower() == "json")
    log_to_file: bool = field(default_factory=lambda: os.getenv("LOG_TO_FILE", "false").lower() == "true")
    log_file_path: Path = field(default_factory=lambda: Path(os.getenv("LOG_FILE", "./logs/theologos.log")))


@dataclass
class ObservabilityConfig:
    """
    OpenTelemetry tracing configuration.

    Tracing is off unless OTEL_TRACING_ENABLED is set; spans are then
    exported to any OTLP-compatible backend.
    """
    tracing_enabled: bool = field(
        default_factory=lambda: os.getenv("OTEL_TRACING_ENABLED", "false").lower() == "true"
    )
    service_name: str = field(
        default_factory=lambda: os.getenv("OTEL_SERVICE_NAME", "theologos")
    )
    service_version: str = field(
        default_factory=lambda: os.getenv("OTEL_SERVICE_VERSION", "1.0.0")
    )
    otlp_endpoint: str = field(
        default_factory=lambda: os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4317")
    )
    sample_rate: float = field(
        default_factory=lambda: float(os.getenv("OTEL_SAMPLE_RATE", "1.0"))
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for diagnostics."""
        return {
            "tracing_enabled": self.tracing_enabled,
            "service_name": self.service_name,
            "service_version": self.service_version,
            "otlp_endpoint": self.otlp_endpoint,
            "sample_rate": self.sample_rate,
        }


@dataclass
class Config:
    """Main configuration class combining all sub-configs."""
    env: Environment = field(default_factory=lambda: _environment_from_env())
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    # Sub-configurations
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    observability: ObservabilityConfig = field(default_factory=ObservabilityConfig)

    def __post_init__(self):
        """Reject values the logging and tracing layers cannot use."""
        try:
            LogLevel(self.logging.level.upper())
        except ValueError as e:
            raise TheologosConfigError(
                f"Unknown log level '{self.logging.level}'",
                config_key="LOG_LEVEL",
                actual_value=self.logging.level,
                cause=e,
            ) from e
        if not 0.0 <= self.observability.sample_rate <= 1.0:
            raise TheologosConfigError(
                "OTEL_SAMPLE_RATE must be between 0.0 and 1.0",
                config_key="OTEL_SAMPLE_RATE",
                expected_type=float,
                actual_value=self.observability.sample_rate,
            )

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.env == Environment.DEVELOPMENT

    def setup_logging(self) -> None:
        """Setup structured logging based on configuration."""
        from observability.logging import LoggingConfig as StructlogConfig, setup_logging

        setup_logging(StructlogConfig(
            level=self.logging.level.upper(),
            json_format=self.logging.json_format,
            log_to_file=self.logging.log_to_file,
            log_file_path=self.logging.log_file_path,
            environment=self.env.value,
        ))

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary (excluding sensitive values)."""
        return {
            "env": self.env.value,
            "debug": self.debug,
            "database": {
                "sqlite": self.database.is_sqlite,
                "echo": self.database.echo,
            },
            "logging": {
                "level": self.logging.level,
                "json_format": self.logging.json_format,
            },
            "observability": self.observability.to_dict(),
        }


def _environment_from_env() -> Environment:
    raw = os.getenv("ENVIRONMENT", "development")
    try:
        return Environment(raw)
    except ValueError as e:
        raise TheologosConfigError(
            f"Unknown environment '{raw}'",
            config_key="ENVIRONMENT",
            actual_value=raw,
            cause=e,
        ) from e


# Singleton configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create configuration singleton."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reload_config() -> Config:
    """Reload configuration from environment."""
    global _config
    load_dotenv(override=True)
    _config = Config()
    return _config
