"""
THEOLOGOS - Observability Package

Structured logging and distributed tracing for the reference subsystem.

Components:
- tracing: OpenTelemetry tracer provider and span helpers
- logging: Structlog integration with trace context propagation

Usage:
    from observability import setup_observability, get_logger

    setup_observability(get_config())
    logger = get_logger(__name__)
"""
from typing import TYPE_CHECKING

from .tracing import (
    setup_tracing,
    get_tracer,
    create_span,
    TracingConfig,
    shutdown_tracing,
)
from .logging import (
    setup_logging,
    get_logger,
    LoggingConfig,
    LogContext,
    bind_context,
    clear_context,
    shutdown_logging,
)

if TYPE_CHECKING:
    from config import Config

__all__ = [
    # Tracing
    "setup_tracing",
    "get_tracer",
    "create_span",
    "TracingConfig",
    "shutdown_tracing",
    # Logging
    "setup_logging",
    "get_logger",
    "LoggingConfig",
    "LogContext",
    "bind_context",
    "clear_context",
    "shutdown_logging",
    # Combined setup
    "setup_observability",
    "shutdown_observability",
]


def setup_observability(config: "Config") -> None:
    """
    Initialize logging and tracing from the application configuration.

    Args:
        config: Application configuration (see config.get_config)
    """
    config.setup_logging()

    obs = config.observability
    setup_tracing(TracingConfig(
        service_name=obs.service_name,
        service_version=obs.service_version,
        otlp_endpoint=obs.otlp_endpoint,
        enabled=obs.tracing_enabled,
        sample_rate=obs.sample_rate,
        environment=config.env.value,
    ))


def shutdown_observability() -> None:
    """Flush telemetry and close log handlers."""
    shutdown_tracing()
    shutdown_logging()
