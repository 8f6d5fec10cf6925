"""Structured logging configuration using structlog."""

import logging
from typing import Any, Dict, Optional

import structlog
from rich.console import Console
from rich.logging import RichHandler

from career_match.config import settings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structured logging with rich output on stderr.

    Raises:
        ValueError: If the level is not one of LOG_LEVELS
    """
    level_name = (level or settings.log_level).upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level_name!r}, expected one of {', '.join(LOG_LEVELS)}")
    log_level = getattr(logging, level_name)

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, markup=False)],
    )

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.dev.ConsoleRenderer(colors=False) if settings.debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def log_function_call(func_name: str, **kwargs: Any) -> Dict[str, Any]:
    """Create a log context for function calls."""
    return {
        "function": func_name,
        "parameters": {k: v for k, v in kwargs.items() if not k.startswith("_")},
    }


def log_profile_summary(profile: Any) -> Dict[str, Any]:
    """Create a log context describing a user profile without its contents."""
    return {
        "profile": {
            "skills_count": len(profile.skills),
            "experience_years": profile.experience,
            "locations_count": len(profile.preferred_locations),
            "job_types_count": len(profile.preferred_job_types),
            "has_salary_range": profile.preferred_salary_range is not None,
        }
    }
