"""Composition root for mockledger.

This module is the only place that imports both the core engine and
the concrete reporting adapters. verify() asks it for the default
reporter and verifier when the caller does not supply them.

Module Structure:
- Configuration loading via config module
- Logging setup (opt-in)
- Adapter selection
- Cached defaults for the public API
"""

import logging
import sys
from functools import lru_cache

from mockledger.adapters.reporting.asserting import AssertingReporter
from mockledger.adapters.reporting.log import LoggingReporter
from mockledger.adapters.reporting.recording import RecordingReporter
from mockledger.config import Settings, load_settings
from mockledger.core.ports import ReportingPort
from mockledger.core.verifier import Verifier


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure logging for the mockledger package.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.WARNING)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_str))

    package_logger = logging.getLogger("mockledger")
    package_logger.setLevel(level)
    if not package_logger.handlers:
        package_logger.addHandler(handler)


def build_reporter(settings: Settings) -> ReportingPort:
    """Instantiate the reporting adapter selected in settings."""
    if settings.report_backend == "recording":
        return RecordingReporter()
    if settings.report_backend == "logging":
        return LoggingReporter()
    return AssertingReporter()


def build_verifier(settings: Settings) -> Verifier:
    return Verifier(max_arg_repr_length=settings.max_arg_repr_length)


@lru_cache(maxsize=1)
def default_settings() -> Settings:
    """Load settings once per process and apply logging configuration."""
    settings = load_settings()
    if settings.configure_logging:
        configure_logging(settings.log_level, settings.log_format)
    logging.getLogger(__name__).debug(
        f"Loaded settings: report_backend={settings.report_backend}"
    )
    return settings


@lru_cache(maxsize=1)
def default_reporter() -> ReportingPort:
    return build_reporter(default_settings())


@lru_cache(maxsize=1)
def default_verifier() -> Verifier:
    return build_verifier(default_settings())


def reset_defaults() -> None:
    """Forget cached settings, reporter and verifier.

    The next verify() call reloads settings from the environment.
    """
    default_settings.cache_clear()
    default_reporter.cache_clear()
    default_verifier.cache_clear()
