"""Tests for the composition root and configuration loading.

These tests verify that settings load from the environment, that the
configured reporter is selected, and that defaults are cached until
reset.
"""

import logging
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from mockledger.adapters.reporting import AssertingReporter, LoggingReporter, RecordingReporter
from mockledger.composition import (
    build_reporter,
    build_verifier,
    configure_logging,
    default_reporter,
    default_settings,
    default_verifier,
    reset_defaults,
)
from mockledger.config import load_settings


class TestConfigurationLoading:
    """Test configuration loading and validation."""

    def test_load_settings_with_defaults(self) -> None:
        """Load settings with default values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = load_settings()
        assert settings.report_backend == "asserting"
        assert settings.max_arg_repr_length == 80
        assert settings.configure_logging is False
        assert settings.log_level == "WARNING"
        assert settings.log_format == "text"

    def test_load_settings_from_env(self) -> None:
        """Load settings from MOCKLEDGER_* environment variables."""
        with patch.dict(
            os.environ,
            {
                "MOCKLEDGER_REPORT_BACKEND": "logging",
                "MOCKLEDGER_MAX_ARG_REPR_LENGTH": "20",
                "MOCKLEDGER_LOG_LEVEL": "DEBUG",
            },
        ):
            settings = load_settings()
            assert settings.report_backend == "logging"
            assert settings.max_arg_repr_length == 20
            assert settings.log_level == "DEBUG"

    def test_load_settings_from_env_file(self, tmp_path) -> None:
        """Load settings from an explicit .env file."""
        env_file = tmp_path / "mockledger.env"
        env_file.write_text("MOCKLEDGER_REPORT_BACKEND=recording\n")

        with patch.dict(os.environ, {}, clear=True):
            settings = load_settings(str(env_file))
        assert settings.report_backend == "recording"

    def test_rejects_unknown_backend(self) -> None:
        with patch.dict(os.environ, {"MOCKLEDGER_REPORT_BACKEND": "tap"}):
            with pytest.raises(ValidationError):
                load_settings()

    def test_rejects_tiny_repr_length(self) -> None:
        with patch.dict(os.environ, {"MOCKLEDGER_MAX_ARG_REPR_LENGTH": "2"}):
            with pytest.raises(ValidationError):
                load_settings()


class TestAdapterSelection:
    """Test that the configured reporter and verifier are built."""

    @pytest.mark.parametrize(
        "backend, adapter_type",
        [
            ("recording", RecordingReporter),
            ("logging", LoggingReporter),
            ("asserting", AssertingReporter),
        ],
    )
    def test_build_reporter(self, backend: str, adapter_type: type) -> None:
        with patch.dict(os.environ, {"MOCKLEDGER_REPORT_BACKEND": backend}):
            settings = load_settings()
        assert isinstance(build_reporter(settings), adapter_type)

    def test_build_verifier_uses_repr_length(self) -> None:
        with patch.dict(os.environ, {"MOCKLEDGER_MAX_ARG_REPR_LENGTH": "12"}):
            settings = load_settings()
        assert build_verifier(settings).max_arg_repr_length == 12


class TestDefaults:
    """Cached defaults used by verify()."""

    def test_defaults_are_cached(self) -> None:
        assert default_settings() is default_settings()
        assert default_reporter() is default_reporter()
        assert default_verifier() is default_verifier()

    def test_reset_reloads_environment(self) -> None:
        with patch.dict(os.environ, {"MOCKLEDGER_REPORT_BACKEND": "recording"}):
            reset_defaults()
            assert isinstance(default_reporter(), RecordingReporter)

        with patch.dict(os.environ, {"MOCKLEDGER_REPORT_BACKEND": "logging"}):
            reset_defaults()
            assert isinstance(default_reporter(), LoggingReporter)


class TestConfigureLogging:
    """Opt-in logging setup."""

    def test_installs_one_handler_on_package_logger(self) -> None:
        package_logger = logging.getLogger("mockledger")
        saved_handlers = list(package_logger.handlers)
        saved_level = package_logger.level
        package_logger.handlers.clear()
        try:
            configure_logging("DEBUG", "json")
            configure_logging("DEBUG", "json")

            assert package_logger.level == logging.DEBUG
            assert len(package_logger.handlers) == 1
        finally:
            package_logger.handlers[:] = saved_handlers
            package_logger.setLevel(saved_level)

    def test_settings_flag_triggers_configuration(self) -> None:
        with patch.dict(os.environ, {"MOCKLEDGER_CONFIGURE_LOGGING": "true"}):
            with patch("mockledger.composition.configure_logging") as configure:
                reset_defaults()
                default_settings()

        configure.assert_called_once_with("WARNING", "text")
