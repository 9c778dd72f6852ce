import logging

import pytest
from pydantic import ValidationError

from error_handling.config import get_settings
from error_handling.logging_config import setup_logging


class TestSettings:

    def test_defaults(self):
        settings = get_settings()

        assert settings.age_threshold == 30
        assert settings.young_premium == 500
        assert settings.standard_premium == 300
        assert settings.fallback_premium == 0

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("QUOTATION_FALLBACK_PREMIUM", "10")
        monkeypatch.setenv("QUOTATION_ENVIRONMENT", "dev")

        settings = get_settings()

        assert settings.fallback_premium == 10
        assert settings.environment == "dev"

    def test_rejects_negative_premium(self, monkeypatch):
        monkeypatch.setenv("QUOTATION_YOUNG_PREMIUM", "-1")

        with pytest.raises(ValidationError):
            get_settings()


class TestSetupLogging:

    def test_repeated_calls_do_not_duplicate_handlers(self):
        setup_logging("debug")
        package_logger = setup_logging("warning")

        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.WARNING

    def test_level_defaults_to_settings(self, monkeypatch):
        monkeypatch.setenv("QUOTATION_LOG_LEVEL", "error")

        assert setup_logging().level == logging.ERROR
