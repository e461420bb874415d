"""Tests for configuration loading and validation."""

import dataclasses

import pytest

from autoservice.config import (
    AppConfig,
    BackendConfig,
    ExportConfig,
    PaginationConfig,
    _safe_float,
    _safe_int,
    _validate_config,
)


class TestConfigValidation:
    def test_default_config_passes_validation(self):
        config = AppConfig()
        _validate_config(config)  # should not raise

    def test_defaults(self):
        config = AppConfig()
        assert config.export.pdf_filename == "booked_services.pdf"
        assert config.export.excel_filename == "booked_services.xlsx"

    def test_backend_url_needs_scheme(self):
        config = dataclasses.replace(AppConfig(), backend=BackendConfig(base_url="localhost:5000"))
        with pytest.raises(ValueError, match="BACKEND_URL"):
            _validate_config(config)

    def test_timeout_must_be_positive(self):
        config = dataclasses.replace(
            AppConfig(), backend=BackendConfig(base_url="http://x", timeout_seconds=0),
        )
        with pytest.raises(ValueError, match="REQUEST_TIMEOUT_SECONDS"):
            _validate_config(config)

    def test_items_per_page_must_be_positive(self):
        config = dataclasses.replace(
            AppConfig(), pagination=PaginationConfig(default_items_per_page=0),
        )
        with pytest.raises(ValueError, match="DEFAULT_ITEMS_PER_PAGE"):
            _validate_config(config)

    def test_export_title_must_not_be_blank(self):
        config = dataclasses.replace(AppConfig(), export=ExportConfig(title="  "))
        with pytest.raises(ValueError, match="EXPORT_TITLE"):
            _validate_config(config)


class TestEnvParsing:
    def test_safe_int_parsing(self):
        assert _safe_int("NONEXISTENT_VAR_12345", "42") == 42

    def test_safe_float_parsing(self):
        assert _safe_float("NONEXISTENT_VAR_12345", "3.14") == pytest.approx(3.14)

    def test_invalid_int_names_variable(self, monkeypatch):
        monkeypatch.setenv("AUTOSERVICE_TEST_INT", "five")
        with pytest.raises(ValueError, match="AUTOSERVICE_TEST_INT"):
            _safe_int("AUTOSERVICE_TEST_INT", "5")
