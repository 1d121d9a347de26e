"""Unit tests for configuration validation.

Pure function tests - no mocks needed.
"""

import pytest

from quakefeed.core.config import (
    Config,
    USGS_API_BASE,
    ValidationError,
    ValidationResult,
    validate_config,
)


class TestConfigDefaults:
    """Tests for Config default values."""

    def test_defaults(self):
        config = Config()

        assert config.base_url == USGS_API_BASE
        assert config.timeout_seconds == 30
        assert config.page_size == 20
        assert config.lookback_hours == 24
        assert config.min_magnitude == 0.0


class TestValidateConfig:
    """Tests for validate_config()."""

    def test_default_config_is_valid(self):
        result = validate_config(Config())

        assert result.valid is True
        assert result.errors == []

    def test_non_http_url_is_error(self):
        result = validate_config(Config(base_url="ftp://example.com"))

        assert result.valid is False
        assert result.critical_errors[0].field == "base_url"

    def test_plain_http_url_is_warning(self):
        result = validate_config(Config(base_url="http://localhost:8080/query"))

        assert result.valid is True
        assert [w.field for w in result.warnings] == ["base_url"]

    @pytest.mark.parametrize("page_size", [0, -5])
    def test_non_positive_page_size_is_error(self, page_size):
        result = validate_config(Config(page_size=page_size))

        assert result.valid is False
        assert "page_size" in {e.field for e in result.critical_errors}

    def test_oversized_page_is_error(self):
        result = validate_config(Config(page_size=20001))

        assert result.valid is False

    def test_non_positive_timeout_is_error(self):
        result = validate_config(Config(timeout_seconds=0))

        assert result.valid is False
        assert result.critical_errors[0].field == "timeout_seconds"

    def test_non_positive_lookback_is_error(self):
        result = validate_config(Config(lookback_hours=0))

        assert result.valid is False
        assert result.critical_errors[0].field == "lookback_hours"

    def test_negative_magnitude_is_warning(self):
        result = validate_config(Config(min_magnitude=-1.0))

        assert result.valid is True
        assert result.warnings[0].field == "min_magnitude"

    def test_nan_magnitude_is_error(self):
        result = validate_config(Config(min_magnitude=float("nan")))

        assert result.valid is False

    def test_collects_multiple_errors(self):
        result = validate_config(Config(page_size=0, lookback_hours=0))

        assert {e.field for e in result.critical_errors} == {"page_size", "lookback_hours"}


class TestValidationResult:
    """Tests for ValidationResult helpers."""

    def test_splits_warnings_and_errors(self):
        result = ValidationResult(
            valid=False,
            errors=[
                ValidationError(field="a", message="bad"),
                ValidationError(field="b", message="meh", severity="warning"),
            ],
        )

        assert [e.field for e in result.critical_errors] == ["a"]
        assert [e.field for e in result.warnings] == ["b"]
