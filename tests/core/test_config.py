"""Tests for configuration validation."""

from soonami.core.config import AlertStrings, Config, validate_config, validate_query
from soonami.core.query import USGSQueryParams


class TestValidateQuery:
    """Tests for validate_query()."""

    def test_default_query_is_valid(self):
        assert validate_query(USGSQueryParams()) == []

    def test_bad_date_format(self):
        errors = validate_query(USGSQueryParams(start_date="01/01/2012"))

        assert len(errors) == 1
        assert errors[0].field == "query.start_date"

    def test_start_after_end(self):
        errors = validate_query(USGSQueryParams(start_date="2013-01-01", end_date="2012-01-01"))

        assert len(errors) == 1
        assert "start_date" in errors[0].message

    def test_negative_magnitude(self):
        errors = validate_query(USGSQueryParams(min_magnitude=-1))

        assert len(errors) == 1
        assert errors[0].field == "query.min_magnitude"


class TestValidateConfig:
    """Tests for validate_config()."""

    def test_default_config_is_valid(self):
        result = validate_config(Config())

        assert result.valid is True
        assert result.errors == []

    def test_non_positive_timeouts_are_errors(self):
        result = validate_config(Config(connect_timeout=0, read_timeout=-1))

        assert result.valid is False
        assert {e.field for e in result.critical_errors} == {"connect_timeout", "read_timeout"}

    def test_unknown_timezone_is_error(self):
        result = validate_config(Config(display_timezone="Not/AZone"))

        assert result.valid is False
        assert result.critical_errors[0].field == "display_timezone"

    def test_empty_string_is_warning(self):
        result = validate_config(Config(strings=AlertStrings(alert_no="")))

        assert result.valid is True
        assert len(result.warnings) == 1
        assert result.warnings[0].field == "strings.alert_no"
