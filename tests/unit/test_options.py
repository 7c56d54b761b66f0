"""Tests for logger options and process-wide defaults."""

import logging

import pytest

from logger_pro import options
from logger_pro.exceptions import LoggerConfigurationError
from logger_pro.levels import LogLevel
from logger_pro.options import LoggerOptions


class TestLoggerOptions:
    """Tests for the LoggerOptions value object."""

    def test_defaults(self) -> None:
        opts = LoggerOptions()
        assert opts.enable_logging is True
        assert opts.enable_colors is True
        assert opts.min_log_level == LogLevel.DEBUG
        assert opts.show_class_name is False
        assert opts.show_function_name is True
        assert opts.show_location is True
        assert opts.include_timestamp is False
        assert opts.date_time_format == "HH:mm:ss"
        assert opts.message_template is None

    def test_merge_returns_copy(self) -> None:
        opts = LoggerOptions()
        merged = opts.merge(enable_colors=False)
        assert merged.enable_colors is False
        assert opts.enable_colors is True

    def test_merge_ignores_none(self) -> None:
        opts = LoggerOptions(enable_colors=False)
        assert opts.merge(enable_colors=None) == opts

    def test_merge_accepts_level_name(self) -> None:
        assert LoggerOptions().merge(min_log_level="warn").min_log_level == LogLevel.WARN

    @pytest.mark.parametrize("level", ["verbose", 5, 850])
    def test_merge_rejects_bad_level(self, level: object) -> None:
        with pytest.raises(LoggerConfigurationError) as exc_info:
            LoggerOptions().merge(min_log_level=level)
        assert exc_info.value.field == "min_log_level"

    def test_merge_rejects_unknown_option(self) -> None:
        with pytest.raises(LoggerConfigurationError, match="Unknown logger option"):
            LoggerOptions().merge(show_colour=True)

    @pytest.mark.parametrize("format", ["", "invalid@#$", "xyz123"])
    def test_invalid_date_format_resets_to_default(
        self, format: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="logger_pro.options"):
            opts = LoggerOptions(date_time_format="yyyy").merge(date_time_format=format)
        assert opts.date_time_format == "HH:mm:ss"
        assert "Invalid date_time_format" in caplog.text

    def test_valid_date_format_kept(self) -> None:
        opts = LoggerOptions().merge(date_time_format="yyyy-MM-dd HH:mm:ss")
        assert opts.date_time_format == "yyyy-MM-dd HH:mm:ss"

    @pytest.mark.parametrize(
        ("template", "warning"),
        [
            ("{invalidPlaceholder}", "unknown placeholders invalidPlaceholder"),
            ("", "has no placeholders"),
            ("static text", "has no placeholders"),
        ],
    )
    def test_questionable_template_warns_but_applies(
        self, template: str, warning: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="logger_pro.options"):
            opts = LoggerOptions().merge(message_template=template)
        assert opts.message_template == template
        assert warning in caplog.text

    def test_valid_template_no_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="logger_pro.options"):
            opts = LoggerOptions().merge(message_template="{level}: {message}")
        assert opts.message_template == "{level}: {message}"
        assert caplog.records == []


class TestGlobalOptions:
    """Tests for configure/reset/current."""

    def test_configure_partial_update(self) -> None:
        options.configure(enable_colors=False)
        options.configure(min_log_level=LogLevel.WARN)
        current = options.current()
        assert current.enable_colors is False
        assert current.min_log_level == LogLevel.WARN
        assert current.enable_logging is True

    def test_failed_configure_keeps_previous(self) -> None:
        options.configure(include_timestamp=True)
        with pytest.raises(LoggerConfigurationError):
            options.configure(enable_colors=False, min_log_level="loud")
        assert options.current().include_timestamp is True
        assert options.current().enable_colors is True

    def test_reset(self) -> None:
        options.configure(
            enable_logging=False,
            message_template="{message}",
            date_time_format="yyyy",
        )
        assert options.reset() == LoggerOptions()
        assert options.current() == LoggerOptions()
