#!/usr/bin/env python3
"""
Basic Logging Example

Demonstrates leveled logging, JSON output, and process-wide configuration.

Run:
    uv run python examples/basic_logging.py
"""

from logger_pro import Logger, LogLevel, options


def basic_logging() -> None:
    """Log at every level, with the short aliases too."""
    print("=== Basic Logging ===\n")
    log = Logger(tag="BasicDemo")

    log.debug("Detailed information for developers")
    log.info("General application events")
    log.warn("Something needs attention")
    log.error("Something went wrong")

    log.d("Debug using short alias")
    log.i("Info using short alias")


def json_logging() -> None:
    """Pretty-print nested data."""
    print("\n=== JSON Logging ===\n")
    log = Logger(tag="JsonDemo", show_location=False)

    log.json_info(
        {
            "id": 123,
            "name": "John Doe",
            "preferences": {"theme": "dark", "notifications": True},
        },
        label="User Data",
    )
    log.json_error(
        {
            "error": "Network timeout",
            "code": "TIMEOUT_ERROR",
            "details": {"url": "/api/users", "timeout": "30s", "retryCount": 3},
        },
        label="Network Error",
    )


def configuration() -> None:
    """Global defaults, per-logger overrides and templates."""
    print("\n=== Configuration ===\n")
    options.configure(
        min_log_level=LogLevel.INFO,
        include_timestamp=True,
        date_time_format="HH:mm:ss.SSS",
        show_location=False,
    )

    global_logger = Logger(tag="Global")
    global_logger.debug("Filtered out by min_log_level")
    global_logger.info("This info message will show")

    debug_logger = Logger(tag="Debug", enable_colors=False, show_location=True)
    debug_logger.info("Custom logger with different settings")

    options.configure(message_template="[{timestamp}] {level} | {tag} | {message}")
    Logger(tag="Custom").info("Message with custom template")

    options.reset()


def main() -> None:
    basic_logging()
    json_logging()
    configuration()


if __name__ == "__main__":
    main()
