#!/usr/bin/env python3
"""Basic usage example"""

from datetime import datetime
import logging

from logger_facade import FormatErrorAction, Logger, LoggerBuilder, LogLevel

def main():
    logging.basicConfig(level=5, format="%(levelname)s %(name)s %(message)s")

    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_name("example")
        .with_level(LogLevel.DEBUG)
        .with_console(colored=True)
        .with_logging("example-app")
        .with_format_error_action(FormatErrorAction.APPEND_AS_STRING)
        .build())

    # Log messages
    logger.v("This is verbose")
    logger.d("This is debug")
    logger.i("Application started at %tT", datetime.now())
    logger.w("Disk usage at %d%%", 91)
    try:
        {}["missing"]
    except KeyError as exc:
        logger.e(exc, "Lookup of %s failed", "missing")

    # A second logger sharing the same config
    db = Logger("db", logger.config)
    logger.config.level = LogLevel.VERBOSE
    db.v("Now visible: %s", "verbose")

    # Bad template is logged as raw text plus arguments
    db.i("%d rows", "many")

if __name__ == "__main__":
    main()
