import logging
import os
import sys

from pythonjsonlogger import jsonlogger


def setup_logging():
    """
    Configures structured JSON logging for the CLI.

    Log records are written to stderr so they never interleave with the
    summary printed on stdout. The level is read from ``DISTILL_LOG_LEVEL``
    and defaults to CRITICAL, so a failed run shows only the CLI's own error
    line. Noisy HTTP client loggers are capped at the same level.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level = os.getenv("DISTILL_LOG_LEVEL", "CRITICAL").upper()

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["httpx", "httpcore", "urllib3"]:
        logging.getLogger(logger_name).setLevel(level)

    return root_logger
