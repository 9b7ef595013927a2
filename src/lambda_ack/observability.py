# src/lambda_ack/observability.py

"""
Structured logging setup for the Lambda acknowledgment service.

Log entries are written as one JSON object per line to stderr, where the
Lambda runtime forwards them to CloudWatch Logs. Timestamps are rendered in
a fixed timezone with microsecond resolution.
"""

import logging
import sys
from datetime import datetime, tzinfo
from typing import IO

from aws_lambda_powertools import Logger
from aws_lambda_powertools.logging.formatter import LambdaPowertoolsFormatter

from .config import AppConfig


class CloudWatchFormatter(LambdaPowertoolsFormatter):
    """Powertools JSON formatter with ISO-8601 microsecond timestamps in a fixed zone."""

    def __init__(self, tz: tzinfo, **kwargs):
        super().__init__(**kwargs)
        self.tz = tz

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        created = datetime.fromtimestamp(record.created, tz=self.tz)
        return created.isoformat(timespec="microseconds")


def build_logger(config: AppConfig, stream: IO[str] | None = None) -> Logger:
    """
    Build the Powertools Logger used by the handler.

    Powertools configures the underlying logger once per service name; later
    calls for the same service reuse that handler, stream and formatter.

    Args:
        config: Application configuration (service name, level, timezone).
        stream: Destination stream; defaults to ``sys.stderr``.
    """
    return Logger(
        service=config.service_name,
        level=config.log_level,
        stream=stream or sys.stderr,
        logger_formatter=CloudWatchFormatter(tz=config.tzinfo),
    )
