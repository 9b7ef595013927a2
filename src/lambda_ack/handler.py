# src/lambda_ack/handler.py

"""
Core logic of the acknowledgment function.

`EventHandler` turns one (event, context) pair into one acknowledgment
payload, emitting a "started" and a "completed" log entry on the way. The
logger and the clocks are injected so tests can observe the log entries and
control the measured duration.
"""

import platform
import time
from datetime import datetime, timezone
from typing import Any, Callable, Protocol

from .config import AppConfig
from .schemas import (
    CompletedLogEntry,
    InvocationContext,
    ResponsePayload,
    StartedLogEntry,
)

STARTED_MESSAGE = "AWS Python Lambda SAM function started"
COMPLETED_MESSAGE = "AWS Python Lambda SAM function executed successfully"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class StructuredLogger(Protocol):
    def info(self, msg: object, *args: Any, **kwargs: Any) -> None: ...


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _format_duration(seconds: float) -> str:
    """Milliseconds rounded to two decimals, without trailing zeros: 250ms, 12.35ms."""
    text = f"{round(seconds * 1000, 2):.2f}".rstrip("0").rstrip(".")
    return f"{text}ms"


class EventHandler:
    """Builds the acknowledgment payload for a single invocation."""

    def __init__(
        self,
        logger: StructuredLogger,
        config: AppConfig,
        timer: Callable[[], float] = time.perf_counter,
        now: Callable[[], datetime] = _utc_now,
        python_version: str | None = None,
    ):
        """
        Args:
            logger: Receives the two structured log entries.
            config: Supplies the environment indicators attached to each entry.
            timer: Monotonic clock in seconds, used for the duration.
            now: Wall clock, used for the response timestamp.
            python_version: Overrides the reported runtime version.
        """
        self._logger = logger
        self._config = config
        self._timer = timer
        self._now = now
        self._python_version = python_version or platform.python_version()

    def handle(self, event: Any, context: InvocationContext) -> dict[str, Any]:
        start = self._timer()
        request_id = context.aws_request_id
        environment = self._config.environment_indicators

        self._logger.info(
            STARTED_MESSAGE,
            extra=StartedLogEntry(
                request_id=request_id,
                event=event,
                python_version=self._python_version,
                environment=environment,
            ).to_log_extra(),
        )

        duration = _format_duration(self._timer() - start)

        self._logger.info(
            COMPLETED_MESSAGE,
            extra=CompletedLogEntry(
                duration=duration,
                request_id=request_id,
                python_version=self._python_version,
                environment=environment,
            ).to_log_extra(),
        )

        return ResponsePayload(
            message=COMPLETED_MESSAGE,
            request_id=request_id,
            duration=duration,
            received=event,
            timestamp=self._now().strftime(TIMESTAMP_FORMAT),
            python_version=self._python_version,
        ).to_response()
