"""
The Lambda entry point for the acknowledgment service.

This module is the handler path configured for the function
(``lambda_ack.app.handler``). It is responsible for:
1.  Initializing and configuring AWS Lambda Powertools (Logger, Tracer, Metrics).
2.  Building a single `EventHandler` with the logger injected.
3.  Delegating each invocation to it and publishing the invocation metric.
4.  Logging and re-raising anything unexpected so the runtime records the fault.
"""

from typing import Any

from aws_lambda_powertools import Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from .config import get_config
from .exceptions import get_error_context
from .handler import EventHandler
from .observability import build_logger

# --- Global & Reusable Components ---
CONFIG = get_config()

logger = build_logger(CONFIG)
tracer = Tracer(service=CONFIG.service_name)
metrics = Metrics(
    namespace=CONFIG.metrics_namespace,
    service=CONFIG.service_name,
)

event_handler = EventHandler(logger=logger, config=CONFIG)


@logger.inject_lambda_context()
@tracer.capture_lambda_handler
@metrics.log_metrics(capture_cold_start_metric=True)
def handler(event: Any, context: LambdaContext) -> dict[str, Any]:
    """Main Lambda handler: log the event and return the acknowledgment."""
    metrics.add_dimension("stage", CONFIG.stage)
    tracer.put_annotation(key="stage", value=CONFIG.stage)

    try:
        response = event_handler.handle(event, context)
    except Exception as e:
        logger.exception(
            "Unexpected error while handling invocation.",
            extra={"error": get_error_context(e)},
        )
        raise

    metrics.add_metric(
        name="SuccessfulInvocations", unit=MetricUnit.Count, value=1
    )
    return response
