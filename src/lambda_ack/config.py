import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration loaded from environment variables."""

    # --- Environment indicators (logged only, never validated) ---
    stage: str
    region: str

    # --- Observability ---
    service_name: str
    log_level: str
    log_timezone: str
    metrics_namespace: str

    # --- Derived Properties ---
    @property
    def environment_indicators(self) -> dict[str, str]:
        return {"STAGE": self.stage, "AWS_REGION": self.region}

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.log_timezone)

    @classmethod
    def load_from_env(cls) -> "AppConfig":
        """
        Loads configuration from environment variables.

        STAGE and AWS_REGION fall back to "unknown" when absent. Logging
        settings are validated and fail fast with a ConfigurationError.
        """
        stage = os.getenv("STAGE", UNKNOWN)
        region = os.getenv("AWS_REGION", UNKNOWN)

        service_name = (
            os.getenv("SERVICE_NAME")
            or os.getenv("POWERTOOLS_SERVICE_NAME")
            or "aws-python-lambda-sam"
        )
        metrics_namespace = os.getenv("METRICS_NAMESPACE", "LambdaAck")

        log_level = os.getenv("LOG_LEVEL", "DEBUG").upper()
        allowed_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if log_level not in allowed_log_levels:
            raise ConfigurationError(
                f"LOG_LEVEL must be one of {allowed_log_levels}, not '{log_level}'",
                context={"variable": "LOG_LEVEL", "value": log_level},
            )

        log_timezone = os.getenv("LOG_TIMEZONE", "Europe/Budapest")
        try:
            ZoneInfo(log_timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigurationError(
                f"LOG_TIMEZONE '{log_timezone}' is not a known zone",
                context={"variable": "LOG_TIMEZONE", "value": log_timezone},
            ) from e

        return cls(
            stage=stage,
            region=region,
            service_name=service_name,
            log_level=log_level,
            log_timezone=log_timezone,
            metrics_namespace=metrics_namespace,
        )


# --- Singleton Factory Function (Lazy-loaded and Cached) ---
@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Loads the application configuration from environment variables.
    The environment is only read on the first call.
    """
    logger.info("Loading application configuration from environment...")
    return AppConfig.load_from_env()
