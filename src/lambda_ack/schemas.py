# In src/lambda_ack/schemas.py

from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

# --- Static Type Hinting (for mypy and IDEs) ---


class InvocationContext(Protocol):
    """
    The part of the Lambda context object the handler relies on.
    Powertools' LambdaContext satisfies it.
    """

    @property
    def aws_request_id(self) -> str: ...


# --- Payload Models (using Pydantic) ---


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_log_extra(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class StartedLogEntry(_CamelModel):
    request_id: str = Field(..., alias="requestId")
    event: Any
    python_version: str
    environment: dict[str, str]


class CompletedLogEntry(_CamelModel):
    duration: str
    request_id: str = Field(..., alias="requestId")
    python_version: str
    environment: dict[str, str]


class ResponsePayload(_CamelModel):
    """
    The acknowledgment returned to the Lambda runtime.
    Serialized with ``to_response()`` so keys use the wire names.
    """

    status: str = "ok"
    message: str
    request_id: str = Field(..., alias="requestId")
    duration: str
    received: Any
    timestamp: str
    python_version: str

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
