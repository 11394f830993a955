import json
from enum import Enum
from typing import Any, Mapping, Optional

from httpx import Headers, Response
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .._utils.constants import (
    NETWORK_ERROR_STATUS_CODE,
    SUCCESS_STATUS_MAX,
    SUCCESS_STATUS_MIN,
    TIMEOUT_STATUS_CODE,
)


def is_success_status(status_code: int) -> bool:
    return SUCCESS_STATUS_MIN <= status_code <= SUCCESS_STATUS_MAX


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    HTTP_ERROR = "http_error"
    TIMEOUT = "timeout"
    NETWORK_ERROR = "network_error"


class Outcome(BaseModel):
    """The result of a single request attempt.

    Returned by `RequestSpec.request()` on success and carried by
    `RequestFailedError` on failure. Error interceptors receive the failure
    outcome and may modify it or return a replacement.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status_code: int
    body: Optional[str] = None
    headers: Headers = Field(default_factory=Headers)
    kind: OutcomeKind = OutcomeKind.SUCCESS
    message: Optional[str] = None

    @field_validator("headers", mode="before")
    @classmethod
    def _coerce_headers(cls, value: Any) -> Any:
        if isinstance(value, Mapping) and not isinstance(value, Headers):
            return Headers(value)
        return value

    @classmethod
    def from_response(cls, response: Response) -> "Outcome":
        status_code = response.status_code
        return cls(
            status_code=status_code,
            body=response.text or None,
            headers=Headers(response.headers),
            kind=(
                OutcomeKind.SUCCESS
                if is_success_status(status_code)
                else OutcomeKind.HTTP_ERROR
            ),
        )

    @classmethod
    def timeout(cls) -> "Outcome":
        return cls(status_code=TIMEOUT_STATUS_CODE, kind=OutcomeKind.TIMEOUT)

    @classmethod
    def network_error(cls, message: str) -> "Outcome":
        return cls(
            status_code=NETWORK_ERROR_STATUS_CODE,
            kind=OutcomeKind.NETWORK_ERROR,
            message=message or None,
        )

    @property
    def is_success(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    def parse_json(self) -> Any:
        """Decode the body as JSON. Returns None when there is no body."""
        if self.body is None:
            return None
        return json.loads(self.body)

    def __repr__(self) -> str:
        return (
            f"Outcome(status_code={self.status_code!r}, "
            f"kind={self.kind.value!r}, message={self.message!r})"
        )
