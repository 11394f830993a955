import base64
import json
from typing import TYPE_CHECKING, Mapping, Optional

from .._utils.constants import HEADER_AUTHORIZATION
from ._interceptor import Interceptor

if TYPE_CHECKING:
    from .._utils._request_spec import RequestSpec
    from ..models.outcome import Outcome


class HeadersInterceptor(Interceptor):
    """Sets a fixed group of headers on every request."""

    def __init__(self, headers: Mapping[str, str]) -> None:
        self._headers = dict(headers)

    def on_request(self, spec: "RequestSpec") -> "RequestSpec":
        for name, value in self._headers.items():
            spec.headers[name] = value
        return spec


class BearerAuthInterceptor(Interceptor):
    def __init__(self, token: str) -> None:
        self._token = token

    def on_request(self, spec: "RequestSpec") -> "RequestSpec":
        spec.headers[HEADER_AUTHORIZATION] = f"Bearer {self._token}"
        return spec

    def __repr__(self) -> str:
        return "BearerAuthInterceptor(token='***')"


class BasicAuthInterceptor(Interceptor):
    def __init__(self, username: str, password: str) -> None:
        credentials = f"{username}:{password}".encode("utf-8")
        self._value = f"Basic {base64.b64encode(credentials).decode('ascii')}"

    def on_request(self, spec: "RequestSpec") -> "RequestSpec":
        spec.headers[HEADER_AUTHORIZATION] = self._value
        return spec

    def __repr__(self) -> str:
        return "BasicAuthInterceptor(credentials='***')"


class ErrorMessageInterceptor(Interceptor):
    """Normalizes error payloads into `Outcome.message`.

    When the failure body is a JSON object, the first of its `message`,
    `error` or `detail` fields is copied to the outcome. Other bodies are
    left alone and an existing message is never overwritten.
    """

    MESSAGE_KEYS = ("message", "error", "detail")

    def on_error(self, outcome: "Outcome") -> "Outcome":
        if outcome.message or not outcome.body:
            return outcome

        try:
            error_body = json.loads(outcome.body)
        except ValueError:
            return outcome

        if isinstance(error_body, dict):
            message = self._extract_message(error_body)
            if message:
                outcome.message = message
        return outcome

    def _extract_message(self, error_body: dict) -> Optional[str]:
        for key in self.MESSAGE_KEYS:
            value = error_body.get(key)
            if isinstance(value, str) and value:
                return value
            # {"error": {"message": "..."}}
            if isinstance(value, dict):
                nested = value.get("message")
                if isinstance(nested, str) and nested:
                    return nested
        return None
