from typing import Optional

from .outcome import Outcome


class FluentHttpError(Exception):
    """Base class for errors raised by fluenthttp."""


class RequestFailedError(FluentHttpError):
    """Raised by `RequestSpec.request()` when the outcome is a failure.

    The outcome is the one produced by the error interceptor chain, so it
    reflects any changes the interceptors made.
    """

    def __init__(
        self,
        outcome: Outcome,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        self.outcome = outcome
        self.method = method
        self.url = url

        target = f"{method} {url}" if method and url is not None else "Request"
        message = f"{target} failed with status {outcome.status_code}"
        if outcome.message:
            message = f"{message}: {outcome.message}"
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return self.outcome.status_code


class InterceptorError(FluentHttpError, TypeError):
    """An interceptor hook returned something other than what it was given."""

    def __init__(self, interceptor: object, hook: str, expected: type, got: object):
        self.interceptor = interceptor
        self.hook = hook
        super().__init__(
            f"{type(interceptor).__name__}.{hook} must return a "
            f"{expected.__name__}, got {type(got).__name__}"
        )
