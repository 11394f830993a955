from .body import Body, BodyKind
from .exceptions import FluentHttpError, InterceptorError, RequestFailedError
from .outcome import Outcome, OutcomeKind, is_success_status

__all__ = [
    "Body",
    "BodyKind",
    "FluentHttpError",
    "InterceptorError",
    "Outcome",
    "OutcomeKind",
    "RequestFailedError",
    "is_success_status",
]
