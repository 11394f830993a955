from ._builtin import (
    BasicAuthInterceptor,
    BearerAuthInterceptor,
    ErrorMessageInterceptor,
    HeadersInterceptor,
)
from ._interceptor import Interceptor

__all__ = [
    "BasicAuthInterceptor",
    "BearerAuthInterceptor",
    "ErrorMessageInterceptor",
    "HeadersInterceptor",
    "Interceptor",
]
