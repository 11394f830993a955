"""Fluent HTTP request builder with an interceptor pipeline.

```python
from fluenthttp import Body, Http

async with Http(base_url="https://api.example.com") as http:
    outcome = await http.as_post().with_url("/items").with_data(Body.as_json({"a": 1})).request()
```
"""

from ._config import Config
from ._http import Http
from ._services import RequestExecutor
from ._utils import setup_logging
from ._utils._request_spec import HttpMethod, RenderedRequest, RequestSpec
from .interceptors import (
    BasicAuthInterceptor,
    BearerAuthInterceptor,
    ErrorMessageInterceptor,
    HeadersInterceptor,
    Interceptor,
)
from .models import (
    Body,
    BodyKind,
    FluentHttpError,
    InterceptorError,
    Outcome,
    OutcomeKind,
    RequestFailedError,
    is_success_status,
)

__all__ = [
    "BasicAuthInterceptor",
    "BearerAuthInterceptor",
    "Body",
    "BodyKind",
    "Config",
    "ErrorMessageInterceptor",
    "FluentHttpError",
    "HeadersInterceptor",
    "Http",
    "HttpMethod",
    "Interceptor",
    "InterceptorError",
    "Outcome",
    "OutcomeKind",
    "RenderedRequest",
    "RequestExecutor",
    "RequestFailedError",
    "RequestSpec",
    "is_success_status",
    "setup_logging",
]
