import inspect
from logging import getLogger
from typing import Any, Optional

from httpx import AsyncClient, RequestError, TimeoutException

from .._config import Config
from .._utils._request_spec import RenderedRequest, RequestSpec
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import HEADER_AUTHORIZATION
from ..interceptors import Interceptor
from ..models.exceptions import InterceptorError, RequestFailedError
from ..models.outcome import Outcome, OutcomeKind


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


class RequestExecutor:
    """Runs a RequestSpec through the interceptor pipeline and the transport.

    A request goes through these steps:

    1. The spec is copied and every interceptor attached to the caller's spec
       runs its `on_request` hook in attachment order, each one receiving the
       previous hook's result. The same interceptors, not those of the spec
       the hooks return, later run `on_error`.
    2. The resulting spec is rendered and sent once through the transport.
    3. A status in the 200-399 range is a success and its outcome is returned.
    4. Anything else, a timeout (status 408) or any other `httpx.RequestError`
       such as a connection, decoding or redirect failure (status 0),
       is a failure: every `on_error` hook runs in attachment order and the
       final outcome is raised in a `RequestFailedError`.

    The executor closes its client only when it created it.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        client: Optional[AsyncClient] = None,
    ) -> None:
        self._logger = getLogger("fluenthttp")
        self._config = config or Config()

        if client is None:
            client = AsyncClient(**get_httpx_client_kwargs(self._config))
            self._owns_client = True
        else:
            self._owns_client = False
        self._client = client

    @property
    def client(self) -> AsyncClient:
        return self._client

    async def execute(self, spec: RequestSpec) -> Outcome:
        interceptors = list(spec.interceptors)
        spec = await self._intercept_request(spec.copy(), interceptors)
        rendered = spec.render()

        outcome = await self._send(rendered)
        if outcome.kind is OutcomeKind.SUCCESS:
            self._logger.debug(
                f"Response: {rendered.method} {rendered.url} -> {outcome.status_code}"
            )
            return outcome

        self._logger.debug(
            f"Request failed: {rendered.method} {rendered.url} -> "
            f"{outcome.status_code} ({outcome.kind.value})"
        )
        outcome = await self._intercept_error(interceptors, outcome)
        raise RequestFailedError(outcome, method=rendered.method, url=rendered.url)

    async def _intercept_request(
        self, spec: RequestSpec, interceptors: list[Interceptor]
    ) -> RequestSpec:
        for interceptor in interceptors:
            result = await _resolve(interceptor.on_request(spec))
            if not isinstance(result, RequestSpec):
                raise InterceptorError(interceptor, "on_request", RequestSpec, result)
            spec = result
        return spec

    async def _intercept_error(
        self, interceptors: list[Interceptor], outcome: Outcome
    ) -> Outcome:
        for interceptor in interceptors:
            result = await _resolve(interceptor.on_error(outcome))
            if not isinstance(result, Outcome):
                raise InterceptorError(interceptor, "on_error", Outcome, result)
            outcome = result
        return outcome

    async def _send(self, rendered: RenderedRequest) -> Outcome:
        self._logger.debug(f"Request: {rendered.method} {rendered.url}")
        self._logger.debug(f"HEADERS: {self._redact(rendered)}")

        try:
            response = await self._client.request(
                rendered.method,
                rendered.url,
                headers=rendered.headers,
                content=rendered.content,
            )
        except TimeoutException as e:
            self._logger.warning(
                f"Request timed out: {rendered.method} {rendered.url} ({e!r})"
            )
            return Outcome.timeout()
        except RequestError as e:
            self._logger.warning(
                f"Network error: {rendered.method} {rendered.url} ({e!r})"
            )
            return Outcome.network_error(str(e))

        outcome = Outcome.from_response(response)
        await response.aclose()
        return outcome

    def _redact(self, rendered: RenderedRequest) -> dict[str, str]:
        return {
            name: "***" if name.lower() == HEADER_AUTHORIZATION.lower() else value
            for name, value in rendered.headers.items()
        }

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "RequestExecutor":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

