from typing import Any, Iterable, Optional

from dotenv import load_dotenv
from httpx import AsyncClient

from ._config import Config
from ._services import RequestExecutor
from ._utils import setup_logging
from ._utils._request_spec import RequestSpec
from .interceptors import BearerAuthInterceptor, Interceptor

load_dotenv()


class Http:
    """Entry point that hands out request builders sharing one transport.

    Each builder method starts a fresh `RequestSpec` bound to this instance's
    executor, with the default interceptors already attached. Builders are
    independent of each other.

    Examples:
        ```python
        from fluenthttp import Http

        async with Http(base_url="https://api.example.com") as http:
            outcome = await http.with_url("/items").with_query_param("page", 2).request()
        ```
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        secret: Optional[str] = None,
        timeout: Optional[float] = None,
        debug: bool = False,
        interceptors: Optional[Iterable[Interceptor]] = None,
        client: Optional[AsyncClient] = None,
    ) -> None:
        """
        Initialize the facade.

        Args:
            base_url (Optional[str]): Base URL relative request URLs are resolved against.
                If not provided, it is read from the `FLUENTHTTP_URL` environment variable.
            secret (Optional[str]): Bearer token attached to every request.
                If not provided, it is read from `FLUENTHTTP_ACCESS_TOKEN`.
            timeout (Optional[float]): Transport timeout in seconds.
                If not provided, it is read from `FLUENTHTTP_TIMEOUT`.
            debug (bool): Enable debug logging if set to True. Defaults to False.
            interceptors (Optional[Iterable[Interceptor]]): Interceptors attached to
                every spec, after the bearer auth interceptor.
            client (Optional[AsyncClient]): Transport to use instead of building one
                from the config. It is not closed by `aclose()`.
        """
        self._config = Config.from_env(
            base_url=base_url, secret=secret, timeout=timeout
        )
        setup_logging(debug)

        self._executor = RequestExecutor(self._config, client=client)

        self._interceptors: list[Interceptor] = []
        if self._config.secret:
            self._interceptors.append(BearerAuthInterceptor(self._config.secret))
        self._interceptors.extend(interceptors or [])

    @property
    def config(self) -> Config:
        return self._config

    @property
    def executor(self) -> RequestExecutor:
        return self._executor

    def spec(self) -> RequestSpec:
        return RequestSpec(
            interceptors=list(self._interceptors), executor=self._executor
        )

    def with_url(self, url: str) -> RequestSpec:
        return self.spec().with_url(url)

    def with_query_param(self, key: str, value: Any) -> RequestSpec:
        return self.spec().with_query_param(key, value)

    def with_header(self, name: str, value: str) -> RequestSpec:
        return self.spec().with_header(name, value)

    def with_data(self, payload: Any) -> RequestSpec:
        return self.spec().with_data(payload)

    def with_interceptor(self, interceptor: Interceptor) -> RequestSpec:
        return self.spec().with_interceptor(interceptor)

    def as_get(self) -> RequestSpec:
        return self.spec().as_get()

    def as_post(self) -> RequestSpec:
        return self.spec().as_post()

    def as_put(self) -> RequestSpec:
        return self.spec().as_put()

    def as_patch(self) -> RequestSpec:
        return self.spec().as_patch()

    def as_delete(self) -> RequestSpec:
        return self.spec().as_delete()

    def as_head(self) -> RequestSpec:
        return self.spec().as_head()

    def as_options(self) -> RequestSpec:
        return self.spec().as_options()

    async def aclose(self) -> None:
        await self._executor.aclose()

    async def __aenter__(self) -> "Http":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
