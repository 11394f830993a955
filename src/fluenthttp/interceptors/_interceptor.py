from typing import TYPE_CHECKING, Awaitable, Union

if TYPE_CHECKING:
    from .._utils._request_spec import RequestSpec
    from ..models.outcome import Outcome


class Interceptor:
    """Hook pair applied around a request.

    `on_request` receives the outgoing spec before it is rendered and sent.
    `on_error` receives the failure outcome before it is raised to the caller.
    Both default to returning their argument unchanged, so subclasses only
    override the hook they need. Either hook may be a coroutine function.

    Interceptors run in the order they were attached, for both hooks, and
    each hook sees the output of the previous one.

    Examples:
        ```python
        class BasicAuth(Interceptor):
            def on_request(self, spec):
                spec.headers["Authorization"] = "Basic foobar"
                return spec
        ```
    """

    def on_request(
        self, spec: "RequestSpec"
    ) -> Union["RequestSpec", Awaitable["RequestSpec"]]:
        return spec

    def on_error(self, outcome: "Outcome") -> Union["Outcome", Awaitable["Outcome"]]:
        return outcome
