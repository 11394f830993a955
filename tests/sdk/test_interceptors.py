import base64
import json

import pytest

from fluenthttp import (
    BasicAuthInterceptor,
    BearerAuthInterceptor,
    ErrorMessageInterceptor,
    HeadersInterceptor,
    Interceptor,
    Outcome,
    OutcomeKind,
    RequestSpec,
)


def error_outcome(body, status_code: int = 400) -> Outcome:
    if body is not None and not isinstance(body, str):
        body = json.dumps(body)
    return Outcome(status_code=status_code, kind=OutcomeKind.HTTP_ERROR, body=body)


class TestInterceptor:
    def test_hooks_default_to_identity(self) -> None:
        interceptor = Interceptor()
        spec = RequestSpec()
        outcome = error_outcome("x")

        assert interceptor.on_request(spec) is spec
        assert interceptor.on_error(outcome) is outcome


class TestAuthInterceptors:
    def test_bearer(self) -> None:
        spec = BearerAuthInterceptor("tok").on_request(RequestSpec())

        assert spec.headers["Authorization"] == "Bearer tok"

    def test_basic(self) -> None:
        spec = BasicAuthInterceptor("user", "pa:ss").on_request(RequestSpec())

        scheme, encoded = spec.headers["Authorization"].split(" ")
        assert scheme == "Basic"
        assert base64.b64decode(encoded).decode() == "user:pa:ss"

    def test_auth_replaces_existing_header(self) -> None:
        spec = RequestSpec().with_header("authorization", "Basic old")

        spec = BearerAuthInterceptor("new").on_request(spec)

        assert spec.headers.get_list("Authorization") == ["Bearer new"]

    @pytest.mark.parametrize(
        "interceptor",
        [BearerAuthInterceptor("tok"), BasicAuthInterceptor("user", "tok")],
    )
    def test_repr_hides_credentials(self, interceptor: Interceptor) -> None:
        assert "tok" not in repr(interceptor)


class TestHeadersInterceptor:
    def test_sets_headers(self) -> None:
        spec = HeadersInterceptor({"X-Tenant": "acme", "Accept": "text/csv"}).on_request(
            RequestSpec().with_header("accept", "application/json")
        )

        assert spec.headers["X-Tenant"] == "acme"
        assert spec.headers.get_list("Accept") == ["text/csv"]


class TestErrorMessageInterceptor:
    @pytest.mark.parametrize(
        "body, expected",
        [
            ({"message": "Job not found"}, "Job not found"),
            ({"error": "invalid_grant"}, "invalid_grant"),
            ({"detail": "Not authenticated"}, "Not authenticated"),
            ({"error": {"message": "Nested"}}, "Nested"),
            ({"message": "", "detail": "Fallback"}, "Fallback"),
        ],
    )
    def test_extracts_message(self, body: dict, expected: str) -> None:
        outcome = ErrorMessageInterceptor().on_error(error_outcome(body))

        assert outcome.message == expected

    @pytest.mark.parametrize(
        "body", [None, "plain text", ["a", "b"], {"errorCode": 1001}, "{broken"]
    )
    def test_leaves_other_bodies_alone(self, body) -> None:
        outcome = ErrorMessageInterceptor().on_error(error_outcome(body))

        assert outcome.message is None

    def test_keeps_existing_message(self) -> None:
        outcome = error_outcome({"message": "from body"})
        outcome.message = "already set"

        assert ErrorMessageInterceptor().on_error(outcome).message == "already set"
