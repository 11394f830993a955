from typing import AsyncGenerator

import pytest

from fluenthttp import Config, Http, RequestExecutor, RequestSpec


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("FLUENTHTTP_URL", raising=False)
    monkeypatch.delenv("FLUENTHTTP_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("FLUENTHTTP_TIMEOUT", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://test.fluenthttp.local"


@pytest.fixture
def secret() -> str:
    return "secret-token"


@pytest.fixture
def config(base_url: str) -> Config:
    return Config(base_url=base_url)


@pytest.fixture
async def executor(
    config: Config, anyio_backend: str
) -> AsyncGenerator[RequestExecutor, None]:
    async with RequestExecutor(config) as executor:
        yield executor


@pytest.fixture
def spec(executor: RequestExecutor) -> RequestSpec:
    return RequestSpec(executor=executor)


@pytest.fixture
async def http(base_url: str, anyio_backend: str) -> AsyncGenerator[Http, None]:
    async with Http(base_url=base_url) as http:
        yield http

