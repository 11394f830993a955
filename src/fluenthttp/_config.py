from os import environ as env
from typing import Any, Optional

from pydantic import BaseModel, field_validator

from ._utils.constants import (
    DEFAULT_TIMEOUT,
    ENV_ACCESS_TOKEN,
    ENV_BASE_URL,
    ENV_TIMEOUT,
)


class Config(BaseModel):
    base_url: str = ""
    secret: Optional[str] = None
    timeout: Optional[float] = DEFAULT_TIMEOUT
    follow_redirects: bool = False

    @field_validator("timeout")
    @classmethod
    def _check_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("timeout must be a positive number of seconds")
        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a Config from the environment.

        Reads `FLUENTHTTP_URL`, `FLUENTHTTP_ACCESS_TOKEN` and `FLUENTHTTP_TIMEOUT`.
        Keyword arguments that are not None take precedence over the environment.
        """
        values: dict[str, Any] = {}
        if env.get(ENV_BASE_URL):
            values["base_url"] = env[ENV_BASE_URL]
        if env.get(ENV_ACCESS_TOKEN):
            values["secret"] = env[ENV_ACCESS_TOKEN]
        if env.get(ENV_TIMEOUT):
            values["timeout"] = env[ENV_TIMEOUT]

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
