import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .._utils.constants import CONTENT_TYPE_JSON, CONTENT_TYPE_PLAIN


class BodyKind(str, Enum):
    JSON = "json"
    PLAIN = "plain"


_CONTENT_TYPES = {
    BodyKind.JSON: CONTENT_TYPE_JSON,
    BodyKind.PLAIN: CONTENT_TYPE_PLAIN,
}


@dataclass(frozen=True)
class Body:
    """A request payload together with the content type it implies.

    Bodies are created through the named constructors and serialized only when
    the owning request is rendered.

    Examples:
        ```python
        Body.as_json({"foo": "bar"})
        Body.as_plain("Hello")
        ```
    """

    kind: BodyKind
    payload: Any

    @classmethod
    def as_json(cls, value: Any) -> "Body":
        return cls(kind=BodyKind.JSON, payload=value)

    @classmethod
    def as_plain(cls, value: Union[str, bytes]) -> "Body":
        return cls(kind=BodyKind.PLAIN, payload=value)

    @classmethod
    def coerce(cls, value: Any) -> "Body":
        """Wrap a raw payload in a Body.

        Strings and bytes become plain bodies, any other value is sent as JSON.
        Body instances are returned unchanged.
        """
        if isinstance(value, Body):
            return value
        if isinstance(value, (str, bytes)):
            return cls.as_plain(value)
        return cls.as_json(value)

    @property
    def content_type(self) -> str:
        return _CONTENT_TYPES[self.kind]

    def render(self) -> Union[str, bytes]:
        if self.kind is BodyKind.JSON:
            return json.dumps(self.payload)
        if isinstance(self.payload, (str, bytes)):
            return self.payload
        return str(self.payload)
