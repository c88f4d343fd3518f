"""
Api descriptor.

An ``Api`` binds a request model and a response model to the routing
constants of one remote action. Adding an action means adding a new ``Api``
value; the client and signer stay untouched.

Example:
    ```python
    from pydantic import BaseModel, Field

    class TextTranslateRequest(BaseModel):
        source_text: str = Field(..., alias="SourceText")
        ...

    TEXT_TRANSLATE = Api(
        request_model=TextTranslateRequest,
        response_model=TextTranslateResponse,
        version="2018-03-21",
        action="TextTranslate",
        service="tmt",
        host="tmt.tencentcloudapi.com",
    )
    ```
"""

from dataclasses import dataclass
from typing import Generic, Type, TypeVar

from pydantic import BaseModel

from .errors import ValidationError

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


@dataclass(frozen=True)
class Api(Generic[RequestT, ResponseT]):
    """Tencent Cloud api: request/response models plus routing constants."""

    request_model: Type[RequestT]
    response_model: Type[ResponseT]
    version: str  # e.g. "2018-03-21"
    action: str  # e.g. "TextTranslate"
    service: str  # e.g. "tmt"
    host: str  # e.g. "tmt.tencentcloudapi.com"

    def __post_init__(self) -> None:
        for name in ("version", "action", "service", "host"):
            if not getattr(self, name):
                raise ValidationError(
                    f"Api {name} must not be empty",
                    details={"field": name, "action": self.action},
                )

    @property
    def endpoint(self) -> str:
        """Request target; every call is ``POST https://<host>/``."""
        return f"https://{self.host}/"
