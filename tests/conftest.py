"""Shared fixtures."""

from typing import Callable, List, Optional

import pytest
from pydantic import BaseModel, Field

from tcloud_sdk import Api, BaseTransport, Credentials, TransportRequest, TransportResponse


class FooRequest(BaseModel):
    name: str = Field(..., alias="Name")
    limit: Optional[int] = Field(None, alias="Limit")

    model_config = {
        "populate_by_name": True,
    }


class FooResponse(BaseModel):
    foo: str = Field(..., alias="Foo")

    model_config = {
        "populate_by_name": True,
    }


class RecordingTransport(BaseTransport):
    """Returns canned responses and keeps every request it was given."""

    def __init__(self, body: bytes = b"", status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code
        self.requests: List[TransportRequest] = []
        self.size_limits: List[Optional[int]] = []
        self.closed = False

    async def send(
        self, request: TransportRequest, *, size_limit: Optional[int] = None
    ) -> TransportResponse:
        self.requests.append(request)
        self.size_limits.append(size_limit)
        return TransportResponse(status_code=self.status_code, body=self.body)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(secret_id="AKIDEXAMPLE", secret_key="example-secret-key")


@pytest.fixture
def foo_api() -> Api[FooRequest, FooResponse]:
    """Descriptor for a fake ``DescribeFoo`` action answering ``{"Foo": str}``."""
    return Api(
        request_model=FooRequest,
        response_model=FooResponse,
        version="2020-01-01",
        action="DescribeFoo",
        service="foo",
        host="foo.tencentcloudapi.com",
    )


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Factory for transports answering a fixed body and status."""
    return RecordingTransport
