"""
Tencent Cloud Python SDK

Thin async client for Tencent Cloud APIs signed with TC3-HMAC-SHA256.

Features:
- Typed api descriptors (request/response models + routing constants)
- TC3-HMAC-SHA256 request signing
- Response size limit
- Structured error handling

Example:
    ```python
    from tcloud_sdk import Client, Credentials
    from tcloud_sdk.apis import TEXT_TRANSLATE, TextTranslateRequest

    async with Client(
        region="ap-guangzhou",
        credentials=Credentials(secret_id="AKID...", secret_key="..."),
        response_size_limit=1024 * 1024,
    ) as client:
        response, request_id = await client.send(
            TEXT_TRANSLATE,
            TextTranslateRequest(source_text="hello", source="en", target="zh"),
        )
    ```
"""

from .api import Api
from .client import Client
from .contracts import ApiErrorDetail, ResponseDetail, ResponseEnvelope
from .credentials import Credentials
from .errors import (
    ApiError,
    DecodeError,
    HttpStatusError,
    MarshalError,
    MissingPayloadError,
    ProtocolError,
    ResponseTooLargeError,
    SigningError,
    TencentCloudError,
    TransportError,
    ValidationError,
)
from .http_transport import HttpxTransport
from .retry import RetryPolicy, send_with_retry
from .signer import calculate_authorization
from .transport import BaseTransport, Transport, TransportRequest, TransportResponse

__version__ = "0.1.0"

__all__ = [
    # Client
    "Client",
    "Credentials",
    # Api
    "Api",
    # Contracts
    "ApiErrorDetail",
    "ResponseDetail",
    "ResponseEnvelope",
    # Errors
    "TencentCloudError",
    "ValidationError",
    "MarshalError",
    "DecodeError",
    "SigningError",
    "TransportError",
    "HttpStatusError",
    "ResponseTooLargeError",
    "ProtocolError",
    "MissingPayloadError",
    "ApiError",
    # Transport
    "Transport",
    "BaseTransport",
    "TransportRequest",
    "TransportResponse",
    "HttpxTransport",
    # Signing
    "calculate_authorization",
    # Retry
    "RetryPolicy",
    "send_with_retry",
]
