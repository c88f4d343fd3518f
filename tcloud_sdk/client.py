"""
Tencent Cloud SDK Client

Main entry point for calling Tencent Cloud APIs.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from .api import Api, RequestT, ResponseT
from .contracts import ResponseEnvelope
from .credentials import Credentials
from .errors import (
    ApiError,
    DecodeError,
    HttpStatusError,
    MarshalError,
    MissingPayloadError,
    ValidationError,
)
from .http_transport import HttpxTransport
from .signer import CONTENT_TYPE, calculate_authorization, unix_timestamp
from .transport import Transport, TransportRequest, TransportResponse

logger = logging.getLogger(__name__)


class Client:
    """
    Tencent Cloud API client.

    Sends one signed request per call:
    marshal -> sign -> dispatch -> decode -> classify.
    Nothing is retried; see ``tcloud_sdk.retry`` for an opt-in policy.

    Example:
        ```python
        from tcloud_sdk import Client, Credentials
        from tcloud_sdk.apis.tmt import TEXT_TRANSLATE, TextTranslateRequest

        async with Client(
            region="ap-guangzhou",
            credentials=Credentials(secret_id="AKID...", secret_key="..."),
        ) as client:
            response, request_id = await client.send(
                TEXT_TRANSLATE,
                TextTranslateRequest(
                    source_text="hello",
                    source="en",
                    target="zh",
                    project_id=0,
                ),
            )
            print(response.target_text)
        ```
    """

    def __init__(
        self,
        region: str,
        credentials: Credentials,
        response_size_limit: Optional[int] = None,
        timeout: float = 30.0,
        transport: Optional[Transport] = None,
    ) -> None:
        """
        Initialize client.

        Args:
            region: Region sent as X-TC-Region (e.g. ap-guangzhou)
            credentials: Secret id/key pair
            response_size_limit: Optional maximum response body size in bytes
            timeout: Request timeout in seconds for the default transport (default: 30.0)
            transport: Optional custom transport implementation
        """
        if response_size_limit is not None and response_size_limit <= 0:
            raise ValidationError(
                "response_size_limit must be positive",
                details={"responseSizeLimit": response_size_limit},
            )

        self.region = region
        self.credentials = credentials
        self.response_size_limit = response_size_limit

        if transport:
            self.transport = transport
            self._own_transport = False
        else:
            self.transport = HttpxTransport(timeout=timeout)
            self._own_transport = True

    def __repr__(self) -> str:
        return f"Client(region={self.region!r}, credentials={self.credentials!r})"

    async def send(
        self,
        api: Api[RequestT, ResponseT],
        request: Union[RequestT, Mapping[str, Any]],
    ) -> Tuple[ResponseT, str]:
        """
        Send an api request.

        Args:
            api: Api descriptor (models, version, action, service, host)
            request: ``api.request_model`` instance, or a mapping validated into one

        Returns:
            Tuple of the decoded response and the request id

        Raises:
            MarshalError: Request could not be serialized
            SigningError: Authorization could not be computed
            TransportError: Connection/timeout issues
            HttpStatusError: Status code is not 200
            ResponseTooLargeError: Body exceeded response_size_limit
            DecodeError: Body is not a valid response envelope
            ApiError: Service reported an error
            MissingPayloadError: Envelope has neither payload nor error
        """
        payload = self._marshal(api, request)

        logger.debug(f"Marshal request done: action={api.action}, size={len(payload)}")

        transport_request = self._create_request(api, payload)

        logger.debug(f"Create request done: action={api.action}, url={transport_request.url}")

        response = await self.transport.send(
            transport_request, size_limit=self.response_size_limit
        )

        logger.debug(
            f"Get response done: action={api.action}, status={response.status_code}, "
            f"size={len(response.body)}"
        )

        result, request_id = self._handle_response(api, response)

        logger.info(f"Request done: action={api.action}, host={api.host}, request_id={request_id}")

        return result, request_id

    def _marshal(
        self, api: Api[RequestT, ResponseT], request: Union[RequestT, Mapping[str, Any]]
    ) -> bytes:
        try:
            if not isinstance(request, api.request_model):
                request = api.request_model.model_validate(request)
            return request.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
        except (PydanticValidationError, TypeError, ValueError) as e:
            raise MarshalError(
                f"Failed to marshal request: {e}",
                details={"action": api.action},
            ) from e

    def _create_request(self, api: Api[Any, Any], payload: bytes) -> TransportRequest:
        now = datetime.now(timezone.utc).replace(microsecond=0)
        authorization = calculate_authorization(
            secret_id=self.credentials.secret_id,
            secret_key=self.credentials.secret_key.get_secret_value(),
            service=api.service,
            host=api.host,
            payload=payload,
            timestamp=now,
        )

        return TransportRequest(
            method="POST",
            url=api.endpoint,
            headers={
                "Authorization": authorization,
                "Content-Type": CONTENT_TYPE,
                "Host": api.host,
                "X-TC-Action": api.action,
                "X-TC-Timestamp": str(unix_timestamp(now)),
                "X-TC-Version": api.version,
                "X-TC-Region": self.region,
            },
            body=payload,
        )

    def _handle_response(
        self, api: Api[RequestT, ResponseT], response: TransportResponse
    ) -> Tuple[ResponseT, str]:
        """
        Decode the envelope and map it to a typed response or an error.

        ``Error`` takes precedence over any payload fields in the same envelope.
        """
        if response.status_code != 200:
            raise HttpStatusError(
                status_code=response.status_code,
                message=response.body[:200].decode("utf-8", errors="replace"),
                details={"action": api.action, "host": api.host},
            )

        try:
            envelope = ResponseEnvelope.model_validate_json(response.body)
        except PydanticValidationError as e:
            raise DecodeError(
                f"Failed to parse response: {e}",
                details={
                    "action": api.action,
                    "body": response.body[:200].decode("utf-8", errors="replace"),
                },
            ) from e

        detail = envelope.response

        if detail.error is not None:
            logger.warning(
                f"Api error: action={api.action}, code={detail.error.code}, "
                f"request_id={detail.request_id}"
            )
            raise ApiError(
                code=detail.error.code,
                message=detail.error.message,
                request_id=detail.request_id,
            )

        fields = detail.payload_fields
        try:
            result = api.response_model.model_validate(fields)
        except PydanticValidationError as e:
            if not fields:
                raise MissingPayloadError(request_id=detail.request_id) from e
            raise DecodeError(
                f"Failed to parse response payload: {e}",
                details={"action": api.action, "requestId": detail.request_id},
            ) from e

        return result, detail.request_id

    async def close(self) -> None:
        """Close transport resources if we own them."""
        if self._own_transport:
            await self.transport.close()

    async def __aenter__(self) -> "Client":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Async context manager exit."""
        await self.close()
