"""
Tencent Cloud SDK Errors

Typed exceptions for error handling.
"""

from typing import Any, Dict, Optional


class TencentCloudError(Exception):
    """Base exception for all Tencent Cloud SDK errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or "UNKNOWN_ERROR"
        self.details = details or {}


class ValidationError(TencentCloudError):
    """Client configuration or api descriptor is invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class MarshalError(TencentCloudError):
    """Request could not be serialized to JSON."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="MARSHAL_ERROR", details=details)


class DecodeError(TencentCloudError):
    """Response body could not be decoded."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="DECODE_ERROR", details=details)


class SigningError(TencentCloudError):
    """Authorization header could not be computed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="SIGNING_ERROR", details=details)


class TransportError(TencentCloudError):
    """Network-related error (connection, TLS, timeout, etc.)."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        code: str = "TRANSPORT_ERROR",
    ) -> None:
        super().__init__(message, code=code, details=details)


class HttpStatusError(TransportError):
    """Server answered with a status other than 200 OK."""

    def __init__(
        self, status_code: int, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            f"Status code is not OK ({status_code}): {message}",
            details={**(details or {}), "statusCode": status_code},
            code="HTTP_STATUS_ERROR",
        )
        self.status_code = status_code


class ResponseTooLargeError(TransportError):
    """Response body exceeded the configured size limit."""

    def __init__(self, limit: int, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            f"Response body exceeds size limit of {limit} bytes",
            details={**(details or {}), "limit": limit},
            code="RESPONSE_TOO_LARGE",
        )
        self.limit = limit


class ProtocolError(TencentCloudError):
    """Well-formed response envelope that breaks the API protocol."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        code: str = "PROTOCOL_ERROR",
    ) -> None:
        super().__init__(message, code=code, details=details)


class MissingPayloadError(ProtocolError):
    """Envelope carries neither a response payload nor an error."""

    def __init__(self, request_id: str) -> None:
        super().__init__(
            f"Missing response payload, request id: {request_id}",
            details={"requestId": request_id},
            code="MISSING_PAYLOAD",
        )
        self.request_id = request_id


class ApiError(TencentCloudError):
    """Error reported by the remote service inside the response envelope."""

    def __init__(self, code: str, message: str, request_id: str) -> None:
        super().__init__(
            f"code: {code}, message: {message}, request id: {request_id}",
            code=code,
            details={"requestId": request_id},
        )
        # vendor values as sent, even when empty
        self.code = code
        self.message = message
        self.request_id = request_id
