"""
TC3-HMAC-SHA256 request signing.

Computes the ``Authorization`` header for a JSON ``POST /`` request. Every
piece of the canonical form below is fixed; the remote verifier rebuilds the
same strings byte for byte.
"""

import hmac
import logging
from datetime import datetime, timezone
from hashlib import sha256

from .errors import SigningError

logger = logging.getLogger(__name__)

ALGORITHM = "TC3-HMAC-SHA256"
CANONICAL_URI = "/"
CANONICAL_QUERY_STRING = ""
SIGNED_HEADERS = "content-type;host"
CONTENT_TYPE = "application/json; charset=utf-8"
REQUEST_TYPE = "tc3_request"
DATE_FORMAT = "%Y-%m-%d"


def hash_payload(payload: bytes) -> str:
    """Lowercase hex SHA-256 of the request body."""
    return sha256(payload).hexdigest()


def unix_timestamp(timestamp: datetime) -> int:
    """Whole seconds since the epoch. Naive datetimes are taken as UTC."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return int(timestamp.timestamp())


def signing_date(timestamp: datetime) -> str:
    """UTC calendar date of ``timestamp`` as ``YYYY-MM-DD``."""
    utc = datetime.fromtimestamp(unix_timestamp(timestamp), tz=timezone.utc)
    return utc.strftime(DATE_FORMAT)


def canonical_headers(host: str) -> str:
    return f"content-type:{CONTENT_TYPE}\nhost:{host}\n"


def canonical_request(*, host: str, payload: bytes) -> str:
    return (
        "POST\n"
        f"{CANONICAL_URI}\n"
        f"{CANONICAL_QUERY_STRING}\n"
        f"{canonical_headers(host)}\n"
        f"{SIGNED_HEADERS}\n"
        f"{hash_payload(payload)}"
    )


def credential_scope(*, date: str, service: str) -> str:
    # Scope format: <YYYY-MM-DD>/<service>/tc3_request
    return f"{date}/{service}/{REQUEST_TYPE}"


def string_to_sign(*, timestamp: int, scope: str, canonical_request: str) -> str:
    hashed_canonical_request = sha256(canonical_request.encode("utf-8")).hexdigest()
    return f"{ALGORITHM}\n{timestamp}\n{scope}\n{hashed_canonical_request}"


def _hmac_sha256(key: bytes, message: str) -> bytes:
    return hmac.new(key=key, msg=message.encode("utf-8"), digestmod=sha256).digest()


def signature(*, secret_key: str, date: str, service: str, string_to_sign: str) -> str:
    """Sign the string to sign.

    The signing key is scoped to a date and a service. Each step feeds the raw
    digest of the previous one forward as the next key.

    SecretDate    = HMAC-SHA256("TC3" + <SecretKey>, <YYYY-MM-DD>)
    SecretService = HMAC-SHA256(SecretDate, <service>)
    SecretSigning = HMAC-SHA256(SecretService, "tc3_request")
    Signature     = hex(HMAC-SHA256(SecretSigning, <StringToSign>))
    """
    secret_date = _hmac_sha256(f"TC3{secret_key}".encode("utf-8"), date)
    secret_service = _hmac_sha256(secret_date, service)
    secret_signing = _hmac_sha256(secret_service, REQUEST_TYPE)
    return _hmac_sha256(secret_signing, string_to_sign).hex()


def calculate_authorization(
    *,
    secret_id: str,
    secret_key: str,
    service: str,
    host: str,
    payload: bytes,
    timestamp: datetime,
) -> str:
    """
    Build the ``Authorization`` header value for one request.

    Args:
        secret_id: Credential id, sent in clear inside the header
        secret_key: Credential secret, only used as HMAC key material
        service: Service name, e.g. ``tmt``
        host: Service host, e.g. ``tmt.tencentcloudapi.com``
        payload: Exact request body bytes (may be empty)
        timestamp: Request time; must match the ``X-TC-Timestamp`` header

    Returns:
        ``TC3-HMAC-SHA256 Credential=...,SignedHeaders=...,Signature=...``

    Raises:
        SigningError: Empty input or the HMAC chain could not be computed
    """
    for name, value in (
        ("secret_id", secret_id),
        ("secret_key", secret_key),
        ("service", service),
        ("host", host),
    ):
        if not value:
            raise SigningError(f"{name} must not be empty", details={"field": name})

    try:
        date = signing_date(timestamp)
        scope = credential_scope(date=date, service=service)
        to_sign = string_to_sign(
            timestamp=unix_timestamp(timestamp),
            scope=scope,
            canonical_request=canonical_request(host=host, payload=payload),
        )
        sig = signature(
            secret_key=secret_key,
            date=date,
            service=service,
            string_to_sign=to_sign,
        )
    except (TypeError, ValueError, OverflowError, OSError) as e:
        # UnicodeEncodeError is a ValueError; OverflowError/OSError come from
        # out-of-range timestamps
        raise SigningError(
            f"Failed to sign request: {e}",
            details={"secretId": secret_id, "service": service, "host": host},
        ) from e

    logger.debug(f"Signed request: secret_id={secret_id}, scope={scope}")

    return (
        f"{ALGORITHM} Credential={secret_id}/{scope},"
        f"SignedHeaders={SIGNED_HEADERS},Signature={sig}"
    )
