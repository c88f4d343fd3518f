"""
Tencent Cloud API response envelope.

Every action answers with::

    {"Response": {"RequestId": "...", <payload fields>}}
    {"Response": {"RequestId": "...", "Error": {"Code": "...", "Message": "..."}}}

Payload fields sit next to ``RequestId``; they are kept as model extras and
validated against the action's response model by the client.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ApiErrorDetail(BaseModel):
    """Vendor error inside the envelope."""

    code: str = Field(..., alias="Code")
    message: str = Field(..., alias="Message")

    model_config = {
        "populate_by_name": True,
    }


class ResponseDetail(BaseModel):
    """Content of the ``Response`` object."""

    request_id: str = Field(..., alias="RequestId")
    error: Optional[ApiErrorDetail] = Field(None, alias="Error")

    model_config = {
        "extra": "allow",
    }

    @property
    def payload_fields(self) -> Dict[str, Any]:
        """Everything except ``RequestId`` and ``Error``."""
        return dict(self.model_extra or {})


class ResponseEnvelope(BaseModel):
    """Outer wrapper returned by every action."""

    response: ResponseDetail = Field(..., alias="Response")

    model_config = {
        "populate_by_name": True,
    }
