"""
Shared response models for WhatsApp Cloud API operations.

Envelopes that several endpoints return (message sends, plain success flags,
cursor paging) plus the Graph API error envelope the transport classifies
failures with.
"""

from typing import Annotated, Literal

from pydantic import AfterValidator, AnyHttpUrl, BaseModel, ConfigDict, Field, TypeAdapter

_http_url = TypeAdapter(AnyHttpUrl)


def _check_http_url(v: str) -> str:
    _http_url.validate_python(v)
    return v


# Validated as an absolute http(s) URL but kept as the exact string given
HttpUrlStr = Annotated[str, AfterValidator(_check_http_url)]


class ResponseModel(BaseModel):
    """Base for response models: unknown keys are kept, never dropped."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class RequestModel(BaseModel):
    """Base for request payload models: unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class ContactInfo(ResponseModel):
    """Recipient echo in a send response."""

    input: str = Field(..., description="Phone number as given in the request")
    wa_id: str = Field(..., description="WhatsApp ID of the recipient")


class MessageId(ResponseModel):
    """Identifier of an accepted message."""

    id: str = Field(..., description="WhatsApp message ID (wamid.*)")
    message_status: str | None = Field(
        None, description="Pacing status, e.g. 'accepted' or 'held_for_quality_assessment'"
    )


class SendMessageResponse(ResponseModel):
    """Response returned by POST /{phone_number_id}/messages."""

    messaging_product: Literal["whatsapp"] | None = None
    contacts: list[ContactInfo] | None = None
    messages: list[MessageId] | None = None

    @property
    def message_id(self) -> str | None:
        """ID of the first accepted message, if any."""
        return self.messages[0].id if self.messages else None


class SuccessResponse(ResponseModel):
    """Plain ``{"success": bool}`` response."""

    success: bool


class PagingCursors(ResponseModel):
    before: str | None = None
    after: str | None = None


class Paging(ResponseModel):
    """Graph API cursor paging block."""

    cursors: PagingCursors | None = None
    next: str | None = None
    previous: str | None = None


class ApiErrorDetail(ResponseModel):
    """Inner object of the Graph API error envelope."""

    message: str
    type: str
    code: int
    error_subcode: int | None = None
    fbtrace_id: str


class ApiErrorEnvelope(ResponseModel):
    """``{"error": {...}}`` body returned with non-2xx statuses."""

    error: ApiErrorDetail
