"""
Media models for WhatsApp media operations.

Responses of the upload, URL lookup and delete endpoints, plus MediaFile,
the combined result of a lookup followed by a download.
"""

from typing import Literal

from pydantic import Field

from wacloud.messaging.whatsapp.models.basic_models import (
    HttpUrlStr,
    RequestModel,
    ResponseModel,
    SuccessResponse,
)


class MediaUploadRequest(RequestModel):
    """Upload parameters validated before the multipart form is built."""

    mime_type: str = Field(
        ..., pattern=r"^[\w.+-]+/[\w.+-]+$", description="MIME type of the file"
    )
    filename: str | None = Field(None, min_length=1, description="Filename to send")


class MediaUploadResponse(ResponseModel):
    """Response of POST /{phone_number_id}/media."""

    id: str = Field(..., description="Media ID usable in messages")


class MediaUrlResponse(ResponseModel):
    """Response of GET /{media_id}."""

    messaging_product: Literal["whatsapp"]
    url: HttpUrlStr = Field(..., description="Signed download URL (short lived)")
    mime_type: str
    sha256: str
    file_size: int
    id: str


class MediaDeleteResponse(SuccessResponse):
    pass


class MediaFile(MediaUrlResponse):
    """Media metadata merged with the downloaded content."""

    content: bytes = Field(..., repr=False, description="Downloaded file content")
