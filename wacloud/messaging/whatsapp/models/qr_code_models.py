"""
QR code models for the /{phone_number_id}/message_qrdls endpoints.
"""

from enum import Enum

from pydantic import Field

from wacloud.messaging.whatsapp.models.basic_models import (
    HttpUrlStr,
    RequestModel,
    ResponseModel,
    SuccessResponse,
)


class QRImageFormat(str, Enum):
    PNG = "PNG"
    SVG = "SVG"


class CreateQRCodeRequest(RequestModel):
    prefilled_message: str | None = Field(
        None, max_length=1000, description="Message pre-filled in the chat"
    )
    generate_qr_image: QRImageFormat | None = Field(
        None, description="Also generate an image in this format"
    )


class UpdateQRCodeRequest(RequestModel):
    prefilled_message: str = Field(..., max_length=1000)


class QRCodeResponse(ResponseModel):
    code: str
    prefilled_message: str | None = None
    deep_link_url: HttpUrlStr
    qr_image_url: HttpUrlStr | None = None


class QRCodeSummary(ResponseModel):
    code: str
    prefilled_message: str | None = None
    deep_link_url: HttpUrlStr


class QRCodeListResponse(ResponseModel):
    data: list[QRCodeSummary]


class QRCodeUpdateResponse(SuccessResponse):
    pass


class QRCodeDeleteResponse(SuccessResponse):
    pass
