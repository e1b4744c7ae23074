"""
Two-step verification models.
"""

from pydantic import Field, field_validator

from wacloud.messaging.whatsapp.models.basic_models import RequestModel, SuccessResponse


class TwoStepVerificationPin(RequestModel):
    """Body of POST /{phone_number_id} setting the two-step PIN."""

    pin: str = Field(..., description="Six-digit PIN")

    @field_validator("pin")
    @classmethod
    def validate_pin(cls, v):
        """Validate the PIN is exactly 6 digits."""
        if len(v) != 6 or not v.isdigit():
            raise ValueError("PIN must be exactly 6 digits")
        return v


class TwoStepVerificationResponse(SuccessResponse):
    pass
