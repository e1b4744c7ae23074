"""
Schema validation helpers for outbound payloads and inbound responses.

Payload models validate on construction, so a bad payload raises
``pydantic.ValidationError`` before anything is serialized. Responses go
through ``validate_response`` after the call and before they are returned.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from wacloud.messaging.whatsapp.utils.errors import WhatsAppResponseValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_response(model: type[ModelT], data: Any) -> ModelT:
    """Validate a raw JSON response against its response model.

    Args:
        model: Pydantic model declared for the operation's response
        data: Parsed JSON body returned by the transport

    Returns:
        Validated model instance

    Raises:
        WhatsAppResponseValidationError: If the body does not match the model
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise WhatsAppResponseValidationError(
            model.__name__, e.errors(include_url=False), data
        ) from e


def dump_payload(payload: BaseModel) -> dict[str, Any]:
    """Serialize a validated payload model to a JSON-ready dict."""
    return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
