"""
Exceptions raised by the WhatsApp Cloud API client.

Local request and configuration validation failures surface as
``pydantic.ValidationError`` and never reach the network. Everything that
happens after a request is issued is reported through the classes below.
"""

from typing import Any


class WhatsAppError(Exception):
    """Base exception for all wacloud client errors."""


class WhatsAppApiError(WhatsAppError):
    """Raised when the Graph API answers with its structured error envelope.

    Carries the remote error fields verbatim so callers can branch on
    ``code``/``subcode`` or log the ``fbtrace_id`` for Meta support.
    """

    def __init__(
        self,
        code: int,
        message: str,
        type: str,
        subcode: int | None = None,
        fbtrace_id: str | None = None,
        status: int | None = None,
    ):
        self.code = code
        self.message = message
        self.type = type
        self.subcode = subcode
        self.fbtrace_id = fbtrace_id
        self.status = status
        super().__init__(message)

    def __str__(self) -> str:
        subcode = f", subcode={self.subcode}" if self.subcode is not None else ""
        return (
            f"({self.type} code={self.code}{subcode}) {self.message} "
            f"[fbtrace_id={self.fbtrace_id}]"
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r}, "
            f"type={self.type!r}, subcode={self.subcode!r}, "
            f"fbtrace_id={self.fbtrace_id!r})"
        )


class WhatsAppTransportError(WhatsAppError):
    """Raised when a call fails without a recognizable API error envelope.

    Covers connectivity failures (``status`` is None), non-JSON bodies and
    non-2xx responses whose body is not the Graph API error shape.
    """

    def __init__(self, message: str, status: int | None = None, body: Any = None):
        self.message = message
        self.status = status
        self.body = body
        super().__init__(message)


class WhatsAppResponseValidationError(WhatsAppError, ValueError):
    """Raised when a 2xx response does not match its declared response model.

    Signals contract drift on the upstream side; the malformed body is kept
    on ``response`` for diagnostics and is never returned to the caller.
    """

    def __init__(self, model: str, errors: list[dict[str, Any]], response: Any):
        self.model = model
        self.errors = errors
        self.response = response
        locations = ", ".join(
            ".".join(str(part) for part in error.get("loc", ())) or "<root>"
            for error in errors
        )
        super().__init__(
            f"Response does not match {model}: {len(errors)} error(s) at {locations}"
        )


class MissingWabaIdError(WhatsAppError):
    """Raised before any network call when an operation needs a WABA ID."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"waba_id is required for {operation}; pass it to WhatsAppConfig "
            f"or directly to the call"
        )
