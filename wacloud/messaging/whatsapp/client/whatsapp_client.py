"""
WhatsApp Cloud API transport.

Key Design Decisions:
- One request primitive that every resource handler goes through
- URL is always {base_url}/{version}/{path}, no normalization
- Bearer auth on every call; JSON content type only for JSON bodies
- Exactly one HTTP call per invocation, no retries, no timeouts
- Non-2xx bodies are classified as API errors or transport failures
"""

import json
import os
from pathlib import Path
from typing import Any, BinaryIO, Literal, get_args
from urllib.parse import urlencode

import aiohttp
from pydantic import ValidationError

from wacloud.core.logging.logger import ContextLogger, get_logger
from wacloud.messaging.whatsapp.client.config import WhatsAppConfig
from wacloud.messaging.whatsapp.models.basic_models import ApiErrorEnvelope
from wacloud.messaging.whatsapp.utils.error_helpers import log_whatsapp_error
from wacloud.messaging.whatsapp.utils.errors import (
    WhatsAppApiError,
    WhatsAppTransportError,
)

HttpMethod = Literal["GET", "POST", "DELETE", "PUT", "PATCH"]
HTTP_METHODS = frozenset(get_args(HttpMethod))

BinarySource = bytes | bytearray | memoryview | BinaryIO | Path
RequestBody = dict[str, Any] | list[Any] | aiohttp.FormData


class WhatsAppUrlBuilder:
    """Builds URLs and resource paths for Graph API endpoints."""

    def __init__(self, config: WhatsAppConfig):
        """Initialize URL builder with configuration.

        Args:
            config: Client configuration holding base URL, version and phone ID
        """
        self.base_url = config.base_url
        self.api_version = config.version
        self.phone_number_id = config.phone_number_id

    def build_url(self, path: str) -> str:
        """Build the absolute URL for a resource path."""
        return f"{self.base_url}/{self.api_version}/{path}"

    def messages_path(self) -> str:
        """Path for sending messages."""
        return f"{self.phone_number_id}/messages"

    def media_path(self, media_id: str | None = None) -> str:
        """Path for media operations.

        Args:
            media_id: Optional media ID for specific media operations

        Returns:
            ``{media_id}`` when given, otherwise the phone number's upload path
        """
        if media_id:
            return media_id
        return f"{self.phone_number_id}/media"

    @staticmethod
    def with_query(path: str, params: dict[str, Any]) -> str:
        """Append URL-encoded query parameters, skipping ``None`` values.

        Commas stay literal so comma-joined field lists remain readable.
        """
        query = urlencode(
            {key: value for key, value in params.items() if value is not None},
            safe=",",
        )
        return f"{path}?{query}" if query else path


class WhatsAppFormDataBuilder:
    """Builds multipart form data for WhatsApp media uploads."""

    @staticmethod
    def read_binary_source(
        file: BinarySource, filename: str | None = None
    ) -> tuple[bytes, str]:
        """Normalize a binary source into ``(content, filename)``.

        Args:
            file: Raw bytes, a binary file-like object, or a Path on disk
            filename: Explicit filename overriding the derived one

        Returns:
            File content and the filename to send

        Raises:
            TypeError: If the source is not one of the supported kinds
        """
        if isinstance(file, (bytes, bytearray, memoryview)):
            return bytes(file), filename or "file"

        if isinstance(file, Path):
            return file.read_bytes(), filename or file.name

        if hasattr(file, "read"):
            content = file.read()
            if not isinstance(content, (bytes, bytearray)):
                raise TypeError("File-like sources must be opened in binary mode")
            name = getattr(file, "name", None)
            default_name = os.path.basename(name) if isinstance(name, str) else ""
            return bytes(content), filename or default_name or "file"

        raise TypeError(
            f"Unsupported media source {type(file).__name__}; expected bytes, "
            f"a binary file object or a pathlib.Path"
        )

    def build_upload_form(
        self, mime_type: str, file: BinarySource, filename: str | None = None
    ) -> aiohttp.FormData:
        """Build the upload form with fields in the order WhatsApp expects.

        Args:
            mime_type: MIME type of the file, also sent as the ``type`` field
            file: Binary source to upload
            filename: Optional filename

        Returns:
            aiohttp.FormData with ``messaging_product``, ``type`` and ``file``
        """
        content, name = self.read_binary_source(file, filename)

        form = aiohttp.FormData()
        # Data fields first (important for WhatsApp API)
        form.add_field("messaging_product", "whatsapp")
        form.add_field("type", mime_type)
        form.add_field("file", content, filename=name, content_type=mime_type)
        return form


class WhatsAppClient:
    """
    Authenticated transport shared by every resource handler.

    Key Design Decisions:
    - phone_number_id IS the tenant_id used as logging context
    - An injected session is used as-is and never closed by the client
    - Without an injected session, one is created lazily and owned
    """

    def __init__(
        self,
        config: WhatsAppConfig,
        session: aiohttp.ClientSession | None = None,
        logger: ContextLogger | None = None,
    ):
        """Initialize WhatsApp client.

        Args:
            config: Validated client configuration
            session: Optional aiohttp session (e.g. managed by a FastAPI lifespan)
            logger: Pre-configured logger instance
        """
        self.config = config
        self._session = session
        self._owns_session = session is None
        self.logger = logger or get_logger(__name__).bind(
            tenant_id=config.phone_number_id
        )

        self.url_builder = WhatsAppUrlBuilder(config)
        self.form_builder = WhatsAppFormDataBuilder()

        self.logger.debug(
            f"WhatsApp client initialized for phone_id: {config.phone_number_id}, "
            f"api_version: {config.version}"
        )

    @property
    def tenant_id(self) -> str:
        """Get tenant ID (which is the phone_number_id)."""
        return self.config.phone_number_id

    @property
    def session(self) -> aiohttp.ClientSession:
        """HTTP session, created on first use when none was injected."""
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    def build_url(self, path: str) -> str:
        """Build the absolute URL for a resource path."""
        return self.url_builder.build_url(path)

    def _get_headers(
        self,
        extra: dict[str, str] | None = None,
        include_content_type: bool = False,
    ) -> dict[str, str]:
        """Get HTTP headers for a Graph API request.

        Args:
            extra: Caller-supplied headers; they cannot replace Authorization
            include_content_type: Whether to add the JSON Content-Type header

        Returns:
            Dictionary of HTTP headers
        """
        headers = {
            key: value
            for key, value in (extra or {}).items()
            if key.lower() != "authorization"
        }
        headers["Authorization"] = f"Bearer {self.config.access_token}"
        if include_content_type:
            headers["Content-Type"] = "application/json"
        return headers

    async def request(
        self,
        path: str,
        method: HttpMethod = "GET",
        headers: dict[str, str] | None = None,
        body: RequestBody | None = None,
    ) -> Any:
        """Send an authenticated request to ``{base_url}/{version}/{path}``.

        Args:
            path: Resource path relative to the API version
            method: HTTP method, GET when omitted
            headers: Extra headers merged under the Authorization header
            body: JSON-serializable payload or aiohttp.FormData for uploads

        Returns:
            Parsed JSON body of a 2xx response, unvalidated

        Raises:
            WhatsAppApiError: Non-2xx with the Graph API error envelope
            WhatsAppTransportError: Connectivity failure, non-JSON body, or
                non-2xx without a recognizable error envelope
        """
        return await self.request_url(
            self.build_url(path), method=method, headers=headers, body=body
        )

    async def request_url(
        self,
        url: str,
        method: HttpMethod = "GET",
        headers: dict[str, str] | None = None,
        body: RequestBody | None = None,
    ) -> Any:
        """Send an authenticated request to an absolute URL.

        Same pipeline as :meth:`request` for callers that build their own URL.
        """
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(
                f"Unsupported HTTP method '{method}'. Expected one of {sorted(HTTP_METHODS)}"
            )

        is_form = isinstance(body, aiohttp.FormData)
        request_headers = self._get_headers(
            headers, include_content_type=body is not None and not is_form
        )
        if body is None or is_form:
            data = body
        else:
            data = json.dumps(body)

        operation = f"{method} {url}"
        if is_form:
            self.logger.debug(f"Sending multipart request: {operation}")
        else:
            self.logger.debug(f"Sending request: {operation}")
            if data is not None:
                self.logger.debug(f"Payload: {data}")

        try:
            async with self.session.request(
                method, url, headers=request_headers, data=data
            ) as response:
                status = response.status
                raw_body = await response.text()
        except aiohttp.ClientError as e:
            error = WhatsAppTransportError(f"{operation} failed: {e}")
            log_whatsapp_error(error, operation, self.logger)
            raise error from e

        return self._handle_response(operation, status, raw_body)

    def _handle_response(self, operation: str, status: int, raw_body: str) -> Any:
        """Parse a response body and classify non-2xx statuses."""
        try:
            data = json.loads(raw_body)
        except ValueError as e:
            error = WhatsAppTransportError(
                f"{operation} returned a non-JSON body with status {status}",
                status=status,
                body=raw_body,
            )
            log_whatsapp_error(error, operation, self.logger)
            raise error from e

        if 200 <= status < 300:
            self.logger.debug(f"{operation} returned {status}: {data}")
            return data

        try:
            envelope = ApiErrorEnvelope.model_validate(data)
        except ValidationError:
            error = WhatsAppTransportError(
                f"API request failed with status {status}: {raw_body}",
                status=status,
                body=raw_body,
            )
            log_whatsapp_error(error, operation, self.logger)
            raise error from None

        detail = envelope.error
        error = WhatsAppApiError(
            code=detail.code,
            message=detail.message,
            type=detail.type,
            subcode=detail.error_subcode,
            fbtrace_id=detail.fbtrace_id,
            status=status,
        )
        log_whatsapp_error(
            error, operation, self.logger, access_token=self.config.access_token
        )
        raise error

    async def download(self, url: str) -> bytes:
        """Download binary content from a signed media URL.

        The URL comes from a media lookup and needs the same bearer token.

        Raises:
            WhatsAppTransportError: On connectivity failure or non-2xx status
        """
        return await self._get_bytes(url, self._get_headers(), "download media")

    async def fetch(self, url: str) -> bytes:
        """Fetch binary content from a public URL without authentication."""
        return await self._get_bytes(url, None, "fetch media from URL")

    async def _get_bytes(
        self, url: str, headers: dict[str, str] | None, action: str
    ) -> bytes:
        self.logger.debug(f"Starting to {action}: {url}")
        try:
            async with self.session.request("GET", url, headers=headers) as response:
                status = response.status
                reason = response.reason
                content = await response.read()
        except aiohttp.ClientError as e:
            error = WhatsAppTransportError(f"Failed to {action}: {e}")
            log_whatsapp_error(error, f"GET {url}", self.logger)
            raise error from e

        if not 200 <= status < 300:
            error = WhatsAppTransportError(
                f"Failed to {action}: {status} {reason or ''}".rstrip(),
                status=status,
                body=content,
            )
            log_whatsapp_error(error, f"GET {url}", self.logger)
            raise error

        self.logger.debug(f"Finished to {action}: {len(content)} bytes")
        return content

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None if self._owns_session else self._session

    async def __aenter__(self) -> "WhatsAppClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
