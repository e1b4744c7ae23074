"""
WhatsApp media handler.

Based on WhatsApp Cloud API endpoints:
- POST /PHONE_NUMBER_ID/media (upload)
- GET /MEDIA_ID (get info/URL)
- DELETE /MEDIA_ID (delete)
- GET /MEDIA_URL (download)

Retrieval is a two-step compose: resolve the signed URL, then download it
with the same credentials. The steps run sequentially and are not atomic.
"""

import posixpath
from urllib.parse import urlparse

from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import (
    BinarySource,
    WhatsAppClient,
)
from wacloud.messaging.whatsapp.models.media_models import (
    MediaDeleteResponse,
    MediaFile,
    MediaUploadRequest,
    MediaUploadResponse,
    MediaUrlResponse,
)
from wacloud.messaging.whatsapp.utils.validation import validate_response


class WhatsAppMediaHandler:
    """Uploads, resolves, downloads and deletes WhatsApp media."""

    def __init__(self, client: WhatsAppClient):
        """Initialize media handler.

        Args:
            client: Shared WhatsApp client for API operations
        """
        self.client = client
        self.logger = get_logger(__name__)

    @property
    def tenant_id(self) -> str:
        """Get the tenant ID this handler serves."""
        return self.client.tenant_id

    async def upload(
        self,
        file: BinarySource,
        mime_type: str,
        filename: str | None = None,
    ) -> MediaUploadResponse:
        """
        Upload media to WhatsApp servers.

        Args:
            file: Raw bytes, a binary file object, or a pathlib.Path
            mime_type: MIME type of the file (e.g. "image/jpeg")
            filename: Optional filename, derived from the source when omitted

        Returns:
            MediaUploadResponse with the media ID

        Raises:
            pydantic.ValidationError: If the MIME type or filename is invalid
            TypeError: If the source is not a supported binary source
        """
        request = MediaUploadRequest(mime_type=mime_type, filename=filename)
        form = self.client.form_builder.build_upload_form(
            request.mime_type, file, request.filename
        )

        self.logger.debug(f"Uploading media of type {request.mime_type}")
        response = await self.client.request(
            self.client.url_builder.media_path(), method="POST", body=form
        )
        result = validate_response(MediaUploadResponse, response)

        self.logger.info(f"Media uploaded successfully: {result.id}")
        return result

    async def upload_from_url(
        self,
        url: str,
        mime_type: str,
        filename: str | None = None,
    ) -> MediaUploadResponse:
        """Fetch a public file and upload its content.

        The filename defaults to the last segment of the URL path.
        """
        request = MediaUploadRequest(mime_type=mime_type, filename=filename)
        content = await self.client.fetch(url)
        name = request.filename or posixpath.basename(urlparse(url).path) or None
        return await self.upload(content, request.mime_type, name)

    async def get_url(self, media_id: str) -> MediaUrlResponse:
        """Resolve a media ID to its signed download URL and metadata."""
        response = await self.client.request(
            self.client.url_builder.media_path(media_id)
        )
        result = validate_response(MediaUrlResponse, response)

        self.logger.debug(
            f"Media info retrieved for {media_id}: {result.mime_type}, {result.file_size} bytes"
        )
        return result

    async def download(self, url: str) -> bytes:
        """Download content from a signed media URL."""
        return await self.client.download(url)

    async def get(self, media_id: str) -> MediaFile:
        """Resolve a media ID and download it in one call."""
        info = await self.get_url(media_id)
        content = await self.download(info.url)
        return MediaFile.model_validate({**info.model_dump(), "content": content})

    async def delete(self, media_id: str) -> MediaDeleteResponse:
        """Delete uploaded media."""
        response = await self.client.request(
            self.client.url_builder.media_path(media_id), method="DELETE"
        )
        result = validate_response(MediaDeleteResponse, response)

        self.logger.info(f"Media deleted: {media_id}")
        return result
