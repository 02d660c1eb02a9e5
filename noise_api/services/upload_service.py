import asyncio
import requests
import logging
from typing import Optional
from ..core.config import settings
from ..core.errors import UploadError
from ..models import AudioFile, UploadResponse

logger = logging.getLogger(__name__)

class UploadService:
    """Posts a recording and its location to the server's /upload route"""

    def __init__(
        self,
        server_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        self.server_url = (server_url or settings.UPLOAD_SERVER_URL).rstrip("/")
        self.timeout = timeout or settings.UPLOAD_TIMEOUT_SECONDS
        self.session = session or requests.Session()

    @property
    def upload_url(self) -> str:
        return f"{self.server_url}/upload"

    def upload(self, file: AudioFile, location: str) -> UploadResponse:
        try:
            response = self.session.post(
                self.upload_url,
                files={"file": (file.name, file.content, file.type or "audio/mpeg")},
                data={"location": location},
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.error(f"Upload rejected: {str(e)}")
            raise UploadError(
                f"Upload failed: {e.response.status_code} - {e.response.reason}",
                status_code=e.response.status_code,
                cause=e
            )
        except requests.RequestException as e:
            logger.error(f"Upload request failed: {str(e)}")
            raise UploadError(f"Upload failed: {str(e)}", cause=e)

        logger.info(f"Uploaded {file.name} for location '{location}'")
        return self._parse_response(response)

    @staticmethod
    def _parse_response(response: requests.Response) -> UploadResponse:
        """Any 2xx counts as uploaded, whatever the body looks like."""
        try:
            return UploadResponse.model_validate(response.json())
        except ValueError:
            logger.debug(f"Upload reply was not an upload message: {response.text!r}")
            return UploadResponse(message=response.text or "File uploaded successfully")

    async def __call__(self, file: AudioFile, location: str) -> UploadResponse:
        """Awaitable form, usable directly as an upload callback."""
        return await asyncio.to_thread(self.upload, file, location)
