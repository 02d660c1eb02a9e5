import requests
import logging
from typing import List, Optional
from pydantic import TypeAdapter, ValidationError # type: ignore
from ..core.config import settings
from ..core.errors import ConfigurationError, InferenceError, ModelLoadingError
from ..models import ClassificationResult

logger = logging.getLogger(__name__)

_results_adapter = TypeAdapter(List[ClassificationResult])

class InferenceService:
    """Client for the hosted audio-classification endpoint"""

    def __init__(
        self,
        endpoint_url: Optional[str] = None,
        api_token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        self.endpoint_url = endpoint_url or settings.INFERENCE_ENDPOINT_URL
        self.api_token = api_token if api_token is not None else settings.HF_API_TOKEN
        self.timeout = timeout or settings.INFERENCE_TIMEOUT_SECONDS
        self.session = session or requests.Session()

    def build_headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "audio/mpeg",
        }

    def classify(self, audio_bytes: bytes) -> List[ClassificationResult]:
        """Send raw MP3 bytes to the endpoint and return its label/score list."""
        if not self.api_token:
            raise ConfigurationError(
                "Hugging Face API token is not configured",
                setting="VITE_HF_API_TOKEN"
            )

        try:
            response = self.session.post(
                self.endpoint_url,
                data=audio_bytes,
                headers=self.build_headers(),
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Inference request failed: {str(e)}")
            raise InferenceError(f"Could not reach inference endpoint: {str(e)}", cause=e)

        if not response.ok:
            logger.error(
                "API Error Response: status=%s reason=%s headers=%s body=%s",
                response.status_code,
                response.reason,
                dict(response.headers),
                response.text
            )

            # Endpoint is scaling up from zero
            if response.status_code == 503:
                raise ModelLoadingError()
            raise InferenceError(
                f"Endpoint error: {response.status_code} - {response.reason}",
                status_code=response.status_code
            )

        try:
            results = _results_adapter.validate_python(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Unexpected inference response: {str(e)}")
            raise InferenceError("Unexpected response format from inference endpoint", cause=e)

        logger.info(f"Received {len(results)} classification scores")
        return results
