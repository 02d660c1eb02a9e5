import asyncio
import logging
from datetime import datetime
from typing import Any, Awaitable, Callable, List, Optional
from ..core.errors import InferenceError, NoiseClassifierError
from ..models import AudioFile, ClassificationResult, UploadedFileInfo, top_prediction
from ..utils.file_handler import FileHandler
from .inference_service import InferenceService

logger = logging.getLogger(__name__)

UploadCallback = Callable[[AudioFile, str], Awaitable[Any]]

UPLOAD_TIME_FORMAT = "%m/%d/%Y, %I:%M:%S %p"

def _reason(error: Exception) -> str:
    if isinstance(error, NoiseClassifierError):
        return error.message
    return str(error) or "Unknown error"

class FileUploadForm:
    """
    Headless upload form: holds the selected recording, the location text,
    the latest classification and the history of submitted files.

    Handlers mirror the user actions (select, drop, remove, submit). Errors
    are surfaced through ``error`` as plain strings instead of being raised.
    """

    def __init__(self, inference_service: Optional[InferenceService] = None):
        self.inference_service = inference_service or InferenceService()

        self.file: Optional[AudioFile] = None
        self.location: str = ""
        self.is_uploading = False
        self.is_classifying = False
        self.error: Optional[str] = None
        self.drag_active = False
        self.uploaded_files: List[UploadedFileInfo] = []
        self.classification_result: Optional[List[ClassificationResult]] = None

    # ============= Selection =============

    def select_file(self, file: AudioFile) -> bool:
        """Accept an MP3 recording; anything else leaves an error and the old file."""
        if FileHandler.is_mp3(file):
            self.file = file
            self.error = None
            self.classification_result = None
            return True

        logger.info(f"Rejected non-MP3 file: {file.name} ({file.type or 'unknown type'})")
        self.error = "Please upload an MP3 file"
        return False

    def drag_enter(self):
        self.drag_active = True

    def drag_over(self):
        self.drag_active = True

    def drag_leave(self):
        self.drag_active = False

    def drop_file(self, file: AudioFile) -> bool:
        self.drag_active = False
        return self.select_file(file)

    def remove_file(self):
        self.file = None
        self.classification_result = None

    def set_location(self, location: str):
        self.location = location

    @property
    def can_submit(self) -> bool:
        return (
            self.file is not None
            and bool(self.location.strip())
            and not self.is_uploading
            and not self.is_classifying
        )

    # ============= Classification =============

    async def classify_audio(self, audio_file: AudioFile) -> List[ClassificationResult]:
        self.is_classifying = True
        self.classification_result = None

        try:
            result = await asyncio.to_thread(self.inference_service.classify, audio_file.content)
            self.classification_result = result
            return result
        except Exception as e:
            logger.error(f"Classification error: {_reason(e)}")
            raise InferenceError(f"Classification failed: {_reason(e)}", cause=e) from e
        finally:
            self.is_classifying = False

    # ============= Submission =============

    async def submit(self, on_upload: UploadCallback) -> Optional[UploadedFileInfo]:
        """
        Classify the selected file, hand it to ``on_upload`` and record it.

        A classification failure is reported through ``error`` but does not
        stop the upload. Returns the new history entry, or None when the
        form was invalid or the upload failed.
        """
        if self.file is None:
            self.error = "Please select a file to upload"
            return None

        if not self.location.strip():
            self.error = "Please enter a location"
            return None

        file = self.file
        location = self.location

        try:
            self.is_uploading = True
            self.error = None

            classification: List[ClassificationResult] = []
            top = top_prediction([])

            try:
                classification = await self.classify_audio(file)
                top = top_prediction(classification)
            except NoiseClassifierError as e:
                logger.error(f"Classification failed: {e.message}")
                self.error = f"Audio classification failed: {e.message}"
                # Upload still goes ahead

            await on_upload(file, location)

            file_info = UploadedFileInfo(
                name=file.name,
                size=file.size,
                type=file.type,
                last_modified=file.last_modified,
                location=location,
                upload_time=datetime.now().strftime(UPLOAD_TIME_FORMAT),
                classification=classification,
                top_prediction=top
            )
            self.uploaded_files.insert(0, file_info)

            # Reset form
            self.file = None
            self.location = ""
            self.classification_result = None

            logger.info(
                f"Recorded {file_info.name} at '{location}' as "
                f"{top.label} ({top.confidence:.1%})"
            )
            return file_info

        except Exception as e:
            logger.error(f"Upload failed: {_reason(e)}")
            self.error = str(e) or "Failed to upload file"
            return None
        finally:
            self.is_uploading = False
