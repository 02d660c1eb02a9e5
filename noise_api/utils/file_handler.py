from pathlib import Path
import logging
from ..core.config import settings
from ..core.errors import FileValidationError
from ..models import AudioFile

logger = logging.getLogger(__name__)

class FileHandler:
    @staticmethod
    def is_mp3(file: AudioFile) -> bool:
        """Accept by MIME type or by extension, either one is enough."""
        if file.type in settings.SUPPORTED_AUDIO_MIME_TYPES:
            return True
        return any(file.name.endswith(ext) for ext in settings.SUPPORTED_AUDIO_EXTENSIONS)

    @staticmethod
    def validate_file_size(file_size: int, max_size: int = None) -> bool:
        """Validate file size."""
        return file_size <= (max_size or settings.MAX_FILE_SIZE)

    @staticmethod
    def load_audio_file(path) -> AudioFile:
        """Read a recording from disk, raising FileValidationError on problems."""
        path = Path(path)
        if not path.is_file():
            raise FileValidationError(f"File not found: {path}", filename=path.name)

        if not FileHandler.validate_file_size(path.stat().st_size):
            raise FileValidationError(
                f"File size exceeds maximum limit of {settings.MAX_FILE_SIZE} bytes",
                filename=path.name
            )

        audio_file = AudioFile.from_path(path)
        logger.debug(f"Loaded {audio_file.name} ({audio_file.size} bytes, type={audio_file.type!r})")
        return audio_file
