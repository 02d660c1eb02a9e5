import pytest

from noise_api.core.errors import ModelLoadingError
from noise_api.models import AudioFile

from tests.helpers import FakeInferenceService


@pytest.fixture
def mp3_file() -> AudioFile:
    return AudioFile(name="street.mp3", size=4, type="audio/mpeg", last_modified=1700000000000, content=b"ID3\x03")


@pytest.fixture
def loading_service() -> FakeInferenceService:
    return FakeInferenceService(exc=ModelLoadingError())
