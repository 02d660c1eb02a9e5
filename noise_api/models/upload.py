from pydantic import BaseModel, Field # type: ignore
from typing import List
from pathlib import Path
import mimetypes
import time

from .classification import ClassificationResult, TopPrediction

class AudioFile(BaseModel):
    """A selected recording, the server-side stand-in for a browser File."""
    name: str
    size: int
    type: str = ""
    last_modified: int = Field(default_factory=lambda: int(time.time() * 1000))
    content: bytes = Field(default=b"", repr=False)

    @classmethod
    def from_path(cls, path) -> "AudioFile":
        path = Path(path)
        content = path.read_bytes()
        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            size=len(content),
            type=mime_type or "",
            last_modified=int(path.stat().st_mtime * 1000),
            content=content
        )

class UploadedFileInfo(BaseModel):
    name: str
    size: int
    type: str
    last_modified: int
    location: str
    upload_time: str
    classification: List[ClassificationResult] = Field(default_factory=list)
    top_prediction: TopPrediction = Field(default_factory=TopPrediction)

class UploadResponse(BaseModel):
    message: str
