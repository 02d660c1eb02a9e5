# Import classification models
from .classification import (
    NoiseLevel,
    ClassificationResult,
    TopPrediction,
    top_prediction
)

# Import upload models
from .upload import (
    AudioFile,
    UploadedFileInfo,
    UploadResponse
)

# Define what should be importable from this module
__all__ = [
    # Classification models
    "NoiseLevel",
    "ClassificationResult",
    "TopPrediction",
    "top_prediction",

    # Upload models
    "AudioFile",
    "UploadedFileInfo",
    "UploadResponse"
]
