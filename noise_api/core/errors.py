# noise_api/core/errors.py - Error types for classification and upload

import time
import uuid
from enum import Enum
from typing import Any, Dict, Optional


class ErrorType(Enum):
    """Enumeration of error types"""
    VALIDATION_ERROR = "validation_error"
    CONFIGURATION_ERROR = "configuration_error"
    INFERENCE_ERROR = "inference_error"
    MODEL_LOADING = "model_loading"
    UPLOAD_ERROR = "upload_error"


class NoiseClassifierError(Exception):
    """Base exception class for classifier errors"""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}
        self.cause = cause
        self.timestamp = time.time()
        self.error_id = f"{self.error_type.value}_{int(self.timestamp)}_{str(uuid.uuid4())[:8]}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization"""
        return {
            "error_id": self.error_id,
            "message": self.message,
            "error_type": self.error_type.value,
            "details": self.details,
            "timestamp": self.timestamp,
            "cause": str(self.cause) if self.cause else None
        }


class FileValidationError(NoiseClassifierError):
    """Selected file is not an acceptable recording"""
    def __init__(self, message: str, filename: str = None, **kwargs):
        details = kwargs.pop('details', {})
        if filename:
            details['filename'] = filename
        super().__init__(message, ErrorType.VALIDATION_ERROR, details=details, **kwargs)


class ConfigurationError(NoiseClassifierError):
    def __init__(self, message: str, setting: str = None, **kwargs):
        details = kwargs.pop('details', {})
        if setting:
            details['setting'] = setting
        super().__init__(message, ErrorType.CONFIGURATION_ERROR, details=details, **kwargs)


class InferenceError(NoiseClassifierError):
    """Error returned by (or while reaching) the inference endpoint"""
    def __init__(self, message: str, status_code: int = None, **kwargs):
        details = kwargs.pop('details', {})
        if status_code is not None:
            details['status_code'] = status_code
        error_type = kwargs.pop('error_type', ErrorType.INFERENCE_ERROR)
        super().__init__(message, error_type, details=details, **kwargs)
        self.status_code = status_code


class ModelLoadingError(InferenceError):
    """Endpoint answered 503 while scaling up from zero"""
    def __init__(self, message: str = "Model is loading, please wait a moment and try again", **kwargs):
        super().__init__(message, status_code=503, error_type=ErrorType.MODEL_LOADING, **kwargs)


class UploadError(NoiseClassifierError):
    def __init__(self, message: str, status_code: int = None, **kwargs):
        details = kwargs.pop('details', {})
        if status_code is not None:
            details['status_code'] = status_code
        super().__init__(message, ErrorType.UPLOAD_ERROR, details=details, **kwargs)
        self.status_code = status_code
