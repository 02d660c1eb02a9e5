import json

import requests

from noise_api.models import ClassificationResult


def make_response(status_code: int, body=None, reason: str = "") -> requests.Response:
    """Build a requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = "https://endpoint.test/"
    if body is not None:
        if isinstance(body, bytes):
            response._content = body
        else:
            response._content = json.dumps(body).encode("utf-8")
            response.headers["Content-Type"] = "application/json"
    else:
        response._content = b""
    return response


class FakeSession:
    """Records POST calls and answers with a fixed response (or raises)."""

    def __init__(self, response=None, exc: Exception = None):
        self.response = response
        self.exc = exc
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response


class FakeInferenceService:
    def __init__(self, results=None, exc: Exception = None):
        self.results = results or []
        self.exc = exc
        self.calls = 0

    def classify(self, audio_bytes: bytes):
        self.calls += 1
        if self.exc is not None:
            raise self.exc
        return [ClassificationResult(**r) for r in self.results]


class RecordingUpload:
    """Async upload callback that remembers what it was given."""

    def __init__(self, exc: Exception = None):
        self.exc = exc
        self.calls = []

    async def __call__(self, file, location):
        self.calls.append((file.name, location))
        if self.exc is not None:
            raise self.exc


SCORES = [
    {"label": "low", "score": 0.05},
    {"label": "moderate", "score": 0.15},
    {"label": "very_high", "score": 0.7},
    {"label": "high", "score": 0.1},
]
