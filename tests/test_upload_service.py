import asyncio

import pytest
import requests

from noise_api.core.errors import UploadError
from noise_api.services.upload_service import UploadService

from tests.helpers import FakeSession, make_response


def test_upload_posts_file_and_location(mp3_file):
    session = FakeSession(make_response(201, {"message": "File uploaded successfully"}, reason="Created"))
    service = UploadService(server_url="http://server.test/", timeout=3, session=session)

    result = service.upload(mp3_file, "Downtown Park")

    assert result.message == "File uploaded successfully"
    call = session.calls[0]
    assert call["url"] == "http://server.test/upload"
    assert call["files"] == {"file": ("street.mp3", b"ID3\x03", "audio/mpeg")}
    assert call["data"] == {"location": "Downtown Park"}


def test_upload_is_awaitable(mp3_file):
    session = FakeSession(make_response(201, {"message": "File uploaded successfully"}, reason="Created"))
    service = UploadService(server_url="http://server.test", session=session)

    result = asyncio.run(service(mp3_file, "Harbor"))

    assert result.message == "File uploaded successfully"


def test_server_error_raises_upload_error(mp3_file):
    session = FakeSession(make_response(500, {"detail": "boom"}, reason="Internal Server Error"))
    service = UploadService(server_url="http://server.test", session=session)

    with pytest.raises(UploadError) as excinfo:
        service.upload(mp3_file, "Harbor")

    assert excinfo.value.status_code == 500
    assert excinfo.value.message == "Upload failed: 500 - Internal Server Error"


def test_unreachable_server_raises_upload_error(mp3_file):
    session = FakeSession(exc=requests.ConnectionError("no route to host"))
    service = UploadService(server_url="http://server.test", session=session)

    with pytest.raises(UploadError, match="no route to host"):
        service.upload(mp3_file, "Harbor")


def test_plain_text_success_reply_is_accepted(mp3_file):
    session = FakeSession(make_response(200, b"OK", reason="OK"))
    service = UploadService(server_url="http://server.test", session=session)

    result = service.upload(mp3_file, "Harbor")

    assert result.message == "OK"


def test_empty_success_reply_uses_default_message(mp3_file):
    session = FakeSession(make_response(204, reason="No Content"))
    service = UploadService(server_url="http://server.test", session=session)

    result = service.upload(mp3_file, "Harbor")

    assert result.message == "File uploaded successfully"


def test_unexpected_json_success_reply_is_accepted(mp3_file):
    session = FakeSession(make_response(200, {"status": "stored"}, reason="OK"))
    service = UploadService(server_url="http://server.test", session=session)

    result = service.upload(mp3_file, "Harbor")

    assert result.message == '{"status": "stored"}'
