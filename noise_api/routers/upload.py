from fastapi import APIRouter # type: ignore
import logging
from ..models import UploadResponse

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/upload", status_code=201, response_model=UploadResponse)
async def upload_file() -> UploadResponse:
    """Acknowledge an upload. The request body is not read or stored."""
    logger.info("Upload received")
    return UploadResponse(message="File uploaded successfully")
