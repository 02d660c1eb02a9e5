import uvicorn # type: ignore
from noise_api.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "noise_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level="info"
    )
