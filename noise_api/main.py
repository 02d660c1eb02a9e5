# noise_api/main.py - Server for the noise classifier

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from .core.config import settings, setup_logging, validate_configuration
from .core.database import connect_db
import asyncio
import logging
import time

from .routers.upload import router as upload_router

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.DESCRIPTION,
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=settings.ALLOWED_METHODS,
    allow_headers=settings.ALLOWED_HEADERS,
)

app.include_router(upload_router, tags=["Upload"])

# ============= EXCEPTION HANDLERS =============
@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    logger.error(f"HTTP error: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.detail,
            "type": "http_error",
            "timestamp": time.time()
        }
    )

@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    logger.error(f"Unexpected error: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "type": "internal_error",
            "timestamp": time.time()
        }
    )

# ============= ROOT ENDPOINTS =============
@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Hello World!"

@app.get("/health")
async def health_check():
    db = getattr(app.state, "db", None)
    return {
        "status": "healthy",
        "version": settings.VERSION,
        "timestamp": time.time(),
        "services": {
            "upload": "active",
            "database": "connected" if db is not None and db.is_available() else "unavailable"
        }
    }

# ============= STARTUP EVENT =============
@app.on_event("startup")
async def startup_event():
    logger.info(f"Server running on port {settings.PORT}")
    validate_configuration()

    # Connection is opened but no route uses it yet
    app.state.db = await asyncio.to_thread(connect_db)

# ============= SHUTDOWN EVENT =============
@app.on_event("shutdown")
async def shutdown_event():
    db = getattr(app.state, "db", None)
    if db is not None:
        db.close()
    logger.info("Server shutdown complete")
