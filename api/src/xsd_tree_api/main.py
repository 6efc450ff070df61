#!/usr/bin/env python3

import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, File, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from .core.env_utils import getenv_int, getenv_list
from .core.logging import setup_logging
from .models.models import XsdParseResponse

logger = logging.getLogger(__name__)

# Application start time for uptime calculation
_app_start_time = time.time()

BASE_URL = "/api/v1/xsd"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    setup_logging()
    logger.info("Starting XSD tree API service")

    yield

    # Shutdown
    logger.info("Shutting down XSD tree API service")


app = FastAPI(
    title="XSD Tree API",
    description="API for converting XSD schemas into selectable element trees",
    version=os.getenv("APP_VERSION", "unknown"),
    lifespan=lifespan
)

# CORS middleware
allowed_origins = getenv_list("CORS_ORIGINS", ["http://localhost:3000"])
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Add version header middleware
@app.middleware("http")
async def add_version_header(request, call_next):
    """Add version information to response headers"""
    response = await call_next(request)
    response.headers["X-API-Version"] = os.getenv("APP_VERSION", "unknown")
    return response


@app.get("/healthz")
async def health_check():
    """Liveness probe - checks if application is alive and can serve requests"""
    current_time = time.time()
    return {
        "status": "healthy",
        "timestamp": current_time,
        "uptime": current_time - _app_start_time,
        "api_version": os.getenv("APP_VERSION", "unknown"),
    }


# XSD Parsing Routes

@app.post(f"{BASE_URL}/parse", response_model=XsdParseResponse)
async def parse_xsd_file(file: UploadFile | None = File(None)):
    """Upload an XSD file and return its element tree.

    The tree is rooted at the schema's first top-level element; referenced
    types are expanded in place and sequence/choice/all groups are flattened.

    Args:
        file: XSD schema file (.xsd, application/xml or text/xml)
    """
    from .handlers.xsd_parse import handle_xsd_upload
    return await handle_xsd_upload(file)


if __name__ == "__main__":
    import uvicorn
    host = os.getenv("API_HOST", "0.0.0.0")  # nosec B104
    port = getenv_int("API_PORT", 8000)
    uvicorn.run(app, host=host, port=port)
