from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from people_api.api.router import api_router
from people_api.core.config import settings
from people_api.core.errors import ApiError, api_error_handler
from people_api.services.directory_service import directory_service

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    try:
        await directory_service.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize DirectoryService, continuing without data source")
    yield
    await directory_service.close()


app = FastAPI(
    title="People Directory API",
    description="Employee directory and master data from Google Sheets",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.add_exception_handler(ApiError, api_error_handler)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "People Directory API"}
