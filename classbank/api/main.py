import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from classbank import __version__
from classbank.api.routers import maintenance
from classbank.logging_config.logging_config import setup_logging


logger = logging.getLogger(__name__)


class HealthStatus(BaseModel):
    status: str
    version: str


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Configure logging before the first request so reports reach the log files"""
    setup_logging("classbank-api")
    logger.info(f"ClassBank maintenance API {__version__} ready")
    yield


# Serve with: uvicorn classbank.api.main:app
app = FastAPI(title="ClassBank Maintenance API", version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

api_v1 = APIRouter(prefix="/api/v1")


@api_v1.get("/health")
async def health_check() -> HealthStatus:
    """Report that the API is up, with the package version."""
    return {"status": "healthy", "version": __version__}


api_v1.include_router(maintenance.router)

app.include_router(api_v1)
