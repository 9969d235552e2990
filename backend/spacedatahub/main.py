from fastapi import FastAPI
from fastapi.middleware.gzip import GZipMiddleware
from spacedatahub.core.config import settings
from spacedatahub.api.api import api_router
import logging
import sys

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Space weather API: NASA DONKI event retrieval and CME impact analysis for the Moon and Mars.",
    version="2.2.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(GZipMiddleware, minimum_size=1000)

@app.get("/")
def read_root():
    return {"message": "Welcome to SpaceDataHub API", "status": "active", "version": "2.2.0"}

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(api_router, prefix=settings.API_V1_STR)
