from fastapi import APIRouter
from spacedatahub.api.endpoints import space_weather

api_router = APIRouter()

api_router.include_router(space_weather.router, prefix="/space-weather", tags=["space-weather"])
