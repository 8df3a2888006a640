"""routes/system.py – /health, /cities"""
from datetime import datetime
from fastapi import APIRouter
from ..deps import get_catalog
from ..models import CitiesResponse, HealthResponse

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", time=datetime.now().isoformat(), cities=get_catalog().cities())


@router.get("/cities", response_model=CitiesResponse)
async def cities():
    return CitiesResponse(cities=get_catalog().cities())
