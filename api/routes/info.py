"""
Self-describing info document
"""

from fastapi import APIRouter
from core.config import settings
from schemas.api import APIInfo

router = APIRouter(tags=["Info"])


def build_info() -> APIInfo:
    return APIInfo(
        name=settings.API_NAME,
        version=settings.API_VERSION,
        endpoints={
            "GET /elements": "All elements with optional filtering",
            "GET /elements/{number}": "Element by atomic number",
            "GET /elements/symbol/{symbol}": "Element by symbol",
            "GET /elements/name/{name}": "Element by name",
            "GET /elements/categories": "List all categories",
            "GET /elements/liquid": "Liquid elements",
            "GET /elements/gas": "Gas elements",
        },
        filters={
            "Basic": "?group=1&limit=5",
            "Category": "?category=noble-gas",
            "Physical state": "?state=gas",
            "Period": "?period=3",
            "Block": "?block=d",
            "Temperature": "?meltingPoint=1000 (elements with melting point > 1000K)",
            "Density": "?density=5 (elements with density > 5 g/cm³)",
        },
        examples=[
            "/elements/1",
            "/elements/symbol/H",
            "/elements?category=alkali-metal",
            "/elements?state=gas&limit=5",
            "/elements?period=3&block=p",
            "/elements/categories",
        ],
    )


@router.get("/")
@router.get("/api")
async def api_info():
    """Root endpoint: name, version, endpoint list and examples"""
    return build_info().model_dump()
