"""
House generation API routes.

Endpoints:
  GET  /api/house            liveness message
  POST /api/house            generate a furnished layout and camera tour
  GET  /api/house/materials  material presets and style mapping
"""

import logging
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from schemas import (
    HouseApiStatus,
    HouseGenerationResponse,
    HouseRequest,
    MaterialCatalogResponse,
)
from services.house_engine import HouseGenerationError, generate_house
from services.house_engine.materials import MATERIAL_PRESETS, STYLE_MATERIALS

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/house", tags=["house"])

# (field, low, high, message)
COUNT_LIMITS = [
    ("bedrooms", 1, 10, "Bedrooms must be between 1 and 10"),
    ("bathrooms", 1, 5, "Bathrooms must be between 1 and 5"),
    ("kitchens", 1, 3, "Kitchens must be between 1 and 3"),
]


def _failure(status_code: int, error: str) -> JSONResponse:
    body = HouseGenerationResponse(success=False, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def validate_request(req: HouseRequest) -> str:
    """Return the first validation error message, or an empty string."""
    if not req.plot_size.strip():
        return "Plot size is required"
    for field, low, high, message in COUNT_LIMITS:
        value = getattr(req, field)
        if value < low or value > high:
            return message
    return ""


@router.get("", response_model=HouseApiStatus)
def house_status():
    return HouseApiStatus()


@router.post("", response_model=HouseGenerationResponse, response_model_exclude_none=True)
def create_house(req: HouseRequest):
    """Generate a house layout and its tour waypoints from the design form."""
    error = validate_request(req)
    if error:
        logger.info(f"Rejected house request: {error}")
        return _failure(400, error)

    try:
        result = generate_house(req.to_specification())
    except HouseGenerationError as e:
        return _failure(500, str(e))

    return HouseGenerationResponse(success=True, **result.to_dict())


@router.get("/materials", response_model=MaterialCatalogResponse)
def material_catalog():
    """List every material preset and the style -> surface mapping."""
    return MaterialCatalogResponse(
        presets=[m.to_dict() for m in MATERIAL_PRESETS.values()],
        styles=STYLE_MATERIALS,
    )
