"""Pydantic schemas for API request/response validation."""

import math
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Literal, Optional

from services.house_engine import HouseSpecification


# Defaults the house form falls back to for missing, empty or zero values
FORM_DEFAULTS = {
    "plot_size": "20x30",
    "house_type": "single",
    "bedrooms": 2,
    "bathrooms": 1,
    "kitchens": 1,
    "location_type": "city",
    "extra_notes": "",
}


def _int_or_none(value: Any) -> Optional[int]:
    """Lenient integer read: ints, floats and numeric strings ("3", "3 rooms")."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        digits = value.strip()
        sign = -1 if digits.startswith("-") else 1
        if digits[:1] in ("+", "-"):
            digits = digits[1:]
        head = ""
        for ch in digits:
            if not ch.isdigit():
                break
            head += ch
        return sign * int(head) if head else None
    return None


# ---------- House generation ----------
class HouseRequest(BaseModel):
    """House form submission. Keys are camelCase on the wire."""

    plot_size: str = Field(default=FORM_DEFAULTS["plot_size"], alias="plotSize")
    house_type: Literal["single", "double"] = Field(default="single", alias="houseType")
    bedrooms: int = FORM_DEFAULTS["bedrooms"]
    bathrooms: int = FORM_DEFAULTS["bathrooms"]
    kitchens: int = FORM_DEFAULTS["kitchens"]
    location_type: Literal["city", "village"] = Field(default="city", alias="locationType")
    extra_notes: str = Field(default="", alias="extraNotes")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("plot_size", "house_type", "location_type", "extra_notes", mode="before")
    @classmethod
    def _blank_to_default(cls, value, info):
        if value is None or value == "":
            return FORM_DEFAULTS[info.field_name]
        return value

    @field_validator("bedrooms", "bathrooms", "kitchens", mode="before")
    @classmethod
    def _count_or_default(cls, value, info):
        count = _int_or_none(value)
        return count if count else FORM_DEFAULTS[info.field_name]

    def to_specification(self) -> HouseSpecification:
        return HouseSpecification(
            plot_size=self.plot_size,
            house_type=self.house_type,
            bedrooms=self.bedrooms,
            bathrooms=self.bathrooms,
            kitchens=self.kitchens,
            location_type=self.location_type,
            extra_notes=self.extra_notes,
        )


class HouseGenerationResponse(BaseModel):
    success: bool
    layout: Optional[Dict] = None
    tourWaypoints: Optional[List[Dict]] = None
    error: Optional[str] = None


class HouseApiStatus(BaseModel):
    message: str = "House API is working"


# ---------- Materials ----------
class MaterialOut(BaseModel):
    name: str
    color: str
    roughness: float
    metalness: float
    normalScale: List[float]
    description: str


class MaterialCatalogResponse(BaseModel):
    presets: List[MaterialOut]
    styles: Dict[str, Dict[str, str]]
