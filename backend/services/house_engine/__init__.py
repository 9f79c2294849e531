"""
House Engine for procedural house generation.

Turns a short house specification into a furnished room layout and a
scripted camera tour. Pure computation: no I/O, no shared state.
"""

from .furnishing import add_furniture
from .generator import HouseGenerationError, generate_house
from .inspector import LayoutIssue, inspect_layout
from .materials import get_material_preset, get_room_materials, get_style_materials
from .models import (
    Dimensions,
    Furniture,
    HouseDimensions,
    HouseGenerationResult,
    HouseLayout,
    HouseSpecification,
    PlotSize,
    Room,
    TourWaypoint,
    Vec3,
)
from .plot import compute_house_dimensions, parse_plot_size
from .rooms import generate_rooms
from .tour import generate_tour_waypoints

__all__ = [
    "generate_house",
    "HouseGenerationError",
    "parse_plot_size",
    "compute_house_dimensions",
    "generate_rooms",
    "add_furniture",
    "generate_tour_waypoints",
    "inspect_layout",
    "LayoutIssue",
    "get_material_preset",
    "get_style_materials",
    "get_room_materials",
    "Dimensions",
    "Furniture",
    "HouseDimensions",
    "HouseGenerationResult",
    "HouseLayout",
    "HouseSpecification",
    "PlotSize",
    "Room",
    "TourWaypoint",
    "Vec3",
]
