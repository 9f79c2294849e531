"""
House generator, the public API of the house engine.

Runs the full pipeline for one form submission:

    parse plot -> house envelope -> room packing -> furnishing -> tour

Generation either fully succeeds or raises ``HouseGenerationError``;
there is no partial result.
"""

import logging

from services.house_constants import MAX_LOGGED_ISSUES, STYLE_BY_LOCATION

from .furnishing import add_furniture
from .inspector import inspect_layout
from .models import HouseGenerationResult, HouseLayout, HouseSpecification
from .plot import compute_house_dimensions, floors_for, parse_plot_size
from .rooms import generate_rooms
from .tour import generate_tour_waypoints

logger = logging.getLogger(__name__)

GENERATION_FAILED = "Failed to generate house layout"


class HouseGenerationError(RuntimeError):
    """Raised when the pipeline fails for any reason. The message is deliberately generic."""

    def __init__(self, message: str = GENERATION_FAILED):
        super().__init__(message)


def style_for(location_type: str) -> str:
    return STYLE_BY_LOCATION.get(location_type, 'traditional')


def build_layout(spec: HouseSpecification) -> HouseLayout:
    """Plot parsing, room packing and furnishing for *spec*."""
    plot = parse_plot_size(spec.plot_size)
    dimensions = compute_house_dimensions(plot, spec.house_type)
    rooms = generate_rooms(spec, dimensions)
    furnished = add_furniture(rooms, spec.location_type)
    return HouseLayout(
        width=dimensions.width,
        length=dimensions.length,
        height=dimensions.height,
        floors=floors_for(spec.house_type),
        style=style_for(spec.location_type),
        rooms=tuple(furnished),
    )


def generate_house(spec: HouseSpecification) -> HouseGenerationResult:
    """
    Generate the furnished layout and camera tour for *spec*.

    Room counts are not range-checked; extreme counts produce
    overlapping or overflowing layouts, summarised in one warning.
    """
    try:
        layout = build_layout(spec)
        waypoints = generate_tour_waypoints(list(layout.rooms), layout.dimensions)
        issues = inspect_layout(layout)
    except Exception as e:
        logger.exception(f"Error generating house: {e}")
        raise HouseGenerationError() from e

    logger.info(
        f"Generated {layout.style} house {layout.width:.1f}x{layout.length:.1f}m, "
        f"{layout.floors} floor(s), {len(layout.rooms)} rooms, {len(waypoints)} waypoints"
    )
    if issues:
        shown = "; ".join(str(issue) for issue in issues[:MAX_LOGGED_ISSUES])
        more = f" (+{len(issues) - MAX_LOGGED_ISSUES} more)" if len(issues) > MAX_LOGGED_ISSUES else ""
        logger.warning(f"{len(issues)} layout issue(s): {shown}{more}")
        for issue in issues:
            logger.debug(f"Layout issue: {issue}")

    return HouseGenerationResult(layout=layout, tour_waypoints=tuple(waypoints))
