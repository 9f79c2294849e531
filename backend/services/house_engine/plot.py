"""
Plot parsing and house envelope sizing.

Plot sizes arrive as free text from the form. Two shapes are understood
(``"20x30"`` and ``"25"``); anything else silently falls back to the
default plot rather than failing the request.
"""

import logging
import math
import re
from typing import Optional

from services.house_constants import (
    DEFAULT_PLOT_LENGTH,
    DEFAULT_PLOT_WIDTH,
    FLOORS_BY_HOUSE_TYPE,
    FOOTPRINT_RATIO,
    MAX_HOUSE_LENGTH,
    MAX_HOUSE_WIDTH,
    ROOM_HEIGHT,
)

from .models import HouseDimensions, PlotSize

logger = logging.getLogger(__name__)

# Leading decimal number, e.g. "25", "12.5", ".5", "-3", "1e2". Trailing
# text is ignored so "25m" reads as 25.
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WHITESPACE = re.compile(r"\s+")


def _leading_float(text: str) -> Optional[float]:
    """Read the number at the start of *text*, or ``None`` if there is none."""
    match = _LEADING_NUMBER.match(text)
    if not match:
        return None
    value = float(match.group(0))
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def parse_plot_size(raw: str) -> PlotSize:
    """
    Parse a plot size string into ``PlotSize(width, length)``.

    ``"<w>x<l>"`` gives the two sides directly; a missing, zero or
    unreadable side falls back to its default (20 wide, 30 long).
    A single number gives a square plot. Anything else returns the
    default 20 x 30 plot.
    """
    size = _WHITESPACE.sub("", (raw or "").lower())

    if "x" in size:
        parts = size.split("x")
        width = _leading_float(parts[0])
        length = _leading_float(parts[1])
        if not width or not length:
            logger.warning(f"Plot size {raw!r} partially unreadable, using defaults for missing sides")
        return PlotSize(
            width=width or DEFAULT_PLOT_WIDTH,
            length=length or DEFAULT_PLOT_LENGTH,
        )

    side = _leading_float(size)
    if side is not None:
        return PlotSize(width=side, length=side)

    logger.warning(f"Could not parse plot size {raw!r}, using {DEFAULT_PLOT_WIDTH:g}x{DEFAULT_PLOT_LENGTH:g}")
    return PlotSize(width=DEFAULT_PLOT_WIDTH, length=DEFAULT_PLOT_LENGTH)


def floors_for(house_type: str) -> int:
    """1 for a single-story house, 2 for anything else."""
    return FLOORS_BY_HOUSE_TYPE['single'] if house_type == 'single' else FLOORS_BY_HOUSE_TYPE['double']


def compute_house_dimensions(plot: PlotSize, house_type: str) -> HouseDimensions:
    """
    Derive the house envelope from the plot.

    The footprint is 80% of each plot side, capped at 25 m wide and
    35 m long. Height is one ``ROOM_HEIGHT`` per floor.
    """
    width = min(plot.width * FOOTPRINT_RATIO, MAX_HOUSE_WIDTH)
    length = min(plot.length * FOOTPRINT_RATIO, MAX_HOUSE_LENGTH)
    height = ROOM_HEIGHT * floors_for(house_type)
    return HouseDimensions(width=width, length=length, height=height)
