"""
House Generator Constants: single source of truth for the house engine.

Every planner (rooms, furnishing, tour, materials) imports its numbers
from here instead of hard-coding them, so the generated geometry stays
consistent between stages.

All lengths are in meters, angles in radians, durations in seconds.
"""

import math

# ===========================================================================
# STRUCTURAL CONSTANTS
# ===========================================================================

ROOM_HEIGHT = 3.0       # standard floor-to-ceiling height, one per floor

# ===========================================================================
# PLOT & FOOTPRINT
# ===========================================================================

DEFAULT_PLOT_WIDTH = 20.0
DEFAULT_PLOT_LENGTH = 30.0

FOOTPRINT_RATIO = 0.8   # house covers 80% of the plot on each axis
MAX_HOUSE_WIDTH = 25.0
MAX_HOUSE_LENGTH = 35.0

FLOORS_BY_HOUSE_TYPE = {
    'single': 1,
    'double': 2,
}

STYLE_BY_LOCATION = {
    'city': 'modern',
    'village': 'traditional',
}

# ===========================================================================
# ROOM PACKING
# ===========================================================================

MIN_GRID_DIVISIONS = 2
LIVING_ROOM_SCALE = 1.5
BATHROOM_SCALE = 0.8

HALLWAY_LENGTH = 2.0
HALLWAY_Z_OFFSET = -2.0  # entry corridor sits in front of the footprint

ROOM_CATEGORIES = ('living', 'bedroom', 'kitchen', 'bathroom', 'dining', 'hallway')

FURNITURE_CATEGORIES = ('bed', 'sofa', 'table', 'chair', 'cabinet', 'appliance')

# ===========================================================================
# CAMERA TOUR
# ===========================================================================

EXTERIOR_START_LABEL = 'Exterior View'
EXTERIOR_END_LABEL = 'Final View'

EXTERIOR_START_RISE = 5.0       # above roof height
EXTERIOR_START_DISTANCE = -10.0  # z in front of the house
EXTERIOR_END_RISE = 3.0
EXTERIOR_END_DISTANCE = -8.0

EXTERIOR_START_DWELL = 3.0
EXTERIOR_END_DWELL = 2.0
ROOM_DWELL = 2.0

# Rotations used by the furniture catalogue
QUARTER_TURN = math.pi / 2
EIGHTH_TURN = math.pi / 4

# Tolerance for the layout inspector (sq m)
OVERLAP_TOLERANCE = 0.01

# Layout issues quoted in the summary warning; the rest go to DEBUG
MAX_LOGGED_ISSUES = 5
