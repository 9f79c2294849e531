"""
Room planner: greedy row packing of rooms inside the house footprint.

The packer walks an ordered list of placement steps with a cursor
(x along the house width, z along its length):

    row 0:  Living (1.5u) | Kitchen 1..k | Dining (if it fits)
    row 1+: Bedroom 1..n, Bathroom 1..m  (wrap when a row is full)
    z = -2: Hallway spanning the full width (entry corridor)

``u`` is the per-room unit: the footprint divided by
``max(2, ceil(sqrt(bedrooms + 2)))`` on each axis.

Nothing checks for overlaps. Large bedroom counts wrap past the back of
the footprint and bathrooms continue from wherever the last bedroom
stopped; see ``inspector.inspect_layout`` for reporting those cases.
"""

import math
from dataclasses import dataclass
from functools import partial, reduce
from typing import List, Tuple, Union

from services.house_constants import (
    BATHROOM_SCALE,
    HALLWAY_LENGTH,
    HALLWAY_Z_OFFSET,
    LIVING_ROOM_SCALE,
    MIN_GRID_DIVISIONS,
    ROOM_HEIGHT,
)

from .models import Dimensions, HouseDimensions, HouseSpecification, Room, Vec3


@dataclass(frozen=True)
class RoomUnit:
    """Size of a standard room before category scaling."""

    width: float
    length: float


@dataclass(frozen=True)
class RoomRequest:
    """
    One room to drop at the cursor.

    ``advance`` is how far the cursor moves after placing it, which is
    not always the room width (bathrooms are narrower than their slot).
    """

    room_id: str
    name: str
    category: str
    width: float
    length: float
    advance: float
    wrap: bool = False
    only_if_fits: bool = False


@dataclass(frozen=True)
class RowBreak:
    """Return the cursor to x = 0 and move it ``advance`` along z."""

    advance: float


PackingStep = Union[RoomRequest, RowBreak]


@dataclass(frozen=True)
class PackingCursor:
    x: float = 0.0
    z: float = 0.0
    rooms: Tuple[Room, ...] = ()


def compute_room_unit(bedrooms: int, dimensions: HouseDimensions) -> RoomUnit:
    """Per-room unit: footprint split into a roughly square grid sized by bedroom count."""
    divisions = max(MIN_GRID_DIVISIONS, math.ceil(math.sqrt(bedrooms + 2)))
    return RoomUnit(width=dimensions.width / divisions, length=dimensions.length / divisions)


def plan_room_requests(spec: HouseSpecification, unit: RoomUnit) -> List[PackingStep]:
    """Build the ordered placement steps for everything except the hallway."""
    steps: List[PackingStep] = [
        RoomRequest(
            room_id='living-1',
            name='Living Room',
            category='living',
            width=unit.width * LIVING_ROOM_SCALE,
            length=unit.length * LIVING_ROOM_SCALE,
            advance=unit.width * LIVING_ROOM_SCALE,
        )
    ]

    for i in range(1, spec.kitchens + 1):
        steps.append(RoomRequest(
            room_id=f'kitchen-{i}',
            name=f'Kitchen {i}',
            category='kitchen',
            width=unit.width,
            length=unit.length,
            advance=unit.width,
        ))

    steps.append(RoomRequest(
        room_id='dining-1',
        name='Dining Room',
        category='dining',
        width=unit.width,
        length=unit.length,
        advance=unit.width,
        only_if_fits=True,
    ))

    steps.append(RowBreak(advance=unit.length * LIVING_ROOM_SCALE))

    for i in range(1, spec.bedrooms + 1):
        steps.append(RoomRequest(
            room_id=f'bedroom-{i}',
            name=f'Bedroom {i}',
            category='bedroom',
            width=unit.width,
            length=unit.length,
            advance=unit.width,
            wrap=True,
        ))

    # Bathrooms share the bedroom cursor; no row break in between.
    for i in range(1, spec.bathrooms + 1):
        steps.append(RoomRequest(
            room_id=f'bathroom-{i}',
            name=f'Bathroom {i}',
            category='bathroom',
            width=unit.width * BATHROOM_SCALE,
            length=unit.length * BATHROOM_SCALE,
            advance=unit.width,
            wrap=True,
        ))

    return steps


def _place(
    house_width: float,
    row_length: float,
    cursor: PackingCursor,
    step: PackingStep,
) -> PackingCursor:
    """Fold step: apply one placement step to the cursor."""
    if isinstance(step, RowBreak):
        return PackingCursor(x=0.0, z=cursor.z + step.advance, rooms=cursor.rooms)

    x, z = cursor.x, cursor.z
    overflows = x + step.advance > house_width

    if step.only_if_fits and overflows:
        return cursor
    if step.wrap and overflows:
        x, z = 0.0, z + row_length

    room = Room(
        id=step.room_id,
        name=step.name,
        category=step.category,
        position=Vec3(x, 0.0, z),
        dimensions=Dimensions(step.width, step.length, ROOM_HEIGHT),
    )
    return PackingCursor(x=x + step.advance, z=z, rooms=cursor.rooms + (room,))


def pack_rooms(steps: List[PackingStep], house_width: float, unit: RoomUnit) -> Tuple[Room, ...]:
    """Run the packing fold and return the placed rooms in insertion order."""
    place = partial(_place, house_width, unit.length)
    return reduce(place, steps, PackingCursor()).rooms


def make_hallway(dimensions: HouseDimensions) -> Room:
    return Room(
        id='hallway-1',
        name='Hallway',
        category='hallway',
        position=Vec3(0.0, 0.0, HALLWAY_Z_OFFSET),
        dimensions=Dimensions(dimensions.width, HALLWAY_LENGTH, ROOM_HEIGHT),
    )


def generate_rooms(spec: HouseSpecification, dimensions: HouseDimensions) -> List[Room]:
    """
    Lay out every room for *spec* inside a house of *dimensions*.

    Returns living, kitchens, optional dining, bedrooms, bathrooms and
    the hallway, in that order. The result is deterministic.
    """
    unit = compute_room_unit(spec.bedrooms, dimensions)
    steps = plan_room_requests(spec, unit)
    rooms = list(pack_rooms(steps, dimensions.width, unit))
    rooms.append(make_hallway(dimensions))
    return rooms
