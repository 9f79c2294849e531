"""Camera tour waypoints for the auto-tour feature."""

from typing import List

from services.house_constants import (
    EXTERIOR_END_DISTANCE,
    EXTERIOR_END_DWELL,
    EXTERIOR_END_LABEL,
    EXTERIOR_END_RISE,
    EXTERIOR_START_DISTANCE,
    EXTERIOR_START_DWELL,
    EXTERIOR_START_LABEL,
    EXTERIOR_START_RISE,
    ROOM_DWELL,
)

from .models import HouseDimensions, Room, TourWaypoint, Vec3


def house_center(dimensions: HouseDimensions) -> Vec3:
    return Vec3(dimensions.width / 2, dimensions.height / 2, dimensions.length / 2)


def generate_tour_waypoints(rooms: List[Room], dimensions: HouseDimensions) -> List[TourWaypoint]:
    """
    Exterior view, one stop per room in list order, then a final exterior view.

    Hallways are skipped. Interior stops look at their own position, so
    the camera does not pan while inside a room.
    """
    target = house_center(dimensions)

    waypoints = [TourWaypoint(
        position=Vec3(dimensions.width / 2, dimensions.height + EXTERIOR_START_RISE, EXTERIOR_START_DISTANCE),
        look_at=target,
        duration=EXTERIOR_START_DWELL,
        room_name=EXTERIOR_START_LABEL,
    )]

    for room in rooms:
        if room.category == 'hallway':
            continue
        waypoints.append(TourWaypoint(
            position=room.center,
            look_at=room.center,
            duration=ROOM_DWELL,
            room_name=room.name,
        ))

    waypoints.append(TourWaypoint(
        position=Vec3(dimensions.width / 2, dimensions.height + EXTERIOR_END_RISE, EXTERIOR_END_DISTANCE),
        look_at=target,
        duration=EXTERIOR_END_DWELL,
        room_name=EXTERIOR_END_LABEL,
    ))
    return waypoints
