"""
Layout diagnostics: overlap and footprint checks.

The room packer never resolves collisions. This module only *reports*
them so they show up in the logs; it does not change the layout.
Rooms are compared as plan-view rectangles on the x/z plane.
"""

from dataclasses import dataclass
from typing import List, Tuple

from shapely.geometry import Polygon, box
from shapely.strtree import STRtree

from services.house_constants import OVERLAP_TOLERANCE

from .models import HouseLayout, Room


@dataclass(frozen=True)
class LayoutIssue:
    kind: str                   # 'overlap' | 'out_of_bounds'
    room_ids: Tuple[str, ...]
    area: float                 # offending area in sq m

    def to_dict(self) -> dict:
        return {"kind": self.kind, "rooms": list(self.room_ids), "area": round(self.area, 4)}

    def __str__(self) -> str:
        return f"{self.kind}: {', '.join(self.room_ids)} ({self.area:.2f} m2)"


def room_polygon(room: Room) -> Polygon:
    """Plan-view rectangle of *room*."""
    return box(*room.bounds)


def detect_overlaps(rooms: List[Room], tolerance: float = OVERLAP_TOLERANCE) -> List[LayoutIssue]:
    """
    One issue per room pair whose intersection exceeds *tolerance*.

    Rooms that only share an edge are not overlapping. Candidate pairs
    come from an STRtree query, so only neighbouring rooms are compared.
    """
    if not rooms:
        return []
    polys = [room_polygon(r) for r in rooms]
    left, right = STRtree(polys).query(polys, predicate='intersects')
    issues = []
    for i, j in sorted(zip(left.tolist(), right.tolist())):
        if i >= j:
            continue
        area = polys[i].intersection(polys[j]).area
        if area > tolerance:
            issues.append(LayoutIssue('overlap', (rooms[i].id, rooms[j].id), area))
    return issues


def detect_out_of_bounds(rooms: List[Room], footprint: Polygon,
                         tolerance: float = OVERLAP_TOLERANCE) -> List[LayoutIssue]:
    """Rooms sticking out of *footprint*. The hallway sits outside on purpose and is skipped."""
    issues = []
    for room in rooms:
        if room.category == 'hallway':
            continue
        outside = room_polygon(room).difference(footprint).area
        if outside > tolerance:
            issues.append(LayoutIssue('out_of_bounds', (room.id,), outside))
    return issues


def inspect_layout(layout: HouseLayout) -> List[LayoutIssue]:
    """All overlap and out-of-bounds issues for *layout*, overlaps first."""
    rooms = list(layout.rooms)
    footprint = box(0.0, 0.0, layout.width, layout.length)
    return detect_overlaps(rooms) + detect_out_of_bounds(rooms, footprint)
