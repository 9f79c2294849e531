"""
Value types for the house engine.

Every type here is a frozen dataclass: a layout is built once per
request and never mutated afterwards. ``to_dict()`` produces the JSON
shape the 3D viewer consumes.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Vec3:
    """A point or offset in house space (y is up)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_list(self) -> List[float]:
        return [self.x, self.y, self.z]

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "z": self.z}


@dataclass(frozen=True)
class Dimensions:
    """Axis-aligned extent: width along x, length along z, height along y."""

    width: float
    length: float
    height: float

    def to_dict(self) -> dict:
        return {"width": self.width, "length": self.length, "height": self.height}


# The house envelope uses the same three extents.
HouseDimensions = Dimensions


@dataclass(frozen=True)
class PlotSize:
    width: float
    length: float


@dataclass(frozen=True)
class HouseSpecification:
    """
    The submitted house form.

    Counts are not range-checked here; the HTTP layer does that.
    ``extra_notes`` is carried along but never read by the generator.
    """

    plot_size: str = "20x30"
    house_type: str = "single"
    bedrooms: int = 2
    bathrooms: int = 1
    kitchens: int = 1
    location_type: str = "city"
    extra_notes: str = ""


@dataclass(frozen=True)
class Furniture:
    """A single piece of furniture, positioned relative to its room origin."""

    id: str
    name: str
    category: str
    position: Vec3
    rotation: float
    dimensions: Dimensions
    material: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "type": self.category,
            "position": self.position.to_dict(),
            "rotation": self.rotation,
            "dimensions": self.dimensions.to_dict(),
        }
        if self.material is not None:
            data["material"] = self.material
        return data


@dataclass(frozen=True)
class Room:
    """A rectangular room placed at an offset from the house origin."""

    id: str
    name: str
    category: str
    position: Vec3
    dimensions: Dimensions
    furniture: Tuple[Furniture, ...] = ()
    materials: Optional[Dict[str, str]] = None

    @property
    def center(self) -> Vec3:
        """Horizontal centre of the room at half its height."""
        return Vec3(
            self.position.x + self.dimensions.width / 2,
            self.dimensions.height / 2,
            self.position.z + self.dimensions.length / 2,
        )

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Plan-view bounding box (min_x, min_z, max_x, max_z)."""
        return (
            self.position.x,
            self.position.z,
            self.position.x + self.dimensions.width,
            self.position.z + self.dimensions.length,
        )

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "type": self.category,
            "position": self.position.to_dict(),
            "dimensions": self.dimensions.to_dict(),
            "furniture": [f.to_dict() for f in self.furniture],
        }
        if self.materials is not None:
            data["materials"] = dict(self.materials)
        return data

    def __repr__(self) -> str:
        return (
            f"Room(id={self.id!r}, at=({self.position.x:.2f},{self.position.z:.2f}), "
            f"size={self.dimensions.width:.2f}x{self.dimensions.length:.2f})"
        )


@dataclass(frozen=True)
class HouseLayout:
    width: float
    length: float
    height: float
    floors: int
    style: str
    rooms: Tuple[Room, ...] = ()

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(self.width, self.length, self.height)

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "length": self.length,
            "height": self.height,
            "floors": self.floors,
            "rooms": [r.to_dict() for r in self.rooms],
            "style": self.style,
        }


@dataclass(frozen=True)
class TourWaypoint:
    """One camera pose in the guided walkthrough."""

    position: Vec3
    look_at: Vec3
    duration: float
    room_name: str

    def to_dict(self) -> dict:
        return {
            "position": self.position.to_list(),
            "lookAt": self.look_at.to_list(),
            "duration": self.duration,
            "roomName": self.room_name,
        }


@dataclass(frozen=True)
class HouseGenerationResult:
    layout: HouseLayout
    tour_waypoints: Tuple[TourWaypoint, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "layout": self.layout.to_dict(),
            "tourWaypoints": [w.to_dict() for w in self.tour_waypoints],
        }
