from dataclasses import dataclass
from typing import Any

from smartcampus.application.errors import InvalidRoomError


@dataclass(eq=False)
class Room:
    id: int | None
    name: str
    building: str | None = None
    floor: int | None = None
    capacity: int | None = None
    room_type: str | None = None
    available: bool = True
    nfc_tag_id: str | None = None

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Room):
            return NotImplemented
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return id(self)
        return hash(self.id)

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "building": self.building,
            "floor": self.floor,
            "capacity": self.capacity,
            "roomType": self.room_type,
            "available": self.available,
            "nfcTagId": self.nfc_tag_id,
        }


def make_room(
    name: str | None,
    *,
    id: int | None = None,
    building: str | None = None,
    floor: int | None = None,
    capacity: int | None = None,
    room_type: str | None = None,
    available: bool = True,
    nfc_tag_id: str | None = None,
) -> Room:
    """Build a Room, rejecting a missing or blank name."""
    if name is None or not name.strip():
        raise InvalidRoomError("Room name cannot be empty")
    return Room(
        id=id,
        name=name,
        building=building,
        floor=floor,
        capacity=capacity,
        room_type=room_type,
        available=available,
        nfc_tag_id=nfc_tag_id,
    )


@dataclass(frozen=True)
class RoomStats:
    total: int
    available: int
    occupied: int
    occupancy_rate: float


@dataclass(frozen=True)
class RegistryHealth:
    status: str
    rooms: int
    timestamp: int
