from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smartcampus.domain.models import Room


class RoomRegistryError(Exception):
    pass


class RoomNotFoundError(RoomRegistryError, LookupError):
    def __init__(self, room_id: int):
        super().__init__(f"room {room_id} not found")
        self.room_id = room_id


class NfcTagNotFoundError(RoomRegistryError, LookupError):
    def __init__(self, nfc_tag_id: str):
        super().__init__(f"nfc tag {nfc_tag_id!r} not linked to any room")
        self.nfc_tag_id = nfc_tag_id


class RoomOccupiedError(RoomRegistryError):
    def __init__(self, room: Room):
        super().__init__(f"room {room.id} already occupied")
        self.room = room


class InvalidRoomError(RoomRegistryError, ValueError):
    pass
