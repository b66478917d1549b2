import asyncio
import time

import structlog

from smartcampus.application.errors import (
    InvalidRoomError,
    NfcTagNotFoundError,
    RoomOccupiedError,
)
from smartcampus.application.guards import room_exists, serialized
from smartcampus.application.ports import Logger, RoomStore
from smartcampus.domain.models import RegistryHealth, Room, RoomStats, make_room


class RoomService:
    """Room registry operations.

    Every operation runs under a single lock, so the check-then-set in
    ``open_by_nfc`` lets at most one caller open a given room.
    """

    def __init__(self, store: RoomStore, logger: Logger | None = None):
        self._store = store
        self._log = logger or structlog.get_logger(__name__)
        self._lock = asyncio.Lock()

    @serialized
    async def list_rooms(self) -> list[Room]:
        rooms = self._store.list_rooms()
        self._log.info("rooms_listed", count=len(rooms))
        return rooms

    @serialized
    async def list_available(self) -> list[Room]:
        rooms = [room for room in self._store.list_rooms() if room.available]
        self._log.info("available_rooms_listed", count=len(rooms))
        return rooms

    @serialized
    @room_exists
    async def get_room(self, room_id: int) -> Room:
        room = self._store.get(room_id)
        self._log.info("room_fetched", room_id=room_id)
        return room

    @serialized
    async def open_by_nfc(self, nfc_tag_id: str) -> Room:
        room = self._store.find_by_nfc_tag(nfc_tag_id)
        if room is None:
            self._log.warning("nfc_tag_not_found", nfc_tag_id=nfc_tag_id)
            raise NfcTagNotFoundError(nfc_tag_id)
        if not room.available:
            self._log.warning("room_already_occupied", room_id=room.id)
            raise RoomOccupiedError(room)
        room.available = False
        self._log.info("room_opened", room_id=room.id, room_name=room.name)
        return room

    @serialized
    @room_exists
    async def set_availability(self, room_id: int, available: bool) -> Room:
        room = self._store.get(room_id)
        room.available = available
        self._log.info("room_availability_set", room_id=room_id, available=available)
        return room

    @serialized
    async def create_room(
        self,
        name: str | None,
        *,
        building: str | None = None,
        floor: int | None = None,
        capacity: int | None = None,
        room_type: str | None = None,
        available: bool = True,
        nfc_tag_id: str | None = None,
    ) -> Room:
        try:
            room = make_room(
                name,
                building=building,
                floor=floor,
                capacity=capacity,
                room_type=room_type,
                available=available,
                nfc_tag_id=nfc_tag_id,
            )
        except InvalidRoomError:
            self._log.warning("room_rejected", name=name)
            raise
        room.id = self._store.next_id()
        self._store.add(room)
        self._log.info("room_created", room_id=room.id, room_name=room.name)
        return room

    @serialized
    @room_exists
    async def delete_room(self, room_id: int) -> Room:
        room = self._store.remove(room_id)
        self._log.info("room_deleted", room_id=room_id)
        return room

    @serialized
    async def health(self) -> RegistryHealth:
        count = self._store.count()
        self._log.info("health_checked", rooms=count)
        return RegistryHealth(
            status="OK", rooms=count, timestamp=int(time.time() * 1000)
        )

    @serialized
    async def stats(self) -> RoomStats:
        rooms = self._store.list_rooms()
        total = len(rooms)
        available = sum(1 for room in rooms if room.available)
        occupied = total - available
        rate = occupied * 100.0 / total if total else 0.0
        self._log.info("stats_computed", total=total, occupied=occupied)
        return RoomStats(
            total=total,
            available=available,
            occupied=occupied,
            occupancy_rate=rate,
        )
