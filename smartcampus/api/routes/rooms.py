from typing import Annotated

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from smartcampus.api.deps import RoomServiceDep
from smartcampus.application.errors import (
    InvalidRoomError,
    NfcTagNotFoundError,
    RoomNotFoundError,
    RoomOccupiedError,
)
from smartcampus.domain.models import Room

rooms_router = APIRouter(prefix="/api/rooms")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RoomIn(CamelModel):
    # Any client-supplied id is ignored; the registry assigns one.
    id: int | None = None
    name: str | None = None
    building: str | None = None
    floor: int | None = None
    capacity: int | None = None
    room_type: str | None = None
    available: bool = True
    nfc_tag_id: str | None = None


class RoomOut(CamelModel):
    id: int
    name: str
    building: str | None
    floor: int | None
    capacity: int | None
    room_type: str | None
    available: bool
    nfc_tag_id: str | None

    @classmethod
    def from_room(cls, room: Room) -> "RoomOut":
        return cls(
            id=room.id,
            name=room.name,
            building=room.building,
            floor=room.floor,
            capacity=room.capacity,
            room_type=room.room_type,
            available=room.available,
            nfc_tag_id=room.nfc_tag_id,
        )


class OpenRoomOut(CamelModel):
    status: str
    message: str
    room_id: int
    room_name: str


class DeleteRoomOut(BaseModel):
    status: str
    message: str
    id: int


class HealthOut(BaseModel):
    status: str
    rooms: int
    timestamp: int


class StatsOut(CamelModel):
    total: int
    available: int
    occupied: int
    occupancy_rate: float


def _room_not_found(room_id: int) -> JSONResponse:
    return JSONResponse(
        {"error": "Room not found", "id": room_id}, status.HTTP_404_NOT_FOUND
    )


@rooms_router.get("", response_model=list[RoomOut])
async def list_rooms(room_service: RoomServiceDep):
    rooms = await room_service.list_rooms()
    return [RoomOut.from_room(room) for room in rooms]


@rooms_router.get("/available", response_model=list[RoomOut])
async def list_available_rooms(room_service: RoomServiceDep):
    rooms = await room_service.list_available()
    return [RoomOut.from_room(room) for room in rooms]


@rooms_router.get("/health", response_model=HealthOut)
async def health(room_service: RoomServiceDep):
    report = await room_service.health()
    return HealthOut(
        status=report.status, rooms=report.rooms, timestamp=report.timestamp
    )


@rooms_router.get("/stats", response_model=StatsOut)
async def stats(room_service: RoomServiceDep):
    report = await room_service.stats()
    return StatsOut(
        total=report.total,
        available=report.available,
        occupied=report.occupied,
        occupancy_rate=report.occupancy_rate,
    )


@rooms_router.get("/{room_id}", response_model=RoomOut)
async def get_room(room_id: int, room_service: RoomServiceDep):
    try:
        room = await room_service.get_room(room_id)
    except RoomNotFoundError:
        return _room_not_found(room_id)
    return RoomOut.from_room(room)


@rooms_router.post("/open/{nfc_tag_id}", response_model=OpenRoomOut)
async def open_room(nfc_tag_id: str, room_service: RoomServiceDep):
    try:
        room = await room_service.open_by_nfc(nfc_tag_id)
    except NfcTagNotFoundError:
        return JSONResponse(
            {
                "status": "NOT_FOUND",
                "message": "NFC tag not linked to any room",
                "nfcTagId": nfc_tag_id,
            },
            status.HTTP_404_NOT_FOUND,
        )
    except RoomOccupiedError as exc:
        return JSONResponse(
            {
                "status": "CONFLICT",
                "message": "Room already occupied",
                "roomId": exc.room.id,
            },
            status.HTTP_409_CONFLICT,
        )
    return OpenRoomOut(
        status="OK",
        message=f"Room {room.name} opened successfully",
        room_id=room.id,
        room_name=room.name,
    )


@rooms_router.patch("/{room_id}/availability", response_model=RoomOut)
async def update_availability(
    room_id: int,
    room_service: RoomServiceDep,
    is_available: Annotated[bool, Query(alias="isAvailable")],
):
    try:
        room = await room_service.set_availability(room_id, is_available)
    except RoomNotFoundError:
        return _room_not_found(room_id)
    return RoomOut.from_room(room)


@rooms_router.post("", response_model=RoomOut, status_code=status.HTTP_201_CREATED)
async def create_room(room_in: RoomIn, room_service: RoomServiceDep):
    try:
        room = await room_service.create_room(
            room_in.name,
            building=room_in.building,
            floor=room_in.floor,
            capacity=room_in.capacity,
            room_type=room_in.room_type,
            available=room_in.available,
            nfc_tag_id=room_in.nfc_tag_id,
        )
    except InvalidRoomError as exc:
        return JSONResponse({"error": str(exc)}, status.HTTP_400_BAD_REQUEST)
    return RoomOut.from_room(room)


@rooms_router.delete("/{room_id}", response_model=DeleteRoomOut)
async def delete_room(room_id: int, room_service: RoomServiceDep):
    try:
        room = await room_service.delete_room(room_id)
    except RoomNotFoundError:
        return _room_not_found(room_id)
    return DeleteRoomOut(status="OK", message="Room deleted", id=room.id)
