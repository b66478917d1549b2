from typing import Annotated

from fastapi import Depends
from fastapi.requests import HTTPConnection

from smartcampus.application.room_service import RoomService


def get_room_service(conn: HTTPConnection) -> RoomService:
    return conn.app.state.room_service


RoomServiceDep = Annotated[RoomService, Depends(get_room_service)]
