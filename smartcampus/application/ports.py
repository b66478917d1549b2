from typing import Protocol

from smartcampus.domain.models import Room


class RoomStore(Protocol):
    def list_rooms(self) -> list[Room]: ...

    def get(self, room_id: int) -> Room | None: ...

    def find_by_nfc_tag(self, nfc_tag_id: str) -> Room | None: ...

    def next_id(self) -> int: ...

    def add(self, room: Room) -> None: ...

    def remove(self, room_id: int) -> Room | None: ...

    def count(self) -> int: ...


class Logger(Protocol):
    def info(self, event: str, **kw: object) -> object: ...

    def warning(self, event: str, **kw: object) -> object: ...
