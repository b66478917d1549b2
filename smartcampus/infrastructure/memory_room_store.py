from smartcampus.domain.models import Room
from smartcampus.domain.seed import seed_rooms


class InMemoryRoomStore:
    def __init__(self, rooms: list[Room] | None = None):
        self._rooms: dict[int, Room] = {}
        for room in rooms or []:
            self.add(room)

    @classmethod
    def seeded(cls) -> "InMemoryRoomStore":
        return cls(seed_rooms())

    def list_rooms(self) -> list[Room]:
        return list(self._rooms.values())

    def get(self, room_id: int) -> Room | None:
        return self._rooms.get(room_id)

    def find_by_nfc_tag(self, nfc_tag_id: str) -> Room | None:
        for room in self._rooms.values():
            if room.nfc_tag_id == nfc_tag_id:
                return room
        return None

    def next_id(self) -> int:
        return max(self._rooms, default=0) + 1

    def add(self, room: Room) -> None:
        if room.id is None:
            raise ValueError("room id must be assigned before storing")
        self._rooms[room.id] = room

    def remove(self, room_id: int) -> Room | None:
        return self._rooms.pop(room_id, None)

    def count(self) -> int:
        return len(self._rooms)
