from smartcampus.domain.models import Room, make_room

BUILDING = "Корпус 5"


def seed_rooms() -> list[Room]:
    return [
        make_room(
            "305",
            id=1,
            building=BUILDING,
            floor=3,
            capacity=30,
            room_type="LECTURE",
            available=True,
            nfc_tag_id="NFC001",
        ),
        make_room(
            "306",
            id=2,
            building=BUILDING,
            floor=3,
            capacity=25,
            room_type="LAB",
            available=False,
            nfc_tag_id="NFC002",
        ),
        make_room(
            "401",
            id=3,
            building=BUILDING,
            floor=4,
            capacity=40,
            room_type="COMPUTER",
            available=True,
            nfc_tag_id="NFC003",
        ),
        make_room(
            "210",
            id=4,
            building=BUILDING,
            floor=2,
            capacity=20,
            room_type="LECTURE",
            available=True,
            nfc_tag_id="NFC004",
        ),
    ]
