"""In-Memory Repository Implementations"""
from typing import Optional, List, Dict, Iterable

from domain.repositories import RoomRepository, BookingRepository
from domain.entities import Room, Booking


class InMemoryRoomRepository(RoomRepository):
    """In-memory implementation of RoomRepository"""

    def __init__(self, rooms: Optional[Iterable[Room]] = None):
        self._storage: Dict[int, Room] = {}
        for room in rooms or []:
            self.add(room)

    def find_all(self) -> List[Room]:
        """Find all rooms in insertion order"""
        return list(self._storage.values())

    def find_by_id(self, room_id: int) -> Optional[Room]:
        """Find room by ID"""
        return self._storage.get(room_id)

    def add(self, room: Room) -> Room:
        """Add room to memory"""
        if room.id in self._storage:
            raise ValueError(f"Room {room.id} already exists")
        self._storage[room.id] = room
        return room


class InMemoryBookingRepository(BookingRepository):
    """In-memory implementation of BookingRepository"""

    def __init__(self, bookings: Optional[Iterable[Booking]] = None):
        self._storage: Dict[int, Booking] = {}
        for booking in bookings or []:
            self.add(booking)

    def find_all(self) -> List[Booking]:
        """Find all bookings"""
        return list(self._storage.values())

    def find_by_id(self, booking_id: int) -> Optional[Booking]:
        """Find booking by ID"""
        return self._storage.get(booking_id)

    def add(self, booking: Booking) -> Booking:
        """Save booking to memory, assigning the next ID when it has none"""
        if booking.id is None:
            booking = booking.model_copy(update={"id": max(self._storage, default=0) + 1})
        elif booking.id in self._storage:
            raise ValueError(f"Booking {booking.id} already exists")
        self._storage[booking.id] = booking
        return booking
