"""Domain Repository Interfaces"""
from abc import ABC, abstractmethod
from typing import Optional, List

from domain.entities import Room, Booking


class RoomRepository(ABC):
    """Repository interface for the room catalog"""

    @abstractmethod
    def find_all(self) -> List[Room]:
        """Find all rooms, in stable catalog order"""
        pass

    @abstractmethod
    def find_by_id(self, room_id: int) -> Optional[Room]:
        """Find room by ID"""
        pass

    @abstractmethod
    def add(self, room: Room) -> Room:
        """Add room to the catalog"""
        pass


class BookingRepository(ABC):
    """Repository interface for bookings, active and inactive alike"""

    @abstractmethod
    def find_all(self) -> List[Booking]:
        """Find all bookings"""
        pass

    @abstractmethod
    def find_by_id(self, booking_id: int) -> Optional[Booking]:
        """Find booking by ID"""
        pass

    @abstractmethod
    def add(self, booking: Booking) -> Booking:
        """Persist a new booking and return it with its assigned ID"""
        pass
