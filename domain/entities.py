"""Domain Entities"""
from pydantic import BaseModel
from datetime import date
from typing import Optional

from domain.value_objects import DateRange


# Sentinel room id meaning "no room found" / "no valid room reference"
NO_ROOM = -1


class Room(BaseModel):
    """Room Entity, owned by the room catalog"""

    # Identity
    id: int

    # Opaque passthrough
    description: Optional[str] = None

    class Config:
        from_attributes = True


class Booking(BaseModel):
    """Booking Entity

    Existing bookings are trusted to have start_date <= end_date; new ones
    are checked on admission by the AvailabilityManager.
    """

    # Identity, assigned by the booking repository
    id: Optional[int] = None

    # References
    customer_id: int
    room_id: int

    # Stay
    start_date: date
    end_date: date

    # Soft invalidation flag
    is_active: bool = False

    class Config:
        from_attributes = True

    # ==================== FACTORY METHOD ====================
    @staticmethod
    def admit(customer_id: int, room_id: int, date_range: DateRange) -> "Booking":
        """Build the active booking handed to the repository on admission"""
        return Booking(
            customer_id=customer_id,
            room_id=room_id,
            start_date=date_range.start_date,
            end_date=date_range.end_date,
            is_active=True
        )

    # ==================== QUERY METHODS ====================
    def overlaps(self, start: date, end: date) -> bool:
        """Check if [start, end] shares at least one day with this booking"""
        return self.start_date <= end and start <= self.end_date

    def occupies(self, day: date) -> bool:
        """Check if the booking covers the given day"""
        return self.start_date <= day <= self.end_date

    def conflicts_with(self, other: "Booking") -> bool:
        """Two active bookings for the same room with overlapping dates"""
        return (
            self.is_active
            and other.is_active
            and self.room_id == other.room_id
            and self.overlaps(other.start_date, other.end_date)
        )
