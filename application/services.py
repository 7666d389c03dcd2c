"""Application Services - Business use cases"""
import logging
from collections import defaultdict
from datetime import date
from typing import Callable, Dict, List, Optional

from domain.entities import Booking, Room, NO_ROOM
from domain.exceptions import InvalidBookingError
from domain.repositories import BookingRepository, RoomRepository
from domain.value_objects import DateRange, validate_date_range

logger = logging.getLogger(__name__)


class AvailabilityManager:
    """Resolves room availability and admits new bookings.

    Both repositories are read in full on every call; nothing is cached, so
    the answer always reflects the current state of the stores. The
    read-then-append in ``admit_booking`` is not atomic: concurrent callers
    need a store that serialises admissions.
    """

    def __init__(self,
                 booking_repo: BookingRepository,
                 room_repo: RoomRepository,
                 today: Callable[[], date] = date.today):
        self.booking_repo = booking_repo
        self.room_repo = room_repo
        self._today = today

    def _validate(self, start: date, end: date) -> DateRange:
        return validate_date_range(start, end, today=self._today())

    def _active_bookings_by_room(self) -> Dict[int, List[Booking]]:
        """Group active bookings by the room they reference"""
        by_room: Dict[int, List[Booking]] = defaultdict(list)
        for booking in self.booking_repo.find_all():
            if booking.is_active:
                by_room[booking.room_id].append(booking)
        return by_room

    @staticmethod
    def _is_free(bookings: List[Booking], date_range: DateRange) -> bool:
        return not any(
            b.overlaps(date_range.start_date, date_range.end_date) for b in bookings
        )

    # ==================== QUERIES ====================
    def find_available_room(self, start: date, end: date) -> int:
        """Return the id of the first room free over [start, end], or NO_ROOM"""
        date_range = self._validate(start, end)
        by_room = self._active_bookings_by_room()

        for room in self.room_repo.find_all():
            if self._is_free(by_room.get(room.id, []), date_range):
                logger.debug("Room %s is available from %s to %s", room.id, start, end)
                return room.id

        logger.debug("No room available from %s to %s", start, end)
        return NO_ROOM

    def is_room_available(self, room_id: int, start: date, end: date) -> bool:
        """Check a single room against the active bookings for [start, end]"""
        date_range = self._validate(start, end)
        return self._is_free(self._active_bookings_by_room().get(room_id, []), date_range)

    def get_fully_occupied_dates(self, start: date, end: date) -> List[date]:
        """Dates in [start, end] on which every room has an active booking.

        An empty catalog yields no dates.
        """
        date_range = self._validate(start, end)
        rooms = self.room_repo.find_all()
        if not rooms:
            return []

        by_room = self._active_bookings_by_room()
        fully_occupied = []
        for day in date_range.days():
            if all(
                any(b.occupies(day) for b in by_room.get(room.id, []))
                for room in rooms
            ):
                fully_occupied.append(day)

        logger.debug(
            "%d fully occupied date(s) between %s and %s", len(fully_occupied), start, end
        )
        return fully_occupied

    def get_all_bookings(self, active_only: bool = False) -> List[Booking]:
        """Get all bookings, optionally only the active ones"""
        bookings = self.booking_repo.find_all()
        if active_only:
            return [b for b in bookings if b.is_active]
        return bookings

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        """Get booking by ID"""
        return self.booking_repo.find_by_id(booking_id)

    # ==================== ADMISSION ====================
    def admit_booking(self, candidate: Optional[Booking]) -> Optional[Booking]:
        """Validate a booking request and persist it.

        Returns the stored booking, or None when the request is rejected.
        The candidate's id and active flag are ignored. The room reference is
        only checked against the NO_ROOM sentinel, not against the catalog.
        """
        if candidate is None:
            raise InvalidBookingError("A booking is required")

        if candidate.room_id == NO_ROOM:
            logger.info("Booking rejected: no valid room reference")
            return None

        date_range = self._validate(candidate.start_date, candidate.end_date)

        booking = Booking.admit(
            customer_id=candidate.customer_id,
            room_id=candidate.room_id,
            date_range=date_range
        )
        if any(booking.conflicts_with(existing) for existing in self.booking_repo.find_all()):
            logger.info(
                "Booking rejected: room %s is already booked between %s and %s",
                booking.room_id, booking.start_date, booking.end_date
            )
            return None

        booking = self.booking_repo.add(booking)
        logger.info(
            "Booking %s created for customer %s in room %s (%s to %s)",
            booking.id, booking.customer_id, booking.room_id,
            booking.start_date, booking.end_date
        )
        return booking

    def create_booking(self, candidate: Optional[Booking]) -> bool:
        """Admit a booking; True when it was persisted"""
        return self.admit_booking(candidate) is not None


class RoomService:
    """Service for the room catalog"""

    def __init__(self, repository: RoomRepository):
        self.repository = repository

    def get_all_rooms(self) -> List[Room]:
        """Get all rooms in catalog order"""
        return self.repository.find_all()

    def get_room(self, room_id: int) -> Optional[Room]:
        """Get room by ID"""
        return self.repository.find_by_id(room_id)

    def add_room(self, room_id: int, description: Optional[str] = None) -> Room:
        """Add a room to the catalog"""
        if room_id <= 0:
            raise ValueError("Room id must be a positive integer")
        if self.repository.find_by_id(room_id):
            raise ValueError(f"Room {room_id} already exists")

        room = self.repository.add(Room(id=room_id, description=description))
        logger.info("Room %s added to the catalog", room.id)
        return room
