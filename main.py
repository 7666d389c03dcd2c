import logging
from datetime import date, timedelta
from typing import List

from fastapi import FastAPI, HTTPException, Depends, Request
from fastapi.responses import JSONResponse
from fastapi.security import OAuth2PasswordRequestForm

from api.schemas import (
    # Rooms
    CreateRoomRequest, RoomResponse,
    # Bookings
    CreateBookingRequest, BookingResponse,
    # Availability
    AvailableRoomResponse, RoomAvailabilityResponse, OccupiedDatesResponse,
    # Auth
    Token, UserResponse
)

from api.dependencies import get_current_active_user, fake_users_db, get_user
from infrastructure.security import verify_password, create_access_token
from domain.auth import User

from application.services import AvailabilityManager, RoomService
from infrastructure.repositories.in_memory_repositories import (
    InMemoryRoomRepository, InMemoryBookingRepository
)
from config import settings
from domain.entities import Booking, Room, NO_ROOM
from domain.exceptions import InvalidBookingError, InvalidRangeError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Hotel Booking API",
    description="Room availability and booking admission for a single hotel",
    version="1.0.0"
)

# Initialize repositories
room_repo = InMemoryRoomRepository(
    Room(id=i, description=f"Room {i}") for i in range(1, settings.seed_rooms + 1)
)
booking_repo = InMemoryBookingRepository()

# Dependency injection
def get_availability_manager() -> AvailabilityManager:
    return AvailabilityManager(booking_repo, room_repo)

def get_room_service() -> RoomService:
    return RoomService(room_repo)

# ============================================================================
# ERROR HANDLERS
# ============================================================================

@app.exception_handler(InvalidRangeError)
async def invalid_range_handler(request: Request, exc: InvalidRangeError):
    logger.info("Rejected date range on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})

@app.exception_handler(InvalidBookingError)
async def invalid_booking_handler(request: Request, exc: InvalidBookingError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})

# ============================================================================
# HEALTH
# ============================================================================

@app.get("/api/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

# ============================================================================
# AUTH ENDPOINTS
# ============================================================================

@app.post("/token", response_model=Token, tags=["Auth"])
async def login_for_access_token(form_data: OAuth2PasswordRequestForm = Depends()):
    user = get_user(fake_users_db, form_data.username)
    if not user or not verify_password(form_data.password, user.hashed_password):
        raise HTTPException(
            status_code=401,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    access_token = create_access_token(
        data={"sub": user.username},
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes)
    )
    return {"access_token": access_token, "token_type": "bearer"}

@app.get("/users/me", response_model=UserResponse, tags=["Auth"])
async def read_users_me(current_user: User = Depends(get_current_active_user)):
    return current_user

# ============================================================================
# ROOM ENDPOINTS
# ============================================================================

@app.get("/api/rooms", response_model=List[RoomResponse], tags=["Rooms"])
async def get_all_rooms(service: RoomService = Depends(get_room_service)):
    """Get all rooms in catalog order"""
    return [_room_to_response(r) for r in service.get_all_rooms()]

@app.get("/api/rooms/{room_id}", response_model=RoomResponse, tags=["Rooms"])
async def get_room(room_id: int, service: RoomService = Depends(get_room_service)):
    """Get room by ID"""
    room = service.get_room(room_id)
    if not room:
        raise HTTPException(status_code=404, detail="Room not found")
    return _room_to_response(room)

@app.post("/api/rooms", response_model=RoomResponse, status_code=201, tags=["Rooms"])
async def create_room(
    request: CreateRoomRequest,
    service: RoomService = Depends(get_room_service),
    current_user: User = Depends(get_current_active_user)
):
    """Add a room to the catalog"""
    try:
        room = service.add_room(request.id, request.description)
        return _room_to_response(room)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

# ============================================================================
# AVAILABILITY ENDPOINTS
# ============================================================================
# Synchronous handlers, run in FastAPI's threadpool

def _check_window(start_date: date, end_date: date) -> None:
    """Reject windows longer than the configured maximum"""
    if (end_date - start_date).days + 1 > settings.max_query_days:
        raise HTTPException(
            status_code=400,
            detail=f"The date range cannot span more than {settings.max_query_days} days"
        )

@app.get("/api/availability/room", response_model=AvailableRoomResponse, tags=["Availability"])
def find_available_room(
    start_date: date,
    end_date: date,
    manager: AvailabilityManager = Depends(get_availability_manager)
):
    """Find the first room free for the whole date range"""
    _check_window(start_date, end_date)
    room_id = manager.find_available_room(start_date, end_date)
    return AvailableRoomResponse(
        start_date=start_date,
        end_date=end_date,
        room_id=room_id,
        available=room_id != NO_ROOM
    )

@app.get("/api/availability/rooms/{room_id}", response_model=RoomAvailabilityResponse, tags=["Availability"])
def get_room_availability(
    room_id: int,
    start_date: date,
    end_date: date,
    manager: AvailabilityManager = Depends(get_availability_manager),
    rooms: RoomService = Depends(get_room_service)
):
    """Check whether one catalog room is free for the whole date range"""
    if not rooms.get_room(room_id):
        raise HTTPException(status_code=404, detail="Room not found")
    _check_window(start_date, end_date)
    return RoomAvailabilityResponse(
        room_id=room_id,
        start_date=start_date,
        end_date=end_date,
        available=manager.is_room_available(room_id, start_date, end_date)
    )

@app.get("/api/availability/occupied-dates", response_model=OccupiedDatesResponse, tags=["Availability"])
def get_fully_occupied_dates(
    start_date: date,
    end_date: date,
    manager: AvailabilityManager = Depends(get_availability_manager)
):
    """List dates on which every room is booked"""
    _check_window(start_date, end_date)
    dates = manager.get_fully_occupied_dates(start_date, end_date)
    return OccupiedDatesResponse(start_date=start_date, end_date=end_date, dates=dates)

# ============================================================================
# BOOKING ENDPOINTS
# ============================================================================

@app.post("/api/bookings", response_model=BookingResponse, status_code=201, tags=["Bookings"])
async def create_booking(
    request: CreateBookingRequest,
    manager: AvailabilityManager = Depends(get_availability_manager),
    current_user: User = Depends(get_current_active_user)
):
    """Create a booking if the room is free for the requested dates"""
    candidate = Booking(
        customer_id=request.customer_id if request.customer_id is not None else current_user.customer_id,
        room_id=request.room_id,
        start_date=request.start_date,
        end_date=request.end_date
    )
    booking = manager.admit_booking(candidate)
    if booking is None:
        raise HTTPException(status_code=409, detail="The booking could not be created")
    return _booking_to_response(booking)

@app.get("/api/bookings", response_model=List[BookingResponse], tags=["Bookings"])
async def get_all_bookings(
    active_only: bool = False,
    manager: AvailabilityManager = Depends(get_availability_manager),
    current_user: User = Depends(get_current_active_user)
):
    """Get all bookings"""
    return [_booking_to_response(b) for b in manager.get_all_bookings(active_only)]

@app.get("/api/bookings/{booking_id}", response_model=BookingResponse, tags=["Bookings"])
async def get_booking(
    booking_id: int,
    manager: AvailabilityManager = Depends(get_availability_manager),
    current_user: User = Depends(get_current_active_user)
):
    """Get booking by ID"""
    booking = manager.get_booking(booking_id)
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    return _booking_to_response(booking)

# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def _room_to_response(room) -> RoomResponse:
    """Convert Room entity to RoomResponse"""
    return RoomResponse(id=room.id, description=room.description)

def _booking_to_response(booking) -> BookingResponse:
    """Convert Booking entity to BookingResponse"""
    return BookingResponse(
        id=booking.id,
        customer_id=booking.customer_id,
        room_id=booking.room_id,
        start_date=booking.start_date,
        end_date=booking.end_date,
        is_active=booking.is_active
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
