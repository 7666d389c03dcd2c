"""API Schemas - Request and Response DTOs"""
from pydantic import BaseModel, Field
from datetime import date
from typing import List, Optional


# ============================================================================
# ROOM SCHEMAS
# ============================================================================

class CreateRoomRequest(BaseModel):
    """Create room request DTO"""
    id: int = Field(gt=0)
    description: Optional[str] = None


class RoomResponse(BaseModel):
    """Room response DTO"""
    id: int
    description: Optional[str] = None


# ============================================================================
# BOOKING SCHEMAS
# ============================================================================

class CreateBookingRequest(BaseModel):
    """Create booking request DTO; customer defaults to the current user's"""
    room_id: int
    start_date: date
    end_date: date
    customer_id: Optional[int] = None


class BookingResponse(BaseModel):
    """Booking response DTO"""
    id: int
    customer_id: int
    room_id: int
    start_date: date
    end_date: date
    is_active: bool


# ============================================================================
# AVAILABILITY SCHEMAS
# ============================================================================

class AvailableRoomResponse(BaseModel):
    """Result of an available-room lookup; room_id is -1 when none is free"""
    start_date: date
    end_date: date
    room_id: int
    available: bool


class RoomAvailabilityResponse(BaseModel):
    """Whether one room is free for the whole window"""
    room_id: int
    start_date: date
    end_date: date
    available: bool


class OccupiedDatesResponse(BaseModel):
    """Fully occupied dates within the requested window"""
    start_date: date
    end_date: date
    dates: List[date] = []


# ============================================================================
# AUTH SCHEMAS
# ============================================================================

class Token(BaseModel):
    """Token response DTO"""
    access_token: str
    token_type: str


class TokenData(BaseModel):
    """Token payload DTO"""
    username: Optional[str] = None


class UserResponse(BaseModel):
    """User response DTO"""
    username: str
    customer_id: int
    email: Optional[str] = None
    full_name: Optional[str] = None
    disabled: bool = False
