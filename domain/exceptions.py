"""Domain Exceptions"""


class DomainException(Exception):
    """Base exception raised by the domain layer"""
    pass


class InvalidRangeError(DomainException, ValueError):
    """Requested date interval is not usable (past start or reversed bounds)"""
    pass


class InvalidBookingError(DomainException, ValueError):
    """Booking candidate is missing"""
    pass
