"""Domain Value Objects"""
from pydantic import BaseModel, validator
from datetime import date, timedelta
from typing import Iterator, Optional

from domain.exceptions import InvalidRangeError


class DateRange(BaseModel):
    """Value Object for an inclusive range of calendar dates"""
    start_date: date
    end_date: date

    @validator('end_date')
    def end_not_before_start(cls, v, values):
        if 'start_date' in values and v < values['start_date']:
            raise ValueError('End date must not be before start date')
        return v

    def length(self) -> int:
        """Number of days covered, both ends included"""
        return (self.end_date - self.start_date).days + 1

    def days(self) -> Iterator[date]:
        """Yield every date in the range, ascending"""
        for offset in range(self.length()):
            yield self.start_date + timedelta(days=offset)

    class Config:
        frozen = True


def validate_date_range(start: date, end: date, today: Optional[date] = None) -> DateRange:
    """Validate a requested interval and return it as a DateRange.

    The start date must lie strictly after today (today itself is rejected)
    and the end date must not precede the start date. A single-day interval
    is valid.
    """
    today = today or date.today()

    if start <= today:
        raise InvalidRangeError(
            f"The start date cannot be in the past or today (got {start.isoformat()})"
        )

    if end < start:
        raise InvalidRangeError(
            f"The start date cannot be later than the end date "
            f"({start.isoformat()} > {end.isoformat()})"
        )

    return DateRange(start_date=start, end_date=end)
