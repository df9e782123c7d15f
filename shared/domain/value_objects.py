"""
Common Value Objects

Value objects used across multiple domains:
- DateRange: Represents a stay (check-in to check-out)
"""

import math
from dataclasses import dataclass
from datetime import date, datetime

from shared.domain.base import ValueObject
from shared.domain.exceptions import InvalidDateRange

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a range from start_date (inclusive) to end_date (exclusive).
    Accepts plain dates or datetimes; a partial day counts as a full night.
    """
    start_date: date | datetime
    end_date: date | datetime

    def __post_init__(self):
        if self.nights <= 0:
            raise InvalidDateRange(
                f"Check-out ({self.end_date}) must be after check-in ({self.start_date})"
            )

    @property
    def nights(self) -> int:
        """Number of nights, rounded up to the next whole day"""
        delta = self.end_date - self.start_date
        return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)

    def __len__(self) -> int:
        return self.nights

    def __str__(self):
        return f"{self.start_date.strftime('%d.%m.%Y')} - {self.end_date.strftime('%d.%m.%Y')}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"
