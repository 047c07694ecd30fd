"""
Common Value Objects

Value objects used across multiple domains:
- DateRange: Represents a range of dates (reservation start to end)
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DateRange:
    """
    Date range value object

    Represents a stay from start_date to end_date. A single-day range
    (start == end) is allowed, an inverted one is not.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.start_date > self.end_date:
            raise ValueError(f"Start date ({self.start_date}) must not be after end date ({self.end_date})")

    def conflicts_with(self, candidate: 'DateRange') -> bool:
        """
        Check if this (existing) range blocks a candidate range

        The existing range conflicts when it covers the candidate's start
        or the candidate's end, both boundaries inclusive:

            (end >= candidate.start and start <= candidate.start)
            or (start <= candidate.end and end >= candidate.end)

        Examples:
            - [10, 15] blocks [12, 20] -> True (covers the start)
            - [10, 15] blocks [01, 05] -> False
        """
        if not isinstance(candidate, DateRange):
            raise TypeError("Can only check conflicts with another DateRange")

        covers_start = self.end_date >= candidate.start_date and self.start_date <= candidate.start_date
        covers_end = self.start_date <= candidate.end_date and self.end_date >= candidate.end_date
        return covers_start or covers_end

    def contains(self, check_date: date) -> bool:
        """Check if a date is within this range (both ends inclusive)"""
        return self.start_date <= check_date <= self.end_date

    def __len__(self) -> int:
        """Number of nights in this range"""
        return (self.end_date - self.start_date).days

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date!r}, {self.end_date!r})"
