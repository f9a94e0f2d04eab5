"""Data models for course snapshots and enrollment statistics."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class AvailabilityCategory(Enum):
    """Display classification of a course's remaining seats."""

    FULL = "full"
    LIMITED = "limited"
    AVAILABLE = "available"


@dataclass(frozen=True)
class Course:
    """Read-only snapshot of a course's capacity and enrollment."""

    id: str  # Opaque course identifier
    max_students: int  # Total seats
    enrolled_students: Tuple[str, ...] = ()  # Student identifiers, only counted
    course_code: Optional[str] = None  # Course code (e.g., "CS101")
    course_name: Optional[str] = None  # Full course name

    @property
    def display_name(self) -> str:
        """Get the best available label for this course."""
        if self.course_code and self.course_name:
            return f"{self.course_code} - {self.course_name}"
        return self.course_code or self.course_name or self.id


@dataclass(frozen=True)
class EnrollmentStatistics:
    """Capacity statistics derived from a single course snapshot."""

    enrolled_count: int
    max_capacity: int
    available_spots: int
    enrollment_percentage: float
    is_full: bool
    has_limited_availability: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to a dictionary with the course API field names."""
        return {
            'enrolledCount': self.enrolled_count,
            'maxCapacity': self.max_capacity,
            'availableSpots': self.available_spots,
            'enrollmentPercentage': self.enrollment_percentage,
            'isFull': self.is_full,
            'hasLimitedAvailability': self.has_limited_availability,
        }


@dataclass(frozen=True)
class AvailabilityChange:
    """Difference between the statistics of two snapshots of one course."""

    course_id: str
    before: EnrollmentStatistics
    after: EnrollmentStatistics
    previous_category: AvailabilityCategory
    current_category: AvailabilityCategory

    @property
    def enrolled_delta(self) -> int:
        return self.after.enrolled_count - self.before.enrolled_count

    @property
    def spots_delta(self) -> int:
        return self.after.available_spots - self.before.available_spots

    @property
    def percentage_delta(self) -> float:
        return self.after.enrollment_percentage - self.before.enrollment_percentage

    @property
    def category_changed(self) -> bool:
        return self.previous_category is not self.current_category
