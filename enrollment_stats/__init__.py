"""Enrollment capacity statistics for course catalogs."""

from .calculator import (
    LIMITED_AVAILABILITY_THRESHOLD,
    can_enroll,
    classify_availability,
    compare_statistics,
    compute_statistics,
)
from .models import AvailabilityCategory, AvailabilityChange, Course, EnrollmentStatistics

__all__ = [
    'LIMITED_AVAILABILITY_THRESHOLD',
    'AvailabilityCategory',
    'AvailabilityChange',
    'Course',
    'EnrollmentStatistics',
    'can_enroll',
    'classify_availability',
    'compare_statistics',
    'compute_statistics',
]
