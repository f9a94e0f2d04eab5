"""Enrollment statistics and availability classification.

Everything here is a pure function of its arguments: no I/O and no shared
state, so callers may invoke it from any thread.
"""

from .models import (
    AvailabilityCategory,
    AvailabilityChange,
    Course,
    EnrollmentStatistics,
)


# Fewer open seats than this (but more than zero) is "limited"
LIMITED_AVAILABILITY_THRESHOLD = 5


def compute_statistics(course: Course) -> EnrollmentStatistics:
    """Derive capacity statistics from a course snapshot.

    Over-enrollment is tolerated: available spots clamp to zero and the
    percentage is allowed to exceed 100.

    Args:
        course: Course snapshot

    Returns:
        Statistics for the snapshot
    """
    enrolled_count = len(course.enrolled_students)
    available_spots = max(0, course.max_students - enrolled_count)

    if course.max_students > 0:
        enrollment_percentage = enrolled_count / course.max_students * 100
    else:
        enrollment_percentage = 0.0

    return EnrollmentStatistics(
        enrolled_count=enrolled_count,
        max_capacity=course.max_students,
        available_spots=available_spots,
        enrollment_percentage=enrollment_percentage,
        is_full=available_spots == 0,
        has_limited_availability=0 < available_spots < LIMITED_AVAILABILITY_THRESHOLD,
    )


def classify_availability(stats: EnrollmentStatistics) -> AvailabilityCategory:
    """Map statistics to exactly one availability category."""
    if stats.is_full:
        return AvailabilityCategory.FULL
    if stats.has_limited_availability:
        return AvailabilityCategory.LIMITED
    return AvailabilityCategory.AVAILABLE


def can_enroll(stats: EnrollmentStatistics) -> bool:
    """Check whether a new student could take a seat."""
    return not stats.is_full


def compare_statistics(course_id: str, before: EnrollmentStatistics,
                       after: EnrollmentStatistics) -> AvailabilityChange:
    """Describe the transition between two snapshots of the same course.

    Args:
        course_id: Identifier of the course both snapshots belong to
        before: Statistics of the earlier snapshot
        after: Statistics of the later snapshot

    Returns:
        AvailabilityChange with both categories attached
    """
    return AvailabilityChange(
        course_id=course_id,
        before=before,
        after=after,
        previous_category=classify_availability(before),
        current_category=classify_availability(after),
    )
