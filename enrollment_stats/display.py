"""Text formatting for catalog and management views of course capacity."""

from datetime import datetime
from typing import Dict, Iterable, Optional

from .calculator import classify_availability, compute_statistics
from .models import AvailabilityCategory, AvailabilityChange, Course, EnrollmentStatistics


CATEGORY_ICONS = {
    AvailabilityCategory.FULL: '🔴',
    AvailabilityCategory.LIMITED: '🟡',
    AvailabilityCategory.AVAILABLE: '🟢',
}


def availability_badge(stats: EnrollmentStatistics) -> str:
    """Get the availability badge shown next to a course."""
    category = classify_availability(stats)
    if category is AvailabilityCategory.FULL:
        return "Course Full"
    if category is AvailabilityCategory.LIMITED:
        return f"Only {stats.available_spots} spots left!"
    return f"{stats.available_spots} spots available"


def enrollment_summary(stats: EnrollmentStatistics) -> str:
    return f"{stats.enrolled_count} / {stats.max_capacity} enrolled"


def format_course_line(course: Course, stats: Optional[EnrollmentStatistics] = None) -> str:
    """Format a single report line for a course.

    Args:
        course: Course snapshot
        stats: Precomputed statistics (computed from the course if omitted)

    Returns:
        Formatted line
    """
    if stats is None:
        stats = compute_statistics(course)

    icon = CATEGORY_ICONS[classify_availability(stats)]
    return (
        f"{icon} {course.display_name}: {enrollment_summary(stats)} "
        f"({stats.enrollment_percentage:.1f}%) - {availability_badge(stats)}"
    )


def format_report(courses: Iterable[Course], generated_at: Optional[datetime] = None) -> str:
    """Format a capacity report for a list of courses.

    Args:
        courses: Course snapshots to include
        generated_at: Report timestamp (defaults to now)

    Returns:
        Multi-line report string
    """
    entries = [(course, compute_statistics(course)) for course in courses]
    counts = count_categories(stats for _, stats in entries)
    generated_at = generated_at or datetime.now()

    message = "📋 Enrollment Capacity Report\n\n"
    message += f"📚 Courses: {len(entries)}\n"
    message += f"🟢 Available: {counts[AvailabilityCategory.AVAILABLE]}\n"
    message += f"🟡 Limited: {counts[AvailabilityCategory.LIMITED]}\n"
    message += f"🔴 Full: {counts[AvailabilityCategory.FULL]}\n"
    message += f"⏰ Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}\n"

    if entries:
        message += "\nCourse Details:\n"
        for course, stats in entries:
            message += f"  {format_course_line(course, stats)}\n"

    return message


def format_change(change: AvailabilityChange) -> str:
    """Format an availability transition for logging."""
    sign = '+' if change.enrolled_delta >= 0 else ''
    return (
        f"{change.course_id}: {change.previous_category.value} -> "
        f"{change.current_category.value} "
        f"(enrolled {sign}{change.enrolled_delta}, "
        f"{change.after.available_spots} spots left)"
    )


def count_categories(stats_list: Iterable[EnrollmentStatistics]) -> Dict[AvailabilityCategory, int]:
    counts = {category: 0 for category in AvailabilityCategory}
    for stats in stats_list:
        counts[classify_availability(stats)] += 1
    return counts


def course_export(course: Course) -> Dict[str, object]:
    """Serialize a course's statistics for API consumers."""
    stats = compute_statistics(course)
    data = {'id': course.id}
    data.update(stats.to_dict())
    data['availability'] = classify_availability(stats).value
    return data
