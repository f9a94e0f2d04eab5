"""Loading course snapshots from YAML or JSON files."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from .models import Course


logger = logging.getLogger(__name__)


class CourseDataError(ValueError):
    """Raised when a course record cannot be turned into a snapshot."""


# Accepted spellings for each field, snake_case first
FIELD_ALIASES = {
    'id': ('id', '_id'),
    'max_students': ('max_students', 'maxStudents'),
    'enrolled_students': ('enrolled_students', 'enrolledStudents'),
    'course_code': ('course_code', 'courseCode'),
    'course_name': ('course_name', 'courseName'),
}


def _lookup(record: Dict[str, Any], field: str, default: Any = None) -> Any:
    for key in FIELD_ALIASES[field]:
        if key in record:
            return record[key]
    return default


def parse_course(record: Dict[str, Any]) -> Course:
    """Build a course snapshot from a single record.

    Args:
        record: Mapping using either snake_case or camelCase field names

    Returns:
        Course snapshot

    Raises:
        CourseDataError: If the record is malformed
    """
    if not isinstance(record, dict):
        raise CourseDataError(f"Course record must be a mapping, got {type(record).__name__}")

    course_id = _lookup(record, 'id')
    if course_id is None or str(course_id).strip() == '':
        raise CourseDataError("Course record is missing an id")
    course_id = str(course_id)

    max_students = _lookup(record, 'max_students')
    # bool is an int subclass
    if isinstance(max_students, bool) or not isinstance(max_students, int):
        raise CourseDataError(f"Course {course_id}: max_students must be an integer, got {max_students!r}")
    if max_students < 0:
        raise CourseDataError(f"Course {course_id}: max_students must not be negative, got {max_students}")

    enrolled = _lookup(record, 'enrolled_students', [])
    if enrolled is None:
        enrolled = []
    if not isinstance(enrolled, (list, tuple)):
        raise CourseDataError(f"Course {course_id}: enrolled_students must be a list")

    code = _lookup(record, 'course_code')
    name = _lookup(record, 'course_name')

    return Course(
        id=course_id,
        max_students=max_students,
        enrolled_students=tuple(str(student) for student in enrolled),
        course_code=str(code) if code is not None else None,
        course_name=str(name) if name is not None else None,
    )


def load_courses(path: Union[str, Path]) -> List[Course]:
    """Load all course snapshots from a file.

    The file holds a list of course records, either at the top level or
    under a ``courses`` key.

    Args:
        path: Path to a YAML or JSON file

    Returns:
        List of course snapshots in file order
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Course file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CourseDataError(f"Could not parse {path}: {e}") from e

    if data is None:
        logger.warning(f"Course file {path} is empty")
        return []

    if isinstance(data, dict):
        data = data.get('courses', [])

    if not isinstance(data, list):
        raise CourseDataError(f"Expected a list of courses in {path}")

    courses = [parse_course(record) for record in data]

    seen = set()
    for course in courses:
        if course.id in seen:
            raise CourseDataError(f"Duplicate course id {course.id} in {path}")
        seen.add(course.id)

    logger.info(f"Loaded {len(courses)} courses from {path}")
    return courses
