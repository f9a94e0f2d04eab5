import pytest
import yaml

from enrollment_stats.config import Config
from enrollment_stats.models import Course


def make_course(max_students: int, enrolled: int, course_id: str = "CS101", **kwargs) -> Course:
    """Build a course with `enrolled` generated student ids."""
    return Course(
        id=course_id,
        max_students=max_students,
        enrolled_students=tuple(f"student-{i}" for i in range(enrolled)),
        **kwargs
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ('COURSES_FILE', 'MONITORING_INTERVAL_MINUTES', 'LOG_LEVEL', 'LOG_FILE'):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def courses_file(tmp_path):
    """Snapshot file with one available, one limited and one full course."""
    path = tmp_path / "courses.yaml"
    path.write_text(yaml.safe_dump({
        'courses': [
            {'_id': 'CS101', 'courseCode': 'CS101', 'courseName': 'Intro',
             'maxStudents': 30, 'enrolledStudents': []},
            {'_id': 'CS201', 'maxStudents': 20,
             'enrolledStudents': [f"s{i}" for i in range(16)]},
            {'id': 'MATH150', 'max_students': 10,
             'enrolled_students': [f"s{i}" for i in range(10)]},
        ]
    }), encoding='utf-8')
    return path


@pytest.fixture
def config_file(tmp_path, courses_file):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({
        'courses': {'path': courses_file.name},
        'monitoring': {'interval_minutes': 1},
        'logging': {'level': 'DEBUG', 'file': str(tmp_path / "logs" / "test.log")},
    }), encoding='utf-8')
    return path


@pytest.fixture
def config(config_file):
    return Config(str(config_file))
