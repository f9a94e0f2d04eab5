"""
Tests for enrollment_stats/monitor.py - availability change detection
"""

from unittest.mock import MagicMock

import yaml

from enrollment_stats.models import AvailabilityCategory
from enrollment_stats.monitor import CapacityMonitor


def write_courses(path, records):
    path.write_text(yaml.safe_dump({'courses': records}), encoding='utf-8')


def course_record(course_id, max_students, enrolled):
    return {'id': course_id, 'max_students': max_students,
            'enrolled_students': [f"s{i}" for i in range(enrolled)]}


class TestCheckOnce:

    def test_first_check_records_baseline(self, config):
        monitor = CapacityMonitor(config, scheduler=MagicMock())
        assert monitor.check_once() == []

    def test_no_changes_between_identical_snapshots(self, config):
        monitor = CapacityMonitor(config, scheduler=MagicMock())
        monitor.check_once()
        assert monitor.check_once() == []

    def test_detects_course_filling_up(self, config, courses_file):
        write_courses(courses_file, [course_record('CS101', 10, 9)])
        monitor = CapacityMonitor(config, scheduler=MagicMock())
        monitor.check_once()

        write_courses(courses_file, [course_record('CS101', 10, 10)])
        changes = monitor.check_once()

        assert len(changes) == 1
        change = changes[0]
        assert change.course_id == 'CS101'
        assert change.previous_category is AvailabilityCategory.LIMITED
        assert change.current_category is AvailabilityCategory.FULL
        assert change.after.is_full is True

    def test_detects_drop_from_full_course(self, config, courses_file):
        write_courses(courses_file, [course_record('CS101', 10, 10)])
        monitor = CapacityMonitor(config, scheduler=MagicMock())
        monitor.check_once()

        write_courses(courses_file, [course_record('CS101', 10, 9)])
        changes = monitor.check_once()

        assert len(changes) == 1
        assert changes[0].after.available_spots == 1
        assert changes[0].percentage_delta < 0

    def test_ignores_changes_within_category(self, config, courses_file):
        write_courses(courses_file, [course_record('CS101', 30, 1)])
        monitor = CapacityMonitor(config, scheduler=MagicMock())
        monitor.check_once()

        write_courses(courses_file, [course_record('CS101', 30, 2)])
        assert monitor.check_once() == []

    def test_new_course_is_baseline(self, config, courses_file):
        write_courses(courses_file, [course_record('CS101', 10, 1)])
        monitor = CapacityMonitor(config, scheduler=MagicMock())
        monitor.check_once()

        write_courses(courses_file, [course_record('CS101', 10, 1), course_record('CS102', 10, 10)])
        assert monitor.check_once() == []

    def test_returning_course_is_baseline(self, config, courses_file):
        """A course absent from the previous snapshot is not compared to older data"""
        monitor = CapacityMonitor(config, scheduler=MagicMock())

        write_courses(courses_file, [course_record('A', 10, 10)])
        monitor.check_once()

        write_courses(courses_file, [course_record('B', 10, 1)])
        assert monitor.check_once() == []

        write_courses(courses_file, [course_record('A', 10, 1), course_record('B', 10, 1)])
        assert monitor.check_once() == []

    def test_removed_course_is_forgotten(self, config, courses_file):
        monitor = CapacityMonitor(config, scheduler=MagicMock())

        write_courses(courses_file, [course_record('A', 10, 1), course_record('B', 10, 1)])
        monitor.check_once()

        write_courses(courses_file, [course_record('B', 10, 1)])
        monitor.check_once()
        assert set(monitor._last_stats) == {'B'}

    def test_empty_snapshot_clears_baselines(self, config, courses_file):
        monitor = CapacityMonitor(config, scheduler=MagicMock())

        write_courses(courses_file, [course_record('A', 10, 10)])
        monitor.check_once()

        courses_file.write_text("courses: []\n")
        monitor.check_once()

        write_courses(courses_file, [course_record('A', 10, 1)])
        assert monitor.check_once() == []

    def test_empty_snapshot(self, config, courses_file):
        courses_file.write_text("courses: []\n")
        monitor = CapacityMonitor(config, scheduler=MagicMock())
        assert monitor.check_once() == []


class TestScheduling:

    def test_check_and_log_survives_missing_file(self, config, courses_file, caplog):
        courses_file.unlink()
        monitor = CapacityMonitor(config, scheduler=MagicMock())
        monitor.check_and_log()
        assert "Error in monitoring cycle" in caplog.text

    def test_start_schedules_job(self, config):
        scheduler = MagicMock()
        monitor = CapacityMonitor(config, scheduler=scheduler)
        monitor.start()

        scheduler.add_job.assert_called_once()
        _, kwargs = scheduler.add_job.call_args
        assert kwargs['id'] == 'capacity_monitor'
        scheduler.start.assert_called_once()
        assert monitor.is_running is True

    def test_start_twice_is_noop(self, config):
        scheduler = MagicMock()
        monitor = CapacityMonitor(config, scheduler=scheduler)
        monitor.start()
        monitor.start()
        scheduler.add_job.assert_called_once()

    def test_keyboard_interrupt_stops(self, config):
        scheduler = MagicMock()
        scheduler.start.side_effect = KeyboardInterrupt
        scheduler.running = True
        monitor = CapacityMonitor(config, scheduler=scheduler)
        monitor.start()

        scheduler.shutdown.assert_called_once()
        assert monitor.is_running is False

    def test_report(self, config):
        monitor = CapacityMonitor(config, scheduler=MagicMock())
        report = monitor.report()
        assert "📚 Courses: 3" in report
        assert "🔴 Full: 1" in report
