"""Periodic capacity checks over a course snapshot file."""

import logging
from typing import Dict, List, Optional

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .calculator import compare_statistics, compute_statistics
from .config import Config
from .display import format_change, format_report
from .loader import load_courses
from .models import AvailabilityChange, Course, EnrollmentStatistics


logger = logging.getLogger(__name__)


class CapacityMonitor:
    """Re-reads course snapshots and reports availability changes."""

    def __init__(self, config: Config, scheduler: Optional[BlockingScheduler] = None):
        """Initialize the monitor.

        Args:
            config: Loaded configuration
            scheduler: Scheduler to run checks on (a BlockingScheduler by default)
        """
        self.config = config
        self.scheduler = scheduler or BlockingScheduler()
        self.is_running = False
        self._last_stats: Dict[str, EnrollmentStatistics] = {}

        logger.info(f"CapacityMonitor initialized for {self.config.courses_path}")

    def load(self) -> List[Course]:
        return load_courses(self.config.courses_path)

    def check_once(self) -> List[AvailabilityChange]:
        """Run a single check against the current snapshot file.

        The first check for a course only records its baseline.

        Returns:
            Changes whose availability category moved since the last check
        """
        courses = self.load()

        if not courses:
            logger.warning("No courses found in snapshot file")
            self._last_stats = {}
            return []

        changes = []
        current_stats = {}
        for course in courses:
            stats = compute_statistics(course)
            previous = self._last_stats.get(course.id)
            current_stats[course.id] = stats

            if previous is None or previous == stats:
                continue

            change = compare_statistics(course.id, previous, stats)
            if change.category_changed:
                logger.info(f"🔔 Availability changed: {format_change(change)}")
                changes.append(change)
            else:
                logger.debug(f"Enrollment changed without category change: {format_change(change)}")

        # Courses missing from this snapshot lose their baseline
        self._last_stats = current_stats
        logger.info(f"Check complete. {len(courses)} courses, {len(changes)} category changes")
        return changes

    def check_and_log(self):
        """Scheduled job wrapper that keeps the scheduler alive on bad snapshots."""
        try:
            self.check_once()
        except Exception as e:
            logger.error(f"Error in monitoring cycle: {e}", exc_info=True)

    def report(self) -> str:
        """Build a capacity report for the current snapshot file."""
        return format_report(self.load())

    def start(self):
        """Start the monitoring scheduler."""
        if self.is_running:
            logger.warning("Monitor is already running")
            return

        interval = self.config.monitoring_interval
        logger.info(f"Starting monitor with {interval} minute interval")

        # Run immediately on start
        self.check_and_log()

        self.scheduler.add_job(
            self.check_and_log,
            trigger=IntervalTrigger(minutes=interval),
            id='capacity_monitor',
            name='Course Capacity Monitor',
            replace_existing=True
        )

        self.is_running = True

        try:
            logger.info("Monitor started - press Ctrl+C to stop")
            self.scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Monitor stopped by user")
            self.stop()

    def stop(self):
        """Stop the monitoring scheduler."""
        if self.scheduler.running:
            self.scheduler.shutdown()
            logger.info("Monitor stopped")

        self.is_running = False
