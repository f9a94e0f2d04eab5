#!/usr/bin/env python3
"""Main entry point for the enrollment statistics tool."""

import sys
import json
import logging
import signal
from pathlib import Path
import argparse
from typing import Union

from enrollment_stats.calculator import can_enroll, classify_availability, compute_statistics
from enrollment_stats.config import Config
from enrollment_stats.display import (
    availability_badge,
    course_export,
    enrollment_summary,
    format_report,
)
from enrollment_stats.loader import CourseDataError, load_courses
from enrollment_stats.monitor import CapacityMonitor


logger = logging.getLogger(__name__)


def setup_logging(log_file: Union[str, Path] = "logs/enrollment.log", log_level: str = "INFO"):
    """Set up logging configuration.

    Args:
        log_file: Path to log file
        log_level: Logging level
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(sys.stdout)
        ]
    )


def signal_handler(signum, frame):
    """Handle shutdown signals gracefully."""
    print("\n\n🛑 Shutting down gracefully...")
    sys.exit(0)


def cmd_report(args, config: Config) -> int:
    """Print a capacity report for every course in the snapshot file."""
    courses = load_courses(config.courses_path)
    print(format_report(courses))
    return 0


def cmd_show(args, config: Config) -> int:
    """Print the statistics of a single course."""
    courses = load_courses(config.courses_path)
    course = next((c for c in courses if c.id == args.course_id), None)

    if course is None:
        print(f"❌ Course {args.course_id} not found")
        return 1

    stats = compute_statistics(course)
    print(f"\n📊 {course.display_name}")
    print("-" * 60)
    print(f"  Enrollment: {enrollment_summary(stats)}")
    print(f"  Percentage: {stats.enrollment_percentage:.1f}%")
    print(f"  Available:  {availability_badge(stats)}")
    print(f"  Category:   {classify_availability(stats).value}")
    print(f"  Can enroll: {'yes' if can_enroll(stats) else 'no'}")
    return 0


def cmd_export(args, config: Config) -> int:
    """Export statistics for all courses as JSON."""
    courses = load_courses(config.courses_path)
    payload = json.dumps([course_export(course) for course in courses], indent=2)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload + "\n", encoding='utf-8')
        logger.info(f"Exported {len(courses)} courses to {output_path}")
    else:
        print(payload)
    return 0


def cmd_watch(args, config: Config) -> int:
    """Re-check the snapshot file on an interval and log availability changes."""
    print("🚀 Starting enrollment capacity monitor...")
    print(f"Snapshot file: {config.courses_path}")
    print()

    monitor = CapacityMonitor(config)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    monitor.start()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Enrollment Statistics - Course capacity and availability',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py report                          # Capacity report
  python main.py show CS101                      # Statistics for one course
  python main.py export -o stats.json            # Export statistics as JSON
  python main.py watch                           # Log availability changes
        """
    )

    parser.add_argument(
        '-c', '--config',
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )

    parser.add_argument(
        '-l', '--log-level',
        default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Set logging level (default: from configuration)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    parser_report = subparsers.add_parser('report', help='Print capacity report')
    parser_report.set_defaults(func=cmd_report)

    parser_show = subparsers.add_parser('show', help='Show statistics for one course')
    parser_show.add_argument('course_id', help='Course id (e.g., "CS101")')
    parser_show.set_defaults(func=cmd_show)

    parser_export = subparsers.add_parser('export', help='Export statistics as JSON')
    parser_export.add_argument('-o', '--output', help='Write to file instead of stdout')
    parser_export.set_defaults(func=cmd_export)

    parser_watch = subparsers.add_parser('watch', help='Monitor availability changes')
    parser_watch.set_defaults(func=cmd_watch)

    return parser


def main(argv=None) -> int:
    """Main application entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    try:
        config = Config(args.config)
    except (FileNotFoundError, ValueError) as e:
        setup_logging(log_level=args.log_level or 'INFO')
        logger.error(str(e))
        return 1

    setup_logging(config.log_file, args.log_level or config.log_level)

    try:
        return args.func(args, config)
    except (FileNotFoundError, CourseDataError) as e:
        logger.error(f"Could not load courses: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
