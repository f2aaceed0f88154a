# -*- coding: utf-8 -*-
# Course Catalog command-line interface

import argparse
import logging

from .version import __version__
from .settings import *
from .config import load_config, resolve_settings
from .index import CourseIndex
from .data import export_courses, load_courses, print_all_courses, print_course
from .utils import BOLD_CYAN, clear_console, get_valid_file_path, input_with_completion, setup_logging, style

logger = logging.getLogger("course_catalog.core")


def _build_menu_sections():
    return [
        ("Courses", [
            ("Load Courses", "1"),
            ("Display All Courses", "2"),
            ("Find Course", "3"),
            ("Export Courses to CSV or Excel file", "4"),
        ]),
    ]


def _print_menu(sections, clear=False):
    if clear:
        clear_console()
    print("\n" + style("Menu:", *BOLD_CYAN))
    for section_title, items in sections:
        print(style(section_title, *BOLD_CYAN))
        for label, code in items:
            print(f"{code}. {label}")
    print("9. Exit")


def _menu_choice_to_action(choice, sections):
    codes = {code for _, items in sections for _, code in items}
    return choice if choice in codes else None


def normalize_course_id(course_id, uppercase=UPPERCASE_QUERIES):
    course_id = course_id.strip()
    return course_id.upper() if uppercase else course_id


def _build_parser():
    parser = argparse.ArgumentParser(
        description="Course catalog. "
                    "Load courses from a comma-delimited file into a sorted index, list them in order and look them up by ID."
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"course-catalog {__version__}",
        help="Show package name and version and exit.")

    general_group = parser.add_argument_group("General")
    general_group.add_argument('--verbose', '-v', action='store_true', help="Enable verbose output", dest="verbose")
    general_group.add_argument('--dry-run', action='store_true', default=None,
                               help="Preview exports without writing files",
                               dest="dry_run")
    general_group.add_argument('--no-clear', action='store_true',
                               help="Do not clear the screen between menu actions",
                               dest="no_clear")
    general_group.add_argument('--log-dir', type=str,
                               help="Directory for log files (default: current directory)",
                               dest="log_dir", metavar="LOG_DIR")
    general_group.add_argument('--log-level', type=str, choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                               help="Logging level (default: INFO)",
                               dest="log_level", metavar="LEVEL")
    general_group.add_argument('--log-max-bytes', type=int,
                               help="Max size in bytes for rotating logs",
                               dest="log_max_bytes", metavar="BYTES")
    general_group.add_argument('--log-backups', type=int,
                               help="Number of rotated log files to keep",
                               dest="log_backups", metavar="COUNT")

    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument('--config', '-c', type=str,
                              help="Load config from this JSON file instead of the default location",
                              dest="config", metavar="CONFIG")

    course_group = parser.add_argument_group("Courses")
    course_group.add_argument('--file', '-f', type=str,
                              help=f"Course file to load (default: {DEFAULT_COURSES_FILE})",
                              dest="file", metavar="FILE")
    course_group.add_argument('--header', type=str, choices=list(HEADER_POLICIES),
                              help="How to treat the first line of the course file (default: parse)",
                              dest="header_policy", metavar="POLICY")
    course_group.add_argument('--case-sensitive', action='store_false', default=None,
                              help="Look up course IDs exactly as typed instead of upper-casing them",
                              dest="uppercase_queries")
    course_group.add_argument('--list', '-l', action='store_true',
                              help="Print all courses in lexicographical order",
                              dest="list_courses")
    course_group.add_argument('--find', '-F', type=str, action='append',
                              help="Print one course and its prerequisites (repeatable)",
                              dest="find", metavar="COURSE_ID")
    course_group.add_argument('--export', '-x', type=str,
                              help="Export the loaded courses to a .csv or .xlsx file",
                              dest="export", metavar="FILE")
    return parser


def _run_actions(args, options, index):
    if args.list_courses:
        print_all_courses(index, verbose=args.verbose)
    for course_id in args.find or []:
        print_course(
            index,
            normalize_course_id(course_id, uppercase=options["UPPERCASE_QUERIES"]),
            verbose=args.verbose,
        )
    if args.export:
        try:
            export_courses(
                index,
                args.export,
                delimiter=options["DELIMITER"],
                dry_run=options["DRY_RUN"],
                verbose=args.verbose,
            )
        except (OSError, ValueError) as e:
            logger.error("Export to %s failed: %s", args.export, e)
            print(f"Error exporting courses: {e}")
            return 1
    return 0


def _interactive_menu(args, options, index, file_path):
    clear = options["CLEAR_SCREEN"]
    sections = _build_menu_sections()
    while True:
        _print_menu(sections, clear=clear)
        try:
            choice = input("Enter your choice: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye!")
            break
        if choice.lower() in ('9', 'q', 'quit', '0'):
            print("\nGoodbye!")
            break
        action = _menu_choice_to_action(choice, sections)
        if action is None:
            print("\nInvalid choice. Try again.")
        elif action == '1':
            load_courses(
                index,
                file_path,
                header_policy=options["HEADER_POLICY"],
                clear=clear,
                verbose=args.verbose,
            )
        elif action == '2':
            print_all_courses(index, clear=clear, verbose=args.verbose)
        elif action == '3':
            try:
                course_id = input("\nEnter course ID (or 'q' to cancel): ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\nGoodbye!")
                break
            if course_id.lower() in ('q', 'quit', ''):
                continue
            print_course(
                index,
                normalize_course_id(course_id, uppercase=options["UPPERCASE_QUERIES"]),
                clear=clear,
                verbose=args.verbose,
            )
        elif action == '4':
            try:
                export_path = input_with_completion("Enter export .csv or .xlsx file path (or 'q' to cancel): ")
            except (EOFError, KeyboardInterrupt):
                print("\nGoodbye!")
                break
            if export_path.lower() in ('q', 'quit', ''):
                continue
            try:
                export_courses(
                    index,
                    export_path,
                    delimiter=options["DELIMITER"],
                    dry_run=options["DRY_RUN"],
                    verbose=args.verbose,
                )
            except (OSError, ValueError) as e:
                logger.error("Export to %s failed: %s", export_path, e)
                print(f"Error exporting courses: {e}")
        try:
            input("\nPress Enter to return to the menu...")
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye!")
            break
    return 0


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config, verbose=args.verbose)
    options = resolve_settings(
        config,
        DEFAULT_COURSES_FILE=args.file,
        HEADER_POLICY=args.header_policy,
        UPPERCASE_QUERIES=args.uppercase_queries,
        CLEAR_SCREEN=False if args.no_clear else None,
        DRY_RUN=args.dry_run,
        LOG_DIR=args.log_dir,
        LOG_LEVEL=args.log_level,
        LOG_MAX_BYTES=args.log_max_bytes,
        LOG_BACKUP_COUNT=args.log_backups,
    )

    setup_logging(
        log_dir=options["LOG_DIR"] or None,
        log_level=options["LOG_LEVEL"],
        max_bytes=options["LOG_MAX_BYTES"],
        backup_count=options["LOG_BACKUP_COUNT"],
        verbose=args.verbose,
    )
    logger.info("course-catalog %s started", __version__)

    # The index lives for this session only.
    index = CourseIndex(delimiter=options["DELIMITER"])

    if args.list_courses or args.find or args.export:
        report = load_courses(
            index,
            options["DEFAULT_COURSES_FILE"],
            header_policy=options["HEADER_POLICY"],
            verbose=args.verbose,
        )
        if report is None:
            return 1
        return _run_actions(args, options, index)

    if args.file:
        file_path = args.file
    else:
        file_path = get_valid_file_path(options["DEFAULT_COURSES_FILE"], verbose=args.verbose)
        if file_path is None:
            print("\nGoodbye!")
            return 0
    return _interactive_menu(args, options, index, file_path)
