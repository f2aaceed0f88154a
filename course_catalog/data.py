# -*- coding: utf-8 -*-
# Printing and exporting the course index

import os
import time

import openpyxl
import pandas as pd
from openpyxl.styles import Alignment
from tqdm import tqdm

from .settings import *
from .models import FileUnreadable
from .utils import GREEN, RED, clear_console, style


def _print_complexity(note):
    print(style(f"Time Complexity: {note}", GREEN))


def _elapsed_ms(start):
    return int((time.perf_counter() - start) * 1000)


def load_courses(index, file_path, header_policy=HEADER_POLICY, clear=False, verbose=False):
    """
    Load a course file into the index and print a summary.
    Returns the LoadReport, or None if the file could not be read.
    """
    if clear:
        clear_console()
    if verbose:
        print(f"[LoadCourses] Reading {file_path} (header policy: {header_policy})")
    try:
        report = index.load_from(file_path, header_policy=header_policy, show_progress=verbose)
    except FileUnreadable as e:
        if verbose:
            print(f"[LoadCourses] {e}")
        else:
            print(style(f"\nError: Unable to open file at {file_path}", RED))
        return None

    for warning in report.warnings:
        print(f"\nWarning: {warning}")
    if verbose:
        print(f"[LoadCourses] Parsed {report.loaded} record(s), skipped {report.skipped}, index now holds {len(index)} course(s).")
    print(f"\nCourses successfully loaded into the system in {report.elapsed_ms} ms.")
    _print_complexity("O(n log n) due to map insertion for n courses.")
    return report


def print_all_courses(index, clear=False, verbose=False):
    """
    Print every course as 'ID: Name' in ascending id order.
    Returns the number of courses printed.
    """
    if clear:
        clear_console()
    start = time.perf_counter()
    courses = index.all_in_order()
    if not courses:
        print("\nNo courses available. Load data first.")
        return 0

    print("All Courses (Lexicographical Order):")
    for course_id, course in courses:
        print(f"{course_id}: {course.name}")

    print(f"\nAll courses displayed in {_elapsed_ms(start)} ms.")
    _print_complexity("O(n) for in-order traversal of map.")
    if verbose:
        print(f"[PrintAllCourses] Listed {len(courses)} course(s).")
    return len(courses)


def format_prerequisites(course):
    if not course.prerequisites:
        return "None"
    return ", ".join(course.prerequisites)


def print_course(index, course_id, clear=False, verbose=False):
    """
    Print the id, name and prerequisites of one course.
    The lookup is exact; normalize course_id before calling if needed.
    Returns the CourseRecord, or None if it is not in the index.
    """
    if clear:
        clear_console()
    start = time.perf_counter()
    course = index.find(course_id)
    if course is None:
        print(f"\nError: Course with ID {course_id} not found.")
    else:
        print(f"Course ID: {course.course_id}")
        print(f"Course Name: {course.name}")
        print(f"Prerequisites: {format_prerequisites(course)}")

    print(f"\nCourse search completed in {_elapsed_ms(start)} ms.")
    _print_complexity("O(log n) for map lookup.")
    return course


def _autofit_columns(file_path):
    wb = openpyxl.load_workbook(file_path)
    ws = wb.active
    for col in ws.columns:
        col_letter = openpyxl.utils.get_column_letter(col[0].column)
        max_length = max(len(str(cell.value)) if cell.value is not None else 0 for cell in col)
        for cell in col[1:]:
            cell.alignment = Alignment(horizontal='left')
        ws.column_dimensions[col_letter].width = max_length + 2
    wb.save(file_path)


def export_courses(index, file_path, delimiter=DELIMITER, dry_run=DRY_RUN, verbose=False):
    """
    Export the index in id order.
    .csv files are written in the course file format (id, name, prerequisites...),
    so they can be loaded back. .xlsx files get one row per course with the
    prerequisites joined by ', '.
    Returns the path written, or None if nothing was exported.
    """
    courses = index.all_in_order()
    if not courses:
        if verbose:
            print("[ExportCourses] No courses to export.")
        else:
            print("No courses to export. Load data first.")
        return None

    ext = os.path.splitext(file_path)[1].lower()
    if ext not in (".csv", ".xlsx"):
        raise ValueError("Unsupported file type. Please provide a .csv or .xlsx file.")
    if dry_run:
        print(f"[ExportCourses] Dry run: would export {len(courses)} course(s) to {file_path}")
        return None

    dir_path = os.path.dirname(file_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)
    if verbose:
        print(f"[ExportCourses] Exporting {len(courses)} course(s) to {file_path}")

    if ext == ".csv":
        with open(file_path, "w", encoding="utf-8", newline="") as f:
            for course_id, course in tqdm(courses, desc="Exporting", disable=not verbose):
                f.write(delimiter.join([course_id, course.name, *course.prerequisites]) + "\n")
    else:
        rows = [
            {
                "Course ID": course_id,
                "Course Name": course.name,
                "Prerequisites": ", ".join(course.prerequisites),
            }
            for course_id, course in tqdm(courses, desc="Exporting", disable=not verbose)
        ]
        df = pd.DataFrame(rows, columns=["Course ID", "Course Name", "Prerequisites"])
        df.to_excel(file_path, index=False)
        _autofit_columns(file_path)

    print(f"Exported {len(courses)} course(s) to {file_path}")
    return file_path
