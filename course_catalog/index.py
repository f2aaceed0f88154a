"""Sorted in-memory index of course records."""

import logging
import time

from sortedcontainers import SortedDict
from tqdm import tqdm

from .models import FileUnreadable, LoadReport, MalformedLine
from .parser import parse_line
from .settings import DELIMITER, HEADER_NAMES, HEADER_POLICIES, HEADER_POLICY

logger = logging.getLogger("course_catalog.index")


def _looks_like_header(line, delimiter=DELIMITER):
    first = line.rstrip("\r\n").split(delimiter)[0]
    return first.lstrip("\ufeff").strip().casefold() in HEADER_NAMES


class CourseIndex:
    """
    Ordered mapping from course id to CourseRecord.
    Keys are kept in ascending string order as entries are inserted, so
    listing never sorts. Lookups are exact and case-sensitive.
    """

    def __init__(self, delimiter=DELIMITER):
        self.delimiter = delimiter
        self._courses = SortedDict()

    def __len__(self):
        return len(self._courses)

    def __contains__(self, course_id):
        return course_id in self._courses

    def __iter__(self):
        return iter(self._courses)

    def __repr__(self):
        return f"<CourseIndex courses={len(self)}>"

    def insert(self, record):
        # Replaces any previous record with the same id; prerequisites are not merged.
        self._courses[record.course_id] = record

    def find(self, course_id):
        """Return the record stored under course_id, or None."""
        record = self._courses.get(course_id)
        logger.debug("Lookup %r: %s", course_id, "found" if record else "not found")
        return record

    def all_in_order(self):
        """Return every (course_id, record) pair in ascending id order."""
        return list(self._courses.items())

    def load_from(self, path, header_policy=HEADER_POLICY, show_progress=False):
        """
        Load course records from a delimited text file.
        Blank lines are ignored; malformed lines are skipped and reported in
        the returned LoadReport. Records from this file are inserted only
        after the whole file has been read, so a read failure leaves the
        index unchanged. Existing entries are kept; records with an existing
        id replace the old ones.
        Bytes that are not valid UTF-8 are replaced, so any readable file loads.
        Raises FileUnreadable if the file cannot be opened or read.
        """
        if header_policy not in HEADER_POLICIES:
            raise ValueError(
                f"Unknown header policy {header_policy!r}; expected one of {', '.join(HEADER_POLICIES)}"
            )
        start = time.perf_counter()
        report = LoadReport(path=str(path))
        records = []
        logger.info("Loading courses from %s (header policy: %s)", path, header_policy)
        try:
            # utf-8-sig drops a leading BOM; invalid bytes become U+FFFD.
            with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
                first_seen = False
                lines = tqdm(f, desc="Loading courses", unit=" lines", disable=not show_progress)
                for line_number, line in enumerate(lines, 1):
                    if not line.strip():
                        continue
                    if not first_seen:
                        first_seen = True
                        if header_policy == "skip" or (
                            header_policy == "detect" and _looks_like_header(line, self.delimiter)
                        ):
                            logger.info("Skipping header line %d: %s", line_number, line.rstrip("\r\n"))
                            continue
                    try:
                        records.append(parse_line(line, self.delimiter, line_number=line_number))
                    except MalformedLine as e:
                        report.skipped += 1
                        report.warnings.append(str(e))
                        logger.warning("%s: %s", path, e)
        except OSError as e:
            logger.error("Unable to read %s: %s", path, e)
            raise FileUnreadable(path, reason=e) from e

        for record in records:
            self.insert(record)
        report.loaded = len(records)
        report.elapsed = time.perf_counter() - start
        logger.info(
            "Loaded %d course(s) from %s, skipped %d malformed line(s) in %d ms",
            report.loaded, path, report.skipped, report.elapsed_ms,
        )
        return report
