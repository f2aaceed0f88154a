"""Parse one line of a course file into a CourseRecord."""

from .models import CourseRecord, MalformedLine
from .settings import DELIMITER


def parse_line(line, delimiter=DELIMITER, line_number=None):
    """
    Split a line on every delimiter and build a CourseRecord.
    Fields are taken verbatim (no quoting, no trimming); only the line
    terminator is removed. The first field is the course id, the second the
    name, the rest are prerequisites in source order. A trailing delimiter
    yields an empty-string prerequisite.
    Raises MalformedLine when fewer than two fields are present.
    """
    tokens = line.rstrip("\r\n").split(delimiter)
    if len(tokens) < 2:
        raise MalformedLine(line.rstrip("\r\n"), line_number=line_number)
    return CourseRecord(course_id=tokens[0], name=tokens[1], prerequisites=tokens[2:])
