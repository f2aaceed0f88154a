"""Load course records from a delimited file into a sorted in-memory index."""

from .version import __version__
from .models import CatalogError, CourseRecord, FileUnreadable, LoadReport, MalformedLine
from .parser import parse_line
from .index import CourseIndex

__all__ = [
    "__version__",
    "CatalogError",
    "CourseIndex",
    "CourseRecord",
    "FileUnreadable",
    "LoadReport",
    "MalformedLine",
    "parse_line",
]
