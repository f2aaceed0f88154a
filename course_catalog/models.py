"""Course records, load reports and the errors raised while loading them."""

from dataclasses import dataclass, field


class CatalogError(Exception):
    """Base class for errors raised by the course catalog."""


class FileUnreadable(CatalogError):
    """The course file could not be opened or read."""

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = f"Unable to open file at '{path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class MalformedLine(CatalogError, ValueError):
    """A line did not contain at least an identifier and a name."""

    def __init__(self, line, line_number=None):
        self.line = line
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"Skipping malformed {where}: {line}")


@dataclass(frozen=True)
class CourseRecord:
    course_id: str
    name: str
    prerequisites: tuple = ()

    def __post_init__(self):
        # Accept any iterable but store an immutable copy.
        object.__setattr__(self, "prerequisites", tuple(self.prerequisites))


@dataclass
class LoadReport:
    path: str
    loaded: int = 0
    skipped: int = 0
    elapsed: float = 0.0
    warnings: list = field(default_factory=list)

    @property
    def elapsed_ms(self):
        return int(self.elapsed * 1000)
