"""Package settings and defaults."""

### Constants and Configurations
# === Course file ===
# Used when the user presses Enter at the file prompt or passes no --file.
DEFAULT_COURSES_FILE = "coursesFile.csv"
DELIMITER = ","

# 'parse' treats the first line like any other, 'skip' always drops it,
# 'detect' drops it only when its first field looks like a column name.
HEADER_POLICY = "parse"
HEADER_POLICIES = ("parse", "skip", "detect")
HEADER_NAMES = (
    "id",
    "course",
    "course id",
    "courseid",
    "course_id",
    "course number",
    "code",
    "course code",
)

# The index is case-sensitive; the CLI upper-cases queries before lookup.
UPPERCASE_QUERIES = True

# === Console ===
CLEAR_SCREEN = True
DRY_RUN = False

# === Logging ===
LOG_DIR = ""
LOG_LEVEL = "INFO"
LOG_MAX_BYTES = 5_000_000
LOG_BACKUP_COUNT = 3
LOG_FILE_NAME = "course_catalog.log"
