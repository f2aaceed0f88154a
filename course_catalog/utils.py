# -*- coding: utf-8 -*-
# Console helpers: logging, path prompts, ANSI styling

import glob
import logging
import os
try:
    import readline
except ImportError:  # Windows without pyreadline installed
    readline = None
from logging.handlers import RotatingFileHandler

from .settings import *


def complete_path(text, state):
    """
    Tab-completion for file paths typed at the course file prompt.
    - Expands ~ and $HOME.
    - Adds a trailing separator to directories.
    - Hides dotfiles unless the prefix starts with '.'.
    """
    expanded = os.path.expandvars(os.path.expanduser(text or ""))
    if expanded.endswith(os.sep):
        dirname, prefix = expanded, ""
    else:
        dirname = os.path.dirname(expanded)
        prefix = os.path.basename(expanded)

    matches = []
    for candidate in glob.glob(os.path.join(dirname or ".", prefix + "*")):
        name = os.path.basename(candidate)
        if name.startswith(".") and not prefix.startswith("."):
            continue
        shown = os.path.join(dirname, name) if dirname else name
        if os.path.isdir(candidate):
            shown += os.sep
        matches.append(shown)

    matches = sorted(set(matches))
    try:
        return matches[state]
    except IndexError:
        return None


def input_with_completion(prompt):
    """Read a path from the user with tab-completion; ~ and $VARS are expanded."""
    if readline:
        readline.set_completer_delims(' \t\n;')
        readline.parse_and_bind("tab: complete")
        readline.set_completer(complete_path)
    try:
        user_input = input(prompt).strip()
        if not user_input:
            return ""
        return os.path.expandvars(os.path.expanduser(user_input))
    finally:
        if readline:
            readline.set_completer(None)


def is_readable_file(path):
    try:
        with open(path, "r", encoding="utf-8"):
            return True
    except OSError:
        return False


def get_valid_file_path(default_path=DEFAULT_COURSES_FILE, verbose=False):
    """
    Prompt until the user names a course file that can be opened.
    Pressing Enter uses default_path. Returns None if the user types 'q',
    closes the input stream or presses Ctrl-C.
    """
    while True:
        try:
            file_path = input_with_completion(
                f"\nEnter the file name (press Enter to use default: '{default_path}', or 'q' to quit): "
            )
        except (EOFError, KeyboardInterrupt):
            print()
            return None
        if file_path.lower() in ('q', 'quit'):
            return None
        if not file_path:
            file_path = default_path
        if is_readable_file(file_path):
            if verbose:
                print(f"[FilePath] Using course file: {file_path}")
            return file_path
        print(f"\nError: Unable to open file at '{file_path}'. Please try again.")


def _enable_ansi():
    if os.name != "nt":
        return True
    try:
        import ctypes

        kernel32 = ctypes.windll.kernel32
        handle = kernel32.GetStdHandle(-11)
        mode = ctypes.c_uint()
        if kernel32.GetConsoleMode(handle, ctypes.byref(mode)) == 0:
            return False
        if kernel32.SetConsoleMode(handle, mode.value | 0x0004) == 0:
            return False
        return True
    except Exception:
        return False


ANSI_ENABLED = _enable_ansi()
GREEN = "32"
RED = "31"
BOLD_CYAN = ("1", "36")


def style(text, *codes):
    if not ANSI_ENABLED or not codes:
        return text
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


def clear_console():
    os.system("cls" if os.name == "nt" else "clear")


def setup_logging(log_dir=None, log_level="INFO", max_bytes=LOG_MAX_BYTES, backup_count=LOG_BACKUP_COUNT, verbose=False):
    """
    Configure rotating file logging for the CLI. Returns the logger instance.
    """
    logger = logging.getLogger("course_catalog")
    if any(isinstance(handler, RotatingFileHandler) for handler in logger.handlers):
        return logger
    level = getattr(logging, str(log_level).upper(), logging.INFO)
    logger.setLevel(level)
    log_dir = log_dir or os.getcwd()
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError as e:
        if verbose:
            print(f"[Logging] Failed to create log dir {log_dir}: {e}")
        log_dir = os.getcwd()
    log_path = os.path.join(log_dir, LOG_FILE_NAME)
    handler = RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    if verbose:
        print(f"[Logging] Writing logs to {log_path}")
    return logger
