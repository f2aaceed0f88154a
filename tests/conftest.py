import logging

import pytest

from course_catalog import CourseIndex

SAMPLE_COURSES = """\
MATH201,Discrete Mathematics
CSCI300,Introduction to Algorithms,CSCI200,MATH201
CSCI350,Operating Systems,CSCI300
CSCI101,Introduction to Programming in C++,CSCI100
CSCI100,Introduction to Computer Science
CSCI301,Advanced Programming in C++,CSCI101
CSCI400,Large Software Development,CSCI301,CSCI350
CSCI200,Data Structures,CSCI101
"""


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep the default config location and log handlers inside the test's tmp dir."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    yield home
    logger = logging.getLogger("course_catalog")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


@pytest.fixture
def write_courses(tmp_path):
    def _write(text, name="courses.csv", encoding="utf-8"):
        path = tmp_path / name
        if isinstance(text, bytes):
            path.write_bytes(text)
        else:
            path.write_text(text, encoding=encoding)
        return path
    return _write


@pytest.fixture
def courses_file(write_courses):
    return write_courses(SAMPLE_COURSES)


@pytest.fixture
def loaded_index(courses_file):
    index = CourseIndex()
    index.load_from(courses_file)
    return index
