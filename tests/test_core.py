import json

import pytest

from course_catalog.core import main, normalize_course_id


@pytest.fixture
def feed_input(monkeypatch):
    def _feed(*answers):
        remaining = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr("builtins.input", fake_input)
    return _feed


def test_normalize_course_id():
    assert normalize_course_id(" csci300 ") == "CSCI300"
    assert normalize_course_id(" csci300 ", uppercase=False) == "csci300"


def test_list_courses(courses_file, tmp_path, capsys):
    assert main(["--file", str(courses_file), "--list", "--log-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Courses successfully loaded" in out
    assert out.index("CSCI100: Introduction to Computer Science") < out.index("MATH201: Discrete Mathematics")


def test_find_upper_cases_query(courses_file, tmp_path, capsys):
    assert main(["-f", str(courses_file), "--find", "csci300", "--log-dir", str(tmp_path)]) == 0
    assert "Course Name: Introduction to Algorithms" in capsys.readouterr().out


def test_find_case_sensitive(courses_file, tmp_path, capsys):
    assert main(["-f", str(courses_file), "-F", "csci300", "--case-sensitive", "--log-dir", str(tmp_path)]) == 0
    assert "Course with ID csci300 not found." in capsys.readouterr().out


def test_find_multiple(courses_file, tmp_path, capsys):
    main(["-f", str(courses_file), "-F", "CSCI100", "-F", "MATH201", "--log-dir", str(tmp_path)])
    out = capsys.readouterr().out
    assert "Course ID: CSCI100" in out
    assert "Course ID: MATH201" in out


def test_unreadable_file_exits_with_error(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "missing.csv"), "--list", "--log-dir", str(tmp_path)]) == 1
    assert "Unable to open file" in capsys.readouterr().out


def test_export_action(courses_file, tmp_path):
    target = tmp_path / "export.csv"
    assert main(["-f", str(courses_file), "--export", str(target), "--log-dir", str(tmp_path)]) == 0
    assert target.read_text(encoding="utf-8").startswith("CSCI100,")


def test_export_action_bad_extension(courses_file, tmp_path, capsys):
    assert main(["-f", str(courses_file), "-x", str(tmp_path / "export.txt"), "--log-dir", str(tmp_path)]) == 1
    assert "Error exporting courses" in capsys.readouterr().out


def test_config_file_sets_header_policy(write_courses, tmp_path, capsys):
    courses = write_courses("Course ID,Name\nCSCI100,Intro\n")
    cfg = tmp_path / "config.json"
    cfg.write_text(json.dumps({"HEADER_POLICY": "detect"}), encoding="utf-8")
    main(["-c", str(cfg), "-f", str(courses), "--list", "--log-dir", str(tmp_path)])
    out = capsys.readouterr().out
    assert "CSCI100: Intro" in out
    assert "Course ID: Name" not in out


def test_header_flag_overrides_config(write_courses, tmp_path, capsys):
    courses = write_courses("Course ID,Name\nCSCI100,Intro\n")
    cfg = tmp_path / "config.json"
    cfg.write_text(json.dumps({"HEADER_POLICY": "detect"}), encoding="utf-8")
    main(["-c", str(cfg), "-f", str(courses), "--header", "parse", "--list", "--log-dir", str(tmp_path)])
    assert "Course ID: Name" in capsys.readouterr().out


def test_log_file_is_written(courses_file, tmp_path):
    main(["-f", str(courses_file), "--list", "--log-dir", str(tmp_path)])
    log_text = (tmp_path / "course_catalog.log").read_text(encoding="utf-8")
    assert "Loaded 8 course(s)" in log_text


def test_interactive_session(courses_file, tmp_path, feed_input, capsys):
    feed_input("2", "", "1", "", "3", "csci350", "", "7", "", "9")
    assert main(["-f", str(courses_file), "--no-clear", "--log-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "No courses available. Load data first." in out
    assert "Courses successfully loaded" in out
    assert "Course Name: Operating Systems" in out
    assert "Prerequisites: CSCI300" in out
    assert "Invalid choice. Try again." in out
    assert out.rstrip().endswith("Goodbye!")


def test_interactive_default_file(courses_file, tmp_path, monkeypatch, feed_input, capsys):
    (tmp_path / "coursesFile.csv").write_text("CSCI100,Intro\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    feed_input("", "1", "", "2", "", "q")
    assert main(["--no-clear", "--log-dir", str(tmp_path)]) == 0
    assert "CSCI100: Intro" in capsys.readouterr().out


def test_interactive_reprompts_for_missing_file(courses_file, tmp_path, feed_input, capsys):
    feed_input(str(tmp_path / "missing.csv"), str(courses_file), "1", "", "9")
    assert main(["--no-clear", "--log-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Please try again." in out
    assert "Courses successfully loaded" in out


def test_interactive_quit_at_file_prompt(tmp_path, feed_input, capsys):
    feed_input("q")
    assert main(["--no-clear", "--log-dir", str(tmp_path)]) == 0
    assert "Goodbye!" in capsys.readouterr().out


def test_interactive_eof_at_file_prompt(tmp_path, feed_input, capsys):
    feed_input()
    assert main(["--no-clear", "--log-dir", str(tmp_path)]) == 0
    assert "Goodbye!" in capsys.readouterr().out


def test_interactive_eof_at_course_id_prompt(courses_file, tmp_path, feed_input, capsys):
    feed_input("1", "", "3")
    assert main(["-f", str(courses_file), "--no-clear", "--log-dir", str(tmp_path)]) == 0
    assert capsys.readouterr().out.rstrip().endswith("Goodbye!")


def test_interactive_ctrl_c_at_export_prompt(courses_file, tmp_path, monkeypatch, capsys):
    def interrupt(prompt=""):
        raise KeyboardInterrupt
    monkeypatch.setattr("course_catalog.core.input_with_completion", interrupt)
    monkeypatch.setattr("builtins.input", lambda prompt="": "4")
    assert main(["-f", str(courses_file), "--no-clear", "--log-dir", str(tmp_path)]) == 0
    assert capsys.readouterr().out.rstrip().endswith("Goodbye!")


def test_interactive_export(courses_file, tmp_path, feed_input):
    target = tmp_path / "menu_export.xlsx"
    feed_input("1", "", "4", str(target), "", "9")
    assert main(["-f", str(courses_file), "--no-clear", "--log-dir", str(tmp_path)]) == 0
    assert target.exists()
