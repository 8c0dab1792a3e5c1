"""Tests for the eventcite command-line tool."""

import io
import json
import logging

import pytest

from eventcite.cli import main, render_text
from eventcite.utils import resolve_log_level, setup_logging

DESCRIPTION = (
    'Apollo 11 lands <a href="http://nasa.gov">on the Moon</a>.'
    "{{cite news|last=Wilford|first=John|title=Men Walk on Moon|work=The New York Times|date=1969-07-21|url=http://nyt.com/moon}}"
)


def run(argv, stdin_text=""):
    stdout = io.StringIO()
    code = main(argv, stdin=io.StringIO(stdin_text), stdout=stdout)
    return code, stdout.getvalue()


def test_render_text():
    rendered = render_text(DESCRIPTION, show_urls=True)
    assert rendered.splitlines() == [
        "Apollo 11 lands on the Moon.",
        '  1. John Wilford, "Men Walk on Moon", The New York Times, 1969-07-21, http://nyt.com/moon',
        "  URLs:",
        "    - http://nasa.gov",
        "    - http://nyt.com/moon",
    ]


def test_reads_stdin_as_text():
    code, out = run([], stdin_text=DESCRIPTION)
    assert code == 0
    assert out.startswith("Apollo 11 lands on the Moon.\n  1. John Wilford")
    assert "URLs:" not in out


def test_json_output_per_line(tmp_path):
    path = tmp_path / "events.txt"
    path.write_text(DESCRIPTION + "\n\nPlain event &amp; more\n", encoding="utf-8")

    code, out = run([str(path), "--lines", "--format", "json", "--urls"])
    assert code == 0

    lines = out.strip().splitlines()
    assert len(lines) == 2
    first = json.loads(lines[0])
    assert first["cleanText"] == "Apollo 11 lands on the Moon."
    assert first["citations"][0]["type"] == "news"
    assert first["citations"][0]["author"] == "John Wilford"
    assert first["urls"] == ["http://nasa.gov", "http://nyt.com/moon"]
    assert json.loads(lines[1]) == {"cleanText": "Plain event & more", "citations": [], "urls": []}


def test_config_supplies_defaults(tmp_path):
    cfg_path = tmp_path / "eventcite.yaml"
    cfg_path.write_text("format: json\n")

    code, out = run(["--config", str(cfg_path)], stdin_text=DESCRIPTION)
    assert code == 0
    assert json.loads(out)["cleanText"] == "Apollo 11 lands on the Moon."


def test_flags_override_config(tmp_path):
    cfg_path = tmp_path / "eventcite.yaml"
    cfg_path.write_text("format: json\n")

    code, out = run(["--config", str(cfg_path), "--format", "text"], stdin_text=DESCRIPTION)
    assert code == 0
    assert out.startswith("Apollo 11 lands on the Moon.")


def test_bad_config_exits_with_usage_error(tmp_path):
    cfg_path = tmp_path / "bad.yaml"
    cfg_path.write_text("format: xml\n")

    with pytest.raises(SystemExit) as excinfo:
        run(["--config", str(cfg_path)])
    assert excinfo.value.code == 2


def test_missing_input_file_exits_with_usage_error(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        run([str(tmp_path / "missing.txt")])
    assert excinfo.value.code == 2


def test_undecodable_input_file_exits_with_usage_error(tmp_path):
    path = tmp_path / "latin.txt"
    path.write_bytes(b"\xff\xfe")

    with pytest.raises(SystemExit) as excinfo:
        run([str(path)])
    assert excinfo.value.code == 2


def test_numeric_log_level_in_config_exits_with_usage_error(tmp_path):
    cfg_path = tmp_path / "level.yaml"
    cfg_path.write_text("log_level: 10\n")

    with pytest.raises(SystemExit) as excinfo:
        run(["--config", str(cfg_path)], stdin_text=DESCRIPTION)
    assert excinfo.value.code == 2


def test_blank_input_prints_nothing():
    code, out = run([], stdin_text="   \n")
    assert code == 0
    assert out == ""


def test_setup_logging_writes_file(tmp_path, monkeypatch):
    log_file = tmp_path / "logs" / "eventcite.log"
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])

    setup_logging("DEBUG", str(log_file))
    logging.getLogger("eventcite.test").debug("hello")
    for handler in root.handlers:
        handler.flush()
        handler.close()

    assert log_file.parent.is_dir()
    assert "[DEBUG] eventcite.test - hello" in log_file.read_text()


def test_resolve_log_level(monkeypatch):
    monkeypatch.setenv("EVENTCITE_LOG_LEVEL", "warning")
    assert resolve_log_level(None) == logging.WARNING
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level("chatty") == logging.INFO
