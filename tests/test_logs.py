from datetime import datetime

from dodengine import logs
from dodengine.logs import (
    DEFAULT_LOG_FILE,
    LogLevel,
    LogManager,
    format_log,
    get_logs_manager,
    log,
    log_to_file,
)

FIXED = datetime(2024, 1, 2, 3, 4, 5)


def test_format_log_normal():
    assert format_log("hi", LogLevel.NORMAL, FIXED) == "#2024-01-02 03:04:05: hi\n"


def test_format_log_tags():
    normal = format_log("m", LogLevel.NORMAL, FIXED)
    warning = format_log("m", LogLevel.WARNING, FIXED)
    error = format_log("m", LogLevel.ERROR, FIXED)
    assert warning == normal.replace(": m", "[warning]: m")
    assert error == normal.replace(": m", "[error]: m")


def test_internal_logs_are_capped():
    manager = LogManager()
    for i in range(150):
        manager.log_internally(f"msg{i}")
    assert len(manager.internal_logs) == LogManager.MAX_INTERNAL_LOG_COUNT
    assert manager.internal_logs[-1].endswith("msg149\n")
    assert manager.internal_logs[0].endswith("msg50\n")


def test_log_to_file_truncates_first_time(tmp_path):
    path = tmp_path / "log.txt"
    path.write_text("stale content\n")
    manager = LogManager(str(path))
    manager.log_to_file("first")
    manager.log_to_file("second", LogLevel.ERROR)
    lines = path.read_text().splitlines()
    assert len(lines) == 2
    assert lines[0].endswith(": first")
    assert lines[1].endswith("[error]: second")


def test_init_resets_truncation(tmp_path):
    path = tmp_path / "log.txt"
    manager = LogManager(str(path))
    manager.log_to_file("a")
    manager.init(str(path))
    manager.log_to_file("b")
    lines = path.read_text().splitlines()
    assert len(lines) == 1
    assert lines[0].endswith(": b")


def test_module_log_to_file_appends(tmp_path):
    path = tmp_path / "append.txt"
    path.write_text("keep\n")
    log_to_file(str(path), "more", LogLevel.WARNING)
    lines = path.read_text().splitlines()
    assert lines[0] == "keep"
    assert lines[1].endswith("[warning]: more")


def test_module_log_to_file_missing_dir(tmp_path):
    path = tmp_path / "missing" / "x.txt"
    log_to_file(str(path), "lost")
    assert not path.exists()


def test_log_to_console(capsys):
    LogManager().log_to_console("hello")
    out = capsys.readouterr().out
    assert out.startswith("#")
    assert out.endswith(": hello\n")


def test_log_writes_everywhere(tmp_path, capsys):
    path = tmp_path / "all.txt"
    manager = LogManager(str(path))
    manager.log("event")
    assert manager.internal_logs[-1].endswith(": event\n")
    assert path.read_text().endswith(": event\n")
    assert capsys.readouterr().out.endswith(": event\n")


def test_empty_name_uses_default(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    manager = LogManager()
    manager.log_to_file("x")
    assert manager.name == DEFAULT_LOG_FILE
    assert (tmp_path / DEFAULT_LOG_FILE).read_text().endswith(": x\n")


def test_global_log(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(logs, "_logs_manager", LogManager())
    log("global message")
    manager = get_logs_manager()
    assert manager.internal_logs[-1].endswith(": global message\n")


def test_get_logs_manager_returns_copy(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(logs, "_logs_manager", LogManager())
    log("one")
    snapshot = get_logs_manager()
    log("two")
    assert len(snapshot.internal_logs) == 1
    assert len(get_logs_manager().internal_logs) == 2