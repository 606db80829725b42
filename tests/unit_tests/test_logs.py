"""Test diagnostic logger construction."""

import os

from text_mirror.logs import new_logger


def test_new_logger_no_file(tmp_path):
    """No file is created when not logging to a file."""
    log_file_path = tmp_path / "no_log.log"
    logger = new_logger(False, str(log_file_path))

    assert logger is not None
    assert not log_file_path.exists(), "log file should not be created if to_file is false"


def test_new_logger_to_stderr(capsys):
    """Without a file, entries go to stderr."""
    logger = new_logger(False, "unused.log")
    logger.info("stderr entry", answer=42)

    captured = capsys.readouterr()
    assert "stderr entry" in captured.err
    assert "answer=42" in captured.err
    assert captured.out == ""


def test_new_logger_out_file(tmp_path):
    """Entries are appended to the log file."""
    log_file_path = tmp_path / "debug.log"
    log_file_path.write_text("existing line\n", encoding="utf-8")

    logger = new_logger(True, str(log_file_path))
    logger.info("test log entry")
    logger.debug("Mirrored text", original="ab", mirrored="ba")

    content = log_file_path.read_text(encoding="utf-8")
    assert content.startswith("existing line\n"), "log file should be appended to"
    assert "test log entry" in content
    assert "level='debug'" in content
    assert "mirrored='ba'" in content
    assert "timestamp=" in content


def test_new_logger_creates_file_with_permissions(tmp_path):
    """A missing log file is created."""
    log_file_path = tmp_path / "new.log"

    logger = new_logger(True, str(log_file_path))
    logger.info("created")

    assert log_file_path.exists()
    assert os.stat(log_file_path).st_mode & 0o777 == 0o644 & ~_umask()


def test_new_logger_falls_back_to_stderr(tmp_path, capsys):
    """If the file cannot be opened, entries silently go to stderr instead."""
    log_file_path = tmp_path / "missing" / "debug.log"

    logger = new_logger(True, str(log_file_path))
    logger.info("fallback entry")

    assert not log_file_path.exists()
    lines = capsys.readouterr().err.splitlines()
    assert len(lines) == 1, f"Expected only the logged entry, got {lines!r}"
    assert "fallback entry" in lines[0]


def _umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask
