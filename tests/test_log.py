import logging

import pytest

from twentygames import log as engine_log


@pytest.fixture
def log_path(tmp_path):
    yield tmp_path / "engine_log_test.log"
    engine_log.shutdown()


def test_init_installs_logger_and_accepts_calls(log_path):
    logger = engine_log.init(
        engine_log.LogConfig(
            file_path=log_path,
            max_file_bytes=64 * 1024,
            max_files=2,
            level=engine_log.TRACE,
        )
    )
    assert logger is logging.getLogger("engine")
    assert logger.name == "engine"
    assert logger.level == engine_log.TRACE

    logger.info("log smoke test - info")
    logger.warning("log smoke test - warn")
    for handler in logger.handlers:
        handler.flush()

    assert log_path.exists()
    assert log_path.stat().st_size > 0
    text = log_path.read_text(encoding="utf-8")
    assert "[info] log smoke test - info" in text
    assert "[warning] log smoke test - warn" in text


def test_level_filters_lower_severities(log_path):
    logger = engine_log.init(engine_log.LogConfig(file_path=log_path, level=logging.WARNING))
    logger.info("hidden line")
    logger.error("visible line")
    engine_log.shutdown()
    text = log_path.read_text(encoding="utf-8")
    assert "hidden line" not in text
    assert "[error] visible line" in text


def test_reinit_replaces_previous_sink(tmp_path, log_path):
    engine_log.init(engine_log.LogConfig(file_path=tmp_path / "first.log"))
    logger = engine_log.init(engine_log.LogConfig(file_path=log_path))
    assert len(logger.handlers) == 1
    logger.warning("second config")
    engine_log.shutdown()
    assert "second config" in log_path.read_text(encoding="utf-8")
    assert "second config" not in (tmp_path / "first.log").read_text(encoding="utf-8")


def test_shutdown_removes_handlers(log_path):
    logger = engine_log.init(engine_log.LogConfig(file_path=log_path))
    assert len(logger.handlers) == 1
    engine_log.shutdown()
    assert logger.handlers == []


def test_missing_parent_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        engine_log.init(engine_log.LogConfig(file_path=tmp_path / "absent" / "x.log"))


def test_rotation_creates_backup_file(log_path):
    logger = engine_log.init(
        engine_log.LogConfig(file_path=log_path, max_file_bytes=200, max_files=2)
    )
    for n in range(20):
        logger.warning("rotation filler line number %d", n)
    engine_log.shutdown()
    assert log_path.with_name(log_path.name + ".1").exists()
    assert not log_path.with_name(log_path.name + ".3").exists()