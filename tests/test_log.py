import logging
from pathlib import Path

from netrate.util import log


def test_reconfigure_raises_level(tmp_path: Path):
    logfile = tmp_path / "test.log"
    logger = log.configure(debug=False, name="netrate-test-level", logfile=logfile)
    logger.debug("hidden")

    logger = log.configure(debug=True, name="netrate-test-level", logfile=logfile)
    logger.debug("shown")

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1

    text = logfile.read_text()
    assert "hidden" not in text
    assert "[DEBUG]   netrate-test-level.test_reconfigure_raises_level - shown" in text


def test_reconfigure_moves_to_new_file(tmp_path: Path):
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"
    log.configure(debug=False, name="netrate-test-move", logfile=first)
    logger = log.configure(debug=False, name="netrate-test-move", logfile=second)
    logger.warning("moved")

    assert "moved" not in first.read_text()
    assert "[WARNING] netrate-test-move.test_reconfigure_moves_to_new_file - moved" in (
        second.read_text()
    )
    assert len(logger.handlers) == 1


def test_default_logfile(cache_home: Path):
    assert log.default_logfile() == cache_home / "netrate" / "netrate.log"
    assert (cache_home / "netrate").is_dir()
