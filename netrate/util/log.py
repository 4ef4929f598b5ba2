import logging
import os
from pathlib import Path

from netrate.util import system

LOG_FORMAT = "%(asctime)s %(padded)s {name}.%(funcName)s - %(message)s"


class LevelPadFormatter(logging.Formatter):
    LEVEL_WIDTH = len("WARNING")

    def format(self, record):
        level = record.levelname
        record.padded = f"[{level}]" + " " * (self.LEVEL_WIDTH - len(level))
        return super().format(record)


def default_logfile() -> Path:
    return system.get_cache_directory() / "netrate.log"


def configure(debug: bool, name: str, logfile: Path) -> logging.Logger:
    """
    Send the named logger to logfile only. Calling it again adjusts the level
    and moves the output if logfile changed.
    """
    level = logging.DEBUG if debug else logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Keep log lines out of the terminal table
    logger.propagate = False

    target = os.path.abspath(logfile)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.FileHandler):
            continue
        if handler.baseFilename == target:
            handler.setLevel(level)
            return logger
        logger.removeHandler(handler)
        handler.close()

    handler = logging.FileHandler(logfile, mode="a", encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(LevelPadFormatter(LOG_FORMAT.format(name=name)))
    logger.addHandler(handler)

    return logger
