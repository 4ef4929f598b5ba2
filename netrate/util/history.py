import json
import logging
import math
from dataclasses import asdict
from pathlib import Path

from dacite import Config, DaciteError, from_dict
from netrate.data.net_dev import History, Snapshot

logger = logging.getLogger(__name__)


class HistoryError(Exception):
    pass


def load(path: Path) -> Snapshot | None:
    """
    Load the snapshot saved by a previous run. A missing or unusable file
    means there is nothing to compare against.
    """
    if not path.exists():
        logger.debug(f'history file "{path}" does not exist')
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.warning(f'ignoring history file "{path}": {e}')
        return None

    if not isinstance(data, dict):
        logger.warning(f'ignoring history file "{path}": not a JSON object')
        return None

    try:
        history = from_dict(
            data_class=History,
            data=data,
            config=Config(cast=[float]),
        )
    except (DaciteError, TypeError, ValueError) as e:
        logger.warning(f'ignoring history file "{path}": {e}')
        return None

    if not math.isfinite(history.timestamp):
        logger.warning(f'ignoring history file "{path}": bad timestamp')
        return None

    # Only the wall clock survives between runs; see rebase()
    return Snapshot(
        timestamp=history.timestamp,
        wall_time=history.timestamp,
        devices=history.devices,
    )


def save(path: Path, snapshot: Snapshot):
    history = History(timestamp=snapshot.wall_time, devices=snapshot.devices)
    try:
        path.write_text(json.dumps(asdict(history)), encoding="utf-8")
    except OSError as e:
        raise HistoryError(f'Failed to update history file "{path}": {e}') from e


def rebase(previous: Snapshot, current: Snapshot) -> Snapshot:
    """
    Move a snapshot from an earlier run onto the monotonic clock of the
    current one, using the wall-clock time between them.
    """
    return Snapshot(
        timestamp=current.timestamp - (current.wall_time - previous.wall_time),
        wall_time=previous.wall_time,
        devices=previous.devices,
    )
