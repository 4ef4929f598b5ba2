import logging
import time
from pathlib import Path

from netrate.data.net_dev import Counters, RateSample, Snapshot

PROC_NET_DEV = Path("/proc/net/dev")

# Receive and transmit byte counters are the first and ninth of sixteen fields
FIELD_COUNT = 16
RX_BYTES = 0
TX_BYTES = 8

logger = logging.getLogger(__name__)


class SourceUnavailable(Exception):
    pass


def parse_line(line: str) -> tuple[str, Counters] | None:
    """
    Split one line of /proc/net/dev into the interface name and its byte
    counters. Returns None for headers and anything else that doesn't have
    the expected shape.
    """
    name, sep, rest = line.partition(":")
    name = name.strip()
    if not sep or not name or " " in name:
        return None

    fields = rest.split()
    # isdigit() alone also accepts non-ASCII digits int() refuses
    if len(fields) != FIELD_COUNT or not all(
        field.isascii() and field.isdigit() for field in fields
    ):
        return None

    return name, Counters(rx=int(fields[RX_BYTES]), tx=int(fields[TX_BYTES]))


def capture(
    source: Path = PROC_NET_DEV, interfaces: list[str] | None = None
) -> Snapshot:
    """
    Read the counters of every interface in source and return them with the
    time they were taken.
    """
    try:
        with open(source, "r", encoding="utf-8") as fh:
            lines = fh.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(f"Failed to read {source}: {e}") from e

    timestamp = time.monotonic()
    wall_time = time.time()

    devices: dict[str, Counters] = {}
    for lineno, line in enumerate(lines, start=1):
        entry = parse_line(line)
        if entry is None:
            logger.debug(f"skipping line {lineno} of {source}")
            continue
        name, counters = entry
        if interfaces and name not in interfaces:
            continue
        devices[name] = counters

    return Snapshot(timestamp=timestamp, wall_time=wall_time, devices=devices)


def _rate(previous: int | None, current: int, elapsed: float) -> float:
    # New interface, reset or wrapped counter
    if previous is None or current < previous or not elapsed > 0:
        return 0.0
    return (current - previous) / elapsed


def compute(previous: Snapshot, current: Snapshot) -> list[RateSample]:
    """
    Turn two snapshots into per-interface rates in bytes per second, sorted
    by interface name.
    """
    elapsed = current.timestamp - previous.timestamp
    samples: list[RateSample] = []

    for name in sorted(current.devices):
        now = current.devices[name]
        before = previous.devices.get(name)
        samples.append(
            RateSample(
                interface=name,
                rx_rate=_rate(before.rx if before else None, now.rx, elapsed),
                tx_rate=_rate(before.tx if before else None, now.tx, elapsed),
            )
        )

    return samples
