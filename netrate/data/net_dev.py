from dataclasses import dataclass, field


@dataclass(frozen=True)
class Counters:
    rx: int
    tx: int


@dataclass(frozen=True)
class Snapshot:
    timestamp: float = 0.0
    wall_time: float = 0.0
    devices: dict[str, Counters] = field(default_factory=dict)


@dataclass(frozen=True)
class RateSample:
    interface: str = ""
    rx_rate: float = 0.0
    tx_rate: float = 0.0


@dataclass
class History:
    timestamp: float
    devices: dict[str, Counters]
