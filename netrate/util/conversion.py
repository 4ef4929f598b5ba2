BINARY_PREFIXES = ["", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"]
DECIMAL_PREFIXES = ["", "K", "M", "G", "T", "P", "E", "Z", "Y"]


def pad_float(number: float = 0.0) -> str:
    """
    Pad a float to two decimal places.
    """
    return f"{number:.2f}"


def _scale(number: float, prefixes: list[str], factor: float) -> tuple[float, str]:
    for unit_prefix in prefixes[:-1]:
        if abs(number) < factor:
            return number, unit_prefix
        number /= factor
    return number, prefixes[-1]


def byte_rate(number: float) -> str:
    """
    Format a rate in bytes per second using binary prefixes, e.g. KiB/s.
    """
    value, unit_prefix = _scale(number, BINARY_PREFIXES, 1024.0)
    return f"{pad_float(value)} {unit_prefix}B/s"


def bit_rate(number: float) -> str:
    """
    Format a rate in bytes per second as bits per second using SI prefixes,
    e.g. Mbit/s.
    """
    value, unit_prefix = _scale(number * 8, DECIMAL_PREFIXES, 1000.0)
    return f"{pad_float(value)} {unit_prefix}bit/s"


def format_rate(number: float) -> str:
    return f"{byte_rate(number)} ({bit_rate(number)})"
