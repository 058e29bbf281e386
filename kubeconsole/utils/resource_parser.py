"""Resource parsing utilities for CPU and memory values.

Provides functions to parse Kubernetes resource quantities and format them
for display:
- CPU: parsed to cores (float)
- Memory: parsed to bytes, formatted with binary units
"""

from __future__ import annotations

# Suffix multipliers for memory quantities. Binary suffixes come first so
# "Mi" is never read as "M" followed by garbage.
_MEMORY_BYTES_MULTIPLIERS: tuple[tuple[str, int], ...] = (
    ("Ki", 1024),
    ("Mi", 1024**2),
    ("Gi", 1024**3),
    ("Ti", 1024**4),
    ("k", 1000),
    ("K", 1000),
    ("M", 1000**2),
    ("G", 1000**3),
    ("T", 1000**4),
)

_MEMORY_DISPLAY_UNITS: tuple[str, ...] = ("B", "KiB", "MiB", "GiB", "TiB")


def parse_cpu(cpu_str: str) -> float:
    """Parse CPU string to cores (float).

    Handles various CPU resource formats:
    - Nanocores: "500000000n" -> 0.5 cores
    - Microcores: "500000u" -> 0.5 cores
    - Millicores: "100m" -> 0.1 cores
    - Decimal: "1.5" -> 1.5 cores

    Args:
        cpu_str: CPU value as string (e.g., "100m", "1.5", "500")

    Returns:
        CPU value in cores as float. Returns 0.0 on parse error or empty string.
    """
    if not cpu_str:
        return 0.0

    cpu_str = str(cpu_str).strip()

    for suffix, divisor in (("n", 1_000_000_000), ("u", 1_000_000), ("m", 1000)):
        if cpu_str.endswith(suffix):
            try:
                return float(cpu_str[: -len(suffix)]) / divisor
            except ValueError:
                return 0.0

    try:
        return float(cpu_str)
    except ValueError:
        return 0.0


def _parse_memory(memory_str: str) -> float | None:
    memory_str = str(memory_str or "").strip()
    if not memory_str:
        return None

    for suffix, mult in _MEMORY_BYTES_MULTIPLIERS:
        if memory_str.endswith(suffix):
            try:
                return float(memory_str[: -len(suffix)]) * mult
            except ValueError:
                return None

    try:
        return float(memory_str)
    except ValueError:
        return None


def memory_str_to_bytes(memory_str: str) -> float:
    """Convert memory string to bytes.

    Args:
        memory_str: Memory value as string (e.g., "512Mi", "1Gi", "3882428Ki")

    Returns:
        Memory value in bytes as float. Returns 0.0 on parse error or empty string.
    """
    value = _parse_memory(memory_str)
    return 0.0 if value is None else value


def format_bytes(value: float) -> str:
    """Format a byte count with the largest binary unit that keeps it >= 1."""
    unit_index = 0
    while value >= 1024 and unit_index < len(_MEMORY_DISPLAY_UNITS) - 1:
        value /= 1024
        unit_index += 1
    return f"{value:.2f} {_MEMORY_DISPLAY_UNITS[unit_index]}"


def format_memory(memory_str: str) -> str:
    """Format a memory quantity for display ("3882428Ki" -> "3.70 GiB").

    Returns an empty string for empty or unparsable input.
    """
    value = _parse_memory(memory_str)
    if value is None:
        return ""
    return format_bytes(value)
