"""Unit conversions and rounding helpers shared by the engine models."""

import math

KMH_PER_MS: float = 3.6


def kmh_to_ms(speed_kmh: float) -> float:
    """Convert km/h to m/s."""
    return speed_kmh / KMH_PER_MS


def ms_to_kmh(speed_ms: float) -> float:
    """Convert m/s to km/h."""
    return speed_ms * KMH_PER_MS


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to *ndigits* decimals with ties going towards +infinity.

    ``floor(x * 10^n + 0.5) / 10^n``; unlike :func:`round`, 72.5 -> 73.
    """
    scale: float = 10.0**ndigits
    return math.floor(value * scale + 0.5) / scale


def round_int(value: float) -> int:
    """Round half-up to the nearest integer."""
    return int(math.floor(value + 0.5))
