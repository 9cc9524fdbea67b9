"""Half-up rounding used for every displayed percentage and ratio."""
from __future__ import annotations
import math


def round_half_up(value: float, decimals: int = 1) -> float:
    """
    Round with ties going towards +inf (12.25 → 12.3, -12.25 → -12.2).
    Non-finite input, or input too large to scale, collapses to 0.
    """
    if not math.isfinite(value):
        return 0.0
    factor = 10 ** decimals
    scaled = value * factor + 0.5
    if not math.isfinite(scaled):
        return 0.0
    return math.floor(scaled) / factor
