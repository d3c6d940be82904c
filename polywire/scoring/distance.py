from __future__ import annotations

import math
from typing import Sequence


def poly_distance(
    target: Sequence[int],
    candidate: Sequence[int],
    *,
    exponent_weight: float = 1.0,
    size_weight: float = 1.0,
) -> float:
    """Asymmetric, non-negative distance from ``candidate`` to ``target``.

    Both polynomials must be canonical (descending). Every target exponent is
    matched against the closest candidate exponent found by a pointer that only
    moves forward, and the difference in term counts is added as a mismatch
    penalty. An empty candidate is infinitely far away.
    """
    if not candidate:
        return math.inf

    matched = 0
    best = 0
    last = len(candidate) - 1
    for power in target:
        gap = abs(power - candidate[best])
        while best < last and abs(power - candidate[best + 1]) < gap:
            best += 1
            gap = abs(power - candidate[best])
        matched += gap

    mismatch = abs(len(target) - len(candidate))
    return exponent_weight * matched + size_weight * mismatch
