from __future__ import annotations

import numpy as np

from polywire.propagation.engine import propagate, valid_units
from polywire.search.config import NoiseParams
from polywire.search.metrics import MutationStats
from polywire.wiring.cycle_guard import would_create_cycle
from polywire.wiring.layout import SLOT_COUNT, UNCONNECTED, Wiring, slot_owner


def slots_to_mutate(fraction: float) -> int:
    return min(SLOT_COUNT, int(round(fraction * SLOT_COUNT)))


def inject_noise(
    wiring: Wiring,
    slot_count: int,
    params: NoiseParams,
    rng: np.random.Generator,
) -> MutationStats:
    """Rewire up to ``slot_count`` random input slots of ``wiring`` in place.

    New sources are drawn among units that currently produce a valid
    polynomial, so every rewired slot carries a usable signal. Slots already
    fed by such a unit are only touched with probability
    ``params.mutate_valid_probability``. A candidate that would close a loop
    is redrawn up to ``params.retry_budget`` times before the slot is skipped.

    Unit outputs are computed once, before any slot changes.
    """
    stats = MutationStats()
    if slot_count <= 0:
        return stats

    outputs = propagate(wiring)
    sources = valid_units(outputs)
    valid = set(sources)

    for slot in rng.choice(SLOT_COUNT, size=slot_count, replace=False).tolist():
        current = int(wiring[slot])
        if current != UNCONNECTED and current in valid:
            if rng.random() >= params.mutate_valid_probability:
                stats.preserved += 1
                continue

        unit_id = slot_owner(slot)
        for _ in range(params.retry_budget):
            candidate = sources[int(rng.integers(len(sources)))]
            if not would_create_cycle(wiring, candidate, unit_id):
                wiring[slot] = candidate
                stats.mutated += 1
                break
            stats.rejected += 1
        else:
            stats.exhausted += 1

    return stats
