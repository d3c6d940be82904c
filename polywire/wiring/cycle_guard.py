from __future__ import annotations

from polywire.wiring.layout import SENTINEL_ID, UNCONNECTED, Wiring, input_slots


def would_create_cycle(
    wiring: Wiring, downstream_unit: int, candidate_upstream_unit: int
) -> bool:
    """Return True if ``candidate_upstream_unit`` is an ancestor of ``downstream_unit``.

    Wiring ``downstream_unit`` into an input of ``candidate_upstream_unit``
    closes a loop exactly when this returns True, so the noise pass calls it
    before every new connection. A unit is considered its own ancestor.

    The sentinel has no inputs, so connecting it anywhere is always accepted.
    """
    if downstream_unit == SENTINEL_ID:
        return False
    if downstream_unit == candidate_upstream_unit:
        return True

    stack = [downstream_unit]
    visited = {downstream_unit}
    while stack:
        current = stack.pop()
        if current == SENTINEL_ID:
            continue
        for slot in input_slots(current):
            source = int(wiring[slot])
            if source == UNCONNECTED or source in visited:
                continue
            if source == candidate_upstream_unit:
                return True
            visited.add(source)
            stack.append(source)

    return False
