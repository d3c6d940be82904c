from __future__ import annotations

from loguru import logger

from polywire.propagation.polynomial import (
    ARRAY_INPUT,
    INVALID,
    NO_SIGNAL,
    UnitOutput,
    combine,
)
from polywire.wiring.layout import (
    NODE_COUNT,
    SENTINEL_ID,
    UNCONNECTED,
    Wiring,
    slot_owner,
    unit_inputs,
    unit_type,
    validate_wiring,
)


def outgoing_connections(wiring: Wiring) -> list[list[int]]:
    """Map every unit (sentinel included) to the units its output feeds.

    A downstream unit appears twice when both of its inputs come from the
    same source.
    """
    wiring = validate_wiring(wiring)
    outgoing: list[list[int]] = [[] for _ in range(NODE_COUNT)]
    for slot, source in enumerate(wiring.tolist()):
        if source != UNCONNECTED:
            outgoing[source].append(slot_owner(slot))
    return outgoing


def propagate(wiring: Wiring) -> list[UnitOutput]:
    """Evaluate the polynomial produced by every unit of ``wiring``.

    Signals flow forward from the sentinel. A unit is evaluated once both of
    its inputs are connected and carry a signal; units that never become ready
    keep ``NO_SIGNAL``. The wiring is assumed acyclic, which bounds the
    traversal to one evaluation per unit.

    Returns a list indexed by unit id with ``NODE_COUNT`` entries. Raises
    WiringError for a wiring of the wrong shape or with unknown sources.
    """
    wiring = validate_wiring(wiring)
    outputs: list[UnitOutput] = [NO_SIGNAL] * NODE_COUNT
    outgoing = outgoing_connections(wiring)
    scheduled = {SENTINEL_ID}
    ready = [SENTINEL_ID]

    while ready:
        unit_id = ready.pop()

        if unit_id == SENTINEL_ID:
            outputs[unit_id] = ARRAY_INPUT
        else:
            in1, in2 = unit_inputs(wiring, unit_id)
            outputs[unit_id] = combine(unit_type(unit_id), outputs[in1], outputs[in2])

        for downstream in dict.fromkeys(outgoing[unit_id]):
            if downstream in scheduled:
                if outputs[downstream].has_signal:
                    logger.warning(
                        f"[propagate] unit {downstream} reached again from {unit_id} "
                        "after evaluation; wiring may contain a cycle"
                    )
                continue

            src1, src2 = unit_inputs(wiring, downstream)
            if src1 == UNCONNECTED or src2 == UNCONNECTED:
                continue
            if unit_id not in (src1, src2):
                logger.warning(
                    f"[propagate] unit {downstream} listed downstream of {unit_id} "
                    f"but wired to ({src1}, {src2})"
                )
                outputs[downstream] = INVALID
                scheduled.add(downstream)
                continue
            if outputs[src1].has_signal and outputs[src2].has_signal:
                scheduled.add(downstream)
                ready.append(downstream)

    return outputs


def valid_units(outputs: list[UnitOutput]) -> list[int]:
    """Ids (sentinel included) whose output is a valid polynomial."""
    return [unit_id for unit_id, out in enumerate(outputs) if out.is_valid]
