"""
Physical layout of the arithmetic array and the wiring representation.

Units are laid out row-major on a 50 x 3 grid, one unit type per column:

        0 1 2
        -----
     0: A M D
     1: A M D
        ...
    49: A M D

A wiring stores one entry per unit input. Inputs of the same unit are
consecutive, so slot ``2 * unit_id + k`` is input ``k`` of ``unit_id``. Each
entry is either ``UNCONNECTED`` or the id of the unit feeding that input. The
id ``SENTINEL_ID`` stands for the input of the whole array and always carries
the polynomial ``x``.
"""

from __future__ import annotations

from enum import IntEnum

import numpy as np

from polywire.exceptions import WiringError

UNIT_ROW_COUNT = 50
UNIT_COL_COUNT = 3
UNIT_COUNT = UNIT_ROW_COUNT * UNIT_COL_COUNT
INPUTS_PER_UNIT = 2
SLOT_COUNT = UNIT_COUNT * INPUTS_PER_UNIT

# virtual unit representing the array input, one past the last real unit
SENTINEL_ID = UNIT_COUNT
NODE_COUNT = UNIT_COUNT + 1

UNCONNECTED = -1

Wiring = np.ndarray


class UnitType(IntEnum):
    """Arithmetic operation performed by a unit, equal to its grid column."""

    ADDER = 0
    MULTIPLIER = 1
    DIVIDER = 2


def unit_type(unit_id: int) -> UnitType:
    return UnitType(unit_id % UNIT_COL_COUNT)


def unit_position(unit_id: int) -> tuple[int, int]:
    """Return ``(row, column)`` of a real unit on the grid."""
    if not 0 <= unit_id < UNIT_COUNT:
        raise WiringError(f"Unit {unit_id} has no grid position")
    return unit_id // UNIT_COL_COUNT, unit_id % UNIT_COL_COUNT


def unit_id_at(row: int, col: int) -> int:
    if not (0 <= row < UNIT_ROW_COUNT and 0 <= col < UNIT_COL_COUNT):
        raise WiringError(f"Grid position ({row}, {col}) is out of range")
    return row * UNIT_COL_COUNT + col


def input_slots(unit_id: int) -> tuple[int, int]:
    first = unit_id * INPUTS_PER_UNIT
    return first, first + 1


def slot_owner(slot: int) -> int:
    """Unit whose input is stored at ``slot``."""
    return slot // INPUTS_PER_UNIT


def unit_inputs(wiring: Wiring, unit_id: int) -> tuple[int, int]:
    first, second = input_slots(unit_id)
    return int(wiring[first]), int(wiring[second])


def new_wiring() -> Wiring:
    """Create a fully unconnected wiring."""
    return np.full(SLOT_COUNT, UNCONNECTED, dtype=np.int64)


def validate_wiring(wiring: Wiring) -> Wiring:
    """Check shape and source ids of a wiring coming from outside the search.

    Returns the wiring as an ``int64`` array so that callers can pass plain
    sequences.
    """
    arr = np.asarray(wiring, dtype=np.int64)
    if arr.shape != (SLOT_COUNT,):
        raise WiringError(
            f"Wiring must have {SLOT_COUNT} slots, got shape {arr.shape}"
        )
    bad = (arr < UNCONNECTED) | (arr > SENTINEL_ID)
    if bad.any():
        slots = np.flatnonzero(bad).tolist()
        raise WiringError(f"Wiring has out-of-range sources at slots {slots}")
    return arr
