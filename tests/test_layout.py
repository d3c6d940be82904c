import numpy as np
import pytest

from polywire.exceptions import WiringError
from polywire.wiring import (
    SENTINEL_ID,
    SLOT_COUNT,
    UNCONNECTED,
    UNIT_COUNT,
    UnitType,
    new_wiring,
    slot_owner,
    unit_id_at,
    unit_inputs,
    unit_position,
    unit_type,
    validate_wiring,
)


def test_grid_constants():
    assert UNIT_COUNT == 150
    assert SENTINEL_ID == 150
    assert SLOT_COUNT == 300


def test_unit_type_follows_column():
    assert unit_type(0) is UnitType.ADDER
    assert unit_type(4) is UnitType.MULTIPLIER
    assert unit_type(149) is UnitType.DIVIDER


def test_position_round_trip():
    assert unit_position(4) == (1, 1)
    assert unit_position(149) == (49, 2)
    assert unit_id_at(1, 1) == 4
    assert unit_id_at(*unit_position(77)) == 77


def test_sentinel_has_no_position():
    with pytest.raises(WiringError):
        unit_position(SENTINEL_ID)
    with pytest.raises(WiringError):
        unit_id_at(50, 0)


def test_new_wiring_is_unconnected():
    wiring = new_wiring()
    assert wiring.shape == (SLOT_COUNT,)
    assert (wiring == UNCONNECTED).all()
    assert unit_inputs(wiring, 10) == (UNCONNECTED, UNCONNECTED)
    assert slot_owner(21) == 10


def test_validate_wiring_rejects_bad_shape_and_ids():
    with pytest.raises(WiringError):
        validate_wiring([UNCONNECTED] * 10)
    bad = [UNCONNECTED] * SLOT_COUNT
    bad[3] = SENTINEL_ID + 1
    with pytest.raises(WiringError):
        validate_wiring(bad)
    ok = validate_wiring([UNCONNECTED] * SLOT_COUNT)
    assert ok.dtype == np.int64
