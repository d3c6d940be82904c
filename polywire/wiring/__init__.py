from polywire.wiring.cycle_guard import would_create_cycle
from polywire.wiring.layout import (
    INPUTS_PER_UNIT,
    NODE_COUNT,
    SENTINEL_ID,
    SLOT_COUNT,
    UNCONNECTED,
    UNIT_COL_COUNT,
    UNIT_COUNT,
    UNIT_ROW_COUNT,
    UnitType,
    Wiring,
    input_slots,
    new_wiring,
    slot_owner,
    unit_id_at,
    unit_inputs,
    unit_position,
    unit_type,
    validate_wiring,
)

__all__ = [
    "INPUTS_PER_UNIT",
    "NODE_COUNT",
    "SENTINEL_ID",
    "SLOT_COUNT",
    "UNCONNECTED",
    "UNIT_COL_COUNT",
    "UNIT_COUNT",
    "UNIT_ROW_COUNT",
    "UnitType",
    "Wiring",
    "input_slots",
    "new_wiring",
    "slot_owner",
    "unit_id_at",
    "unit_inputs",
    "unit_position",
    "unit_type",
    "validate_wiring",
    "would_create_cycle",
]
