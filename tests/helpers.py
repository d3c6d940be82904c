from polywire.wiring import Wiring, input_slots


def connect(wiring: Wiring, unit_id: int, first: int, second: int | None = None) -> None:
    slot1, slot2 = input_slots(unit_id)
    wiring[slot1] = first
    if second is not None:
        wiring[slot2] = second
