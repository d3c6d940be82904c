import pytest

from polywire.exceptions import WiringError
from polywire.scoring import net_length, wire_length
from polywire.wiring import SENTINEL_ID, new_wiring, unit_id_at
from tests.helpers import connect


def net(rows, cols):
    return [unit_id_at(r, c) for r, c in zip(rows, cols)]


def test_net_routed_on_cheapest_column():
    assert net_length(net([0, 1, 2, 3], [2, 0, 0, 2])) == 6


def test_two_point_net():
    assert net_length(net([0, 2], [2, 0])) == 4


def test_diagonal_points_are_not_clustered():
    assert net_length(net([0, 1, 3], [2, 1, 2])) == 4


def test_vertical_net_costs_its_span():
    assert net_length(net([3, 4, 5, 9], [1, 1, 1, 1])) == 6


def test_trivial_nets_are_free():
    assert net_length([]) == 0
    assert net_length([7]) == 0
    assert net_length([7, 7]) == 0


def test_wiring_sums_unit_nets_and_skips_sentinel():
    wiring = new_wiring()
    assert wire_length(wiring) == 0

    connect(wiring, 0, SENTINEL_ID, SENTINEL_ID)
    assert wire_length(wiring) == 0

    # unit 0 at (0, 0) feeds unit 4 at (1, 1): span 1 plus one column hop
    connect(wiring, 4, 0, 0)
    assert wire_length(wiring) == 2

    # unit 4 feeds unit 10 at (3, 1): span 2, same column
    connect(wiring, 10, 4, SENTINEL_ID)
    assert wire_length(wiring) == 4


def test_plain_list_wiring_is_accepted():
    wiring = new_wiring()
    connect(wiring, 4, 0, 0)
    assert wire_length(wiring.tolist()) == wire_length(wiring) == 2


def test_malformed_wiring_is_rejected():
    with pytest.raises(WiringError):
        wire_length([SENTINEL_ID] * 4)
