"""
Heuristic routing length of a wiring.

Each unit output together with every input it feeds forms a net. The array is
much taller than it is wide, so a net is routed as a vertical backbone spanning
all of its rows, placed on the column that is cheapest to reach:

- points at Manhattan distance 1 are joined into clusters first;
- the backbone costs ``max row - min row``;
- for a candidate column, every cluster that does not touch it is connected
  through its closest member (the horizontal distance), and each remaining
  member of that cluster adds one hop to its neighbour;
- the cheapest of the three columns is kept.

Example (``1`` marks a point of the net)::

       012
       ---
    0: 001
    1: 100
    2: 100
    3: 001

The backbone spans rows 0..3 (length 3). On column 0 the two points of
column 2 each cost 2 (total 7); on column 2 the cluster in column 0 costs 2
plus 1 for its second member (total 6). The estimate is 6.

The estimate is an upper bound in spirit, not a minimal Steiner tree.
"""

from __future__ import annotations

from typing import Iterable

from polywire.propagation.engine import outgoing_connections
from polywire.utils.disjoint_set import DisjointSet
from polywire.wiring.layout import (
    UNIT_COL_COUNT,
    UNIT_COUNT,
    Wiring,
    unit_position,
    validate_wiring,
)


def net_length(points: Iterable[int]) -> int:
    """Estimate the wire length needed to join the units in ``points``."""
    positions = [unit_position(unit_id) for unit_id in dict.fromkeys(points)]
    if len(positions) < 2:
        return 0

    rows = [row for row, _ in positions]
    backbone = max(rows) - min(rows)

    clusters = DisjointSet(len(positions))
    for i, (row1, col1) in enumerate(positions):
        for j in range(i + 1, len(positions)):
            row2, col2 = positions[j]
            if abs(row1 - row2) + abs(col1 - col2) == 1:
                clusters.union(i, j)
    groups = clusters.groups()

    best = None
    for col in range(UNIT_COL_COUNT):
        cost = 0
        for members in groups.values():
            reach = min(abs(positions[m][1] - col) for m in members)
            if reach > 0:
                cost += reach + len(members) - 1
        best = cost if best is None else min(best, cost)

    return backbone + best


def wire_length(wiring: Wiring) -> int:
    """Total estimated length over every net driven by a grid unit.

    Nets driven by the array input are not routed on the grid and are not
    counted. Raises WiringError for a malformed wiring.
    """
    wiring = validate_wiring(wiring)
    total = 0
    outgoing = outgoing_connections(wiring)
    for unit_id in range(UNIT_COUNT):
        targets = outgoing[unit_id]
        if targets:
            total += net_length([unit_id, *targets])
    return total
