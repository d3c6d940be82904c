from polywire.propagation.engine import outgoing_connections, propagate, valid_units
from polywire.propagation.polynomial import (
    ARRAY_INPUT,
    INVALID,
    NO_SIGNAL,
    Polynomial,
    Signal,
    UnitOutput,
    canonicalize,
    combine,
    is_valid_polynomial,
)

__all__ = [
    "ARRAY_INPUT",
    "INVALID",
    "NO_SIGNAL",
    "Polynomial",
    "Signal",
    "UnitOutput",
    "canonicalize",
    "combine",
    "is_valid_polynomial",
    "outgoing_connections",
    "propagate",
    "valid_units",
]
