"""
Polynomials in ``x`` with unit coefficients and the arithmetic of one unit.

A polynomial is stored as the tuple of its exponents, canonically sorted in
descending order, e.g. ``x^7 + x^3`` is ``(7, 3)``. Only polynomials with
distinct, strictly positive exponents are representable: ``x^2 + x^2`` would
need a coefficient and ``x / x^2`` is not a polynomial.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from loguru import logger

from polywire.wiring.layout import UnitType

Polynomial = tuple[int, ...]


def canonicalize(poly: Iterable[int]) -> Polynomial:
    """Sort exponents in descending order. Idempotent."""
    return tuple(sorted(poly, reverse=True))


def is_valid_polynomial(poly: Polynomial) -> bool:
    """True for a non-empty, strictly descending, strictly positive tuple."""
    if not poly or poly[-1] <= 0:
        return False
    return all(a > b for a, b in zip(poly, poly[1:]))


class Signal(Enum):
    ABSENT = "absent"  # no signal reaches the unit
    INVALID = "invalid"  # signal present, not a representable polynomial
    VALID = "valid"


@dataclass(frozen=True, slots=True)
class UnitOutput:
    signal: Signal
    poly: Polynomial = ()

    @classmethod
    def valid(cls, poly: Iterable[int]) -> UnitOutput:
        return cls(Signal.VALID, canonicalize(poly))

    @property
    def has_signal(self) -> bool:
        return self.signal is not Signal.ABSENT

    @property
    def is_valid(self) -> bool:
        return self.signal is Signal.VALID


NO_SIGNAL = UnitOutput(Signal.ABSENT)
INVALID = UnitOutput(Signal.INVALID)
ARRAY_INPUT = UnitOutput(Signal.VALID, (1,))


def combine(unit_type: int, lhs: UnitOutput, rhs: UnitOutput) -> UnitOutput:
    """Compute the output of a unit of ``unit_type`` fed by ``lhs`` and ``rhs``.

    Division is only defined for single-term divisors; anything else yields an
    invalid output, which is an ordinary result rather than an error.
    """
    if not lhs.has_signal or not rhs.has_signal:
        logger.debug("[combine] unit evaluated with a missing input signal")
        return NO_SIGNAL
    if not lhs.is_valid or not rhs.is_valid:
        return INVALID

    if unit_type == UnitType.ADDER:
        poly = lhs.poly + rhs.poly
    elif unit_type == UnitType.MULTIPLIER:
        poly = tuple(p1 + p2 for p1 in lhs.poly for p2 in rhs.poly)
    elif unit_type == UnitType.DIVIDER:
        if len(rhs.poly) != 1:
            return INVALID
        divisor = rhs.poly[0]
        poly = tuple(p - divisor for p in lhs.poly)
    else:
        logger.error(f"[combine] received unit of invalid type: {unit_type}")
        return INVALID

    poly = canonicalize(poly)
    if not is_valid_polynomial(poly):
        return INVALID
    return UnitOutput(Signal.VALID, poly)
