from polywire.propagation import (
    INVALID,
    NO_SIGNAL,
    Signal,
    UnitOutput,
    canonicalize,
    combine,
    is_valid_polynomial,
)
from polywire.wiring import UnitType

P1 = UnitOutput.valid([3, 2])
P2 = UnitOutput.valid([5, 7])


def test_canonicalize_is_idempotent():
    once = canonicalize([2, 7, 5, 3])
    assert once == (7, 5, 3, 2)
    assert canonicalize(once) == once


def test_valid_polynomial_rules():
    assert is_valid_polynomial((7, 3, 1))
    assert not is_valid_polynomial(())
    assert not is_valid_polynomial((3, 3))
    assert not is_valid_polynomial((2, 0))
    assert not is_valid_polynomial((2, -1))


def test_adder_concatenates_terms():
    out = combine(UnitType.ADDER, P1, P2)
    assert out.is_valid
    assert out.poly == (7, 5, 3, 2)


def test_multiplier_sums_exponents_pairwise():
    out = combine(UnitType.MULTIPLIER, P1, P2)
    assert out.is_valid
    assert out.poly == (10, 9, 8, 7)


def test_divider_needs_single_term_divisor():
    out = combine(UnitType.DIVIDER, P2, P1)
    assert out.has_signal
    assert not out.is_valid

    out = combine(UnitType.DIVIDER, P2, UnitOutput.valid([3]))
    assert out.is_valid
    assert out.poly == (4, 2)


def test_divider_rejects_non_positive_powers():
    out = combine(UnitType.DIVIDER, UnitOutput.valid([3]), UnitOutput.valid([3]))
    assert out.signal is Signal.INVALID


def test_duplicate_powers_are_invalid():
    x = UnitOutput.valid([1])
    assert combine(UnitType.ADDER, x, x) == INVALID


def test_invalid_input_propagates():
    assert combine(UnitType.MULTIPLIER, INVALID, P1) == INVALID
    assert combine(UnitType.ADDER, P1, INVALID) == INVALID


def test_missing_signal_yields_no_signal():
    assert combine(UnitType.ADDER, NO_SIGNAL, P1) == NO_SIGNAL


def test_unknown_unit_type_is_invalid():
    assert combine(7, P1, P2) == INVALID
