from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from polywire.propagation.engine import propagate
from polywire.propagation.polynomial import Polynomial, UnitOutput
from polywire.scoring.distance import poly_distance
from polywire.scoring.wire_length import wire_length
from polywire.wiring.layout import (
    INPUTS_PER_UNIT,
    SENTINEL_ID,
    UNCONNECTED,
    UNIT_COUNT,
    Wiring,
    validate_wiring,
)


class ScoringParams(BaseModel):
    """Weights of the fitness terms used to drive the search."""

    input_recovered_factor: float = Field(
        gt=0, description="Bonus when the array input feeds any unit"
    )
    output_recovered_factor: float = Field(
        gt=0, description="Flat bonus once at least one unit has both inputs wired"
    )
    unit_single_input_penalty: float = Field(
        gt=0, description="Penalty per unit with exactly one input wired"
    )
    unit_both_inputs_factor: float = Field(
        gt=0, description="Bonus per unit with both inputs wired"
    )
    term_recovered_factor: float = Field(
        gt=0,
        description="Bonus scaled by the share of target terms present in the closest output",
    )
    function_recovered_factor: float = Field(
        gt=0, description="Bonus when some unit outputs exactly the target"
    )
    distance_factor: float = Field(
        gt=0, description="Scale of exp(-distance) for the closest outputs"
    )
    speed_prior_factor: float = Field(
        gt=0, description="Numerator of the 1 / (1 + wire length) routing prior"
    )
    exponent_distance_weight: float = Field(
        default=1.0, ge=0, description="Weight of per-exponent gaps in poly distance"
    )
    size_mismatch_weight: float = Field(
        default=1.0, ge=0, description="Weight of the term-count gap in poly distance"
    )
    top_k_terms: int = Field(
        default=3, gt=0, description="Number of closest outputs rewarded by distance"
    )

    model_config = ConfigDict(frozen=True)


@dataclass(frozen=True)
class WiringScore:
    fitness: float
    exact_recoveries: int
    wire_length: int


def _connection_terms(wiring: Wiring, params: ScoringParams) -> float:
    score = 0.0
    slots = wiring.reshape(UNIT_COUNT, INPUTS_PER_UNIT)

    if (slots == SENTINEL_ID).any():
        score += params.input_recovered_factor

    filled = (slots != UNCONNECTED).sum(axis=1)
    single = int((filled == 1).sum())
    both = int((filled == 2).sum())

    score -= params.unit_single_input_penalty * single
    if both > 0:
        score += params.output_recovered_factor
        score += params.unit_both_inputs_factor * both
    return score


def _recovery_terms(
    outputs: Sequence[UnitOutput], target: Polynomial, params: ScoringParams
) -> tuple[float, int]:
    candidates = [out.poly for out in outputs[:UNIT_COUNT] if out.is_valid]
    if not candidates:
        return 0.0, 0

    distances = [
        poly_distance(
            target,
            poly,
            exponent_weight=params.exponent_distance_weight,
            size_weight=params.size_mismatch_weight,
        )
        for poly in candidates
    ]
    closest = heapq.nsmallest(params.top_k_terms, distances)
    score = params.distance_factor * float(np.exp(-np.asarray(closest)).sum())

    best_poly = candidates[int(np.argmin(distances))]
    recovered_terms = len(set(target).intersection(best_poly))
    score += params.term_recovered_factor * recovered_terms / len(target)

    exact = sum(1 for poly in candidates if poly == target)
    if exact:
        score += params.function_recovered_factor
    return score, exact


def score_wiring(
    wiring: Wiring,
    target: Polynomial,
    params: ScoringParams,
    outputs: Sequence[UnitOutput] | None = None,
) -> WiringScore:
    """Fitness of ``wiring`` for recovering the canonical ``target``.

    The fitness sums six weighted components:

    - ``input_recovered_factor`` once the array input feeds any unit;
    - connectivity: ``-unit_single_input_penalty`` per half-wired unit and,
      when some unit has both inputs, ``output_recovered_factor`` plus
      ``unit_both_inputs_factor`` per fully wired unit;
    - ``distance_factor * exp(-d)`` for the ``top_k_terms`` closest outputs;
    - ``term_recovered_factor`` times the share of target exponents present
      in the closest output, a partial-credit term on top of the distance one;
    - ``function_recovered_factor`` once if some unit outputs the target;
    - ``speed_prior_factor / (1 + wire length)``.

    ``outputs`` may be passed when the caller already propagated the wiring.
    Raises WiringError for a wiring of the wrong shape or with unknown sources.
    """
    wiring = validate_wiring(wiring)
    if outputs is None:
        outputs = propagate(wiring)

    fitness = _connection_terms(wiring, params)
    recovery, exact = _recovery_terms(outputs, target, params)
    fitness += recovery

    length = wire_length(wiring)
    fitness += params.speed_prior_factor / (1 + length)

    return WiringScore(fitness=fitness, exact_recoveries=exact, wire_length=length)
