import pytest

from polywire.scoring import ScoringParams
from polywire.search import NoiseParams
from polywire.wiring import SENTINEL_ID, Wiring, new_wiring
from tests.helpers import connect


@pytest.fixture
def scoring_params() -> ScoringParams:
    return ScoringParams(
        input_recovered_factor=1.0,
        output_recovered_factor=1.0,
        unit_single_input_penalty=1.0,
        unit_both_inputs_factor=0.2,
        term_recovered_factor=1.0,
        function_recovered_factor=100.0,
        distance_factor=10.0,
        speed_prior_factor=10.0,
    )


@pytest.fixture
def noise_params() -> NoiseParams:
    return NoiseParams(
        start_fraction=0.7,
        decay=0.05,
        min_fraction=0.1,
        mutate_valid_probability=0.5,
        retry_budget=3,
    )


@pytest.fixture
def square_wiring() -> Wiring:
    """Multiplier 1 squares the array input: x * x = x^2."""
    wiring = new_wiring()
    connect(wiring, 1, SENTINEL_ID, SENTINEL_ID)
    return wiring
