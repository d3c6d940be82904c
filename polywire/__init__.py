from polywire.exceptions import ConfigurationError, PolyWireError, WiringError
from polywire.scoring import ScoringParams, WiringScore, score_wiring
from polywire.search import (
    IterationReport,
    NoiseParams,
    SearchConfig,
    SearchMetrics,
    StochasticSearch,
)

__all__ = [
    "ConfigurationError",
    "IterationReport",
    "NoiseParams",
    "PolyWireError",
    "ScoringParams",
    "SearchConfig",
    "SearchMetrics",
    "StochasticSearch",
    "WiringError",
    "WiringScore",
    "score_wiring",
]
