from polywire.search.config import NoiseParams, SearchConfig
from polywire.search.core import StochasticSearch
from polywire.search.metrics import IterationReport, MutationStats, SearchMetrics
from polywire.search.mutation import inject_noise, slots_to_mutate

__all__ = [
    "IterationReport",
    "MutationStats",
    "NoiseParams",
    "SearchConfig",
    "SearchMetrics",
    "StochasticSearch",
    "inject_noise",
    "slots_to_mutate",
]
