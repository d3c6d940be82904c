from polywire.scoring.distance import poly_distance
from polywire.scoring.fitness import ScoringParams, WiringScore, score_wiring
from polywire.scoring.wire_length import net_length, wire_length

__all__ = [
    "ScoringParams",
    "WiringScore",
    "net_length",
    "poly_distance",
    "score_wiring",
    "wire_length",
]
