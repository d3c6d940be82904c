from __future__ import annotations

from pydantic import BaseModel, Field


class IterationReport(BaseModel):
    """Progress snapshot emitted after every training iteration."""

    iteration: int = Field(description="1-based iteration index")
    best_fitness: float = Field(description="Best fitness seen so far in the run")
    exact_recoveries: int = Field(
        description="Units reproducing the target in the best wiring so far"
    )
    mutation_fraction: float = Field(
        description="Share of slots targeted by this iteration's noise pass"
    )


class SearchMetrics(BaseModel):
    """Cumulative counters of a search run."""

    iterations: int = Field(default=0, description="Completed iterations")
    cycles: int = Field(default=0, description="Completed scoring/cloning cycles")
    wirings_scored: int = Field(default=0, description="Total wiring evaluations")
    clone_draws: int = Field(default=0, description="Pairs drawn for cloning")
    clones_applied: int = Field(
        default=0, description="Draws that overwrote the weaker wiring"
    )
    slots_mutated: int = Field(default=0, description="Input slots rewired by noise")
    slots_preserved: int = Field(
        default=0, description="Valid slots left alone by the mutation dice"
    )
    cycle_rejections: int = Field(
        default=0, description="Candidate sources rejected by the cycle guard"
    )
    retries_exhausted: int = Field(
        default=0, description="Slots left unchanged after the retry budget ran out"
    )

    def record_cycle(self, scored: int, draws: int, applied: int) -> None:
        """Record metrics from one scoring/cloning cycle."""
        self.cycles += 1
        self.wirings_scored += scored
        self.clone_draws += draws
        self.clones_applied += applied

    def record_noise(self, stats: MutationStats) -> None:
        """Record metrics from one wiring's noise pass."""
        self.slots_mutated += stats.mutated
        self.slots_preserved += stats.preserved
        self.cycle_rejections += stats.rejected
        self.retries_exhausted += stats.exhausted


class MutationStats(BaseModel):
    mutated: int = 0
    preserved: int = 0
    rejected: int = 0
    exhausted: int = 0
