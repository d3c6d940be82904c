from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class NoiseParams(BaseModel):
    """Schedule and biases of the per-iteration mutation pass."""

    start_fraction: float = Field(
        gt=0, le=1, description="Share of input slots mutated on the first iteration"
    )
    decay: float = Field(
        ge=0, lt=1, description="Geometric decay of the mutated share over iterations"
    )
    min_fraction: float = Field(
        ge=0, le=1, description="Floor of the mutated share"
    )
    mutate_valid_probability: float = Field(
        ge=0,
        le=1,
        description="Probability of rewiring a slot already fed by a valid output",
    )
    retry_budget: int = Field(
        ge=1, description="Attempts to find a source that does not close a cycle"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _validate_fractions(self) -> NoiseParams:
        if self.min_fraction > self.start_fraction:
            raise ValueError(
                f"min_fraction ({self.min_fraction}) must not exceed "
                f"start_fraction ({self.start_fraction})"
            )
        return self

    def mutation_fraction(self, iteration: int, iteration_count: int) -> float:
        """Share of slots to mutate after ``iteration`` completed iterations."""
        progress = iteration / iteration_count if iteration_count else 0.0
        decayed = self.start_fraction * (1.0 - self.decay) ** (10.0 * progress)
        return max(decayed, self.min_fraction)


class SearchConfig(BaseModel):
    """Execution options of StochasticSearch that do not change the objective."""

    seed: int | None = Field(
        default=None, ge=0, description="Seed of the search RNG (None = OS entropy)"
    )
    workers: int = Field(
        default=1,
        ge=1,
        description="Threads used to score and mutate wirings (1 = serial)",
    )

    model_config = ConfigDict(frozen=True)
