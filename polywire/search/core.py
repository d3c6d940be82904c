from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Sequence, TypeVar

from loguru import logger
import numpy as np

from polywire.exceptions import ConfigurationError
from polywire.propagation.polynomial import (
    Polynomial,
    canonicalize,
    is_valid_polynomial,
)
from polywire.scoring.fitness import ScoringParams, WiringScore, score_wiring
from polywire.search.config import NoiseParams, SearchConfig
from polywire.search.metrics import IterationReport, MutationStats, SearchMetrics
from polywire.search.mutation import inject_noise, slots_to_mutate
from polywire.utils.trackers.base import LogWriter
from polywire.wiring.layout import Wiring, new_wiring

T = TypeVar("T")
R = TypeVar("R")


class StochasticSearch:
    """Population search for a wiring that computes a target polynomial.

    Every training iteration runs a number of cycles. A cycle scores the whole
    population and then performs random pairwise cloning: the better wiring of
    a pair overwrites the worse one. After the cycles, every wiring receives a
    noise pass whose intensity decays over the run.

    The random engine is owned by the instance and seeded once; a fixed seed
    reproduces the whole run regardless of ``config.workers``.
    """

    def __init__(
        self,
        target: Sequence[int],
        population_size: int,
        scoring_params: ScoringParams,
        noise_params: NoiseParams,
        config: SearchConfig | None = None,
        writer: LogWriter | None = None,
    ):
        poly = canonicalize(target)
        if not poly:
            raise ConfigurationError("Target polynomial must have at least one term")
        if not is_valid_polynomial(poly):
            raise ConfigurationError(
                f"Target exponents must be distinct and positive, got {list(target)}"
            )
        if population_size < 1:
            raise ConfigurationError(
                f"population_size must be at least 1, got {population_size}"
            )

        self.target: Polynomial = poly
        self.scoring_params = scoring_params
        self.noise_params = noise_params
        self.config = config or SearchConfig()
        self.metrics = SearchMetrics()
        self._writer = writer.bind(path=["search"]) if writer is not None else None
        self._rng = np.random.default_rng(self.config.seed)

        self.population: list[Wiring] = [new_wiring() for _ in range(population_size)]
        self.best_fitness = float("-inf")
        self.best_recoveries = 0
        self.best_wiring: Wiring | None = None

        logger.info(
            "[StochasticSearch] init (target={}, population={}, seed={}, workers={})",
            list(self.target),
            population_size,
            self.config.seed,
            self.config.workers,
        )

    # -------------------------- Public API --------------------------

    def train(
        self, iteration_count: int, cycle_count: int, clone_count: int
    ) -> list[IterationReport]:
        """Run the search and return one progress report per iteration."""
        for name, value in (
            ("iteration_count", iteration_count),
            ("cycle_count", cycle_count),
            ("clone_count", clone_count),
        ):
            if value < 0:
                raise ConfigurationError(f"{name} must be non-negative, got {value}")

        reports: list[IterationReport] = []
        pool = (
            ThreadPoolExecutor(
                max_workers=self.config.workers, thread_name_prefix="polywire"
            )
            if self.config.workers > 1
            else None
        )
        try:
            for iteration in range(iteration_count):
                for _ in range(cycle_count):
                    self._perform_cycle(clone_count, pool)

                fraction = self.noise_params.mutation_fraction(
                    iteration, iteration_count
                )
                self._inject_noise(fraction, pool)
                self.metrics.iterations += 1

                report = IterationReport(
                    iteration=iteration + 1,
                    best_fitness=self.best_fitness,
                    exact_recoveries=self.best_recoveries,
                    mutation_fraction=fraction,
                )
                reports.append(report)
                self._publish(report)
                logger.info(
                    "[StochasticSearch] iteration {}/{}: best={:.4f} recoveries={} "
                    "noise={:.3f}",
                    report.iteration,
                    iteration_count,
                    report.best_fitness,
                    report.exact_recoveries,
                    fraction,
                )
        finally:
            if pool is not None:
                pool.shutdown(wait=True)

        if self._writer is not None and self.best_wiring is not None:
            self._writer.text(
                "best_wiring",
                str(self.best_wiring.tolist()),
                step=self.metrics.iterations,
            )
        logger.info(
            "[StochasticSearch] finished: {}", self.metrics.model_dump_json()
        )
        return reports

    def score_population(
        self, pool: ThreadPoolExecutor | None = None
    ) -> list[WiringScore]:
        """Score every wiring; read-only with respect to the population."""
        return self._map(
            lambda wiring: score_wiring(wiring, self.target, self.scoring_params),
            self.population,
            pool,
        )

    # -------------------------- Internals --------------------------

    def _perform_cycle(self, clone_count: int, pool: ThreadPoolExecutor | None) -> None:
        # every score is final before any clone reads it
        scores = self.score_population(pool)
        self._update_best(scores)
        applied, draws = self._clone(scores, clone_count)
        self.metrics.record_cycle(len(scores), draws, applied)

    def _update_best(self, scores: list[WiringScore]) -> None:
        fitness = [s.fitness for s in scores]
        best_id = int(np.argmax(fitness))
        if fitness[best_id] > self.best_fitness:
            self.best_fitness = fitness[best_id]
            self.best_recoveries = scores[best_id].exact_recoveries
            self.best_wiring = self.population[best_id].copy()
            logger.debug(
                "[StochasticSearch] new best {:.4f} (wiring {}, length {})",
                self.best_fitness,
                best_id,
                scores[best_id].wire_length,
            )

    def _clone(self, scores: list[WiringScore], clone_count: int) -> tuple[int, int]:
        """Serial pass of ``clone_count`` pairwise draws; returns (applied, draws)."""
        size = len(self.population)
        if size < 2 or clone_count == 0:
            return 0, 0

        applied = 0
        for _ in range(clone_count):
            first, second = (int(i) for i in self._rng.choice(size, 2, replace=False))
            if scores[first].fitness > scores[second].fitness:
                winner, loser = first, second
            elif scores[second].fitness > scores[first].fitness:
                winner, loser = second, first
            else:
                continue
            self.population[loser][:] = self.population[winner]
            applied += 1
        return applied, clone_count

    def _inject_noise(self, fraction: float, pool: ThreadPoolExecutor | None) -> None:
        slot_count = slots_to_mutate(fraction)
        # spawn serially so each wiring's draws do not depend on scheduling
        rngs = self._rng.spawn(len(self.population))

        def mutate(item: tuple[Wiring, np.random.Generator]) -> MutationStats:
            wiring, rng = item
            return inject_noise(wiring, slot_count, self.noise_params, rng)

        for stats in self._map(mutate, zip(self.population, rngs), pool):
            self.metrics.record_noise(stats)

    @staticmethod
    def _map(
        fn: Callable[[T], R], items: Iterable[T], pool: ThreadPoolExecutor | None
    ) -> list[R]:
        if pool is None:
            return [fn(item) for item in items]
        return list(pool.map(fn, items))

    def _publish(self, report: IterationReport) -> None:
        if self._writer is None:
            return
        step = report.iteration
        self._writer.scalar("best_fitness", report.best_fitness, step=step)
        self._writer.scalar("exact_recoveries", report.exact_recoveries, step=step)
        self._writer.scalar("mutation_fraction", report.mutation_fraction, step=step)
