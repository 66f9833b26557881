"""Generational population dynamics over the strategy roster.

Each generation snapshots the population, scores every surviving
strategy against every other by representative matches weighted by how
many opponents of each kind it would meet, then moves one individual
from the least fit strategy to the fittest.

The representative match stands in for all individual pairings of a
given (i, j) type. ``samples_per_pairing`` plays more matches per type;
their scores are summed, which scales every fitness by the same factor
and leaves the selection rule unchanged.
"""

from typing import Callable, List, Optional, Sequence, Tuple
import logging

import numpy as np

from ..core.config import DEFAULT_NOISE, DEFAULT_ROUNDS
from ..core.errors import InvalidParameterError
from ..core.types import Generation, PayoffMatrix
from ..core.validation import resolve_population, validate_run_parameters
from ..engine.match import make_rng, play_match
from ..strategies.registry import ROSTER, STRATEGY_NAMES, Strategy, StrategyId

logger = logging.getLogger(__name__)


class EvolutionSimulator:
    """Runs fittest-grows / weakest-shrinks selection across generations."""

    def __init__(
        self,
        round_count: int = DEFAULT_ROUNDS,
        noise: float = DEFAULT_NOISE,
        matrix: Optional[PayoffMatrix] = None,
        rng: Optional[np.random.Generator] = None,
        samples_per_pairing: int = 1,
        strict: bool = False,
        progress_callback: Optional[Callable[[int, int, str], None]] = None,
    ):
        """Initialize evolution simulator.

        Args:
            round_count: Rounds per representative match
            noise: Per-action flip probability
            matrix: Payoff matrix (classical defaults if None)
            rng: Random source (a fresh generator if None)
            samples_per_pairing: Matches played per (i, j) strategy pairing
            strict: Raise instead of substituting defaults
            progress_callback: Optional callback(completed, total, message)
        """
        if samples_per_pairing < 1:
            raise InvalidParameterError(
                f"samples_per_pairing must be >= 1, got {samples_per_pairing}"
            )
        self.round_count = round_count
        self.noise = noise
        self.matrix = matrix or PayoffMatrix()
        self.rng = make_rng(rng)
        self.samples_per_pairing = samples_per_pairing
        self.strict = strict
        self.progress_callback = progress_callback
        self.roster: List[StrategyId] = list(ROSTER)

        # Fitness vector for every generation that reached selection
        self.fitness_history: List[List[int]] = []

    def _snapshot(self, gen_number: int, population: Sequence[int]) -> Generation:
        return Generation(
            gen_number=gen_number,
            populations=[
                (STRATEGY_NAMES[strategy_id], count)
                for strategy_id, count in zip(self.roster, population)
            ],
        )

    def evaluate_fitness(
        self,
        population: Sequence[int],
        active: Sequence[int],
    ) -> List[int]:
        """Accumulate opponent-weighted match scores for each active slot.

        Args:
            population: Current count per roster slot
            active: Indices of slots with a non-zero count

        Returns:
            Fitness per roster slot (zero for inactive slots)
        """
        fitness = [0] * len(self.roster)

        for i in active:
            for j in active:
                raw = 0
                for _ in range(self.samples_per_pairing):
                    result = play_match(
                        Strategy(self.roster[i]),
                        Strategy(self.roster[j]),
                        self.round_count,
                        self.noise,
                        self.matrix,
                        self.rng,
                    )
                    raw += result.player_score

                # An individual never plays itself
                opponents = population[j] - 1 if i == j else population[j]
                fitness[i] += raw * opponents

        return fitness

    @staticmethod
    def select(fitness: Sequence[int], active: Sequence[int]) -> Tuple[int, int]:
        """Return (best, worst) slot indices; the first slot wins ties."""
        best = worst = active[0]
        for i in active[1:]:
            if fitness[i] > fitness[best]:
                best = i
            if fitness[i] < fitness[worst]:
                worst = i
        return best, worst

    def run(
        self,
        initial_populations: Optional[Sequence[int]],
        generation_count: int,
    ) -> List[Generation]:
        """Run the generational loop.

        Args:
            initial_populations: Count per roster slot; a vector of the
                wrong length is replaced by the uniform default
            generation_count: Maximum number of generations

        Returns:
            One snapshot per generation run; shorter than generation_count
            when at most one strategy survives
        """
        validate_run_parameters(
            self.round_count, self.noise, generation_count, strict=self.strict
        )
        population = resolve_population(
            initial_populations, len(self.roster), strict=self.strict
        )
        self.fitness_history = []
        generations: List[Generation] = []

        for gen_number in range(1, generation_count + 1):
            generations.append(self._snapshot(gen_number, population))

            if self.progress_callback:
                self.progress_callback(
                    gen_number - 1, generation_count,
                    f"Generation {gen_number}/{generation_count}",
                )

            active = [i for i, count in enumerate(population) if count > 0]
            if len(active) <= 1:
                logger.debug(
                    "Generation %d: %d strategies left, stopping",
                    gen_number, len(active),
                )
                break

            fitness = self.evaluate_fitness(population, active)
            self.fitness_history.append(fitness)

            best, worst = self.select(fitness, active)
            if best != worst:
                population[best] += 1
                population[worst] -= 1
                logger.debug(
                    "Generation %d: %s grows, %s shrinks", gen_number,
                    STRATEGY_NAMES[self.roster[best]], STRATEGY_NAMES[self.roster[worst]],
                )

        if self.progress_callback:
            self.progress_callback(generation_count, generation_count, "Evolution complete")

        return generations


def run_evolution(
    round_count: int,
    noise: float,
    initial_populations: Optional[Sequence[int]],
    generation_count: int,
    matrix: Optional[PayoffMatrix] = None,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    samples_per_pairing: int = 1,
    strict: bool = False,
) -> List[Generation]:
    """Run an evolutionary simulation and return its generation snapshots."""
    simulator = EvolutionSimulator(
        round_count=round_count,
        noise=noise,
        matrix=matrix,
        rng=make_rng(rng, seed),
        samples_per_pairing=samples_per_pairing,
        strict=strict,
    )
    return simulator.run(initial_populations, generation_count)
