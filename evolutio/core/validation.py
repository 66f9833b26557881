"""Input checks shared by the simulation entry points.

Outside strict mode only the two documented substitutions apply
(unknown strategy, mismatched population length); everything else is
passed through unchecked.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .config import DEFAULT_POPULATION
from .errors import InvalidParameterError, PopulationSizeError

logger = logging.getLogger(__name__)


def check_run_parameters(
    round_count: int,
    noise: float,
    generation_count: Optional[int] = None,
) -> Tuple[bool, List[str]]:
    """Check simulation parameters against their allowed ranges.

    Args:
        round_count: Rounds per match (must be >= 0).
        noise: Per-action flip probability (must be in [0, 1]).
        generation_count: Generation cap (None to skip the check).

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    if round_count < 0:
        errors.append(f"round_count must be >= 0, got {round_count}")

    if not 0.0 <= noise <= 1.0:
        errors.append(f"noise must be within [0, 1], got {noise}")

    if generation_count is not None and generation_count < 0:
        errors.append(f"generation_count must be >= 0, got {generation_count}")

    return len(errors) == 0, errors


def validate_run_parameters(
    round_count: int,
    noise: float,
    generation_count: Optional[int] = None,
    strict: bool = False,
) -> None:
    """Raise InvalidParameterError for out-of-range parameters in strict mode."""
    if not strict:
        return
    is_valid, errors = check_run_parameters(round_count, noise, generation_count)
    if not is_valid:
        raise InvalidParameterError("; ".join(errors))


def resolve_population(
    initial: Optional[Sequence[int]],
    roster_size: int,
    strict: bool = False,
) -> List[int]:
    """Return a working copy of the initial population vector.

    A vector whose length differs from the roster is replaced by a
    uniform vector of DEFAULT_POPULATION per slot.

    Raises:
        PopulationSizeError: In strict mode, on a length mismatch.
        InvalidParameterError: In strict mode, on a negative count.
    """
    if initial is None or len(initial) != roster_size:
        got = 0 if initial is None else len(initial)
        if strict:
            raise PopulationSizeError(got, roster_size)
        logger.warning(
            "Population vector has %d entries, expected %d; using %d per strategy",
            got, roster_size, DEFAULT_POPULATION,
        )
        return [DEFAULT_POPULATION] * roster_size

    population = [int(count) for count in initial]
    if strict and any(count < 0 for count in population):
        raise InvalidParameterError(
            f"Population counts must be non-negative, got {population}"
        )
    return population
