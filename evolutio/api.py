"""Command surface for front ends.

Commands take plain data (strategy ids, numbers, a ``{t, r, p, s}``
payoff mapping) and return JSON-ready dicts, so a UI can call them by
name through ``invoke``.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from .core.config import DEFAULT_NOISE, DEFAULT_ROUNDS, ENGINE_VERSION, STRICT_MODE
from .core.errors import UnknownCommandError
from .core.types import PayoffMatrix
from .engine.match import run_match
from .experiments.evolution import run_evolution as _run_evolution
from .experiments.tournament import run_tournament as _run_tournament

logger = logging.getLogger(__name__)

PayoffInput = Union[PayoffMatrix, Mapping[str, Any], None]


def _as_matrix(payoff_matrix: PayoffInput) -> PayoffMatrix:
    if payoff_matrix is None:
        return PayoffMatrix()
    if isinstance(payoff_matrix, PayoffMatrix):
        return payoff_matrix
    return PayoffMatrix.from_dict(payoff_matrix)


def greet_engine() -> str:
    """Return the engine banner shown by the front end status bar."""
    return f"Core Engine: v{ENGINE_VERSION} (Custom Payoff Ready)"


def run_game(
    p1_id: str,
    p2_id: str,
    rounds: int = DEFAULT_ROUNDS,
    noise: float = DEFAULT_NOISE,
    payoff_matrix: PayoffInput = None,
    seed: Optional[int] = None,
    strict: bool = STRICT_MODE,
) -> Dict[str, Any]:
    """Play one match and return it as a dict."""
    result = run_match(
        p1_id, p2_id, rounds, noise, _as_matrix(payoff_matrix), seed=seed, strict=strict
    )
    return result.to_dict()


def run_tournament(
    rounds: int = DEFAULT_ROUNDS,
    noise: float = DEFAULT_NOISE,
    payoff_matrix: PayoffInput = None,
    seed: Optional[int] = None,
    strict: bool = STRICT_MODE,
) -> Dict[str, Any]:
    """Run the round-robin tournament and return its ranking as a dict."""
    result = _run_tournament(
        rounds, noise, _as_matrix(payoff_matrix), seed=seed, strict=strict
    )
    return result.to_dict()


def run_evolution(
    rounds: int,
    noise: float,
    initial_populations: Optional[Sequence[int]],
    generations: int,
    payoff_matrix: PayoffInput = None,
    seed: Optional[int] = None,
    strict: bool = STRICT_MODE,
) -> List[Dict[str, Any]]:
    """Run the evolutionary simulation and return one dict per generation."""
    history = _run_evolution(
        rounds,
        noise,
        initial_populations,
        generations,
        _as_matrix(payoff_matrix),
        seed=seed,
        strict=strict,
    )
    return [generation.to_dict() for generation in history]


COMMANDS: Dict[str, Callable[..., Any]] = {
    "greet_engine": greet_engine,
    "run_game": run_game,
    "run_tournament": run_tournament,
    "run_evolution": run_evolution,
}


def invoke(command: str, **kwargs: Any) -> Any:
    """Dispatch a command by name.

    Raises:
        UnknownCommandError: If the command is not registered.
    """
    if command not in COMMANDS:
        available = ", ".join(COMMANDS.keys())
        raise UnknownCommandError(
            f"Command '{command}' not found. Available commands: {available}"
        )
    logger.debug("Invoking %s", command)
    return COMMANDS[command](**kwargs)
