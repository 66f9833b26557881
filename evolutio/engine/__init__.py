"""Match engine."""

from .match import (
    play_match,
    run_match,
    mirror_history,
    apply_noise,
    make_rng,
    cooperation_rates,
)

__all__ = [
    "play_match",
    "run_match",
    "mirror_history",
    "apply_noise",
    "make_rng",
    "cooperation_rates",
]
