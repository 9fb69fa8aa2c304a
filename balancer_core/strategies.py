"""Strategy pattern implementations for picking a forwarding target."""

import random
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence, Type

from .errors import ConfigurationError


class SelectionStrategy(ABC):
    """Base class for selection strategies.

    The proxy only needs a callable ``select``; inheriting from this class is
    optional.
    """

    @abstractmethod
    def select(self, candidates: Sequence[Any]) -> Any:
        """Return exactly one element of ``candidates``."""
        pass


class FixedSelection(SelectionStrategy):
    """Always picks the candidate at a fixed position."""

    def __init__(self, index: int = 0):
        self.index = index

    def select(self, candidates: Sequence[Any]) -> Any:
        return candidates[self.index]


class RolloutSelection(SelectionStrategy):
    """Percentage-based two-way split.

    ``candidates[0]`` is the primary target and ``candidates[1]`` the
    experimental one; roughly ``percentage`` out of every 100 calls go to the
    experimental target.
    """

    def __init__(self, percentage: int, rng: Optional[random.Random] = None):
        if not 0 <= percentage <= 100:
            raise ConfigurationError(f"Rollout percentage must be within 0..100, got {percentage}.")
        self.percentage = percentage
        self._rng = rng or random.Random()

    def select(self, candidates: Sequence[Any]) -> Any:
        if len(candidates) < 2:
            return candidates[0]
        return candidates[1] if self._rng.randint(1, 100) <= self.percentage else candidates[0]


class RoundRobinSelection(SelectionStrategy):
    """Rotates through the candidates in order."""

    def __init__(self, start_index: int = 0):
        self._lock = threading.Lock()
        self._index = start_index

    def select(self, candidates: Sequence[Any]) -> Any:
        with self._lock:
            position = self._index % len(candidates)
            self._index += 1
        return candidates[position]


class RandomSelection(SelectionStrategy):
    """Uniform random choice."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def select(self, candidates: Sequence[Any]) -> Any:
        return self._rng.choice(candidates)


class WeightedSelection(SelectionStrategy):
    """Random choice biased by one weight per candidate."""

    def __init__(self, weights: Sequence[float], rng: Optional[random.Random] = None):
        try:
            weights = [float(w) for w in weights]
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Weights must be numbers: {exc}") from exc
        if not weights or any(w < 0 for w in weights) or sum(weights) <= 0:
            raise ConfigurationError("Weights must be non-negative and not all zero.")
        self.weights = tuple(weights)
        self._rng = rng or random.Random()

    def select(self, candidates: Sequence[Any]) -> Any:
        if len(candidates) != len(self.weights):
            raise ValueError(
                f"Expected {len(self.weights)} candidates for the configured weights, got {len(candidates)}."
            )
        return self._rng.choices(candidates, weights=self.weights, k=1)[0]


STRATEGIES: Dict[str, Type[SelectionStrategy]] = {
    "fixed": FixedSelection,
    "rollout": RolloutSelection,
    "round_robin": RoundRobinSelection,
    "random": RandomSelection,
    "weighted": WeightedSelection,
}


def create_strategy(strategy_name: str, **options: Any) -> SelectionStrategy:
    """Create a bundled strategy instance from its registered name."""
    key = (strategy_name or "").lower()
    if key not in STRATEGIES:
        raise ConfigurationError(
            f"Unknown strategy '{strategy_name}'. Expected one of: {', '.join(sorted(STRATEGIES))}."
        )
    try:
        return STRATEGIES[key](**options)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid options for strategy '{key}': {exc}") from exc
