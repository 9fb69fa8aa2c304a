"""In-process load balancer: a proxy that forwards each call to one of several targets."""

from .errors import (
    BalancerError,
    ConfigurationError,
    UnsupportedOperationError,
    InvalidSelectionError,
)
from .log import configure_logging, get_logger
from .proxies import ForwardingProxy, supports
from .strategies import (
    SelectionStrategy,
    FixedSelection,
    RolloutSelection,
    RoundRobinSelection,
    RandomSelection,
    WeightedSelection,
    create_strategy,
)
from .config import StrategySpec, BalancerConfig

__all__ = [
    "BalancerError",
    "ConfigurationError",
    "UnsupportedOperationError",
    "InvalidSelectionError",
    "configure_logging",
    "get_logger",
    "ForwardingProxy",
    "supports",
    "SelectionStrategy",
    "FixedSelection",
    "RolloutSelection",
    "RoundRobinSelection",
    "RandomSelection",
    "WeightedSelection",
    "create_strategy",
    "StrategySpec",
    "BalancerConfig",
]
