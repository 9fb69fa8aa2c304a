"""Errors raised by the balancer itself (collaborator errors pass through untouched)."""

from typing import Any


class BalancerError(Exception):
    """Base class for errors introduced by the balancer."""


class ConfigurationError(BalancerError, ValueError):
    """Invalid proxy construction or strategy configuration."""


class UnsupportedOperationError(BalancerError, AttributeError):
    """The selected target does not expose the requested operation."""

    def __init__(self, operation: str, target: Any):
        self.operation = operation
        self.target = target
        super().__init__(
            f"undefined operation '{operation}' for an instance of {type(target).__name__}"
        )


class InvalidSelectionError(BalancerError, LookupError):
    """A strategy returned something that is not one of the candidates."""

    def __init__(self, selected: Any, strategy: Any):
        self.selected = selected
        self.strategy = strategy
        super().__init__(
            f"{type(strategy).__name__} selected {type(selected).__name__} "
            "which is not one of the configured candidates"
        )
