import logging
from typing import Any, Callable, Optional, Sequence, Tuple

from .errors import ConfigurationError, InvalidSelectionError, UnsupportedOperationError
from .log import get_logger

logger = get_logger(__name__)


def _resolve_operation(target: Any, operation: Any) -> Optional[Callable[..., Any]]:
    if not isinstance(operation, str) or not operation or operation.startswith("_"):
        return None
    method = getattr(target, operation, None)
    return method if callable(method) else None


def supports(target: Any, operation: str) -> bool:
    """True when ``target`` exposes ``operation`` as a public callable."""
    return _resolve_operation(target, operation) is not None


class ForwardingProxy:
    """Proxy that hides a set of interchangeable targets behind one object.

    Every call not defined on the proxy itself is forwarded to a single
    candidate picked by ``strategy.select(candidates)``. The strategy runs
    once per call, and whatever the target returns or raises reaches the
    caller unchanged.
    """

    __slots__ = ("_candidates", "_strategy")

    def __init__(self, candidates: Sequence[Any], strategy: Any):
        candidates = tuple(candidates or ())
        if not candidates:
            raise ConfigurationError("ForwardingProxy requires at least one candidate.")
        if strategy is None:
            raise ConfigurationError("ForwardingProxy requires a selection strategy.")
        if not callable(getattr(strategy, "select", None)):
            raise ConfigurationError(
                f"Strategy {type(strategy).__name__} does not define a callable 'select'."
            )
        self._candidates: Tuple[Any, ...] = candidates
        self._strategy = strategy

    @property
    def candidates(self) -> Tuple[Any, ...]:
        return self._candidates

    @property
    def strategy(self) -> Any:
        return self._strategy

    def invoke(self, operation: str, /, *args: Any, **kwargs: Any) -> Any:
        target = self._strategy.select(self._candidates)
        if not any(candidate is target for candidate in self._candidates):
            raise InvalidSelectionError(target, self._strategy)

        method = _resolve_operation(target, operation)
        debug = logger.isEnabledFor(logging.DEBUG)
        if method is None:
            if debug:
                logger.debug(
                    "proxy.unsupported_operation",
                    operation=operation,
                    target=type(target).__name__,
                )
            raise UnsupportedOperationError(operation, target)

        if debug:
            logger.debug("proxy.forward", operation=operation, target=type(target).__name__)
        return method(*args, **kwargs)

    def __getattr__(self, name: str):
        # Only reached for names the proxy does not define itself.
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

        def forward(*args: Any, **kwargs: Any) -> Any:
            return self.invoke(name, *args, **kwargs)

        forward.__name__ = name
        forward.__qualname__ = f"{type(self).__name__}.{name}"
        return forward

    def __repr__(self) -> str:
        names = ", ".join(type(candidate).__name__ for candidate in self._candidates)
        return f"<ForwardingProxy strategy={type(self._strategy).__name__} candidates=[{names}]>"
