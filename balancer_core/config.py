import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Sequence

from .errors import ConfigurationError
from .log import get_logger
from .proxies import ForwardingProxy
from .strategies import SelectionStrategy, create_strategy

logger = get_logger(__name__)


@dataclass(frozen=True)
class StrategySpec:
    """Immutable description of a configured selection strategy."""

    name: str
    options: Dict[str, Any] = field(default_factory=dict)

    def build(self) -> SelectionStrategy:
        return create_strategy(self.name, **self.options)


class BalancerConfig:
    """Config facade that hides JSON parsing and strategy construction."""

    def __init__(self, spec: StrategySpec, source: str = "inline"):
        self._spec = spec
        logger.info("config.loaded", source=source, strategy=spec.name)

    @classmethod
    def from_file(cls, config_path: str) -> "BalancerConfig":
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with path.open("r", encoding="utf-8") as stream:
            try:
                payload = json.load(stream)
            except json.JSONDecodeError as exc:
                raise ConfigurationError(f"Config file {config_path} is not valid JSON: {exc}") from exc

        return cls(cls._parse(payload), source=str(path))

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "BalancerConfig":
        return cls(cls._parse(payload))

    @staticmethod
    def _parse(payload: Any) -> StrategySpec:
        if not isinstance(payload, dict):
            raise ConfigurationError("Configuration must be a JSON object.")
        strategy = payload.get("strategy")
        if not isinstance(strategy, dict):
            raise ConfigurationError("Configuration must include a 'strategy' object.")
        try:
            name = strategy["name"]
        except KeyError as exc:
            raise ConfigurationError("Strategy definition missing required field 'name'.") from exc
        options = strategy.get("options", {})
        if not isinstance(options, dict):
            raise ConfigurationError(f"Options for strategy '{name}' must be a JSON object.")
        return StrategySpec(name=str(name), options=dict(options))

    @property
    def strategy_spec(self) -> StrategySpec:
        return self._spec

    def build_strategy(self) -> SelectionStrategy:
        return self._spec.build()

    def build_proxy(self, candidates: Sequence[Any]) -> ForwardingProxy:
        return ForwardingProxy(candidates, self.build_strategy())
