"""
Configuration of hashing strategies.

A configuration names the strategy to build and, for the value strategy,
the per-type overrides to register. Types and relations are referenced by
dotted import paths so configurations can live in YAML files:

    strategy: value
    overrides:
      datetime.datetime: equivalence.hashers.dates.DateTimeHasher
"""

import importlib
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .core.equivalence import Equivalence
from .core.hasher import GenericHasher
from .errors import ConfigurationError
from .hashers.identity import IdentityHasher
from .hashers.value import ValueHasher

logger = logging.getLogger(__name__)

STRATEGIES = {
    "identity": IdentityHasher,
    "value": ValueHasher,
}

DEFAULT_CONFIG_FILENAME = ".equivalence.yml"
CONFIG_ENV_VAR = "EQUIVALENCE_CONFIG"


def resolve_dotted(path: str) -> Any:
    """
    Import the object named by a dotted path.

    The longest importable module prefix is imported and the remaining
    components are read as attributes, so nested classes resolve too.

    Args:
        path: Dotted path such as ``datetime.datetime``

    Returns:
        The referenced object

    Raises:
        ConfigurationError: If no prefix imports or an attribute is missing
    """
    parts = path.split(".")

    for split in range(len(parts), 0, -1):
        module_name = ".".join(parts[:split])
        try:
            target = importlib.import_module(module_name)
        except ImportError:
            continue

        try:
            for attribute in parts[split:]:
                target = getattr(target, attribute)
        except AttributeError:
            raise ConfigurationError(
                f"Cannot resolve '{path}': module '{module_name}' has no attribute path "
                f"'{'.'.join(parts[split:])}'",
                key=path
            ) from None
        return target

    raise ConfigurationError(f"Cannot resolve '{path}': no importable module", key=path)


@dataclass
class StrategyConfig:
    """
    Declarative description of a hashing strategy.

    Attributes:
        strategy: ``"identity"`` or ``"value"``
        overrides: Dotted type path to dotted relation class path; each
            relation class is instantiated without arguments
    """

    strategy: str = "value"
    overrides: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Check the configuration without importing anything."""
        if self.strategy not in STRATEGIES:
            raise ConfigurationError(
                f"strategy must be one of {sorted(STRATEGIES)}, got {self.strategy!r}",
                key="strategy"
            )

        if self.overrides and self.strategy != "value":
            raise ConfigurationError(
                f"overrides require the 'value' strategy, got {self.strategy!r}",
                key="overrides"
            )

        for type_path, relation_path in self.overrides.items():
            if not isinstance(type_path, str) or not isinstance(relation_path, str):
                raise ConfigurationError(
                    f"overrides must map dotted paths to dotted paths, got "
                    f"{type_path!r}: {relation_path!r}",
                    key="overrides"
                )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {"strategy": self.strategy, "overrides": dict(self.overrides)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StrategyConfig":
        """Create from dictionary representation."""
        overrides = data.get("overrides") or {}
        if not isinstance(overrides, dict):
            raise ConfigurationError(
                f"overrides must be a mapping, got {type(overrides).__name__}",
                key="overrides"
            )
        return cls(strategy=data.get("strategy", "value"), overrides=dict(overrides))

    def save_to_file(self, file_path: Union[str, Path]) -> None:
        """Save configuration to YAML file."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w") as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def load_from_file(cls, file_path: Union[str, Path]) -> "StrategyConfig":
        """Load configuration from YAML file."""
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        with open(file_path, "r") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e

        if data is not None and not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {file_path} must contain a mapping")

        logger.debug("Loaded strategy configuration from %s", file_path)
        return cls.from_dict(data or {})

    @classmethod
    def load_or_default(cls, config_path: Optional[Union[str, Path]] = None) -> "StrategyConfig":
        """
        Load configuration from the given path, the environment or the
        working directory, falling back to the default configuration.

        Args:
            config_path: Optional path to configuration file

        Returns:
            StrategyConfig instance
        """
        if config_path:
            return cls.load_from_file(config_path)

        env_config_path = os.getenv(CONFIG_ENV_VAR)
        if env_config_path:
            return cls.load_from_file(env_config_path)

        default_path = Path(DEFAULT_CONFIG_FILENAME)
        if default_path.exists():
            return cls.load_from_file(default_path)

        return cls()

    def build(self) -> GenericHasher:
        """
        Instantiate the configured strategy.

        Raises:
            ConfigurationError: If a type or relation path cannot be
                resolved, or a relation class does not produce an
                ``Equivalence``
        """
        strategy_class = STRATEGIES[self.strategy]
        if strategy_class is not ValueHasher:
            return strategy_class()

        equivalences = {}
        for type_path, relation_path in self.overrides.items():
            target_type = resolve_dotted(type_path)
            if not isinstance(target_type, type):
                raise ConfigurationError(f"'{type_path}' does not name a class", key=type_path)

            relation_class = resolve_dotted(relation_path)
            try:
                relation = relation_class()
            except TypeError as e:
                raise ConfigurationError(
                    f"Cannot instantiate relation '{relation_path}': {e}",
                    key=relation_path
                ) from e

            if not isinstance(relation, Equivalence):
                raise ConfigurationError(
                    f"'{relation_path}' is not an equivalence relation",
                    key=relation_path
                )

            logger.debug("Registering %s for %s", relation_path, type_path)
            equivalences[target_type] = relation

        return ValueHasher(equivalences)
