"""
Configuration Settings
======================

Configuration dataclass for the entry validator and helpers to load and
save it as JSON or YAML.
"""

from dataclasses import dataclass
from pathlib import Path
import json
import logging

import yaml

from atom_validator.xml.utils import ATOM_NAMESPACE

logger = logging.getLogger(__name__)


@dataclass
class ValidatorConfig:
    """
    Entry validator configuration.

    - atom_namespace / namespace_strict: which children the lxml adapter
      sees. When strict, only Atom or un-namespaced children count.
    - advice_is_failure: treat advice findings as failures in reports
    - log_level: level for the `atom_validator` logger, set by
      apply_log_level(). Stored upper-case.

    Example:
        config = ValidatorConfig(namespace_strict=True)
        save_config(config, Path("validator.yaml"))
    """

    atom_namespace: str = ATOM_NAMESPACE
    namespace_strict: bool = False
    advice_is_failure: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        self.log_level = str(self.log_level).upper()

    def apply_log_level(self) -> None:
        """Set the `atom_validator` package logger to this level."""
        logging.getLogger("atom_validator").setLevel(self.log_level)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'atom_namespace': self.atom_namespace,
            'namespace_strict': self.namespace_strict,
            'advice_is_failure': self.advice_is_failure,
            'log_level': self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ValidatorConfig':
        """Create from dictionary. Unknown keys are ignored."""
        kwargs = {}

        if 'atom_namespace' in data:
            kwargs['atom_namespace'] = data['atom_namespace']
        if 'namespace_strict' in data:
            kwargs['namespace_strict'] = bool(data['namespace_strict'])
        if 'advice_is_failure' in data:
            kwargs['advice_is_failure'] = bool(data['advice_is_failure'])
        if 'log_level' in data:
            kwargs['log_level'] = data['log_level']

        return cls(**kwargs)


def load_config(config_path: Path) -> ValidatorConfig:
    """
    Load configuration from file.

    Supports JSON and YAML formats based on file extension.

    Args:
        config_path: Path to config file

    Returns:
        ValidatorConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is not supported
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, 'r', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    logger.info(f"Loaded configuration from {config_path}")
    return ValidatorConfig.from_dict(data or {})


def save_config(config: ValidatorConfig, config_path: Path) -> None:
    """
    Save configuration to file.

    Supports JSON and YAML formats based on file extension.

    Raises:
        ValueError: If file format is not supported
    """
    config_path = Path(config_path)
    suffix = config_path.suffix.lower()
    if suffix not in ['.yaml', '.yml', '.json']:
        raise ValueError(f"Unsupported config format: {suffix}")

    data = config.to_dict()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w', encoding='utf-8') as f:
        if suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Saved configuration to {config_path}")


def get_default_config() -> ValidatorConfig:
    """Get default configuration."""
    return ValidatorConfig()
