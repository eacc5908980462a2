"""
===============================================================================
HAMILTON - Configuration
===============================================================================
YAML configuration for the ambient parts of the package: logging setup and
text rendering. The algebra itself has no tunable behaviour.

File layout (config/hamilton.yaml)
----------------------------------
    logging:
      level: INFO
      format: "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    formatting:
      exponent_threshold: 6
      symbols: ["", "i", "j", "k"]

Missing sections and keys fall back to the defaults below.
===============================================================================
"""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / 'config' / 'hamilton.yaml'

DEFAULT_LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


@dataclass
class LoggingConfig:
    """
    Logging options passed to ``logging.basicConfig``.

    Attributes:
        level: Level name (DEBUG, INFO, ...) or numeric level.
        format: Record format string.
    """
    level: Union[str, int] = 'INFO'
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class FormattingConfig:
    """
    Options for rendering values as text.

    Attributes:
        exponent_threshold: Decimal exponents at or above this value (or
                            below -4) are written in scientific notation.
        symbols: Basis symbols appended to the 1, i, j, k components.
    """
    exponent_threshold: int = 6
    symbols: List[str] = field(default_factory=lambda: ['', 'i', 'j', 'k'])

    def __post_init__(self):
        if len(self.symbols) != 4:
            raise ValueError(
                f"Expected 4 basis symbols, got {len(self.symbols)}: {self.symbols}"
            )


@dataclass
class HamiltonConfig:
    """Top-level configuration."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    formatting: FormattingConfig = field(default_factory=FormattingConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'HamiltonConfig':
        """
        Build a configuration from a parsed YAML mapping.

        Raises
        ------
        ValueError
            If the mapping is not a dict, or names an unknown section or key.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )

        sections = {'logging': LoggingConfig, 'formatting': FormattingConfig}
        unknown = set(data) - set(sections)
        if unknown:
            raise ValueError(f"Unknown configuration sections: {sorted(unknown)}")

        kwargs = {}
        for name, section_cls in sections.items():
            values = data.get(name) or {}
            if not isinstance(values, dict):
                raise ValueError(f"Section '{name}' must be a mapping")
            allowed = {f.name for f in fields(section_cls)}
            bad = set(values) - allowed
            if bad:
                raise ValueError(f"Unknown keys in section '{name}': {sorted(bad)}")
            kwargs[name] = section_cls(**values)
        return cls(**kwargs)


def load_config(config_path: Optional[Union[str, Path]] = None) -> HamiltonConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to a YAML file. Defaults to config/hamilton.yaml
                     at the project root; if that file does not exist the
                     built-in defaults are returned.

    Returns:
        HamiltonConfig with every section filled in.

    Raises:
        FileNotFoundError: If an explicit config_path does not exist.
        ValueError: If the document is not a valid configuration.
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            logger.debug("No configuration file at %s, using defaults", DEFAULT_CONFIG_PATH)
            return HamiltonConfig()
        config_path = DEFAULT_CONFIG_PATH

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"No such configuration file: {config_path}")

    logger.info("Loading configuration from: %s", config_path)
    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)
    return HamiltonConfig.from_dict(data)


def setup_logging(config: Optional[HamiltonConfig] = None) -> None:
    """Configure the root logger from the logging section."""
    config = config or HamiltonConfig()
    level = config.logging.level
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=config.logging.format)
