"""Runtime configuration for a pkgprobe run.

A ``ProbeConfig`` value is built once in the entry point and handed to the
prober, checker and worker pool. Precedence: CLI flags, then the optional
YAML/JSON config file, then ``Constants`` defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

import yaml

from constants import Constants
from common.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass
class ProbeConfig:
    """Tunables for discovery, probing and the worker pool."""

    threads_num: int = Constants.DEFAULT_THREADS
    timeout: float = Constants.REQUEST_TIMEOUT
    verbose: bool = False
    strict_status: bool = True
    invalid_version_suffix: str = Constants.INVALID_VERSION_SUFFIX
    transport_only_hosts: List[str] = field(
        default_factory=lambda: list(Constants.TRANSPORT_ONLY_HOSTS)
    )
    conditional_get_domains: List[str] = field(
        default_factory=lambda: list(Constants.CONDITIONAL_GET_DOMAINS)
    )
    extractor: Optional[str] = None
    extractor_timeout: float = Constants.EXTRACTOR_TIMEOUT

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "ProbeConfig":
        """Create a config from a plain mapping, e.g. a parsed YAML file.

        Raises:
            ConfigError: If a known key carries a value of the wrong type.
        """
        config = cls()
        known = {f.name: f for f in fields(cls)}
        for key, value in data.items():
            if key not in known:
                logger.warning("Ignoring unknown config key: %s", key)
                continue
            setattr(config, key, _coerce(key, value, getattr(config, key)))
        config.validate()
        return config

    @classmethod
    def from_args(cls, args: Any) -> "ProbeConfig":
        """Create config from CLI arguments, layered over ``--config`` if given.

        Args:
            args: Parsed CLI arguments namespace.

        Returns:
            ProbeConfig instance.
        """
        config_path = getattr(args, "CONFIG", None)
        config = cls.from_mapping(load_config_file(config_path)) if config_path else cls()

        if getattr(args, "THREADS_NUM", None) is not None:
            config.threads_num = args.THREADS_NUM
        if getattr(args, "TIMEOUT", None) is not None:
            config.timeout = args.TIMEOUT
        if getattr(args, "VERBOSE", False):
            config.verbose = True
        if getattr(args, "EXTRACTOR", None):
            config.extractor = args.EXTRACTOR

        config.validate()
        return config

    def validate(self) -> None:
        if self.threads_num <= 0:
            raise ConfigError("threads_num must be > 0")
        if self.timeout <= 0:
            raise ConfigError("timeout must be > 0")
        if self.extractor_timeout <= 0:
            raise ConfigError("extractor_timeout must be > 0")
        if not self.invalid_version_suffix:
            raise ConfigError("invalid_version_suffix cannot be empty")


def _coerce(key: str, value: Any, current: Any) -> Any:
    """Check a config file value against the type of its default."""
    if isinstance(current, bool):
        if not isinstance(value, bool):
            raise ConfigError(f"{key} must be a boolean")
        return value
    if isinstance(current, (int, float)) and not isinstance(current, bool):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{key} must be a number")
        return type(current)(value)
    if isinstance(current, list):
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"{key} must be a list of strings")
        return [v.lower() for v in value]
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"{key} must be a string")
    return value


def load_config_file(config_path: str) -> Dict[str, Any]:
    """Load a YAML (or JSON) config file.

    A top-level ``pkgprobe`` section is used when present.

    Raises:
        ConfigError: If the file is missing, unparsable or not a mapping.
    """
    if not os.path.isfile(config_path):
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to load config {config_path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must contain a mapping")
    section = data.get("pkgprobe", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Config {config_path}: 'pkgprobe' must be a mapping")
    return section
