"""
Search defaults for the filefinder command, read from YAML.

A config file is a flat mapping of FinderConfig fields. It is either named
explicitly with --config or picked up from the working directory under one
of a few conventional names; without either, built-in defaults apply.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List, Union
import logging
from dataclasses import dataclass

from pydantic import ValidationError

from ..models.config import FinderConfig


logger = logging.getLogger(__name__)


@dataclass
class ConfigParseResult:
    """
    Outcome of reading search defaults.

    Attributes:
        config: Validated defaults
        warnings: Settings that are legal but can never match anything
        config_path: File the defaults came from, None for built-ins
        is_default: True when no file was read
    """
    config: FinderConfig
    warnings: List[str]
    config_path: Optional[Path]
    is_default: bool


class ConfigurationError(Exception):
    """A config file is missing, unreadable, malformed or holds bad values."""
    pass


class ConfigParser:
    """
    Reads a YAML mapping into a FinderConfig.

    Settings that validate but select nothing (an empty size window, an
    extension without its dot) are logged as warnings, or rejected outright
    when strict_mode is set.
    """

    DEFAULT_CONFIG_NAMES = [
        '.filefinder.yaml',
        '.filefinder.yml',
        'filefinder.yaml',
        'filefinder.yml'
    ]

    def __init__(self, strict_mode: bool = False):
        """
        Args:
            strict_mode: Reject configurations that produce warnings
        """
        self.strict_mode = strict_mode
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load_config(self, config_path: Optional[Union[str, Path]] = None) -> ConfigParseResult:
        """
        Read search defaults from config_path, or from the first
        DEFAULT_CONFIG_NAMES entry present in the working directory.

        Raises:
            ConfigurationError: The named file does not exist, or a file
                that was found cannot be used
        """
        if config_path:
            config_path = Path(config_path)
            if not config_path.exists():
                raise ConfigurationError(f"Configuration file not found: {config_path}")

            config_data = self._load_yaml_file(config_path)
            is_default = False
        else:
            config_path, config_data = self._find_and_load_config()
            is_default = config_data is None
            if is_default:
                config_data = {}

        finder_config = self._validate_config_data(config_data, config_path)
        warnings = finder_config.validate_configuration()

        if self.strict_mode and warnings:
            raise ConfigurationError(f"Configuration warnings in strict mode: {'; '.join(warnings)}")

        for warning in warnings:
            self.logger.warning(warning)

        self.logger.info(f"Search defaults taken from {config_path or 'built-in values'}")

        return ConfigParseResult(
            config=finder_config,
            warnings=warnings,
            config_path=config_path,
            is_default=is_default
        )

    def _find_and_load_config(self) -> tuple[Optional[Path], Optional[Dict[str, Any]]]:
        """Return (path, data) for the first conventional file in the cwd, else (None, None)."""
        cwd = Path.cwd()

        for config_name in self.DEFAULT_CONFIG_NAMES:
            candidate = cwd / config_name
            if candidate.is_file():
                self.logger.info(f"Using configuration file {candidate}")
                return candidate, self._load_yaml_file(candidate)

        self.logger.debug(f"No configuration file in {cwd}")
        return None, None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Read file_path as a YAML mapping. Empty and comment-only files
        yield an empty mapping.

        Raises:
            ConfigurationError: I/O failure, bad YAML, or a top-level value
                that is not a mapping
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()

            if not content.strip():
                self.logger.warning(f"Configuration file is empty: {file_path}")
                return {}

            data = yaml.safe_load(content)

            # Comment-only documents parse to None
            if data is None:
                return {}

            if not isinstance(data, dict):
                raise ConfigurationError(f"Configuration file must contain a YAML object, got {type(data).__name__}")

            return data

        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {file_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e

    def _validate_config_data(self, config_data: Dict[str, Any],
                              config_path: Optional[Path]) -> FinderConfig:
        # One "field: message" entry per pydantic error
        try:
            return FinderConfig.from_dict(config_data)
        except ValidationError as e:
            problems = []
            for error in e.errors():
                field = '.'.join(str(part) for part in error['loc']) or 'config'
                problems.append(f"{field}: {error['msg']}")
            source = config_path or 'defaults'
            raise ConfigurationError(f"Configuration validation failed for {source}: {'; '.join(problems)}") from e


def load_config(config_path: Optional[Union[str, Path]] = None, strict_mode: bool = False) -> ConfigParseResult:
    """Shorthand for ``ConfigParser(strict_mode).load_config(config_path)``."""
    return ConfigParser(strict_mode=strict_mode).load_config(config_path)
