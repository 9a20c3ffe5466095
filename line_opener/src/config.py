"""
Configuration management for line-opener.

Handles loading, saving, and validating the defaults the CLI applies to
every read.
"""

import codecs
import logging
import os
import shutil
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

from .constants import (
    BACKWARD_TOKEN,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_ENCODING,
    END_TOKEN,
    FORWARD_TOKEN,
    START_TOKEN,
)
from ..utils.logger_setup import get_logger

logger = get_logger(__name__)

# Load environment variables from .env file in tool's directory
TOOL_ROOT = Path(__file__).parent.parent.parent
ENV_FILE = TOOL_ROOT / ".env"
if ENV_FILE.exists():
    load_dotenv(ENV_FILE)

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass
class ReadingConfig:
    """Defaults for a read request."""
    position: str = START_TOKEN
    direction: str = FORWARD_TOKEN
    encoding: str = DEFAULT_ENCODING
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        """Override from LINE_OPENER_* environment variables."""
        self.position = os.getenv("LINE_OPENER_POSITION", self.position)
        self.direction = os.getenv("LINE_OPENER_DIRECTION", self.direction)
        self.encoding = os.getenv("LINE_OPENER_ENCODING", self.encoding)

        chunk_str = os.getenv("LINE_OPENER_CHUNK_SIZE")
        if chunk_str:
            try:
                self.chunk_size = int(chunk_str)
            except ValueError:
                logger.warning(f"Ignoring LINE_OPENER_CHUNK_SIZE={chunk_str!r}, using {self.chunk_size}")


@dataclass
class OutputConfig:
    """How extracted lines are displayed."""
    number_lines: bool = False
    number_separator: str = ": "


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console: bool = False

    def __post_init__(self):
        self.level = os.getenv("LINE_OPENER_LOG_LEVEL", self.level)


@dataclass
class Config:
    """Main configuration class."""
    reading: ReadingConfig = field(default_factory=ReadingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create Config from dictionary."""
        return cls(
            reading=ReadingConfig(**data.get('reading', {})),
            output=OutputConfig(**data.get('output', {})),
            logging=LoggingConfig(**data.get('logging', {}))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        return {
            'reading': asdict(self.reading),
            'output': asdict(self.output),
            'logging': asdict(self.logging)
        }


class ConfigManager:
    """Manages configuration loading, saving, and resolution."""

    DEFAULT_CONFIG_DIR = ".line-opener"
    DEFAULT_CONFIG_FILE = "config.yaml"

    def __init__(self, project_root: Optional[str] = None):
        """
        Initialize ConfigManager.

        Args:
            project_root: Root directory of the project. If None, uses current directory.
        """
        self.project_root = Path(project_root or os.getcwd())
        self.config_dir = self.project_root / self.DEFAULT_CONFIG_DIR
        self.config_file = self.config_dir / self.DEFAULT_CONFIG_FILE

    def load(self) -> Config:
        """
        Load configuration from file or create default.

        Returns:
            Loaded or default configuration
        """
        if self.config_file.exists():
            return self._load_from_file()
        return Config()

    def _load_from_file(self) -> Config:
        """Load configuration from YAML file."""
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}

            # Resolve environment variables
            data = self._resolve_env_vars(data)

            return Config.from_dict(data)
        except (OSError, yaml.YAMLError, TypeError, ValueError) as e:
            logger.warning(f"Error loading config file: {e}")
            logger.info("Using default configuration.")
            return Config()

    def save(self, config: Config):
        """
        Save configuration to file.

        Args:
            config: Configuration to save
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, 'w', encoding='utf-8') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

    def init_config(self, overwrite: bool = False) -> bool:
        """
        Initialize configuration file with defaults.

        Args:
            overwrite: Whether to overwrite existing config

        Returns:
            True if config was created/updated, False otherwise
        """
        if self.config_file.exists() and not overwrite:
            logger.info(f"Configuration already exists at: {self.config_file}")
            return False

        if overwrite and self.config_file.exists():
            self.config_file.unlink()
            logger.info("Removed existing configuration file")

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.save(Config())

        logger.info(f"Configuration initialized at: {self.config_file}")
        return True

    def _resolve_env_vars(self, data: Any) -> Any:
        """
        Recursively resolve environment variables in configuration.

        Supports ${VAR_NAME} syntax.
        """
        if isinstance(data, dict):
            return {k: self._resolve_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [self._resolve_env_vars(item) for item in data]
        elif isinstance(data, str):
            if data.startswith('${') and data.endswith('}'):
                var_name = data[2:-1]
                return os.environ.get(var_name, data)
        return data

    def validate(self, config: Config) -> List[str]:
        """
        Validate configuration.

        Raw position/direction values never fail to parse, so this flags
        values that would silently fall back to a default.

        Args:
            config: Configuration to validate

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        position = str(config.reading.position)
        digits = position[1:] if position.startswith("+") else position
        if position not in (START_TOKEN, END_TOKEN) and not digits.isdigit():
            errors.append(f"Invalid default position: {config.reading.position}")

        if config.reading.direction not in (FORWARD_TOKEN, BACKWARD_TOKEN):
            errors.append(f"Invalid default direction: {config.reading.direction}")

        if not isinstance(config.reading.chunk_size, int) or config.reading.chunk_size < 1:
            errors.append(f"Invalid chunk size: {config.reading.chunk_size}")

        try:
            codecs.lookup(config.reading.encoding)
        except LookupError:
            errors.append(f"Unknown encoding: {config.reading.encoding}")

        if str(config.logging.level).upper() not in VALID_LOG_LEVELS:
            errors.append(f"Invalid log level: {config.logging.level}")

        return errors

    def cleanup(self) -> bool:
        """
        Remove configuration directory and all its contents.

        Returns:
            True if cleanup was successful, False otherwise
        """
        if not self.config_dir.exists():
            logger.info(f"No configuration found at: {self.config_dir}")
            return False

        # Close all logging handlers to release file locks (Windows issue)
        root_logger = logging.getLogger('line_opener')
        for handler in root_logger.handlers[:]:
            if isinstance(handler, logging.FileHandler):
                handler.close()
                root_logger.removeHandler(handler)

        try:
            shutil.rmtree(self.config_dir)
            return True
        except OSError as e:
            logger.error(f"Error removing configuration: {e}")
            return False
