'''Global configuration system supporting JSON5 files and command-line overrides'''

import json5
import argparse
import logging
from pathlib import Path
from typing import Any

__all__ = [
    'Config',
    'get_config',
    'init_config',
    'default_integer_vector_widening',
    'default_na_display',
    'default_max_display_elements',
]

logger = logging.getLogger(__name__)


class Config:
    '''Global configuration singleton'''

    _instance = None
    _initialized = False

    # Default configuration values
    _defaults = {
        'integer_vector_widening': False,
        'na_display': 'NA',
        'max_display_elements': 6,
        'log_level': 'WARNING',
    }

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config = self._defaults.copy()
            self._cli_overrides = {}
            self._initialized = True

    def load_file(self, filepath: str | Path) -> bool:
        '''Load configuration from JSON5 file'''
        filepath = Path(filepath)
        if not filepath.exists():
            return False

        try:
            with open(filepath, 'r', encoding = 'utf-8') as f:
                data = json5.loads(f.read())

        except (OSError, ValueError) as e:
            logger.warning(f'Failed to load config from {filepath}: {e}')
            return False

        if not isinstance(data, dict):
            logger.warning(f'Ignoring config {filepath}: top level is not an object')
            return False

        self._config.update(data)
        return True

    def load_defaults(self):
        '''Load default configuration files'''
        # Project config shipped with the package
        project_config = Path(__file__).parent.parent / 'config.json5'
        self.load_file(project_config)

    def parse_args(self, args: list[str] = None):
        '''Parse command-line arguments and override config'''
        parser = argparse.ArgumentParser(
            description = 'hostbridge configuration',
            add_help = False
        )

        parser.add_argument(
            '--config',
            type = str,
            help = 'Path to config file'
        )

        parser.add_argument(
            '--log-level',
            type = str,
            choices = ['DEBUG', 'INFO', 'WARNING', 'ERROR'],
            help = 'Level for the hostbridge logger'
        )

        parser.add_argument(
            '--widen-integer-vectors',
            action = 'store_true',
            default = None,
            help = 'Accept integer vectors where double vectors are declared'
        )

        # Parse known args, ignore unknown
        parsed, _ = parser.parse_known_args(args)

        # Load config file if specified
        if parsed.config:
            self.load_file(parsed.config)

        # Apply command-line overrides
        if parsed.log_level:
            self._cli_overrides['log_level'] = parsed.log_level

        if parsed.widen_integer_vectors is not None:
            self._cli_overrides['integer_vector_widening'] = True

    def get(self, key: str, default: Any = None) -> Any:
        '''Get configuration value'''
        # CLI overrides have highest priority
        if key in self._cli_overrides:
            return self._cli_overrides[key]

        # Then config file values
        if key in self._config:
            return self._config[key]

        # Finally default value
        return default

    def set(self, key: str, value: Any):
        '''Set configuration value at runtime'''
        self._config[key] = value

    def reset(self):
        '''Drop file values and CLI overrides, back to built-in defaults'''
        self._config = self._defaults.copy()
        self._cli_overrides = {}

    @property
    def integer_vector_widening(self) -> bool:
        '''Whether integer vectors satisfy double vector targets'''
        return bool(self.get('integer_vector_widening'))

    @property
    def na_display(self) -> str:
        '''Text used for missing elements in reprs'''
        return str(self.get('na_display'))

    @property
    def max_display_elements(self) -> int:
        return int(self.get('max_display_elements'))

    @property
    def log_level(self) -> str:
        return str(self.get('log_level')).upper()


# Global config instance
_config = Config()


def get_config() -> Config:
    '''Get global config instance'''
    return _config


def default_integer_vector_widening() -> bool:
    return _config.integer_vector_widening


def default_na_display() -> str:
    return _config.na_display


def default_max_display_elements() -> int:
    return _config.max_display_elements


def init_config(args: list[str] = None):
    '''Initialize configuration system and apply the configured log level'''
    _config.load_defaults()
    if args is not None:
        _config.parse_args(args)

    logging.getLogger('hostbridge').setLevel(_config.log_level)


# Auto-load defaults on import
_config.load_defaults()
