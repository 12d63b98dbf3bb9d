"""Configuration management for the prefab toolkit."""

import copy
import yaml
import logging
from pathlib import Path
from typing import Dict, Any

from .asset_path import DEFAULT_SEPARATORS, SEPARATOR

DEFAULT_CONFIG: Dict[str, Any] = {
    'paths': {
        'assets_root': 'Assets',
    },
    'prefab': {
        'extension': '.prefab',
        'asset_extension': '.asset',
        'require': {},
        'components': [
            {'name': 'meta', 'dir': '.MetaObject', 'kind': 'meta', 'assets': ['Meta']},
            {'name': 'blend_shape', 'dir': '.BlendShapes', 'kind': 'blend_shape', 'assets': ['BlendShape']},
        ],
    },
    'resolve': {
        'side_dir_suffix': '.Textures',
    },
    'settings': {
        'logging': {
            'level': 'INFO',
        },
    },
}


def load_yaml_file(file_path: Path) -> Dict[str, Any]:
    """Load a YAML file and return its contents."""
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def merge_dicts(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries, overlay taking precedence."""
    result = base.copy()
    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


class Config:
    """Configuration manager that merges a YAML config over built-in defaults."""

    def __init__(self, config_path: str = 'config.yaml'):
        """Initialize configuration by loading the main config file.

        Args:
            config_path: Path to main configuration file
        """
        self.config_path = Path(config_path)
        main_config = load_yaml_file(self.config_path)
        self._init_from(main_config, self.config_path.parent)

    @classmethod
    def from_dict(cls, main_config: Dict[str, Any], config_dir: Path) -> "Config":
        """Create Config instance from dictionary.

        Args:
            main_config: Configuration dictionary (already loaded)
            config_dir: Directory used as base for relative paths

        Returns:
            Configured Config instance
        """
        config = cls.__new__(cls)
        config.config_path = config_dir / "config.yaml"  # Virtual path
        config._init_from(main_config, config_dir)
        return config

    def _init_from(self, main_config: Dict[str, Any], config_dir: Path) -> None:
        # Set up project_root from paths.project_root if present
        paths_config = main_config.get('paths', {})
        if 'project_root' in paths_config:
            self.project_root = (config_dir / paths_config['project_root']).resolve()
        else:
            self.project_root = Path.cwd()

        self._config = merge_dicts(copy.deepcopy(DEFAULT_CONFIG), main_config)
        self._paths = self._config.get('paths', {})
        self._setup_logging()

        logging.debug(f"Loaded config from: {self.config_path}")

    def _resolve_path_value(self, value: str) -> Path:
        """Resolve a path value relative to project_root if not absolute.

        Args:
            value: Path string to resolve

        Returns:
            Resolved Path object
        """
        if not value:
            return Path()
        p = Path(value)
        if not p.is_absolute():
            return self.project_root / p
        return p.resolve()

    def _setup_logging(self):
        """Setup logging based on configuration."""
        log_level = self.get('settings.logging.level', 'INFO')
        numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)
        logging.basicConfig(
            level=numeric_level,
            format='%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation.

        Args:
            key_path: Dot-separated path to config value (e.g., 'prefab.extension')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_path(self, key: str) -> Path:
        """Get a path from configuration, resolved relative to project_root.

        Args:
            key: Path key in config (e.g., 'assets_root')

        Returns:
            Resolved Path object
        """
        path_str = self._paths.get(key)
        if path_str is None:
            raise ValueError(f"Path '{key}' not found in configuration")
        return self._resolve_path_value(path_str)

    def validate_paths(self):
        """Validate that the assets root exists."""
        assets_root = self.assets_root
        if not assets_root.is_dir():
            raise FileNotFoundError(f"Assets root not found: {assets_root}")

    @property
    def assets_root(self) -> Path:
        """Get the asset store root directory."""
        return self.get_path('assets_root')

    @property
    def separators(self) -> tuple[str, ...]:
        """Get the path separators recognized in asset paths."""
        configured = self._paths.get('separators')
        if not configured:
            return DEFAULT_SEPARATORS
        # "/" is always recognized
        return tuple(dict.fromkeys([SEPARATOR, *configured]))
