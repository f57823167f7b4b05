"""
Config Manager - dot notation configuration access
Reads application config modules from the config/ package
"""

import importlib
import threading
from typing import Any, Optional, Dict

_MISSING = object()


class Config:
    """
    Configuration manager with dot notation access

    Usage:
        # Get config value
        late = Config.get('response.OUTPUT_LATE', True)

        # Set runtime value
        Config.set('response.output_late', False)

        # Check existence
        if Config.has('app.URL'):
            ...

    Config files should be in config/ directory:
        config/
        ├── app.py
        ├── response.py
        └── template.py
    """

    _lock = threading.Lock()
    _loaded: Dict[str, Any] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation (case-insensitive)

        Args:
            key: Config key in dot notation (e.g., 'response.OUTPUT_LATE')
            default: Default value if key not found

        Returns:
            Configuration value or default

        Example:
            Config.get('template.TEMPLATE_DIR', 'views')
            Config.get('TEMPLATE.template_dir', 'views')  # Same result
        """
        key_lower = key.lower()

        # Runtime overrides win over file values
        if key_lower in cls._runtime_overrides:
            return cls._runtime_overrides[key_lower]

        parts = key_lower.split('.')
        file_name = parts[0]

        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        value = cls._loaded.get(file_name)
        if value is None:
            return default

        for part in parts[1:]:
            value = cls._lookup(value, part)
            if value is _MISSING:
                return default

        return value

    @staticmethod
    def _lookup(container: Any, part: str) -> Any:
        """Case-insensitive attribute or key lookup of a single segment"""
        if isinstance(container, dict):
            for dict_key in container.keys():
                if str(dict_key).lower() == part:
                    return container[dict_key]
            return _MISSING

        if hasattr(container, '__dict__'):
            for attr_name in dir(container):
                if attr_name.lower() == part:
                    return getattr(container, attr_name)

        return _MISSING

    @classmethod
    def _load_config_file(cls, file_name: str):
        """
        Load a config file from config/ directory

        Args:
            file_name: Config file name (without .py extension)
        """
        with cls._lock:
            if file_name in cls._loaded:
                return

            try:
                module = importlib.import_module(f'config.{file_name}')
                cls._loaded[file_name] = module
            except ImportError:
                # Config file doesn't exist
                cls._loaded[file_name] = None

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set configuration value at runtime (does not persist to file)

        Example:
            Config.set('response.OUTPUT_LATE', False)
        """
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if configuration key exists"""
        return cls.get(key) is not None

    @classmethod
    def all(cls, file_name: str) -> Optional[Any]:
        """
        Get all configuration from a file

        Example:
            template_config = Config.all('template')
            print(template_config.TEMPLATE_DIR)
        """
        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        return cls._loaded.get(file_name)

    @classmethod
    def reload(cls, file_name: Optional[str] = None):
        """
        Reload configuration file(s)

        Args:
            file_name: Specific file to reload, or None to reload all
        """
        with cls._lock:
            names = [file_name] if file_name else list(cls._loaded.keys())
            for name in names:
                module = cls._loaded.get(name)
                if module is not None:
                    cls._loaded[name] = importlib.reload(module)
                else:
                    # Missing files are retried on next access
                    cls._loaded.pop(name, None)

    @classmethod
    def clear_runtime_overrides(cls):
        """Clear all runtime configuration overrides"""
        cls._runtime_overrides.clear()
