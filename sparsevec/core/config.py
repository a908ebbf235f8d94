"""
Configuration loader for sparsevec.
Loads the YAML settings used to build vectors.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)


class Config:
    """
    Singleton config loader.
    
    Usage:
        config = Config.load("config/sparsevec.yaml")
        kind = config.get("vectors.kind")
        vectors = config.get_section("vectors")
    """
    
    _instance: Optional["Config"] = None
    _config: Dict[str, Any] = {}
    
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance
    
    @classmethod
    def load(cls, config_path: str = "config/sparsevec.yaml") -> "Config":
        """
        Load config from YAML file.
        
        Args:
            config_path: Path to config file
            
        Returns:
            Config instance
        """
        instance = cls()
        
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        
        with open(path, "r") as f:
            instance._config = yaml.safe_load(f) or {}
        
        logger.info(f"Loaded config from {config_path}")
        return instance
    
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get config value using dot notation.
        
        Example:
            config.get("vectors.kind")  # Returns "uint32"
            config.get("vectors.missing", 100)  # Returns 100
        """
        keys = key.split(".")
        value = self._config
        
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        
        return value
    
    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire config section as dict (empty if missing or null)."""
        return self.get(section) or {}
    
    @property
    def raw(self) -> Dict[str, Any]:
        """Get raw config dict."""
        return self._config
    
    @classmethod
    def reset(cls):
        """Reset singleton instance (useful for testing)."""
        cls._instance = None
        cls._config = {}


@dataclass
class VectorSettings:
    """
    Settings for building vectors.

    Attributes:
        kind: Vector representation ('generic', 'uint32', 'map')
        index_kind: Index kind for generic vectors ('int', 'uint32', 'string')
        check_duplicates: Reject duplicate keys at construction
    """
    kind: str = "uint32"
    index_kind: str = "int"
    check_duplicates: bool = True

    @classmethod
    def from_config(cls, config: Any = None) -> "VectorSettings":
        """
        Build settings from a Config instance or the 'vectors' section dict.

        Missing keys fall back to the defaults above.
        """
        if config is None:
            section = {}
        elif isinstance(config, Config):
            section = config.get_section("vectors")
        else:
            section = config

        defaults = cls()
        return cls(
            kind=section.get("kind", defaults.kind),
            index_kind=section.get("index_kind", defaults.index_kind),
            check_duplicates=bool(section.get("check_duplicates", defaults.check_duplicates)),
        )
