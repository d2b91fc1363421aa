# src/keyscope/config.py
import configparser
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

logger = logging.getLogger(__name__)

# Default fragment substituted for ``{key}`` in usage-matcher templates
KEY_REG_DEFAULT = r"[\w\d\. \-\[\]\/:]*?"


class Config:
    """Configuration manager for keyscope"""

    def __init__(self, config_path: Optional[Path] = None):
        self.config = configparser.ConfigParser(interpolation=None)
        self.config_path = config_path or Path(__file__).parent.parent / "config.ini"

        # Set defaults
        self._set_defaults()

        # Load config file if it exists
        if self.config_path.exists():
            self.config.read(self.config_path, encoding="utf-8")
            logger.debug("Loaded configuration from %s", self.config_path)

    def _set_defaults(self):
        """Set default configuration values"""
        self.config.add_section('usage')
        self.config.set('usage', 'disable_path_parsing', 'false')
        self.config.set('usage', 'default_namespace', '')
        self.config.set('usage', 'regex_key', KEY_REG_DEFAULT)

        self.config.add_section('frameworks')
        self.config.set('frameworks', 'enabled', '')

        self.config.add_section('logging')
        self.config.set('logging', 'log_level', 'INFO')
        self.config.set('logging', 'enable_performance_logging', 'false')

    def get(self, section: str, key: str, fallback: Any = None) -> Any:
        """Get configuration value with type conversion"""
        try:
            value = self.config.get(section, key)
            # Type conversion based on defaults
            if section == 'usage':
                if key == 'disable_path_parsing':
                    return value.strip().lower() == 'true'
                elif key == 'default_namespace':
                    return value.strip() or None
                elif key == 'regex_key':
                    return value or KEY_REG_DEFAULT
            elif section == 'frameworks':
                if key == 'enabled':
                    return [v.strip() for v in value.split(',') if v.strip()]
            elif section == 'logging':
                if key == 'enable_performance_logging':
                    return value.strip().lower() == 'true'

            return value
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback


@dataclass(frozen=True)
class Settings:
    """
    Snapshot of the usage options the matching core depends on.

    Attributes:
        disable_path_parsing (bool): Report keys ending in ``.`` instead of
            treating them as incomplete
        default_namespace (Optional[str]): Namespace applied to keys outside
            any scope
        regex_key (str): Regular-expression fragment describing a key
    """
    disable_path_parsing: bool = False
    default_namespace: Optional[str] = None
    regex_key: str = KEY_REG_DEFAULT

    @classmethod
    def from_config(cls, cfg: Optional["Config"] = None) -> "Settings":
        cfg = cfg or config
        return cls(
            disable_path_parsing=cfg.get('usage', 'disable_path_parsing', False),
            default_namespace=cfg.get('usage', 'default_namespace', None),
            regex_key=cfg.get('usage', 'regex_key', KEY_REG_DEFAULT),
        )


def enabled_frameworks(cfg: Optional["Config"] = None) -> List[str]:
    """Framework ids pinned in ``[frameworks] enabled`` (empty means auto-detect)."""
    cfg = cfg or config
    return cfg.get('frameworks', 'enabled', [])


# Global config instance
config = Config()
