"""JSON-backed configuration for floorroute."""
import json
import logging
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .settings import ApplicationSettings

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _resolve(path: PathLike) -> Path:
    return Path(path).expanduser().resolve()


def _merge(target, data: Dict[str, Any], prefix: str = ""):
    """Copy known keys from data onto a settings dataclass, recursing into sections."""
    for key, value in data.items():
        if not hasattr(target, key):
            logger.warning(f"Ignoring unknown setting: {prefix}{key}")
            continue
        current = getattr(target, key)
        if is_dataclass(current) and isinstance(value, dict):
            _merge(current, value, prefix=f"{prefix}{key}.")
        else:
            setattr(target, key, value)


class ConfigManager:
    """Loads and saves ApplicationSettings as a JSON file.

    Without an explicit path the first existing file in SEARCH_PATHS is used;
    if none exists the first entry is where a default file gets written.
    """

    SEARCH_PATHS = (
        "floorroute.json",
        "config/floorroute.json",
        "~/.floorroute/config.json",
        "~/.config/floorroute/config.json",
    )

    def __init__(self, config_path: Optional[PathLike] = None, create_default: bool = True):
        self.settings = ApplicationSettings()
        self.config_path = _resolve(config_path) if config_path else self._search()

        if self.config_path.exists():
            self.load()
        elif create_default and self.save():
            logger.info(f"Wrote default configuration to {self.config_path}")

    def _search(self) -> Path:
        candidates = [_resolve(p) for p in self.SEARCH_PATHS]
        found = next((p for p in candidates if p.exists()), None)
        if found is not None:
            logger.info(f"Using configuration file {found}")
            return found
        return candidates[0]

    def load(self, config_path: Optional[PathLike] = None) -> bool:
        """Merge a JSON file into the current settings. Returns False if unreadable."""
        path = _resolve(config_path) if config_path else self.config_path
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load configuration from {path}: {e}")
            return False

        if not isinstance(data, dict):
            logger.error(f"Configuration in {path} is not a JSON object")
            return False

        _merge(self.settings, data)
        for category, errors in self.validate().items():
            for error in errors:
                logger.warning(f"Invalid {category} setting in {path}: {error}")

        logger.info(f"Configuration loaded from {path}")
        return True

    def save(self, config_path: Optional[PathLike] = None) -> bool:
        """Write the current settings as JSON. Returns False on I/O failure."""
        path = _resolve(config_path) if config_path else self.config_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(asdict(self.settings), indent=2), encoding='utf-8')
        except OSError as e:
            logger.error(f"Failed to save configuration to {path}: {e}")
            return False
        return True

    def get_settings(self) -> ApplicationSettings:
        return self.settings

    def update(self, category: str, **kwargs):
        """Set fields of one settings section, e.g. ``update("pathfinding", heuristic="zero")``."""
        section = getattr(self.settings, category)
        _merge(section, kwargs, prefix=f"{category}.")

    def update_pathfinding_settings(self, **kwargs):
        self.update("pathfinding", **kwargs)

    def update_logging_settings(self, **kwargs):
        self.update("logging", **kwargs)

    def validate(self) -> Dict[str, Any]:
        return self.settings.validate()

    def reset_to_defaults(self):
        self.settings = ApplicationSettings()


_config_manager: Optional[ConfigManager] = None


def get_config() -> ConfigManager:
    """Return the process-wide manager, creating it from the search paths on first use."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def initialize_config(config_path: Optional[PathLike] = None,
                      create_default: bool = True) -> ConfigManager:
    """Replace the process-wide manager, e.g. to point it at a specific file."""
    global _config_manager
    _config_manager = ConfigManager(config_path, create_default=create_default)
    return _config_manager
