"""Settings dataclasses for floorroute."""
from dataclasses import dataclass, field
from typing import Dict, List

HEURISTIC_NAMES = ("euclidean", "manhattan", "zero", "legacy_xor")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PathfindingSettings:
    """Settings for the floor pathfinder."""
    avoid_collisions: bool = True      # treat occupied cells as impassable
    heuristic: str = "euclidean"       # one of HEURISTIC_NAMES
    log_statistics: bool = True        # log per-search statistics at DEBUG

    def validate(self) -> List[str]:
        """Return a list of validation errors."""
        errors = []
        if not isinstance(self.avoid_collisions, bool):
            errors.append(f"avoid_collisions must be a boolean, got {self.avoid_collisions!r}")
        if self.heuristic not in HEURISTIC_NAMES:
            errors.append(
                f"heuristic must be one of {', '.join(HEURISTIC_NAMES)}, got {self.heuristic!r}"
            )
        return errors


@dataclass
class LoggingSettings:
    """Settings for log output."""
    level: str = "INFO"
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    console_output: bool = True
    file_output: bool = False
    log_file: str = "logs/floorroute.log"
    max_file_size_mb: int = 10
    backup_count: int = 3
    component_levels: Dict[str, str] = field(default_factory=dict)

    def validate(self) -> List[str]:
        """Return a list of validation errors."""
        errors = []
        if self.level.upper() not in LOG_LEVELS:
            errors.append(f"Invalid log level: {self.level}")
        for component, level in self.component_levels.items():
            if level.upper() not in LOG_LEVELS:
                errors.append(f"Invalid log level for {component}: {level}")
        if self.max_file_size_mb <= 0:
            errors.append("max_file_size_mb must be positive")
        if self.backup_count < 0:
            errors.append("backup_count must be non-negative")
        return errors


@dataclass
class ApplicationSettings:
    """Top-level settings container."""
    version: str = "1.0.0"
    config_version: int = 1
    pathfinding: PathfindingSettings = field(default_factory=PathfindingSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def validate(self) -> Dict[str, List[str]]:
        """Validate every settings category."""
        return {
            "pathfinding": self.pathfinding.validate(),
            "logging": self.logging.validate(),
        }
