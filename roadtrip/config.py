# File: roadtrip/config.py
"""
Road-trip configuration
Dataset locations and runtime switches, loadable from YAML or JSON.
"""
import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from . import DATA_DIR, LOG_LEVEL

logger = logging.getLogger("roadtrip.config")

_PATH_FIELDS = ("borders_path", "capdist_path", "state_name_path")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class RoadTripConfig:
    """Where the three datasets live and how the CLI behaves"""
    borders_path: Path = field(default_factory=lambda: DATA_DIR / "borders.txt")
    capdist_path: Path = field(default_factory=lambda: DATA_DIR / "capdist.csv")
    state_name_path: Path = field(default_factory=lambda: DATA_DIR / "state_name.tsv")
    log_level: str = LOG_LEVEL
    exit_word: str = "EXIT"

    def __post_init__(self):
        """Ensure paths are Path objects and the level is one logging knows"""
        for name in _PATH_FIELDS:
            value = getattr(self, name)
            if isinstance(value, str):
                setattr(self, name, Path(value).expanduser())
        self.log_level = str(self.log_level).upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
        if not self.exit_word.strip():
            raise ValueError("exit_word must not be blank")

    @property
    def dataset_paths(self):
        return self.borders_path, self.capdist_path, self.state_name_path

    def save_to_file(self, file_path: Union[str, Path]):
        """Save configuration to file (JSON or YAML)"""
        file_path = Path(file_path)
        config_dict = self.to_dict()

        if file_path.suffix.lower() in ['.yaml', '.yml']:
            with open(file_path, 'w') as f:
                yaml.safe_dump(config_dict, f, default_flow_style=False, indent=2)
        else:
            with open(file_path, 'w') as f:
                json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, file_path: Union[str, Path]) -> 'RoadTripConfig':
        """Load configuration from file"""
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        if file_path.suffix.lower() in ['.yaml', '.yml']:
            with open(file_path, 'r') as f:
                try:
                    config_data = yaml.safe_load(f) or {}
                except yaml.YAMLError as exc:
                    raise ValueError(f"Invalid YAML in {file_path}: {exc}") from exc
        else:
            with open(file_path, 'r') as f:
                config_data = json.load(f)

        if not isinstance(config_data, dict):
            raise ValueError(f"{file_path} must hold a mapping of settings")

        config = cls.from_dict(config_data)
        # relative dataset paths are taken relative to the config file
        for name in _PATH_FIELDS:
            value = getattr(config, name)
            if name in config_data and not value.is_absolute():
                setattr(config, name, file_path.parent / value)
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            k: str(v) if isinstance(v, Path) else v
            for k, v in asdict(self).items()
        }

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'RoadTripConfig':
        """Create configuration from dictionary, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in config_dict.items() if k in known})
