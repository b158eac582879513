"""Configuration management for graph-hunter."""

import json
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import find_dotenv, load_dotenv


CONFIG_FILENAME = "graph-hunter.yaml"

ENV_IGNORE_PATTERNS = "GRAPH_HUNTER_IGNORE_PATTERNS"
ENV_LOG_LEVEL = "GRAPH_HUNTER_LOG_LEVEL"


def parse_pattern_list(raw: str) -> list[str]:
    """Parse a JSON array of glob strings (e.g. '["**/generated/**"]').

    Raises:
        ValueError: If the value is not a JSON array of strings
    """
    if not raw or not raw.strip():
        return []

    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Ignore patterns must be a JSON array: {e}") from e

    if not _is_string_list(value):
        raise ValueError("Ignore patterns must be a JSON array of strings")

    return value


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


class Config:
    """Configuration manager with lazy loading and defaults."""

    _instance: Optional["Config"] = None
    _config: dict = {}
    _loaded: bool = False

    DEFAULT_CONFIG = {
        "analysis": {
            "ignore_patterns": []
        },
        "report": {
            "max_rows": 50,
            "fail_on_cycles": False,
            "fail_on_dead_code": False
        },
        "logging": {
            "level": "INFO",
            "file": None
        }
    }

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def load(self, config_path: Optional[Path] = None) -> None:
        """Load configuration from a YAML file, then apply environment overrides."""
        load_dotenv(find_dotenv(usecwd=True))

        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILENAME

        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError(f"{config_path.name} must contain a mapping")
            self._config = data
        else:
            self._config = {}

        self._apply_env_overrides()
        self._loaded = True
        self._check_ignore_patterns()

    def _check_ignore_patterns(self) -> list:
        patterns = self.get("analysis.ignore_patterns", []) or []
        if not _is_string_list(patterns):
            raise ValueError("analysis.ignore_patterns must be a list of strings")
        return patterns

    def _apply_env_overrides(self) -> None:
        patterns = os.environ.get(ENV_IGNORE_PATTERNS)
        if patterns:
            self.set("analysis.ignore_patterns", parse_pattern_list(patterns))

        level = os.environ.get(ENV_LOG_LEVEL)
        if level:
            self.set("logging.level", level)

    def set(self, key: str, value: Any) -> None:
        """Set a config value using dot notation."""
        keys = key.split(".")
        section = self._config
        for k in keys[:-1]:
            if not isinstance(section.get(k), dict):
                section[k] = {}
            section = section[k]
        section[keys[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value using dot notation (e.g., 'report.max_rows')."""
        if not self._loaded:
            self.load()

        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                # Try default config
                default_value = self.DEFAULT_CONFIG
                for dk in keys:
                    if isinstance(default_value, dict) and dk in default_value:
                        default_value = default_value[dk]
                    else:
                        return default
                return default_value

        return value

    def reset(self) -> None:
        """Forget loaded values; the next access reloads."""
        self._config = {}
        self._loaded = False

    @property
    def ignore_patterns(self) -> list:
        """Get extra ignore patterns."""
        return list(self._check_ignore_patterns())

    @property
    def max_rows(self) -> int:
        """Get the maximum number of report rows."""
        return int(self.get("report.max_rows", 50))

    @property
    def log_file(self) -> Optional[Path]:
        log_file = self.get("logging.file")
        return Path(log_file) if log_file else None


# Global config instance
config = Config()
