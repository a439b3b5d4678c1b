"""Container configuration."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class BoxConfig:
    """Configuration for a single Box.

    Attributes:
        name: Label used in log messages and repr
        thread_safe: Lock the cache and each construction so concurrent
            first access still constructs each producer at most once
        debug: Log every cache hit and transient construction
    """
    name: str = "default"
    thread_safe: bool = True
    debug: bool = False

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise ValueError("name must be a string")
        if not isinstance(self.thread_safe, bool):
            raise ValueError("thread_safe must be a boolean")
        if not isinstance(self.debug, bool):
            raise ValueError("debug must be a boolean")

    @classmethod
    def from_dict(cls, data: dict) -> "BoxConfig":
        """Create configuration from dictionary.

        Unknown keys are ignored so a Box section can live inside a
        larger application config.
        """
        return cls(
            name=data.get("name", "default"),
            thread_safe=data.get("thread_safe", True),
            debug=data.get("debug", False),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "BoxConfig":
        """Load configuration from YAML file.

        A missing file yields the defaults. The settings may sit at the top
        level or under a ``box`` key.
        """
        path = Path(path).expanduser()
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")

        section = data.get("box", data) or {}
        if not isinstance(section, dict):
            raise ValueError(f"Expected a mapping for box in {path}, got {type(section).__name__}")

        return cls.from_dict(section)

    @classmethod
    def from_env(cls, prefix: str = "BOXDI") -> "BoxConfig":
        """Load configuration from environment variables.

        Environment variables:
            {prefix}_CONFIG: Path to a YAML file loaded first
            {prefix}_NAME: Box name
            {prefix}_THREAD_SAFE: true|false
            {prefix}_DEBUG: true|false
        """
        def get(key: str, default: str = None) -> Optional[str]:
            return os.environ.get(f"{prefix}_{key}", default)

        def get_bool(key: str, default: bool) -> bool:
            val = get(key)
            if val is None:
                return default
            return val.lower() in ("true", "1", "yes")

        config_path = get("CONFIG")
        base = cls.from_file(config_path) if config_path else cls()

        return cls(
            name=get("NAME", base.name),
            thread_safe=get_bool("THREAD_SAFE", base.thread_safe),
            debug=get_bool("DEBUG", base.debug),
        )

    @classmethod
    def for_testing(cls, name: str = "test") -> "BoxConfig":
        """Create a configuration suitable for testing."""
        return cls(name=name, debug=True)

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors.

        Checks:
        - Name is not empty
        - Name contains no whitespace (it is used as a log tag)
        """
        errors = []

        if not self.name or not self.name.strip():
            errors.append("name cannot be empty")
        elif any(c.isspace() for c in self.name):
            errors.append("name cannot contain whitespace")

        return errors
