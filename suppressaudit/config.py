"""
Configuration system for the suppression audit.

Supports YAML and JSON configuration files for customizing which files
are scanned, how unreadable files are handled, and where reports go.
"""

import codecs
import json
from pathlib import Path
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field, asdict

import yaml

from suppressaudit.core.engine import ON_ERROR_ABORT, ON_ERROR_CHOICES
from suppressaudit.core.walker import DEFAULT_EXCLUDE_DIRS, DEFAULT_EXTENSIONS


# Default configuration file names to search for
CONFIG_FILE_NAMES = [
    ".suppressaudit.yaml",
    ".suppressaudit.yml",
    ".suppressaudit.json",
    "suppressaudit.yaml",
    "suppressaudit.yml",
    "suppressaudit.json",
]

OUTPUT_FORMATS = ("text", "json")


@dataclass
class OutputConfig:
    """Configuration for the terminal summary."""
    format: str = "text"  # text, json
    verbose: bool = False
    color: bool = True


@dataclass
class AuditConfig:
    """
    Main configuration for the suppression audit.

    Example YAML config:

    ```yaml
    scan:
      extensions: [".js", ".jsx", ".ts", ".vue"]
      exclude_dirs: ["node_modules"]
      on_error: abort   # abort, skip
      encoding: utf-8
      sort_entries: true

    output_dir: ./reports

    output:
      format: text
      color: true
    ```
    """
    # Scan settings
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude_dirs: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
    on_error: str = ON_ERROR_ABORT
    encoding: str = "utf-8"
    sort_entries: bool = True

    # Report settings
    output_dir: str = "."
    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self):
        if self.on_error not in ON_ERROR_CHOICES:
            raise ValueError(
                f"Invalid on_error value {self.on_error!r}: "
                f"choose one of {', '.join(ON_ERROR_CHOICES)}"
            )
        if not self.extensions:
            raise ValueError("At least one file extension is required")
        if self.output.format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {self.output.format}")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to a dictionary."""
        return asdict(self)

    def to_engine_config(self) -> Dict[str, Any]:
        """Convert to engine configuration format."""
        return {
            "extensions": list(self.extensions),
            "exclude_dirs": list(self.exclude_dirs),
            "on_error": self.on_error,
            "encoding": self.encoding,
            "sort_entries": self.sort_entries,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuditConfig":
        """Create config from a dictionary."""
        data = dict(data)

        # Handle nested 'scan' section
        if isinstance(data.get("scan"), dict):
            data.update(data.pop("scan"))

        if "output" in data and isinstance(data["output"], dict):
            data["output"] = OutputConfig(**data["output"])

        # Map some common alternative names
        if "exclude" in data:
            data["exclude_dirs"] = data.pop("exclude")
        if "extension" in data:
            data["extensions"] = data.pop("extension")

        for key in ("extensions", "exclude_dirs"):
            if isinstance(data.get(key), str):
                data[key] = [data[key]]

        # Filter to only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        return cls(**filtered_data)


def load_config(path: str) -> Dict[str, Any]:
    """
    Load configuration from a file.

    Supports YAML and JSON formats.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    content = path.read_text(encoding="utf-8")

    if path.suffix == ".json":
        data = json.loads(content)
    else:
        data = yaml.safe_load(content)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")
    return data


def find_config(start_path: str = ".") -> Optional[str]:
    """
    Find a configuration file by searching up the directory tree.

    Returns the path to the first config file found, or None.
    """
    current = Path(start_path).resolve()

    while True:
        for name in CONFIG_FILE_NAMES:
            config_path = current / name
            if config_path.is_file():
                return str(config_path)
        if current == current.parent:
            return None
        current = current.parent


def load_audit_config(path: Optional[str] = None, start_dir: str = ".") -> AuditConfig:
    """
    Load an AuditConfig from a file or create a default one.

    If path is None, searches for a config file starting from start_dir.
    """
    if path is None:
        path = find_config(start_dir)

    if path is None:
        return AuditConfig()

    return AuditConfig.from_dict(load_config(path))


def create_default_config() -> str:
    """
    Create a default configuration file content.
    """
    defaults = AuditConfig()
    config = {
        "scan": defaults.to_engine_config(),
        "output_dir": defaults.output_dir,
        "output": asdict(defaults.output),
    }
    return yaml.dump(config, default_flow_style=False, sort_keys=False)
