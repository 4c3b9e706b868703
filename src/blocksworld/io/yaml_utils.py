"""Define utility functions for reading world and command files and exporting plans as YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def export_yaml_data(data: dict[str, Any] | list[Any], filepath: Path) -> None:
    """Write the given data (e.g. exported plans) to a YAML file, creating its directory.

    Mapping keys keep their insertion order, so exported plan records read in the order
    in which their fields were built.

    :param data: YAML-serializable dictionary or list
    :param filepath: Path to the YAML file to be written (overwritten if it exists)
    """
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_text(yaml.safe_dump(data, sort_keys=False, default_flow_style=False))


def load_yaml_data(yaml_path: Path, required_keys: set[str] | None = None) -> Any:
    """Load the contents of a YAML file (e.g. a world description) into Python data.

    :param yaml_path: Path to the YAML file to be loaded
    :param required_keys: Keys the loaded mapping must contain (if None, ignored)
    :return: Loaded data, typically a dictionary mapping strings to values
    :raises FileNotFoundError: If the YAML file doesn't exist
    :raises RuntimeError: If the file isn't valid YAML
    :raises KeyError: If required keys are given but the loaded mapping lacks any of them
    """
    if not yaml_path.is_file():
        raise FileNotFoundError(f"Cannot load data from nonexistent YAML file: {yaml_path}")

    try:
        yaml_data = yaml.safe_load(yaml_path.read_text())
    except yaml.YAMLError as error:
        raise RuntimeError(f"Failed to parse YAML file: {yaml_path}") from error

    if required_keys:
        present = set(yaml_data) if isinstance(yaml_data, dict) else set()
        missing = sorted(required_keys - present)
        if missing:
            raise KeyError(f"Required keys {missing} were missing in data loaded from {yaml_path}")

    return yaml_data
