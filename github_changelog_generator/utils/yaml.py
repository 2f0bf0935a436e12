"""Contains utility functions for working with YAML (and JSON) documents."""

from pathlib import Path
from typing import Any

from ruamel.yaml import YAML

yaml = YAML(typ="safe")


def load_yaml_file(path: Path) -> Any:
    """Loads a YAML or JSON file and returns the parsed document."""
    with open(path, encoding="utf-8") as f:
        return yaml.load(f)


def load_yaml_string(content: str) -> Any:
    """Parses a YAML or JSON string and returns the parsed document.

    JSON is a subset of YAML, so section descriptions written as JSON on the
    command line go through the same loader as YAML files.
    """
    return yaml.load(content)
