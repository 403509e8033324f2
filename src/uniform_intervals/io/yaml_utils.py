"""Define utility functions for reading sampler declarations from YAML files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_sampler_declarations(yaml_path: Path) -> dict[str, Any]:
    """Read the mapping from sampler names to sampler declarations stored in a YAML file.

    An empty file declares no samplers. Each declaration is returned as loaded, to be validated
    against UniformSamplerSchema by the caller.

    :param yaml_path: Path to a YAML file mapping sampler names to sampler declarations
    :return: Dictionary mapping sampler names to their (unvalidated) declarations
    :raises FileNotFoundError: If no file exists at the given path
    :raises RuntimeError: If the file isn't valid YAML
    :raises TypeError: If the top level of the file isn't a mapping from names to samplers
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Cannot load samplers from nonexistent YAML file: {yaml_path}")

    try:
        with yaml_path.open() as yaml_file:
            declarations = yaml.safe_load(yaml_file)
    except yaml.YAMLError as error:
        raise RuntimeError(f"Failed to load samplers from YAML file: {yaml_path}") from error

    if declarations is None:
        return {}
    if not isinstance(declarations, dict):
        raise TypeError(
            f"Expected {yaml_path} to map sampler names to samplers, "
            f"but it holds a {type(declarations).__name__}.",
        )

    return declarations
