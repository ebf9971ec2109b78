"""
Loading argument defaults from YAML or JSON configuration files.

A configuration file is a flat mapping of argument names to values:

    thing: other.ini
    output: /var/log/run.log
    force: true
"""

import json
import logging
import os
from typing import Any, Iterable, Sequence

from .argument import Argument, get_argument

try:
    import yaml

    HAS_YAML = True
except ImportError:
    HAS_YAML = False

logger = logging.getLogger(__name__)


def load_config_file(config_path: str) -> dict[str, Any]:
    """
    Load configuration from a YAML or JSON file.

    Args:
        config_path (str): Path to the configuration file.

    Returns:
        dict[str, Any]: Dictionary containing the configuration data.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValueError: If the file format is not supported or invalid.
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    file_ext = os.path.splitext(config_path)[1].lower()

    with open(config_path, "r") as f:
        if file_ext in [".yaml", ".yml"]:
            if not HAS_YAML:
                raise ValueError(
                    "YAML support not available. Please install PyYAML: pip install PyYAML"
                )
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML file: {e}")
        elif file_ext == ".json":
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON file: {e}")
        else:
            raise ValueError(
                f"Unsupported file format: {file_ext}. "
                "Supported formats are: .yaml, .yml, .json"
            )

    # An empty YAML document loads as None
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Configuration file must contain a mapping, got {type(data).__name__}"
        )
    return data


def apply_config(
    config: dict[str, Any],
    arguments: Sequence[Argument],
    skip: Iterable[str] = (),
) -> list[str]:
    """
    Use configuration values as argument defaults.

    Strings and numbers become the argument value. ``True`` marks a switch
    argument as existing, ``False`` and ``None`` leave the argument alone.
    Arguments named in ``skip`` (typically those given on the command line)
    are not touched.

    Returns:
        list[str]: Names of the arguments that were updated.

    Raises:
        ValueError: If a value is a list, dict or other non-scalar.
    """
    skip = set(skip)

    # Validate everything first so a bad entry leaves the arguments untouched
    updates = []
    for name, value in config.items():
        argument = get_argument(name, arguments)
        if argument is None:
            logger.warning("Ignoring config entry for unknown argument %r", name)
            continue
        if name in skip or value is None or value is False:
            continue
        if not isinstance(value, (str, int, float)):
            raise ValueError(
                f"Unsupported config value for '{name}': "
                f"expected a string, number or bool, got {type(value).__name__}"
            )
        updates.append((argument, value))

    applied = []
    for argument, value in updates:
        if value is True:
            argument.exists = True
        else:
            argument.value = str(value)
        applied.append(argument.name)

    logger.debug("Applied config values for: %s", applied)
    return applied
