"""
simple_arguments - A small drop-in library for command-line argument management.

This package lets you declare named arguments with aliases, default values,
dependencies and actions, parse a raw token list into them and run the
actions in declaration order. Argument defaults can also be loaded from YAML
or JSON files.
"""

from .argument import Argument, get_argument, has_action_argument, has_argument
from .config import apply_config, load_config_file
from .executor import execute_arguments
from .help import alias_collisions, format_help
from .parser import DEFAULT_PREFIX_CHARS, apply_tokens, collect_tokens, parse_args_array
from .registry import ArgumentRegistry

__version__ = "1.0.0"
__all__ = [
    "Argument",
    "ArgumentRegistry",
    "DEFAULT_PREFIX_CHARS",
    "alias_collisions",
    "apply_config",
    "apply_tokens",
    "collect_tokens",
    "execute_arguments",
    "format_help",
    "get_argument",
    "has_action_argument",
    "has_argument",
    "load_config_file",
    "parse_args_array",
]
