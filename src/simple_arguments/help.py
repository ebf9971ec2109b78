"""
Help text generation and alias collision checks.
"""

import os
import sys
from typing import Optional, Sequence

from .argument import Argument


def _format_description(argument: Argument) -> str:
    """Append default value and dependency info to the argument description."""
    parts = [argument.description] if argument.description else []
    if argument.value:
        parts.append(f"(default: {argument.value})")
    if argument.dependencies:
        parts.append(f"(requires: {', '.join(argument.dependencies)})")
    return " ".join(parts)


def format_help(
    arguments: Sequence[Argument],
    prog: Optional[str] = None,
    prefix: str = "-",
) -> str:
    """
    Build a help text from the argument descriptions.

    Example output:
        usage: program [options]

        options:
          -t, --thing   Add information about a thing. (default: thing.ini)
          -q, --silent  Don't show anything.
    """
    prog = prog or os.path.basename(sys.argv[0]) or "program"
    flags = [f"{prefix}{a.short}, {prefix * 2}{a.name}" for a in arguments]
    width = max((len(f) for f in flags), default=0)

    lines = [f"usage: {prog} [options]"]
    if arguments:
        lines += ["", "options:"]
        for flag, argument in zip(flags, arguments):
            description = _format_description(argument)
            line = f"  {flag.ljust(width)}  {description}" if description else f"  {flag}"
            lines.append(line)
    return "\n".join(lines) + "\n"


def alias_collisions(arguments: Sequence[Argument]) -> dict[str, list[str]]:
    """
    Find lookup keys shared by more than one argument.

    Every argument answers to its name, the first character of its name and
    its alias. When two arguments share one of those keys, a flag using that
    key fills both of them.

    Returns:
        dict[str, list[str]]: Each shared key mapped to the names claiming it.
    """
    claims: dict[str, list[str]] = {}
    for argument in arguments:
        for key in dict.fromkeys((argument.name, argument.name[:1], argument.alias)):
            if key:
                claims.setdefault(key, []).append(argument.name)
    return {key: names for key, names in claims.items() if len(names) > 1}
