"""
Parsing of raw command-line tokens into ``Argument`` values.

The token grammar is deliberately small: a token starting with one of the
prefix characters is a flag, and a directly following token that does not
start with a prefix character is its value. Everything else is ignored.
"""

import logging
from typing import Iterable, Optional, Sequence

from .argument import Argument

logger = logging.getLogger(__name__)

DEFAULT_PREFIX_CHARS: tuple[str, ...] = ("/", "-")


def _is_flag(token: str, prefix_chars: Iterable[str]) -> bool:
    return bool(token) and token[0] in prefix_chars


def collect_tokens(
    tokens: Sequence[str],
    prefix_chars: Optional[Iterable[str]] = None,
    auto_add_help: bool = True,
) -> dict[str, str]:
    """
    Turn a raw token list into a mapping of flag keys to values.

    Args:
        tokens: Raw tokens, e.g. ``sys.argv[1:]``. Must not contain None.
        prefix_chars: Characters that mark a token as a flag. None uses
            ``DEFAULT_PREFIX_CHARS``; an empty collection means no token is a flag.
        auto_add_help: If True and ``tokens`` is empty, return ``{"help": ""}``.

    Returns:
        dict[str, str]: Flag keys (prefix characters stripped) to their value,
        or to an empty string when the flag has no value. Later duplicates win.
    """
    prefix_chars = DEFAULT_PREFIX_CHARS if prefix_chars is None else tuple(prefix_chars)

    if not tokens and auto_add_help:
        logger.debug("No tokens given, adding implicit help argument")
        return {"help": ""}

    strip_chars = "".join(prefix_chars) + " "
    mapping: dict[str, str] = {}
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if _is_flag(token, prefix_chars):
            key = token.lstrip(strip_chars)
            value = ""
            # Strictly one token of lookahead.
            if i + 1 < len(tokens):
                following = tokens[i + 1]
                if following and following[0] not in prefix_chars:
                    value = following
                    i += 1
            mapping[key] = value
        i += 1

    logger.debug("Collected argument keys: %s", list(mapping))
    return mapping


def apply_tokens(mapping: dict[str, str], arguments: Sequence[Argument]) -> list[str]:
    """
    Fill ``arguments`` with values from a mapping built by ``collect_tokens``.

    Each argument is looked up by its name, the first character of its name
    and its alias, in that order. Every hit assigns the value and marks the
    argument as existing, so the last hit wins.

    Returns:
        list[str]: Names of the matched arguments in declaration order.
    """
    matched = []
    for argument in arguments:
        hit = False
        for key in (argument.name, argument.name[:1], argument.alias):
            if key and key in mapping:
                argument.value = mapping[key]
                argument.exists = True
                hit = True
        if hit:
            matched.append(argument.name)

    logger.debug("Matched arguments: %s", matched)
    return matched


def parse_args_array(
    tokens: Sequence[str],
    arguments: list[Argument],
    prefix_chars: Optional[Iterable[str]] = None,
    auto_add_help: bool = True,
) -> list[Argument]:
    """
    Parse command-line tokens into the declared arguments.

    The arguments are updated in place and the same list is returned.

    Example:
        arguments = parse_args_array(
            ["-t", "thing.ini", "--force"],
            [Argument("thing"), Argument("force")],
        )
    """
    mapping = collect_tokens(tokens, prefix_chars, auto_add_help)
    apply_tokens(mapping, arguments)
    return arguments
