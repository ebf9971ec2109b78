#!/usr/bin/env python3
"""
Example script demonstrating the usage of simple_arguments.

Declare the arguments in the order their actions should run, parse the
command line into them and execute the actions.

Try:
    python basic_example.py
    python basic_example.py --some --force
    python basic_example.py -s -t other.ini -f -q
"""

import sys

from simple_arguments import (
    Argument,
    execute_arguments,
    format_help,
    get_argument,
    has_argument,
    parse_args_array,
)

# Use constants for argument names to avoid typos
ARG_SOME = "some"
ARG_THING = "thing"
ARG_DIFF = "diff"
ARG_OUTPUT = "output"
ARG_FORCE = "force"
ARG_SILENT = "silent"
ARG_HELP = "help"


def some_action(arguments: list[Argument]) -> int:
    """Requires --force, reads the value of --thing."""
    if not has_argument(ARG_FORCE, arguments):
        print("Refusing to do some action without --force")
        return 2

    thing = get_argument(ARG_THING, arguments).value
    if not has_argument(ARG_SILENT, arguments):
        print(f"Doing some action with {thing}")
    return 0


def main() -> int:
    arguments = [
        # Runs only if "thing" exists, which it always does thanks to its default
        Argument(ARG_SOME, description="Do some action.", dependencies=[ARG_THING], action=some_action),
        Argument(ARG_THING, description="Add information about a thing.", value="thing.ini"),
        # Short actions can be inline
        Argument(ARG_DIFF, description="Do a different action.", action=lambda args: 0),
        Argument(ARG_OUTPUT, description="Write output to this file", value="output.log"),
        # Switches only need to exist
        Argument(ARG_FORCE, description="Forces the thing."),
        # "silent" and "some" share their first letter, so give it another alias
        Argument(ARG_SILENT, alias="q", description="Don't show anything."),
        Argument(
            ARG_HELP,
            description="Show this help.",
            action=lambda args: print(format_help(args)) or 0,
            last_action=True,
        ),
    ]

    arguments = parse_args_array(sys.argv[1:], arguments)

    try:
        return execute_arguments(arguments)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
