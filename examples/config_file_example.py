#!/usr/bin/env python3
"""
Example script demonstrating ArgumentRegistry with a config file.

Values in the config file replace the declared defaults; values given on the
command line replace both.

Try:
    python config_file_example.py --config example_config.json --build
    python config_file_example.py -c example_config.json -b -t release
"""

import logging
import sys

from simple_arguments import Argument, ArgumentRegistry


def build(arguments: list[Argument]) -> int:
    values = {a.name: a.value for a in arguments}
    print(f"Building {values['target']} with {values['jobs']} jobs")
    return 0


def main() -> int:
    logging.basicConfig(level=logging.INFO)

    registry = ArgumentRegistry(
        Argument("target", description="Build target", value="debug"),
        Argument("jobs", description="Number of parallel jobs", value="1"),
        Argument("build", description="Run the build", dependencies=["target"], action=build),
        Argument("config", description="YAML or JSON file with default values"),
        prefix_chars="-",
        config_flag="config",
    )
    registry.add_argument(
        name="help",
        description="Show this help.",
        action=lambda args: print(registry.format_help()) or 0,
        last_action=True,
    )

    result = registry.safe_parse()
    if result.is_err():
        print(f"Error: {result.unwrap_err()}", file=sys.stderr)
        return 1
    return registry.execute()


if __name__ == "__main__":
    sys.exit(main())
