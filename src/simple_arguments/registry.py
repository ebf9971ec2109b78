"""
ArgumentRegistry - an ordered collection of arguments with parse and execute.

The module-level functions in ``parser`` and ``executor`` work on any list of
``Argument`` objects. The registry keeps such a list together with a
name-to-index mapping, the parsing options and an optional config file flag.
"""

import logging
import os
import sys
from typing import Any, Iterator, Optional, Sequence

from result import Err, Ok, Result

from .argument import Argument, has_action_argument, has_argument
from .config import apply_config, load_config_file
from .executor import execute_arguments
from .help import alias_collisions, format_help
from .parser import apply_tokens, collect_tokens

logger = logging.getLogger(__name__)


class ArgumentRegistry:
    """
    An ordered set of command-line arguments.

    Arguments are executed in the order they were added, so declare them in
    the order their actions should run.

    Example:
        registry = ArgumentRegistry(
            Argument("some", description="Do some action.",
                     dependencies=["thing"], action=some_action),
            Argument("thing", description="A thing.", value="thing.ini"),
            config_flag="config",
        )
        registry.add_argument(name="config", description="Config file")
        sys.exit(registry.run())

    Args:
        *arguments: Arguments to register, in execution order.
        prefix_chars: Characters that mark a token as a flag (default: "/" and "-").
        auto_add_help: Match an argument called "help" when no tokens are given.
        strict: Raise instead of warn when arguments share a lookup key.
        config_flag: Name of an argument whose value is a YAML or JSON file
            with default values for the other arguments.
    """

    def __init__(
        self,
        *arguments: Argument,
        prefix_chars: Optional[Sequence[str]] = None,
        auto_add_help: bool = True,
        strict: bool = False,
        config_flag: Optional[str] = None,
    ) -> None:
        self.prefix_chars = prefix_chars
        self.auto_add_help = auto_add_help
        self.strict = strict
        self.config_flag = config_flag
        self._arguments: list[Argument] = []
        self._index: dict[str, int] = {}
        for argument in arguments:
            self.add_argument(argument)

    def add_argument(self, argument: Optional[Argument] = None, **kwargs: Any) -> Argument:
        """
        Register an argument, either as an instance or from constructor keywords.

        Example:
            registry.add_argument(Argument("force"))
            registry.add_argument(name="silent", alias="q")

        Raises:
            ValueError: If the name is already registered, or the argument
                shares a lookup key with another one and the registry is strict.
        """
        if argument is None:
            argument = Argument(**kwargs)
        elif kwargs:
            raise ValueError("Pass either an Argument or constructor keywords, not both")

        if argument.name in self._index:
            raise ValueError(f"Argument name conflict: {argument.name}")

        collisions = alias_collisions(self._arguments + [argument])
        shared = {k: v for k, v in collisions.items() if argument.name in v}
        if shared:
            message = ", ".join(
                f"'{key}' is shared by {', '.join(names)}" for key, names in shared.items()
            )
            if self.strict:
                raise ValueError(f"Argument alias conflict: {message}")
            logger.warning("Argument alias conflict: %s", message)

        self._index[argument.name] = len(self._arguments)
        self._arguments.append(argument)
        return argument

    @property
    def arguments(self) -> list[Argument]:
        return self._arguments

    def __len__(self) -> int:
        return len(self._arguments)

    def __iter__(self) -> Iterator[Argument]:
        return iter(self._arguments)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __getitem__(self, name: str) -> Argument:
        return self._arguments[self._index[name]]

    def get(self, name: str) -> Optional[Argument]:
        index = self._index.get(name)
        return None if index is None else self._arguments[index]

    def has(self, name: Optional[str]) -> bool:
        return has_argument(name, self._arguments)

    def has_action(self) -> bool:
        return has_action_argument(self._arguments)

    def parse(self, tokens: Optional[Sequence[str]] = None) -> list[Argument]:
        """
        Parse command-line tokens into the registered arguments.

        Args:
            tokens: Tokens to parse. If None, uses sys.argv[1:].

        Returns:
            list[Argument]: The registered arguments, updated in place.

        Raises:
            FileNotFoundError, ValueError: If the config file named by
                ``config_flag`` is invalid, or is missing although it was
                given on the command line. A missing default path is skipped.
        """
        if tokens is None:
            tokens = sys.argv[1:]

        mapping = collect_tokens(tokens, self.prefix_chars, self.auto_add_help)
        matched = apply_tokens(mapping, self._arguments)

        if self.config_flag:
            config_argument = self.get(self.config_flag)
            config_path = config_argument.value if config_argument is not None else None
            if not config_path:
                return self._arguments
            # A declared default path is optional, one given on the command line is not
            if self.config_flag not in matched and not os.path.exists(config_path):
                logger.debug("Default config file %s not found, skipping", config_path)
            else:
                logger.debug("Loading argument defaults from %s", config_path)
                config_data = load_config_file(config_path)
                # Command-line values take precedence over the config file
                apply_config(config_data, self._arguments, skip=matched)
        return self._arguments

    def safe_parse(
        self, tokens: Optional[Sequence[str]] = None
    ) -> Result[list[Argument], str]:
        """
        Parse like ``parse`` but return a Result instead of raising.

        Returns:
            Result[list[Argument], str]:
                - Ok with the updated arguments,
                - Err with the error message if parsing fails.
        """
        try:
            return Ok(self.parse(tokens))
        except Exception as e:
            return Err(str(e))

    def execute(self) -> int:
        """Run the actions of the present arguments; see ``execute_arguments``."""
        return execute_arguments(self._arguments)

    def safe_execute(self) -> Result[int, str]:
        """
        Execute like ``execute`` but return a Result instead of raising.

        Returns:
            Result[int, str]:
                - Ok with the result of the last action that ran,
                - Err with the error message if an action raised.
        """
        try:
            return Ok(self.execute())
        except Exception as e:
            return Err(str(e))

    def run(self, tokens: Optional[Sequence[str]] = None) -> int:
        """Parse ``tokens`` and execute the resulting arguments."""
        self.parse(tokens)
        return self.execute()

    def format_help(self, prog: Optional[str] = None) -> str:
        return format_help(self._arguments, prog=prog)
