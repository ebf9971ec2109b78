"""
Argument data model and lookup helpers.

An ``Argument`` declares one possible command-line argument: its name, an
optional short alias, a default value, the names of other arguments it depends
on and an optional action to run when it is present.
"""

from typing import Callable, Optional, Sequence

Action = Callable[[list["Argument"]], int]


class Argument:
    """
    A single command-line argument.

    Assigning a non-empty ``value`` marks the argument as existing. This also
    happens for the default value passed to the constructor, so an argument
    with a non-empty default always exists, whether or not it was given on the
    command line.

    Example:
        force = Argument("force", description="Forces the thing.")
        silent = Argument("silent", alias="q", description="Don't show anything.")
        build = Argument("build", dependencies=["target"], action=run_build)
    """

    def __init__(
        self,
        name: str,
        alias: str = "",
        description: str = "",
        value: Optional[str] = "",
        dependencies: Optional[Sequence[str]] = None,
        action: Optional[Action] = None,
        last_action: bool = False,
    ) -> None:
        self.name = name
        self.alias = alias or ""
        self.description = description or ""
        self.exists = False
        self._value: Optional[str] = None
        self.value = value
        self.dependencies: list[str] = list(dependencies or [])
        self.action = action
        self.last_action = last_action

    @property
    def value(self) -> Optional[str]:
        return self._value

    @value.setter
    def value(self, value: Optional[str]) -> None:
        self._value = value
        # Only a non-empty value implies existence; a switch argument can
        # exist with an empty value.
        if value:
            self.exists = True

    @property
    def short(self) -> str:
        """The alias used for lookups: the explicit alias or the first character."""
        return self.alias or self.name[:1]

    def dependencies_satisfied(self, arguments: Sequence["Argument"]) -> bool:
        """
        Check that every argument this one depends on exists.

        Dependency names that match no argument in ``arguments`` are treated
        as satisfied.
        """
        if not self.dependencies:
            return True
        for dependency in self.dependencies:
            for argument in arguments:
                if argument.name == dependency and not argument.exists:
                    return False
        return True

    def __repr__(self) -> str:
        return (
            f"Argument(name={self.name!r}, alias={self.alias!r}, "
            f"value={self.value!r}, exists={self.exists!r})"
        )


def get_argument(
    name: Optional[str], arguments: Optional[Sequence[Argument]]
) -> Optional[Argument]:
    """Return the first argument called ``name``, or None."""
    for argument in arguments or ():
        if argument.name == name:
            return argument
    return None


def has_argument(
    name: Optional[str], arguments: Optional[Sequence[Argument]]
) -> bool:
    """Return True if an argument called ``name`` exists in ``arguments``."""
    if not name or not arguments:
        return False
    return any(a.name == name and a.exists for a in arguments)


def has_action_argument(arguments: Optional[Sequence[Argument]]) -> bool:
    """Return True if any existing argument carries an action."""
    return any(a.action is not None and a.exists for a in arguments or ())
