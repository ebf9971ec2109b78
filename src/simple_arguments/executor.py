"""
Sequential execution of argument actions.
"""

import logging
from typing import Sequence

from .argument import Argument

logger = logging.getLogger(__name__)


def execute_arguments(arguments: Sequence[Argument]) -> int:
    """
    Run the actions of all present arguments in declaration order.

    An action runs when its argument exists and all of its dependencies
    exist. Every action receives the full argument list, including changes
    made by actions that ran before it. Execution stops after an action whose
    argument has ``last_action`` set.

    Exceptions raised by an action are not caught.

    Returns:
        int: The return value of the last action that ran, or 0 if none ran.
    """
    result = 0
    for argument in arguments:
        if argument.action is None or not argument.exists:
            continue
        if not argument.dependencies_satisfied(arguments):
            logger.debug(
                "Skipping %s: dependencies not satisfied (%s)",
                argument.name,
                ", ".join(argument.dependencies),
            )
            continue

        logger.debug("Running action for %s", argument.name)
        result = argument.action(arguments)
        if argument.last_action:
            logger.debug("%s is the last action, stopping", argument.name)
            break
    return result
