"""
Command base class.

Commands represent intentions to change the system state and are named
in imperative form: CreateCategory, UpdateCategory, etc.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """
    Base class for Commands.

    Commands are:
    - Immutable (frozen dataclass)
    - Named in imperative form
    - Carry all data needed to execute the operation

    Field values are checked by the domain, not by the command.
    """
