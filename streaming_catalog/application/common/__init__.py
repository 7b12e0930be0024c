"""Application layer building blocks shared by every module."""

from .command import Command
from .result import Failure, Result, Success

__all__ = [
    "Command",
    "Failure",
    "Result",
    "Success",
]
