"""Command-line options given as ``-x value`` pairs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from citygraph.dirpath import Dir

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


class ArgType(Enum):
    """How an option's value is interpreted."""

    DIR = 0
    STR = 1
    DOUBLE = 2
    INT = 3


class ArgumentError(ValueError):
    """The command line does not match the declared options."""

    def __init__(self, message: str, usage: str | None = None) -> None:
        super().__init__(message)
        self.usage = usage


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


def _convert(arg_type: ArgType, text: str) -> Any:
    if arg_type is ArgType.DIR:
        return Dir.parse(text)
    if arg_type is ArgType.STR:
        return text
    if arg_type is ArgType.DOUBLE:
        return _leading_float(text)
    if arg_type is ArgType.INT:
        return _leading_int(text)
    raise ValueError(f"invalid arg type: {arg_type!r}")


def _is_particle(token: str) -> bool:
    return token.startswith("-")


@dataclass
class _Arg:
    particle: str
    description: str
    mandatory: bool
    arg_type: ArgType
    value: Any = None


class ArgManager:
    """A set of declared options and the values given to them."""

    def __init__(self) -> None:
        self._args: dict[str, _Arg] = {}

    def add(
        self,
        particle: str,
        mandatory: bool,
        description: str,
        arg_type: ArgType,
        default: Any = None,
    ) -> "ArgManager":
        """Declare an option; ``default`` is converted like a given value."""
        arg = _Arg(particle, description, mandatory, arg_type)
        if default is not None:
            try:
                arg.value = _convert(arg_type, str(default))
            except ValueError:
                arg.value = None
        self._args[particle] = arg
        return self

    def value(self, particle: str) -> Any:
        """The current value of the option named ``particle``."""
        try:
            return self._args[particle].value
        except KeyError:
            raise KeyError(f"unknown argument: {particle}") from None

    def usage(self) -> str:
        """One line per declared option: particle, whether mandatory, description."""
        return "\n".join(
            f"\t{arg.particle}\t({'mandatory' if arg.mandatory else 'optional'}) "
            f"{arg.description}"
            for arg in self._args.values()
        )

    def parse(self, argv: Iterable[str]) -> None:
        """Assign values from command-line tokens (program name excluded).

        Tokens not starting with ``-`` and not following an option are ignored.
        """
        tokens = list(argv)
        mandatory = sum(1 for arg in self._args.values() if arg.mandatory)
        if mandatory > len(tokens):
            raise ArgumentError("mandatory arguments were omitted", self.usage())

        stream = iter(tokens)
        for token in stream:
            if not _is_particle(token):
                continue
            value = next(stream, None)
            if value is None:
                raise ArgumentError(f"argument {token} must be followed by a value")
            if _is_particle(value):
                raise ArgumentError(
                    f"two particles were informed consecutively ({token} {value})",
                    self.usage(),
                )
            arg = self._args.get(token)
            if arg is None:
                raise ArgumentError(f"invalid argument: {token}", self.usage())
            try:
                arg.value = _convert(arg.arg_type, value)
            except ValueError as exc:
                raise ArgumentError(f"invalid value for {token}: {value!r}") from exc