"""
Parse results.

A ParseResult records which flags were seen (by canonical name, in
command-line order), the positional arguments left over, and any problems
found on the way. Lookups take the Flag the caller declared:

    result = parser.parse(sys.argv)
    if result.is_set(verbose):
        ...
    result.with_value(output, open_output)
"""

import enum
from dataclasses import dataclass, field
from typing import Callable, Optional

from .flags import Flag


class ParseStatus(enum.Enum):
    SUCCESS = "success"
    HELP_REQUESTED = "help_requested"
    PARSE_ERROR = "parse_error"


class ErrorKind(enum.Enum):
    UNKNOWN_FLAG = "unknown_flag"
    MISSING_REQUIRED_ARGUMENT = "missing_required_argument"


@dataclass(frozen=True)
class Diagnostic:
    """
    One problem found while parsing.

    Attributes:
        kind: What went wrong.
        token: The flag as written ('-x' or '--xyz').
        message: Human-readable text, as emitted for the first problem.
        suggestion: Canonical name of the closest declared flag, for unknown flags.
    """

    kind: ErrorKind
    token: str
    message: str
    suggestion: Optional[str] = None


@dataclass(frozen=True)
class ParseMatch:
    """A flag seen on the command line; `value` is '' when it has no argument."""

    name: str
    value: str = ""


@dataclass(frozen=True)
class ParseResult:
    matches: tuple[ParseMatch, ...] = ()
    status: ParseStatus = ParseStatus.SUCCESS
    args: tuple[str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = field(default=(), compare=False)

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.SUCCESS

    @property
    def help_requested(self) -> bool:
        return self.status is ParseStatus.HELP_REQUESTED

    @property
    def failed(self) -> bool:
        return self.status is ParseStatus.PARSE_ERROR

    def names(self) -> list[str]:
        """Canonical names of the flags that were set, first occurrence order."""
        return list(dict.fromkeys(match.name for match in self.matches))

    def values(self, flag: Flag) -> list[str]:
        """Every value given for `flag`, in command-line order."""
        name = flag.canonical_name
        return [match.value for match in self.matches if match.name == name]

    def value(self, flag: Flag) -> Optional[str]:
        """The first value given for `flag`, or None if it was not set."""
        name = flag.canonical_name
        for match in self.matches:
            if match.name == name:
                return match.value
        return None

    def is_set(self, flag: Flag) -> bool:
        return self.value(flag) is not None

    def with_value(self, flag: Flag, action: Callable[[str], object]) -> None:
        """Call `action` with the value of `flag` if it was set."""
        value = self.value(flag)
        if value is not None:
            action(value)
