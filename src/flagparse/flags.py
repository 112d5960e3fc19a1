"""
Flag descriptors.

A Flag is declared once by the caller and read by the parser and the help
formatter. Its argument requirement is encoded in the long form:

    Flag("-o", "--output FILE", "Write to FILE")        # required argument
    Flag("-l", "--level [N]", "Set level, default 1")   # optional argument
    Flag("-q", "--quiet", "Print nothing")              # no argument
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Flag:
    """
    Immutable definition of one command-line option.

    Attributes:
        short: Empty, or a dash followed by a single letter (e.g. '-o').
        long: Two dashes and a name, optionally followed by a space and an
            argument placeholder (e.g. '--output FILE' or '--level [N]').
        description: Free text shown in --help output.

    The syntax of `short` and `long` is not validated.
    """

    short: str
    long: str
    description: str = ""

    @classmethod
    def help_flag(cls) -> "Flag":
        """The built-in -h/--help flag."""
        return cls("-h", "--help", "Print usage information")

    @classmethod
    def version_flag(cls) -> "Flag":
        """A conventional -v/--version flag. Not built in; declare it to use it."""
        return cls("-v", "--version", "Print version information")

    @property
    def canonical_name(self) -> str:
        """The long form without its argument placeholder."""
        return self.long.split(" ", 1)[0]

    @property
    def takes_argument(self) -> bool:
        return " " in self.long

    @property
    def argument_required(self) -> bool:
        return self.takes_argument and "[" not in self.long

    @property
    def argument_name(self) -> Optional[str]:
        if not self.takes_argument:
            return None
        return self.long.split(" ", 1)[1].strip().strip("[]")

    def matches(self, token: str) -> bool:
        """True when `token` ('-o' or '--output') names this flag."""
        return token == self.canonical_name or (bool(self.short) and token == self.short)
