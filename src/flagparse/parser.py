"""
Parser - matches a raw argument list against declared flags.

The parser walks the argument list once. Tokens starting with '--' are long
flags, tokens starting with a single '-' are clusters of one-letter flags
('-ab' is '-a -b'), and anything else is a positional argument. A flag
taking an argument reads it from the following token.

Problems are reported, not raised: the first one is written to the output
sink together with a suggestion where possible, every one is recorded on
the returned ParseResult, and the status becomes PARSE_ERROR. -h/--help is
always recognised; it prints the help text and stops the parse.
"""

import logging
import sys
from typing import Iterable, Optional, Sequence, TextIO

from result import Err, Ok, Result

from .flags import Flag
from .formatting import DESCRIPTION_COLUMN, WRAP_WIDTH, flag_help_line, format_help
from .matches import Diagnostic, ErrorKind, ParseMatch, ParseResult, ParseStatus
from .suggest import suggest_flag

logger = logging.getLogger(__name__)


def _flag_tokens(arg: str) -> list[str]:
    """Split one argument into the flags it names; [] for a positional."""
    if arg.startswith("--"):
        return [arg]
    if arg.startswith("-") and len(arg) > 1:
        return [f"-{letter}" for letter in arg[1:]]
    return []


def _looks_like_flag(arg: str) -> bool:
    return arg.startswith("-") and len(arg) > 1


class Parser:
    """
    A command-line option parser.

    The parser keeps no state between calls to `parse`, so one instance can
    be reused and shared.

    Example:
        verbose = Flag("-v", "--verbose", "Print more")
        output = Flag("-o", "--output FILE", "Write to FILE")

        parser = Parser("[options] <input>", "Convert things.", [verbose, output])
        result = parser.parse(sys.argv)
        if result.help_requested:
            sys.exit(0)
        if result.failed:
            sys.exit(1)
        path = result.value(output)
    """

    def __init__(
        self,
        usage: str,
        banner: str,
        flags: Iterable[Flag],
        tail_banner: Optional[str] = None,
        *,
        output: Optional[TextIO] = None,
        width: int = WRAP_WIDTH,
        description_column: int = DESCRIPTION_COLUMN,
    ) -> None:
        """
        Args:
            usage: One-line summary shown as 'Usage: <program> <usage>'.
            banner: Paragraph shown under the usage line.
            flags: The accepted flags. -h/--help is added automatically.
            tail_banner: Optional paragraph shown after the option list.
            output: Stream for help and diagnostics. Defaults to sys.stdout,
                resolved each time something is written.
            width: Total width of the help text.
            description_column: Column where flag descriptions start.

        Raises:
            ValueError: If an item in `flags` is not a Flag, or two flags
                share a short form or a long name, or a flag reuses -h or
                --help.
        """
        self.usage = usage
        self.banner = banner
        self.tail_banner = tail_banner
        self.output = output
        self.width = width
        self.description_column = description_column
        self.flags: tuple[Flag, ...] = tuple(flags)
        self._help = Flag.help_flag()
        self._check_flags()

    def _check_flags(self) -> None:
        # -h/--help is built in and always matched first.
        seen: set[str] = {self._help.short, self._help.canonical_name}
        for flag in self.flags:
            if not isinstance(flag, Flag):
                raise ValueError(f"Expected a Flag, got {flag!r}")
            for name in (flag.short, flag.canonical_name):
                if not name:
                    continue
                if name in seen:
                    raise ValueError(f"Flag name conflict: {name}")
                seen.add(name)

    @property
    def known_flags(self) -> tuple[Flag, ...]:
        """Declared flags followed by the built-in help flag."""
        return (*self.flags, self._help)

    def _find(self, token: str) -> Optional[Flag]:
        if self._help.matches(token):
            return self._help
        for flag in self.flags:
            if flag.matches(token):
                return flag
        return None

    def _write(self, text: str) -> None:
        stream = self.output if self.output is not None else sys.stdout
        stream.write(text if text.endswith("\n") else text + "\n")

    def parse(self, args: Optional[Sequence[str]] = None) -> ParseResult:
        """
        Parse a command line.

        Args:
            args: The full argument vector, program name first. If None,
                uses sys.argv.

        Returns:
            ParseResult: The flags set (by canonical name, in order), the
            positional arguments and the parse status.
        """
        if args is None:
            args = sys.argv
        args = list(args)
        program = args[0] if args else ""

        matches: list[ParseMatch] = []
        positionals: list[str] = []
        diagnostics: list[Diagnostic] = []

        def report(diagnostic: Diagnostic) -> None:
            # Only the first problem is shown; the rest are just recorded.
            if not diagnostics:
                self._write(diagnostic.message)
            else:
                logger.debug("Suppressed diagnostic: %s", diagnostic.message)
            diagnostics.append(diagnostic)

        index = 1
        while index < len(args):
            arg = args[index]
            tokens = _flag_tokens(arg)
            if not tokens:
                logger.debug("Positional argument %r", arg)
                positionals.append(arg)
                index += 1
                continue

            consumed_next = False
            for token in tokens:
                flag = self._find(token)
                if flag is None:
                    report(self._unknown_flag(token, arg))
                    continue

                if flag is self._help:
                    logger.debug("Help requested by %r", token)
                    self.print_usage(program)
                    return ParseResult(
                        tuple(matches),
                        ParseStatus.HELP_REQUESTED,
                        tuple(positionals),
                        tuple(diagnostics),
                    )

                if not flag.takes_argument:
                    matches.append(ParseMatch(flag.canonical_name))
                elif self._can_read_value(flag, arg, args, index):
                    value = args[index + 1]
                    logger.debug("Flag %r takes value %r", token, value)
                    matches.append(ParseMatch(flag.canonical_name, value))
                    consumed_next = True
                elif flag.argument_required:
                    report(self._missing_argument(token, flag))
                else:
                    matches.append(ParseMatch(flag.canonical_name))

            index += 2 if consumed_next else 1

        status = ParseStatus.PARSE_ERROR if diagnostics else ParseStatus.SUCCESS
        logger.debug(
            "Parsed %d flag(s), %d positional(s): %s",
            len(matches),
            len(positionals),
            status.value,
        )
        return ParseResult(tuple(matches), status, tuple(positionals), tuple(diagnostics))

    def _can_read_value(
        self, flag: Flag, arg: str, args: Sequence[str], index: int
    ) -> bool:
        """
        A value is the next argument, and only for a long flag or a short
        flag that is the whole argument ('-o x', never '-ao x'). Optional
        values are not taken from something that looks like a flag, and no
        value is ever taken from -h/--help.
        """
        if index + 1 >= len(args):
            return False
        if not (arg.startswith("--") or len(arg) == 2):
            return False
        next_arg = args[index + 1]
        if self._help.matches(next_arg):
            return False
        return flag.argument_required or not _looks_like_flag(next_arg)

    def _unknown_flag(self, token: str, arg: str) -> Diagnostic:
        suggestion = self.suggest(arg)
        if suggestion is None:
            message = f"Unknown option {token}"
            return Diagnostic(ErrorKind.UNKNOWN_FLAG, token, message)

        message = (
            f"Unknown option {token}, did you mean '{suggestion.canonical_name}'?\n\n"
            f"{self._help_line(suggestion)}\n"
        )
        return Diagnostic(
            ErrorKind.UNKNOWN_FLAG, token, message, suggestion.canonical_name
        )

    def _missing_argument(self, token: str, flag: Flag) -> Diagnostic:
        message = (
            f"Missing required argument for option {token}.\n\n"
            f"{self._help_line(flag)}\n"
        )
        return Diagnostic(ErrorKind.MISSING_REQUIRED_ARGUMENT, token, message)

    def _help_line(self, flag: Flag) -> str:
        return flag_help_line(flag, self.description_column, self.width)

    def safe_parse(
        self, args: Optional[Sequence[str]] = None
    ) -> Result[ParseResult, str]:
        """
        Parse a command line, returning the outcome as a Result.

        Returns:
            Result[ParseResult, str]:
                - Ok[ParseResult] when parsing succeeded or help was requested,
                - Err with the first diagnostic message otherwise.
        """
        parsed = self.parse(args)
        if parsed.failed:
            return Err(parsed.diagnostics[0].message)
        return Ok(parsed)

    def suggest(self, token: str) -> Optional[Flag]:
        """The declared flag whose long name is closest to `token`."""
        return suggest_flag(token, self.flags)

    def is_valid_flag(self, name: str) -> bool:
        """True when `name` is the long name of a known flag, e.g. '--output'."""
        return any(flag.canonical_name == name for flag in self.known_flags)

    def format_help(self, program: Optional[str] = None) -> str:
        """
        Render the --help text.

        Args:
            program: Program name for the usage line. Defaults to sys.argv[0].
        """
        if program is None:
            program = sys.argv[0] if sys.argv else ""
        return format_help(
            program,
            self.usage,
            self.banner,
            self.known_flags,
            self.tail_banner,
            self.description_column,
            self.width,
        )

    def print_usage(self, program: Optional[str] = None) -> None:
        """Write the --help text to the output stream, as -h does."""
        self._write(self.format_help(program))
