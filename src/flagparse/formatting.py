"""
Help text rendering.

All functions here are pure: they return text and leave printing to the
caller.
"""

import textwrap
from typing import Iterable, Optional

from .flags import Flag

WRAP_WIDTH = 80
DESCRIPTION_COLUMN = 26


def word_wrap(text: str, start_col: int = 0, width: int = WRAP_WIDTH) -> str:
    """
    Greedily pack the words of `text` into lines no wider than `width`.

    The first line is assumed to begin at `start_col` already; continuation
    lines are indented to `start_col`. Words are never split, so a single
    word longer than the available space gets a line of its own and
    overflows it.

    Whitespace is normalised: leading and trailing whitespace is dropped and
    any run of spaces, tabs or newlines between words becomes one space, so
    text spread over several indented source lines wraps as one paragraph.
    """
    lines = textwrap.wrap(
        " ".join(text.split()),
        width=max(1, width - start_col),
        break_long_words=False,
        break_on_hyphens=False,
    )
    return ("\n" + " " * start_col).join(lines)


def flag_help_line(
    flag: Flag,
    description_column: int = DESCRIPTION_COLUMN,
    width: int = WRAP_WIDTH,
) -> str:
    """
    Render one entry of the option list, e.g.

          -o, --output FILE       Write to FILE
              --dry-run           Show what would be done
    """
    if flag.short:
        line = f"  {flag.short}, {flag.long}"
    else:
        line = f"      {flag.long}"

    if len(line) < description_column:
        line = line.ljust(description_column)
    else:
        # No room left on the first line; put the description underneath.
        line += "\n" + " " * description_column

    description = word_wrap(flag.description, description_column, width)
    if not description:
        return line.rstrip()
    return line + description


def format_help(
    program: str,
    usage: str,
    banner: str,
    flags: Iterable[Flag],
    tail_banner: Optional[str] = None,
    description_column: int = DESCRIPTION_COLUMN,
    width: int = WRAP_WIDTH,
) -> str:
    """
    Assemble the full --help text: usage line, banner, option list sorted by
    long form, then the optional tail banner. Sections are separated by a
    blank line and the text ends with a newline.
    """
    sections = [f"Usage: {program} {usage}".rstrip()]

    wrapped_banner = word_wrap(banner, 0, width)
    if wrapped_banner:
        sections.append(wrapped_banner)

    ordered = sorted(flags, key=lambda flag: flag.long)
    if ordered:
        sections.append(
            "\n".join(flag_help_line(flag, description_column, width) for flag in ordered)
        )

    if tail_banner:
        sections.append(tail_banner)

    return "\n\n".join(sections) + "\n"
