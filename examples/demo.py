#!/usr/bin/env python3
"""
Example script demonstrating the usage of flagparse.

Declares flags of every kind (plain, optional argument, required argument,
long-only, repeatable), parses the command line and reports what was set.

Try:
    python examples/demo.py --help
    python examples/demo.py -o -a x -r 5 -m one -m two first second
    python examples/demo.py --opt-wiht-arg
"""

import sys

from flagparse import Flag, Parser

# First, define the options that the command supports
simple_opt = Flag("-o", "--opt", "A simple option")
opt_with_opt_arg = Flag("-a", "--opt-with-arg [ARG]", "An option taking an optional argument")
opt_with_req_arg = Flag("-r", "--required-arg ARG", "An option taking a required argument")
long_opt = Flag("", "--long-opt", "An option with no short variant")
int_arg = Flag("-i", "--int-arg [ARG]", "Option that takes an int arg")
multi_value_arg = Flag("-m", "--multi-arg [ARGS]", "Option that can be repeated")
version_opt = Flag.version_flag()


def main(argv: list[str]) -> int:
    """Main function demonstrating the parser."""
    parser = Parser(
        "[<values to print>...]",
        "This is an example app for the flagparse module. The banner is a short "
        "summary which appears at the top of --help output",
        [
            simple_opt,
            opt_with_opt_arg,
            long_opt,
            int_arg,
            opt_with_req_arg,
            multi_value_arg,
            version_opt,
        ],
        tail_banner="This is a tail banner that appears below the list of options",
    )

    flags = parser.parse(argv)
    if flags.help_requested:
        return 0
    if flags.failed:
        return 1

    if flags.is_set(simple_opt):
        print("An option with no args was used")

    flags.with_value(
        opt_with_opt_arg, lambda val: print(f"An option with optional arg {val} was used")
    )
    flags.with_value(
        opt_with_req_arg, lambda val: print(f"An option with required arg {val} was used")
    )

    if flags.is_set(long_opt):
        print("An option with only the long opt form was used")

    if flags.is_set(version_opt):
        print("Version opt was used")

    for val in flags.values(multi_value_arg):
        print(f"Multi-value arg: {val}")

    def report_int(val: str) -> None:
        try:
            print(f"An option which expects an int arg was used: {int(val)}")
        except ValueError:
            print(f"{int_arg.canonical_name} expects a numeric arg")

    flags.with_value(int_arg, report_int)

    # Handle remaining args
    for i, arg in enumerate(flags.args):
        print(f"Non-option argument {i}: {arg}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
