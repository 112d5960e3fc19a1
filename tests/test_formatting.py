import pytest

from flagparse import Flag, flag_help_line, format_help, word_wrap

LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua. Ut enim ad minim "
    "veniam, quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea "
    "commodo consequat."
)


class TestWordWrap:
    def test_short_text_is_unchanged(self):
        assert word_wrap("A short line of text") == "A short line of text"

    def test_empty_text(self):
        assert word_wrap("") == ""

    @pytest.mark.parametrize("width", [20, 40, 80])
    def test_lines_fit_width(self, width):
        wrapped = word_wrap(LOREM, 0, width)
        assert "\n" in wrapped
        for line in wrapped.splitlines():
            assert len(line) <= width
        assert wrapped.split() == LOREM.split()

    def test_continuation_lines_are_indented(self):
        assert word_wrap("aaa bbb ccc", 5, 12) == "aaa bbb\n     ccc"

    def test_lines_fit_width_with_start_column(self):
        wrapped = word_wrap(LOREM, 26, 80)
        lines = wrapped.splitlines()
        # The first line starts at column 26 in the caller's output.
        assert 26 + len(lines[0]) <= 80
        for line in lines[1:]:
            assert line.startswith(" " * 26)
            assert len(line) <= 80

    def test_whitespace_runs_collapse(self):
        assert word_wrap("one\n            two  three") == "one two three"

    def test_surrounding_whitespace_is_dropped(self):
        assert word_wrap("  x \n") == "x"

    def test_long_word_is_not_split(self):
        long_word = "x" * 30
        assert word_wrap(f"a {long_word} b", 0, 10) == f"a\n{long_word}\nb"


class TestFlagHelpLine:
    def test_short_and_long(self):
        line = flag_help_line(Flag("-o", "--opt", "A simple option"))
        assert line == "  -o, --opt".ljust(26) + "A simple option"

    def test_long_only_is_aligned_with_long_forms(self):
        line = flag_help_line(Flag("", "--long-opt", "No short variant"))
        assert line == "      --long-opt".ljust(26) + "No short variant"

    def test_argument_placeholder_is_shown(self):
        line = flag_help_line(Flag("-r", "--req ARG", "Required"))
        assert line.startswith("  -r, --req ARG ")

    def test_overlong_flag_moves_description_to_next_line(self):
        flag = Flag("-r", "--a-really-long-option-name VALUE", "Description")
        assert flag_help_line(flag) == (
            "  -r, --a-really-long-option-name VALUE\n" + " " * 26 + "Description"
        )

    def test_long_description_wraps_at_description_column(self):
        line = flag_help_line(Flag("-l", "--lorem", LOREM))
        lines = line.splitlines()
        assert len(lines) > 1
        for continuation in lines[1:]:
            assert continuation.startswith(" " * 26)
            assert not continuation[26].isspace()
        for text in lines:
            assert len(text) <= 80

    def test_multiline_indented_description(self):
        description = """Write the report to FILE,
            creating it if needed."""
        line = flag_help_line(Flag("-o", "--output FILE", description))
        assert line == (
            "  -o, --output FILE".ljust(26)
            + "Write the report to FILE, creating it if needed."
        )

    def test_empty_description_has_no_trailing_padding(self):
        assert flag_help_line(Flag("-q", "--quiet")) == "  -q, --quiet"


class TestFormatHelp:
    def test_full_layout(self):
        text = format_help(
            "prog",
            "[files]",
            "Banner text.",
            [Flag("-b", "--beta", "B"), Flag("-a", "--alpha", "A")],
            "Tail.",
        )
        assert text == (
            "Usage: prog [files]\n"
            "\n"
            "Banner text.\n"
            "\n" + "  -a, --alpha".ljust(26) + "A\n"
            "" + "  -b, --beta".ljust(26) + "B\n"
            "\n"
            "Tail.\n"
        )

    def test_without_tail_banner(self):
        text = format_help("prog", "ARGS", "Banner.", [Flag("-a", "--alpha", "A")])
        assert text.endswith("  -a, --alpha".ljust(26) + "A\n")
        assert text.count("\n\n") == 2

    def test_flags_sorted_by_long_form(self):
        flags = [
            Flag("-z", "--zeta", "Z"),
            Flag("", "--beta", "B"),
            Flag("-a", "--alpha", "A"),
        ]
        text = format_help("prog", "", "Banner.", flags)
        assert text.index("--alpha") < text.index("--beta") < text.index("--zeta")

    def test_banner_is_wrapped(self):
        text = format_help("prog", "", LOREM, [])
        for line in text.splitlines():
            assert len(line) <= 80
