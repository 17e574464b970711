import pytest

from infpipe.nodes import Command, ContinuedCommand, ContinuedPipeline, Pipeline
from infpipe.parser import ParseError, parse, parse_line


def test_two_stage_pipeline():
    assert parse("a | b") == Pipeline(Command(["a"]), Command(["b"]))


def test_pipe_without_spaces():
    assert parse("a|b") == Pipeline(Command(["a"]), Command(["b"]))


def test_quoted_argument_keeps_spaces():
    assert parse("a b 'c d'") == Command(["a", "b", "c d"])


def test_quoted_argument_is_verbatim():
    assert parse(r"printf 'a\tb\n'") == Command(["printf", r"a\tb\n"])
    assert parse("grep 'x | y'") == Command(["grep", "x | y"])


def test_empty_quotes_give_empty_argument():
    assert parse("echo ''") == Command(["echo", ""])


def test_quote_starts_a_new_argument():
    assert parse("ab'c d'e") == Command(["ab", "c d", "e"])


def test_trailing_whitespace_is_consumed():
    assert parse("ls -l   ") == Command(["ls", "-l"])


def test_continued_command():
    assert parse("| a") == ContinuedCommand(["a"])
    assert parse("|a b") == ContinuedCommand(["a", "b"])


def test_pipelines_are_right_associative():
    assert parse("a | b | c") == Pipeline(
        Command(["a"]),
        Pipeline(Command(["b"]), Command(["c"])),
    )


def test_continued_pipeline():
    assert parse("| a | b x") == ContinuedPipeline(Command(["a"]), Command(["b", "x"]))


def test_continued_pipeline_nests_plain_pipeline():
    assert parse("| a | b | c") == ContinuedPipeline(
        Command(["a"]),
        Pipeline(Command(["b"]), Command(["c"])),
    )


def test_bare_pipe_inside_pipeline_continues_from_history():
    assert parse("a || b") == Pipeline(Command(["a"]), ContinuedCommand(["b"]))


def test_raw_tree_names():
    raw = parse_line("| a | b")
    assert set(raw.keys()) == {"continued_pipe", "left", "pipe", "right"}
    assert list(raw["left"]["command"]) == ["a"]


@pytest.mark.parametrize("line", ["", "|", "a |", "| |", "'unterminated", "a | 'b"])
def test_incomplete_lines_are_errors(line):
    with pytest.raises(ParseError):
        parse(line)


def test_parse_error_reports_column():
    with pytest.raises(ParseError) as info:
        parse("echo hi |")
    assert info.value.line == "echo hi |"
    assert info.value.column >= 1
