from pyparsing import (
    Forward,
    Group,
    Literal,
    OneOrMore,
    ParseException,
    QuotedString,
    Regex,
)

from infpipe.transform import build_tree


class ParseError(Exception):
    """Raised when a line matches none of the grammar alternatives."""

    def __init__(self, line, column, message):
        super().__init__(f"column {column}: {message}")
        self.line = line
        self.column = column
        self.message = message


# ---------- Grammar ----------
# MatchFirst (`|`) is ordered choice: the first alternative that matches wins.

PIPE = Literal("|")

unquoted_arg = Regex(r"[^\s'|]+")
single_quoted_arg = QuotedString("'", convert_whitespace_escapes=False)
arg = unquoted_arg | single_quoted_arg

args = OneOrMore(arg)("command")

cmdline = Forward()

command = Group(args)
command_continued = Group(PIPE("continued_command") + args)

pipeline_body = command("left") + PIPE("pipe") + Group(cmdline)("right")
pipeline = Group(pipeline_body)
pipeline_continued = Group(PIPE("continued_pipe") + pipeline_body)

cmdline <<= pipeline_continued | command_continued | pipeline | command


def parse_line(line):
    """
    Parse a line into the raw tree (nested ParseResults groups).
    Raises ParseError unless the whole line matches.
    """
    try:
        return cmdline.parse_string(line, parse_all=True)[0]
    except ParseException as e:
        raise ParseError(line, e.column, e.msg) from None


def parse(line):
    """Parse a line straight into an executable node."""
    return build_tree(parse_line(line))
