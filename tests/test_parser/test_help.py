import pytest

from jargs import HelpSignal, OptionSpec, Parser
from jargs.help import format_help, format_option, format_option_column

EXPECTED_HELP = (
    "Usage: example [args]\n"
    "  -f, --flag                     Set flag\n"
    "  --filename ARG                 Specify filename\n"
    "  -p ARG                         Print something\n"
    "  -h, --help                     Print help\n"
)


def make_parser(**kwargs):
    parser = Parser(**kwargs)
    parser.add_flag("f", "flag", "Set flag", lambda: None)
    parser.add_value(None, "filename", "Specify filename", lambda value: None)
    parser.add_value("p", None, "Print something", lambda value: None)
    parser.add_help("example [args]")
    return parser


def test_format_help_matches_registration_order():
    parser = make_parser()
    assert parser.format_help() == EXPECTED_HELP


@pytest.mark.parametrize(
    "spec, column",
    [
        (OptionSpec.flag("f", "flag", "", lambda: None), "  -f, --flag"),
        (OptionSpec.flag("f", None, "", lambda: None), "  -f"),
        (OptionSpec.flag(None, "flag", "", lambda: None), "  --flag"),
        (OptionSpec.value("o", "output", "", print), "  -o, --output ARG"),
        (OptionSpec.value(None, "output", "", print), "  --output ARG"),
    ],
)
def test_format_option_column(spec, column):
    assert format_option_column(spec) == column


def test_column_of_exactly_32_characters_stays_inline():
    spec = OptionSpec.value("x", "a" * 20, "Desc", print)
    column = format_option_column(spec)
    assert len(column) == 32
    assert format_option(spec) == f"{column} Desc\n"


def test_long_column_wraps_description():
    spec = OptionSpec.value("x", "a" * 21, "Desc", print)
    column = format_option_column(spec)
    assert len(column) == 33
    assert format_option(spec) == f"{column}\n{' ' * 33}Desc\n"


def test_format_help_without_options():
    assert format_help("tool", []) == "Usage: tool\n"


def test_help_option_prints_and_signals(capsys):
    parser = make_parser()
    with pytest.raises(HelpSignal):
        parser.parse_args(["example", "--help"])
    assert capsys.readouterr().out == EXPECTED_HELP


def test_help_short_form_in_cluster(capsys):
    calls = []
    parser = make_parser()
    parser.add_flag("q", None, "Quiet", lambda: calls.append("q"))
    with pytest.raises(HelpSignal):
        parser.parse_args(["example", "-hq"])
    assert calls == []
    assert capsys.readouterr().out.startswith("Usage: example [args]\n")


def test_parse_help_exits_with_status_one(capsys):
    parser = make_parser()
    with pytest.raises(SystemExit) as excinfo:
        parser.parse(["example", "-h"])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert "  -h, --help                     Print help\n" in captured.out
    assert captured.err == ""


def test_parse_help_uses_exit_callback(capsys):
    statuses = []
    parser = make_parser(exit_callback=statuses.append)
    assert parser.parse(["example", "--help"]) is None
    assert statuses == [1]


def test_help_output_is_not_treated_as_markup(capsys):
    parser = Parser()
    parser.add_value("c", "color", "Use [bold]color[/bold] :smile:", print)
    parser.print_help("tool [-c ARG]")
    out = capsys.readouterr().out
    assert "Use [bold]color[/bold] :smile:" in out


def test_help_signal_bypasses_exception_handlers(capsys):
    parser = make_parser()
    with pytest.raises(HelpSignal):
        try:
            parser.parse_args(["example", "-h"])
        except Exception:  # noqa: BLE001
            pytest.fail("HelpSignal should not be caught as an Exception")


def test_help_output_keeps_tabs_and_control_characters(capsys):
    parser = Parser()
    parser.add_flag("t", None, "word \tend", lambda: None)
    parser.add_flag("r", None, "a\rb\x07c", lambda: None)
    parser.print_help("tool")
    assert capsys.readouterr().out == (
        "Usage: tool\n"
        f"{'  -t':<32} word \tend\n"
        f"{'  -r':<32} a\rb\x07c\n"
    )
