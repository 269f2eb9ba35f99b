import pytest

from jargs.__main__ import main


def test_demo_runs_actions_in_order(capsys):
    assert main(["example", "-ac", "--dee=1", "-fvalue", "--ee", "two", "--bee"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["a", "c", "d: 1", "f: value", "e: two", "b", "a_flag: 1"]


def test_demo_without_options(capsys):
    assert main(["example"]) == 0
    assert capsys.readouterr().out == "a_flag: 0\n"


def test_demo_help(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["example", "--help"])
    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert out.startswith("Usage: ")
    assert f"{'  -d, --dee ARG':<32} D option\n" in out


def test_demo_unknown_option(capsys):
    with pytest.raises(SystemExit):
        main(["example", "-z"])
    assert capsys.readouterr().err == "example: unknown option: '-z'\n"
