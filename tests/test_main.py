import builtins

import pytest

from jlisp.__main__ import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv("JLISP_PRELUDE_PATH", raising=False)
    monkeypatch.delenv("JLISP_LOAD_PATH", raising=False)
    monkeypatch.chdir(tmp_path)


def test_runs_files(tmp_path, capsys):
    script = tmp_path / "hello.jlsp"
    script.write_text('(print "hi" (len {1 2}))\n')
    assert main([str(script)]) == 0
    assert capsys.readouterr().out == '"hi" 2 \n'


def test_missing_file_is_reported(capsys):
    assert main(["missing.jlsp"]) == 0
    assert capsys.readouterr().out == "Error: Could not load library missing.jlsp: Unable to open file!\n"


def test_repl(monkeypatch, capsys):
    lines = iter(["+ 1 2", "(+ 1", "(len {1 2})", "(head {})"])

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)
    assert main([]) == 0
    assert capsys.readouterr().out == (
        "Jlisp Version 0.1\n"
        "Press Ctrl+c to Exit\n"
        "3\n"
        "<stdin>: error: expected ')' at end of input\n"
        "2\n"
        "Error: Function 'head' passed {} for argument 0.\n"
        "\n"
    )
