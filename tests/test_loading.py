import pytest

from jlisp.types.value import SExpr


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("JLISP_LOAD_PATH", str(tmp_path / "libs"))
    return tmp_path


def test_load_defines_into_environment(run, workdir):
    (workdir / "lib.jlsp").write_text("; helpers\n(def {a} 1)\n(def {b} {2 3})\n")
    assert run('(load "lib.jlsp")') == "()"
    assert run("(join (list a) b)") == "{1 2 3}"


def test_errors_in_file_are_printed_and_loading_continues(interp, run, workdir, capsys):
    (workdir / "lib.jlsp").write_text('(def {a} 1)\n(error "oops")\n(def {b} 2)\n')
    assert interp.load("lib.jlsp") == SExpr()
    assert capsys.readouterr().out == "Error: oops\n"
    assert run("(+ a b)") == "3"


def test_unparsable_file(run, workdir):
    (workdir / "lib.jlsp").write_text("(def {a} 1\n")
    assert run('(load "lib.jlsp")') == (
        "Error: Could not load library lib.jlsp: error: expected ')' at end of input"
    )
    assert run("a") == "Error: Unbound symbol 'a'"


def test_missing_file(run, workdir):
    assert run('(load "nope.jlsp")') == "Error: Could not load library nope.jlsp: Unable to open file!"


def test_load_path_is_searched(run, workdir, monkeypatch):
    libs = workdir / "libs"
    libs.mkdir()
    (libs / "util.jlsp").write_text("(def {twice} (\\ {x} {* 2 x}))\n")
    elsewhere = workdir / "elsewhere"
    elsewhere.mkdir()
    monkeypatch.chdir(elsewhere)
    assert run('(load "util.jlsp")') == "()"
    assert run("(twice 21)") == "42"


def test_bundled_prelude_is_on_default_load_path(run, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("JLISP_LOAD_PATH", raising=False)
    assert run('(load "core.jlsp")') == "()"
    assert run("(len {1 2})") == "2"


def test_load_requires_a_string(run):
    assert run("(load 1)") == (
        "Error: Function 'load' passed incorrect type for argument 0. Got Number, Expected String."
    )
