import logging

import pytest

from jlisp.interpreter import Interpreter
from jlisp.types.value import to_string


@pytest.fixture
def interp(monkeypatch):
    monkeypatch.delenv("JLISP_PRELUDE_PATH", raising=False)
    return Interpreter()


def eval_lisp(interp: Interpreter, code: str) -> str:
    return to_string(interp.eval(code))


def test_atoms(interp):
    assert eval_lisp(interp, "nil") == "{}"
    assert eval_lisp(interp, "true") == "1"
    assert eval_lisp(interp, "false") == "0"


def test_fun(interp):
    eval_lisp(interp, "(fun {double x} {* x 2})")
    assert eval_lisp(interp, "(double 4)") == "8"
    assert eval_lisp(interp, "(double)") == "(\\ {x} {* x 2})"


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(len {1 2 3})", "3"),
        ("(len nil)", "0"),
        ("(nth 1 {5 6 7})", "6"),
        ("(last {1 2 3})", "3"),
        ("(take 2 {1 2 3})", "{1 2}"),
        ("(drop 2 {1 2 3})", "{3}"),
        ("(split 1 {1 2 3})", "{{1} {2 3}}"),
        ("(fst {1 2 3})", "1"),
        ("(snd {1 2 3})", "2"),
        ("(trd {1 2 3})", "3"),
        ("(elem 2 {1 2 3})", "1"),
        ("(elem 5 {1 2})", "0"),
        ("(reverse {1 2 3})", "{3 2 1}"),
    ]
)
def test_list_functions(interp, source, expected):
    assert eval_lisp(interp, source) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(map (\\ {x} {* x 2}) {1 2 3})", "{2 4 6}"),
        ("(filter (\\ {x} {> x 1}) {1 2 3})", "{2 3}"),
        ("(foldl + 0 {1 2 3})", "6"),
        ("(sum {1 2 3 4})", "10"),
        ("(product {1 2 3 4})", "24"),
        ("(unpack + {1 2 3})", "6"),
        ("(curry + {5 6 7})", "18"),
        ("(pack head 1 2 3)", "{1}"),
        ("(uncurry head 5 6 7)", "{5}"),
        ("(flip - 1 10)", "9"),
        ("(comp (\\ {x} {* x 2}) (\\ {x} {+ x 1}) 3)", "8"),
    ]
)
def test_higher_order(interp, source, expected):
    assert eval_lisp(interp, source) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(not 0)", "1"),
        ("(not 1)", "0"),
        ("(and 1 0)", "0"),
        ("(and 1 1)", "1"),
        ("(or 0 1)", "1"),
        ("(or 0 0)", "0"),
    ]
)
def test_logic(interp, source, expected):
    assert eval_lisp(interp, source) == expected


def test_do_runs_in_order(interp):
    assert eval_lisp(interp, "(do (def {q} 5) (+ q 1))") == "6"


def test_let_opens_a_scope(interp):
    assert eval_lisp(interp, "(let {do (= {w} 100) (w)})") == "100"
    assert eval_lisp(interp, "w") == "Error: Unbound symbol 'w'"


def test_prelude_path_override(tmp_path, monkeypatch):
    custom = tmp_path / "mine.jlsp"
    custom.write_text("(def {answer} 42)\n")
    monkeypatch.setenv("JLISP_PRELUDE_PATH", str(custom))
    itp = Interpreter()
    assert eval_lisp(itp, "answer") == "42"
    assert eval_lisp(itp, "(len {1})") == "Error: Unbound symbol 'len'"


def test_missing_prelude_is_tolerated(tmp_path, monkeypatch):
    monkeypatch.setenv("JLISP_PRELUDE_PATH", str(tmp_path / "absent.jlsp"))
    itp = Interpreter()
    assert eval_lisp(itp, "(+ 1 2)") == "3"


def test_string_prelude():
    itp = Interpreter(prelude="(def {answer} 42)\n(def {half} (/ answer 2))")
    assert eval_lisp(itp, "half") == "21"


def test_string_prelude_errors_are_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="jlisp.interpreter"):
        Interpreter(prelude='(error "bad")')
    assert "prelude form failed: bad" in caplog.text
