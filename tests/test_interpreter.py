import pytest

from lintre.ast import Function, Word, Words
from lintre.interpreter import (
    Closure,
    EvalError,
    Interpreter,
    WordValue,
    pretty_expr,
    pretty_value,
)
from lintre.parser import parse


def run(source, debug=False):
    interp = Interpreter(debug)
    return interp, interp.eval(parse(source))


def test_unbound_word_evaluates_to_itself():
    assert Interpreter(False).eval(Word("a")) == WordValue("a")


def test_identity_application():
    interp, result = run("id = Lx.x; id a")
    assert result == WordValue("a")
    assert interp.format_result(result) == "a"


def test_k_combinator():
    _, result = run("K = Lx y. x; K a b")
    assert result == WordValue("a")


def test_church_false_selects_second():
    _, result = run("T = Lx y. x; F = Lx y. y; F a b")
    assert result == WordValue("b")


def test_partial_application_returns_closure():
    _, result = run("K = Lx y. x; K a")
    assert isinstance(result, Closure)
    assert len(result.params) == 1
    assert WordValue("a") in result.env.values()


def test_function_params_are_renamed_fresh():
    _, result = run("Lx.x")
    assert isinstance(result, Closure)
    (param,) = result.params
    assert param.startswith("x$")
    assert result.body == Word(param)


def test_repeated_functions_get_distinct_names():
    interp = Interpreter(False)
    first = interp.eval(parse("Lx.x"))
    second = interp.eval(parse("Lx.x"))
    assert first.params[0] != second.params[0] and first.params[0].startswith("x$")


def test_empty_sequence_gives_unit():
    _, result = run("")
    assert result == WordValue("()")


def test_sequence_of_only_definitions_gives_unit():
    interp, result = run("a = b; c = d")
    assert result == WordValue("()")
    assert interp.env["a"] == WordValue("b")


def test_empty_words_is_error():
    with pytest.raises(EvalError, match="Empty Words expression."):
        Interpreter(False).eval(Words(()))


def test_applying_non_function_is_error():
    with pytest.raises(EvalError, match="Trying to apply non-function!"):
        run("a b")


def test_infinite_loop_detected():
    with pytest.raises(EvalError, match="loop"):
        run("w = Lx. x x; w w")


def test_format_result_prefers_bound_name():
    interp, result = run("id = Lx.x; id")
    assert interp.format_result(result) == "id"


def test_top_level_define_is_stored():
    interp, result = run("x = a")
    assert result == WordValue("a")
    assert interp.env["x"] == result
    assert interp.format_result(result) == "x"


def test_format_result_of_unbound_closure_uses_pretty_value():
    interp = Interpreter(False)
    value = interp.eval(parse("Lx.x"))
    assert interp.format_result(value) == pretty_value(value)


def test_pretty_expr_function():
    assert pretty_expr(Function(("x",), Word("x"))) == "(λx . x)"


def test_pretty_expr_round_trips_through_parser_for_words():
    expr = parse("f x y")
    assert pretty_expr(expr) == "f x y"


def test_pretty_value_word():
    assert pretty_value(WordValue("a")) == "a"


def test_debug_prints_reduction_steps(capsys):
    run("id = Lx.x; id a", debug=True)
    out = capsys.readouterr().out
    assert "--- β-reduction step ---" in out
    assert "With environment:" in out


def test_no_debug_output_by_default(capsys):
    run("id = Lx.x; id a")
    assert capsys.readouterr().out == ""