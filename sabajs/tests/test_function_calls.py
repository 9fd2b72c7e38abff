"""
Tests for function declarations and calls
"""
import pytest

from sabajs.config import EngineConfig
from sabajs.exceptions import (
    CallDepthException,
    NotCallableException,
    UndefinedFunctionException,
)
from sabajs.interpreter import Interpreter
from sabajs.nodes import CallExpression, ExpressionStatement
from sabajs.values import UNDEFINED, FunctionValue
from sabajs.tests.utils import parse_source, run_source


def test_call_result_feeds_expression():
    interpreter = run_source("function foo() { return 42; } var result = foo() + 1;")
    assert interpreter.lookup('result') == 43


def test_call_ast_and_runtime(capsys):
    source = (
        "function foo() { console.log(42); }\n"
        "foo();\n"
    )
    ast = parse_source(source)
    assert ast[1] == ExpressionStatement(CallExpression(ast[0].id, ()))

    run_source(source)
    assert capsys.readouterr().out.strip().splitlines() == ['42']


def test_parameters_bind_positionally():
    interpreter = run_source("function sub(a, b) { return a - b; } var r = sub(10, 4);")
    assert interpreter.lookup('r') == 6


def test_extra_arguments_are_ignored():
    interpreter = run_source("function first(a) { return a; } var r = first(1, 2, 3);")
    assert interpreter.lookup('r') == 1


def test_missing_arguments_are_undefined():
    interpreter = run_source("function second(a, b) { return b; } var r = second(1);")
    assert interpreter.lookup('r') is UNDEFINED


def test_function_without_return_is_undefined():
    interpreter = run_source("function noop() { var x = 1; } var r = noop();")
    assert interpreter.lookup('r') is UNDEFINED


def test_bare_return_is_undefined():
    interpreter = run_source("function early() { return; } var r = early();")
    assert interpreter.lookup('r') is UNDEFINED


def test_return_stops_the_body(capsys):
    source = (
        "function f() {\n"
        "    console.log('before');\n"
        "    return 1;\n"
        "    console.log('after');\n"
        "}\n"
        "f();\n"
    )
    run_source(source)
    assert capsys.readouterr().out.strip().splitlines() == ['before']


def test_arguments_evaluate_left_to_right(capsys):
    source = (
        "function show(v) { console.log(v); return v; }\n"
        "function pair(a, b) { return a + b; }\n"
        "var r = pair(show(1), show(2));\n"
    )
    interpreter = run_source(source)
    assert capsys.readouterr().out.strip().splitlines() == ['1', '2']
    assert interpreter.lookup('r') == 3


def test_call_before_declaration_is_hoisted():
    interpreter = run_source("var r = later(2); function later(n) { return n + 1; }")
    assert interpreter.lookup('r') == 3


def test_nested_declarations_are_hoisted_in_the_body():
    source = (
        "function outer() { return inner() + 1; function inner() { return 1; } }\n"
        "var r = outer();\n"
    )
    interpreter = run_source(source)
    assert interpreter.lookup('r') == 2


def test_nested_function_is_local():
    source = (
        "function outer() { function inner() { return 1; } return inner(); }\n"
        "outer();\n"
        "inner();\n"
    )
    with pytest.raises(UndefinedFunctionException):
        run_source(source)


def test_functions_are_values():
    interpreter = run_source("function foo() { return 1; } var f = foo; var r = f();")
    assert isinstance(interpreter.lookup('f'), FunctionValue)
    assert interpreter.lookup('r') == 1


def test_calling_undeclared_function_raises():
    with pytest.raises(UndefinedFunctionException) as excinfo:
        run_source("missing();")
    assert excinfo.value.name == 'missing'


def test_calling_non_function_raises():
    with pytest.raises(NotCallableException):
        run_source("var x = 1; x();")


def test_unbounded_recursion_hits_call_depth():
    interpreter = Interpreter('<test>', config=EngineConfig(max_call_depth=10))
    with pytest.raises(CallDepthException):
        interpreter.execute(parse_source("function f() { return f(); } f();"))
    assert interpreter.call_depth == 0
    assert interpreter.env is interpreter.global_env


def test_top_level_return_ends_the_program():
    interpreter = run_source("var a = 1; return; var b = 2;")
    assert interpreter.vars.get('a') == 1
    assert 'b' not in interpreter.vars
