"""
Tests for scoping rules
"""
import pytest

from sabajs.exceptions import UndefinedVariableException
from sabajs.tests.utils import run_source


def test_functions_have_fresh_env(capsys):
    """
    Test that functions have a fresh environment and do not leak variables.
    """
    source = (
        "function inner() {\n"
        "    var x = 1;\n"
        "    return x;\n"
        "}\n"
        "function outer() {\n"
        "    var x = 2;\n"
        "    return inner();\n"
        "}\n"
        "console.log(outer());\n"
    )
    run_source(source)
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['1']


def test_callee_cannot_see_caller_locals():
    source = (
        "function reader() { return secret; }\n"
        "function caller() { var secret = 1; return reader(); }\n"
        "caller();\n"
    )
    with pytest.raises(UndefinedVariableException):
        run_source(source)


def test_globals_visible(capsys):
    """
    Test that global variables are visible inside functions.
    """
    source = (
        "var g = 5;\n"
        "function read_g() {\n"
        "    return g;\n"
        "}\n"
        "console.log(read_g());\n"
    )
    run_source(source)
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['5']


def test_functions_modify_globals():
    """
    Test that assigning an existing global inside a function rebinds it.
    """
    source = (
        "var x = 1;\n"
        "function f() {\n"
        "    x = 2;\n"
        "}\n"
        "f();\n"
    )
    interpreter = run_source(source)
    assert interpreter.vars['x'] == 2


def test_local_var_shadows_global():
    source = (
        "var x = 1;\n"
        "function f() {\n"
        "    var x = 2;\n"
        "    x = x + 1;\n"
        "    return x;\n"
        "}\n"
        "var r = f();\n"
    )
    interpreter = run_source(source)
    assert interpreter.vars['x'] == 1
    assert interpreter.vars['r'] == 3


def test_parameters_shadow_globals():
    source = (
        "var a = 'global';\n"
        "function f(a) { return a; }\n"
        "var r = f('param');\n"
    )
    interpreter = run_source(source)
    assert interpreter.vars['r'] == 'param'
    assert interpreter.vars['a'] == 'global'


def test_assignment_to_new_name_stays_local():
    source = (
        "function f() { fresh = 1; return fresh; }\n"
        "var r = f();\n"
    )
    interpreter = run_source(source)
    assert interpreter.vars['r'] == 1
    assert 'fresh' not in interpreter.vars
