"""
Tests for variable declarations and assignment
"""
import pytest

from sabajs.exceptions import InvalidAssignmentException, UndefinedVariableException
from sabajs.interpreter import Interpreter
from sabajs.nodes import VariableDeclaration
from sabajs.values import UNDEFINED
from sabajs.tests.utils import parse_source, run_source


def test_decl_and_assign_ast_and_runtime():
    source = (
        "var x = 5;\n"
        "x = x + 1;\n"
    )
    ast = parse_source(source)
    assert isinstance(ast[0], VariableDeclaration)

    interpreter = run_source(source)
    assert interpreter.vars['x'] == 6


def test_declaration_with_string():
    interpreter = run_source('var foo="bar";')
    assert interpreter.lookup('foo') == 'bar'


def test_declaration_without_initializer_is_undefined():
    interpreter = run_source("var x;")
    assert interpreter.lookup('x') is UNDEFINED


def test_redeclaration_rebinds():
    interpreter = run_source("var x = 1; var x = x + 1;")
    assert interpreter.lookup('x') == 2


def test_assignment_without_declaration_creates_global():
    interpreter = run_source("y = 7;")
    assert interpreter.vars['y'] == 7


def test_assignment_is_an_expression():
    interpreter = run_source("var a; var b; a = b = 3;")
    assert interpreter.lookup('a') == 3
    assert interpreter.lookup('b') == 3


def test_assignment_value_can_be_used():
    interpreter = run_source("var a = 0; var b = a = 4;")
    assert interpreter.lookup('a') == 4
    assert interpreter.lookup('b') == 4


def test_undefined_variable_raises():
    with pytest.raises(UndefinedVariableException) as excinfo:
        run_source("var x = missing + 1;")
    assert excinfo.value.varname == 'missing'


def test_assign_to_literal_raises():
    with pytest.raises(InvalidAssignmentException):
        run_source("1 = 2;")


def test_side_effects_before_error_are_kept():
    source = "var a = 1; var b = nope; var c = 3;"
    interpreter = Interpreter('<test>')
    with pytest.raises(UndefinedVariableException):
        interpreter.execute(parse_source(source))
    assert interpreter.vars == {'a': 1}
