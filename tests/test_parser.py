import pytest

from aleph3.expr import (
    Assignment,
    Boolean,
    FunctionCall,
    FunctionDefinition,
    Number,
    Parameter,
    Rule,
    String,
    Symbol,
    to_string,
)
from aleph3.parser import ParseError, Parser, parse_expression


def call(head, *args):
    return FunctionCall(head, args)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2 + 3", "2 + 3"),
        ("-2 + 3", "-2 + 3"),
        ("2 + -3", "2 + -3"),
        ("-2 + -3", "-2 + -3"),
        ("x + 1", "x + 1"),
        ("sin[x]", "sin[x]"),
        ("sin[-x]", "sin[-x]"),
        ("max[-2, min[-3, -4]]", "max[-2, min[-3, -4]]"),
        ("max[2, min[3, 4]]", "max[2, min[3, 4]]"),
        ("2^3", "2^3"),
        ("-2^3", "-2^3"),
        ("2^-3", "2^-3"),
        ("exp[1]", "exp[1]"),
        ("floor[3.7]", "floor[3.7]"),
        ("ceil[3.2]", "ceil[3.2]"),
        ("round[3.5]", "round[3.5]"),
    ],
)
def test_round_trip_to_string(text, expected):
    assert to_string(parse_expression(text)) == expected


def test_number_times_symbol():
    assert parse_expression("2x") == call("Times", Number(2), Symbol("x"))


def test_negative_number_times_symbol():
    assert parse_expression("-2x") == call("Negate", call("Times", Number(2), Symbol("x")))


def test_implicit_multiplication_with_parentheses():
    assert parse_expression("2(3 + x)") == call(
        "Times", Number(2), call("Plus", Number(3), Symbol("x"))
    )


def test_variable_assignment():
    assert parse_expression("x = 2") == Assignment("x", Number(2))


def test_simple_if():
    assert parse_expression("If[x == 0, 1, 2]") == call(
        "If", call("Equal", Symbol("x"), Number(0)), Number(1), Number(2)
    )


def test_equality_operator():
    assert parse_expression("x == 0") == call("Equal", Symbol("x"), Number(0))


def test_logical_and():
    assert parse_expression("True && False") == call("And", Boolean(True), Boolean(False))


def test_logical_or():
    assert parse_expression("True || False") == call("Or", Boolean(True), Boolean(False))


def test_mixed_logical_expressions():
    assert parse_expression("True && False || True") == call(
        "Or", call("And", Boolean(True), Boolean(False)), Boolean(True)
    )


def test_symbolic_logical_expressions():
    assert parse_expression("x && y") == call("And", Symbol("x"), Symbol("y"))


def test_nested_logical_expressions():
    assert parse_expression("(True || False) && x") == call(
        "And", call("Or", Boolean(True), Boolean(False)), Symbol("x")
    )


def test_simple_string_join():
    assert parse_expression('"Aleph3" <> " Rocks"') == call(
        "StringJoin", String("Aleph3"), String(" Rocks")
    )


def test_chained_string_join_is_flattened():
    assert parse_expression('"Hello" <> " " <> "World"') == call(
        "StringJoin", String("Hello"), String(" "), String("World")
    )


def test_simple_rule():
    assert parse_expression('"World" -> "Aleph3"') == Rule(String("World"), String("Aleph3"))


def test_rule_as_function_argument():
    assert parse_expression('StringReplace["Hello World", "World" -> "Aleph3"]') == call(
        "StringReplace", String("Hello World"), Rule(String("World"), String("Aleph3"))
    )


def test_string_join_binds_tighter_than_rule():
    assert parse_expression('"a" <> "b" -> "c"') == Rule(
        call("StringJoin", String("a"), String("b")), String("c")
    )


def test_simple_list():
    assert parse_expression("{1, 2, 3}") == call("List", Number(1), Number(2), Number(3))


def test_nested_list():
    assert parse_expression("{1, {2, 3}, 4}") == call(
        "List", Number(1), call("List", Number(2), Number(3)), Number(4)
    )


def test_list_as_function_argument():
    assert parse_expression("f[{1, 2}, 3]") == call(
        "f", call("List", Number(1), Number(2)), Number(3)
    )


def test_empty_list():
    assert parse_expression("{}") == call("List")


def test_list_with_mixed_types():
    assert parse_expression('{1, "hello", True, x}') == call(
        "List", Number(1), String("hello"), Boolean(True), Symbol("x")
    )


def test_list_with_expressions():
    assert parse_expression("{1+2, x^2, f[3]}") == call(
        "List",
        call("Plus", Number(1), Number(2)),
        call("Power", Symbol("x"), Number(2)),
        call("f", Number(3)),
    )


def test_list_as_builtin_argument():
    assert parse_expression("Length[{1, 2, 3}]") == call(
        "Length", call("List", Number(1), Number(2), Number(3))
    )


def test_nested_empty_lists():
    assert parse_expression("{{}, {}}") == call("List", call("List"), call("List"))


@pytest.mark.parametrize(
    "name", ["Pi", "E", "Degree", "GoldenRatio", "Catalan", "EulerGamma", "Infinity"]
)
def test_constants_parse_as_symbols(name):
    assert parse_expression(name) == Symbol(name)


def test_delayed_function_definition():
    result = parse_expression("f[x_] := x^2")
    assert result == FunctionDefinition(
        "f", [Parameter("x")], call("Power", Symbol("x"), Number(2)), True
    )
    assert to_string(result) == "f[x_] := x^2"


def test_immediate_definition_with_default():
    result = parse_expression("f[x_, y_:2] = x + y")
    assert result == FunctionDefinition(
        "f",
        [Parameter("x"), Parameter("y", Number(2))],
        call("Plus", Symbol("x"), Symbol("y")),
        False,
    )
    assert to_string(result) == "f[x_, y_:2] = x + y"


def test_call_without_patterns_is_not_a_definition():
    assert parse_expression("f[x] = 3") == call("f", Symbol("x"))


def test_left_associative_minus():
    assert parse_expression("1 - 2 - 3") == call(
        "Minus", call("Minus", Number(1), Number(2)), Number(3)
    )


def test_right_associative_power():
    assert parse_expression("2^3^2") == call(
        "Power", Number(2), call("Power", Number(3), Number(2))
    )


def test_right_associative_rule():
    assert parse_expression("a -> b -> c") == Rule(Symbol("a"), Rule(Symbol("b"), Symbol("c")))


def test_times_binds_tighter_than_plus():
    assert parse_expression("1 + 2 * 3") == call(
        "Plus", Number(1), call("Times", Number(2), Number(3))
    )


def test_comparison_longest_operator_wins():
    assert parse_expression("x <= 3") == call("LessEqual", Symbol("x"), Number(3))
    assert parse_expression("x != 3") == call("NotEqual", Symbol("x"), Number(3))


def test_negate_in_argument_wraps_whole_expression():
    assert parse_expression("f[-2 + 3]") == call(
        "f", call("Negate", call("Plus", Number(2), Number(3)))
    )


def test_decimal_number():
    assert parse_expression(".5") == Number(0.5)


def test_parser_class_parse():
    assert Parser("  y  ").parse() == Symbol("y")


def test_unexpected_token_error_message():
    with pytest.raises(ParseError) as info:
        parse_expression("*")
    assert str(info.value) == "Expected a number, symbol, or '('\n*\n^"


def test_unterminated_string():
    with pytest.raises(ParseError) as info:
        parse_expression('"abc')
    assert info.value.reason == "Unterminated string"


def test_missing_closing_parenthesis():
    with pytest.raises(ParseError) as info:
        parse_expression("(1 + 2")
    assert info.value.reason == "Expected ')'"


def test_list_missing_separator():
    with pytest.raises(ParseError) as info:
        parse_expression("{1 2}")
    assert info.value.reason == "Expected ',' or '}' in list"


def test_call_missing_separator():
    with pytest.raises(ParseError) as info:
        parse_expression("f[1 2]")
    assert info.value.reason == "Expected ',' or ']' in function call"


def test_if_missing_comma():
    with pytest.raises(ParseError) as info:
        parse_expression("If[x == 0, 1 2]")
    assert info.value.reason == "Expected ',' after true branch in If"


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_expression("")