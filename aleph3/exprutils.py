"""Helpers for inspecting and building expressions."""

from __future__ import annotations

from collections.abc import Iterable

from aleph3.expr import Boolean, Expr, FunctionCall, FunctionDefinition, Number, Parameter


def get_number_value(expr: Expr) -> float:
    """Return the value of a Number, or raise TypeError."""
    if isinstance(expr, Number):
        return expr.value
    raise TypeError("Expected a Number during evaluation, but got something else")


def get_boolean_value(expr: Expr) -> bool:
    """Return the value of a Boolean, or raise TypeError."""
    if isinstance(expr, Boolean):
        return expr.value
    raise TypeError("Expression is not a Boolean")


def get_integer_value(expr: Expr) -> int:
    """Return a Number's value truncated towards zero."""
    if isinstance(expr, Number):
        return int(expr.value)
    raise TypeError("Expected integer number")


def is_zero(expr: Expr) -> bool:
    return isinstance(expr, Number) and expr.value == 0.0


def is_one(expr: Expr) -> bool:
    return isinstance(expr, Number) and expr.value == 1.0


def is_function(expr: Expr, name: str) -> bool:
    return isinstance(expr, FunctionCall) and expr.head == name


def make_number(value: float) -> Number:
    return Number(value)


def _collect(args: tuple) -> tuple:
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        return tuple(args[0])
    return args


def make_plus(*args) -> FunctionCall:
    """Build ``Plus[...]`` from expressions or from a single sequence of them."""
    return FunctionCall("Plus", _collect(args))


def make_times(*args) -> Expr:
    """Build a product, folding numbers into a leading coefficient and flattening."""
    factors = []
    coefficient = 1.0
    for arg in _collect(args):
        if is_one(arg):
            continue
        if isinstance(arg, Number):
            coefficient *= arg.value
        elif is_function(arg, "Times"):
            factors.extend(arg.args)
        else:
            factors.append(arg)

    if coefficient != 1.0:
        factors.insert(0, Number(coefficient))
    if not factors:
        return Number(coefficient)
    if len(factors) == 1:
        return factors[0]
    return FunctionCall("Times", factors)


def make_pow(base: Expr, exponent: int) -> FunctionCall:
    return FunctionCall("Power", (base, Number(exponent)))


def make_fcall(name: str, args: Iterable[Expr]) -> FunctionCall:
    return FunctionCall(name, tuple(args))


def make_fdef(
    name: str, params: Iterable[Parameter | str], body: Expr, delayed: bool
) -> FunctionDefinition:
    """Build a definition; plain strings become parameters without defaults."""
    parameters = [p if isinstance(p, Parameter) else Parameter(p) for p in params]
    return FunctionDefinition(name, parameters, body, delayed)