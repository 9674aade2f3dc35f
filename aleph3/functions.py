"""Built-in functions: logic, strings, lists and numeric evaluation.

Each built-in receives the call, the evaluation context and the evaluator.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from aleph3.expr import (
    Boolean,
    Expr,
    FunctionCall,
    List,
    Number,
    Rule,
    String,
    Symbol,
)

Evaluate = Callable[[Expr, Any], Expr]
BuiltIn = Callable[[FunctionCall, Any, Evaluate], Expr]

_CONSTANTS = {
    "Pi": math.pi,
    "E": math.e,
    "Degree": math.pi / 180.0,
}


def numeric_eval(expr: Expr) -> Expr:
    """Replace the constants Pi, E and Degree with their numeric values."""
    match expr:
        case Symbol(name=name) if name in _CONSTANTS:
            return Number(_CONSTANTS[name])
        case List(elements=elements):
            return List(numeric_eval(e) for e in elements)
        case Rule(lhs=lhs, rhs=rhs):
            return Rule(numeric_eval(lhs), numeric_eval(rhs))
        case FunctionCall(head=head, args=args):
            return FunctionCall(head, [numeric_eval(a) for a in args])
    return expr


def builtin_and(call: FunctionCall, ctx: Any, evaluate: Evaluate) -> Expr:
    """True if every argument is True; stays unevaluated on a non-Boolean."""
    for arg in call.args:
        value = evaluate(arg, ctx)
        if not isinstance(value, Boolean):
            return FunctionCall("And", call.args)
        if not value.value:
            return Boolean(False)
    return Boolean(True)


def builtin_or(call: FunctionCall, ctx: Any, evaluate: Evaluate) -> Expr:
    """True if any argument is True; stays unevaluated on a non-Boolean."""
    for arg in call.args:
        value = evaluate(arg, ctx)
        if not isinstance(value, Boolean):
            return FunctionCall("Or", call.args)
        if value.value:
            return Boolean(True)
    return Boolean(False)


def string_join(call: FunctionCall, ctx: Any, evaluate: Evaluate) -> Expr:
    parts = []
    for arg in call.args:
        value = evaluate(arg, ctx)
        if not isinstance(value, String):
            raise ValueError("StringJoin expects string arguments")
        parts.append(value.value)
    return String("".join(parts))


def string_length(call: FunctionCall, ctx: Any, evaluate: Evaluate) -> Expr:
    if len(call.args) != 1:
        raise ValueError("StringLength expects exactly 1 argument")
    value = evaluate(call.args[0], ctx)
    if not isinstance(value, String):
        raise ValueError("StringLength expects a string argument")
    return Number(len(value.value))


def string_replace(call: FunctionCall, ctx: Any, evaluate: Evaluate) -> Expr:
    """Replace every occurrence of the rule's left side with its right side."""
    if len(call.args) != 2:
        raise ValueError("StringReplace expects exactly 2 arguments")
    subject = evaluate(call.args[0], ctx)
    rule = evaluate(call.args[1], ctx)
    if not isinstance(subject, String):
        return FunctionCall("StringReplace", (subject, rule))
    if (
        isinstance(rule, Rule)
        and isinstance(rule.lhs, String)
        and isinstance(rule.rhs, String)
    ):
        return String(subject.value.replace(rule.lhs.value, rule.rhs.value))
    return String(subject.value)


def string_take(call: FunctionCall, ctx: Any, evaluate: Evaluate) -> Expr:
    """Take the first n, last -n, or characters start..end (1-based) of a string."""
    if len(call.args) != 2:
        raise ValueError("StringTake expects exactly 2 arguments")
    subject = evaluate(call.args[0], ctx)
    if not isinstance(subject, String):
        raise ValueError("StringTake expects the first argument to be a string")
    text = subject.value
    spec = evaluate(call.args[1], ctx)
    invalid = ValueError("StringTake expects a valid index or range")

    if isinstance(spec, Number):
        n = int(spec.value)
        if n == 0 or abs(n) > len(text):
            raise invalid
        return String(text[:n] if n > 0 else text[n:])

    if isinstance(spec, List) and len(spec.elements) == 2:
        first, last = spec.elements
        if isinstance(first, Number) and isinstance(last, Number):
            start, end = int(first.value), int(last.value)
            if start < 1 or end < start or end > len(text):
                raise invalid
            return String(text[start - 1:end])

    raise invalid


def length(call: FunctionCall, ctx: Any, evaluate: Evaluate) -> Expr:
    if len(call.args) != 1:
        raise ValueError("Length expects exactly 1 argument")
    value = evaluate(call.args[0], ctx)
    if not isinstance(value, List):
        raise ValueError("Length expects a list argument")
    return Number(len(value.elements))


def numeric(call: FunctionCall, ctx: Any, evaluate: Evaluate) -> Expr:
    """``N[expr]``: evaluate, substitute numeric constants, evaluate again."""
    if len(call.args) != 1:
        raise ValueError("N expects exactly 1 argument")
    value = evaluate(call.args[0], ctx)
    return evaluate(numeric_eval(value), ctx)


def built_in_functions() -> dict[str, BuiltIn]:
    """Return the built-ins keyed by the head they handle."""
    return {
        "And": builtin_and,
        "Or": builtin_or,
        "StringJoin": string_join,
        "StringLength": string_length,
        "StringReplace": string_replace,
        "StringTake": string_take,
        "Length": length,
        "N": numeric,
    }