"""Simplification rules for the arithmetic heads Plus, Times, Power and Divide.

Each rule receives the unevaluated arguments, the evaluation context and the
evaluator to use for them, and returns the simplified expression.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import Any

from aleph3.expr import Expr, FunctionCall, Indeterminate, List, Number

Evaluate = Callable[[Expr, Any], Expr]


def _elementwise(
    head: str, values: list[Expr], ctx: Any, evaluate: Evaluate
) -> List | None:
    """Apply ``head`` across lists, or between a list and a number.

    Returns None when the arguments are not two values of those shapes.
    """
    if len(values) != 2:
        return None
    left, right = values
    if isinstance(left, List) and isinstance(right, List):
        if len(left.elements) != len(right.elements):
            raise ValueError(f"List sizes must match for elementwise {head}")
        return List(
            evaluate(FunctionCall(head, (a, b)), ctx)
            for a, b in zip(left.elements, right.elements)
        )
    if isinstance(left, List) and isinstance(right, Number):
        return List(evaluate(FunctionCall(head, (e, right)), ctx) for e in left.elements)
    if isinstance(left, Number) and isinstance(right, List):
        return List(evaluate(FunctionCall(head, (left, e)), ctx) for e in right.elements)
    return None


def simplify_plus(args: Sequence[Expr], ctx: Any, evaluate: Evaluate) -> Expr:
    """Sum the numeric arguments, drop zeros and keep the symbolic ones."""
    values = [evaluate(arg, ctx) for arg in args]
    broadcast = _elementwise("Plus", values, ctx, evaluate)
    if broadcast is not None:
        return broadcast

    total = 0.0
    terms: list[Expr] = []
    for value in values:
        if isinstance(value, Number):
            if value.value != 0:
                total += value.value
        else:
            terms.append(value)
    if total != 0:
        terms.insert(0, Number(total))
    if not terms:
        return Number(0)
    if len(terms) == 1:
        return terms[0]
    return FunctionCall("Plus", terms)


def simplify_times(args: Sequence[Expr], ctx: Any, evaluate: Evaluate) -> Expr:
    """Multiply the numeric arguments, drop ones, and collapse on a zero factor."""
    values = [evaluate(arg, ctx) for arg in args]
    broadcast = _elementwise("Times", values, ctx, evaluate)
    if broadcast is not None:
        return broadcast

    product = 1.0
    factors: list[Expr] = []
    for value in values:
        if isinstance(value, Number):
            if value.value == 0:
                return Number(0)
            if value.value != 1:
                product *= value.value
        else:
            factors.append(value)
    if product != 1:
        factors.insert(0, Number(product))
    if not factors:
        return Number(1)
    if len(factors) == 1:
        return factors[0]
    return FunctionCall("Times", factors)


def _pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0 and exponent.is_integer() and int(exponent) % 2 == 1
        return -math.inf if negative else math.inf
    except ValueError:
        return math.nan


def simplify_power(args: Sequence[Expr], ctx: Any, evaluate: Evaluate) -> Expr:
    """Simplify ``x^0``, ``x^1``, ``0^x``, ``1^x`` and numeric powers."""
    if len(args) != 2:
        return FunctionCall("Power", args)
    base = evaluate(args[0], ctx)
    exponent = evaluate(args[1], ctx)
    if isinstance(exponent, Number):
        if exponent.value == 0:
            return Number(1)
        if exponent.value == 1:
            return base
    if isinstance(base, Number):
        if base.value == 0:
            return Number(0)
        if base.value == 1:
            return Number(1)
        if isinstance(exponent, Number):
            return Number(_pow(base.value, exponent.value))
    return FunctionCall("Power", (base, exponent))


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0 or math.isnan(numerator):
        return numerator / denominator if denominator != 0 else math.nan
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


def simplify_divide(args: Sequence[Expr], ctx: Any, evaluate: Evaluate) -> Expr:
    """Divide numbers; ``0/0`` is Indeterminate and ``a/0`` is an infinity."""
    if len(args) != 2:
        return FunctionCall("Divide", args)
    numerator = evaluate(args[0], ctx)
    denominator = evaluate(args[1], ctx)
    if isinstance(numerator, Number) and isinstance(denominator, Number):
        a, b = numerator.value, denominator.value
        if b == 0 and a == 0:
            return Indeterminate()
        return Number(_divide(a, b))
    return FunctionCall("Divide", (numerator, denominator))