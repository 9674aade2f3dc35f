"""Expression tree types and their textual forms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Symbol:
    """A named symbol such as ``x`` or ``Pi``."""

    name: str


@dataclass(frozen=True)
class String:
    """A string literal."""

    value: str


@dataclass(frozen=True)
class Number:
    """A real number; the value is always stored as a float."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True)
class Boolean:
    """The literal ``True`` or ``False``."""

    value: bool


@dataclass(frozen=True)
class List:
    """An evaluated list of expressions."""

    elements: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))


@dataclass(frozen=True)
class FunctionCall:
    """A call ``head[args...]``; operators are calls too (``Plus``, ``Times``...)."""

    head: str
    args: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))


@dataclass(frozen=True)
class Parameter:
    """A function parameter with an optional default value."""

    name: str
    default_value: Optional["Expr"] = None


@dataclass(frozen=True)
class FunctionDefinition:
    """A definition ``name[params] := body`` (delayed) or ``= body``."""

    name: str = ""
    params: tuple = ()
    body: Optional["Expr"] = None
    delayed: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))


@dataclass(frozen=True)
class Assignment:
    """A variable assignment ``name = value``."""

    name: str
    value: "Expr"


@dataclass(frozen=True)
class Rule:
    """A replacement rule ``lhs -> rhs``."""

    lhs: "Expr"
    rhs: "Expr"


@dataclass(frozen=True)
class Infinity:
    """The symbolic value Infinity."""


@dataclass(frozen=True)
class Indeterminate:
    """The result of an undefined operation such as 0/0."""


Expr = Union[
    Symbol,
    Number,
    Boolean,
    String,
    FunctionCall,
    FunctionDefinition,
    Assignment,
    Rule,
    List,
    Infinity,
    Indeterminate,
]

_PRECEDENCE = {
    "Negate": 4,
    "Power": 3,
    "Times": 2,
    "Divide": 2,
    "Plus": 1,
    "Minus": 1,
}

_COMPARISONS = {
    "Equal": "==",
    "NotEqual": "!=",
    "Less": "<",
    "Greater": ">",
    "LessEqual": "<=",
    "GreaterEqual": ">=",
}

_BINARY_SEPARATORS = {"Minus": " - ", "Divide": " / ", "Power": "^"}

_RAW_OPERATORS = {"Plus": "+", "Times": "*", "Divide": "/", "Power": "^", "Minus": "-"}


def format_number(value: float) -> str:
    """Integers without decimals; other values with up to six decimals."""
    if math.isinf(value):
        return str(value)
    if not math.isnan(value) and math.floor(value) == value:
        return str(int(value))
    text = f"{value:.6f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _precedence(head: str) -> int:
    return _PRECEDENCE.get(head, 0)


def _wrapped(expr: Expr, parent: int, is_right: bool = False) -> str:
    text = to_string(expr)
    if isinstance(expr, FunctionCall):
        prec = _precedence(expr.head)
        if prec < parent or (prec == parent and is_right):
            return f"({text})"
    return text


def _is_minus_one(expr: Expr) -> bool:
    return isinstance(expr, Number) and expr.value == -1


def _call_to_string(call: FunctionCall) -> str:
    head, args = call.head, call.args
    if head == "Plus":
        return " + ".join(_wrapped(arg, _precedence("Plus")) for arg in args)
    if head == "Times":
        if len(args) == 2:
            first, second = args
            if _is_minus_one(first):
                return "-" + _wrapped(second, _precedence("Negate"))
            if _is_minus_one(second):
                return "-" + _wrapped(first, _precedence("Negate"))
        return " * ".join(_wrapped(arg, _precedence("Times")) for arg in args)
    if head in _BINARY_SEPARATORS and len(args) == 2:
        prec = _precedence(head)
        return (
            _wrapped(args[0], prec)
            + _BINARY_SEPARATORS[head]
            + _wrapped(args[1], prec, is_right=True)
        )
    if head == "Negate" and len(args) == 1:
        return "-" + _wrapped(args[0], _precedence("Negate"))
    if head in _COMPARISONS and len(args) == 2:
        return f"{_wrapped(args[0], 0)} {_COMPARISONS[head]} {_wrapped(args[1], 0)}"
    return f"{head}[{', '.join(to_string(arg) for arg in args)}]"


def _definition_to_string(definition: FunctionDefinition) -> str:
    params = []
    for param in definition.params:
        text = param.name + "_"
        if param.default_value is not None:
            text += ":" + to_string(param.default_value)
        params.append(text)
    assign = "] := " if definition.delayed else "] = "
    return f"{definition.name}[{', '.join(params)}{assign}{to_string(definition.body)}"


def to_string(expr: Expr) -> str:
    """Render an expression in infix form with the parentheses it needs."""
    match expr:
        case Number(value=value):
            return format_number(value)
        case Symbol(name=name):
            return name
        case Boolean(value=value):
            return "True" if value else "False"
        case String(value=value):
            return f'"{value}"'
        case FunctionCall():
            return _call_to_string(expr)
        case FunctionDefinition():
            return _definition_to_string(expr)
        case Assignment(name=name, value=value):
            return f"{name} = {to_string(value)}"
        case Rule(lhs=lhs, rhs=rhs):
            return f"{to_string(lhs)} -> {to_string(rhs)}"
        case Infinity():
            return "Infinity"
        case Indeterminate():
            return "Indeterminate"
        case List(elements=elements):
            return "{" + ", ".join(to_string(e) for e in elements) + "}"
    raise TypeError(f"not an expression: {expr!r}")


def _call_to_string_raw(call: FunctionCall) -> str:
    head, args = call.head, call.args
    if head in _COMPARISONS and len(args) == 2:
        return to_string_raw(args[0]) + _COMPARISONS[head] + to_string_raw(args[1])
    if head in _RAW_OPERATORS:
        return _RAW_OPERATORS[head].join(to_string_raw(arg) for arg in args)
    if head == "Negate" and len(args) == 1:
        return "-" + to_string_raw(args[0])
    return f"{head}[{','.join(to_string_raw(arg) for arg in args)}]"


def to_string_raw(expr: Expr) -> str:
    """Render an expression compactly, without spaces or added parentheses."""
    match expr:
        case Number(value=value):
            return format_number(value)
        case Symbol(name=name):
            return name
        case Boolean(value=value):
            return "True" if value else "False"
        case String(value=value):
            return f'"{value}"'
        case FunctionCall():
            return _call_to_string_raw(expr)
        case FunctionDefinition(name=name):
            return name
        case Assignment(name=name):
            return name
        case Rule(lhs=lhs, rhs=rhs):
            return f"{to_string_raw(lhs)}->{to_string_raw(rhs)}"
        case Infinity():
            return "Infinity"
        case Indeterminate():
            return "Indeterminate"
        case List(elements=elements):
            return "{" + ",".join(to_string_raw(e) for e in elements) + "}"
    raise TypeError(f"not an expression: {expr!r}")