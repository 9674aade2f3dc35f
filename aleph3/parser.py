"""Recursive-descent parser with precedence climbing for infix operators."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from aleph3.expr import (
    Assignment,
    Boolean,
    Expr,
    FunctionCall,
    FunctionDefinition,
    Number,
    Parameter,
    Rule,
    String,
    Symbol,
)


class ParseError(ValueError):
    """Raised when the input cannot be parsed.

    The message holds the reason, the input and a line marking the position.
    """

    def __init__(self, reason: str, text: str, position: int) -> None:
        pointer = [" "] * len(text)
        if position < len(pointer):
            pointer[position] = "^"
        super().__init__(f"{reason}\n{text}\n{''.join(pointer)}")
        self.reason = reason
        self.text = text
        self.position = position


class Assoc(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class OperatorInfo:
    """Precedence (higher binds tighter), associativity and the head it builds."""

    precedence: int
    assoc: Assoc
    ast_name: str


INFIX_OPERATORS: dict[str, OperatorInfo] = {
    "->": OperatorInfo(1, Assoc.RIGHT, "Rule"),
    "==": OperatorInfo(2, Assoc.LEFT, "Equal"),
    "!=": OperatorInfo(2, Assoc.LEFT, "NotEqual"),
    "<=": OperatorInfo(2, Assoc.LEFT, "LessEqual"),
    ">=": OperatorInfo(2, Assoc.LEFT, "GreaterEqual"),
    "<": OperatorInfo(2, Assoc.LEFT, "Less"),
    ">": OperatorInfo(2, Assoc.LEFT, "Greater"),
    "||": OperatorInfo(3, Assoc.LEFT, "Or"),
    "&&": OperatorInfo(4, Assoc.LEFT, "And"),
    "<>": OperatorInfo(5, Assoc.LEFT, "StringJoin"),
    "+": OperatorInfo(6, Assoc.LEFT, "Plus"),
    "-": OperatorInfo(6, Assoc.LEFT, "Minus"),
    "*": OperatorInfo(7, Assoc.LEFT, "Times"),
    "/": OperatorInfo(7, Assoc.LEFT, "Divide"),
    "^": OperatorInfo(8, Assoc.RIGHT, "Power"),
}

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_ALNUM = _LETTERS | _DIGITS
_SPACES = frozenset(" \t\n\v\f\r")
_NUMBER_PREFIX = re.compile(r"\d+(?:\.\d*)?|\.\d+")


class Parser:
    """Parses one statement: a definition, an assignment, an If or an expression."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def parse(self) -> Expr:
        """Parse the input; trailing text that does not continue it is ignored."""
        self._skip_whitespace()
        backup = self._pos

        if self._peek() in _LETTERS:
            name = self._parse_identifier()
            self._skip_whitespace()

            if name == "If" and self._match("["):
                self._pos -= 3
                return self._parse_if()

            if self._peek_string(2) != "==" and self._match("="):
                return Assignment(name, self._parse_expression())

            if self._match("["):
                definition = self._parse_definition_rest(name)
                if definition is not None:
                    return definition
            self._pos = backup

        return self._parse_expression()

    # --- statements ---------------------------------------------------------

    def _parse_definition_rest(self, name: str) -> Optional[FunctionDefinition]:
        """Parse ``x_, y_:default] := body`` after ``name[``; None if it is not one."""
        params = []
        while True:
            self._skip_whitespace()
            try:
                arg = self._parse_identifier()
            except ParseError:
                return None
            self._skip_whitespace()
            if not self._match("_"):
                return None
            self._skip_whitespace()
            default = self._parse_expression() if self._match(":") else None
            params.append(Parameter(arg, default))
            self._skip_whitespace()
            if self._match("]"):
                break
            if not self._match(","):
                return None

        self._skip_whitespace()
        if self._match_string(":="):
            delayed = True
        elif self._match("="):
            delayed = False
        else:
            return None
        body = self._parse_expression()
        return FunctionDefinition(name, params, body, delayed)

    def _parse_if(self) -> Expr:
        self._skip_whitespace()
        if not self._match_string("If["):
            raise self._error("Expected 'If['")
        condition = self._parse_expression()
        self._skip_whitespace()
        if not self._match(","):
            raise self._error("Expected ',' after condition in If")
        true_branch = self._parse_expression()
        self._skip_whitespace()
        if not self._match(","):
            raise self._error("Expected ',' after true branch in If")
        false_branch = self._parse_expression()
        self._skip_whitespace()
        if not self._match("]"):
            raise self._error("Expected ']' at the end of If")
        return FunctionCall("If", (condition, true_branch, false_branch))

    # --- expressions --------------------------------------------------------

    def _parse_expression(self, min_precedence: int = 1) -> Expr:
        left = self._parse_factor()
        while True:
            self._skip_whitespace()
            op = self._peek_operator()
            if not op:
                break
            info = INFIX_OPERATORS[op]
            if info.precedence < min_precedence:
                break
            self._pos += len(op)

            next_min = info.precedence + 1 if info.assoc is Assoc.LEFT else info.precedence
            right = self._parse_expression(next_min)

            if info.ast_name == "Rule":
                left = Rule(left, right)
            elif info.ast_name == "StringJoin":
                left = FunctionCall("StringJoin", _join_parts(left) + _join_parts(right))
            else:
                left = FunctionCall(info.ast_name, (left, right))
        return left

    def _parse_factor(self) -> Expr:
        self._skip_whitespace()

        if self._match("{"):
            elements = []
            self._skip_whitespace()
            if not self._match("}"):
                while True:
                    elements.append(self._parse_expression())
                    self._skip_whitespace()
                    if self._match("}"):
                        break
                    if not self._match(","):
                        raise self._error("Expected ',' or '}' in list")
            return FunctionCall("List", elements)

        if self._match('"'):
            end = self._text.find('"', self._pos)
            if end < 0:
                self._pos = len(self._text)
                raise self._error("Unterminated string")
            value = self._text[self._pos:end]
            self._pos = end + 1
            return String(value)

        if self._match("+"):
            return self._parse_factor()

        if self._match("-"):
            return FunctionCall("Negate", (self._parse_factor(),))

        if self._match("("):
            inner = self._parse_expression()
            if not self._match(")"):
                raise self._error("Expected ')'")
            return inner

        if self._peek() in _LETTERS:
            return self._parse_symbol()

        if self._peek() in _DIGITS or self._peek() == ".":
            number = self._parse_number()
            self._skip_whitespace()
            if self._peek() in _LETTERS:
                return FunctionCall("Times", (number, self._parse_symbol()))
            if self._peek() == "(":
                return FunctionCall("Times", (number, self._parse_factor()))
            return number

        raise self._error("Expected a number, symbol, or '('")

    def _parse_symbol(self) -> Expr:
        self._skip_whitespace()
        start = self._pos
        while self._peek() in _ALNUM or self._peek() == "_":
            self._pos += 1
        if start == self._pos:
            raise self._error("Expected symbol")
        name = self._text[start:self._pos]

        if name == "True":
            return Boolean(True)
        if name == "False":
            return Boolean(False)

        self._skip_whitespace()
        if not self._match("["):
            return Symbol(name)

        args = []
        if not self._match("]"):
            while True:
                if self._match("-"):
                    args.append(FunctionCall("Negate", (self._parse_expression(),)))
                else:
                    args.append(self._parse_expression())
                self._skip_whitespace()
                if self._match("]"):
                    break
                if not self._match(","):
                    raise self._error("Expected ',' or ']' in function call")
        return FunctionCall(name, args)

    def _parse_number(self) -> Number:
        self._skip_whitespace()
        start = self._pos
        while self._peek() in _DIGITS or self._peek() == ".":
            self._pos += 1
        if start == self._pos:
            raise self._error("Expected number")
        prefix = _NUMBER_PREFIX.match(self._text, start, self._pos)
        if prefix is None:
            raise self._error("Invalid number")
        return Number(float(prefix.group()))

    def _parse_identifier(self) -> str:
        self._skip_whitespace()
        start = self._pos
        while self._peek() in _ALNUM:
            self._pos += 1
        if start == self._pos:
            raise self._error("Expected identifier")
        return self._text[start:self._pos]

    # --- low-level helpers --------------------------------------------------

    def _peek_operator(self) -> str:
        self._skip_whitespace()
        matched = ""
        for op in INFIX_OPERATORS:
            if self._text.startswith(op, self._pos) and len(op) > len(matched):
                matched = op
        return matched

    def _skip_whitespace(self) -> None:
        while self._peek() in _SPACES:
            self._pos += 1

    def _match(self, expected: str) -> bool:
        if self._peek() == expected:
            self._pos += 1
            return True
        return False

    def _match_string(self, expected: str) -> bool:
        self._skip_whitespace()
        if self._text.startswith(expected, self._pos):
            self._pos += len(expected)
            return True
        return False

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _peek_string(self, length: int) -> str:
        if self._pos + length > len(self._text):
            return ""
        return self._text[self._pos:self._pos + length]

    def _error(self, reason: str) -> ParseError:
        return ParseError(reason, self._text, self._pos)


def _join_parts(expr: Expr) -> tuple:
    if isinstance(expr, FunctionCall) and expr.head == "StringJoin":
        return expr.args
    return (expr,)


def parse_expression(text: str) -> Expr:
    """Parse a single statement or expression from ``text``."""
    return Parser(text).parse()