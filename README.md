# aleph3

A small symbolic expression language in pure Python. It parses
Mathematica-style input into an expression tree, prints expressions back in
infix form, and provides simplification rules for arithmetic together with a
handful of built-in string, list and logical functions. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Parsing and printing

```python
from aleph3.parser import parse_expression
from aleph3.expr import to_string, to_string_raw

print(to_string(parse_expression("2 + -3")))                 # 2 + -3
print(to_string(parse_expression("max[-2, min[-3, -4]]")))   # max[-2, min[-3, -4]]
print(to_string_raw(parse_expression("x == 5")))             # x==5
```

`parse_expression(text)` (or `Parser(text).parse()`) understands:

- numbers, symbols, strings (`"text"`) and the literals `True` / `False`
- function calls `f[a, b]` and lists `{1, 2, 3}` (parsed as a `List` call)
- infix operators, from loosest to tightest:
  `->`, `== != <= >= < >`, `||`, `&&`, `<>`, `+ -`, `* /`, `^`;
  `->` and `^` group to the right, the others to the left, and chains of
  `<>` are flattened into one `StringJoin` call
- unary `+` and `-`, implicit multiplication such as `2x` and `2(3 + x)`
- assignments `x = 2`, function definitions `f[x_, y_:1] := x + y`
  (or `= body` for an immediate definition) and `If[cond, then, else]`

Malformed input raises `aleph3.parser.ParseError`, a `ValueError` whose
message shows the reason, the input, and a caret under the offending
position; the `reason`, `text` and `position` attributes hold the same.

`to_string` adds only the parentheses the operator precedence needs;
`to_string_raw` writes a compact form without spaces or added parentheses.
Numbers with an integral value print without decimals, others with at most
six decimals (`format_number`).

## Building expressions

`aleph3.expr` holds the immutable expression types: `Symbol`, `Number`,
`Boolean`, `String`, `List`, `FunctionCall`, `Parameter`,
`FunctionDefinition`, `Assignment`, `Rule`, `Infinity` and `Indeterminate`.
`aleph3.exprutils` has helpers to inspect and build them:

```python
from aleph3.expr import Symbol, to_string
from aleph3.exprutils import make_number, make_times, make_pow, get_number_value

term = make_times(make_number(2), make_number(3), Symbol("x"))
print(to_string(term))                          # 6 * x
print(to_string(make_pow(Symbol("x"), 2)))      # x^2
print(get_number_value(make_number(4)))         # 4.0
```

`get_number_value`, `get_boolean_value` and `get_integer_value` raise
`TypeError` when the expression is of the wrong kind. `is_zero`, `is_one`
and `is_function` test expressions; `make_plus`, `make_fcall` and
`make_fdef` build calls and definitions.

## Simplification rules and built-in functions

`aleph3.simplification` provides `simplify_plus`, `simplify_times`,
`simplify_power` and `simplify_divide`. They fold numbers, drop the identity
elements, collapse a product with a zero factor, work elementwise on two
lists of equal length (raising `ValueError` otherwise) and broadcast a
number over a list. `0 / 0` gives `Indeterminate`, and a non-zero number
divided by zero gives an infinite `Number`.

`aleph3.functions` provides `And`, `Or`, `StringJoin`, `StringLength`,
`StringReplace`, `StringTake`, `Length` and `N`; `built_in_functions()`
returns them keyed by head. `numeric_eval` replaces the constants `Pi`, `E`
and `Degree` with their values. Errors such as a non-string argument to
`StringJoin` or an out-of-range `StringTake` raise `ValueError`.

Each rule takes the arguments, a context and the evaluator to apply to
them; each built-in takes the call, a context and the evaluator. The package
does not include an evaluator, so you supply one. A minimal one:

```python
from aleph3.expr import FunctionCall, List, Symbol, to_string
from aleph3.functions import built_in_functions
from aleph3.parser import parse_expression
from aleph3.simplification import (
    simplify_divide, simplify_plus, simplify_power, simplify_times,
)

RULES = {"Plus": simplify_plus, "Times": simplify_times,
         "Power": simplify_power, "Divide": simplify_divide}
BUILTINS = built_in_functions()

def evaluate(expr, ctx):
    if isinstance(expr, Symbol):
        return ctx.get(expr.name, expr)
    if isinstance(expr, FunctionCall):
        if expr.head == "List":
            return List(evaluate(a, ctx) for a in expr.args)
        if expr.head in RULES:
            return RULES[expr.head](expr.args, ctx, evaluate)
        if expr.head in BUILTINS:
            return BUILTINS[expr.head](expr, ctx, evaluate)
    return expr

print(to_string(evaluate(parse_expression("{1, 2, 3} + 10"), {})))  # {11, 12, 13}
print(to_string(evaluate(parse_expression("z + 1"), {})))           # 1 + z
```

## Help texts

`aleph3.helptexts.get_help_entries()` returns `HelpEntry` records (name,
description, category) for the documented functions and constants, in a
fixed order.

## What this package does not do

- There is no evaluator, interactive prompt or command-line program; the
  evaluation loop above is yours to write.
- Assignments, function definitions, `If`, `Minus`, `Negate` and the
  comparison operators are parsed and printed, but no rule or built-in here
  evaluates them.
- The help texts also describe mathematical functions such as `Sin`, `Exp`,
  `Floor` or `Gamma`; the package has no implementations of them.