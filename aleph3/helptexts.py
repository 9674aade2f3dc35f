"""Help texts for built-in functions and constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HelpEntry:
    name: str
    description: str
    category: str


_ENTRIES = tuple(
    HelpEntry(*fields)
    for fields in (
        ("Sin", "Sin[x]: Sine of x (x in radians)", "Trigonometric"),
        ("Cos", "Cos[x]: Cosine of x (x in radians)", "Trigonometric"),
        ("Tan", "Tan[x]: Tangent of x (x in radians)", "Trigonometric"),
        ("ArcSin", "ArcSin[x]: Inverse sine of x", "Trigonometric"),
        ("ArcCos", "ArcCos[x]: Inverse cosine of x", "Trigonometric"),
        ("ArcTan", "ArcTan[x]: Inverse tangent of x", "Trigonometric"),
        ("Csc", "Csc[x]: Cosecant of x (1/sin(x))", "Trigonometric"),
        ("Sec", "Sec[x]: Secant of x (1/cos(x))", "Trigonometric"),
        ("Cot", "Cot[x]: Cotangent of x (1/tan(x))", "Trigonometric"),
        ("Plus", "Plus[a, b]: a + b (addition)", "Arithmetic"),
        ("Minus", "Minus[a, b]: a - b (subtraction)", "Arithmetic"),
        ("Times", "Times[a, b]: a * b (multiplication)", "Arithmetic"),
        ("Divide", "Divide[a, b]: a / b (division)", "Arithmetic"),
        ("Power", "Power[a, b]: a^b (exponentiation)", "Arithmetic"),
        ("Log", "Log[b, x]: Logarithm of x with base b", "Exponential/Logarithmic"),
        ("ArcTan", "ArcTan[x, y]: Two-argument arctangent (atan2)", "Trigonometric"),
        ("Sinh", "Sinh[x]: Hyperbolic sine of x", "Hyperbolic"),
        ("Cosh", "Cosh[x]: Hyperbolic cosine of x", "Hyperbolic"),
        ("Tanh", "Tanh[x]: Hyperbolic tangent of x", "Hyperbolic"),
        ("Coth", "Coth[x]: Hyperbolic cotangent of x", "Hyperbolic"),
        ("Sech", "Sech[x]: Hyperbolic secant of x", "Hyperbolic"),
        ("Csch", "Csch[x]: Hyperbolic cosecant of x", "Hyperbolic"),
        ("Exp", "Exp[x]: Exponential function e^x", "Exponential/Logarithmic"),
        ("Log", "Log[x]: Natural logarithm of x", "Exponential/Logarithmic"),
        ("Abs", "Abs[x]: Absolute value of x", "Other"),
        ("Floor", "Floor[x]: Greatest integer <= x", "Other"),
        ("Ceiling", "Ceiling[x]: Smallest integer >= x", "Other"),
        ("Sqrt", "Sqrt[x]: Square root of x", "Other"),
        ("Round", "Round[x]: Round x to the nearest integer", "Other"),
        ("Gamma", "Gamma[x]: Gamma function of x", "Other"),
        ("And", "And[a, b, ...]: Logical AND (True if all arguments are True)", "Logical"),
        ("Or", "Or[a, b, ...]: Logical OR (True if any argument is True)", "Logical"),
        ("StringJoin", "StringJoin[str1, str2, ...]: Concatenate strings", "String"),
        ("StringLength", "StringLength[str]: Length of a string", "String"),
        ("StringReplace", "StringReplace[str, rule]: Replace substrings using a rule", "String"),
        (
            "StringTake",
            "StringTake[str, n or {start, end}]: Take substring by count or range",
            "String",
        ),
        ("Length", "Length[list]: Number of elements in a list", "List"),
        ("N", "N[expr]: Evaluate numerically", "Numeric"),
        ("Pi", "Pi: The mathematical constant π ≈ 3.14159", "Constants"),
        ("E", "E: The mathematical constant e ≈ 2.71828", "Constants"),
        ("Degree", "Degree: 1 degree = Pi/180 radians", "Constants"),
    )
)


def get_help_entries() -> tuple[HelpEntry, ...]:
    """Return all help entries in their documented order."""
    return _ENTRIES