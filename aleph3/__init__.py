"""Symbolic expressions: parser, printer, arithmetic simplification rules, built-in functions and help texts."""

__version__ = "0.1.0"

__all__ = ["expr", "exprutils", "helptexts", "parser", "simplification", "functions"]