"""lispread: recognize single Lisp expressions.

An expression is an atom, a boolean (#t / #f), a double-quoted string with
backslash escapes, or an integer written in decimal or with a radix prefix
(#b, #o, #d, #x).

Example:
    from lispread import parse, read_expr

    parse("#xFF")        # Number(type='number', value=255)
    read_expr("#b12")    # 'No match: "lisp" (line 1, col 4): invalid radix digits: ...'
"""

__version__ = "0.1.0"

from .ast import Atom, Bool, Expr, Number, String
from .parser import ErrorKind, ParseError, Parser, parse, read_expr

__all__ = [
    # Parse
    "parse",
    "read_expr",
    "Parser",
    "ParseError",
    "ErrorKind",
    # Values
    "Expr",
    "Atom",
    "Bool",
    "String",
    "Number",
]
