"""Character-level parser for single Lisp expressions.

Grammar:
    expr     = atom | string | number
    atom     = (letter | symbol) (letter | digit | symbol)*
    string   = '"' (escape | <any char but '"'>)* '"'
    escape   = '\\' ('\\' | '"' | 'n' | 'r' | 't')
    number   = radix | decimal
    radix    = '#' ('b' | 'o' | 'd' | 'x') (letter | digit)+
    decimal  = digit+
    symbol   = one of ! # $ % & | * + - / : < = > ? @ ^ _ ~

Alternatives are tried in order from the same position. Each one either
declines without consuming input or commits once its leading characters
match, after which any failure is final.

Since '#' is also a symbol character, the atom alternative declines on text
that looks like a radix literal: '#' followed by a radix letter and then a
hex-alphabet character, end of input or a character that cannot continue an
atom, or '#' followed by any other letter and then a decimal digit.
That leaves '#t', '#f' and '#foo' to the atom rule and sends '#xFF', '#b12'
and '#z5' to the number rule.
"""

import logging
from enum import Enum

from . import ast

logger = logging.getLogger(__name__)

SYMBOLS = frozenset("!#$%&|*+-/:<=>?@^_~")
DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# radix letter -> (base, alphabet, name of one digit)
RADIXES = {
    "b": (2, frozenset("01"), "binary digit"),
    "o": (8, frozenset("01234567"), "octal digit"),
    "d": (10, DIGITS, "decimal digit"),
    "x": (16, HEX_DIGITS, "hexadecimal digit"),
}

ESCAPES = {"\\": "\\", '"': '"', "n": "\n", "r": "\r", "t": "\t"}


class ErrorKind(Enum):
    UNEXPECTED_CHARACTER = "unexpected character"
    UNTERMINATED_STRING = "unterminated string"
    INVALID_ESCAPE = "invalid escape"
    INVALID_RADIX_DIGITS = "invalid radix digits"
    UNKNOWN_RADIX_PREFIX = "unknown radix prefix"


class ParseError(Exception):
    def __init__(
        self,
        kind: ErrorKind,
        msg: str,
        line: int,
        col: int,
        offset: int = 0,
        source: str = "lisp",
    ):
        super().__init__(f'"{source}" (line {line}, col {col}): {kind.value}: {msg}')
        self.kind = kind
        self.message = msg
        self.line = line
        self.col = col
        self.offset = offset
        self.source = source


def _show(text: str) -> str:
    """Quote text for an error message ('' is end of input)."""
    if not text:
        return "end of input"
    return repr(text)


def _fold_digits(digits: str, base: int) -> int:
    """Exact value of an already validated digit run, most significant first."""
    value = 0
    for ch in digits:
        value = value * base + int(ch, 16)
    return value


class Parser:
    """Backtracking parser over the characters of one expression."""

    def __init__(self, text: str, source: str = "lisp"):
        self.text = text
        self.source = source
        self.pos = 0

    def peek(self, offset: int = 0) -> str:
        idx = self.pos + offset
        if idx >= len(self.text):
            return ""
        return self.text[idx]

    def at(self, chars: frozenset[str]) -> bool:
        return self.peek() in chars

    def at_word_char(self) -> bool:
        return self.peek().isalpha() or self.at(DIGITS)

    def at_radix_literal(self) -> bool:
        if self.peek() != "#":
            return False
        letter, follow = self.peek(1), self.peek(2)
        if letter in RADIXES:
            # '#x' ending the atom has no digits, which is an error, not an atom
            ends_atom = not (follow.isalpha() or follow in DIGITS or follow in SYMBOLS)
            return ends_atom or follow in HEX_DIGITS
        return letter.isalpha() and follow in DIGITS

    def error(self, kind: ErrorKind, msg: str, offset: int | None = None) -> ParseError:
        if offset is None:
            offset = self.pos
        line = self.text.count("\n", 0, offset) + 1
        col = offset - self.text.rfind("\n", 0, offset)
        logger.debug("%s at offset %d: %s", kind.value, offset, msg)
        return ParseError(kind, msg, line, col, offset, self.source)

    def parse_expr(self) -> ast.Expr:
        """Parse one expression starting at the current position."""
        start = self.pos
        for alternative in (self.parse_atom, self.parse_string, self.parse_number):
            self.pos = start
            expr = alternative()
            if expr is not None:
                logger.debug("parsed %s ending at offset %d", expr.type, self.pos)
                return expr

        self.pos = start
        raise self.error(
            ErrorKind.UNEXPECTED_CHARACTER,
            f"unexpected {_show(self.peek())}, expecting letter, symbol, '\"' or digit",
        )

    def parse_atom(self) -> ast.Expr | None:
        """Parse an identifier, or '#t'/'#f' as booleans."""
        if not (self.peek().isalpha() or self.at(SYMBOLS)):
            return None
        if self.at_radix_literal():
            return None

        start = self.pos
        self.pos += 1
        while self.at_word_char() or self.at(SYMBOLS):
            self.pos += 1

        name = self.text[start : self.pos]
        if name == "#t":
            return ast.Bool(value=True)
        if name == "#f":
            return ast.Bool(value=False)
        return ast.Atom(name=name)

    def parse_string(self) -> ast.String | None:
        """Parse a double-quoted string, decoding escapes."""
        if self.peek() != '"':
            return None
        self.pos += 1

        chars: list[str] = []
        while self.peek() != '"':
            ch = self.peek()
            if not ch:
                raise self.error(
                    ErrorKind.UNTERMINATED_STRING,
                    "unexpected end of input, expecting closing '\"'",
                )
            self.pos += 1
            if ch == "\\":
                chars.append(self._parse_escape())
            else:
                chars.append(ch)
        self.pos += 1

        return ast.String(contents="".join(chars))

    def _parse_escape(self) -> str:
        ch = self.peek()
        if not ch:
            raise self.error(
                ErrorKind.UNTERMINATED_STRING,
                "unexpected end of input after '\\', expecting escape character",
            )
        if ch not in ESCAPES:
            raise self.error(
                ErrorKind.INVALID_ESCAPE,
                f"unsupported escape character {_show(ch)}, "
                "expecting one of '\\\\', '\"', 'n', 'r', 't'",
            )
        self.pos += 1
        return ESCAPES[ch]

    def parse_number(self) -> ast.Number | None:
        """Parse a radix-prefixed or plain decimal integer."""
        if self.at_radix_literal():
            return self.parse_radix()
        if not self.at(DIGITS):
            return None

        start = self.pos
        while self.at(DIGITS):
            self.pos += 1
        return ast.Number(value=_fold_digits(self.text[start : self.pos], 10))

    def parse_radix(self) -> ast.Number:
        """Parse '#' radix-letter digits; the whole digit run must fit the base."""
        self.pos += 1  # '#'
        letter = self.peek()
        if letter not in RADIXES:
            raise self.error(
                ErrorKind.UNKNOWN_RADIX_PREFIX,
                f"invalid radix prefix {_show('#' + letter)}, "
                "expecting one of '#b', '#o', '#d', '#x'",
            )
        base, alphabet, digit_name = RADIXES[letter]
        self.pos += 1

        start = self.pos
        while self.at_word_char():
            self.pos += 1
        digits = self.text[start : self.pos]

        if not digits:
            raise self.error(
                ErrorKind.INVALID_RADIX_DIGITS,
                f"must supply at least one {digit_name}",
                start,
            )
        for i, ch in enumerate(digits):
            if ch not in alphabet:
                raise self.error(
                    ErrorKind.INVALID_RADIX_DIGITS,
                    f"unexpected {_show(ch)}, expecting {digit_name}",
                    start + i,
                )

        return ast.Number(value=_fold_digits(digits, base))


def parse(text: str, source: str = "lisp") -> ast.Expr:
    """Parse a single expression, raising ParseError if none is found."""
    return Parser(text, source).parse_expr()


def report(error: ParseError | None = None) -> str:
    """One-line outcome of a parse: 'Found value' or 'No match: <error>'."""
    if error is not None:
        return f"No match: {error}"
    return "Found value"


def read_expr(text: str) -> str:
    """Report whether text holds an expression, in the form the CLI prints."""
    try:
        parse(text)
    except ParseError as e:
        return report(e)
    return report()
