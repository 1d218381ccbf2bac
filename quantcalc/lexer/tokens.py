"""
Token definitions for the quantcalc lexer.

This module defines all token types of the expression language:
- Arithmetic and compound-assignment operators
- Grouping delimiters and keywords
- Identifiers (variable and unit names share one token kind)
- Decimal literals, statement separators and lexical errors

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Tuple, Union


class TokenType(Enum):
    """
    Enumeration of all token types.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Operators
    # ========================================================================
    MUL = auto()                    # *
    DIV = auto()                    # /
    ADD = auto()                    # +
    SUB = auto()                    # -
    POW = auto()                    # ^

    # Assignment operators
    ASSIGN = auto()                 # =
    ADD_ASSIGN = auto()             # +=
    SUB_ASSIGN = auto()             # -=
    MUL_ASSIGN = auto()             # *=
    DIV_ASSIGN = auto()             # /=
    POW_ASSIGN = auto()             # ^=

    # ========================================================================
    # Grouping
    # ========================================================================
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LCURLY = auto()                 # {
    RCURLY = auto()                 # }

    # ========================================================================
    # Keywords
    # ========================================================================
    DEF = auto()                    # def
    IF = auto()                     # if
    ELSE = auto()                   # else

    # ========================================================================
    # Identifiers and literals
    # ========================================================================
    UNIT = auto()                   # m, kg, velocity, μ
    NUM = auto()                    # 42, 3.14

    # Statement separator
    NL = auto()                     # newline or ;

    # ========================================================================
    # Error and Recovery Tokens
    # ========================================================================
    LEX_ERR = auto()                # Unmatched input


@dataclass(frozen=True)
class Span:
    """
    Half-open ``[start, end)`` range of offsets into the source string.

    Offsets index the Python string, so ``source[span.start:span.end]``
    is the text the span covers.
    """
    start: int
    end: int

    @classmethod
    def coerce(cls, value: Union['Span', Tuple[int, int], range]) -> 'Span':
        """Accept a Span, a (start, end) pair or a range."""
        if isinstance(value, Span):
            return value
        if isinstance(value, range):
            return cls(value.start, value.stop)
        start, end = value
        return cls(start, end)

    def merge(self, other: 'Span') -> 'Span':
        """Smallest span covering both."""
        return merge_spans(self, other)

    def slice(self, source: str) -> str:
        return source[self.start:self.end]

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


def merge_spans(first: Span, second: Span) -> Span:
    """
    Merge two spans regardless of the order they arrive in.

    The result runs from the smaller start to the larger end.
    """
    return Span(min(first.start, second.start), max(first.end, second.end))


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting.
    """
    filename: str
    line: int
    column: int
    offset: int  # Offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    ``value`` carries the payload of the token kinds that have one: the
    name of a UNIT, the Decimal of a NUM and the unmatched text of a
    LEX_ERR. Source positions travel next to the token as a Span.
    """
    type: TokenType
    value: Any = None

    def __str__(self) -> str:
        if self.type == TokenType.LEX_ERR:
            return f"Lexer Error: {self.value}"
        return TOKEN_DISPLAY[self.type]

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORDS.values()

    @property
    def is_operator(self) -> bool:
        """Check if this token is an arithmetic or assignment operator."""
        return self.type in ARITHMETIC_OPERATORS or self.type in ASSIGNMENT_OPERATORS

    @property
    def is_assignment(self) -> bool:
        return self.type in ASSIGNMENT_OPERATORS

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.UNIT

    @property
    def is_error(self) -> bool:
        return self.type == TokenType.LEX_ERR


# Placeholders for naming an expected token kind in parser messages
Token.NUM = Token(TokenType.NUM, Decimal(0))
Token.UNIT = Token(TokenType.UNIT, "...")


# Lookup tables used by the lexer

KEYWORDS = {
    "def": TokenType.DEF,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
}

OPERATORS = {
    # Arithmetic
    "*": TokenType.MUL,
    "/": TokenType.DIV,
    "+": TokenType.ADD,
    "-": TokenType.SUB,
    "^": TokenType.POW,

    # Assignment
    "=": TokenType.ASSIGN,
    "+=": TokenType.ADD_ASSIGN,
    "-=": TokenType.SUB_ASSIGN,
    "*=": TokenType.MUL_ASSIGN,
    "/=": TokenType.DIV_ASSIGN,
    "^=": TokenType.POW_ASSIGN,

    # Grouping
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LCURLY,
    "}": TokenType.RCURLY,
}

# Statement separators; both spellings produce the same token
SEPARATORS = {"\n", ";"}

ARITHMETIC_OPERATORS = {
    TokenType.MUL, TokenType.DIV, TokenType.ADD, TokenType.SUB, TokenType.POW,
}

ASSIGNMENT_OPERATORS = {
    TokenType.ASSIGN, TokenType.ADD_ASSIGN, TokenType.SUB_ASSIGN,
    TokenType.MUL_ASSIGN, TokenType.DIV_ASSIGN, TokenType.POW_ASSIGN,
}

TOKEN_DISPLAY = {
    **{token_type: text for text, token_type in OPERATORS.items()},
    **{token_type: text for text, token_type in KEYWORDS.items()},
    TokenType.UNIT: "UNIT",
    TokenType.NUM: "NUM",
    TokenType.NL: r"(\n or ;)",
}
