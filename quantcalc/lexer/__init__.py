"""
quantcalc Lexer Package

Implements the lexical analyzer (tokenizer) for the unit-aware expression
language.

Key Features:
- Unicode identifiers, so unit names like μ or Ω lex as ordinary names
- Arbitrary-precision decimal literals
- Newline and ';' as interchangeable statement separators
- Error recovery: unmatched input becomes a LEX_ERR token, never an abort
- Source spans on every token

Author: xwest
"""

from .tokens import Token, TokenType, Span, SourceLocation, merge_spans
from .lexer import Lexer, tokenize_string
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "tokenize_string",
    "Token",
    "TokenType",
    "Span",
    "SourceLocation",
    "merge_spans",
    "Diagnostic",
    "LexerError",
]
