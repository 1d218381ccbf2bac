"""
quantcalc Lexer - turns expression source into (Token, Span) pairs

The grammar is small: operators, grouping, three keywords, identifiers
(which double as unit names), decimal literals and statement separators.
Identifiers follow the Unicode identifier classes so unit names like
``μ`` or ``Ω`` work without quoting. A name must start with an XID_Start
character, so a leading underscore is a lexical error; underscores are
fine after the first character.

Numbers are parsed straight into ``decimal.Decimal``; nothing in the
pipeline ever goes through float.

Author: xwest
"""

import logging
import re
from decimal import Decimal
from typing import Iterator, List, Optional, Tuple

from .tokens import (
    Token, TokenType, Span, SourceLocation, KEYWORDS, OPERATORS, SEPARATORS
)
from .errors import LexerError, create_invalid_character_error

logger = logging.getLogger(__name__)

LexedToken = Tuple[Token, Span]

# Skipped between tokens; newline is a separator, not whitespace
WHITESPACE = ' \t\f'

# Longest operator first so "+=" wins over "+"
_OPERATOR_LENGTHS = sorted({len(op) for op in OPERATORS}, reverse=True)


class Lexer:
    """
    Lexical analyzer for unit-aware expressions.

    Iterating a Lexer scans the source lazily; ``tokenize`` collects the
    whole stream. Unmatched input becomes a LEX_ERR token and a LexerError
    in ``errors``; scanning always runs to the end of the source.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of the source for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.errors: List[LexerError] = []

        self.number_pattern = re.compile(r'[0-9]+(?:\.[0-9]+)?')

    def __iter__(self) -> Iterator[LexedToken]:
        return self.scan()

    def tokenize(self) -> List[LexedToken]:
        """
        Tokenize the entire source.

        Returns:
            List of (token, span) pairs in source order
        """
        return list(self.scan())

    def scan(self) -> Iterator[LexedToken]:
        """Lazily yield (token, span) pairs from the start of the source."""
        self.pos = 0
        self.line = 1
        self.column = 1
        self.errors.clear()

        while True:
            self._skip_whitespace()
            if self.pos >= len(self.source):
                return
            yield self._next_token()

    def _next_token(self) -> LexedToken:
        """Scan one token starting at the current position."""
        start_pos = self.pos
        current_char = self.source[self.pos]

        # Statement separators
        if current_char in SEPARATORS:
            self._advance()
            return Token(TokenType.NL), Span(start_pos, self.pos)

        # Decimal literals
        if '0' <= current_char <= '9':
            return self._tokenize_number(start_pos)

        # Identifiers and keywords
        if self._is_identifier_start(current_char):
            return self._tokenize_identifier_or_keyword(start_pos)

        # Operators and grouping (multi-character first)
        for op_len in _OPERATOR_LENGTHS:
            potential_op = self.source[self.pos:self.pos + op_len]
            if potential_op in OPERATORS:
                self._advance_by(op_len)
                return Token(OPERATORS[potential_op]), Span(start_pos, self.pos)

        return self._tokenize_error(start_pos)

    def _tokenize_number(self, start_pos: int) -> LexedToken:
        """Tokenize an integer or decimal-point literal."""
        match = self.number_pattern.match(self.source, self.pos)
        lexeme = match.group(0)
        self._advance_by(len(lexeme))
        return Token(TokenType.NUM, Decimal(lexeme)), Span(start_pos, self.pos)

    def _tokenize_identifier_or_keyword(self, start_pos: int) -> LexedToken:
        """Tokenize an identifier, or a keyword when the whole word is one."""
        # First character is already validated as identifier start
        self._advance()

        while self.pos < len(self.source) and self._is_identifier_continue(self.source[self.pos]):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        span = Span(start_pos, self.pos)

        keyword = KEYWORDS.get(lexeme)
        if keyword is not None:
            return Token(keyword), span
        return Token(TokenType.UNIT, lexeme), span

    def _tokenize_error(self, start_pos: int) -> LexedToken:
        """Emit a LEX_ERR for one unmatched character and record why."""
        location = SourceLocation(self.filename, self.line, self.column, start_pos)
        char = self.source[self.pos]
        self._advance()

        error = create_invalid_character_error(char, location)
        self.errors.append(error)
        logger.debug("lexical error at %s: unmatched %r", location, char)

        return Token(TokenType.LEX_ERR, char), Span(start_pos, self.pos)

    @staticmethod
    def _is_identifier_start(char: str) -> bool:
        """Check if character can start an identifier (XID_Start)."""
        # isidentifier() also admits "_", which XID_Start does not
        return char != '_' and char.isidentifier()

    @staticmethod
    def _is_identifier_continue(char: str) -> bool:
        """Check if character can continue an identifier (XID_Continue)."""
        return ('_' + char).isidentifier()

    def _skip_whitespace(self):
        while self.pos < len(self.source) and self.source[self.pos] in WHITESPACE:
            self._advance()

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()

    def location(self, offset: int) -> SourceLocation:
        """Line and column of a source offset, for diagnostics."""
        offset = max(0, min(offset, len(self.source)))
        preceding = self.source[:offset]
        line = preceding.count('\n') + 1
        column = offset - (preceding.rfind('\n') + 1) + 1
        return SourceLocation(self.filename, line, column, offset)

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def first_error(self) -> Optional[LexerError]:
        return self.errors[0] if self.errors else None


def tokenize_string(source: str, filename: str = "<string>") -> List[LexedToken]:
    """
    Convenience function to tokenize a source string.

    Lexical errors come back as LEX_ERR tokens; nothing is raised.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of (token, span) pairs
    """
    return Lexer(source, filename).tokenize()
