"""
Error handling for the quantcalc lexer.

Lexical errors never stop a scan: the lexer emits a LEX_ERR token and keeps
going, recording a LexerError diagnostic alongside so front-ends can report
every bad character in one pass.

Author: xwest
"""

from typing import Optional, List, Union
from dataclasses import dataclass

from .tokens import SourceLocation, Span


@dataclass
class Diagnostic:
    """Base record for diagnostics (errors, warnings, info)."""
    message: str
    location: Optional[Union[SourceLocation, Span]]
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    A lexical error found while scanning.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorRecovery:
    """
    Hints attached to lexical errors.
    """

    # Characters people type for operators the language spells differently
    OPERATOR_ALTERNATIVES = {
        '×': ['*'],
        '⋅': ['*'],
        # U+00B7 continues a name ("kg·m" is one identifier); this hint only
        # applies when it starts a token, as in "kg · m"
        '·': ['*'],
        '÷': ['/'],
        '−': ['-'],
        '%': ['/ 100'],
        '[': ['('],
        ']': [')'],
        ',': [';'],
    }

    @staticmethod
    def suggest_operator_corrections(char: str) -> List[str]:
        """Suggest the ASCII operator for a character the lexer rejected."""
        return ErrorRecovery.OPERATOR_ALTERNATIVES.get(char, [])


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
}


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for an invalid character."""
    suggestions = ErrorRecovery.suggest_operator_corrections(char)
    help_text = None

    if suggestions:
        help_text = f"Did you mean: {', '.join(suggestions)}?"
    elif char == '\r':
        help_text = "Carriage returns are not line separators; use '\\n' or ';'."
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in an expression."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Invalid character: {char!r}",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )
