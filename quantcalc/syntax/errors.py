"""
Invariant violations in AST construction.

These are not user errors. A parser that only calls the compound
assignment helpers on identifier nodes never triggers them, so they are
raised and left to propagate.

Author: xwest
"""

from typing import Optional, TYPE_CHECKING

from ..lexer.errors import Diagnostic

if TYPE_CHECKING:
    from .ast_nodes import Node


class SyntaxInvariantError(Exception):
    """
    Raised when a node is built in a shape the AST model forbids.

    Carries the offending node and a diagnostic located at its span.
    """

    def __init__(self, message: str, node: Optional['Node'] = None, code: Optional[str] = None):
        super().__init__(message)
        self.node = node
        self.diagnostic = Diagnostic(
            message=message,
            location=node.span if node is not None else None,
            severity="error",
            code=code,
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class InvalidAssignmentTarget(SyntaxInvariantError):
    """Compound assignment was requested on something other than a name."""

    def __init__(self, operation: str, node: 'Node'):
        super().__init__(
            f"You can only {operation} to a Unit node, not {type(node.typ).__name__}",
            node,
            code="S001",
        )
        self.operation = operation


ERROR_CODES = {
    "S001": "Assignment target is not an identifier",
}
