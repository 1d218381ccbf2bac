"""
quantcalc Syntax Package

The AST data model a parser builds and an evaluator walks.

Key Features:
- Closed family of node payloads (leaves, binary ops, assignments, blocks)
- Source spans on every node, excluded from equality
- Span-merging construction helpers for binary and assignment nodes
- Visitor dispatch that fails on unhandled variants
- Fully parenthesized display

Author: xwest
"""

from .ast_nodes import (
    Node, NodeType, NodeVisitor, NodeFormatter, NODE_TYPES,
    Def, Unit, Num, Err,
    BinaryOp, Add, Sub, Mul, Div,
    AssignOp, Assign, AddAssign, SubAssign, MulAssign, DivAssign,
    Scope,
)
from .errors import SyntaxInvariantError, InvalidAssignmentTarget

__all__ = [
    # Nodes
    "Node", "NodeType", "NODE_TYPES",
    "Def", "Unit", "Num", "Err",
    "BinaryOp", "Add", "Sub", "Mul", "Div",
    "AssignOp", "Assign", "AddAssign", "SubAssign", "MulAssign", "DivAssign",
    "Scope",

    # Traversal
    "NodeVisitor", "NodeFormatter",

    # Error handling
    "SyntaxInvariantError", "InvalidAssignmentTarget",
]
