"""
Abstract Syntax Tree node definitions for quantcalc.

A Node pairs a NodeType payload with the source span it covers. The
payloads form a closed family of frozen dataclasses; consumers walk them
with a NodeVisitor, which refuses to silently skip a variant it does not
handle.

Nodes compare by payload only. Two trees parsed from differently spaced
sources are equal as long as their structure is.

Author: xwest
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, ClassVar, List, Sequence, Tuple, Type, Union

from ..lexer.tokens import Span, merge_spans
from ..numeric import format_decimal
from .errors import InvalidAssignmentTarget

SpanLike = Union[Span, Tuple[int, int], range]


class NodeType:
    """Base class for node payloads."""

    @staticmethod
    def from_node(node: 'Node') -> 'NodeType':
        """Strip the span off a node."""
        return node.typ

    def children(self) -> List['Node']:
        return []


# ============================================================================
# Leaves
# ============================================================================

@dataclass(frozen=True)
class Def(NodeType):
    """Function definition header."""
    name: str


@dataclass(frozen=True)
class Unit(NodeType):
    """Identifier reference; names a variable or a unit."""
    name: str


@dataclass(frozen=True)
class Num(NodeType):
    """Decimal literal."""
    value: Decimal


@dataclass(frozen=True)
class Err(NodeType):
    """Placeholder where parsing failed."""


# ============================================================================
# Binary operations
# ============================================================================

@dataclass(frozen=True)
class BinaryOp(NodeType):
    """Base class for binary operations."""
    left: 'Node'
    right: 'Node'

    symbol: ClassVar[str] = "?"

    def children(self) -> List['Node']:
        return [self.left, self.right]


@dataclass(frozen=True)
class Add(BinaryOp):
    symbol: ClassVar[str] = "+"


@dataclass(frozen=True)
class Sub(BinaryOp):
    symbol: ClassVar[str] = "-"


@dataclass(frozen=True)
class Mul(BinaryOp):
    symbol: ClassVar[str] = "*"


@dataclass(frozen=True)
class Div(BinaryOp):
    symbol: ClassVar[str] = "/"


# ============================================================================
# Assignments
# ============================================================================

@dataclass(frozen=True)
class AssignOp(NodeType):
    """
    Base class for assignment forms.

    ``name`` is the target identifier; ``operator`` is the arithmetic
    operator a compound form applies before storing (None for plain ``=``).
    """
    name: str
    value: 'Node'

    symbol: ClassVar[str] = "="
    operator: ClassVar[Any] = None

    def children(self) -> List['Node']:
        return [self.value]


@dataclass(frozen=True)
class Assign(AssignOp):
    symbol: ClassVar[str] = "="
    operator: ClassVar[Any] = None


@dataclass(frozen=True)
class AddAssign(AssignOp):
    symbol: ClassVar[str] = "+="
    operator: ClassVar[Any] = "+"


@dataclass(frozen=True)
class SubAssign(AssignOp):
    symbol: ClassVar[str] = "-="
    operator: ClassVar[Any] = "-"


@dataclass(frozen=True)
class MulAssign(AssignOp):
    symbol: ClassVar[str] = "*="
    operator: ClassVar[Any] = "*"


@dataclass(frozen=True)
class DivAssign(AssignOp):
    symbol: ClassVar[str] = "/="
    operator: ClassVar[Any] = "/"


# ============================================================================
# Blocks
# ============================================================================

@dataclass(frozen=True)
class Scope(NodeType):
    """Block of statements, in source order."""
    nodes: Tuple['Node', ...] = ()

    def __post_init__(self):
        # Accept any sequence; store a tuple so the payload stays immutable
        object.__setattr__(self, 'nodes', tuple(self.nodes))

    def children(self) -> List['Node']:
        return list(self.nodes)


# Every concrete payload, for consumers that need to check coverage
NODE_TYPES: Tuple[Type[NodeType], ...] = (
    Def, Add, Sub, Mul, Div, Unit, Num,
    Assign, AddAssign, SubAssign, MulAssign, DivAssign,
    Scope, Err,
)


# ============================================================================
# Nodes
# ============================================================================

@dataclass(frozen=True)
class Node:
    """
    An AST node: a payload plus the span of source it was parsed from.

    The span is provenance only and does not take part in equality.
    Construction helpers never mutate; they return new nodes whose span
    covers both operands.
    """
    typ: NodeType
    span: Span = field(compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'span', Span.coerce(self.span))

    @classmethod
    def new(cls, typ: NodeType, span: SpanLike) -> 'Node':
        return cls(typ, Span.coerce(span))

    @classmethod
    def err(cls, span: SpanLike) -> 'Node':
        """Error placeholder covering ``span``."""
        return cls(Err(), Span.coerce(span))

    @classmethod
    def scope(cls, nodes: Sequence['Node'], span: SpanLike) -> 'Node':
        return cls(Scope(tuple(nodes)), Span.coerce(span))

    # ------------------------------------------------------------------
    # Binary operations
    # ------------------------------------------------------------------

    def _binary(self, kind: Type[BinaryOp], rhs: 'Node') -> 'Node':
        return Node(kind(self, rhs), merge_spans(self.span, rhs.span))

    def add(self, rhs: 'Node') -> 'Node':
        return self._binary(Add, rhs)

    def sub(self, rhs: 'Node') -> 'Node':
        return self._binary(Sub, rhs)

    def mul(self, rhs: 'Node') -> 'Node':
        return self._binary(Mul, rhs)

    def div(self, rhs: 'Node') -> 'Node':
        return self._binary(Div, rhs)

    # ------------------------------------------------------------------
    # Assignments
    # ------------------------------------------------------------------

    def _compound(self, kind: Type[AssignOp], rhs: 'Node') -> 'Node':
        """
        Turn this identifier node into an assignment of ``rhs`` to it.

        Raises:
            InvalidAssignmentTarget: if this node is not a Unit leaf
        """
        if not isinstance(self.typ, Unit):
            raise InvalidAssignmentTarget(kind.__name__, self)
        return Node(kind(self.typ.name, rhs), merge_spans(self.span, rhs.span))

    def assign(self, rhs: 'Node') -> 'Node':
        return self._compound(Assign, rhs)

    def add_assign(self, rhs: 'Node') -> 'Node':
        return self._compound(AddAssign, rhs)

    def sub_assign(self, rhs: 'Node') -> 'Node':
        return self._compound(SubAssign, rhs)

    def mul_assign(self, rhs: 'Node') -> 'Node':
        return self._compound(MulAssign, rhs)

    def div_assign(self, rhs: 'Node') -> 'Node':
        return self._compound(DivAssign, rhs)

    # ------------------------------------------------------------------

    def children(self) -> List['Node']:
        """Get all child nodes."""
        return self.typ.children()

    def walk(self):
        """Yield this node and all of its descendants, depth first."""
        yield self
        for child in self.children():
            yield from child.walk()

    @property
    def is_error(self) -> bool:
        return isinstance(self.typ, Err)

    def __str__(self) -> str:
        return NodeFormatter().visit(self)


# ============================================================================
# Visitors
# ============================================================================

class NodeVisitor:
    """
    Dispatches on the payload type: ``visit`` calls ``visit_<TypeName>``.

    A visitor without a method for some variant fails loudly in
    ``generic_visit`` instead of passing the node through.
    """

    def visit(self, node: Node) -> Any:
        method = getattr(self, f"visit_{type(node.typ).__name__}", None)
        if method is None:
            return self.generic_visit(node)
        return method(node)

    def generic_visit(self, node: Node) -> Any:
        raise NotImplementedError(
            f"{type(self).__name__} does not handle {type(node.typ).__name__} nodes"
        )


class NodeFormatter(NodeVisitor):
    """Renders nodes as fully parenthesized infix text."""

    def visit_Def(self, node: Node) -> str:
        return f"(def {node.typ.name})"

    def _binary(self, node: Node) -> str:
        typ = node.typ
        return f"({self.visit(typ.left)} {typ.symbol} {self.visit(typ.right)})"

    visit_Add = visit_Sub = visit_Mul = visit_Div = _binary

    def visit_Unit(self, node: Node) -> str:
        return node.typ.name

    def visit_Num(self, node: Node) -> str:
        return format_decimal(node.typ.value)

    def _assignment(self, node: Node) -> str:
        typ = node.typ
        return f"({typ.name} {typ.symbol} {self.visit(typ.value)})"

    visit_Assign = visit_AddAssign = visit_SubAssign = _assignment
    visit_MulAssign = visit_DivAssign = _assignment

    def visit_Scope(self, node: Node) -> str:
        lines = ["{\n"]
        for child in node.typ.nodes:
            lines.append(f"{self.visit(child)}\n")
        lines.append("}")
        return "".join(lines)

    def visit_Err(self, node: Node) -> str:
        return "Error"
