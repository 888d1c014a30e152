"""Immutable syntax model for generated TypeScript artifacts.

The parser adapter copies the parts of the tree-sitter tree we care about into
these dataclasses, so nothing downstream holds a reference to a live parser.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SyntaxNode:
    """A detached concrete-syntax node.

    ``kind`` is the tree-sitter node type; for anonymous tokens it is the
    token text itself (``":"``, ``"|"``, ``"declare"``...). ``start``/``end``
    are byte offsets into the UTF-8 encoded source.
    """

    kind: str
    text: str
    start: int
    end: int
    named: bool = True
    field_name: str | None = None
    children: tuple[SyntaxNode, ...] = ()

    @property
    def named_children(self) -> tuple[SyntaxNode, ...]:
        return tuple(c for c in self.children if c.named)

    def child_by_field(self, name: str) -> SyntaxNode | None:
        for child in self.children:
            if child.field_name == name:
                return child
        return None


# ---------------------------------------------------------------------------
# Type expressions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TypeReference:
    """``Name``, ``ns.Name`` or ``Name<...>``; ``name`` is the terminal identifier."""

    name: str
    node: SyntaxNode
    qualifier: str | None = None


@dataclass(frozen=True)
class ObjectTypeLiteral:
    """A ``{ ... }`` type with a (possibly empty) member list."""

    node: SyntaxNode

    @property
    def member_count(self) -> int:
        return len([c for c in self.node.named_children if c.kind != "comment"])


@dataclass(frozen=True)
class OtherType:
    """Any type expression that is neither a reference nor an object literal."""

    node: SyntaxNode


TypeExpr = TypeReference | ObjectTypeLiteral | OtherType


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Expr:
    """An initializer expression, kept as raw syntax."""

    node: SyntaxNode


@dataclass(frozen=True)
class Binding:
    """One ``name[: Type][ = value]`` declarator."""

    name: str
    node: SyntaxNode
    type_annotation: TypeExpr | None = None
    initializer: Expr | None = None


@dataclass(frozen=True)
class VariableStatement:
    """A top-level ``const``/``let``/``var`` statement."""

    node: SyntaxNode
    exported: bool = False
    ambient: bool = False
    keyword: str = "const"
    bindings: tuple[Binding, ...] = ()


@dataclass(frozen=True)
class OtherStatement:
    """Any top-level statement we do not inspect (imports, comments, errors...)."""

    node: SyntaxNode


TopLevelStatement = VariableStatement | OtherStatement


@dataclass(frozen=True)
class SourceDocument:
    """Raw artifact text plus its parsed top-level statements."""

    text: str
    statements: tuple[TopLevelStatement, ...] = field(default_factory=tuple)

    def variable_statements(self) -> Iterator[VariableStatement]:
        for stmt in self.statements:
            if isinstance(stmt, VariableStatement):
                yield stmt
