"""Syntax model and tree-sitter adapter for generated TypeScript artifacts."""

from typekeep.syntax.models import (
    Binding,
    Expr,
    ObjectTypeLiteral,
    OtherStatement,
    OtherType,
    SourceDocument,
    SyntaxNode,
    TopLevelStatement,
    TypeExpr,
    TypeReference,
    VariableStatement,
)
from typekeep.syntax.parser import parse, type_of_initializer

__all__ = [
    "Binding",
    "Expr",
    "ObjectTypeLiteral",
    "OtherStatement",
    "OtherType",
    "SourceDocument",
    "SyntaxNode",
    "TopLevelStatement",
    "TypeExpr",
    "TypeReference",
    "VariableStatement",
    "parse",
    "type_of_initializer",
]
