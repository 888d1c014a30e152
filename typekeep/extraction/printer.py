"""Deterministic re-serialization of type expressions.

Output depends only on the syntax subtree, never on the original layout:
object type literals are always expanded one member per line with four-space
indentation, everything else is printed as tokens with canonical spacing.
Printing the re-parse of printed text gives the same text back.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

from typekeep.syntax.models import SyntaxNode, TypeExpr

_INDENT = "    "

# Printed verbatim from source.
_ATOMIC_KINDS = frozenset({"string", "template_string", "template_literal_type", "number", "regex"})

# `?:`, `-?:` and `+?:` are single tokens in mapped-type members.
_NO_SPACE_BEFORE = frozenset({",", ";", ")", "]", ">", ".", "?.", "?:", "-?:", "+?:"})
_NO_SPACE_AFTER = frozenset({"(", "[", "<", ".", "...", "?."})

# Tokens that a call-like "(" attaches to without a space: `get(x)`, `<T>(x)`.
_CALLEE_KINDS = frozenset({
    "identifier",
    "type_identifier",
    "property_identifier",
    "private_property_identifier",
    "string",
    "number",
    ">",
    "]",
})


class _Token(NamedTuple):
    kind: str
    text: str
    parent: str | None


def print_statement(name: str, type_expr: TypeExpr) -> str:
    """Ambient export statement for ``name``; initializers are never carried."""
    return f"export declare const {name}: {print_type(type_expr)};"


def print_type(type_expr: TypeExpr) -> str:
    return print_node(type_expr.node)


def print_node(node: SyntaxNode, indent: int = 0) -> str:
    if node.kind == "object_type":
        return _print_object(node, indent)
    return _join(_tokens(node, indent, None))


# ---------------------------------------------------------------------------
# Internal
# ---------------------------------------------------------------------------


def _print_object(node: SyntaxNode, indent: int) -> str:
    members = [c for c in node.named_children if c.kind != "comment"]
    if not members:
        return "{}"
    pad = _INDENT * (indent + 1)
    lines = [f"{pad}{print_node(m, indent + 1)};" for m in members]
    return "{\n" + "\n".join(lines) + "\n" + _INDENT * indent + "}"


def _tokens(node: SyntaxNode, indent: int, parent: str | None) -> Iterator[_Token]:
    if node.kind == "comment":
        return
    if node.kind == "object_type":
        yield _Token("{}", _print_object(node, indent), parent)
        return
    if not node.children or node.kind in _ATOMIC_KINDS:
        # Zero-width MISSING tokens have no text.
        if node.text:
            yield _Token(node.kind, node.text, parent)
        return

    children = [c for c in node.children if c.kind != "comment"]
    # `| A | B` and `& A & B` print without the leading operator.
    if node.kind in ("union_type", "intersection_type") and children and children[0].kind in ("|", "&"):
        children = children[1:]
    for child in children:
        yield from _tokens(child, indent, node.kind)


def _join(tokens: Iterator[_Token]) -> str:
    parts: list[str] = []
    prev: _Token | None = None
    for tok in tokens:
        if prev is not None and _needs_space(prev, tok):
            parts.append(" ")
        parts.append(tok.text)
        prev = tok
    return "".join(parts)


def _needs_space(prev: _Token, cur: _Token) -> bool:
    if prev.kind in _NO_SPACE_AFTER:
        return False
    # Signed literals (`-1`) and mapped-type modifiers (`-readonly`, `-?`).
    if prev.kind in ("-", "+") and (prev.parent == "unary_expression" or cur.kind in ("readonly", "?")):
        return False
    if cur.kind in _NO_SPACE_BEFORE:
        return False
    if cur.kind in ("-", "+") and prev.kind == "]":
        return False
    if cur.kind in ("?", ":", "!"):
        return cur.parent == "conditional_type"
    if cur.kind == "<":
        return cur.parent not in ("type_arguments", "type_parameters")
    if cur.kind == "[":
        return cur.parent not in ("array_type", "lookup_type")
    if cur.kind == "(":
        if prev.kind == "?":
            return prev.parent == "conditional_type"
        return prev.kind not in _CALLEE_KINDS
    return True
