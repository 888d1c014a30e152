"""tree-sitter adapter: TypeScript source text -> SourceDocument.

Only the top level of the program is adapted into statements. Anything that is
not a variable statement, or that tree-sitter could only recover with errors,
becomes an OtherStatement so lookups treat it as absent.
"""

from __future__ import annotations

import logging

import tree_sitter as ts
import tree_sitter_typescript as tsts

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

logger = logging.getLogger(__name__)

TS_LANGUAGE = ts.Language(tsts.language_typescript())

_VARIABLE_KINDS = frozenset({"lexical_declaration", "variable_declaration"})
_DECLARATION_KINDS = _VARIABLE_KINDS | {"ambient_declaration"}

# Initializer forms that carry their own declared type.
_TYPED_INITIALIZERS = frozenset({"as_expression", "satisfies_expression"})


def encode_source(text: str) -> bytes:
    """Encode text the same way the parser does, so byte offsets line up."""
    return text.encode("utf-8", errors="replace")


def parse(text: str) -> SourceDocument:
    """Parse artifact text. Never raises; unparseable input yields fewer statements."""
    if not isinstance(text, str) or not text:
        return SourceDocument(text="")

    source = encode_source(text)
    tree = ts.Parser(TS_LANGUAGE).parse(source)

    statements: list[TopLevelStatement] = []
    for child in tree.root_node.children:
        statements.append(_adapt_top_level(child, source))
    return SourceDocument(text=text, statements=tuple(statements))


def type_of_initializer(expr: Expr | None) -> TypeExpr | None:
    """Return the declared type carried by ``x as T``, ``x satisfies T`` or ``<T>x``."""
    if expr is None:
        return None
    node = expr.node
    while node.kind == "parenthesized_expression":
        inner = _significant(node.named_children)
        if len(inner) != 1:
            return None
        node = inner[0]

    if node.kind in _TYPED_INITIALIZERS:
        named = _significant(node.named_children)
        # `x as const` has a single named child: the expression.
        if len(named) < 2:
            return None
        return adapt_type(named[-1])

    if node.kind == "type_assertion":
        args = next((c for c in node.named_children if c.kind == "type_arguments"), None)
        if args is None:
            return None
        named = _significant(args.named_children)
        return adapt_type(named[0]) if named else None

    return None


def adapt_type(node: SyntaxNode) -> TypeExpr:
    """Classify a type node as a reference, an object literal, or anything else."""
    if node.kind == "type_identifier":
        return TypeReference(name=node.text, node=node)

    if node.kind == "nested_type_identifier":
        module = node.child_by_field("module")
        name = node.child_by_field("name")
        if name is not None:
            return TypeReference(
                name=name.text,
                qualifier=module.text if module is not None else None,
                node=node,
            )

    if node.kind == "generic_type":
        name = node.child_by_field("name")
        if name is not None:
            ref = adapt_type(name)
            if isinstance(ref, TypeReference):
                return TypeReference(name=ref.name, qualifier=ref.qualifier, node=node)

    if node.kind == "object_type":
        return ObjectTypeLiteral(node=node)

    return OtherType(node=node)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _detach(
    cursor: ts.TreeCursor,
    source: bytes,
    *,
    shallow: bool = False,
    parent_kind: str | None = None,
) -> SyntaxNode:
    node = cursor.node
    field_name = cursor.field_name
    children: list[SyntaxNode] = []
    # Shallow mode keeps the parts of a declarator (name, type, value) as
    # childless nodes.
    descend = not (shallow and parent_kind == "variable_declarator")
    if descend and cursor.goto_first_child():
        children.append(_detach(cursor, source, shallow=shallow, parent_kind=node.type))
        while cursor.goto_next_sibling():
            children.append(_detach(cursor, source, shallow=shallow, parent_kind=node.type))
        cursor.goto_parent()
    return SyntaxNode(
        kind=node.type,
        text=source[node.start_byte:node.end_byte].decode("utf-8", errors="replace"),
        start=node.start_byte,
        end=node.end_byte,
        named=node.is_named,
        field_name=field_name,
        children=tuple(children),
    )


def _significant(nodes: tuple[SyntaxNode, ...]) -> list[SyntaxNode]:
    return [n for n in nodes if n.kind != "comment"]


def _adapt_top_level(node: ts.Node, source: bytes) -> TopLevelStatement:
    try:
        detached = _detach(node.walk(), source)
    except RecursionError:
        # Keep the statement and its binding names; the too-deep types are dropped.
        logger.debug("Statement at byte %d nests too deeply, keeping only its shape", node.start_byte)
        try:
            detached = _detach(node.walk(), source, shallow=True)
        except RecursionError:
            return OtherStatement(
                node=SyntaxNode(kind=node.type, text="", start=node.start_byte, end=node.end_byte)
            )

    if node.has_error:
        logger.debug("Skipping %s with parse errors at byte %d", node.type, node.start_byte)
        return OtherStatement(node=detached)
    return _adapt_statement(detached)


def _adapt_statement(node: SyntaxNode) -> TopLevelStatement:
    decl = node
    exported = False
    if decl.kind == "export_statement":
        inner = decl.child_by_field("declaration") or next(
            (c for c in decl.named_children if c.kind in _DECLARATION_KINDS), None
        )
        if inner is None:
            return OtherStatement(node=node)
        decl, exported = inner, True

    ambient = False
    if decl.kind == "ambient_declaration":
        inner = next((c for c in decl.named_children if c.kind in _VARIABLE_KINDS), None)
        if inner is None:
            return OtherStatement(node=node)
        decl, ambient = inner, True

    if decl.kind not in _VARIABLE_KINDS:
        return OtherStatement(node=node)

    bindings = tuple(
        binding
        for binding in (_adapt_binding(c) for c in decl.named_children if c.kind == "variable_declarator")
        if binding is not None
    )
    return VariableStatement(
        node=node,
        exported=exported,
        ambient=ambient,
        keyword=decl.children[0].text if decl.children else "const",
        bindings=bindings,
    )


def _adapt_binding(node: SyntaxNode) -> Binding | None:
    name = node.child_by_field("name") or next(iter(node.named_children), None)
    # Destructuring patterns never name a single export.
    if name is None or name.kind != "identifier":
        return None

    type_annotation: TypeExpr | None = None
    annotation = node.child_by_field("type") or next(
        (c for c in node.children if c.kind == "type_annotation"), None
    )
    if annotation is not None:
        inner = _significant(annotation.named_children)
        if inner:
            type_annotation = adapt_type(inner[0])

    value = node.child_by_field("value") or _after_equals(node)
    return Binding(
        name=name.text,
        node=node,
        type_annotation=type_annotation,
        initializer=Expr(node=value) if value is not None else None,
    )


def _after_equals(node: SyntaxNode) -> SyntaxNode | None:
    seen_equals = False
    for child in node.children:
        if seen_equals and child.named and child.kind != "comment":
            return child
        seen_equals = seen_equals or child.kind == "="
    return None
