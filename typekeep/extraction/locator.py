"""Find a named binding among top-level variable statements."""

from __future__ import annotations

from typekeep.syntax.models import Binding, SourceDocument, VariableStatement


def locate(doc: SourceDocument, target: str) -> Binding | None:
    """Return the first binding named ``target``, exported or not."""
    found = locate_with_statement(doc, target)
    return found[1] if found else None


def locate_exported(doc: SourceDocument, target: str) -> Binding | None:
    """Like locate(), but only exported statements are considered."""
    found = locate_with_statement(doc, target, exported_only=True)
    return found[1] if found else None


def locate_with_statement(
    doc: SourceDocument,
    target: str,
    *,
    exported_only: bool = False,
) -> tuple[VariableStatement, Binding] | None:
    """Return ``(statement, binding)`` for the first match in source order.

    Duplicate declarations are not diagnosed; the first one wins.
    """
    for stmt in doc.variable_statements():
        if exported_only and not stmt.exported:
            continue
        for binding in stmt.bindings:
            if binding.name == target:
                return stmt, binding
    return None
