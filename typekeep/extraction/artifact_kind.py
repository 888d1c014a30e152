"""Declaration-file (``.d.ts``) vs. implementation-file (``.ts``) detection."""

from __future__ import annotations

from typekeep.syntax.models import SourceDocument
from typekeep.syntax.parser import parse


def has_ambient_export(doc: SourceDocument) -> bool:
    return any(stmt.exported and stmt.ambient for stmt in doc.variable_statements())


def is_ambient_artifact(artifact_text: str) -> bool:
    """True iff the text has a real top-level ``export declare`` variable statement.

    Decided from the syntax tree, so the phrase inside a comment or a string
    literal does not count.
    """
    return has_ambient_export(parse(artifact_text))
