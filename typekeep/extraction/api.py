"""Public extraction operations.

All four functions are total over arbitrary string input: they never raise,
and anything they cannot make sense of comes back as ``NotFound``/``None``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from typekeep.extraction.artifact_kind import is_ambient_artifact
from typekeep.extraction.classifier import classify
from typekeep.extraction.locator import locate, locate_exported
from typekeep.extraction.models import DEFAULT_SENTINELS, ExtractionResult, Stub
from typekeep.extraction.printer import print_type
from typekeep.syntax.parser import parse

logger = logging.getLogger(__name__)

__all__ = [
    "extract_annotation",
    "extract_declaration",
    "is_ambient_artifact",
    "is_stub",
]


def extract_declaration(
    artifact_text: str,
    target_name: str,
    sentinels: Iterable[str] | str = DEFAULT_SENTINELS,
) -> ExtractionResult:
    """Locate ``target_name`` among exported bindings and classify its type."""
    doc = parse(artifact_text)
    result = classify(locate_exported(doc, target_name), sentinels)
    logger.debug("extract_declaration(%r) -> %s", target_name, type(result).__name__)
    return result


def is_stub(result: ExtractionResult) -> bool:
    return isinstance(result, Stub)


def extract_annotation(declaration_text: str | None, target_name: str) -> str | None:
    """Strip ``export declare const <name>:`` and the terminator, leaving the type.

    Returns None unless the text holds a well-formed binding of ``target_name``
    with an explicit type annotation.
    """
    if not declaration_text:
        return None
    binding = locate(parse(declaration_text), target_name)
    if binding is None or binding.type_annotation is None:
        return None
    try:
        return print_type(binding.type_annotation)
    except RecursionError:
        return None
