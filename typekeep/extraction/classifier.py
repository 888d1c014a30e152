"""Stub vs. real classification of a located binding."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from typekeep.extraction.models import ExtractionResult, NotFound, Real, Stub, as_sentinel_set
from typekeep.extraction.printer import print_statement
from typekeep.syntax.models import Binding, TypeExpr, TypeReference
from typekeep.syntax.parser import type_of_initializer

logger = logging.getLogger(__name__)


def effective_type(binding: Binding) -> TypeExpr | None:
    """The binding's annotation, or the type carried by its initializer."""
    if binding.type_annotation is not None:
        return binding.type_annotation
    return type_of_initializer(binding.initializer)


def is_sentinel(type_expr: TypeExpr, sentinels: Iterable[str] | str) -> bool:
    """True only for a (possibly qualified or generic) reference to a sentinel name."""
    return isinstance(type_expr, TypeReference) and type_expr.name in as_sentinel_set(sentinels)


def classify(binding: Binding | None, sentinels: Iterable[str] | str) -> ExtractionResult:
    if binding is None:
        return NotFound()

    type_expr = effective_type(binding)
    if type_expr is None:
        logger.debug("Binding %r carries no type", binding.name)
        return NotFound()

    if is_sentinel(type_expr, sentinels):
        logger.debug("Binding %r is a %s stub", binding.name, type_expr.name)
        return Stub(type_name=type_expr.name)

    try:
        text = print_statement(binding.name, type_expr)
    except RecursionError:
        logger.debug("Type of %r nests too deeply to print", binding.name)
        return NotFound()
    return Real(declaration_text=text)
