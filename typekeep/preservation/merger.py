"""Splicing preserved types into a freshly generated artifact.

The fresh artifact is only touched where its own binding is a stub, so a
binding that already carries real type information is never downgraded, and
merging twice gives the same text as merging once.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, Field

from typekeep.config.models import TypekeepConfig
from typekeep.extraction import (
    DEFAULT_SENTINELS,
    Real,
    extract_annotation,
    extract_declaration,
    locate_exported,
)
from typekeep.extraction.classifier import is_sentinel
from typekeep.extraction.models import ExtractionResult
from typekeep.preservation.reader import read_previous_artifact
from typekeep.syntax.parser import encode_source, parse

logger = logging.getLogger(__name__)


class MergeReport(BaseModel):
    """Outcome of a merge pass over one fresh artifact."""

    text: str
    previous_path: str | None = None
    previous_ambient: bool | None = None
    preserved: list[str] = Field(default_factory=list)
    unchanged: list[str] = Field(default_factory=list)


def merge_preserved(
    fresh_text: str,
    target: str,
    preserved: ExtractionResult,
    sentinels: Iterable[str] | str = DEFAULT_SENTINELS,
) -> str:
    """Replace the stub type of ``target`` in ``fresh_text`` with a preserved real type.

    Works on both ``export declare const x: Stub;`` and
    ``export const x: Stub = f();``; only the annotation is rewritten.
    Returns ``fresh_text`` unchanged when there is nothing to splice.
    """
    if not isinstance(preserved, Real):
        return fresh_text
    annotation = extract_annotation(preserved.declaration_text, target)
    if annotation is None:
        return fresh_text

    binding = locate_exported(parse(fresh_text), target)
    if binding is None or binding.type_annotation is None:
        return fresh_text
    if not is_sentinel(binding.type_annotation, sentinels):
        return fresh_text

    node = binding.type_annotation.node
    source = encode_source(fresh_text)
    merged = source[:node.start] + annotation.encode("utf-8") + source[node.end:]
    logger.info("Preserved existing %r type in place of %s", target, node.text)
    return merged.decode("utf-8", errors="replace")


def merge_targets(
    fresh_text: str,
    previous_text: str | None,
    config: TypekeepConfig | None = None,
) -> MergeReport:
    """Run merge_preserved() for every configured target."""
    config = config or TypekeepConfig()
    report = MergeReport(text=fresh_text)
    for target in config.targets:
        sentinels = config.sentinels_for(target)
        preserved = extract_declaration(previous_text or "", target, sentinels)
        merged = merge_preserved(report.text, target, preserved, sentinels)
        if merged != report.text:
            report.text = merged
            report.preserved.append(target)
        else:
            report.unchanged.append(target)
    return report


def merge_from_directory(
    fresh_text: str,
    directory: str | Path,
    stem: str | None = None,
    config: TypekeepConfig | None = None,
) -> MergeReport:
    """Read the previous artifact from ``directory`` and merge it into ``fresh_text``."""
    config = config or TypekeepConfig()
    previous = read_previous_artifact(directory, stem, config)
    report = merge_targets(fresh_text, previous.text if previous else None, config)
    if previous is not None:
        report.previous_path = str(previous.path)
        report.previous_ambient = previous.ambient
    return report
