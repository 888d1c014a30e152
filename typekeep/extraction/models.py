"""Extraction outcomes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

# Placeholder type names. One today; callers may configure more per target.
SentinelSet = frozenset[str]

DEFAULT_SENTINELS: SentinelSet = frozenset({"AnyComponents"})


@dataclass(frozen=True)
class NotFound:
    """No usable declaration: absent, unparseable, or carrying no type."""


@dataclass(frozen=True)
class Stub:
    """The binding's type is a recognized placeholder reference."""

    type_name: str = ""


@dataclass(frozen=True)
class Real:
    """A genuine type, re-serialized as an ``export declare const`` statement."""

    declaration_text: str


ExtractionResult = NotFound | Stub | Real


def as_sentinel_set(sentinels: Iterable[str] | str) -> SentinelSet:
    """Normalize caller input; a bare string names one sentinel."""
    if isinstance(sentinels, str):
        return frozenset({sentinels})
    return frozenset(sentinels)
