"""Declaration extraction: locate, classify and re-print a named export's type."""

from typekeep.extraction.api import (
    extract_annotation,
    extract_declaration,
    is_ambient_artifact,
    is_stub,
)
from typekeep.extraction.classifier import classify
from typekeep.extraction.locator import locate, locate_exported
from typekeep.extraction.models import (
    DEFAULT_SENTINELS,
    ExtractionResult,
    NotFound,
    Real,
    SentinelSet,
    Stub,
    as_sentinel_set,
)
from typekeep.extraction.printer import print_statement, print_type

__all__ = [
    "DEFAULT_SENTINELS",
    "ExtractionResult",
    "NotFound",
    "Real",
    "SentinelSet",
    "Stub",
    "as_sentinel_set",
    "classify",
    "extract_annotation",
    "extract_declaration",
    "is_ambient_artifact",
    "is_stub",
    "locate",
    "locate_exported",
    "print_statement",
    "print_type",
]
