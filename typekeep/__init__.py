"""typekeep - preserve real exported types across offline regeneration of generated TypeScript artifacts."""

from typekeep.config import TypekeepConfig, load_config
from typekeep.extraction import (
    DEFAULT_SENTINELS,
    ExtractionResult,
    NotFound,
    Real,
    Stub,
    extract_annotation,
    extract_declaration,
    is_ambient_artifact,
    is_stub,
)
from typekeep.preservation import merge_from_directory, merge_preserved, preserve_declaration

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SENTINELS",
    "ExtractionResult",
    "NotFound",
    "Real",
    "Stub",
    "TypekeepConfig",
    "extract_annotation",
    "extract_declaration",
    "is_ambient_artifact",
    "is_stub",
    "load_config",
    "merge_from_directory",
    "merge_preserved",
    "preserve_declaration",
]
