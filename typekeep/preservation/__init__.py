"""Read-before-write helpers for keeping real types across offline regeneration."""

from typekeep.preservation.merger import (
    MergeReport,
    merge_from_directory,
    merge_preserved,
    merge_targets,
)
from typekeep.preservation.reader import (
    PreviousArtifact,
    artifact_candidates,
    preserve_declaration,
    read_previous_artifact,
)

__all__ = [
    "MergeReport",
    "PreviousArtifact",
    "artifact_candidates",
    "merge_from_directory",
    "merge_preserved",
    "merge_targets",
    "preserve_declaration",
    "read_previous_artifact",
]
