"""Reading the previously generated artifact before it is overwritten."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from typekeep.config.models import TypekeepConfig
from typekeep.extraction import NotFound, extract_declaration, is_ambient_artifact
from typekeep.extraction.models import ExtractionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreviousArtifact:
    """Text of a previously generated artifact and what kind of file it is."""

    path: Path
    text: str
    ambient: bool


def artifact_candidates(
    directory: str | Path,
    stem: str | None = None,
    config: TypekeepConfig | None = None,
) -> list[Path]:
    """Sibling paths to try, declaration file first."""
    artifacts = (config or TypekeepConfig()).artifacts
    stem = stem or artifacts.stem
    directory = Path(directory)
    return [
        directory / f"{stem}{artifacts.ambient_suffix}",
        directory / f"{stem}{artifacts.runtime_suffix}",
    ]


def read_previous_artifact(
    directory: str | Path,
    stem: str | None = None,
    config: TypekeepConfig | None = None,
) -> PreviousArtifact | None:
    """Read the first existing sibling. Unreadable files are logged and skipped."""
    for path in artifact_candidates(directory, stem, config):
        if not path.is_file():
            continue
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read previous artifact %s: %s", path, exc)
            continue
        return PreviousArtifact(path=path, text=text, ambient=is_ambient_artifact(text))
    return None


def preserve_declaration(
    directory: str | Path,
    target: str,
    stem: str | None = None,
    config: TypekeepConfig | None = None,
) -> ExtractionResult:
    """Classify ``target`` in the previous artifact; NotFound if there is none."""
    config = config or TypekeepConfig()
    previous = read_previous_artifact(directory, stem, config)
    if previous is None:
        logger.debug("No previous artifact in %s", directory)
        return NotFound()
    return extract_declaration(previous.text, target, config.sentinels_for(target))
