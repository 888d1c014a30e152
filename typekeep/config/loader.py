"""YAML config loading for typekeep.yaml."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import TypekeepConfig


def config_paths(cli_path: str | None = None) -> list[Path]:
    """Candidate config files, highest priority first."""
    paths = [Path("./typekeep.yaml"), Path.home() / ".typekeep" / "config.yaml"]
    if cli_path:
        paths.insert(0, Path(cli_path))
    return paths


def load_config(cli_path: str | None = None) -> TypekeepConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults.

    An explicit ``cli_path`` must exist; the other locations are optional.
    Empty files are skipped.
    """
    if cli_path and not Path(cli_path).is_file():
        raise ValueError(f"Config file not found: {cli_path}")

    for path in config_paths(cli_path):
        if not path.is_file():
            continue
        try:
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        if raw is None:
            continue
        if not isinstance(raw, dict):
            raise ValueError(f"Invalid config in {path}: expected a mapping")
        if "targets" in raw:
            raw = {**raw, "targets": _normalize_targets(raw["targets"], path)}
        try:
            return TypekeepConfig(**raw)
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {_describe(e)}") from e

    return TypekeepConfig()


def _normalize_targets(targets: object, path: Path) -> dict[str, object]:
    """Accept the short forms ``name:`` and ``name: [Sentinel, ...]`` per target."""
    if not isinstance(targets, dict) or not targets:
        raise ValueError(f"Invalid config in {path}: 'targets' must be a non-empty mapping of binding names")

    normalized: dict[str, object] = {}
    for name, value in targets.items():
        if value is None:
            normalized[name] = {}
        elif isinstance(value, str):
            normalized[name] = {"sentinels": [value]}
        elif isinstance(value, list):
            normalized[name] = {"sentinels": value}
        elif isinstance(value, dict):
            normalized[name] = value
        else:
            raise ValueError(
                f"Invalid config in {path}: target {name!r} must be a sentinel list or a mapping, "
                f"got {type(value).__name__}"
            )
    return normalized


def _describe(error: ValidationError) -> str:
    """One ``location: message`` line per error, e.g. ``targets.schema.sentinels: ...``."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors()
    )


# Default YAML template for `typekeep config init`
DEFAULT_CONFIG_TEMPLATE = """\
# typekeep.yaml

# Bindings to preserve across offline regeneration, each with the
# placeholder type names that mark it as a stub. Short forms:
#   components:                   -> default sentinels
#   components: [AnyComponents]   -> sentinel list
targets:
  components:
    sentinels: ["AnyComponents"]

# Generated artifact naming: <stem><ambient_suffix> is read first,
# <stem><runtime_suffix> is the fallback.
artifacts:
  stem: "api"
  ambient_suffix: ".d.ts"
  runtime_suffix: ".ts"

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json (one JSON object per line)
"""
