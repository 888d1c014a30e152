import re
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from typekeep.extraction.models import DEFAULT_SENTINELS, SentinelSet

_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][\w$]*")


def _check_identifier(v: str, what: str) -> str:
    if not v.strip():
        raise ValueError(f"{what} cannot be empty or whitespace")
    if not _IDENTIFIER_RE.fullmatch(v):
        raise ValueError(f"{what} must be a plain identifier, got {v!r}")
    return v


class TargetConfig(BaseModel):
    sentinels: list[str] = Field(default_factory=lambda: sorted(DEFAULT_SENTINELS), min_length=1)

    @field_validator("sentinels")
    @classmethod
    def validate_sentinels(cls, v: list[str]) -> list[str]:
        return [_check_identifier(name, "sentinel name") for name in v]


class ArtifactConfig(BaseModel):
    stem: str = "api"
    ambient_suffix: str = ".d.ts"
    runtime_suffix: str = ".ts"


class TypekeepConfig(BaseModel):
    targets: dict[str, TargetConfig] = Field(
        default_factory=lambda: {"components": TargetConfig()}
    )
    artifacts: ArtifactConfig = Field(default_factory=ArtifactConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"

    @field_validator("targets")
    @classmethod
    def validate_targets(cls, v: dict[str, TargetConfig]) -> dict[str, TargetConfig]:
        for name in v:
            _check_identifier(name, "target name")
        return v

    def sentinels_for(self, target: str) -> SentinelSet:
        """Sentinel names configured for ``target``; the defaults if it has none."""
        target_cfg = self.targets.get(target)
        if target_cfg is None:
            return DEFAULT_SENTINELS
        return frozenset(target_cfg.sentinels)
