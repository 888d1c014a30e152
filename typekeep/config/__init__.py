from .loader import load_config
from .models import (
    ArtifactConfig,
    TargetConfig,
    TypekeepConfig,
)

__all__ = [
    "ArtifactConfig",
    "TargetConfig",
    "TypekeepConfig",
    "load_config",
]
