"""Domain models used across application layer boundaries."""

from .models import AssetKind, AssetResolution, ClassifiedAsset, EnqueueAction, HealthStatus
from .timeline import domain_build_stage_event

__all__ = [
    "AssetKind",
    "AssetResolution",
    "ClassifiedAsset",
    "EnqueueAction",
    "HealthStatus",
    "domain_build_stage_event",
]
