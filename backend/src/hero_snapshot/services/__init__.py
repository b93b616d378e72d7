"""Business logic services."""

from hero_snapshot.services.opendota_client import DatasetSource, OpenDotaClient
from hero_snapshot.services.reference_cache import (
    ReferenceCache,
    SnapshotContext,
    load_snapshot_context,
)
from hero_snapshot.services.profile_service import ProfileService

__all__ = [
    "DatasetSource",
    "OpenDotaClient",
    "ReferenceCache",
    "SnapshotContext",
    "load_snapshot_context",
    "ProfileService",
]
