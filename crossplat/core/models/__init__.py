"""
Domain models — value types for target resolution.

All models are re-exported here for convenient access:

    from crossplat.core.models import Platform, Snapshot, FilterRequest
"""

from crossplat.core.models.filters import FilterRequest, ParsedFilters
from crossplat.core.models.platform import Platform, PlatformSyntaxError
from crossplat.core.models.snapshot import Snapshot, VersionRange

__all__ = [
    # filters.py
    "FilterRequest",
    "ParsedFilters",
    # platform.py
    "Platform",
    "PlatformSyntaxError",
    # snapshot.py
    "Snapshot",
    "VersionRange",
]
