"""
L1 Domain — pure platform-set operations.
"""

from crossplat.core.services.platforms.domain.add_drop import add_drop  # noqa: F401
from crossplat.core.services.platforms.domain.resolution import (  # noqa: F401
    apply_filters,
    resolve_platforms,
    select_platforms,
)
