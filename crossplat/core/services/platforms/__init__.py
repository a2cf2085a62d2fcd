"""
Platform resolution service — package re-exports.

Layers, innermost first::

    data (release history) → domain (add_drop, resolution) → catalog

    from crossplat.core.services.platforms import supported_platforms, select_platforms
"""

# ── L0: Data ──
from crossplat.core.services.platforms.data.releases import _GO_RELEASES  # noqa: F401

# ── L1: Domain ──
from crossplat.core.services.platforms.domain.add_drop import add_drop  # noqa: F401
from crossplat.core.services.platforms.domain.resolution import (  # noqa: F401
    apply_filters,
    resolve_platforms,
    select_platforms,
)

# ── L2: Catalog ──
from crossplat.core.services.platforms.catalog import (  # noqa: F401
    LATEST,
    SNAPSHOTS,
    build_snapshots,
    parse_toolchain_version,
    resolve_snapshot,
    supported_platforms,
)
