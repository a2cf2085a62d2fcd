"""
L0 Data — ``__init__.py`` re-exports the release history.
"""

from crossplat.core.services.platforms.data.releases import (  # noqa: F401
    _GO_RELEASES,
)
