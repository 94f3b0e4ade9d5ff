"""Core services: REST client, map projection and store synchronization.

PointSynchronizer lives in beachmap.core.sync and is imported from there
(it depends on the model package, which depends on this one).
"""

from beachmap.core.api_client import ApiResult, ApiResultKind, BeachApiClient
from beachmap.core.projection import MapCoordinate, MapProjection

__all__ = [
    "ApiResult",
    "ApiResultKind",
    "BeachApiClient",
    "MapCoordinate",
    "MapProjection",
]
