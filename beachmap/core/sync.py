"""PointSynchronizer - keeps the local point store in step with the server.

Operations:
- add_point: create on server first, then store + feature
- remove_point: delete on server first, then store + feature
- clear_all: delete every point on server (sequentially), then clear locally
- load_all: replace store and features with the server's list

Invariant: a point is only added locally after the server has assigned it
an id, so the store never holds a point the server does not know about.

Interactive confirmation for remove/clear happens before these methods are
called (see ui/controller.py).
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from beachmap.core.api_client import BeachApiClient
from beachmap.core.projection import MapCoordinate, MapProjection
from beachmap.model.beach_point import BeachPoint, BeachStatus, NewBeachPoint, PointId
from beachmap.model.message import (
    LoadPointsFailedMessage,
    Notification,
    PointRemovedMessage,
    PointsClearedMessage,
    PointSavedMessage,
    RemovePointFailedMessage,
    SavePointFailedMessage,
)
from beachmap.model.point_store import PointStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClearReport:
    """Outcome of clear_all.

    Attributes:
        attempted: Number of DELETE requests issued
        failed_ids: Ids whose server deletion failed (removed locally anyway)
    """

    attempted: int
    failed_ids: tuple[PointId, ...] = field(default_factory=tuple)

    @property
    def failed(self) -> int:
        return len(self.failed_ids)


class PointSynchronizer:
    """Applies user actions to server, store and map features.

    Example:
        sync = PointSynchronizer(api=BeachApiClient(), store=PointStore(), notify=print)
        sync.load_all()
    """

    def __init__(
        self,
        api: BeachApiClient,
        store: PointStore,
        notify: Callable[[Notification], None],
    ) -> None:
        """Initialize synchronizer.

        Args:
            api: REST client
            store: Point store to mutate
            notify: Receives user-facing toasts and error alerts
        """
        self.api = api
        self.store = store
        self.notify = notify

    def add_point(self, coordinate: MapCoordinate, name: str, status: BeachStatus) -> BeachPoint | None:
        """Persist a new point clicked on the map.

        Args:
            coordinate: Clicked position in the map projection
            name: Beach name
            status: Swimmability status

        Returns:
            The stored BeachPoint, or None if the server did not accept it.
        """
        lon, lat = MapProjection.to_lon_lat(coordinate)
        new_point = NewBeachPoint(name=name, status=status, lon=lon, lat=lat)

        result = self.api.create_point(new_point)
        if not result.ok or result.data is None:
            logger.warning(f"[SYNC] Praia '{name}' não foi adicionada ({result.kind.value}: {result.error})")
            self.notify(SavePointFailedMessage())
            return None

        point = BeachPoint.from_created(result.data, submitted=new_point)
        if point is None:
            logger.warning(f"[SYNC] Praia '{name}' não foi adicionada (resposta sem id: {result.data})")
            self.notify(SavePointFailedMessage())
            return None

        self.store.append(point)
        logger.info(f"[SYNC] Praia salva automaticamente na API: {point}")
        self.notify(PointSavedMessage(name=point.name))
        return point

    def remove_point(self, point_id: PointId) -> bool:
        """Delete a point on the server, then locally.

        Returns:
            True if the server deleted it and it was removed locally.
        """
        point = self.store.get(point_id)
        name = point.name if point is not None else str(point_id)

        result = self.api.delete_point(point_id)
        if not result.ok:
            logger.warning(f"[SYNC] Falha ao remover praia {point_id} ({result.kind.value}: {result.error})")
            self.notify(RemovePointFailedMessage())
            return False

        self.store.remove(point_id)
        logger.info(f"[SYNC] Praia {point_id} removida da API e do mapa")
        self.notify(PointRemovedMessage(name=name))
        return True

    def clear_all(self) -> ClearReport:
        """Delete every stored point on the server, one request at a time.

        The store and features are cleared regardless of individual outcomes.
        """
        failed: list[PointId] = []
        points = self.store.points
        for point in points:
            result = self.api.delete_point(point.id)
            if not result.ok:
                failed.append(point.id)

        self.store.clear()
        report = ClearReport(attempted=len(points), failed_ids=tuple(failed))
        if report.failed:
            logger.warning(f"[SYNC] Cleared locally, but {report.failed} server deletions failed: {failed}")
        else:
            logger.info(f"[SYNC] Todas as praias foram removidas ({report.attempted})")
        self.notify(PointsClearedMessage(total=report.attempted, failed=report.failed))
        return report

    def load_all(self) -> int:
        """Replace the store with the server's list.

        Records without id or name, with an unknown status or without resolvable
        coordinates are skipped with a warning. On fetch failure the store is
        left untouched.

        Returns:
            Number of points loaded.
        """
        result = self.api.list_points()
        if not result.ok or result.data is None:
            self.notify(LoadPointsFailedMessage())
            return 0

        points = []
        for record in result.data:
            if not isinstance(record, dict):
                logger.warning(f"[SYNC] Ignoring non-object record: {record!r}")
                continue
            point = BeachPoint.from_record(record)
            if point is not None:
                points.append(point)

        self.store.replace_all(points)
        logger.info(f"[SYNC] {len(points)} of {len(result.data)} praias carregadas da API")
        return len(points)
