"""Shared pytest fixtures for beachmap tests.

Provides FakeBeachApi (an in-memory stand-in for the REST backend) and
reusable points near Maceió/AL.

COORDINATES:
    All test points lie on the Maceió coast (lon ~ -35.7, lat ~ -9.6), the
    same area the map starts on. Coordinates are always (lon, lat) order.
"""

from itertools import count
from typing import Any

import pytest

from beachmap.core.api_client import ApiResult
from beachmap.core.sync import PointSynchronizer
from beachmap.model.beach_point import BeachPoint, BeachStatus, NewBeachPoint, PointId
from beachmap.model.message import Notification
from beachmap.model.point_store import PointStore
from beachmap.ui.context import BeachContext
from beachmap.ui.controller import BeachController
from beachmap.ui.state_machine import BeachStateMachine

# Jatiúca beach, the first point of most scenarios
JATIUCA_LON = -35.7089
JATIUCA_LAT = -9.6658

# Pajuçara beach
PAJUCARA_LON = -35.7210
PAJUCARA_LAT = -9.6700


# =============================================================================
# FAKE BACKEND
# =============================================================================


class FakeBeachApi:
    """In-memory backend with the BeachApiClient interface.

    Assigns ids sequentially starting at next_id, records every call in
    `calls` as (method, argument) tuples and can be told to fail.

    Attributes:
        records: Records the server currently holds, keyed by id
        fail_create: Return an HTTP 500 on create
        fail_list: Return a transport error on list
        fail_delete_ids: Ids whose delete returns an HTTP 500
        echo_coordinates: Include "coordenadas" in the create echo
    """

    def __init__(self, next_id: int = 1) -> None:
        self._ids = count(next_id)
        self.records: dict[PointId, dict[str, Any]] = {}
        self.calls: list[tuple[str, Any]] = []
        self.fail_create = False
        self.fail_list = False
        self.fail_delete_ids: set[PointId] = set()
        self.echo_coordinates = True

    def seed(self, record: dict[str, Any]) -> None:
        """Put a raw record on the server as if another client created it."""
        self.records[record["id"]] = record

    def list_points(self) -> ApiResult[list[dict[str, Any]]]:
        self.calls.append(("GET", None))
        if self.fail_list:
            return ApiResult.transport_error(error="Connection refused")
        return ApiResult.success(data=list(self.records.values()), status_code=200)

    def create_point(self, point: NewBeachPoint) -> ApiResult[dict[str, Any]]:
        payload = point.to_payload()
        self.calls.append(("POST", payload))
        if self.fail_create:
            return ApiResult.http_error(status_code=500)
        record: dict[str, Any] = {"id": next(self._ids), "nome": payload["nome"], "status": payload["status"]}
        if self.echo_coordinates:
            record["coordenadas"] = payload["coordenadas"]
        self.records[record["id"]] = record
        return ApiResult.success(data=record, status_code=201)

    def delete_point(self, point_id: PointId) -> ApiResult[None]:
        self.calls.append(("DELETE", point_id))
        if point_id in self.fail_delete_ids:
            return ApiResult.http_error(status_code=500)
        self.records.pop(point_id, None)
        return ApiResult.success(status_code=204)

    def calls_of(self, method: str) -> list[Any]:
        return [arg for m, arg in self.calls if m == method]


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def fake_api() -> FakeBeachApi:
    return FakeBeachApi()


@pytest.fixture
def store() -> PointStore:
    return PointStore()


@pytest.fixture
def notifications() -> list[Notification]:
    """Collects every toast and alert the synchronizer emits."""
    return []


@pytest.fixture
def sync(fake_api: FakeBeachApi, store: PointStore, notifications: list[Notification]) -> PointSynchronizer:
    return PointSynchronizer(api=fake_api, store=store, notify=notifications.append)


@pytest.fixture
def state_machine() -> tuple[BeachStateMachine, BeachContext]:
    """State machine without the Streamlit listener (no reruns)."""
    return BeachStateMachine.create(add_ui_listener=False)


@pytest.fixture
def controller(
    state_machine: tuple[BeachStateMachine, BeachContext],
    sync: PointSynchronizer,
) -> BeachController:
    sm, _ = state_machine
    return BeachController(sm=sm, sync=sync)


@pytest.fixture
def jatiuca() -> BeachPoint:
    return BeachPoint(id=1, name="Jatiúca", status=BeachStatus.PROPRIO, lon=JATIUCA_LON, lat=JATIUCA_LAT)


@pytest.fixture
def pajucara() -> BeachPoint:
    return BeachPoint(id=2, name="Pajuçara", status=BeachStatus.IMPROPRIO, lon=PAJUCARA_LON, lat=PAJUCARA_LAT)
