"""Tests for beachmap model classes.

Tests: resolve_coordinates, BeachStatus, NewBeachPoint, BeachPoint,
MapFeature/FeatureSource, PointStore, MapProjection, messages.
"""

import math
from unittest.mock import patch

import pytest

from beachmap.core.projection import MapCoordinate, MapProjection
from beachmap.model.beach_point import BeachPoint, BeachStatus, NewBeachPoint, resolve_coordinates
from beachmap.model.map_feature import FeatureSource, MapFeature
from beachmap.model.message import (
    MessageLevel,
    PointsClearedMessage,
    RemovePointFailedMessage,
    SavePointFailedMessage,
)
from beachmap.model.point_store import PointStore
from conftest import JATIUCA_LAT, JATIUCA_LON


class TestResolveCoordinates:
    """Coordinate resolution policy for raw server records."""

    def test_coordenadas_pair_is_lon_lat(self) -> None:
        """coordenadas [10, 20] means lon 10, lat 20."""
        assert resolve_coordinates({"coordenadas": [10, 20]}) == (10.0, 20.0)

    def test_zero_pair_falls_back_to_separate_fields(self) -> None:
        """coordenadas [0, 0] is ignored in favor of latitude/longitude."""
        record = {"coordenadas": [0, 0], "latitude": 5, "longitude": 6}
        assert resolve_coordinates(record) == (6.0, 5.0)

    def test_pair_preferred_over_separate_fields(self) -> None:
        record = {"coordenadas": [1.5, 2.5], "latitude": 5, "longitude": 6}
        assert resolve_coordinates(record) == (1.5, 2.5)

    def test_neither_resolves_to_none(self) -> None:
        """No coordenadas and no lat/lon fields - unresolvable."""
        assert resolve_coordinates({"id": 1, "nome": "X"}) is None

    def test_partial_zero_pair_rejected(self) -> None:
        """A pair with one zero component is not trusted."""
        assert resolve_coordinates({"coordenadas": [0, -9.6]}) is None

    def test_zero_separate_fields_rejected(self) -> None:
        assert resolve_coordinates({"latitude": 0, "longitude": -35.7}) is None

    @pytest.mark.parametrize(
        "pair",
        [
            [True, True],
            ["-35.7", "-9.6"],
            [float("nan"), -9.6],
            [-35.7],
            [-35.7, -9.6, 0.0],
            None,
        ],
    )
    def test_malformed_pairs_rejected(self, pair: object) -> None:
        assert resolve_coordinates({"coordenadas": pair}) is None


class TestBeachStatus:
    def test_wire_values(self) -> None:
        assert BeachStatus.PROPRIO.value == "proprio"
        assert BeachStatus.IMPROPRIO.value == "improprio"

    def test_labels(self) -> None:
        assert BeachStatus.PROPRIO.label == "PRÓPRIO"
        assert BeachStatus.IMPROPRIO.label == "IMPRÓPRIO"

    def test_from_confirmation(self) -> None:
        """Yes to "is it fit for swimming?" means proprio."""
        assert BeachStatus.from_confirmation(True) == BeachStatus.PROPRIO
        assert BeachStatus.from_confirmation(False) == BeachStatus.IMPROPRIO


class TestNewBeachPoint:
    def test_payload_uses_lon_lat_order(self) -> None:
        point = NewBeachPoint(name="Jatiúca", status=BeachStatus.PROPRIO, lon=JATIUCA_LON, lat=JATIUCA_LAT)
        assert point.to_payload() == {
            "nome": "Jatiúca",
            "status": "proprio",
            "coordenadas": [JATIUCA_LON, JATIUCA_LAT],
        }

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, name: str) -> None:
        with pytest.raises(ValueError):
            NewBeachPoint(name=name, status=BeachStatus.PROPRIO, lon=JATIUCA_LON, lat=JATIUCA_LAT)


class TestBeachPointFromRecord:
    """BeachPoint.from_record - parsing server records."""

    def test_full_record(self) -> None:
        record = {"id": 42, "nome": "Jatiúca", "status": "proprio", "coordenadas": [JATIUCA_LON, JATIUCA_LAT]}
        point = BeachPoint.from_record(record)

        assert point is not None
        assert point.id == 42
        assert point.name == "Jatiúca"
        assert point.status == BeachStatus.PROPRIO
        assert point.lon_lat == (JATIUCA_LON, JATIUCA_LAT)

    def test_separate_fields_record(self) -> None:
        record = {"id": 7, "nome": "Ponta Verde", "status": "improprio", "latitude": -9.66, "longitude": -35.70}
        point = BeachPoint.from_record(record)

        assert point is not None
        assert point.lon == -35.70
        assert point.lat == -9.66

    def test_missing_id_skipped(self) -> None:
        """Every stored point must carry the server id."""
        record = {"nome": "Sem id", "status": "proprio", "coordenadas": [JATIUCA_LON, JATIUCA_LAT]}
        assert BeachPoint.from_record(record) is None

    def test_unknown_status_skipped(self) -> None:
        record = {"id": 1, "nome": "X", "status": "talvez", "coordenadas": [JATIUCA_LON, JATIUCA_LAT]}
        assert BeachPoint.from_record(record) is None

    def test_no_coordinates_skipped(self) -> None:
        assert BeachPoint.from_record({"id": 1, "nome": "X", "status": "proprio"}) is None

    @pytest.mark.parametrize("nome", [None, "", "   "])
    def test_nameless_record_skipped(self, nome: str | None) -> None:
        record = {"id": 1, "nome": nome, "status": "proprio", "coordenadas": [JATIUCA_LON, JATIUCA_LAT]}
        assert BeachPoint.from_record(record) is None


class TestBeachPointFromCreated:
    """BeachPoint.from_created - POST echo merged with the submitted point."""

    @pytest.fixture
    def submitted(self) -> NewBeachPoint:
        return NewBeachPoint(name="Jatiúca", status=BeachStatus.PROPRIO, lon=JATIUCA_LON, lat=JATIUCA_LAT)

    def test_id_only_echo(self, submitted: NewBeachPoint) -> None:
        point = BeachPoint.from_created({"id": 42}, submitted=submitted)

        assert point == BeachPoint(id=42, name="Jatiúca", status=BeachStatus.PROPRIO, lon=JATIUCA_LON, lat=JATIUCA_LAT)

    def test_missing_id(self, submitted: NewBeachPoint) -> None:
        assert BeachPoint.from_created({"nome": "Jatiúca", "status": "proprio"}, submitted=submitted) is None

    def test_invalid_echo_fields_ignored(self, submitted: NewBeachPoint) -> None:
        record = {"id": 42, "nome": "  ", "status": "talvez", "coordenadas": [0, 0]}
        point = BeachPoint.from_created(record, submitted=submitted)

        assert point is not None
        assert point.name == "Jatiúca"
        assert point.status == BeachStatus.PROPRIO
        assert point.lon_lat == (JATIUCA_LON, JATIUCA_LAT)

    def test_valid_echo_fields_win(self, submitted: NewBeachPoint) -> None:
        record = {"id": 42, "nome": "Praia de Jatiúca", "status": "improprio", "coordenadas": [-35.0, -9.0]}
        point = BeachPoint.from_created(record, submitted=submitted)

        assert point is not None
        assert point.name == "Praia de Jatiúca"
        assert point.status == BeachStatus.IMPROPRIO
        assert point.lon_lat == (-35.0, -9.0)


class TestBeachPoint:
    def test_coordinates_text(self, jatiuca: BeachPoint) -> None:
        """Six decimals, latitude first."""
        assert jatiuca.coordinates_text == "Lat: -9.665800, Lon: -35.708900"


class TestFeatureSource:
    def test_feature_from_point(self, jatiuca: BeachPoint) -> None:
        feature = MapFeature.from_point(jatiuca)

        assert feature.id == jatiuca.id
        assert feature.coordinates == jatiuca.lon_lat
        assert feature.status == BeachStatus.PROPRIO
        assert feature.geometry == MapProjection.from_lon_lat(lon=JATIUCA_LON, lat=JATIUCA_LAT)

    def test_get_features_returns_copy(self, jatiuca: BeachPoint) -> None:
        source = FeatureSource()
        source.add_feature(MapFeature.from_point(jatiuca))

        features = source.get_features()
        features.clear()

        assert len(source) == 1

    def test_find_by_id(self, jatiuca: BeachPoint, pajucara: BeachPoint) -> None:
        source = FeatureSource()
        source.add_feature(MapFeature.from_point(jatiuca))
        source.add_feature(MapFeature.from_point(pajucara))

        found = source.find_by_id(2)
        assert found is not None
        assert found.name == "Pajuçara"
        assert source.find_by_id(99) is None


class TestPointStore:
    """PointStore keeps points and features in step."""

    def test_append_adds_one_feature(self, store: PointStore, jatiuca: BeachPoint) -> None:
        store.append(jatiuca)

        assert len(store) == 1
        assert len(store.features) == 1
        assert store.features.get_features()[0].id == jatiuca.id

    def test_remove_removes_point_and_feature(
        self, store: PointStore, jatiuca: BeachPoint, pajucara: BeachPoint
    ) -> None:
        store.append(jatiuca)
        store.append(pajucara)

        assert store.remove(jatiuca.id) is True
        assert [p.id for p in store] == [pajucara.id]
        assert [f.id for f in store.features.get_features()] == [pajucara.id]

    def test_remove_unknown_id(self, store: PointStore, jatiuca: BeachPoint) -> None:
        store.append(jatiuca)

        assert store.remove(99) is False
        assert len(store) == 1
        assert len(store.features) == 1

    def test_replace_all(self, store: PointStore, jatiuca: BeachPoint, pajucara: BeachPoint) -> None:
        store.append(jatiuca)
        store.replace_all([pajucara])

        assert store.points == [pajucara]
        assert len(store.features) == 1

    def test_clear(self, store: PointStore, jatiuca: BeachPoint) -> None:
        store.append(jatiuca)
        store.clear()

        assert len(store) == 0
        assert len(store.features) == 0

    def test_points_snapshot_is_detached(self, store: PointStore, jatiuca: BeachPoint) -> None:
        store.append(jatiuca)
        store.points.clear()
        assert len(store) == 1

    def test_count_by_status(self, store: PointStore, jatiuca: BeachPoint, pajucara: BeachPoint) -> None:
        store.append(jatiuca)
        store.append(pajucara)

        assert store.count_by_status() == {BeachStatus.PROPRIO: 1, BeachStatus.IMPROPRIO: 1}


class TestMapProjection:
    """Web Mercator <-> WGS84 conversions."""

    def test_origin(self) -> None:
        coordinate = MapProjection.from_lon_lat(lon=0.0, lat=0.0)
        assert coordinate.x == pytest.approx(0.0, abs=1e-6)
        assert coordinate.y == pytest.approx(0.0, abs=1e-6)

    def test_round_trip(self) -> None:
        coordinate = MapProjection.from_lon_lat(lon=JATIUCA_LON, lat=JATIUCA_LAT)
        lon, lat = MapProjection.to_lon_lat(coordinate)

        assert lon == pytest.approx(JATIUCA_LON, abs=1e-9)
        assert lat == pytest.approx(JATIUCA_LAT, abs=1e-9)

    def test_x_is_meters_along_equator(self) -> None:
        """x = R * lon in radians for the spherical Mercator."""
        coordinate = MapProjection.from_lon_lat(lon=JATIUCA_LON, lat=JATIUCA_LAT)
        assert coordinate.x == pytest.approx(6378137.0 * math.radians(JATIUCA_LON), rel=1e-9)
        assert coordinate.y < 0

    def test_to_lon_lat(self) -> None:
        lon, lat = MapProjection.to_lon_lat(MapCoordinate(x=0.0, y=0.0))
        assert (lon, lat) == pytest.approx((0.0, 0.0), abs=1e-9)


class TestMessages:
    def test_save_failed_is_error_alert(self) -> None:
        msg = SavePointFailedMessage()
        assert msg.level == MessageLevel.ERROR
        assert msg.message == "❌ Erro ao salvar na API. Praia não foi adicionada."

    def test_remove_failed_is_error_alert(self) -> None:
        msg = RemovePointFailedMessage()
        assert msg.level == MessageLevel.ERROR
        assert msg.message == "❌ Erro ao remover praia da API"

    def test_alert_displays_with_st_error(self) -> None:
        with patch("streamlit.error") as error:
            SavePointFailedMessage().display()
        error.assert_called_once_with("❌ Erro ao salvar na API. Praia não foi adicionada.")

    def test_cleared_without_failures(self) -> None:
        msg = PointsClearedMessage(total=3, failed=0)
        assert msg.icon == "✅"
        assert "(3)" in msg.message

    def test_cleared_with_failures(self) -> None:
        msg = PointsClearedMessage(total=3, failed=1)
        assert msg.icon == "⚠️"
        assert "1 de 3" in msg.message
