"""REST client for the beach points backend.

Three operations against a fixed base URL (no update endpoint):

    GET    {base}        -> list of point records
    POST   {base}        -> created record (with server id)
    DELETE {base}/{id}   -> status only

Every call is a single attempt: no retries, no backoff. Failures never
raise; they are logged and returned as an ApiResult that distinguishes
success, HTTP error and transport error.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

import requests

from beachmap.constants import ApiConfig
from beachmap.model.beach_point import NewBeachPoint, PointId

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ApiResultKind(Enum):
    """Outcome of a single API call."""

    SUCCESS = "success"
    HTTP_ERROR = "http_error"  # Server answered with a non-2xx status
    TRANSPORT_ERROR = "transport_error"  # No usable answer (connection, timeout, bad JSON)


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """Result of an API call.

    Attributes:
        kind: Outcome category
        data: Decoded payload (SUCCESS only)
        status_code: HTTP status when the server answered
        error: Human-readable failure description
    """

    kind: ApiResultKind
    data: T | None = None
    status_code: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True if the call succeeded."""
        return self.kind == ApiResultKind.SUCCESS

    @staticmethod
    def success(data: T | None = None, status_code: int | None = None) -> "ApiResult[T]":
        return ApiResult(kind=ApiResultKind.SUCCESS, data=data, status_code=status_code)

    @staticmethod
    def http_error(status_code: int) -> "ApiResult[T]":
        return ApiResult(kind=ApiResultKind.HTTP_ERROR, status_code=status_code, error=f"HTTP {status_code}")

    @staticmethod
    def transport_error(error: str) -> "ApiResult[T]":
        return ApiResult(kind=ApiResultKind.TRANSPORT_ERROR, error=error)


class BeachApiClient:
    """Client for the /api/praias endpoints.

    Example:
        client = BeachApiClient()
        result = client.list_points()
        if result.ok:
            records = result.data
    """

    def __init__(
        self,
        base_url: str = ApiConfig.BASE_URL,
        timeout_s: float | None = ApiConfig.TIMEOUT_S,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize client.

        Args:
            base_url: Collection URL, e.g. http://localhost:8080/api/praias
            timeout_s: Per-request timeout in seconds (None = no timeout)
            session: Optional pre-configured session (tests inject a mock)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.session = session or requests.Session()

    def point_url(self, point_id: PointId) -> str:
        return f"{self.base_url}/{point_id}"

    def list_points(self) -> ApiResult[list[dict[str, Any]]]:
        """Fetch all point records.

        Returns:
            ApiResult with the list of raw records on success.
        """
        try:
            response = self.session.get(self.base_url, timeout=self.timeout_s)
        except requests.RequestException as e:
            logger.error(f"[API] Erro ao carregar praias da API: {e}")
            return ApiResult.transport_error(error=str(e))

        if not response.ok:
            logger.error(f"[API] GET {self.base_url} failed: {response.status_code}")
            return ApiResult.http_error(status_code=response.status_code)

        try:
            records = response.json()
        except ValueError as e:
            logger.error(f"[API] Invalid JSON from GET {self.base_url}: {e}")
            return ApiResult.transport_error(error=f"Invalid JSON: {e}")

        if not isinstance(records, list):
            logger.error(f"[API] Expected a list from GET {self.base_url}, got {type(records).__name__}")
            return ApiResult.transport_error(error="Response is not a list")

        logger.info(f"[API] GET {self.base_url} -> {len(records)} records")
        return ApiResult.success(data=records, status_code=response.status_code)

    def create_point(self, point: NewBeachPoint) -> ApiResult[dict[str, Any]]:
        """Persist a new point.

        Args:
            point: Point to create; sent as {nome, status, coordenadas: [lon, lat]}

        Returns:
            ApiResult with the server-echoed record (including id) on success.
        """
        payload = point.to_payload()
        try:
            response = self.session.post(
                self.base_url,
                json=payload,
                headers=ApiConfig.JSON_HEADERS,
                timeout=self.timeout_s,
            )
        except requests.RequestException as e:
            logger.error(f"[API] Erro de conexão: {e}")
            return ApiResult.transport_error(error=str(e))

        if not response.ok:
            logger.error(f"[API] Erro ao salvar praia: {response.status_code}")
            return ApiResult.http_error(status_code=response.status_code)

        try:
            record = response.json()
        except ValueError as e:
            logger.error(f"[API] Invalid JSON from POST {self.base_url}: {e}")
            return ApiResult.transport_error(error=f"Invalid JSON: {e}")

        if not isinstance(record, dict):
            logger.error(f"[API] Expected an object from POST {self.base_url}, got {type(record).__name__}")
            return ApiResult.transport_error(error="Response is not an object")

        logger.info(f"[API] Praia salva: {record}")
        return ApiResult.success(data=record, status_code=response.status_code)

    def delete_point(self, point_id: PointId) -> ApiResult[None]:
        """Delete a point by id.

        Returns:
            ApiResult; result.ok is the success indicator (no body contract).
        """
        url = self.point_url(point_id)
        try:
            response = self.session.delete(url, timeout=self.timeout_s)
        except requests.RequestException as e:
            logger.error(f"[API] Erro ao deletar praia: {e}")
            return ApiResult.transport_error(error=str(e))

        if not response.ok:
            logger.error(f"[API] DELETE {url} failed: {response.status_code}")
            return ApiResult.http_error(status_code=response.status_code)

        logger.info(f"[API] DELETE {url} -> {response.status_code}")
        return ApiResult.success(status_code=response.status_code)
