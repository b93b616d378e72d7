"""OpenDota API client for hero, item and popularity datasets.

Every transport failure or unexpected document shape is raised as
TransportError. Nothing is retried.
"""

import logging
from typing import Any, Literal, Optional, Protocol

import httpx

from hero_snapshot.errors import TransportError
from hero_snapshot.models.hero import (
    BRACKET_COUNT,
    BracketStats,
    HeroRecord,
    PrimaryAttribute,
)
from hero_snapshot.models.item import GamePhase, PopularityPayload

logger = logging.getLogger(__name__)

ReferenceKind = Literal["heroes", "items", "item_ids"]
REFERENCE_KINDS: tuple[str, ...] = ("heroes", "items", "item_ids")


class DatasetSource(Protocol):
    """Capabilities the snapshot pipeline needs from upstream."""

    async def fetch_hero_roster(self) -> list[HeroRecord]: ...

    async def fetch_reference_table(self, kind: ReferenceKind) -> dict[str, Any]: ...

    async def fetch_popularity(self, hero_id: int) -> PopularityPayload: ...


def parse_hero_record(raw: dict[str, Any]) -> HeroRecord:
    """Build a HeroRecord from one /heroStats entry.

    Raises:
        TransportError: Missing identity fields, unknown attribute code,
            negative counters or wins exceeding picks.
    """
    try:
        hero_id = int(raw["id"])
        internal_name = str(raw["name"])
        localized_name = str(raw["localized_name"])
        attribute = PrimaryAttribute.from_abbreviation(raw["primary_attr"])
    except (KeyError, TypeError, ValueError) as e:
        raise TransportError(f"Malformed hero stats entry: {e!r}") from e

    brackets = []
    for bracket in range(1, BRACKET_COUNT + 1):
        try:
            picks = int(raw.get(f"{bracket}_pick") or 0)
            wins = int(raw.get(f"{bracket}_win") or 0)
        except (TypeError, ValueError) as e:
            raise TransportError(
                f"Malformed bracket {bracket} counters for hero {hero_id}"
            ) from e
        if picks < 0 or wins < 0 or wins > picks:
            raise TransportError(
                f"Inconsistent bracket {bracket} counters for hero {hero_id}: "
                f"{wins} wins / {picks} picks"
            )
        brackets.append(BracketStats(bracket=bracket, picks=picks, wins=wins))

    return HeroRecord(
        id=hero_id,
        internal_name=internal_name,
        localized_name=localized_name,
        primary_attribute=attribute,
        brackets=tuple(brackets),
    )


def parse_popularity(hero_id: int, raw: dict[str, Any]) -> PopularityPayload:
    """Build a PopularityPayload from an /itemPopularity document.

    A phase absent from the document is treated as having no purchases.
    """
    phases: dict[GamePhase, dict[int, int]] = {}
    for phase in GamePhase:
        counts = raw.get(phase.payload_key) or {}
        if not isinstance(counts, dict):
            raise TransportError(
                f"Malformed {phase.payload_key} for hero {hero_id}: expected an object"
            )
        try:
            phases[phase] = {int(item_id): int(count) for item_id, count in counts.items()}
        except (TypeError, ValueError) as e:
            raise TransportError(
                f"Malformed {phase.payload_key} for hero {hero_id}: {e}"
            ) from e
    return PopularityPayload(hero_id=hero_id, phases=phases)


class OpenDotaClient:
    """Async client for the OpenDota REST API."""

    def __init__(
        self,
        base_url: str = "https://api.opendota.com/api/",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the OpenDota client.

        Args:
            base_url: API root, e.g. https://api.opendota.com/api/
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def _get_json(self, path: str) -> Any:
        url = self.base_url + path
        try:
            client = await self._get_client()
            response = await client.get(path)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            logger.error(f"OpenDota request failed for {url}: {e}")
            raise TransportError(f"Request to {url} failed: {e}", url=url) from e
        except ValueError as e:
            logger.error(f"OpenDota returned invalid JSON for {url}: {e}")
            raise TransportError(f"Invalid JSON from {url}", url=url) from e

    async def fetch_hero_roster(self) -> list[HeroRecord]:
        """Fetch per-hero statistics, in the order OpenDota returns them."""
        data = await self._get_json("heroStats")
        if not isinstance(data, list):
            raise TransportError("heroStats did not return a list", url=self.base_url + "heroStats")
        return [parse_hero_record(entry) for entry in data]

    async def fetch_reference_table(self, kind: ReferenceKind) -> dict[str, Any]:
        """Fetch one constants table (heroes, items or item_ids)."""
        if kind not in REFERENCE_KINDS:
            raise ValueError(f"Unknown reference table: {kind}")
        path = f"constants/{kind}"
        data = await self._get_json(path)
        if not isinstance(data, dict):
            raise TransportError(f"{path} did not return an object", url=self.base_url + path)
        return data

    async def fetch_popularity(self, hero_id: int) -> PopularityPayload:
        """Fetch item purchase counts for one hero."""
        path = f"heroes/{hero_id}/itemPopularity"
        data = await self._get_json(path)
        if not isinstance(data, dict):
            raise TransportError(f"{path} did not return an object", url=self.base_url + path)
        return parse_popularity(hero_id, data)
