"""REST endpoints for hero snapshots."""

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel

from hero_snapshot.config import settings
from hero_snapshot.errors import (
    HeroNotFoundError,
    InsufficientDataError,
    IntegrityError,
    TransportError,
)
from hero_snapshot.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["profile"])


class HeroSummary(BaseModel):
    """Brief roster entry for search suggestions."""

    id: int
    name: str
    localized_name: str
    primary_attribute: str


class HeroListResponse(BaseModel):
    """Roster in load order."""

    heroes: list[HeroSummary]


def _get_service(request: Request) -> ProfileService:
    service = getattr(request.app.state, "profile_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Hero data is still loading")
    return service


async def _build(service: ProfileService, query: str | None, random_pick: bool) -> dict:
    try:
        profile = await service.build_profile(query=query, random_pick=random_pick)
    except HeroNotFoundError:
        raise HTTPException(status_code=404, detail="Could not find that hero.")
    except InsufficientDataError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except TransportError as e:
        logger.error(f"Upstream request failed: {e}")
        raise HTTPException(status_code=502, detail="Could not load hero data, try again later")
    except IntegrityError as e:
        logger.error(f"Snapshot data inconsistent: {e}")
        raise HTTPException(status_code=500, detail="Hero data is inconsistent")
    return profile.to_dict(cdn_base_url=settings.cdn_base_url)


@router.get("/heroes", response_model=HeroListResponse)
def list_heroes(request: Request):
    """List the hero roster in load order."""
    service = _get_service(request)
    return HeroListResponse(
        heroes=[
            HeroSummary(
                id=hero.id,
                name=hero.internal_name,
                localized_name=hero.localized_name,
                primary_attribute=hero.primary_attribute.value,
            )
            for hero in service.context.roster
        ]
    )


@router.get("/profile")
async def search_profile(
    request: Request,
    query: Annotated[str, Query()] = "",
):
    """Snapshot for the first hero matching ``query``; empty picks at random."""
    return await _build(_get_service(request), query, random_pick=False)


@router.get("/profile/random")
async def random_profile(request: Request):
    """Snapshot for a random hero."""
    return await _build(_get_service(request), None, random_pick=True)
