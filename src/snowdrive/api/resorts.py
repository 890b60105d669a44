# src/snowdrive/api/resorts.py
from typing import List

from fastapi import APIRouter, HTTPException

from snowdrive.models.schemas import ErrorResponse, ResortOut
from snowdrive.resorts.appearance import get_resort_gradient, get_resort_icon
from snowdrive.resorts.directory import Resort, get_resort_by_slug, list_resorts

router = APIRouter()


def _to_out(r: Resort) -> ResortOut:
    return ResortOut(
        id=r.id, name=r.name, slug=r.slug, country=r.country, region=r.region,
        lat=r.lat, lon=r.lon, tz=r.tz, elevation=r.elevation,
        gradient=get_resort_gradient(r.id), icon=get_resort_icon(r.id),
    )


@router.get("/resorts", response_model=List[ResortOut], summary="All resorts, west to east")
async def get_resorts():
    return [_to_out(r) for r in list_resorts()]


@router.get(
    "/resorts/{slug}",
    response_model=ResortOut,
    responses={404: {"model": ErrorResponse}},
)
async def get_resort(slug: str):
    resort = get_resort_by_slug(slug)
    if not resort:
        raise HTTPException(status_code=404, detail="Resort not found")
    return _to_out(resort)
