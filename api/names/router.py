"""
Name catalog API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from . import schemas, service
from .dependencies import get_repository
from .repository import NameRepository

router = APIRouter(prefix="/api/names")


@router.get("/random", response_model=schemas.RandomNamesResponse, response_model_exclude_none=True)
async def random_names(
    gender: str | None = Query(default=None),
    count: str | None = Query(default=None),
    origin: str | None = Query(default=None),
    repository: NameRepository = Depends(get_repository),
) -> dict:
    # count stays a raw string so the validator, not FastAPI, owns the 400 message.
    result = await service.random_names(repository, gender=gender, count=count, origin=origin)
    return {
        "names": result.names,
        "gender": result.gender,
        "count": result.count,
        "origin": result.origin,
    }


@router.get("/stats", response_model=schemas.StatsResponse)
async def name_stats(repository: NameRepository = Depends(get_repository)) -> dict:
    return {"stats": await service.name_stats(repository)}


@router.post("/add", response_model=schemas.MessageResponse, status_code=status.HTTP_201_CREATED)
async def add_name(
    request: schemas.AddNameRequest,
    repository: NameRepository = Depends(get_repository),
) -> dict:
    saved = await service.add_name(
        repository,
        name=request.name,
        gender=request.gender,
        origin=request.origin,
    )
    return {"message": f"Name '{saved.name}' added successfully."}
