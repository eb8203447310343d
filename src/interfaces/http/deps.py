from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request

from src.application.errors import AuthError
from src.config.settings import Settings, get_settings
from src.domain.ports.breeding_events_repo import BreedingEventsRepo
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    return settings or get_settings()


async def get_breeding_events_repo(request: Request) -> AsyncIterator[BreedingEventsRepo]:
    """Repository bound to a request-scoped, read-only session."""
    async with SQLAlchemyUnitOfWork(request.app.state.session_factory) as uow:
        yield uow.breeding_events


async def get_owner_id(
    request: Request, settings: Settings = Depends(get_app_settings)
) -> int:
    raw = request.headers.get(settings.owner_header)
    if not raw:
        raise AuthError(f"Missing {settings.owner_header} header")
    try:
        owner_id = int(raw)
    except ValueError as exc:
        raise AuthError("Owner identifier must be a positive integer") from exc
    if owner_id < 1:
        raise AuthError("Owner identifier must be a positive integer")
    return owner_id
