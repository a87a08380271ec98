"""FastAPI application exposing a :class:`MoviesManager`."""

from __future__ import annotations

from fastapi import APIRouter, FastAPI, Request, status
from pydantic import BaseModel

from movies.config import get_settings
from movies.manager import MoviesManager


class AddMovieRequest(BaseModel):
    """Request body for ``POST /movies``."""

    title: str


class AddMovieResponse(BaseModel):
    title: str
    total: int


class MoviesResponse(BaseModel):
    items: list[str]
    total: int


class LastMoviesResponse(BaseModel):
    items: list[str]
    limit: int


router = APIRouter(prefix="/movies")


def _manager(request: Request) -> MoviesManager:
    return request.app.state.manager


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AddMovieResponse)
async def add_movie(req: AddMovieRequest, request: Request) -> AddMovieResponse:
    """Append a movie and report the new total."""

    manager = _manager(request)
    manager.add(req.title)
    return AddMovieResponse(title=req.title, total=len(manager))


@router.get("", response_model=MoviesResponse)
async def list_movies(request: Request) -> MoviesResponse:
    """Return every movie in insertion order."""

    manager = _manager(request)
    return MoviesResponse(items=manager.find_all(), total=len(manager))


@router.get("/last", response_model=LastMoviesResponse)
async def last_movies(request: Request) -> LastMoviesResponse:
    manager = _manager(request)
    return LastMoviesResponse(items=manager.find_last(), limit=manager.limit)


def create_app(manager: MoviesManager | None = None) -> FastAPI:
    """Build the application around a single in-process manager."""

    if manager is None:
        manager = MoviesManager(get_settings().limit)

    application = FastAPI(title="Movies API")
    application.state.manager = manager
    application.include_router(router)

    @application.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return application
