"""Movie API endpoints.

Identifiers and page numbers are taken as raw strings; parsing them is the
handler's job so that bad values become 400s (or the first page) instead of
framework validation errors.
"""

from fastapi import APIRouter, Depends, Query, Request, Response

from cinema_api.api.dependencies import get_movie_handler
from cinema_api.api.responses import read_json, render
from cinema_api.handlers import MovieHandler

router = APIRouter()


@router.get("/movies")
async def list_movies(
    page: str | None = Query(default=None, description="Page number, starting at 1"),
    handler: MovieHandler = Depends(get_movie_handler),
) -> Response:
    """List movies ordered by release date, ten per page."""
    return render(await handler.list(page))


@router.get("/movies/list/{page}")
async def list_movies_page(
    page: str,
    handler: MovieHandler = Depends(get_movie_handler),
) -> Response:
    return render(await handler.list(page))


@router.post("/movies")
async def create_movie(
    request: Request,
    handler: MovieHandler = Depends(get_movie_handler),
) -> Response:
    """Create a movie. The body must not carry an identifier."""
    return render(await handler.create(await read_json(request)))


@router.get("/movies/{movie_id}")
async def get_movie(
    movie_id: str,
    handler: MovieHandler = Depends(get_movie_handler),
) -> Response:
    return render(await handler.find(movie_id))


@router.put("/movies")
async def modify_movie(
    request: Request,
    handler: MovieHandler = Depends(get_movie_handler),
) -> Response:
    """Replace a stored movie identified by the id in the body."""
    return render(await handler.modify(await read_json(request)))


@router.put("/movies/{movie_id}")
async def modify_movie_by_id(
    movie_id: str,
    request: Request,
    handler: MovieHandler = Depends(get_movie_handler),
) -> Response:
    """Replace a stored movie; a body id, if present, must match the URL."""
    return render(await handler.modify(await read_json(request), movie_id))


@router.delete("/movies/{movie_id}")
async def delete_movie(
    movie_id: str,
    handler: MovieHandler = Depends(get_movie_handler),
) -> Response:
    return render(await handler.delete(movie_id))
