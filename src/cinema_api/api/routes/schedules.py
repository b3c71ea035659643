"""Schedule API endpoints."""

from fastapi import APIRouter, Depends, Query, Request, Response

from cinema_api.api.dependencies import get_schedule_handler
from cinema_api.api.responses import read_json, render
from cinema_api.handlers import ScheduleHandler

router = APIRouter()


@router.get("/movies/{movie_id}/schedules")
async def list_schedules(
    movie_id: str,
    page: str | None = Query(default=None, description="Page number, starting at 1"),
    handler: ScheduleHandler = Depends(get_schedule_handler),
) -> Response:
    """List the schedules of a movie ordered by showtime, ten per page."""
    return render(await handler.list(movie_id, page))


@router.get("/movies/{movie_id}/schedules/{page}")
async def list_schedules_page(
    movie_id: str,
    page: str,
    handler: ScheduleHandler = Depends(get_schedule_handler),
) -> Response:
    return render(await handler.list(movie_id, page))


@router.post("/schedules")
async def create_schedule(
    request: Request,
    handler: ScheduleHandler = Depends(get_schedule_handler),
) -> Response:
    """Create a schedule for an existing movie."""
    return render(await handler.create(await read_json(request)))


@router.get("/schedules/{schedule_id}")
async def get_schedule(
    schedule_id: str,
    handler: ScheduleHandler = Depends(get_schedule_handler),
) -> Response:
    return render(await handler.find(schedule_id))


@router.put("/schedules")
async def modify_schedule(
    request: Request,
    handler: ScheduleHandler = Depends(get_schedule_handler),
) -> Response:
    return render(await handler.modify(await read_json(request)))


@router.put("/schedules/{schedule_id}")
async def modify_schedule_by_id(
    schedule_id: str,
    request: Request,
    handler: ScheduleHandler = Depends(get_schedule_handler),
) -> Response:
    return render(await handler.modify(await read_json(request), schedule_id))


@router.delete("/schedules/{schedule_id}")
async def delete_schedule(
    schedule_id: str,
    handler: ScheduleHandler = Depends(get_schedule_handler),
) -> Response:
    return render(await handler.delete(schedule_id))
