"""
Six degrees API - connected people and most mentioned people.

Query values are handed to the resolvers verbatim ("" when absent), so the
defaulting and validation rules live in one place.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config import (
    DEFAULT_CONNECTED_PEOPLE_RESULT_LIMIT,
    DEFAULT_CONTENT_LIMIT,
    DEFAULT_MINIMUM_CONNECTIONS,
    DEFAULT_MOST_MENTIONED_RESULT_LIMIT,
)
from db_neo4j import get_query_service
from errors import InvalidDateError, InvalidParamError, SixDegreesError
from models import ErrorMessage
from services.sixdegrees import SixDegreesDriver, resolve_int, resolve_window

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sixdegrees", tags=["sixdegrees"])


def get_cache_control(request: Request) -> str:
    return request.app.state.cache_control


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorMessage(message=message).model_dump())


def _entities(items: List[BaseModel], cache_control: str) -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content=[item.model_dump(by_alias=True) for item in items],
        headers={"Cache-Control": cache_control},
    )


def _date_error(e: InvalidDateError, from_date: str, to_date: str) -> JSONResponse:
    logger.error(f"ERROR - {e}")
    return _message(
        400,
        f"Error converting toDate or fromDate query params: fromDate={from_date}, toDate={to_date}",
    )


def _param_error(e: InvalidParamError) -> JSONResponse:
    logger.error(f"ERROR - {e}")
    return _message(400, f"Error converting {e.param} query param, err={e}")


@router.get("/connectedPeople")
def get_connected_people(
    uuid: str = Query("", description="UUID of the person whose connections are wanted"),
    limit: str = Query("", description="Maximum number of connected people"),
    minimum_connections: str = Query(
        "", alias="minimumConnections", description="Minimum shared content items"
    ),
    content_limit: str = Query(
        "", alias="contentLimit", description="Maximum content items per connected person"
    ),
    from_date: str = Query("", alias="fromDate", description="Window start (YYYY-MM-DD)"),
    to_date: str = Query("", alias="toDate", description="Window end (YYYY-MM-DD)"),
    service: SixDegreesDriver = Depends(get_query_service),
    cache_control: str = Depends(get_cache_control),
):
    try:
        window = resolve_window(from_date, to_date)
    except InvalidDateError as e:
        return _date_error(e, from_date, to_date)

    try:
        minimum = resolve_int("minimumConnections", minimum_connections, DEFAULT_MINIMUM_CONNECTIONS)
        result_limit = resolve_int("limit", limit, DEFAULT_CONNECTED_PEOPLE_RESULT_LIMIT)
        contents = resolve_int("contentLimit", content_limit, DEFAULT_CONTENT_LIMIT)
    except InvalidParamError as e:
        return _param_error(e)

    try:
        people, found = service.connected_people(
            uuid, window.from_epoch, window.to_epoch, result_limit, minimum, contents
        )
    except SixDegreesError as e:
        logger.error(f"ERROR - {e}")
        return _message(500, f"Error retrieving result for {uuid}, err={e}")

    if not found:
        return _message(404, f"No connected people found for person with uuid {uuid}")
    return _entities(people, cache_control)


@router.get("/mostMentionedPeople")
def get_most_mentioned_people(
    limit: str = Query("", description="Maximum number of people"),
    from_date: str = Query("", alias="fromDate", description="Window start (YYYY-MM-DD)"),
    to_date: str = Query("", alias="toDate", description="Window end (YYYY-MM-DD)"),
    service: SixDegreesDriver = Depends(get_query_service),
    cache_control: str = Depends(get_cache_control),
):
    try:
        result_limit = resolve_int("limit", limit, DEFAULT_MOST_MENTIONED_RESULT_LIMIT)
    except InvalidParamError as e:
        return _param_error(e)

    try:
        window = resolve_window(from_date, to_date)
    except InvalidDateError as e:
        return _date_error(e, from_date, to_date)

    try:
        people, found = service.most_mentioned(window.from_epoch, window.to_epoch, result_limit)
    except SixDegreesError as e:
        logger.error(f"ERROR - {e}")
        return _message(500, "Error retrieving result from DB")

    if not found:
        return _message(404, "No result")
    return _entities(people, cache_control)
